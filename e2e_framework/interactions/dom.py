from e2e_framework.core.errors import WaitTimeoutError, ElementNotFoundError


class DomMixin:
    """中文：DOM 交互混入类，提供基础元素操作。
    English: DOM interaction mixin providing basic element operations.
    """

    def _first_interactable(self, locator):
        for el in locator.resolve_all(self.__driver):
            if el.is_displayed() and el.is_enabled():
                return el
        return None

    def click(self, locator, timeout=None):
        """中文：等待元素可点击后点击。
        参数:
            locator: Locator 实例。
            timeout: 最大等待时间（秒）。
        """

        self._log.info(f"[CLICK] {self._page_name} {locator.describe()}")
        try:
            el = self.wait_until(
                lambda: self._first_interactable(locator),
                timeout,
                f"clickable {locator.describe()}",
            )
        except WaitTimeoutError as e:
            raise ElementNotFoundError(
                f"Element not found (clickable): {self._page_name} {locator.describe()}",
                e.screenshot,
            ) from e
        el.click()

    def fill(self, locator, text):
        """中文：清空后输入文本。
        参数:
            locator: Locator 实例。
            text: 需要输入的文本。
        """

        self._log.info(f"[FILL] {self._page_name} {locator.describe()} = {text}")
        self.wait_visible(locator)
        el = locator.resolve(self.__driver)
        el.clear()
        el.send_keys(text)

    def get_attribute(self, locator, attr_name):
        """中文：获取第一个匹配元素的属性值。
        参数:
            locator: Locator 实例。
            attr_name: 属性名。
        """

        value = locator.resolve(self.__driver).get_attribute(attr_name)
        self._log.debug(f"获取元素 {locator.describe()} 的 {attr_name} 属性值：{value}")
        return value
