from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
)
from selenium.webdriver.support.ui import WebDriverWait

from e2e_framework.core.errors import WaitTimeoutError


class WaitMixin:
    """中文：等待交互混入类，提供基于截止时间的条件等待。
    English: Wait interaction mixin. Every wait polls a condition until it
    holds or its deadline passes, then raises ``WaitTimeoutError``.
    """

    def wait_until(self, condition, timeout=None, message="condition"):
        """中文：轮询无参条件函数直到返回真值或超时。
        English: Poll ``condition()`` until it returns a truthy value.

        参数:
            condition: 无参可调用对象；返回值为真时结束等待并作为结果返回。
            timeout: 最大等待时间（秒），为空时使用页面默认值。
            message: 超时信息中描述的条件。
        """

        if timeout is None:
            timeout = self._timeout

        self._log.debug(f"[WAIT] {self._page_name} {message} timeout={timeout}s")
        wait = WebDriverWait(
            self.__driver,
            timeout,
            poll_frequency=self._poll_frequency,
            ignored_exceptions=(NoSuchElementException, StaleElementReferenceException),
        )
        try:
            return wait.until(lambda _driver: condition())
        except WaitTimeoutError:
            raise
        except TimeoutException:
            screenshot = self._failure_screenshot()
            self._log.warning(f"[WAIT_TIMEOUT] {self._page_name} {message} timeout={timeout}s")
            raise WaitTimeoutError(
                f"Wait timeout after {timeout}s: {self._page_name} {message}",
                screenshot,
                timeout,
            ) from None

    def wait_visible(self, locator, timeout=None):
        """中文：等待定位器匹配到可见元素。
        参数:
            locator: Locator 实例。
            timeout: 最大等待时间（秒）。
        """

        def visible():
            return any(el.is_displayed() for el in locator.resolve_all(self.__driver))

        self.wait_until(visible, timeout, f"visible {locator.describe()}")

    def wait_attribute_changes(self, locator, attr, before, timeout=None, default=None):
        """中文：等待元素属性值不同于 before，返回新值。
        参数:
            locator: Locator 实例。
            attr: 属性名。
            before: 原属性值。
            timeout: 最大等待时间（秒）。
            default: 属性缺失时视作的值。
        """

        def changed():
            value = locator.resolve(self.__driver).get_attribute(attr)
            if value is None:
                value = default
            return [value] if value != before else None

        message = f"{locator.describe()} [{attr}] != {before!r}"
        return self.wait_until(changed, timeout, message)[0]

    def poll_until_changed(self, read, initial, timeout=None, message="value changed", ready=None):
        """中文：反复调用 read() 直到结果不同于 initial，返回新结果。
        参数:
            read: 无参读取函数，不应自带等待。
            initial: 原始值。
            timeout: 最大等待时间（秒）。
            message: 超时信息中描述的条件。
            ready: 可选的无参条件；为假时本轮不调用 read()。
        """

        def changed():
            if ready is not None and not ready():
                return None
            current = read()
            return [current] if current != initial else None

        return self.wait_until(changed, timeout, message)[0]

    def wait_page_ready(self, timeout=None):
        """中文：等待 document.readyState 为 complete。"""

        self.wait_until(
            lambda: self.__driver.execute_script("return document.readyState") == "complete",
            timeout,
            "document ready",
        )
