from __future__ import annotations

import re
from dataclasses import dataclass, replace

from selenium.webdriver.common.by import By

from e2e_framework.core.errors import ElementNotFoundError


_STRATEGIES = {
    "id": By.ID,
    "xpath": By.XPATH,
    "name": By.NAME,
    "css": By.CSS_SELECTOR,
    "class": By.CLASS_NAME,
    "tag": By.TAG_NAME,
}


def to_by(locator_type: str) -> str:
    """中文：将配置中的定位器类型转换为 Selenium By。
    English: Convert a configured locator type to a Selenium ``By`` value.

    参数:
        locator_type: id | xpath | name | css | class | tag
    """

    by = _STRATEGIES.get((locator_type or "").lower())
    if by is None:
        raise ValueError(f"Unsupported locator type: {locator_type}")
    return by


def element_text(element) -> str:
    """textContent with whitespace runs collapsed."""
    return " ".join((element.get_attribute("textContent") or "").split())


@dataclass(frozen=True)
class Locator:
    """中文：延迟定位器，每次使用时重新解析，不持有元素。
    English: Deferred element reference. Resolved again on every use and
    never holds on to a WebElement.

    参数:
        by: Selenium 定位策略。
        value: 选择器。
        parent: 父定位器，解析时在其匹配元素内部查找。
        has_text: 文本过滤；str 为区分大小写的子串匹配，Pattern 为正则匹配。
        name: 日志中使用的名称。
    """

    by: str
    value: str
    parent: Locator | None = None
    has_text: str | re.Pattern | None = None
    name: str | None = None

    @classmethod
    def css(cls, selector: str, name: str | None = None) -> Locator:
        return cls(By.CSS_SELECTOR, selector, name=name)

    @classmethod
    def xpath(cls, expression: str, name: str | None = None) -> Locator:
        return cls(By.XPATH, expression, name=name)

    def locator(self, value: str, by: str = By.CSS_SELECTOR, name: str | None = None) -> Locator:
        """Child locator scoped to the elements this one matches."""
        return Locator(by, value, parent=self, name=name)

    def filter(self, has_text: str | re.Pattern) -> Locator:
        return replace(self, has_text=has_text)

    def named(self, name: str) -> Locator:
        return replace(self, name=name)

    def resolve_all(self, driver) -> list:
        """中文：解析为当前 DOM 中所有匹配元素（按文档顺序）。
        English: Resolve to every currently matching element, in order.
        """

        scopes = [driver] if self.parent is None else self.parent.resolve_all(driver)
        found = []
        for scope in scopes:
            for el in scope.find_elements(self.by, self.value):
                if self._text_matches(el):
                    found.append(el)
        return found

    def resolve(self, driver):
        """First match, or ElementNotFoundError when nothing matches."""
        found = self.resolve_all(driver)
        if not found:
            raise ElementNotFoundError(f"Element not found: {self.describe()}")
        return found[0]

    def describe(self) -> str:
        if self.name:
            return self.name
        text = ""
        if isinstance(self.has_text, re.Pattern):
            text = f" has_text=/{self.has_text.pattern}/"
        elif self.has_text is not None:
            text = f" has_text={self.has_text!r}"
        own = f"({self.by}, {self.value}){text}"
        if self.parent is None:
            return own
        return f"{self.parent.describe()} >> {own}"

    def _text_matches(self, element) -> bool:
        if self.has_text is None:
            return True
        text = element_text(element)
        if isinstance(self.has_text, re.Pattern):
            return self.has_text.search(text) is not None
        return self.has_text in text
