from selenium.common.exceptions import NoSuchElementException, TimeoutException


class WaitTimeoutError(TimeoutException):
    """中文：等待条件在截止时间内未满足。
    English: A wait condition was not met before its deadline.
    """

    def __init__(self, msg: str, screenshot: str | None = None, timeout: float | None = None):
        self.screenshot = screenshot
        self.timeout = timeout
        super().__init__(_with_screenshot(msg, screenshot))


class ElementNotFoundError(NoSuchElementException):
    """中文：操作所需的元素不存在或不可操作。
    English: The element an action needs could not be resolved.
    """

    def __init__(self, msg: str, screenshot: str | None = None):
        self.screenshot = screenshot
        super().__init__(_with_screenshot(msg, screenshot))


def _with_screenshot(msg: str, screenshot: str | None) -> str:
    if screenshot:
        return f"{msg}, screenshot={screenshot}"
    return msg
