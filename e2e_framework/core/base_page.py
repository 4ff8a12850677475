from e2e_framework.interactions.dom import DomMixin
from e2e_framework.interactions.wait import WaitMixin
from e2e_framework.interactions.js import JsMixin
from e2e_framework.utils.config_loader import cfg_get, load_config, resolve_path
from e2e_framework.utils.locator_loader import build_page_locators


class BasePage(
    DomMixin,
    WaitMixin,
    JsMixin,
):
    """中文：页面基类，提供通用交互、导航与日志能力。
    English: Base page class providing common interactions, navigation
    and logging.
    """

    def __init__(
        self,
        driver,
        locator_loader,
        page_name,
        base_url=None,
        timeout=None,
        poll_frequency=None,
        screenshot_dir=None,
    ):
        """中文：初始化页面基类并绑定驱动、定位器与配置。
        未传入的参数从 config.yaml 读取。

            driver: WebDriver 实例。
            locator_loader: 定位器加载器实例。
            page_name: 页面名称（定位器 YAML 中的键）。
            base_url: 应用根地址。
            timeout: 默认显式等待时间（秒）。
            poll_frequency: 等待轮询间隔（秒）。
            screenshot_dir: 失败截图目录。
        """

        cfg = load_config()
        if base_url is None:
            base_url = cfg_get(cfg, ["project", "base_url"], "")
        if timeout is None:
            timeout = cfg_get(cfg, ["selenium", "explicit_wait"], 10)
        if poll_frequency is None:
            poll_frequency = cfg_get(cfg, ["selenium", "poll_frequency"], 0.5)
        if screenshot_dir is None:
            screenshot_dir = resolve_path(cfg, cfg_get(cfg, ["paths", "screenshots"], "output/screenshots"))

        self.__driver = driver
        self._locators = build_page_locators(locator_loader, page_name)
        self._page_name = page_name
        self._base_url = base_url
        self._timeout = float(timeout)
        self._poll_frequency = float(poll_frequency)
        self._screenshot_dir = screenshot_dir
        self._log = self._init_logger()
        self._bind_driver_to_mixins(driver)

    # 禁止 Page 层直接访问 driver
    @property
    def driver(self):
        raise RuntimeError("禁止在 Page 层直接访问 driver，请使用 BasePage API")

    @property
    def current_url(self) -> str:
        return self.__driver.current_url

    def _init_logger(self):
        from e2e_framework.utils.logger import get_page_logger

        return get_page_logger(self._page_name)

    def _bind_driver_to_mixins(self, driver):
        """中文：将 WebDriver 绑定到各交互混入类。"""

        for mixin in (DomMixin, WaitMixin, JsMixin):
            setattr(self, f"_{mixin.__name__}__driver", driver)

    def _failure_screenshot(self):
        """中文：保存失败截图；截图本身失败时只记录日志，返回 None。"""

        from e2e_framework.utils.screenshot import take_screenshot

        try:
            return take_screenshot(self.__driver, self._screenshot_dir, prefix=self._page_name)
        except Exception as e:
            self._log.error(f"[SCREENSHOT] failed: {e}")
            return None

    def locator(self, name):
        """中文：获取本页面在定位器 YAML 中声明的 Locator。"""

        return self._locators.get(name)

    def navigate_to(self, path: str) -> None:
        """中文：打开 base_url 下的相对路径。
        参数:
            path: 相对路径，例如 "/variables"。
        """

        url = f"{self._base_url.rstrip('/')}/{path.lstrip('/')}"
        self._log.info(f"[OPEN] {self._page_name} -> {url}")
        self.__driver.get(url)
