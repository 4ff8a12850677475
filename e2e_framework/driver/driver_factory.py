from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions

from e2e_framework.utils.config_loader import cfg_get, load_config


def create_driver(browser: str | None = None, headless: bool | None = None):
    """中文：根据配置创建并返回浏览器驱动。
    参数:
        browser: 浏览器类型，可为 chrome、edge、firefox，未传则读取配置。
        headless: 是否无界面运行，未传则读取配置。
    """

    if browser is None or headless is None:
        cfg = load_config()
        if browser is None:
            browser = cfg_get(cfg, ["project", "browser"], "chrome")
        if headless is None:
            headless = bool(cfg_get(cfg, ["project", "headless"], False))

    browser = browser.lower()

    if browser == "chrome":
        options = ChromeOptions()
        options.add_argument("--start-maximized")
        if headless:
            options.add_argument("--headless=new")
            options.add_argument("--window-size=1920,1080")
        return webdriver.Chrome(options=options)

    if browser == "edge":
        options = EdgeOptions()
        options.add_argument("--start-maximized")
        if headless:
            options.add_argument("--headless=new")
            options.add_argument("--window-size=1920,1080")
        return webdriver.Edge(options=options)

    if browser == "firefox":
        options = FirefoxOptions()
        if headless:
            options.add_argument("-headless")
        return webdriver.Firefox(options=options)

    raise ValueError(f"Unsupported browser: {browser}")
