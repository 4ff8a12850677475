from pathlib import Path

import pytest

from e2e_framework.driver.driver_manager import DriverManager
from e2e_framework.utils.config_loader import load_config
from e2e_framework.utils.locator_loader import LocatorLoader
from e2e_framework.utils.logger import set_current_test
from pages.variables_page import VariablesPage
from tests.fakes import FakeDriver, FakeVariablesApp


def pytest_addoption(parser):
    parser.addoption("--e2e", action="store_true", default=False, help="运行真实浏览器用例 (tests/e2e)")
    parser.addoption("--base-url", action="store", default=None, help="覆盖 config.yaml 中的 project.base_url")


def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: 需要真实浏览器与被测应用")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--e2e"):
        return
    skip = pytest.mark.skip(reason="需要 --e2e 才运行真实浏览器用例")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def config(pytestconfig):
    """中文：加载并补全全局配置。"""

    cfg = load_config()

    project_root = Path(cfg.get("_project_root", "."))
    if "paths" in cfg and isinstance(cfg["paths"], dict):
        for k, v in list(cfg["paths"].items()):
            if isinstance(v, str) and v and not Path(v).is_absolute():
                cfg["paths"][k] = str((project_root / v).resolve())

    base_url = pytestconfig.getoption("--base-url")
    if base_url:
        cfg.setdefault("project", {})["base_url"] = base_url

    loader = LocatorLoader(cfg["paths"]["locator"])
    loader.validate_all()
    cfg["locator_loader"] = loader

    return cfg


@pytest.fixture(scope="session")
def driver(config):
    """中文：初始化浏览器驱动并在会话结束时关闭。"""

    driver = DriverManager.get_driver()

    selenium_cfg = config.get("selenium", {}) or {}
    implicit_wait = selenium_cfg.get("implicit_wait")
    if implicit_wait is not None:
        driver.implicitly_wait(float(implicit_wait))

    page_load_timeout = selenium_cfg.get("page_load_timeout")
    if page_load_timeout is not None:
        driver.set_page_load_timeout(float(page_load_timeout))

    yield driver
    DriverManager.quit()


@pytest.fixture(autouse=True)
def current_test_name(request):
    set_current_test(request.node.name)
    yield
    set_current_test("-")


@pytest.fixture
def app():
    return FakeVariablesApp(["alpha", "beta", "gamma", "delta", "epsilon"])


@pytest.fixture
def fake_driver(app):
    return FakeDriver(app)


@pytest.fixture
def make_page(config, tmp_path):
    """Build a VariablesPage on a fake driver with fast polling."""

    def _make(driver, **kwargs):
        kwargs.setdefault("base_url", "http://airflow.test")
        kwargs.setdefault("timeout", 0.5)
        kwargs.setdefault("poll_frequency", 0.01)
        kwargs.setdefault("screenshot_dir", str(tmp_path / "screenshots"))
        return VariablesPage(driver, config["locator_loader"], **kwargs)

    return _make


@pytest.fixture
def page(make_page, fake_driver):
    return make_page(fake_driver)
