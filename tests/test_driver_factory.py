import pytest

from e2e_framework.driver import driver_factory
from e2e_framework.driver.driver_manager import DriverManager


class _Recorder:
    def __init__(self):
        self.created = []

    def factory(self, name):
        def _create(options=None):
            self.created.append((name, list(options.arguments)))
            return _FakeBrowser()
        return _create


class _FakeBrowser:
    quit_called = False

    def quit(self):
        self.quit_called = True


@pytest.fixture
def recorder(monkeypatch):
    rec = _Recorder()
    monkeypatch.setattr(driver_factory.webdriver, "Chrome", rec.factory("chrome"))
    monkeypatch.setattr(driver_factory.webdriver, "Edge", rec.factory("edge"))
    monkeypatch.setattr(driver_factory.webdriver, "Firefox", rec.factory("firefox"))
    return rec


def test_headless_chrome(recorder):
    driver_factory.create_driver("Chrome", headless=True)
    name, args = recorder.created[0]
    assert name == "chrome"
    assert "--headless=new" in args


def test_headed_edge(recorder):
    driver_factory.create_driver("edge", headless=False)
    assert recorder.created == [("edge", ["--start-maximized"])]


def test_headless_firefox(recorder):
    driver_factory.create_driver("firefox", headless=True)
    assert recorder.created == [("firefox", ["-headless"])]


def test_browser_defaults_from_config(recorder):
    driver_factory.create_driver()
    assert recorder.created[0][0] == "chrome"
    assert "--headless=new" in recorder.created[0][1]


def test_unsupported_browser():
    with pytest.raises(ValueError, match="Unsupported browser"):
        driver_factory.create_driver("safari", headless=False)


def test_driver_manager_singleton(recorder):
    first = DriverManager.get_driver("chrome")
    try:
        assert DriverManager.get_driver("chrome") is first
        assert len(recorder.created) == 1
    finally:
        DriverManager.quit()
    assert first.quit_called
    assert DriverManager._driver is None
