import os

import yaml

from e2e_framework.core.locator import Locator, to_by


class LocatorLoader:
    """中文：定位器加载器，负责读取并校验定位器配置。
    English: Locator loader that reads and validates locator configurations.
    """

    def __init__(self, yaml_path):
        """中文：初始化定位器加载器。
        参数:
            yaml_path: 定位器 YAML 文件路径。
        """

        if not os.path.exists(yaml_path):
            raise FileNotFoundError(f"Locator file not found: {yaml_path}")
        with open(yaml_path, "r", encoding="utf-8") as f:
            self.data = yaml.safe_load(f)

    def validate_all(self):
        """中文：校验定位器配置结构，包括 within 引用。
        English: Validate the locator tree, including ``within`` references.
        """

        if not isinstance(self.data, dict):
            raise ValueError("Locator root must be a dict")

        for page, locators in self.data.items():
            if not isinstance(locators, dict):
                raise ValueError(f"Page {page} must be a dict")
            for name, locator in locators.items():
                if not isinstance(locator, dict) or "by" not in locator or "value" not in locator:
                    raise ValueError(f"{page}.{name} missing by/value")
                to_by(locator["by"])
            for name in locators:
                self._check_chain(page, name)

    def _check_chain(self, page, name):
        seen = []
        current = name
        while current is not None:
            if current in seen:
                chain = " -> ".join(seen + [current])
                raise ValueError(f"{page}: cyclic within reference {chain}")
            if current not in self.data[page]:
                raise ValueError(f"{page}.{seen[-1]} within unknown locator {current}")
            seen.append(current)
            current = self.data[page][current].get("within")

    def get(self, page, name):
        """中文：获取指定页面的定位器配置。
        参数:
            page: 页面名称。
            name: 定位器名称。
        """

        try:
            return self.data[page][name]
        except KeyError:
            raise KeyError(f"Locator not found: {page}.{name}")


class PageLocators:
    """中文：页面定位器代理，将配置转换为延迟 Locator。
    English: Page locator proxy that turns catalogue entries into Locators.
    """

    def __init__(self, loader: LocatorLoader, page_name: str):
        self._loader = loader
        self._page_name = page_name

    def get(self, name) -> Locator:
        """中文：获取页面定位器，按 within 链构建父定位器。
        参数:
            name: 定位器名称。
        """

        entry = self._loader.get(self._page_name, name)
        parent = None
        if entry.get("within"):
            parent = self.get(entry["within"])
        return Locator(
            to_by(entry["by"]),
            entry["value"],
            parent=parent,
            name=f"{self._page_name}.{name}",
        )


def build_page_locators(locator_loader, page_name: str):
    """中文：构建页面定位器代理或返回原加载器。
    参数:
        locator_loader: 定位器加载器或代理。
        page_name: 页面名称。
    """

    if isinstance(locator_loader, PageLocators):
        return locator_loader
    return PageLocators(locator_loader, page_name)
