import re

from selenium.webdriver.common.by import By

from e2e_framework.core.base_page import BasePage
from e2e_framework.core.locator import Locator


# Evaluated in the page so the table is read in a single pass.
# arguments: table selector, row selector, key cell selector, empty-state text
TABLE_SETTLED_SCRIPT = """
const [tableSelector, rowSelector, keyCellSelector, emptyText] = arguments;
const table = document.querySelector(tableSelector);
if (!table) {
    return false;
}
if ((document.body.textContent || "").includes(emptyText)) {
    return true;
}
const rows = table.querySelectorAll(rowSelector);
if (rows.length === 0) {
    return false;
}
return Array.from(rows).some((row) =>
    Array.from(row.querySelectorAll(keyCellSelector)).some(
        (cell) => (cell.textContent || "").trim() !== ""
    )
);
"""

# arguments: table selector, row selector, key cell selector
VARIABLE_KEYS_SCRIPT = """
const [tableSelector, rowSelector, keyCellSelector] = arguments;
const table = document.querySelector(tableSelector);
if (!table) {
    return [];
}
const keys = [];
for (const row of table.querySelectorAll(rowSelector)) {
    for (const cell of row.querySelectorAll(keyCellSelector)) {
        keys.push(cell.textContent || "");
    }
}
return keys;
"""

SORT_BUTTON = 'button[aria-label="sort"]'
SORT_BUTTON_BY_NAME = (
    ".//button[contains(translate(@aria-label, 'SORT', 'sort'), 'sort')"
    " or contains(translate(normalize-space(.), 'SORT', 'sort'), 'sort')]"
)
ROW_CHECKBOX = '[id^="checkbox"][id$=":control"]'


class VariablesPage(BasePage):
    """中文：Variables 管理页面对象。
    English: Page object for the Variables management screen.

    Every action that changes the table waits for it to settle before
    returning; ``search`` and ``sort_by_column`` are the exceptions and
    leave waiting to the caller.
    """

    PATH = "/variables"
    EMPTY_STATE_TEXT = "No variables found"

    TABLE_VISIBLE_TIMEOUT = 15
    TABLE_DATA_TIMEOUT = 60
    SORT_STATE_TIMEOUT = 30
    PAGINATION_TIMEOUT = 20

    def __init__(self, driver, locator_loader, **kwargs):
        """中文：初始化页面并一次性构建定位器集合。
        参数:
            driver: WebDriver 实例。
            locator_loader: 定位器加载器实例。
            **kwargs: 传给 BasePage 的配置覆盖（base_url、timeout 等）。
        """

        super().__init__(driver, locator_loader, page_name="VariablesPage", **kwargs)

        self.search_input = self.locator("search_input")
        self.add_button = self.locator("add_button")
        self.import_button = self.locator("import_button")
        self.table = self.locator("table")
        self.table_rows = self.locator("table_rows")
        self.pagination_next_button = self.locator("pagination_next_button")
        self.pagination_prev_button = self.locator("pagination_prev_button")
        self.select_all_checkbox = self.locator("select_all_checkbox")
        self._key_cells = self.locator("key_cells")

        for loc in (self.table, self.table_rows, self._key_cells):
            if loc.by != By.CSS_SELECTOR:
                raise ValueError(f"{loc.describe()} must be a css locator, got {loc.by}")

    def navigate(self):
        """中文：打开 Variables 页面并等待文档加载完成。
        English: Open the Variables page and wait for the document to load.
        """

        self.navigate_to(self.PATH)
        self.wait_page_ready()

    def search(self, key: str):
        """中文：在搜索框中输入 key，不等待结果刷新。
        参数:
            key: 搜索文本。
        """

        self.fill(self.search_input, key)

    def click_column_to_sort(self, column_name: str):
        """中文：点击列头排序按钮，等待 aria-sort 变化后等待表格重新加载。
        English: Click the header's sort button, require its ``aria-sort``
        to change within ``SORT_STATE_TIMEOUT`` and wait for the reload.

        参数:
            column_name: 列头文本中包含的子串（区分大小写）。
        """

        header = self.table.locator("th", name=f"{self._page_name}.header[{column_name}]").filter(column_name)
        sort_button = header.locator(SORT_BUTTON, name=f"{self._page_name}.sort[{column_name}]")

        self.wait_visible(header)
        before = self.get_attribute(header, "aria-sort")
        if before is None:
            before = "None"
        self._log.info(f"[SORT] {self._page_name} column={column_name} aria-sort={before}")

        self.click(sort_button)
        after = self.wait_attribute_changes(
            header, "aria-sort", before, timeout=self.SORT_STATE_TIMEOUT, default="None"
        )
        self._log.info(f"[SORT] {self._page_name} column={column_name} aria-sort={after}")

        self.wait_for_load()

    def sort_by_column(self, column_name: str):
        """Click the sort control of the header matching ``column_name``
        as a case-insensitive regular expression. No state check, no wait."""

        header = self.table.locator("thead th").filter(re.compile(column_name, re.IGNORECASE))
        self.click(header.locator(SORT_BUTTON_BY_NAME, by=By.XPATH, name=f"{self._page_name}.sort[/{column_name}/i]"))

    def click_next_page(self):
        """中文：翻到下一页，等待显示的 key 变化（PAGINATION_TIMEOUT）后等待加载。"""

        self._turn_page(self.pagination_next_button, "next")

    def click_prev_page(self):
        """中文：翻到上一页，等待显示的 key 变化（PAGINATION_TIMEOUT）后等待加载。"""

        self._turn_page(self.pagination_prev_button, "prev")

    def _turn_page(self, button, direction):
        initial_keys = self.get_variable_keys()
        self._log.info(f"[PAGE] {self._page_name} {direction} from keys={initial_keys}")

        self.click(button)
        # the poll owns the pagination budget; no nested wait_for_load inside it
        keys = self.poll_until_changed(
            self._read_keys,
            initial_keys,
            timeout=self.PAGINATION_TIMEOUT,
            message=f"variable keys change after {direction} page",
            ready=self.is_table_settled,
        )
        self._log.info(f"[PAGE] {self._page_name} {direction} to keys={keys}")

        self.wait_for_load()

    def get_variable_keys(self) -> list[str]:
        """中文：返回当前页面显示的变量 key（去除首尾空白、过滤空值）。
        English: Keys shown in the second column of every visible row,
        trimmed, blanks dropped, in display order.
        """

        self.wait_for_load()
        return self._read_keys()

    def _read_keys(self) -> list[str]:
        texts = self.execute_js(
            VARIABLE_KEYS_SCRIPT,
            self.table.value,
            self.table_rows.value,
            self._key_cells.value,
        )
        keys = [text.strip() for text in texts or []]
        return [key for key in keys if key]

    def row_by_key(self, key: str) -> Locator:
        """中文：返回文本包含 key 的表格行定位器。
        子串匹配："foo" 也会匹配包含 "foobar" 的行，操作时取第一个匹配。

        参数:
            key: 变量 key。
        """

        return Locator.css("tr", name=f"{self._page_name}.row[{key}]").filter(key)

    def select_row(self, key: str):
        """中文：勾选 key 所在行的复选框；无匹配时抛出 ElementNotFoundError。
        参数:
            key: 变量 key。
        """

        row = self.row_by_key(key)
        self.click(row.locator(ROW_CHECKBOX, name=f"{self._page_name}.checkbox[{key}]"))

    def wait_for_load(self):
        """中文：等待表格可见，再等待表格数据加载完成。
        English: Table visible within ``TABLE_VISIBLE_TIMEOUT``, then the
        settling check within ``TABLE_DATA_TIMEOUT``.
        """

        self.wait_visible(self.table, timeout=self.TABLE_VISIBLE_TIMEOUT)
        self._wait_for_table_data()

    def _wait_for_table_data(self):
        self.wait_until(
            self.is_table_settled,
            timeout=self.TABLE_DATA_TIMEOUT,
            message="table data loaded",
        )

    def is_table_settled(self) -> bool:
        """True once the empty-state message shows or a row has a non-empty key."""
        return bool(
            self.execute_js(
                TABLE_SETTLED_SCRIPT,
                self.table.value,
                self.table_rows.value,
                self._key_cells.value,
                self.EMPTY_STATE_TEXT,
            )
        )
