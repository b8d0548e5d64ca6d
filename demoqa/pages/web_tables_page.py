"""
Web tables page.

Covers the table itself (rows, columns, rows-per-page selector), the
registration form behind "Add" and the search box.
"""

import logging
from typing import Dict, List, Optional, Tuple

from demoqa.pages.elements_page import ElementsPage
from demoqa.pages.home_page import HomePage

logger = logging.getLogger(__name__)

ADD_BUTTON = "#addNewRecordButton"
FIRST_NAME_INPUT = "#firstName"
LAST_NAME_INPUT = "#lastName"
EMAIL_INPUT = "#userEmail"
AGE_INPUT = "#age"
SALARY_INPUT = "#salary"
DEPARTMENT_INPUT = "#department"
SUBMIT_BUTTON = "#submit"
SEARCH_BOX = "#searchBox"

ROWS = "//div[@class='rt-tr-group']"
CELLS = ".rt-td"
HEADERS = ".rt-th.rt-resizable-header"
ROWS_PER_PAGE = "select[aria-label='rows per page']"

ROWS_PER_PAGE_OPTIONS: Tuple[int, ...] = (5, 10, 20, 25, 50, 100)

EXPECTED_ROW_COUNT = 10
EXPECTED_COLUMN_COUNT = 7


class WebTablesPage(ElementsPage):
    path = "webtables"
    menu_item = "#item-3"

    async def navigate_from_home(self) -> None:
        """Reach the table the way a user would: home, Elements card, side menu."""
        home = HomePage(self.page, self.base_url, self.timeout_ms)
        await home.open()
        await home.click_elements_card()
        await self.open_from_menu()

    async def get_row_count(self) -> int:
        await self.wait_until_visible(ROWS)
        return await self.count(ROWS)

    async def get_column_count(self) -> int:
        await self.wait_until_visible(HEADERS)
        return await self.count(HEADERS)

    async def get_column_headers(self) -> List[str]:
        return [header.strip() for header in await self.get_texts(HEADERS)]

    async def select_rows_per_page(self, rows: int) -> None:
        await self.scroll_into_view(ROWS_PER_PAGE)
        await self.select_by_value(ROWS_PER_PAGE, str(rows))

    async def rows_per_page_counts(self) -> Dict[int, int]:
        """Select every rows-per-page option and record how many rows render."""
        counts: Dict[int, int] = {}
        for option in ROWS_PER_PAGE_OPTIONS:
            await self.select_rows_per_page(option)
            counts[option] = await self.get_row_count()
            logger.info(f"Rows per page {option}: {counts[option]} rows rendered")
        return counts

    async def add_record(
        self,
        first_name: str,
        last_name: str,
        email: str,
        age: str,
        salary: str,
        department: str,
    ) -> None:
        """Open the registration form, fill it in and submit it."""
        await self.click(ADD_BUTTON)
        await self.fill(FIRST_NAME_INPUT, first_name)
        await self.fill(LAST_NAME_INPUT, last_name)
        await self.fill(EMAIL_INPUT, email)
        await self.fill(AGE_INPUT, age)
        await self.fill(SALARY_INPUT, salary)
        await self.fill(DEPARTMENT_INPUT, department)
        await self.click(SUBMIT_BUTTON)
        await self.wait_until_hidden(SUBMIT_BUTTON)
        logger.info(f"Added table record for {first_name} {last_name}")

    async def search(self, text: str) -> None:
        await self.fill(SEARCH_BOX, text)

    async def get_table_data(self) -> List[List[str]]:
        """Cell texts of every non-empty row."""
        rows = self.page.locator(ROWS)
        data: List[List[str]] = []
        for index in range(await rows.count()):
            cells = await rows.nth(index).locator(CELLS).all_inner_texts()
            values = [cell.strip() for cell in cells]
            if any(values):
                data.append(values)
        for values in data:
            logger.debug(" | ".join(values))
        return data

    async def find_row_by_first_name(self, first_name: str) -> Optional[str]:
        """Space-joined, non-empty cells of the first row whose first cell matches."""
        for values in await self.get_table_data():
            if values and values[0] == first_name:
                return " ".join(value for value in values if value)
        return None
