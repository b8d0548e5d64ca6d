"""Lazy registry of page objects bound to one browser page."""

import logging
from typing import Dict, Type, TypeVar, cast

from playwright.async_api import Page

from demoqa.pages.base_page import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS, BasePage
from demoqa.pages.buttons_page import ButtonsPage
from demoqa.pages.check_box_page import CheckBoxPage
from demoqa.pages.home_page import HomePage
from demoqa.pages.links_page import LinksPage
from demoqa.pages.radio_button_page import RadioButtonPage
from demoqa.pages.text_box_page import TextBoxPage
from demoqa.pages.web_tables_page import WebTablesPage

logger = logging.getLogger(__name__)

PageT = TypeVar("PageT", bound=BasePage)


class PageObjectManager:
    """
    Creates each page object on first request and hands out the same instance
    afterwards. Also offers direct navigation to the site's sections.
    """

    def __init__(
        self,
        page: Page,
        base_url: str = DEFAULT_BASE_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ) -> None:
        self.page = page
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout_ms = timeout_ms
        self._pages: Dict[Type[BasePage], BasePage] = {}

    def get(self, page_class: Type[PageT]) -> PageT:
        existing = self._pages.get(page_class)
        if existing is None:
            logger.debug(f"Creating page object {page_class.__name__}")
            existing = page_class(self.page, self.base_url, self.timeout_ms)
            self._pages[page_class] = existing
        return cast(PageT, existing)

    @property
    def home_page(self) -> HomePage:
        return self.get(HomePage)

    @property
    def buttons_page(self) -> ButtonsPage:
        return self.get(ButtonsPage)

    @property
    def check_box_page(self) -> CheckBoxPage:
        return self.get(CheckBoxPage)

    @property
    def links_page(self) -> LinksPage:
        return self.get(LinksPage)

    @property
    def radio_button_page(self) -> RadioButtonPage:
        return self.get(RadioButtonPage)

    @property
    def text_box_page(self) -> TextBoxPage:
        return self.get(TextBoxPage)

    @property
    def web_tables_page(self) -> WebTablesPage:
        return self.get(WebTablesPage)

    # Navigation

    async def navigate_to_url(self, url: str) -> None:
        logger.info(f"Navigating to {url}")
        await self.page.goto(url)

    async def navigate_to_path(self, path: str) -> None:
        await self.navigate_to_url(self.base_url + path.lstrip("/"))

    async def navigate_to_home(self) -> None:
        await self.navigate_to_url(self.base_url)

    async def navigate_to_buttons(self) -> None:
        await self.navigate_to_path("buttons")

    async def navigate_to_practice_form(self) -> None:
        await self.navigate_to_path("automation-practice-form")

    async def navigate_to_text_box(self) -> None:
        await self.navigate_to_path("text-box")

    async def navigate_to_check_box(self) -> None:
        await self.navigate_to_path("checkbox")

    async def navigate_to_radio_button(self) -> None:
        await self.navigate_to_path("radio-button")

    async def navigate_to_web_tables(self) -> None:
        await self.navigate_to_path("webtables")

    async def navigate_to_links(self) -> None:
        await self.navigate_to_path("links")

    async def navigate_to_broken_links(self) -> None:
        await self.navigate_to_path("broken")

    async def navigate_to_upload_download(self) -> None:
        await self.navigate_to_path("upload-download")

    async def navigate_to_dynamic_properties(self) -> None:
        await self.navigate_to_path("dynamic-properties")

    def reset_pages(self) -> None:
        """Forget every cached page object."""
        self._pages.clear()
        logger.debug("Page object cache cleared")

    @property
    def initialized_page_count(self) -> int:
        return len(self._pages)
