"""Links page: links that open new tabs and links that call an API."""

import logging
from typing import Dict, NamedTuple

from playwright.async_api import Page

from demoqa.pages.elements_page import ElementsPage

logger = logging.getLogger(__name__)

SIMPLE_LINK = "#simpleLink"
DYNAMIC_LINK = "#dynamicLink"
LINK_RESPONSE = "#linkResponse"


class ApiLink(NamedTuple):
    selector: str
    status: int
    status_text: str


API_LINKS: Dict[str, ApiLink] = {
    "created": ApiLink("#created", 201, "Created"),
    "no-content": ApiLink("#no-content", 204, "No Content"),
    "moved": ApiLink("#moved", 301, "Moved Permanently"),
    "bad-request": ApiLink("#bad-request", 400, "Bad Request"),
    "unauthorized": ApiLink("#unauthorized", 401, "Unauthorized"),
    "forbidden": ApiLink("#forbidden", 403, "Forbidden"),
    "invalid-url": ApiLink("#invalid-url", 404, "Not Found"),
}


def api_link(name: str) -> ApiLink:
    try:
        return API_LINKS[name]
    except KeyError:
        raise ValueError(f"Unknown API link: {name}") from None


def expected_response(name: str) -> str:
    """Message the page shows after the named API link answered."""
    link = api_link(name)
    # "staus" is how the site spells it
    return f"Link has responded with staus {link.status} and status text {link.status_text}"


class LinksPage(ElementsPage):
    path = "links"
    menu_item = "#item-5"

    async def open_simple_link(self) -> Page:
        """Click the static Home link and return the tab it opens."""
        tab = await self.wait_for_new_tab(SIMPLE_LINK)
        logger.info(f"Simple link opened new tab: {tab.url}")
        return tab

    async def open_dynamic_link(self) -> Page:
        tab = await self.wait_for_new_tab(DYNAMIC_LINK)
        logger.info(f"Dynamic link opened new tab: {tab.url}")
        return tab

    async def click_api_link(self, name: str) -> None:
        selector = api_link(name).selector
        await self.scroll_into_view(selector)
        await self.click(selector)

    async def get_link_response(self) -> str:
        return await self.get_text(LINK_RESPONSE)
