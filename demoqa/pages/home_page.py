"""Landing page with the six category cards."""

import logging
from typing import Dict

from demoqa.pages.base_page import BasePage

logger = logging.getLogger(__name__)

CARD_SELECTOR = "xpath=(//*[@class='card mt-4 top-card'])[{index}]"

# Card position on the landing page, in display order
CARDS: Dict[str, int] = {
    "elements": 1,
    "forms": 2,
    "alerts": 3,
    "widgets": 4,
    "interactions": 5,
    "bookstore": 6,
}


def card_selector(name: str) -> str:
    try:
        index = CARDS[name]
    except KeyError:
        raise ValueError(f"Unknown home page card: {name}") from None
    return CARD_SELECTOR.format(index=index)


class HomePage(BasePage):
    path = ""

    async def click_card(self, name: str) -> None:
        """Open one of the category cards by its name (see ``CARDS``)."""
        selector = card_selector(name)
        await self.scroll_into_view(selector)
        await self.click(selector)
        logger.info(f"Opened '{name}' card from home page")

    async def click_elements_card(self) -> None:
        await self.click_card("elements")

    async def click_forms_card(self) -> None:
        await self.click_card("forms")

    async def click_alerts_card(self) -> None:
        await self.click_card("alerts")

    async def click_widgets_card(self) -> None:
        await self.click_card("widgets")

    async def click_interactions_card(self) -> None:
        await self.click_card("interactions")

    async def click_bookstore_card(self) -> None:
        await self.click_card("bookstore")

    async def are_all_cards_displayed(self) -> bool:
        for name in CARDS:
            if not await self.is_displayed(card_selector(name)):
                logger.warning(f"Home page card not displayed: {name}")
                return False
        return True
