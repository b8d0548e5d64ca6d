"""
Check box tree page.

Nodes are addressed by their visible title ("Home", "WorkSpace", ...). Each
title maps to the node key the site uses in the ``tree-node-<key>`` ids.
"""

import logging
from typing import Dict, List

from demoqa.pages.elements_page import ElementsPage

logger = logging.getLogger(__name__)

EXPAND_ALL_BUTTON = "button[title='Expand all']"
COLLAPSE_ALL_BUTTON = "button[title='Collapse all']"
RESULT = "#result"
NODE_TITLES = ".rct-title"

NODE_LABEL = "label[for='tree-node-{key}']"
NODE_INPUT = "#tree-node-{key}"
NODE_TOGGLE = "xpath=//label[@for='tree-node-{key}']/preceding-sibling::button"

NODES: Dict[str, str] = {
    "Home": "home",
    "Desktop": "desktop",
    "Notes": "notes",
    "Commands": "commands",
    "Documents": "documents",
    "WorkSpace": "workspace",
    "React": "react",
    "Angular": "angular",
    "Veu": "veu",
    "Office": "office",
    "Public": "public",
    "Private": "private",
    "Classified": "classified",
    "General": "general",
    "Downloads": "downloads",
    "Word File.doc": "wordFile",
    "Excel File.doc": "excelFile",
}

# Nodes that have children and therefore a toggle button
PARENT_NODES = ("Home", "Desktop", "Documents", "WorkSpace", "Office", "Downloads")

ALIASES: Dict[str, str] = {"Work Space": "WorkSpace"}

RESULT_PREFIX = "You have selected :"


def node_key(title: str) -> str:
    title = ALIASES.get(title, title)
    try:
        return NODES[title]
    except KeyError:
        raise ValueError(f"Unknown check box node: {title}") from None


def expected_result(*titles: str) -> str:
    """The result line the page shows after the given nodes end up checked."""
    return " ".join([RESULT_PREFIX] + [node_key(title) for title in titles])


class CheckBoxPage(ElementsPage):
    path = "checkbox"
    menu_item = "#item-1"

    async def expand_all(self) -> None:
        await self.click(EXPAND_ALL_BUTTON)

    async def collapse_all(self) -> None:
        await self.click(COLLAPSE_ALL_BUTTON)

    async def toggle(self, title: str) -> None:
        """Expand or collapse a parent node."""
        if ALIASES.get(title, title) not in PARENT_NODES:
            raise ValueError(f"Node has no children to toggle: {title}")
        await self.click(NODE_TOGGLE.format(key=node_key(title)))

    async def check(self, title: str) -> None:
        await self.click(NODE_LABEL.format(key=node_key(title)))
        logger.info(f"Clicked check box '{title}'")

    async def is_node_checked(self, title: str) -> bool:
        # The real input is hidden; the label renders the check mark
        return await self.page.locator(NODE_INPUT.format(key=node_key(title))).is_checked()

    async def get_visible_node_titles(self) -> List[str]:
        return await self.get_texts(NODE_TITLES)

    async def get_result(self) -> str:
        """Selected keys as one space-separated line."""
        texts = await self.get_texts(f"{RESULT} span")
        return " ".join(text.strip() for text in texts if text.strip())

    async def is_result_displayed(self) -> bool:
        return await self.is_displayed(RESULT)
