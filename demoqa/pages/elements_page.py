"""Pages that live under the Elements section and share its side menu."""

from demoqa.pages.base_page import BasePage


class ElementsPage(BasePage):
    """An Elements sub-page, reachable from the side menu via ``menu_item``."""

    path = "elements"
    menu_item: str = ""

    async def open_from_menu(self) -> None:
        """Click this page's entry in the Elements side menu."""
        if not self.menu_item:
            raise ValueError(f"{type(self).__name__} has no side menu entry")
        await self.scroll_into_view(self.menu_item)
        await self.click(self.menu_item)
        await self.wait_for_page_load()
