"""Radio button page."""

from demoqa.pages.elements_page import ElementsPage

YES_RADIO_LABEL = "label[for='yesRadio']"
IMPRESSIVE_RADIO_LABEL = "label[for='impressiveRadio']"
NO_RADIO = "#noRadio"
SELECTED_VALUE = ".text-success"


class RadioButtonPage(ElementsPage):
    path = "radio-button"
    menu_item = "#item-2"

    async def select_yes(self) -> None:
        await self.click(YES_RADIO_LABEL)

    async def select_impressive(self) -> None:
        await self.click(IMPRESSIVE_RADIO_LABEL)

    async def is_no_radio_enabled(self) -> bool:
        # The input itself is visually hidden behind its label
        return await self.page.locator(NO_RADIO).is_enabled()

    async def get_selected_value(self) -> str:
        return await self.get_text(SELECTED_VALUE)
