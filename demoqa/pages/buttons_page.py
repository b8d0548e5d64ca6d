"""Buttons page: double, right and dynamic click targets."""

from demoqa.pages.elements_page import ElementsPage

DOUBLE_CLICK_BUTTON = "#doubleClickBtn"
RIGHT_CLICK_BUTTON = "#rightClickBtn"
DYNAMIC_CLICK_BUTTON = "//button[text()='Click Me']"

DOUBLE_CLICK_MESSAGE = "#doubleClickMessage"
RIGHT_CLICK_MESSAGE = "#rightClickMessage"
DYNAMIC_CLICK_MESSAGE = "#dynamicClickMessage"

EXPECTED_DOUBLE_CLICK_TEXT = "You have done a double click"
EXPECTED_RIGHT_CLICK_TEXT = "You have done a right click"
EXPECTED_DYNAMIC_CLICK_TEXT = "You have done a dynamic click"


class ButtonsPage(ElementsPage):
    path = "buttons"
    menu_item = "//li[contains(., 'Buttons')]"

    async def double_click_button(self) -> None:
        await self.double_click(DOUBLE_CLICK_BUTTON)

    async def right_click_button(self) -> None:
        await self.right_click(RIGHT_CLICK_BUTTON)

    async def dynamic_click_button(self) -> None:
        await self.click(DYNAMIC_CLICK_BUTTON)

    async def get_double_click_message(self) -> str:
        return await self.get_text(DOUBLE_CLICK_MESSAGE)

    async def get_right_click_message(self) -> str:
        return await self.get_text(RIGHT_CLICK_MESSAGE)

    async def get_dynamic_click_message(self) -> str:
        return await self.get_text(DYNAMIC_CLICK_MESSAGE)
