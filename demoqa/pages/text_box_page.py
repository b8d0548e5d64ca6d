"""Text box form and its output block."""

import logging

from demoqa.pages.elements_page import ElementsPage

logger = logging.getLogger(__name__)

FULL_NAME_INPUT = "#userName"
EMAIL_INPUT = "#userEmail"
CURRENT_ADDRESS_INPUT = "textarea#currentAddress"
PERMANENT_ADDRESS_INPUT = "textarea#permanentAddress"
SUBMIT_BUTTON = "#submit"

OUTPUT_BLOCK = "#output"
OUTPUT_NAME = "#output #name"
OUTPUT_EMAIL = "#output #email"
OUTPUT_CURRENT_ADDRESS = "#output #currentAddress"
OUTPUT_PERMANENT_ADDRESS = "#output #permanentAddress"

# Marker class the site puts on the email input when it rejects the value
FIELD_ERROR_CLASS = "field-error"

EXPECTED_TITLE = "DEMOQA"


class TextBoxPage(ElementsPage):
    path = "text-box"
    menu_item = "#item-0"

    async def enter_full_name(self, name: str) -> None:
        await self.fill(FULL_NAME_INPUT, name)

    async def enter_email(self, email: str) -> None:
        await self.fill(EMAIL_INPUT, email)

    async def enter_current_address(self, address: str) -> None:
        await self.fill(CURRENT_ADDRESS_INPUT, address)

    async def enter_permanent_address(self, address: str) -> None:
        await self.fill(PERMANENT_ADDRESS_INPUT, address)

    async def submit(self) -> None:
        await self.scroll_into_view(SUBMIT_BUTTON)
        await self.click(SUBMIT_BUTTON)

    async def fill_form(
        self, name: str, email: str, current_address: str, permanent_address: str
    ) -> None:
        """Fill every field and submit the form."""
        await self.enter_full_name(name)
        await self.enter_email(email)
        await self.enter_current_address(current_address)
        await self.enter_permanent_address(permanent_address)
        await self.submit()
        logger.info(f"Submitted text box form for {name}")

    async def is_output_displayed(self) -> bool:
        return await self.is_displayed(OUTPUT_BLOCK)

    async def get_output_name(self) -> str:
        return await self.get_text(OUTPUT_NAME)

    async def get_output_email(self) -> str:
        return await self.get_text(OUTPUT_EMAIL)

    async def get_output_current_address(self) -> str:
        return await self.get_text(OUTPUT_CURRENT_ADDRESS)

    async def get_output_permanent_address(self) -> str:
        return await self.get_text(OUTPUT_PERMANENT_ADDRESS)

    async def is_output_email_displayed(self) -> bool:
        return await self.page.locator(OUTPUT_EMAIL).is_visible()

    async def is_email_marked_invalid(self) -> bool:
        classes = await self.get_attribute(EMAIL_INPUT, "class")
        return FIELD_ERROR_CLASS in classes.split()
