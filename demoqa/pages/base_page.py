"""
Common interactions shared by all page objects.

Selectors are Playwright selector strings; CSS is the default and strings
starting with ``//`` are treated as XPath. Every interaction first waits for
its element to become visible within the explicit timeout.
"""

import logging
from typing import List

from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://demoqa.com/"
DEFAULT_TIMEOUT_MS = 10000


class BasePage:
    """Template for page objects; subclasses add locators and page-specific steps."""

    # Path of the page below the base URL, set by subclasses that have one
    path: str = ""

    def __init__(
        self,
        page: Page,
        base_url: str = DEFAULT_BASE_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ) -> None:
        self.page = page
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout_ms = timeout_ms

    def url_for(self, path: str) -> str:
        return self.base_url + path.lstrip("/")

    @property
    def url(self) -> str:
        return self.url_for(self.path)

    def locator(self, selector: str) -> Locator:
        return self.page.locator(selector).first

    async def open(self) -> None:
        """Load this page directly by URL."""
        await self.open_url(self.url)

    def is_opened(self) -> bool:
        return self.page.url == self.url

    # Browser operations

    async def open_url(self, url: str) -> None:
        """Load a URL and wait for the load event."""
        await self.page.goto(url, wait_until="load")

    async def navigate_to(self, url: str) -> None:
        """Start navigating to a URL without waiting for sub-resources."""
        await self.page.goto(url, wait_until="commit")

    async def refresh_page(self) -> None:
        await self.page.reload()

    async def navigate_back(self) -> None:
        await self.page.go_back()

    async def navigate_forward(self) -> None:
        await self.page.go_forward()

    async def get_title(self) -> str:
        return await self.page.title()

    def get_current_url(self) -> str:
        return self.page.url

    async def wait_for_page_load(self) -> None:
        await self.page.wait_for_load_state("load", timeout=self.timeout_ms)

    # Element operations

    async def wait_until_visible(self, selector: str) -> Locator:
        element = self.locator(selector)
        await element.wait_for(state="visible", timeout=self.timeout_ms)
        return element

    async def wait_until_hidden(self, selector: str) -> None:
        await self.locator(selector).wait_for(state="hidden", timeout=self.timeout_ms)

    async def click(self, selector: str) -> None:
        element = await self.wait_until_visible(selector)
        await element.click(timeout=self.timeout_ms)

    async def submit_form(self, selector: str) -> None:
        """Submit the form that owns the element."""
        element = await self.wait_until_visible(selector)
        await element.evaluate(
            "el => (el.form || el.closest('form')).requestSubmit()"
        )

    async def clear(self, selector: str) -> None:
        element = await self.wait_until_visible(selector)
        await element.clear(timeout=self.timeout_ms)

    async def fill(self, selector: str, text: str) -> None:
        """Replace the element's value with ``text``."""
        element = await self.wait_until_visible(selector)
        await element.fill(text, timeout=self.timeout_ms)

    async def type_text(self, selector: str, text: str) -> None:
        """Type keystrokes after the current value."""
        element = await self.wait_until_visible(selector)
        await element.press_sequentially(text, timeout=self.timeout_ms)

    async def get_text(self, selector: str) -> str:
        element = await self.wait_until_visible(selector)
        return await element.inner_text(timeout=self.timeout_ms)

    async def get_texts(self, selector: str) -> List[str]:
        return await self.page.locator(selector).all_inner_texts()

    async def count(self, selector: str) -> int:
        return await self.page.locator(selector).count()

    # Mouse and keyboard actions

    async def double_click(self, selector: str) -> None:
        element = await self.wait_until_visible(selector)
        await element.dblclick(timeout=self.timeout_ms)

    async def right_click(self, selector: str) -> None:
        element = await self.wait_until_visible(selector)
        await element.click(button="right", timeout=self.timeout_ms)

    async def hover(self, selector: str) -> None:
        element = await self.wait_until_visible(selector)
        await element.hover(timeout=self.timeout_ms)

    async def click_and_hold(self, selector: str) -> None:
        element = await self.wait_until_visible(selector)
        await element.hover(timeout=self.timeout_ms)
        await self.page.mouse.down()

    async def release_mouse(self) -> None:
        await self.page.mouse.up()

    async def drag_and_drop(self, source_selector: str, target_selector: str) -> None:
        source = await self.wait_until_visible(source_selector)
        target = await self.wait_until_visible(target_selector)
        await source.drag_to(target, timeout=self.timeout_ms)

    async def key_press(self, selector: str, modifier: str, text: str) -> None:
        """Type ``text`` on the element while holding ``modifier`` (e.g. ``Control``)."""
        element = await self.wait_until_visible(selector)
        await element.focus()
        await self.page.keyboard.down(modifier)
        try:
            await self.page.keyboard.type(text)
        finally:
            await self.page.keyboard.up(modifier)

    async def scroll_into_view(self, selector: str) -> None:
        await self.locator(selector).scroll_into_view_if_needed(timeout=self.timeout_ms)

    # State checks; presence checks report False on timeout, value checks raise

    async def is_displayed(self, selector: str) -> bool:
        try:
            await self.wait_until_visible(selector)
        except PlaywrightTimeoutError:
            return False
        return True

    async def is_hidden(self, selector: str) -> bool:
        try:
            await self.wait_until_hidden(selector)
        except PlaywrightTimeoutError:
            return False
        return True

    async def is_enabled(self, selector: str) -> bool:
        element = await self.wait_until_visible(selector)
        return await element.is_enabled()

    async def is_checked(self, selector: str) -> bool:
        element = await self.wait_until_visible(selector)
        return await element.is_checked()

    async def is_clickable(self, selector: str) -> bool:
        """True when the element is visible, enabled and accepts a trial click."""
        try:
            element = await self.wait_until_visible(selector)
            await element.click(trial=True, timeout=self.timeout_ms)
        except PlaywrightTimeoutError:
            return False
        return True

    async def is_on_expected_page(self, expected_url: str) -> bool:
        """Wait for the URL to match exactly; log both URLs on mismatch."""
        try:
            await self.page.wait_for_url(expected_url, timeout=self.timeout_ms)
        except PlaywrightTimeoutError:
            logger.warning(
                f"URL did not match. Expected: {expected_url} Actual: {self.page.url}"
            )
            return False
        return self.page.url == expected_url

    def is_current_url_equal_to(self, expected_url: str) -> bool:
        return self.page.url == expected_url

    def is_url_containing(self, text: str) -> bool:
        return text in self.page.url

    async def is_title_containing(self, text: str) -> bool:
        return text in await self.page.title()

    async def is_text_present(self, selector: str, text: str) -> bool:
        return text in await self.get_text(selector)

    async def is_option_present_in_dropdown(self, selector: str, option_text: str) -> bool:
        dropdown = await self.wait_until_visible(selector)
        options = await dropdown.locator("option").all_inner_texts()
        return any(option.strip() == option_text for option in options)

    # Dropdowns

    async def select_by_visible_text(self, selector: str, text: str) -> List[str]:
        dropdown = await self.wait_until_visible(selector)
        return await dropdown.select_option(label=text, timeout=self.timeout_ms)

    async def select_by_value(self, selector: str, value: str) -> List[str]:
        dropdown = await self.wait_until_visible(selector)
        return await dropdown.select_option(value=value, timeout=self.timeout_ms)

    async def select_by_index(self, selector: str, index: int) -> List[str]:
        dropdown = await self.wait_until_visible(selector)
        return await dropdown.select_option(index=index, timeout=self.timeout_ms)

    # Tabs

    async def wait_for_new_tab(self, selector: str) -> Page:
        """Click an element that opens a new tab and return the loaded tab."""
        async with self.page.context.expect_page(timeout=self.timeout_ms) as new_page:
            await self.click(selector)
        tab = await new_page.value
        await tab.wait_for_load_state()
        return tab

    async def get_attribute(self, selector: str, name: str) -> str:
        element = await self.wait_until_visible(selector)
        return await element.get_attribute(name, timeout=self.timeout_ms) or ""
