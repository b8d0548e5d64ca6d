"""
Browser session factory.

Maps a browser name to a configured Playwright browser, context and page, and
tears the whole session down again. One manager owns exactly one session.
"""

import logging
from typing import Dict, List, Optional

from playwright.async_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    async_playwright,
)

from demoqa.config import FrameworkSettings, get_settings
from demoqa.enums import BrowserType
from demoqa.exceptions import WebDriverError

logger = logging.getLogger(__name__)

# Chromium needs sandbox disabling in containerized environments
BROWSER_LAUNCH_ARGS: Dict[BrowserType, List[str]] = {
    BrowserType.CHROME: [
        "--start-maximized",
        "--disable-popup-blocking",
        "--disable-extensions",
        "--no-sandbox",
        "--disable-dev-shm-usage",
        "--disable-gpu",
    ],
    BrowserType.EDGE: [
        "--start-maximized",
        "--no-sandbox",
        "--disable-dev-shm-usage",
    ],
    BrowserType.FIREFOX: [],
    BrowserType.SAFARI: [],
}

CONTEXT_OPTIONS: Dict[str, object] = {
    "viewport": {"width": 1920, "height": 1080},
    "ignore_https_errors": True,
}

BLANK_URLS = ("", "about:blank", "data:,")


class BrowserManager:
    """Owns the lifecycle of a single browser session."""

    def __init__(self, settings: Optional[FrameworkSettings] = None) -> None:
        self.settings = settings or get_settings()
        self.browser_type: Optional[BrowserType] = None
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def start(self, browser_name: Optional[str]) -> Page:
        """
        Launch the named browser and return a ready page.

        Raises:
            WebDriverError: if the name is empty or unknown, or the launch fails
        """
        if browser_name is None or not browser_name.strip():
            raise WebDriverError("Browser name cannot be null or empty")

        try:
            browser_type = BrowserType.from_string(browser_name)
        except ValueError as e:
            raise WebDriverError(
                f"Unsupported browser type: {browser_name}", cause=e
            ) from e

        try:
            page = await self._launch(browser_type)
        except WebDriverError:
            await self._discard()
            raise
        except Exception as e:
            await self._discard()
            logger.error(f"Failed to initialize browser: {browser_name}: {e}")
            raise WebDriverError(
                f"Failed to initialize WebDriver for browser: {browser_name}",
                cause=e,
            ) from e

        logger.info(f"WebDriver initialized successfully for browser: {browser_name}")
        return page

    async def _launch(self, browser_type: BrowserType) -> Page:
        if self._page is not None:
            raise WebDriverError(
                "A browser session is already running. Call quit() first."
            )

        self._playwright = await async_playwright().start()
        launcher = getattr(self._playwright, browser_type.engine)

        launch_options: Dict[str, object] = {
            "headless": self.settings.headless,
            "args": BROWSER_LAUNCH_ARGS[browser_type],
        }
        if browser_type.channel:
            launch_options["channel"] = browser_type.channel

        self._browser = await launcher.launch(**launch_options)
        self._context = await self._browser.new_context(**CONTEXT_OPTIONS)
        page = await self._context.new_page()
        page.set_default_timeout(self.settings.implicit_timeout_ms)
        page.set_default_navigation_timeout(self.settings.page_load_timeout_ms)

        self.browser_type = browser_type
        self._page = page
        return page

    async def _discard(self) -> None:
        """Best-effort cleanup of a half-started session."""
        for closer in (self._context, self._browser):
            if closer is not None:
                try:
                    await closer.close()
                except Exception as e:
                    logger.warning(f"Cleanup after failed start raised: {e}")
        if self._playwright is not None:
            try:
                await self._playwright.stop()
            except Exception as e:
                logger.warning(f"Stopping Playwright after failed start raised: {e}")
        self._reset()

    def _reset(self) -> None:
        self._page = None
        self._context = None
        self._browser = None
        self._playwright = None
        self.browser_type = None

    async def quit(self) -> None:
        """Close the page, context, browser and Playwright driver. Safe to repeat."""
        if self._playwright is None:
            return
        try:
            if self._context is not None:
                await self._context.close()
            if self._browser is not None:
                await self._browser.close()
            await self._playwright.stop()
        except Exception as e:
            logger.error(f"Failed to quit WebDriver: {e}")
            raise WebDriverError("Failed to quit WebDriver", cause=e) from e
        finally:
            self._reset()
        logger.info("WebDriver quit successfully")

    async def open_base_url_if_blank(self) -> None:
        """Navigate to the base URL when the page has not navigated anywhere yet."""
        page = self.page
        if page.url in BLANK_URLS:
            logger.info(f"Auto-navigating to base URL: {self.settings.base_url}")
            await page.goto(self.settings.base_url)

    @property
    def page(self) -> Page:
        if self._page is None:
            raise WebDriverError(
                "WebDriver is not initialized. Call start() first."
            )
        return self._page

    @property
    def context(self) -> BrowserContext:
        if self._context is None:
            raise WebDriverError(
                "WebDriver is not initialized. Call start() first."
            )
        return self._context

    @property
    def is_started(self) -> bool:
        return self._page is not None

    @property
    def current_browser_name(self) -> str:
        if self.browser_type is None:
            return "Not initialized"
        return self.browser_type.value
