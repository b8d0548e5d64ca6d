"""Async fixtures that give each test its own browser session and page objects."""

import logging
from typing import AsyncGenerator, Dict, Optional

import pytest
import pytest_asyncio
from _pytest.fixtures import FixtureRequest
from playwright.async_api import Page

from demoqa.browser_manager import BrowserManager
from demoqa.config import FrameworkSettings, get_settings
from demoqa.exceptions import TestSetupError, WebDriverError
from demoqa.pages.page_object_manager import PageObjectManager
from demoqa.utils.random_data import PersonData
from demoqa.utils.screenshots import take_screenshot

logger = logging.getLogger(__name__)


def settings_with_overrides(
    settings: FrameworkSettings,
    browser: Optional[str] = None,
    headed: bool = False,
    base_url: Optional[str] = None,
) -> FrameworkSettings:
    """Apply command-line overrides on top of the configured settings."""
    overrides: Dict[str, object] = {}
    if browser:
        overrides["default_browser"] = browser
    if headed:
        overrides["headless"] = False
    if base_url:
        overrides["base_url"] = base_url
    if not overrides:
        return settings
    # Rebuild rather than model_copy so validators run on the overrides
    return FrameworkSettings(**{**settings.model_dump(), **overrides})


@pytest.fixture(scope="session")
def framework_config(pytestconfig: pytest.Config) -> FrameworkSettings:
    """Validated settings for the whole run, including command-line overrides."""
    return settings_with_overrides(
        get_settings(),
        browser=pytestconfig.getoption("browser", default=None),
        headed=bool(pytestconfig.getoption("headed", default=False)),
        base_url=pytestconfig.getoption("base_url", default=None),
    )


@pytest.fixture
def browser_name(request: FixtureRequest, framework_config: FrameworkSettings) -> str:
    """Configured browser, unless a test parametrizes this fixture indirectly."""
    return getattr(request, "param", framework_config.default_browser.value)


@pytest_asyncio.fixture
async def browser_manager(
    request: FixtureRequest,
    framework_config: FrameworkSettings,
    browser_name: str,
) -> AsyncGenerator[BrowserManager, None]:
    """
    Start a browser for one test and always tear it down afterwards.

    A failed test gets a screenshot before the browser closes; its path is
    attached to the test's ``user_properties``.
    """
    manager = BrowserManager(framework_config)
    try:
        await manager.start(browser_name)
        await manager.open_base_url_if_blank()
    except Exception as e:
        try:
            await manager.quit()
        except WebDriverError as quit_error:
            logger.warning(f"Cleanup after failed browser setup raised: {quit_error}")
        raise TestSetupError(
            f"Failed to set up browser for test: {request.node.name}",
            component="BrowserSetup",
            cause=e,
        ) from e

    try:
        yield manager
        rep_call = getattr(request.node, "rep_call", None)
        if rep_call is not None and rep_call.failed and framework_config.screenshot_enabled:
            path = await take_screenshot(
                manager.page, request.node.name, framework_config.screenshot_dir
            )
            if path is not None:
                request.node.user_properties.append(("screenshot", str(path)))
                logger.info(f"Screenshot for failed test {request.node.name}: {path}")
    finally:
        await manager.quit()


@pytest.fixture
def page(browser_manager: BrowserManager) -> Page:
    return browser_manager.page


@pytest.fixture
def pages(page: Page, framework_config: FrameworkSettings) -> PageObjectManager:
    return PageObjectManager(
        page, framework_config.base_url, framework_config.explicit_timeout_ms
    )


@pytest.fixture(scope="class")
def person() -> PersonData:
    """Generated once per test class; treat as read-only."""
    return PersonData.generate()
