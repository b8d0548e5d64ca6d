"""Shared mocks for page-object tests: a Playwright page whose locators never touch a browser."""

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_page() -> MagicMock:
    page = MagicMock()
    page.url = "about:blank"
    for name in ("goto", "reload", "go_back", "go_forward", "wait_for_load_state", "wait_for_url", "screenshot"):
        setattr(page, name, AsyncMock())
    page.title = AsyncMock(return_value="DEMOQA")
    page.mouse.down = AsyncMock()
    page.mouse.up = AsyncMock()
    page.keyboard.down = AsyncMock()
    page.keyboard.up = AsyncMock()
    page.keyboard.type = AsyncMock()

    locator = page.locator.return_value
    locator.first = AsyncMock()
    locator.first.locator = MagicMock()
    locator.first.locator.return_value.all_inner_texts = AsyncMock(return_value=[])
    locator.first.get_attribute = AsyncMock(return_value="")
    for name in ("all_inner_texts", "count", "is_visible", "is_enabled", "is_checked"):
        setattr(locator, name, AsyncMock())
    locator.all_inner_texts.return_value = []
    locator.count.return_value = 0
    return page


@pytest.fixture
def element(mock_page: MagicMock) -> AsyncMock:
    """The element every ``page.locator(...).first`` resolves to."""
    return mock_page.locator.return_value.first
