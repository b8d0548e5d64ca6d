"""Screenshot capture and housekeeping. Failures are logged, never raised."""

import logging
import re
import time
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

logger = logging.getLogger(__name__)

DEFAULT_SCREENSHOT_DIR = "screenshots"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def sanitize_name(test_name: str) -> str:
    """Make a test name usable as a file name (``test[chrome]`` -> ``test_chrome_``)."""
    return _UNSAFE_CHARS.sub("_", test_name) or "screenshot"


async def take_screenshot(
    page: Page,
    test_name: str,
    directory: Union[str, Path] = DEFAULT_SCREENSHOT_DIR,
) -> Optional[Path]:
    """
    Save a full-page PNG named ``<test_name>_<timestamp>.png``.

    Returns:
        Path of the written file, or None when capturing failed
    """
    timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
    path = Path(directory) / f"{sanitize_name(test_name)}_{timestamp}.png"
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        await page.screenshot(path=str(path), full_page=True)
    except (PlaywrightError, OSError) as e:
        logger.error(f"Failed to take screenshot for test: {test_name}: {e}")
        return None
    logger.info(f"Screenshot saved: {path}")
    return path


async def take_screenshot_as_bytes(page: Page) -> bytes:
    try:
        return await page.screenshot(full_page=True)
    except PlaywrightError as e:
        logger.error(f"Failed to take screenshot as bytes: {e}")
        return b""


def cleanup_old_screenshots(
    days_to_keep: int, directory: Union[str, Path] = DEFAULT_SCREENSHOT_DIR
) -> int:
    """Delete PNGs last modified more than ``days_to_keep`` days ago."""
    screenshot_dir = Path(directory)
    if not screenshot_dir.is_dir():
        return 0

    cutoff = time.time() - days_to_keep * 24 * 60 * 60
    deleted = 0
    for path in screenshot_dir.glob("*.png"):
        try:
            if path.stat().st_mtime < cutoff:
                path.unlink()
                deleted += 1
        except OSError as e:
            logger.warning(f"Could not delete old screenshot {path}: {e}")

    if deleted:
        logger.info(f"Cleaned up {deleted} old screenshots")
    return deleted
