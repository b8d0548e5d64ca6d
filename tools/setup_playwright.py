#!/usr/bin/env python3
"""
Install the Playwright browsers the test run needs.

Usage: python tools/setup_playwright.py [chrome|firefox|edge|safari ...]
Without arguments the browser from the loaded configuration is installed.
"""

import subprocess
import sys
from typing import List, NoReturn

from demoqa.config import get_settings
from demoqa.enums import BrowserType


def install_targets(browser_names: List[str]) -> List[str]:
    """Playwright install names for the given browsers, without duplicates."""
    targets: List[str] = []
    for name in browser_names:
        browser = BrowserType.from_string(name)
        target = browser.channel or browser.engine
        if target not in targets:
            targets.append(target)
    return targets


def main(argv: List[str]) -> NoReturn:
    names = argv or [get_settings().default_browser.value]
    try:
        targets = install_targets(names)
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(2)

    try:
        result = subprocess.run(
            ["playwright", "install", *targets],
            check=True,
            capture_output=True,
            text=True,
        )
        print(f"✅ Playwright browsers installed successfully: {', '.join(targets)}")
        print(result.stdout)
        sys.exit(0)
    except subprocess.CalledProcessError as e:
        print(f"❌ Failed to install Playwright browsers: {e}")
        print(f"stdout: {e.stdout}")
        print(f"stderr: {e.stderr}")
        sys.exit(1)
    except FileNotFoundError:
        print("❌ playwright command not found. Make sure playwright is installed.")
        sys.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
