"""Enumerations shared by the framework and the test suites."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional


class BrowserType(str, Enum):
    """Browsers a test session can be started with."""

    CHROME = "chrome"
    FIREFOX = "firefox"
    EDGE = "edge"
    SAFARI = "safari"

    @classmethod
    def from_string(cls, text: str) -> BrowserType:
        """Resolve a browser name case-insensitively."""
        normalized = text.strip().lower()
        for browser_type in cls:
            if browser_type.value == normalized:
                return browser_type
        raise ValueError(f"No browser type found with value: {text}")

    @property
    def engine(self) -> str:
        """Playwright engine that drives this browser."""
        return _ENGINES[self]

    @property
    def channel(self) -> Optional[str]:
        """Playwright channel, for branded builds of an engine."""
        return _CHANNELS.get(self)


_ENGINES = {
    BrowserType.CHROME: "chromium",
    BrowserType.FIREFOX: "firefox",
    BrowserType.EDGE: "chromium",
    BrowserType.SAFARI: "webkit",
}

_CHANNELS = {
    BrowserType.EDGE: "msedge",
}


class SeverityLevel(str, Enum):
    """Business impact of a failing test."""

    BLOCKER = "blocker"
    CRITICAL = "critical"
    NORMAL = "normal"
    MINOR = "minor"
    TRIVIAL = "trivial"


class TestType(Enum):
    """Test categories, exposed to pytest as markers."""

    __test__ = False

    SMOKE = "@smoke"
    REGRESSION = "@regression"
    INTEGRATION = "@integration"
    GUI = "@gui"
    NEGATIVE = "@negative"
    POSITIVE = "@positive"
    CRUD = "@crud"
    BOUNDARY = "@boundary"
    STATE_TRANSITION = "@state-transition"
    NO_PROD = "@no-prod"
    UI = "@ui"
    API = "@api"

    @property
    def tag(self) -> str:
        return self.value

    @property
    def tag_without_symbol(self) -> str:
        return self.value[1:]

    @property
    def marker_name(self) -> str:
        """Name usable as a pytest marker (no hyphens)."""
        return self.tag_without_symbol.replace("-", "_")

    @classmethod
    def from_tag(cls, tag: str) -> Optional[TestType]:
        for test_type in cls:
            if test_type.value == tag:
                return test_type
        return None

    @classmethod
    def from_tag_without_symbol(cls, tag: str) -> Optional[TestType]:
        return cls.from_tag("@" + tag)

    @classmethod
    def is_valid_tag(cls, tag: str) -> bool:
        return cls.from_tag(tag) is not None

    @classmethod
    def all_tags(cls) -> List[str]:
        return [test_type.value for test_type in cls]

    @classmethod
    def all_names(cls) -> List[str]:
        return [test_type.name for test_type in cls]

    def __str__(self) -> str:
        return self.value
