"""
Exception hierarchy for the test automation framework.

Every framework failure carries an error code, the component that raised it
and the moment it was raised, so listeners and log lines can report failures
in a uniform, structured way.
"""

from __future__ import annotations

import time
from typing import Dict, Optional, Union


class FrameworkError(Exception):
    """Base class for all framework failures."""

    __test__ = False

    default_error_code = "FRAMEWORK_ERROR"
    default_component = "Unknown"

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        component: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.component = component or self.default_component
        self.cause = cause
        self.timestamp = int(time.time() * 1000)  # epoch milliseconds
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> Dict[str, Union[str, int]]:
        """Structured fields for log lines and reports."""
        return {
            "error_code": self.error_code,
            "component": self.component,
            "message": self.message,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(error_code={self.error_code!r}, "
            f"component={self.component!r}, message={self.message!r}, "
            f"timestamp={self.timestamp})"
        )


class ConfigurationError(FrameworkError):
    """Property loading, parsing or validation failed."""

    default_error_code = "CONFIGURATION_ERROR"
    default_component = "Configuration"

    def __init__(
        self,
        message: str,
        *,
        component: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, component=component, cause=cause)


class WebDriverError(FrameworkError):
    """Browser start-up, navigation or teardown failed."""

    default_error_code = "WEBDRIVER_ERROR"
    default_component = "WebDriver"

    def __init__(
        self,
        message: str,
        *,
        component: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, component=component, cause=cause)


class TestSetupError(FrameworkError):
    """Preparing a test (session, navigation, page objects) failed."""

    __test__ = False

    default_error_code = "TEST_SETUP_ERROR"
    default_component = "TestSetup"

    def __init__(
        self,
        message: str,
        *,
        component: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, component=component, cause=cause)
