"""Centralised exception handling and error reporting helpers."""

import logging
import traceback
from typing import NoReturn

from demoqa.exceptions import (
    ConfigurationError,
    FrameworkError,
    TestSetupError,
    WebDriverError,
)
from demoqa.logging_utils import log_framework_error

logger = logging.getLogger(__name__)

MAX_LOGGED_FRAMES = 10


def handle_framework_error(error: FrameworkError) -> NoReturn:
    """Log a framework error with its context and re-raise it."""
    logger.error(f"Framework Exception: {error.error_code} in {error.component}")
    log_framework_error(logger, error)
    raise error


def handle_test_setup_error(error: TestSetupError) -> NoReturn:
    logger.error(f"Test Setup Exception in {error.component}: {error.message}")
    log_framework_error(logger, error)
    raise error


def handle_webdriver_error(error: WebDriverError) -> NoReturn:
    logger.error(f"WebDriver Exception in {error.component}: {error.message}")
    log_framework_error(logger, error)
    raise error


def handle_configuration_error(error: ConfigurationError) -> NoReturn:
    logger.error(f"Configuration Exception in {error.component}: {error.message}")
    log_framework_error(logger, error)
    raise error


def handle_generic_error(error: Exception, context: str) -> NoReturn:
    """
    Log an arbitrary exception and re-raise it as a framework error.

    Framework errors are re-raised unchanged; anything else is wrapped into a
    ``FrameworkError`` with code ``GENERIC_ERROR`` and the context as component.
    """
    logger.error(f"Generic Exception in {context}: {error}")
    logger.error(f"Exception Type: {type(error).__name__}")
    if isinstance(error, FrameworkError):
        raise error
    raise FrameworkError(
        f"Unexpected error in {context}: {error}",
        error_code="GENERIC_ERROR",
        component=context,
        cause=error,
    ) from error


def is_recoverable(error: BaseException) -> bool:
    """Configuration and browser errors may clear up on retry; setup errors do not."""
    return isinstance(error, (ConfigurationError, WebDriverError))


def user_friendly_message(error: BaseException) -> str:
    if isinstance(error, FrameworkError):
        return f"Error in {error.component}: {error.message}"
    return f"An unexpected error occurred: {error}"


def log_exception_with_stack_trace(error: BaseException, context: str) -> None:
    """Log the exception type, message and the innermost frames of its traceback."""
    frames = traceback.extract_tb(error.__traceback__)
    logger.error(f"=== Exception Details for {context} ===")
    logger.error(f"Exception Type: {type(error).__module__}.{type(error).__name__}")
    logger.error(f"Exception Message: {error}")
    logger.error("Stack Trace:")
    for frame in frames[:MAX_LOGGED_FRAMES]:
        logger.error(f"  at {frame.name} ({frame.filename}:{frame.lineno})")
    if len(frames) > MAX_LOGGED_FRAMES:
        logger.error(f"  ... and {len(frames) - MAX_LOGGED_FRAMES} more lines")
    logger.error("=== End Exception Details ===")
