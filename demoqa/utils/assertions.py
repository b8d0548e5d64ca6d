"""
Assertions that re-check a condition before failing.

UI state often settles a moment after an action; ``assert_true`` and
``assert_equals`` poll their subject at a fixed interval instead of failing on
the first look. The subject may be a value, a zero-argument callable, or a
zero-argument coroutine function, and is re-evaluated on every attempt.
"""

import asyncio
import inspect
import logging
from typing import Awaitable, Callable, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")

Subject = Union[T, Callable[[], T], Callable[[], Awaitable[T]]]

DEFAULT_INTERVAL = 0.5


async def _evaluate(subject: Subject) -> object:
    value = subject() if callable(subject) else subject
    if inspect.isawaitable(value):
        value = await value
    return value


async def assert_true(
    condition: Subject,
    message: str,
    max_attempts: int = 1,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """Fail with ``message`` unless ``condition`` becomes truthy within ``max_attempts``."""
    attempts = max(1, max_attempts)
    for attempt in range(1, attempts + 1):
        if await _evaluate(condition):
            return
        logger.warning(f"Assertion failed on attempt {attempt}: {message}")
        if attempt < attempts:
            await asyncio.sleep(interval)
    raise AssertionError(message)


async def assert_equals(
    actual: Subject,
    expected: object,
    message: str,
    max_attempts: int = 1,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """
    Fail unless ``actual`` equals ``expected`` within ``max_attempts``.

    The raised message is prefixed with the number of attempts and carries
    the last observed value.
    """
    attempts = max(1, max_attempts)
    value: object = None
    for attempt in range(1, attempts + 1):
        value = await _evaluate(actual)
        if value == expected:
            return
        logger.warning(f"Assertion failed on attempt {attempt}: {message}")
        if attempt < attempts:
            await asyncio.sleep(interval)
    raise AssertionError(
        f"After {attempts} attempts: {message} (expected: {expected!r}, actual: {value!r})"
    )


def assert_false(condition: object, message: str) -> None:
    if condition:
        raise AssertionError(message)


def assert_not_equals(actual: object, unexpected: object, message: str) -> None:
    if actual == unexpected:
        raise AssertionError(f"{message} (both were {actual!r})")


def assert_not_none(value: Optional[object], message: str) -> None:
    if value is None:
        raise AssertionError(message)
