"""
Re-running of flaky tests.

``RetryAnalyzer`` decides whether a failed test gets another attempt;
``retry_on_failure`` wraps a sync or async test function and consults a fresh
analyzer for every decorated call.
"""

import asyncio
import functools
import logging
from typing import Awaitable, Callable, Optional, ParamSpec, TypeVar, Union

from _pytest.outcomes import OutcomeException

from demoqa.config import get_config
from demoqa.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

DEFAULT_MAX_RETRY_COUNT = 2


def _configured_max_retry_count() -> int:
    try:
        return get_config().get_retry_max_count()
    except ConfigurationError as e:
        logger.warning(
            f"Could not read retry.maxCount, using {DEFAULT_MAX_RETRY_COUNT}: {e}"
        )
        return DEFAULT_MAX_RETRY_COUNT


class RetryAnalyzer:
    """Per-test retry counter."""

    def __init__(self, max_retry_count: Optional[int] = None) -> None:
        if max_retry_count is None:
            max_retry_count = _configured_max_retry_count()
        self._max_retry_count = max(0, max_retry_count)
        self._retry_count = 0

    def retry(self, test_name: str) -> bool:
        """Return True, and count the attempt, while retries remain."""
        if self._retry_count < self._max_retry_count:
            self._retry_count += 1
            logger.warning(
                f"Retrying test '{test_name}' - Attempt "
                f"{self._retry_count + 1}/{self._max_retry_count + 1}"
            )
            return True
        logger.error(
            f"Test '{test_name}' failed after {self._max_retry_count + 1} attempts"
        )
        return False

    @property
    def retry_count(self) -> int:
        return self._retry_count

    @property
    def max_retry_count(self) -> int:
        return self._max_retry_count

    def reset(self) -> None:
        self._retry_count = 0


def _retry_sync(
    func: Callable[P, T], analyzer_factory: Callable[[], RetryAnalyzer]
) -> Callable[P, T]:
    @functools.wraps(func)
    def sync_wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        analyzer = analyzer_factory()
        while True:
            try:
                return func(*args, **kwargs)
            except OutcomeException:
                # skip/xfail/fail() outcomes are decisions, not flakiness
                raise
            except Exception as e:
                logger.warning(f"Test {func.__name__} failed: {e}")
                if not analyzer.retry(func.__name__):
                    raise

    return sync_wrapper


def _retry_async(
    func: Callable[P, Awaitable[T]], analyzer_factory: Callable[[], RetryAnalyzer]
) -> Callable[P, Awaitable[T]]:
    @functools.wraps(func)
    async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        analyzer = analyzer_factory()
        while True:
            try:
                return await func(*args, **kwargs)
            except OutcomeException:
                raise
            except Exception as e:
                logger.warning(f"Test {func.__name__} failed: {e}")
                if not analyzer.retry(func.__name__):
                    raise

    return async_wrapper


def retry_on_failure(
    analyzer_factory: Callable[[], RetryAnalyzer] = RetryAnalyzer,
) -> Callable[
    [Callable[P, Union[T, Awaitable[T]]]], Callable[P, Union[T, Awaitable[T]]]
]:
    """Decorator that re-runs a failing test while its analyzer allows it."""

    def decorator(
        func: Callable[P, Union[T, Awaitable[T]]]
    ) -> Callable[P, Union[T, Awaitable[T]]]:
        if asyncio.iscoroutinefunction(func):
            return _retry_async(func, analyzer_factory)
        return _retry_sync(func, analyzer_factory)

    return decorator
