"""
pytest integration: command-line options, markers, failure artefacts, run
statistics and parallel execution settings.

Loaded from the root ``conftest.py`` through ``pytest_plugins``.
"""

import logging
import threading
from collections import Counter
from typing import Generator, NamedTuple

import pytest
from _pytest.reports import TestReport
from _pytest.runner import CallInfo

from demoqa.config import FrameworkSettings, get_settings
from demoqa.enums import BrowserType, SeverityLevel, TestType
from demoqa.error_handler import log_exception_with_stack_trace, user_friendly_message
from demoqa.exceptions import (
    ConfigurationError,
    FrameworkError,
    TestSetupError,
    WebDriverError,
)
from demoqa.logging_utils import configure_logging, log_framework_error, remove_handlers
from demoqa.utils.screenshots import cleanup_old_screenshots

# Fixtures exposed to every test through this plugin
from demoqa.fixtures import (  # noqa: F401
    browser_manager,
    browser_name,
    framework_config,
    page,
    pages,
    person,
)

logger = logging.getLogger(__name__)


class StatisticsSnapshot(NamedTuple):
    started: int
    finished: int
    passed: int
    failed: int
    skipped: int
    success_rate: float


def class_name_of(nodeid: str) -> str:
    """``tests/e2e/test_x.py::TestX::test_y[chrome]`` -> ``TestX``; module path for bare functions."""
    parts = nodeid.split("::")
    return parts[-2] if len(parts) > 2 else parts[0]


class ExecutionStatistics:
    """Thread-safe run counters. Observational only; they never affect outcomes."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.reset()

    def reset(self) -> None:
        with self._lock:
            self.started = 0
            self.finished = 0
            self.passed = 0
            self.failed = 0
            self.skipped = 0
            self.class_counts: Counter = Counter()
            self.test_counts: Counter = Counter()

    def on_test_start(self, nodeid: str) -> None:
        with self._lock:
            self.started += 1
            self.class_counts[class_name_of(nodeid)] += 1
            self.test_counts[nodeid] += 1
        logger.info("=== Test Started ===")
        logger.info(f"Test: {nodeid}")

    def on_test_finish(self, nodeid: str, outcome: str) -> None:
        with self._lock:
            self.finished += 1
            if outcome == "passed":
                self.passed += 1
            elif outcome == "failed":
                self.failed += 1
            else:
                self.skipped += 1
        banner = {"passed": "Passed", "failed": "Failed"}.get(outcome, "Skipped")
        log = logger.error if outcome == "failed" else logger.info
        log(f"=== Test {banner} ===")
        log(f"Test: {nodeid}")

    @property
    def success_rate(self) -> float:
        """Percentage of finished tests that passed."""
        if self.finished == 0:
            return 0.0
        return self.passed / self.finished * 100

    def current_statistics(self) -> StatisticsSnapshot:
        with self._lock:
            return StatisticsSnapshot(
                started=self.started,
                finished=self.finished,
                passed=self.passed,
                failed=self.failed,
                skipped=self.skipped,
                success_rate=self.success_rate,
            )

    # Hooks; the instance is registered as a plugin in pytest_configure

    def pytest_runtest_logstart(self, nodeid: str) -> None:
        self.on_test_start(nodeid)

    def pytest_runtest_logreport(self, report: TestReport) -> None:
        # A test finishes in its call phase, or in setup when it never got further
        if report.when == "call" or (report.when == "setup" and not report.passed):
            self.on_test_finish(report.nodeid, report.outcome)

    def log_summary(self) -> None:
        stats = self.current_statistics()
        logger.info("=== Test Suite Finished ===")
        logger.info(f"Total tests started: {stats.started}")
        logger.info(f"Total tests finished: {stats.finished}")
        logger.info(f"Passed: {stats.passed}")
        logger.info(f"Failed: {stats.failed}")
        logger.info(f"Skipped: {stats.skipped}")
        logger.info(f"Success rate: {stats.success_rate:.2f}%")


def log_failure_details(error: BaseException, nodeid: str) -> None:
    """Log a failed test's exception with detail matching its kind."""
    if isinstance(error, TestSetupError):
        logger.error(f"Test setup failed for {nodeid}: {error.message}")
    elif isinstance(error, WebDriverError):
        logger.error(f"WebDriver failure in {nodeid}: {error.message}")
    elif isinstance(error, ConfigurationError):
        logger.error(f"Configuration failure in {nodeid}: {error.message}")
    elif isinstance(error, FrameworkError):
        logger.error(f"Framework failure in {nodeid}: {user_friendly_message(error)}")
    else:
        log_exception_with_stack_trace(error, nodeid)
        return
    log_framework_error(logger, error)


statistics_key = pytest.StashKey[ExecutionStatistics]()
settings_key = pytest.StashKey[FrameworkSettings]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("demoqa", "DemoQA UI tests")
    group.addoption(
        "--browser",
        action="store",
        default=None,
        choices=[browser.value for browser in BrowserType],
        help="Browser to run against (default: browser.default from config)",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Show the browser window regardless of browser.headless",
    )
    group.addoption(
        "--base-url",
        action="store",
        dest="base_url",
        default=None,
        help="Override base.url from config",
    )


def _load_settings(config: pytest.Config) -> FrameworkSettings:
    if settings_key not in config.stash:
        try:
            config.stash[settings_key] = get_settings()
        except ConfigurationError as e:
            raise pytest.UsageError(user_friendly_message(e)) from e
    return config.stash[settings_key]


@pytest.hookimpl(tryfirst=True)
def pytest_cmdline_main(config: pytest.Config) -> None:
    """Turn on pytest-xdist with parallel.threadCount workers when configured."""
    if not config.pluginmanager.hasplugin("xdist"):
        return
    if hasattr(config, "workerinput") or config.getoption("numprocesses", None) is not None:
        return
    settings = _load_settings(config)
    if not settings.parallel_enabled:
        return
    config.option.numprocesses = settings.parallel_thread_count
    if config.getoption("dist", "no") == "no":
        config.option.dist = "load"


def pytest_configure(config: pytest.Config) -> None:
    settings = _load_settings(config)
    configure_logging(settings.log_level, settings.log_file)

    config.addinivalue_line("markers", "e2e: tests that drive a real browser against the site")
    config.addinivalue_line(
        "markers",
        "severity(level): impact of a failure ("
        + ", ".join(level.value for level in SeverityLevel)
        + ")",
    )
    for test_type in TestType:
        config.addinivalue_line("markers", f"{test_type.marker_name}: {test_type.tag} tests")

    statistics = ExecutionStatistics()
    config.stash[statistics_key] = statistics
    config.pluginmanager.register(statistics, "demoqa-statistics")


def pytest_sessionstart(session: pytest.Session) -> None:
    config = session.config
    if hasattr(config, "workerinput"):
        return
    logger.info("=== Test Suite Started ===")
    settings = _load_settings(config)
    cleanup_old_screenshots(settings.screenshot_retention_days, settings.screenshot_dir)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(
    item: pytest.Item, call: CallInfo[None]
) -> Generator[None, None, None]:
    """Keep each phase's report on the item so fixtures can see the outcome."""
    outcome = yield
    rep: TestReport = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)
    if rep.failed and call.excinfo is not None:
        log_failure_details(call.excinfo.value, item.nodeid)


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:
    if hasattr(session.config, "workerinput"):
        return
    statistics = session.config.stash.get(statistics_key, None)
    if statistics is not None:
        statistics.log_summary()


def pytest_unconfigure(config: pytest.Config) -> None:
    remove_handlers()
