"""Tests for the pytest plugin: statistics, failure logging and run configuration."""

import logging
import os
import threading
import time
from unittest.mock import MagicMock, patch

import pytest

from demoqa.config import FrameworkSettings
from demoqa.exceptions import ConfigurationError, TestSetupError, WebDriverError
from demoqa.plugin import (
    ExecutionStatistics,
    class_name_of,
    log_failure_details,
    pytest_cmdline_main,
    pytest_sessionstart,
    settings_key,
)

PLUGIN_ARGS = ("-p", "demoqa.plugin", "-p", "no:xdist")


class TestExecutionStatistics:
    def test_counts_outcomes(self) -> None:
        statistics = ExecutionStatistics()
        for nodeid, outcome in [
            ("t.py::TestA::test_1", "passed"),
            ("t.py::TestA::test_2", "failed"),
            ("t.py::test_3", "skipped"),
            ("t.py::TestA::test_1", "passed"),
        ]:
            statistics.on_test_start(nodeid)
            statistics.on_test_finish(nodeid, outcome)

        stats = statistics.current_statistics()
        assert (stats.started, stats.finished) == (4, 4)
        assert (stats.passed, stats.failed, stats.skipped) == (2, 1, 1)
        assert stats.success_rate == 50.0
        assert statistics.class_counts["TestA"] == 3
        assert statistics.class_counts["t.py"] == 1
        assert statistics.test_counts["t.py::TestA::test_1"] == 2

    def test_success_rate_without_tests(self) -> None:
        assert ExecutionStatistics().success_rate == 0.0

    def test_reset(self) -> None:
        statistics = ExecutionStatistics()
        statistics.on_test_start("t.py::test_1")
        statistics.on_test_finish("t.py::test_1", "passed")

        statistics.reset()

        assert statistics.current_statistics().finished == 0
        assert not statistics.test_counts

    def test_concurrent_updates(self) -> None:
        statistics = ExecutionStatistics()

        def worker() -> None:
            for _ in range(200):
                statistics.on_test_start("t.py::test_x")
                statistics.on_test_finish("t.py::test_x", "passed")

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert statistics.current_statistics().passed == 800
        assert statistics.test_counts["t.py::test_x"] == 800

    def test_summary_formats_success_rate(self, caplog: pytest.LogCaptureFixture) -> None:
        statistics = ExecutionStatistics()
        for outcome in ("passed", "passed", "failed"):
            statistics.on_test_finish("t.py::test", outcome)

        with caplog.at_level(logging.INFO, logger="demoqa"):
            statistics.log_summary()

        assert "Success rate: 66.67%" in caplog.text


def test_class_name_of() -> None:
    assert class_name_of("tests/e2e/test_links.py::TestLinks::test_api[chrome]") == "TestLinks"
    assert class_name_of("tests/unit/test_enums.py::test_severity_values") == "tests/unit/test_enums.py"


class TestFailureDetails:
    @pytest.mark.parametrize(
        "error,expected",
        [
            (TestSetupError("no page"), "Test setup failed for t::x: no page"),
            (WebDriverError("crashed"), "WebDriver failure in t::x: crashed"),
            (ConfigurationError("bad key"), "Configuration failure in t::x: bad key"),
        ],
    )
    def test_framework_errors(
        self, error: Exception, expected: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="demoqa"):
            log_failure_details(error, "t::x")

        assert expected in caplog.text
        assert "error_code=" in caplog.text

    def test_other_errors_log_stack_trace(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="demoqa"):
            log_failure_details(AssertionError("mismatch"), "t::x")

        assert "=== Exception Details for t::x ===" in caplog.text


def _fake_config(settings: FrameworkSettings, numprocesses: object = None) -> MagicMock:
    config = MagicMock(spec=["pluginmanager", "getoption", "option", "stash"])
    config.stash = pytest.Stash()
    config.stash[settings_key] = settings
    config.pluginmanager.hasplugin.return_value = True
    config.option.numprocesses = numprocesses
    config.option.dist = "no"
    config.getoption.side_effect = lambda name, default=None: getattr(config.option, name, default)
    return config


class TestParallelConfiguration:
    def test_enables_xdist_workers(self) -> None:
        config = _fake_config(FrameworkSettings(parallel_enabled=True, parallel_thread_count=3))

        pytest_cmdline_main(config)

        assert config.option.numprocesses == 3
        assert config.option.dist == "load"

    def test_explicit_n_wins(self) -> None:
        config = _fake_config(FrameworkSettings(parallel_enabled=True), numprocesses=2)

        pytest_cmdline_main(config)

        assert config.option.numprocesses == 2

    def test_explicit_zero_workers_wins(self) -> None:
        config = _fake_config(FrameworkSettings(parallel_enabled=True), numprocesses=0)

        pytest_cmdline_main(config)

        assert config.option.numprocesses == 0

    def test_disabled(self) -> None:
        config = _fake_config(FrameworkSettings(parallel_enabled=False))

        pytest_cmdline_main(config)

        assert config.option.numprocesses is None

    def test_without_xdist(self) -> None:
        config = _fake_config(FrameworkSettings(parallel_enabled=True))
        config.pluginmanager.hasplugin.return_value = False

        pytest_cmdline_main(config)

        assert config.option.numprocesses is None


class TestPluginInSession:
    def test_markers_statistics_and_reports(self, pytester: pytest.Pytester) -> None:
        pytester.makepyfile(
            """
            import pytest
            from demoqa.plugin import statistics_key

            @pytest.mark.smoke
            @pytest.mark.state_transition
            @pytest.mark.severity("critical")
            def test_a_passes():
                pass

            def test_b_fails():
                assert 1 == 2

            def test_c_skipped():
                pytest.skip("not today")

            @pytest.fixture
            def check_report(request):
                yield
                assert request.node.rep_call.passed

            def test_d_statistics(request, check_report):
                stats = request.config.stash[statistics_key].current_statistics()
                assert (stats.passed, stats.failed, stats.skipped) == (1, 1, 1)
                assert stats.started == 4
            """
        )

        result = pytester.runpytest(*PLUGIN_ARGS, "--strict-markers")

        result.assert_outcomes(passed=2, failed=1, skipped=1)

    def test_options_are_registered(self, pytester: pytest.Pytester) -> None:
        pytester.makepyfile(
            """
            def test_options(pytestconfig, framework_config, browser_name):
                assert pytestconfig.getoption("browser") == "firefox"
                assert pytestconfig.getoption("headed") is True
                assert framework_config.base_url == "https://example.test/"
                assert framework_config.headless is False
                assert browser_name == "firefox"
            """
        )

        result = pytester.runpytest(
            *PLUGIN_ARGS, "--browser", "firefox", "--headed", "--base-url", "https://example.test"
        )

        result.assert_outcomes(passed=1)

    def test_unknown_browser_option_is_rejected(self, pytester: pytest.Pytester) -> None:
        pytester.makepyfile("def test_x(): pass")

        result = pytester.runpytest(*PLUGIN_ARGS, "--browser", "opera")

        assert result.ret != 0

    def test_session_start_removes_expired_screenshots(
        self, pytester: pytest.Pytester, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        screenshot_dir = pytester.mkdir("shots")
        expired = screenshot_dir / "old_test_20200101_000000.png"
        fresh = screenshot_dir / "new_test_20990101_000000.png"
        expired.write_bytes(b"png")
        fresh.write_bytes(b"png")
        ten_days_ago = time.time() - 10 * 24 * 60 * 60
        os.utime(expired, (ten_days_ago, ten_days_ago))
        monkeypatch.setenv("DEMOQA_SCREENSHOT_DIR", str(screenshot_dir))
        monkeypatch.setenv("DEMOQA_SCREENSHOT_RETENTIONDAYS", "7")
        pytester.makepyfile("def test_x(): pass")

        result = pytester.runpytest(*PLUGIN_ARGS)

        result.assert_outcomes(passed=1)
        assert not expired.exists()
        assert fresh.exists()

    def test_session_start_skips_cleanup_on_workers(self) -> None:
        session = MagicMock()
        session.config.workerinput = {"workerid": "gw0"}

        with patch("demoqa.plugin.cleanup_old_screenshots") as cleanup:
            pytest_sessionstart(session)

        cleanup.assert_not_called()
