"""Tests for the rushb_suite pytest fixture."""

import logging

import pytest

from rushb.pytest_plugin import PytestReporter


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setenv("RUSHB_COLOR", "false")
    monkeypatch.delenv("RUSHB_WIDTH", raising=False)


class TestPytestReporter:
    def test_records_failures(self):
        reporter = PytestReporter()
        reporter.record_failure("first")
        reporter.record_failure("second")

        assert reporter.failures == ["first", "second"]

    def test_fatal_failure_fails_test(self):
        with pytest.raises(pytest.fail.Exception, match="boom"):
            PytestReporter().record_fatal_failure("boom")

    def test_logs_failures(self, caplog):
        caplog.set_level(logging.DEBUG, logger="rushb.pytest_plugin")
        reporter = PytestReporter()

        reporter.record_failure("soft")
        with pytest.raises(pytest.fail.Exception):
            reporter.record_fatal_failure("boom")

        messages = [record.getMessage() for record in caplog.records]
        assert "Recorded failure: soft" in messages
        assert "Recorded fatal failure: boom" in messages


class TestFixture:
    def test_passing_run(self, pytester):
        pytester.makepyfile(
            """
            def test_run(rushb_suite):
                rushb_suite.start("Group", lambda: rushb_suite.check("works", lambda s: None))
                assert rushb_suite.passed == 1
            """
        )

        result = pytester.runpytest("-s")

        result.assert_outcomes(passed=1)
        assert "[Done] works" in result.stdout.str()
        assert "Passed: 1" in result.stdout.str()

    def test_recoverable_failures_fail_after_body(self, pytester):
        pytester.makepyfile(
            """
            def test_run(rushb_suite):
                def body():
                    rushb_suite.check("first", lambda s: s.fail("first failure"))
                    rushb_suite.check("second", lambda s: "second failure")
                    rushb_suite.check("third", lambda s: None)

                rushb_suite.start("Group", body)
                assert rushb_suite.failed == 2
                assert rushb_suite.passed == 1
            """
        )

        result = pytester.runpytest()

        result.assert_outcomes(failed=1)
        result.stdout.fnmatch_lines(["*first failure*", "*second failure*"])

    def test_fatal_failure_stops_test(self, pytester):
        pytester.makepyfile(
            """
            executed = []

            def test_run(rushb_suite):
                def body():
                    rushb_suite.critical("explode", lambda s: s.fatal("boom"))
                    executed.append("after")

                rushb_suite.start("Group", body)

            def test_nothing_ran_after_abort():
                assert executed == []
            """
        )

        result = pytester.runpytest()

        result.assert_outcomes(failed=1, passed=1)
        result.stdout.fnmatch_lines(["*boom*"])
        assert "=== FINISHED" in result.stdout.str()

    def test_tests_without_fixture_are_untouched(self, pytester):
        pytester.makepyfile(
            """
            def test_plain():
                assert True
            """
        )

        result = pytester.runpytest()

        result.assert_outcomes(passed=1)
