"""Hierarchical check orchestration."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn

from rushb import outcomes
from rushb.outcomes import AbortSignal, RunAborted
from rushb.printer import Printer, Style
from rushb.reporting import Reporter


logger = logging.getLogger(__name__)

CheckFn = Callable[["Suite"], Any]
GroupFn = Callable[[], Any]


@dataclass(frozen=True)
class RunSummary:
    """Counters of a run at one point in time."""

    passed: int = 0
    failed: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.skipped


def _describe(error: BaseException) -> str:
    text = str(error)
    return f"{type(error).__name__}: {text}" if text else type(error).__name__


def _failure_of(name: str, result: Any) -> str | None:
    """Map a check's return value to a failure message, or None on success."""
    if result is None or result is True:
        return None
    if result is False:
        return f"{name} returned False"
    return str(result) or f"{name} failed"


class Suite:
    """A run of nested groups and checks bound to a reporter.

    Groups (``start``/``title``) only organize and indent the output. Checks
    (``check``/``critical``/``skip``) update the counters and forward failures
    to the reporter. A fatal failure is forwarded with
    ``reporter.record_fatal_failure`` and the run then unwinds through
    ``RunAborted``; group cleanup still happens on the way out.

    Examples:
        suite = Suite(RecordingReporter())

        def body():
            suite.check("adds", lambda s: s.assert_equal(1 + 1, 2))
            suite.skip("later", lambda s: None)

        suite.start("math", body)
    """

    INDENT_STEP = 2

    def __init__(self, reporter: Reporter, printer: Printer | None = None) -> None:
        self.reporter = reporter
        self.printer = printer or Printer()
        self.indent = 0
        self.passed = 0
        self.failed = 0
        self.skipped = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.skipped

    def summary(self) -> RunSummary:
        return RunSummary(passed=self.passed, failed=self.failed, skipped=self.skipped)

    # Grouping

    def start(self, name: str, body: GroupFn) -> RunSummary:
        """Run ``body`` as the top-level group and print the run summary.

        The summary is printed exactly once, also when the run is aborted.
        """
        try:
            self.title(name, body)
        finally:
            self._print_summary()
        return self.summary()

    def title(self, name: str, body: GroupFn) -> None:
        """Print a group heading and run ``body`` one level deeper."""
        outer = self.indent
        self.printer.blank()
        self.printer.render(name, Style.TITLE, self.indent)
        self.printer.blank()

        self.indent += self.INDENT_STEP
        try:
            body()
        finally:
            self.indent = outer

    # Checks

    def check(self, name: str, test: CheckFn) -> None:
        """Run a single check.

        A returned failure or ``fail`` marks the check failed and the run
        continues. ``fatal``, a failed ``assert_equal`` or any other exception
        terminates the run.
        """
        try:
            result = test(self)
        except AbortSignal as signal:
            if signal.fatal:
                self._escalate(name, signal.message)
            self._record_failure(name, signal.message)
            return
        except Exception as error:
            logger.debug("Check %r raised", name, exc_info=True)
            self._escalate(name, _describe(error))

        failure = _failure_of(name, result)
        if failure is not None:
            self._record_failure(name, failure)
            return
        self._record_pass(name)

    def critical(self, name: str, test: CheckFn) -> None:
        """Run a single check whose every failure terminates the run."""
        try:
            result = test(self)
        except AbortSignal as signal:
            self._escalate(name, signal.message)
        except Exception as error:
            logger.debug("Critical check %r raised", name, exc_info=True)
            self._escalate(name, _describe(error))

        failure = _failure_of(name, result)
        if failure is not None:
            self._escalate(name, failure)
        self._record_pass(name)

    def skip(self, name: str, test: CheckFn) -> None:
        """Mark a check as skipped. ``test`` is never called."""
        self.skipped += 1
        self.printer.render(name, Style.SKIP, self.indent)

    # Signals and probes

    def fail(self, message: str) -> NoReturn:
        """Fail the running check; under ``check`` the run continues."""
        outcomes.fail(message)

    def fatal(self, message: str) -> NoReturn:
        """Fail the running check and terminate the run."""
        outcomes.fatal(message)

    def assert_equal(self, actual: Any, expected: Any) -> None:
        """Abort fatally unless ``actual == expected``."""
        if actual != expected:
            outcomes.fatal(f'Expect "{expected}", got "{actual}"')

    def try_(self, attempt: GroupFn, catch: Callable[[BaseException], Any] | None = None) -> bool:
        """Return whether ``attempt`` completes without aborting.

        The abort, if any, is handed to ``catch`` and never re-raised.
        """
        try:
            attempt()
        except (AbortSignal, Exception) as error:
            if catch is not None:
                catch(error)
            return False
        return True

    def info(self, text: str) -> None:
        self.printer.render(text, Style.INFO, self.indent)

    # Internals

    def _record_pass(self, name: str) -> None:
        self.passed += 1
        self.printer.render(name, Style.OK, self.indent)

    def _record_failure(self, name: str, message: str) -> None:
        self.failed += 1
        self.printer.render(name, Style.FAIL, self.indent)
        logger.debug("Check %r failed: %s", name, message)
        self.reporter.record_failure(message)

    def _escalate(self, name: str, message: str) -> NoReturn:
        self.failed += 1
        self.printer.render(name, Style.FAIL, self.indent)
        logger.debug("Check %r failed fatally, aborting run: %s", name, message)
        try:
            self.reporter.record_fatal_failure(message)
        except Exception as error:
            # The host ending the run must not reach an enclosing check or try_.
            raise RunAborted(message) from error
        raise RunAborted(message)

    def _print_summary(self) -> None:
        p = self.printer
        p.blank()
        p.plain("=== FINISHED", self.indent)
        p.blank()
        p.counter("Passed", self.passed, "bright_green", self.indent)
        p.counter("Failed", self.failed, "bright_red", self.indent)
        p.counter("Skiped", self.skipped, "bright_blue", self.indent)
        p.blank()
        p.counter("Total", self.total, None, self.indent)
        p.blank()
