"""Pytest integration.

Provides the ``rushb_suite`` fixture: a ``Suite`` whose reporter is the running
pytest test. Failures recorded by ``Suite.check`` fail the test once its body
returns; fatal failures fail it immediately through ``pytest.fail``.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from dataclasses import dataclass, field

import pytest

from rushb.config import SuiteSettings
from rushb.printer import Printer
from rushb.suite import Suite


logger = logging.getLogger(__name__)


@dataclass
class PytestReporter:
    """Reporter backed by the currently running pytest test."""

    failures: list[str] = field(default_factory=list)

    def record_failure(self, message: str) -> None:
        logger.debug("Recorded failure: %s", message)
        self.failures.append(message)

    def record_fatal_failure(self, message: str) -> None:
        logger.debug("Recorded fatal failure: %s", message)
        pytest.fail(message, pytrace=False)


_REPORTER_KEY = pytest.StashKey[PytestReporter]()


@pytest.fixture
def rushb_suite(request: pytest.FixtureRequest) -> Suite:
    """A suite reporting to the requesting test."""
    reporter = PytestReporter()
    request.node.stash[_REPORTER_KEY] = reporter
    return Suite(reporter, Printer.from_settings(SuiteSettings()))


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item: pytest.Item) -> Generator[None, object, object]:
    result = yield
    reporter = item.stash.get(_REPORTER_KEY, None)
    if reporter is not None and reporter.failures:
        pytest.fail("\n".join(reporter.failures), pytrace=False)
    return result
