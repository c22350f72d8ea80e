import io

import pytest
from rich.console import Console

from rushb import Printer, RecordingReporter, Suite


pytest_plugins = ["pytester"]


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def printer(stream) -> Printer:
    """Printer writing uncolored text to ``stream``."""
    return Printer(Console(file=stream, width=200, color_system=None, highlight=False))


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def suite(reporter, printer) -> Suite:
    return Suite(reporter, printer)
