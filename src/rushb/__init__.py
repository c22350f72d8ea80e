"""rushb - Nested, colorized check suites on top of a host test reporter."""

from .config import SuiteSettings
from .outcomes import AbortSignal, RunAborted, Severity, fail, fatal
from .printer import Printer, Style
from .reporting import RecordingReporter, Reporter
from .suite import RunSummary, Suite
from .version import __version__


__all__ = [
    # Core
    "Suite",
    "RunSummary",
    # Outcomes
    "AbortSignal",
    "RunAborted",
    "Severity",
    "fail",
    "fatal",
    # Output
    "Printer",
    "Style",
    "SuiteSettings",
    # Reporting
    "Reporter",
    "RecordingReporter",
    "__version__",
]
