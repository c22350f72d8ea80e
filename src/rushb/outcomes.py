"""Check outcome control flow."""

from enum import Enum
from typing import NoReturn


class Severity(Enum):
    """How an aborted check affects the rest of the run."""

    RECOVERABLE = "recoverable"
    FATAL = "fatal"


class AbortSignal(BaseException):
    """Abort the current check.

    Raised by ``fail``, ``fatal`` and ``Suite.assert_equal`` and consumed by the
    enclosing ``Suite.check``, ``Suite.critical`` or ``Suite.try_``.
    """

    def __init__(self, severity: Severity, message: str = "") -> None:
        self.severity = severity
        self.message = message
        super().__init__(message)

    @property
    def fatal(self) -> bool:
        return self.severity is Severity.FATAL


class RunAborted(BaseException):
    """The run was terminated after a fatal failure was reported."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)


def fail(message: str = "") -> NoReturn:
    """Fail the current check and let the run continue."""
    raise AbortSignal(Severity.RECOVERABLE, message)


def fatal(message: str = "") -> NoReturn:
    """Fail the current check and terminate the run."""
    raise AbortSignal(Severity.FATAL, message)
