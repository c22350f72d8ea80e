"""Host reporting facility interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """System of record for check failures.

    ``record_failure`` logs a failure and lets the run continue.
    ``record_fatal_failure`` logs a failure and terminates the run; it may raise
    its own exception to do so; otherwise the suite raises ``RunAborted`` right
    after it returns.
    """

    def record_failure(self, message: str) -> None: ...

    def record_fatal_failure(self, message: str) -> None: ...


@dataclass
class RecordingReporter:
    """Reporter that keeps every recorded failure in memory.

    Attributes:
    ----------
    failures : list[str]
        Messages recorded as non-fatal failures, in order.
    fatal_failures : list[str]
        Messages recorded as fatal failures. Holds at most one entry per run,
        since the suite stops after the first.
    """

    failures: list[str] = field(default_factory=list)
    fatal_failures: list[str] = field(default_factory=list)

    def record_failure(self, message: str) -> None:
        self.failures.append(message)

    def record_fatal_failure(self, message: str) -> None:
        self.fatal_failures.append(message)

    @property
    def failed(self) -> bool:
        return bool(self.failures or self.fatal_failures)
