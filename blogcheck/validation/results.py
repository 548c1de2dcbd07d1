"""Diagnostic data structures.

These classes capture what each validation stage finds and aggregate it into
a report for terminal display, JSON export and the process exit code.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TextIO

from blogcheck import output


class Severity(Enum):
    """Severity level for diagnostics.

    ERROR: Blocks deployment (validation fails)
    WARNING: Non-blocking issue (validation passes with warnings)
    INFO: Contextual note (never counted)
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Outcome(Enum):
    """Terminal state of a validation run."""

    CLEAN = "clean"
    WARN = "warn"
    FAIL = "fail"

    @property
    def exit_code(self) -> int:
        """Process exit status; warnings never block deployment."""
        return 1 if self is Outcome.FAIL else 0


@dataclass(frozen=True)
class Diagnostic:
    """A single finding.

    Attributes:
        severity: How serious the finding is.
        message: Human-readable description.
        stage: Name of the stage that produced it (posts, promotions, assets).
    """

    severity: Severity
    message: str
    stage: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        d: dict[str, Any] = {
            "severity": self.severity.value,
            "message": self.message,
        }
        if self.stage is not None:
            d["stage"] = self.stage
        return d


class DiagnosticCollector:
    """Ordered log of diagnostics shared by all validation stages.

    Every recording call appends to the log and echoes the message at once,
    so the operator sees problems in the order they were found. A collector
    is created per run and passed to each stage explicitly.

    Args:
        echo: Write each message to the terminal as it is recorded.
        file: Override stream for all echoed messages (tests, --json capture).
    """

    def __init__(self, *, echo: bool = True, file: TextIO | None = None) -> None:
        self.diagnostics: list[Diagnostic] = []
        self.echo = echo
        self.file = file
        self._stage: str | None = None

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        """Tag diagnostics recorded inside the block with a stage name."""
        previous = self._stage
        self._stage = name
        try:
            yield
        finally:
            self._stage = previous

    def _record(self, severity: Severity, message: str) -> None:
        self.diagnostics.append(Diagnostic(severity, message, self._stage))

    def error(self, message: str) -> None:
        self._record(Severity.ERROR, message)
        if self.echo:
            output.error(message, file=self.file)

    def warn(self, message: str) -> None:
        self._record(Severity.WARNING, message)
        if self.echo:
            output.warn(message, file=self.file)

    def info(self, message: str) -> None:
        self._record(Severity.INFO, message)
        if self.echo:
            output.info(message, file=self.file)

    def success(self, message: str) -> None:
        """Echo a success line. Not recorded."""
        if self.echo:
            output.success(message, file=self.file)

    def note(self, message: str) -> None:
        """Echo a progress line (e.g. stage start). Not recorded."""
        if self.echo:
            output.info(message, file=self.file)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.WARNING]

    @property
    def infos(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.INFO]


@dataclass
class ValidationReport:
    """Aggregate of one validation run.

    Attributes:
        diagnostics: Every recorded diagnostic, in the order found.
    """

    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def errors(self) -> list[Diagnostic]:
        """Return only ERROR diagnostics."""
        return [d for d in self.diagnostics if d.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        """Return only WARNING diagnostics."""
        return [d for d in self.diagnostics if d.severity == Severity.WARNING]

    @property
    def outcome(self) -> Outcome:
        """Map counts to the terminal state; any error fails the run."""
        if self.errors:
            return Outcome.FAIL
        if self.warnings:
            return Outcome.WARN
        return Outcome.CLEAN

    @property
    def passed(self) -> bool:
        """True if no ERROR diagnostics were recorded."""
        return not self.errors

    @property
    def exit_code(self) -> int:
        return self.outcome.exit_code

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict for --json output."""
        return {
            "passed": self.passed,
            "outcome": self.outcome.value,
            "error_count": len(self.errors),
            "warning_count": len(self.warnings),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
