"""Pydantic schemas for filesystem operation results.

These schemas define the values handed back to callers:
- OperationOutcome: Result for a single path
- BatchResult: Aggregate over all outcomes of a batch call
- RelocationEvent: Old/new path pair handed to relocation listeners

All schemas use Pydantic v2 and are created per call.
"""

from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from pathwright.core.errors import ErrorKind, FsError


class EntryKind(str, Enum):
    """Type of a filesystem entry as seen without following symlinks."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


class OperationOutcome(BaseModel):
    """Result of an operation on a single path.

    Attributes:
        path: The path the outcome is about (the offending path on failure)
        ok: True on success
        kind: Error classification (failures only)
        reason: Human-readable failure reason (failures only)
        code: OS errno (failures coming from the OS only)
    """

    path: Path
    ok: bool
    kind: ErrorKind | None = None
    reason: str | None = None
    code: int | None = None

    model_config = {"frozen": True}

    @classmethod
    def success(cls, path: Path) -> "OperationOutcome":
        return cls(path=path, ok=True)

    @classmethod
    def failure(cls, error: FsError, path: Path | None = None) -> "OperationOutcome":
        """Build a failed outcome from a classified error.

        Args:
            error: The error that ended the operation
            path: Fallback path when the error carries none
        """
        offending = error.path or path
        if offending is None:
            raise ValueError("failure outcome requires a path")
        return cls(
            path=offending,
            ok=False,
            kind=error.kind,
            reason=error.reason,
            code=error.code,
        )

    @field_serializer("path")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string for JSON."""
        return str(path)


class BatchResult(BaseModel):
    """Aggregate result of a batch operation.

    ``failures`` is in completion order, not input order.
    """

    successes: int = 0
    failures: list[OperationOutcome] = Field(default_factory=list)

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[OperationOutcome]) -> "BatchResult":
        successes = 0
        failures: list[OperationOutcome] = []
        for outcome in outcomes:
            if outcome.ok:
                successes += 1
            else:
                failures.append(outcome)
        return cls(successes=successes, failures=failures)

    @property
    def total(self) -> int:
        return self.successes + len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures

    def summary(self, verb: str) -> str:
        """Render a one-paragraph summary, e.g. ``copied 3 of 5 items; 2 failed``.

        Args:
            verb: Past-tense verb describing the operation

        Returns:
            Summary line followed by one ``path: reason`` line per failure
        """
        line = f"{verb} {self.successes} of {self.total} items"
        if not self.failures:
            return line
        details = "\n".join(f"{f.path}: {f.reason}" for f in self.failures)
        return f"{line}; {len(self.failures)} failed:\n{details}"


class RelocationEvent(BaseModel):
    """A rename about to happen or just completed."""

    old_path: Path
    new_path: Path

    model_config = {"frozen": True}

    @field_serializer("old_path", "new_path")
    def serialize_path(self, path: Path) -> str:
        return str(path)
