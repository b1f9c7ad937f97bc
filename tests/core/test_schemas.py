"""Tests for result schemas."""

from pathlib import Path

import pytest

from pathwright.core.errors import ErrorKind, NotFoundError, PermissionDeniedError
from pathwright.core.schemas import BatchResult, OperationOutcome, RelocationEvent


class TestOperationOutcome:
    def test_success(self) -> None:
        outcome = OperationOutcome.success(Path("/a"))

        assert outcome.ok
        assert outcome.kind is None
        assert outcome.reason is None

    def test_failure_uses_error_path(self) -> None:
        error = NotFoundError("/missing", "No such file or directory", code=2)

        outcome = OperationOutcome.failure(error, Path("/fallback"))

        assert not outcome.ok
        assert outcome.path == Path("/missing")
        assert outcome.kind == ErrorKind.NOT_FOUND
        assert outcome.code == 2

    def test_failure_falls_back_to_given_path(self) -> None:
        error = NotFoundError(None, "gone")

        outcome = OperationOutcome.failure(error, Path("/fallback"))

        assert outcome.path == Path("/fallback")

    def test_failure_requires_some_path(self) -> None:
        with pytest.raises(ValueError):
            OperationOutcome.failure(NotFoundError(None, "gone"))

    def test_serializes_path_as_string(self) -> None:
        data = OperationOutcome.success(Path("/a/b")).model_dump()

        assert data["path"] == "/a/b"


class TestBatchResult:
    def test_from_outcomes_counts(self) -> None:
        denied = PermissionDeniedError("/b", "Permission denied", code=13)
        outcomes = [
            OperationOutcome.success(Path("/a")),
            OperationOutcome.failure(denied),
            OperationOutcome.success(Path("/c")),
        ]

        result = BatchResult.from_outcomes(outcomes)

        assert result.successes == 2
        assert [f.path for f in result.failures] == [Path("/b")]
        assert result.total == 3
        assert not result.ok

    def test_summary_all_ok(self) -> None:
        result = BatchResult(successes=3)

        assert result.ok
        assert result.summary("copied") == "copied 3 of 3 items"

    def test_summary_with_failures(self) -> None:
        failures = [
            OperationOutcome.failure(NotFoundError("/x", "missing")),
            OperationOutcome.failure(NotFoundError("/y", "missing")),
        ]
        result = BatchResult(successes=3, failures=failures)

        summary = result.summary("copied")

        assert summary.startswith("copied 3 of 5 items; 2 failed:")
        assert "/x: missing" in summary
        assert "/y: missing" in summary


def test_relocation_event_is_frozen() -> None:
    event = RelocationEvent(old_path=Path("/a"), new_path=Path("/b"))

    with pytest.raises(Exception):
        event.old_path = Path("/c")  # type: ignore[misc]

    assert event.model_dump() == {"old_path": "/a", "new_path": "/b"}
