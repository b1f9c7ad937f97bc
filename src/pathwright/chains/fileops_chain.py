"""File operations chain for callers that report results to a user.

This module provides the FileOpsChain class that runs engine operations with
structured logging and renders the aggregated outcome on a Rich console,
e.g. "copied 3 of 5 items; 2 failed".
"""

import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Literal

import structlog
from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)

from pathwright.core.errors import FsError
from pathwright.core.schemas import BatchResult
from pathwright.engine import FileOpsEngine

Operation = Literal["copy", "move", "delete"]

_VERBS: dict[Operation, str] = {
    "copy": "Copied",
    "move": "Moved",
    "delete": "Deleted",
}


class FileOpsChain:
    """Runs batch file operations and reports them.

    Preconditions that fail before anything is touched (destination missing
    or not writable) are reported and re-raised; per-item failures are
    reported and returned inside the BatchResult.
    """

    def __init__(
        self,
        engine: FileOpsEngine | None = None,
        logger: Any = None,
        ui: Console | None = None,
    ) -> None:
        """Initialize the chain.

        Args:
            engine: Engine to run operations on
            logger: Optional structlog logger instance
            ui: Optional Rich console for output
        """
        self._engine = engine or FileOpsEngine()
        self._logger = logger or structlog.get_logger()
        self._ui = ui or Console()

    async def copy(
        self, sources: Sequence[Path | str], destination_dir: Path | str
    ) -> BatchResult:
        return await self._run_batch("copy", sources, destination_dir)

    async def move(
        self,
        sources: Sequence[Path | str],
        destination_dir: Path | str,
        notify_external: bool = True,
    ) -> BatchResult:
        return await self._run_batch(
            "move", sources, destination_dir, notify_external=notify_external
        )

    async def delete(self, paths: Sequence[Path | str]) -> BatchResult:
        return await self._run_batch("delete", paths)

    async def make_directory(self, path: Path | str) -> None:
        try:
            await self._engine.ensure_directory(path)
        except FsError as exc:
            self._ui.print(
                f"❌ [red]Could not create directory[/red] "
                f"{escape(str(path))}: {escape(exc.reason)}"
            )
            raise
        self._ui.print(f"📁 [green]Created directory[/green] {escape(str(path))}")

    async def create_file(self, path: Path | str) -> Path:
        try:
            created = await self._engine.create_file(path)
        except FsError as exc:
            self._ui.print(
                f"❌ [red]Could not create file[/red] "
                f"{escape(str(path))}: {escape(exc.reason)}"
            )
            raise
        self._ui.print(f"📄 [green]Created file[/green] {escape(str(created))}")
        return created

    async def _run_batch(
        self,
        operation: Operation,
        paths: Sequence[Path | str],
        destination_dir: Path | str | None = None,
        notify_external: bool = True,
    ) -> BatchResult:
        bound_logger = self._logger.bind(
            operation=operation,
            destination=str(destination_dir) if destination_dir else None,
            requested=len(paths),
        )
        start_time = time.time()

        with self._create_progress() as progress:
            task = progress.add_task(
                f"{_VERBS[operation]} {len(paths)} item(s)", total=len(paths)
            )
            try:
                if operation == "copy":
                    assert destination_dir is not None
                    result = await self._engine.copy_many(paths, destination_dir)
                elif operation == "move":
                    assert destination_dir is not None
                    result = await self._engine.move_many(
                        paths, destination_dir, notify_external
                    )
                else:
                    result = await self._engine.delete_many(paths)
            except FsError as exc:
                bound_logger.warning("fileops.precondition_failed", **exc.to_dict())
                self._ui.print(f"❌ [red]{escape(str(exc))}[/red]")
                raise
            progress.update(task, completed=len(paths))

        bound_logger.info(
            "fileops.summary",
            successes=result.successes,
            failures=len(result.failures),
            elapsed_ms=int((time.time() - start_time) * 1000),
        )
        self._show_result(operation, result)
        return result

    def _create_progress(self) -> Progress:
        """Create Rich progress display."""
        return Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=self._ui,
            transient=True,
        )

    def _show_result(self, operation: Operation, result: BatchResult) -> None:
        """Show Rich output for a batch result."""
        verb = _VERBS[operation]
        if result.ok:
            self._ui.print(
                f"✅ [green]{verb}[/green] {result.successes} of {result.total} items"
            )
            return

        self._ui.print(
            f"⚠️ [yellow]{verb}[/yellow] {result.successes} of {result.total} items; "
            f"{len(result.failures)} failed:"
        )
        for failure in result.failures:
            reason = escape(failure.reason or "unknown error")
            self._ui.print(f"  ❌ [red]{escape(str(failure.path))}[/red]: {reason}")
