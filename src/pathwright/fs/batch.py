"""Concurrent batch operations with aggregated per-path outcomes.

Every path of a batch runs as its own task in one anyio task group. Tasks
never raise: each resolves to one or more outcomes, and the batch returns
only after all of them have completed.
"""

from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path
from typing import Any

import anyio
import structlog

from pathwright.core.config import EngineConfig
from pathwright.core.errors import FsError
from pathwright.core.schemas import BatchResult, OperationOutcome
from pathwright.editor.buffers import BufferRegistry, ClosableBufferRegistry
from pathwright.editor.listeners import ListenerRegistry
from pathwright.fs.paths import destination_for, rebase, require_absolute
from pathwright.fs.primitives import PathPrimitives
from pathwright.fs.relocate import relocate
from pathwright.fs.tree_copy import copy_into

PathOperation = Callable[
    [Path], Awaitable[OperationOutcome | list[OperationOutcome]]
]


async def run_batch(
    paths: Sequence[Path | str],
    operation: PathOperation,
    *,
    logger: Any = None,
) -> BatchResult:
    """Run ``operation`` on every path concurrently and aggregate the outcomes.

    Paths are neither reordered nor deduplicated. An exception escaping an
    operation is recorded as a failure for that path instead of cancelling
    its siblings.

    Args:
        paths: Paths to process
        operation: Coroutine function producing the outcome(s) for one path
        logger: Optional structlog logger instance

    Returns:
        BatchResult with failures in completion order
    """
    log = logger or structlog.get_logger(__name__)
    outcomes: list[OperationOutcome] = []

    async def run_one(raw: Path | str) -> None:
        try:
            path = require_absolute(raw)
            result = await operation(path)
        except FsError as exc:
            outcomes.append(OperationOutcome.failure(exc, Path(str(raw) or ".")))
            return
        except Exception as exc:
            log.error("batch.unexpected_error", path=str(raw), error=str(exc))
            error = FsError(raw, f"unexpected error: {exc}")
            outcomes.append(OperationOutcome.failure(error, Path(str(raw) or ".")))
            return

        if isinstance(result, OperationOutcome):
            outcomes.append(result)
        else:
            outcomes.extend(result)

    async with anyio.create_task_group() as tg:
        for raw in paths:
            tg.start_soon(run_one, raw)

    return BatchResult.from_outcomes(outcomes)


async def copy_many(
    sources: Sequence[Path | str],
    destination_dir: Path | str,
    *,
    fs: PathPrimitives,
    logger: Any = None,
) -> BatchResult:
    """Copy every source tree into ``destination_dir``.

    Args:
        sources: Absolute paths of files and directories to copy
        destination_dir: Absolute path of the directory to copy into
        fs: Primitives to issue the syscalls through
        logger: Optional structlog logger instance

    Returns:
        BatchResult counting every copied file and created directory

    Raises:
        FsError: If ``destination_dir`` is invalid or not a writable directory;
            nothing is copied in that case
    """
    dst_dir = require_absolute(destination_dir)
    await fs.check_writable(dst_dir)
    log = (logger or structlog.get_logger(__name__)).bind(
        operation="copy", destination=str(dst_dir)
    )

    async def copy_one(source: Path) -> list[OperationOutcome]:
        outcomes = await copy_into(source, dst_dir, fs)
        log.debug("copy.item", source=str(source), outcomes=len(outcomes))
        return outcomes

    result = await run_batch(sources, copy_one, logger=log)
    log.info(
        "batch.summary",
        requested=len(sources),
        successes=result.successes,
        failures=len(result.failures),
    )
    return result


async def move_many(
    sources: Sequence[Path | str],
    destination_dir: Path | str,
    notify_external: bool,
    *,
    fs: PathPrimitives,
    buffers: BufferRegistry | None = None,
    listeners: ListenerRegistry | None = None,
    config: EngineConfig | None = None,
    logger: Any = None,
) -> BatchResult:
    """Move every source into ``destination_dir`` under its own base name.

    Args:
        sources: Absolute paths of files and directories to move
        destination_dir: Absolute path of the directory to move into
        notify_external: Whether to run the relocation listener hooks
        fs: Primitives to issue the renames through
        buffers: Open-buffer registry to keep in sync (optional)
        listeners: Relocation listeners (optional)
        config: Supplies the listener hook timeouts
        logger: Optional structlog logger instance

    Returns:
        BatchResult with one outcome per source

    Raises:
        FsError: If ``destination_dir`` is invalid or not a writable directory;
            nothing is moved in that case
    """
    dst_dir = require_absolute(destination_dir)
    await fs.check_writable(dst_dir)
    log = (logger or structlog.get_logger(__name__)).bind(
        operation="move", destination=str(dst_dir)
    )

    async def move_one(source: Path) -> OperationOutcome:
        return await relocate(
            source,
            destination_for(source, dst_dir),
            notify_external,
            fs=fs,
            buffers=buffers,
            listeners=listeners,
            config=config,
            logger=log,
        )

    result = await run_batch(sources, move_one, logger=log)
    log.info(
        "batch.summary",
        requested=len(sources),
        successes=result.successes,
        failures=len(result.failures),
    )
    return result


async def delete_many(
    paths: Sequence[Path | str],
    *,
    fs: PathPrimitives,
    buffers: BufferRegistry | None = None,
    logger: Any = None,
) -> BatchResult:
    """Remove every path (recursively for directories).

    Buffers bound to a removed path, or to anything under it, are closed when
    the registry supports ``close_buffer``.

    Args:
        paths: Absolute paths to remove
        fs: Primitives to issue the removals through
        buffers: Open-buffer registry to keep in sync (optional)
        logger: Optional structlog logger instance

    Returns:
        BatchResult with one outcome per path
    """
    log = (logger or structlog.get_logger(__name__)).bind(operation="delete")

    async def delete_one(path: Path) -> OperationOutcome:
        try:
            await fs.remove_tree(path)
        except FsError as exc:
            return OperationOutcome.failure(exc, path)

        if isinstance(buffers, ClosableBufferRegistry):
            for buffer_id, name in buffers.list_open_buffers():
                if name and rebase(Path(name), path, path) is not None:
                    buffers.close_buffer(buffer_id)
        return OperationOutcome.success(path)

    result = await run_batch(paths, delete_one, logger=log)
    log.info(
        "batch.summary",
        requested=len(paths),
        successes=result.successes,
        failures=len(result.failures),
    )
    return result
