"""Rename/move of a single path with editor and listener bookkeeping.

A relocation is four strictly sequential steps: pre-rename listener hooks,
the rename syscall, rebinding of open buffers, post-rename listener hooks.
Moving a directory is one rename and one event; buffers nested under it
follow through the prefix rewrite.
"""

from pathlib import Path
from typing import Any

import structlog

from pathwright.core.config import EngineConfig
from pathwright.core.errors import FsError
from pathwright.core.schemas import OperationOutcome, RelocationEvent
from pathwright.editor.buffers import BufferId, BufferRegistry
from pathwright.editor.listeners import ListenerRegistry
from pathwright.fs.paths import rebase, require_absolute
from pathwright.fs.primitives import PathPrimitives


def plan_buffer_renames(
    buffers: BufferRegistry, old_path: Path, new_path: Path
) -> dict[BufferId, str]:
    """Work out the new path of every buffer at or under ``old_path``.

    Args:
        buffers: Registry of open buffers
        old_path: Path being moved
        new_path: Where it is moving to

    Returns:
        Mapping of buffer id to the path it must be rebound to
    """
    renames: dict[BufferId, str] = {}
    for buffer_id, name in buffers.list_open_buffers():
        if not name:
            continue
        rebased = rebase(Path(name), old_path, new_path)
        if rebased is not None:
            renames[buffer_id] = str(rebased)
    return renames


async def relocate(
    from_path: Path | str,
    to_path: Path | str,
    notify_external: bool,
    *,
    fs: PathPrimitives,
    buffers: BufferRegistry | None = None,
    listeners: ListenerRegistry | None = None,
    config: EngineConfig | None = None,
    logger: Any = None,
) -> OperationOutcome:
    """Rename ``from_path`` to ``to_path``.

    Args:
        from_path: Absolute path of the file or directory to move
        to_path: Absolute new path
        notify_external: Whether to run the relocation listener hooks
        fs: Primitives to issue the rename through
        buffers: Open-buffer registry to keep in sync (optional)
        listeners: Relocation listeners (optional)
        config: Supplies the listener hook timeouts
        logger: Optional structlog logger instance

    Returns:
        Success keyed by ``from_path``, or the rename failure

    Raises:
        InvalidPathError: If either path is empty or relative
    """
    src = require_absolute(from_path)
    dst = require_absolute(to_path)
    config = config or fs.config
    log = (logger or structlog.get_logger(__name__)).bind(
        old_path=str(src), new_path=str(dst)
    )

    event = RelocationEvent(old_path=src, new_path=dst)
    hooks = listeners if notify_external and listeners else None

    if hooks is not None:
        await hooks.notify_will_relocate(event, config.will_relocate_timeout)

    try:
        await fs.rename(src, dst)
    except FsError as exc:
        log.info("relocate.failed", reason=exc.reason, kind=exc.kind.value)
        return OperationOutcome.failure(exc, src)

    # Back on the event loop thread: safe to touch editor state.
    pending = plan_buffer_renames(buffers, src, dst) if buffers is not None else {}
    if buffers is not None:
        for buffer_id, new_name in pending.items():
            try:
                buffers.rename_buffer(buffer_id, new_name)
            except Exception as exc:
                log.warning(
                    "relocate.buffer_rename_failed",
                    buffer_id=str(buffer_id),
                    error=str(exc),
                )

    if hooks is not None:
        await hooks.notify_did_relocate(event, config.did_relocate_timeout)

    log.debug("relocate.applied", buffers_rebound=len(pending))
    return OperationOutcome.success(src)
