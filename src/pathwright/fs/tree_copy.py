"""Recursive copy of files and directories with per-entry outcomes."""

from pathlib import Path

import anyio

from pathwright.core.errors import (
    AlreadyExistsError,
    FsError,
    InvalidPathError,
    UnsupportedEntryError,
)
from pathwright.core.schemas import EntryKind, OperationOutcome
from pathwright.fs.ensure import ensure_directory
from pathwright.fs.paths import destination_for, require_absolute
from pathwright.fs.primitives import PathPrimitives
from pathwright.utils.debug import debug


async def copy_tree(
    source: Path | str,
    destination_dir: Path | str,
    fs: PathPrimitives,
) -> list[OperationOutcome]:
    """Copy ``source`` (file or directory) into ``destination_dir``.

    The destination is checked for writability once, before anything is
    touched. After that every file copied and every directory created gets
    its own outcome, and a failing entry never stops its siblings.

    Args:
        source: Absolute path of the file or directory to copy
        destination_dir: Absolute path of the directory to copy into
        fs: Primitives to issue the syscalls through

    Returns:
        One outcome per file and per directory, in completion order

    Raises:
        InvalidPathError: If either path is empty or relative
        FsError: If ``destination_dir`` is not a writable directory
    """
    src = require_absolute(source)
    dst_dir = require_absolute(destination_dir)
    await fs.check_writable(dst_dir)
    return await copy_into(src, dst_dir, fs)


async def copy_into(
    source: Path, destination_dir: Path, fs: PathPrimitives
) -> list[OperationOutcome]:
    """Copy a top-level source into an already checked destination.

    Both sides are compared with symlinks resolved. The source itself is
    never followed, only its parent, since a symlinked source is copied (or
    rejected) as the link. Refuses to copy an entry onto itself and a
    directory into itself or into one of its descendants.
    """
    real_source = await fs.realpath(source.parent) / source.name
    real_destination = await fs.realpath(destination_dir)

    if real_destination / source.name == real_source:
        error = AlreadyExistsError(source, "source and destination are the same")
        return [OperationOutcome.failure(error)]
    if real_destination == real_source or real_source in real_destination.parents:
        error = InvalidPathError(source, "cannot copy a directory into itself")
        return [OperationOutcome.failure(error)]
    return await copy_entry(source, destination_dir, fs)


async def copy_entry(
    source: Path,
    destination_dir: Path,
    fs: PathPrimitives,
    kind: EntryKind | None = None,
) -> list[OperationOutcome]:
    """Copy one entry without the writability precondition.

    Args:
        source: Entry to copy
        destination_dir: Existing directory to copy into
        fs: Primitives to issue the syscalls through
        kind: Entry kind when the caller already knows it (directory listing)

    Returns:
        Outcomes for the entry and, for directories, all of its descendants
    """
    if kind is None:
        try:
            kind = await fs.stat(source)
        except FsError as exc:
            return [OperationOutcome.failure(exc, source)]

    if kind == EntryKind.FILE:
        return [await _copy_file(source, destination_dir, fs)]
    if kind == EntryKind.DIRECTORY:
        return await _copy_directory(source, destination_dir, fs)

    error = UnsupportedEntryError(source, "unsupported file type")
    return [OperationOutcome.failure(error)]


async def _copy_file(
    source: Path, destination_dir: Path, fs: PathPrimitives
) -> OperationOutcome:
    try:
        await fs.copy_file(source, destination_for(source, destination_dir))
    except FsError as exc:
        return OperationOutcome.failure(exc, source)
    return OperationOutcome.success(source)


async def _copy_directory(
    source: Path, destination_dir: Path, fs: PathPrimitives
) -> list[OperationOutcome]:
    new_dir = destination_for(source, destination_dir)
    try:
        # Listed first so a directory created below never shows up in it.
        children = await fs.list_dir(source)
        await ensure_directory(new_dir, fs)
    except FsError as exc:
        debug(f"not descending into {source}: {exc}")
        return [OperationOutcome.failure(exc, source)]

    outcomes = [OperationOutcome.success(source)]

    async def copy_child(name: str, child_kind: EntryKind) -> None:
        outcomes.extend(await copy_entry(source / name, new_dir, fs, child_kind))

    async with anyio.create_task_group() as tg:
        for name, child_kind in children:
            tg.start_soon(copy_child, name, child_kind)

    return outcomes
