"""Non-blocking wrappers around single filesystem syscalls.

Each primitive runs exactly one blocking call on an anyio worker thread and
either returns a value or raises a classified ``FsError``. Nothing here
recurses or retries; composition happens in the modules built on top.
"""

import os
import shutil
import stat as stat_mod
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import anyio
import anyio.to_thread

from pathwright.core.config import EngineConfig
from pathwright.core.errors import (
    FsError,
    NotADirectoryFsError,
    PermissionDeniedError,
)
from pathwright.core.schemas import EntryKind
from pathwright.utils.debug import debug

T = TypeVar("T")


def _kind_from_mode(mode: int) -> EntryKind:
    if stat_mod.S_ISREG(mode):
        return EntryKind.FILE
    if stat_mod.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


def _list_dir(path: Path) -> list[tuple[str, EntryKind]]:
    children: list[tuple[str, EntryKind]] = []
    with os.scandir(path) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                kind = EntryKind.DIRECTORY
            elif entry.is_file(follow_symlinks=False):
                kind = EntryKind.FILE
            else:
                kind = EntryKind.OTHER
            children.append((entry.name, kind))
    return sorted(children)


def _copy_file(src: Path, dst: Path) -> None:
    shutil.copyfile(src, dst)
    shutil.copymode(src, dst)


def _create_file(path: Path, mode: int) -> None:
    fd = os.open(path, os.O_CREAT | os.O_EXCL | os.O_WRONLY, mode)
    os.close(fd)


def _remove_tree(path: Path) -> None:
    if stat_mod.S_ISDIR(os.lstat(path).st_mode):
        shutil.rmtree(path)
    else:
        os.unlink(path)


class PathPrimitives:
    """Typed async filesystem primitives sharing one concurrency bound.

    Attributes:
        config: Engine configuration (modes and concurrency bound)
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self._limiter: anyio.CapacityLimiter | None = None

    @property
    def limiter(self) -> anyio.CapacityLimiter:
        # Created on first use: anyio limiters need a running event loop.
        if self._limiter is None:
            self._limiter = anyio.CapacityLimiter(self.config.max_concurrency)
        return self._limiter

    async def _run(self, path: Path, func: Callable[..., T], *args: Any) -> T:
        try:
            return await anyio.to_thread.run_sync(func, *args, limiter=self.limiter)
        except OSError as exc:
            raise FsError.from_os_error(exc, path) from exc

    async def stat(self, path: Path, *, follow_symlinks: bool = False) -> EntryKind:
        """Return the kind of ``path``.

        Symlinks are reported as OTHER unless ``follow_symlinks`` is set.
        """
        func = os.stat if follow_symlinks else os.lstat
        result = await self._run(path, func, path)
        return _kind_from_mode(result.st_mode)

    async def mkdir_one(self, path: Path) -> None:
        """Create a single directory; the parent must already exist."""
        debug(f"mkdir {path}")
        await self._run(path, os.mkdir, path, self.config.dir_mode)

    async def copy_file(self, src: Path, dst: Path) -> None:
        """Copy file content and permission bits, replacing ``dst`` if present."""
        debug(f"copy {src} -> {dst}")
        await self._run(src, _copy_file, src, dst)

    async def rename(self, src: Path, dst: Path) -> None:
        debug(f"rename {src} -> {dst}")
        await self._run(src, os.rename, src, dst)

    async def realpath(self, path: Path) -> Path:
        """Resolve every symlink in ``path``; missing tail components are kept."""
        return Path(await self._run(path, os.path.realpath, path))

    async def list_dir(self, path: Path) -> list[tuple[str, EntryKind]]:
        """List direct children of ``path`` as ``(name, kind)`` pairs."""
        return await self._run(path, _list_dir, path)

    async def create_file(self, path: Path) -> None:
        """Create an empty file; fails with AlreadyExists if it exists."""
        debug(f"create {path}")
        await self._run(path, _create_file, path, self.config.file_mode)

    async def remove_tree(self, path: Path) -> None:
        """Remove a file, symlink or whole directory tree."""
        debug(f"remove {path}")
        await self._run(path, _remove_tree, path)

    async def check_writable(self, directory: Path) -> None:
        """Ensure ``directory`` exists, is a directory and is writable.

        Symlinks are followed here, so a link to a writable directory passes.
        The access probe fails closed: anything short of a positive answer is
        reported as PermissionDenied.

        Raises:
            NotFoundError: If the directory does not exist
            NotADirectoryFsError: If the path is not a directory
            PermissionDeniedError: If the directory is not writable
        """
        result = await self._run(directory, os.stat, directory)
        if not stat_mod.S_ISDIR(result.st_mode):
            raise NotADirectoryFsError(directory, "destination is not a directory")

        try:
            writable = await anyio.to_thread.run_sync(
                os.access, directory, os.W_OK, limiter=self.limiter
            )
        except OSError as exc:
            raise PermissionDeniedError(
                directory, f"could not verify write access: {exc}", code=exc.errno
            ) from exc
        if not writable:
            raise PermissionDeniedError(directory, "directory is not writable")
