"""Engine facade binding primitives, editor collaborators and configuration."""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import structlog

from pathwright.core.config import EngineConfig
from pathwright.core.schemas import BatchResult, OperationOutcome
from pathwright.editor.buffers import BufferRegistry
from pathwright.editor.listeners import ListenerRegistry
from pathwright.fs.batch import copy_many, delete_many, move_many
from pathwright.fs.create import create_file
from pathwright.fs.ensure import ensure_directory
from pathwright.fs.primitives import PathPrimitives
from pathwright.fs.relocate import relocate
from pathwright.fs.tree_copy import copy_tree


class FileOpsEngine:
    """Filesystem operations for a file browser embedded in an editor.

    The engine holds no state between calls besides its collaborators, so one
    instance can serve any number of concurrent operations on the same event
    loop.
    """

    def __init__(
        self,
        buffers: BufferRegistry | None = None,
        listeners: ListenerRegistry | None = None,
        config: EngineConfig | None = None,
        fs: PathPrimitives | None = None,
        logger: Any = None,
    ) -> None:
        """Initialize the engine.

        Args:
            buffers: Open-buffer registry of the host editor (optional)
            listeners: Relocation listeners; an empty registry by default
            config: Engine configuration; ``EngineConfig.from_env()`` by default
            fs: Primitives override, mainly for tests
            logger: Optional structlog logger instance
        """
        self.config = config or (fs.config if fs else EngineConfig.from_env())
        self.fs = fs or PathPrimitives(self.config)
        self.buffers = buffers
        self.listeners = listeners if listeners is not None else ListenerRegistry()
        self._logger = logger or structlog.get_logger(__name__)

    async def ensure_directory(self, path: Path | str) -> None:
        await ensure_directory(path, self.fs)

    async def copy_tree(
        self, source: Path | str, destination_dir: Path | str
    ) -> list[OperationOutcome]:
        return await copy_tree(source, destination_dir, self.fs)

    async def copy_many(
        self, sources: Sequence[Path | str], destination_dir: Path | str
    ) -> BatchResult:
        return await copy_many(
            sources, destination_dir, fs=self.fs, logger=self._logger
        )

    async def relocate(
        self,
        from_path: Path | str,
        to_path: Path | str,
        notify_external: bool = True,
    ) -> OperationOutcome:
        return await relocate(
            from_path,
            to_path,
            notify_external,
            fs=self.fs,
            buffers=self.buffers,
            listeners=self.listeners,
            config=self.config,
            logger=self._logger,
        )

    async def move_many(
        self,
        sources: Sequence[Path | str],
        destination_dir: Path | str,
        notify_external: bool = True,
    ) -> BatchResult:
        return await move_many(
            sources,
            destination_dir,
            notify_external,
            fs=self.fs,
            buffers=self.buffers,
            listeners=self.listeners,
            config=self.config,
            logger=self._logger,
        )

    async def create_file(self, path: Path | str) -> Path:
        return await create_file(path, self.fs)

    async def delete_many(self, paths: Sequence[Path | str]) -> BatchResult:
        return await delete_many(
            paths, fs=self.fs, buffers=self.buffers, logger=self._logger
        )
