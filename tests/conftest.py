"""Pytest configuration and fixtures for pathwright tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from pathwright.core.config import EngineConfig
from pathwright.core.errors import FsError
from pathwright.core.schemas import EntryKind
from pathwright.editor.buffers import InMemoryBufferRegistry
from pathwright.fs.primitives import PathPrimitives


class RecordingPrimitives(PathPrimitives):
    """Primitives that record calls and can inject failures per path.

    Attributes:
        calls: ``(primitive, path)`` pairs in the order they were issued
        failures: Errors to raise instead of touching the filesystem,
            keyed by ``(primitive, path)``
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        super().__init__(config)
        self.calls: list[tuple[str, Path]] = []
        self.failures: dict[tuple[str, Path], FsError] = {}

    def fail(self, primitive: str, path: Path, error: FsError) -> None:
        self.failures[(primitive, path)] = error

    def _check(self, primitive: str, path: Path) -> None:
        self.calls.append((primitive, path))
        error = self.failures.get((primitive, path))
        if error is not None:
            raise error

    async def stat(self, path: Path, *, follow_symlinks: bool = False) -> EntryKind:
        self._check("stat", path)
        return await super().stat(path, follow_symlinks=follow_symlinks)

    async def mkdir_one(self, path: Path) -> None:
        self._check("mkdir_one", path)
        await super().mkdir_one(path)

    async def copy_file(self, src: Path, dst: Path) -> None:
        self._check("copy_file", src)
        await super().copy_file(src, dst)

    async def rename(self, src: Path, dst: Path) -> None:
        self._check("rename", src)
        await super().rename(src, dst)

    async def remove_tree(self, path: Path) -> None:
        self._check("remove_tree", path)
        await super().remove_tree(path)

    async def check_writable(self, directory: Path) -> None:
        self._check("check_writable", directory)
        await super().check_writable(directory)

    def paths_for(self, primitive: str) -> list[Path]:
        return [path for name, path in self.calls if name == primitive]


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo logging configuration done by CLI callbacks."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def fs() -> RecordingPrimitives:
    """Primitives with call recording and failure injection."""
    return RecordingPrimitives()


@pytest.fixture
def buffers() -> InMemoryBufferRegistry:
    """Empty in-memory buffer registry."""
    return InMemoryBufferRegistry()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Directory with nested files: 3 files, 3 directories including the root.

    Layout::

        project/
            README.md
            src/
                main.py
                pkg/
                    util.py
    """
    root = tmp_path / "project"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "README.md").write_text("readme")
    (root / "src" / "main.py").write_text("print('main')")
    (root / "src" / "pkg" / "util.py").write_text("UTIL = 1")
    return root
