"""Buffer registry interface and an in-memory implementation.

The engine never tracks editor state itself. It reads and rewrites buffer
bindings through a ``BufferRegistry`` handed in by the host editor.
"""

from collections.abc import Hashable
from pathlib import Path
from typing import Protocol, runtime_checkable

BufferId = Hashable


class BufferRegistry(Protocol):
    """Open buffers of the host editor."""

    def list_open_buffers(self) -> list[tuple[BufferId, str]]:
        """Return ``(id, path)`` for every open buffer."""
        ...

    def rename_buffer(self, buffer_id: BufferId, new_path: str) -> None:
        """Rebind a buffer to a new path."""
        ...


@runtime_checkable
class ClosableBufferRegistry(BufferRegistry, Protocol):
    """Registry that can also drop buffers whose files were deleted."""

    def close_buffer(self, buffer_id: BufferId) -> None: ...


class InMemoryBufferRegistry:
    """Dictionary-backed registry for tests and headless use.

    Attributes:
        buffers: Mapping of buffer id to bound path
    """

    def __init__(self, buffers: dict[BufferId, str] | None = None) -> None:
        self.buffers: dict[BufferId, str] = dict(buffers or {})
        self._next_id = 1

    def open(self, path: Path | str) -> int:
        """Open a buffer for ``path`` and return its id."""
        while self._next_id in self.buffers:
            self._next_id += 1
        buffer_id = self._next_id
        self.buffers[buffer_id] = str(path)
        return buffer_id

    def list_open_buffers(self) -> list[tuple[BufferId, str]]:
        return list(self.buffers.items())

    def rename_buffer(self, buffer_id: BufferId, new_path: str) -> None:
        if buffer_id not in self.buffers:
            raise KeyError(f"unknown buffer: {buffer_id!r}")
        self.buffers[buffer_id] = new_path

    def close_buffer(self, buffer_id: BufferId) -> None:
        self.buffers.pop(buffer_id, None)
