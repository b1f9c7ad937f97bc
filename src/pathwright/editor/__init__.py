"""Interfaces to the host editor: open buffers and relocation listeners."""

from pathwright.editor.buffers import (
    BufferRegistry,
    ClosableBufferRegistry,
    InMemoryBufferRegistry,
)
from pathwright.editor.listeners import ListenerRegistry

__all__ = [
    "BufferRegistry",
    "ClosableBufferRegistry",
    "InMemoryBufferRegistry",
    "ListenerRegistry",
]
