"""pathwright: asynchronous filesystem operations for editor file browsers."""

from pathwright.core.config import EngineConfig
from pathwright.core.errors import ErrorKind, FsError, PathwrightError
from pathwright.core.schemas import (
    BatchResult,
    EntryKind,
    OperationOutcome,
    RelocationEvent,
)
from pathwright.engine import FileOpsEngine

__version__ = "0.1.0"

__all__ = [
    "BatchResult",
    "EngineConfig",
    "EntryKind",
    "ErrorKind",
    "FileOpsEngine",
    "FsError",
    "OperationOutcome",
    "PathwrightError",
    "RelocationEvent",
]
