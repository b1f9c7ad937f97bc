"""Engine configuration resolved from defaults and environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

__all__ = ["EngineConfig"]


@dataclass(frozen=True)
class EngineConfig:
    """Tunables for the filesystem engine.

    Attributes:
        dir_mode: Permission bits for created directories
        file_mode: Permission bits for created files
        max_concurrency: Upper bound on syscalls in flight at once
        will_relocate_timeout: Seconds to wait on each pre-relocation listener
        did_relocate_timeout: Seconds to wait on each post-relocation listener
            before the rename outcome is returned
    """

    dir_mode: int = 0o755
    file_mode: int = 0o644
    max_concurrency: int = 32
    will_relocate_timeout: float = 1.0
    did_relocate_timeout: float = 0.25

    def __post_init__(self) -> None:
        if self.max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        if self.will_relocate_timeout < 0:
            raise ValueError("will_relocate_timeout cannot be negative")
        if self.did_relocate_timeout < 0:
            raise ValueError("did_relocate_timeout cannot be negative")

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Build a config, letting ``PATHWRIGHT_*`` variables override defaults.

        Modes are parsed as octal (``PATHWRIGHT_DIR_MODE=700``).

        Raises:
            ValueError: If a variable is set to an unparsable value
        """

        defaults = cls()
        return cls(
            dir_mode=_env_int("PATHWRIGHT_DIR_MODE", defaults.dir_mode, base=8),
            file_mode=_env_int("PATHWRIGHT_FILE_MODE", defaults.file_mode, base=8),
            max_concurrency=_env_int(
                "PATHWRIGHT_MAX_CONCURRENCY", defaults.max_concurrency
            ),
            will_relocate_timeout=_env_float(
                "PATHWRIGHT_WILL_RELOCATE_TIMEOUT", defaults.will_relocate_timeout
            ),
            did_relocate_timeout=_env_float(
                "PATHWRIGHT_DID_RELOCATE_TIMEOUT", defaults.did_relocate_timeout
            ),
        )


def _env_int(name: str, default: int, base: int = 10) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip(), base)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
