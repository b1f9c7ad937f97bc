"""Path utilities for filesystem operations.

The engine never resolves relative paths itself: callers hand in absolute,
already-resolved paths and these helpers only validate and take them apart.
"""

import os
from pathlib import Path

from pathwright.core.errors import InvalidPathError


def require_absolute(path: Path | str | None) -> Path:
    """Validate that a path is non-empty and absolute.

    Args:
        path: Candidate path

    Returns:
        The path as a normalized ``Path`` (redundant separators and ``.``
        components removed, no symlink resolution)

    Raises:
        InvalidPathError: If the path is None, empty or relative
    """
    if path is None or str(path) == "":
        raise InvalidPathError(None, "path must be a non-empty absolute path")

    raw = str(path)
    if not os.path.isabs(raw):
        raise InvalidPathError(raw, "path must be absolute")

    return Path(os.path.normpath(raw))


def ancestor_segments(path: Path) -> list[Path]:
    """List ``path`` and all of its ancestors, root first.

    Args:
        path: Absolute path

    Returns:
        Segments ordered from the filesystem root down to ``path`` itself,
        e.g. ``/a/b`` -> ``[/, /a, /a/b]``
    """
    return [*reversed(path.parents), path]


def destination_for(source: Path, destination_dir: Path) -> Path:
    """Path an entry lands on when copied or moved into ``destination_dir``."""
    return destination_dir / source.name


def rebase(path: Path, old_root: Path, new_root: Path) -> Path | None:
    """Rewrite ``path`` from under ``old_root`` to under ``new_root``.

    Args:
        path: Path to rewrite
        old_root: Prefix being moved away
        new_root: Prefix replacing it

    Returns:
        The rewritten path when ``path`` equals ``old_root`` or is nested
        under it, otherwise None. Matching is per path component, so
        ``/a/bc`` is not under ``/a/b``.
    """
    if path == old_root:
        return new_root
    try:
        relative = path.relative_to(old_root)
    except ValueError:
        return None
    return new_root / relative
