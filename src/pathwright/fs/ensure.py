"""Recursive, idempotent directory creation."""

from pathlib import Path

from pathwright.core.errors import AlreadyExistsError, NotADirectoryFsError
from pathwright.core.schemas import EntryKind
from pathwright.fs.paths import ancestor_segments, require_absolute
from pathwright.fs.primitives import PathPrimitives


async def ensure_directory(path: Path | str | None, fs: PathPrimitives) -> None:
    """Create ``path`` and every missing ancestor.

    Segments are created root first because ``mkdir`` on a segment whose
    parent is missing fails with NotFound. A segment that already exists is
    accepted only if it is a directory (or a symlink to one); otherwise the
    remaining segments are left untouched.

    Args:
        path: Absolute directory path
        fs: Primitives to issue the syscalls through

    Raises:
        InvalidPathError: If ``path`` is None, empty or relative
        NotADirectoryFsError: If a segment exists and is not a directory
        FsError: Any other failure creating a segment
    """
    target = require_absolute(path)

    for segment in ancestor_segments(target):
        try:
            await fs.mkdir_one(segment)
        except AlreadyExistsError:
            kind = await fs.stat(segment, follow_symlinks=True)
            if kind != EntryKind.DIRECTORY:
                raise NotADirectoryFsError(
                    segment, "path exists and is not a directory"
                ) from None
