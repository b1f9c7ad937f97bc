"""Creation of new, empty files."""

from pathlib import Path

from pathwright.fs.ensure import ensure_directory
from pathwright.fs.paths import require_absolute
from pathwright.fs.primitives import PathPrimitives


async def create_file(path: Path | str, fs: PathPrimitives) -> Path:
    """Create an empty file, creating missing parent directories first.

    Args:
        path: Absolute path of the file to create
        fs: Primitives to issue the syscalls through

    Returns:
        The normalized path of the created file

    Raises:
        InvalidPathError: If ``path`` is empty or relative
        AlreadyExistsError: If something already exists at ``path``
        FsError: If the parent cannot be created or is not writable
    """
    target = require_absolute(path)
    await ensure_directory(target.parent, fs)
    await fs.check_writable(target.parent)
    await fs.create_file(target)
    return target
