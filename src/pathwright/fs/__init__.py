"""Asynchronous filesystem mutation: mkdir -p, tree copy, move, create, delete.

All operations take absolute paths and run their syscalls on worker threads
through ``PathPrimitives``. Batch operations report per-path outcomes instead
of stopping at the first failure.
"""

from pathwright.fs.batch import copy_many, delete_many, move_many, run_batch
from pathwright.fs.create import create_file
from pathwright.fs.ensure import ensure_directory
from pathwright.fs.paths import require_absolute
from pathwright.fs.primitives import PathPrimitives
from pathwright.fs.relocate import relocate
from pathwright.fs.tree_copy import copy_tree

__all__ = [
    "PathPrimitives",
    "copy_many",
    "copy_tree",
    "create_file",
    "delete_many",
    "ensure_directory",
    "move_many",
    "relocate",
    "require_absolute",
    "run_batch",
]
