"""CLI entrypoints for pathwright."""

from pathwright.cli.ops import app as ops_app
from pathwright.cli.ops import run_cli

__all__ = ["ops_app", "run_cli"]
