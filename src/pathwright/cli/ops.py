"""CLI commands for filesystem operations."""

from __future__ import annotations

import asyncio
import importlib
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any

import structlog

if TYPE_CHECKING:  # pragma: no cover - typing only
    import typer
    from typer import Typer as TyperType
else:  # pragma: no cover - runtime fallback for typing
    typer = importlib.import_module("typer")
    TyperType = Any

from pathwright.chains.fileops_chain import FileOpsChain
from pathwright.core.errors import FsError
from pathwright.core.schemas import BatchResult
from pathwright.engine import FileOpsEngine

app: TyperType = typer.Typer(help="Create, copy, move and delete files and trees.")

PathArgument = Annotated[Path, typer.Argument(help="Target path.")]
PathsArgument = Annotated[list[Path], typer.Argument(help="Paths to operate on.")]
DestinationOption = Annotated[
    Path,
    typer.Option("--to", "-t", help="Destination directory."),
]
YesFlag = Annotated[
    bool,
    typer.Option("--yes", "-y", help="Do not ask for confirmation."),
]
VerboseFlag = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Emit structured logs on stderr."),
]


@app.callback()
def main(verbose: VerboseFlag = False) -> None:
    """Configure logging for every command."""

    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def _absolute(paths: Sequence[Path]) -> list[Path]:
    # The engine only takes absolute paths; resolve relative ones here.
    return [p if p.is_absolute() else p.resolve() for p in paths]


def _chain() -> FileOpsChain:
    return FileOpsChain(FileOpsEngine())


def _exit_for(result: BatchResult) -> None:
    if not result.ok:
        raise typer.Exit(code=1)


def make_directory(path: PathArgument) -> None:
    """Create a directory and any missing parents."""

    try:
        asyncio.run(_chain().make_directory(_absolute([path])[0]))
    except FsError as exc:
        raise typer.Exit(code=1) from exc


def touch(path: PathArgument) -> None:
    """Create an empty file and any missing parent directories."""

    try:
        asyncio.run(_chain().create_file(_absolute([path])[0]))
    except FsError as exc:
        raise typer.Exit(code=1) from exc


def copy(sources: PathsArgument, destination: DestinationOption) -> None:
    """Copy files and directories into a destination directory."""

    try:
        result = asyncio.run(
            _chain().copy(_absolute(sources), _absolute([destination])[0])
        )
    except FsError as exc:
        raise typer.Exit(code=1) from exc
    _exit_for(result)


def move(sources: PathsArgument, destination: DestinationOption) -> None:
    """Move files and directories into a destination directory."""

    try:
        result = asyncio.run(
            _chain().move(_absolute(sources), _absolute([destination])[0])
        )
    except FsError as exc:
        raise typer.Exit(code=1) from exc
    _exit_for(result)


def remove(paths: PathsArgument, yes: YesFlag = False) -> None:
    """Delete files and directory trees."""

    targets = _absolute(paths)
    message = str(targets[0]) if len(targets) == 1 else f"{len(targets)} items"
    if not yes:
        typer.confirm(f"Delete {message}?", abort=True)
    result = asyncio.run(_chain().delete(targets))
    _exit_for(result)


def run_cli(args: Sequence[str] | None = None) -> None:
    app(args=args)


app.command("mkdir")(make_directory)
app.command("touch")(touch)
app.command("copy")(copy)
app.command("move")(move)
app.command("rm")(remove)
