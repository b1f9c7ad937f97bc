"""Tests for the reporting file operations chain."""

from io import StringIO
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from pathwright.chains.fileops_chain import FileOpsChain
from pathwright.core.errors import (
    AlreadyExistsError,
    NotFoundError,
    PermissionDeniedError,
)
from pathwright.engine import FileOpsEngine


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=400, color_system=None), buffer


def _chain(fs: Any, **kwargs: Any) -> tuple[FileOpsChain, StringIO, MagicMock]:
    console, buffer = _console()
    logger = MagicMock()
    logger.bind.return_value = logger
    engine = FileOpsEngine(fs=fs, **kwargs)
    return FileOpsChain(engine, logger=logger, ui=console), buffer, logger


class TestFileOpsChain:
    @pytest.mark.asyncio
    async def test_copy_reports_success(
        self, fs: Any, sample_tree: Path, tmp_path: Path
    ) -> None:
        dest = tmp_path / "dest"
        dest.mkdir()
        chain, output, logger = _chain(fs)

        result = await chain.copy([sample_tree], dest)

        assert result.successes == 6
        assert "Copied 6 of 6 items" in output.getvalue()
        summary = logger.info.call_args
        assert summary.args[0] == "fileops.summary"
        assert summary.kwargs["successes"] == 6
        assert "elapsed_ms" in summary.kwargs

    @pytest.mark.asyncio
    async def test_move_reports_failures(self, fs: Any, tmp_path: Path) -> None:
        a1 = tmp_path / "a1.txt"
        a2 = tmp_path / "a2.txt"
        a1.write_text("1")
        a2.write_text("2")
        dest = tmp_path / "dest"
        dest.mkdir()
        fs.fail("rename", a2, PermissionDeniedError(a2, "Permission denied", code=13))
        chain, output, _ = _chain(fs)

        result = await chain.move([a1, a2], dest)

        text = output.getvalue()
        assert result.successes == 1
        assert "Moved 1 of 2 items; 1 failed:" in text
        assert f"{a2}: Permission denied" in text

    @pytest.mark.asyncio
    async def test_precondition_failure_is_reported_and_raised(
        self, fs: Any, sample_tree: Path, tmp_path: Path
    ) -> None:
        chain, output, logger = _chain(fs)

        with pytest.raises(NotFoundError):
            await chain.copy([sample_tree], tmp_path / "missing")

        assert "missing" in output.getvalue()
        assert logger.warning.call_args.args[0] == "fileops.precondition_failed"

    @pytest.mark.asyncio
    async def test_delete(self, fs: Any, sample_tree: Path) -> None:
        chain, output, _ = _chain(fs)

        result = await chain.delete([sample_tree / "README.md", sample_tree / "src"])

        assert result.successes == 2
        assert "Deleted 2 of 2 items" in output.getvalue()
        assert list(sample_tree.iterdir()) == []

    @pytest.mark.asyncio
    async def test_make_directory_and_create_file(
        self, fs: Any, tmp_path: Path
    ) -> None:
        chain, output, _ = _chain(fs)

        await chain.make_directory(tmp_path / "a" / "b")
        created = await chain.create_file(tmp_path / "a" / "b" / "c.txt")

        assert created.exists()
        text = output.getvalue()
        assert "Created directory" in text
        assert "Created file" in text

    @pytest.mark.asyncio
    async def test_create_existing_file_fails(self, fs: Any, tmp_path: Path) -> None:
        target = tmp_path / "exists.txt"
        target.write_text("x")
        chain, output, _ = _chain(fs)

        with pytest.raises(AlreadyExistsError):
            await chain.create_file(target)

        assert "Could not create file" in output.getvalue()

    @pytest.mark.asyncio
    async def test_markup_in_paths_is_printed_literally(
        self, fs: Any, tmp_path: Path
    ) -> None:
        ghost = tmp_path / "[bold]ghost[/bold]"
        chain, output, _ = _chain(fs)

        result = await chain.delete([ghost])

        assert not result.ok
        assert str(ghost) in output.getvalue()
