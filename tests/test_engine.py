"""Tests for the FileOpsEngine facade."""

from pathlib import Path
from typing import Any

import pytest

from pathwright import EngineConfig, FileOpsEngine
from pathwright.core.schemas import RelocationEvent
from pathwright.editor.buffers import InMemoryBufferRegistry
from pathwright.editor.listeners import ListenerRegistry


class Journal:
    def __init__(self) -> None:
        self.events: list[tuple[str, RelocationEvent]] = []

    def will_relocate(self, event: RelocationEvent, deadline: float) -> None:
        self.events.append(("will", event))

    def did_relocate(self, event: RelocationEvent) -> None:
        self.events.append(("did", event))


def test_config_defaults_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATHWRIGHT_MAX_CONCURRENCY", "3")

    engine = FileOpsEngine()

    assert engine.config.max_concurrency == 3
    assert engine.fs.config is engine.config
    assert len(engine.listeners) == 0


def test_config_taken_from_injected_primitives(fs: Any) -> None:
    engine = FileOpsEngine(fs=fs)

    assert engine.config is fs.config


@pytest.mark.asyncio
async def test_end_to_end_workflow(tmp_path: Path) -> None:
    buffers = InMemoryBufferRegistry()
    journal = Journal()
    engine = FileOpsEngine(
        buffers=buffers,
        listeners=ListenerRegistry([journal]),
        config=EngineConfig(max_concurrency=4),
    )
    workspace = tmp_path / "workspace"

    await engine.ensure_directory(workspace / "inbox")
    note = await engine.create_file(workspace / "inbox" / "note.md")
    note_buffer = buffers.open(note)

    backup = workspace / "backup"
    await engine.ensure_directory(backup)
    copied = await engine.copy_tree(workspace / "inbox", backup)
    assert [o.ok for o in copied] == [True, True]
    assert (backup / "inbox" / "note.md").exists()

    archive = workspace / "archive"
    await engine.ensure_directory(archive)
    moved = await engine.move_many([workspace / "inbox"], archive)
    assert moved.successes == 1
    assert buffers.buffers[note_buffer] == str(archive / "inbox" / "note.md")
    assert [kind for kind, _ in journal.events] == ["will", "did"]

    renamed = await engine.relocate(
        archive / "inbox", archive / "old-inbox", notify_external=False
    )
    assert renamed.ok
    assert len(journal.events) == 2
    assert buffers.buffers[note_buffer] == str(archive / "old-inbox" / "note.md")

    deleted = await engine.delete_many([archive])
    assert deleted.ok
    assert note_buffer not in buffers.buffers
    assert not archive.exists()


@pytest.mark.asyncio
async def test_copy_many_through_engine(
    fs: Any, sample_tree: Path, tmp_path: Path
) -> None:
    dest = tmp_path / "dest"
    dest.mkdir()

    result = await FileOpsEngine(fs=fs).copy_many([sample_tree], dest)

    assert result.successes == 6
