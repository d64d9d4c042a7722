"""Shared pytest fixtures and test helpers for notekit tests."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import pytest
from click.testing import CliRunner

from notekit.domain.collection import NoteCollection
from notekit.domain.note import Note


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def collection() -> NoteCollection:
    """An unlocked collection with a typical schema."""
    coll = NoteCollection("Test Notes")
    for label in ("Title", "Seq", "Status", "Date", "Tags", "Author", "Body"):
        coll.resolve_field(label)
    return coll


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory so no notekit.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command test
    classes.
    """
    monkeypatch.delenv("NOTEKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_note(collection: NoteCollection, values: Mapping[str, str]) -> Note:
    """Create a note, asserting every field was accepted."""
    note = Note(collection)
    for label, text in values.items():
        assert note.set_field(label, text), f"field {label!r} refused"
    note.identify()
    return note


def titles(notes: list[Note]) -> list[str]:
    return [note.title.value for note in notes]
