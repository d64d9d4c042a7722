"""Tests for note ordering under each sort policy."""

from __future__ import annotations

import pytest

from notekit.domain.collection import NoteCollection
from notekit.domain.note import compare_custom_fields
from notekit.domain.sorting import sort_notes
from notekit.domain.types import NoteSortParm
from tests.conftest import make_note, titles


class TestSortParm:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("title", NoteSortParm.TITLE),
            ("2", NoteSortParm.SEQ_PLUS_TITLE),
            (8, NoteSortParm.CUSTOM),
            ("Tasks-By-Date", NoteSortParm.TASKS_BY_DATE),
            ("tags+title", NoteSortParm.TAGS_PLUS_TITLE),
            ("LAST_NAME_FIRST", NoteSortParm.LAST_NAME_FIRST),
            ("bogus", NoteSortParm.TITLE),
            (99, NoteSortParm.TITLE),
            (None, NoteSortParm.TITLE),
        ],
    )
    def test_parse(self, raw: str | int | None, expected: NoteSortParm) -> None:
        assert NoteSortParm.parse(raw) == expected

    def test_codes_are_one_based(self) -> None:
        assert NoteSortParm.TITLE.code == 1
        assert NoteSortParm.LAST_NAME_FIRST.code == len(NoteSortParm)


class TestSortNotes:
    def test_title(self, collection: NoteCollection) -> None:
        notes = [make_note(collection, {"Title": t}) for t in ("banana", "The Apple", "cherry")]
        assert titles(sort_notes(notes)) == ["banana", "cherry", "The Apple"]

    def test_seq_plus_title(self, collection: NoteCollection) -> None:
        collection.sort_parm = NoteSortParm.SEQ_PLUS_TITLE
        notes = [
            make_note(collection, {"Title": "B", "Seq": "1.10"}),
            make_note(collection, {"Title": "A", "Seq": "1.2"}),
            make_note(collection, {"Title": "C", "Seq": "1.2"}),
            make_note(collection, {"Title": "D", "Seq": "1"}),
        ]
        assert titles(sort_notes(notes)) == ["D", "A", "C", "B"]

    def test_descending(self, collection: NoteCollection) -> None:
        collection.sort_descending = True
        notes = [make_note(collection, {"Title": t}) for t in ("a", "c", "b")]
        assert titles(sort_notes(notes)) == ["c", "b", "a"]
        assert notes[1] < notes[0]

    def test_tasks_by_date_puts_done_last(self, collection: NoteCollection) -> None:
        collection.sort_parm = NoteSortParm.TASKS_BY_DATE
        notes = [
            make_note(collection, {"Title": "done early", "Status": "9", "Date": "2024-01-01"}),
            make_note(collection, {"Title": "open late", "Status": "4", "Date": "2024-06-01"}),
            make_note(collection, {"Title": "open early", "Status": "1", "Date": "March 1, 2024"}),
        ]
        assert titles(sort_notes(notes)) == ["open early", "open late", "done early"]

    def test_author(self, collection: NoteCollection) -> None:
        collection.sort_parm = NoteSortParm.AUTHOR
        notes = [
            make_note(collection, {"Title": "Emma", "Author": "Jane Austen"}),
            make_note(collection, {"Title": "Persuasion", "Author": "Austen, Jane"}),
            make_note(collection, {"Title": "Dune", "Author": "Frank Herbert"}),
        ]
        assert titles(sort_notes(notes)) == ["Emma", "Persuasion", "Dune"]

    def test_tags_plus_title(self, collection: NoteCollection) -> None:
        collection.sort_parm = NoteSortParm.TAGS_PLUS_TITLE
        notes = [
            make_note(collection, {"Title": "x", "Tags": "beta"}),
            make_note(collection, {"Title": "y", "Tags": "alpha"}),
        ]
        assert titles(sort_notes(notes)) == ["y", "x"]

    def test_last_name_first(self) -> None:
        collection = NoteCollection()
        collection.sort_parm = NoteSortParm.LAST_NAME_FIRST
        notes = [make_note(collection, {"Title": t}) for t in ("Zadie Smith", "Chinua Achebe", "Toni Morrison")]
        assert titles(sort_notes(notes)) == ["Chinua Achebe", "Toni Morrison", "Zadie Smith"]

    def test_date_added(self) -> None:
        collection = NoteCollection()
        collection.sort_parm = NoteSortParm.DATE_ADDED
        notes = [
            make_note(collection, {"Title": "new", "Date Added": "2024-05-01 09:00:00"}),
            make_note(collection, {"Title": "old", "Date Added": "2023-05-01 09:00:00"}),
        ]
        assert titles(sort_notes(notes)) == ["old", "new"]

    def test_rank_seq_title(self) -> None:
        collection = NoteCollection()
        collection.set_rank_config("1 - High; 2 - Low")
        collection.sort_parm = NoteSortParm.RANK_SEQ_TITLE
        notes = [
            make_note(collection, {"Title": "b", "Rank": "Low", "Seq": "1"}),
            make_note(collection, {"Title": "a", "Rank": "High", "Seq": "2"}),
            make_note(collection, {"Title": "c", "Rank": "High", "Seq": "1"}),
        ]
        assert titles(sort_notes(notes)) == ["c", "a", "b"]

    def test_stable_for_equal_keys(self, collection: NoteCollection) -> None:
        notes = [make_note(collection, {"Title": "Same", "Tags": t}) for t in ("1", "2", "3")]
        assert [n.tags.value for n in sort_notes(notes)] == ["1", "2", "3"]

    def test_empty(self) -> None:
        assert sort_notes([]) == []


class TestCustomSort:
    def _collection(self) -> NoteCollection:
        collection = NoteCollection()
        collection.resolve_field("Title")
        collection.sort_parm = NoteSortParm.CUSTOM
        collection.set_custom_sort([("Priority", False), ("Title", True)])
        return collection

    def test_mixed_directions(self) -> None:
        collection = self._collection()
        notes = [
            make_note(collection, {"Title": "b", "Priority": "1"}),
            make_note(collection, {"Title": "a", "Priority": "1"}),
            make_note(collection, {"Title": "c", "Priority": "3"}),
            make_note(collection, {"Title": "d", "Priority": "10"}),
        ]
        assert titles(sort_notes(notes)) == ["d", "c", "a", "b"]

    def test_compare(self) -> None:
        collection = self._collection()
        high = make_note(collection, {"Title": "z", "Priority": "5"})
        low = make_note(collection, {"Title": "a", "Priority": "2"})
        twin = make_note(collection, {"Title": "z", "Priority": "5"})
        assert compare_custom_fields(high, low) == -1
        assert compare_custom_fields(low, high) == 1
        assert compare_custom_fields(high, twin) == 0
        assert high < low

    def test_unresolvable_field_skipped(self) -> None:
        collection = NoteCollection()
        collection.lock()
        collection.set_custom_sort([("Missing", True)])
        assert collection.custom_fields == []
