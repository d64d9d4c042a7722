"""Ordering of notes under their collection's sort policy."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from notekit.domain.note import Note, compare_custom_fields
from notekit.domain.types import NoteSortParm


def sort_notes(notes: Iterable[Note]) -> list[Note]:
    """Return *notes* sorted for their collection.

    The custom policy compares field by field, each in its own direction;
    every other policy compares composite sort keys, reversed when the
    collection sorts descending. The sort is stable.
    """
    items = list(notes)
    if not items:
        return items
    collection = items[0].collection
    if collection.sort_parm == NoteSortParm.CUSTOM:
        return sorted(items, key=cmp_to_key(compare_custom_fields))
    return sorted(items, key=lambda note: note.sort_key, reverse=collection.sort_descending)
