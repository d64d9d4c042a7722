"""SortService: build notes from raw field records and order them."""

from __future__ import annotations

from typing import Any

from notekit.domain.note import Note
from notekit.domain.sorting import sort_notes
from notekit.domain.types import NoteSortParm
from notekit.services.base import INVALID_INPUT, BaseService
from notekit.services.result import ServiceResult


class SortService(BaseService):
    """Sort notes given as ``label -> text`` records."""

    def sort_records(
        self,
        records: Any,
        *,
        sort_parm: str | None = None,
        descending: bool | None = None,
    ) -> ServiceResult:
        """Create one note per record and return them in collection order.

        *sort_parm* and *descending* override the collection's settings for
        this call. Fields the collection refuses are reported as warnings.
        """
        op = "sort_notes"
        if not isinstance(records, list):
            return self._failure(op, INVALID_INPUT, "Expected a list of note records")
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                return self._failure(
                    op,
                    INVALID_INPUT,
                    f"Record {index} is not an object of label/text pairs",
                    {"index": index},
                )

        collection = self._collection
        if sort_parm is not None:
            collection.sort_parm = NoteSortParm.parse(sort_parm)
        if descending is not None:
            collection.sort_descending = descending

        warnings: list[str] = []
        notes: list[Note] = []
        for index, record in enumerate(records):
            note = Note(collection)
            for label, text in record.items():
                if not note.set_field(str(label), "" if text is None else str(text)):
                    warnings.append(f"Record {index}: field {label!r} refused")
            note.identify()
            notes.append(note)

        items = [
            {
                "position": position,
                "id": note.id,
                "title": note.title.value,
                "sort_key": note.sort_key,
                "fields": note.to_dict(),
            }
            for position, note in enumerate(sort_notes(notes), start=1)
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": items, "count": len(items)},
            warnings=warnings,
            meta={"sort_parm": str(collection.sort_parm), "descending": collection.sort_descending},
        )
