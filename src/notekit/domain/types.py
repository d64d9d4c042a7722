"""Classification enums shared across the domain layer.

Sort policies, note identifier composition rules and the character
classes recognized by the sequence engine.
"""

from __future__ import annotations

from enum import StrEnum

from notekit.domain.text import is_digits


class NoteSortParm(StrEnum):
    """Collection-wide note ordering policies.

    Each member carries a stable integer ``code`` so that configurations
    written with numeric sort parameters keep working.
    """

    TITLE = "title"
    SEQ_PLUS_TITLE = "seq_plus_title"
    TASKS_BY_DATE = "tasks_by_date"
    TASKS_BY_SEQ = "tasks_by_seq"
    AUTHOR = "author"
    TAGS_PLUS_TITLE = "tags_plus_title"
    TAGS_PLUS_SEQ = "tags_plus_seq"
    CUSTOM = "custom"
    DATE_ADDED = "date_added"
    DATE_MODIFIED = "date_modified"
    DATE_PLUS_SEQ = "date_plus_seq"
    RANK_SEQ_TITLE = "rank_seq_title"
    KLASS_TITLE = "klass_title"
    KLASS_DATE_TITLE = "klass_date_title"
    LAST_NAME_FIRST = "last_name_first"

    @property
    def code(self) -> int:
        """One-based position of this policy, used in numeric configuration."""
        return list(NoteSortParm).index(self) + 1

    @classmethod
    def parse(cls, text: str | int | None) -> NoteSortParm:
        """Resolve a sort policy from its code, name or value.

        Unknown input falls back to :attr:`TITLE`.

        Examples:
            >>> NoteSortParm.parse("2")
            <NoteSortParm.SEQ_PLUS_TITLE: 'seq_plus_title'>
            >>> NoteSortParm.parse("tasks-by-date")
            <NoteSortParm.TASKS_BY_DATE: 'tasks_by_date'>
        """
        if text is None:
            return cls.TITLE
        if isinstance(text, int):
            members = list(cls)
            if 1 <= text <= len(members):
                return members[text - 1]
            return cls.TITLE
        raw = text.strip()
        if is_digits(raw):
            return cls.parse(int(raw))
        key = raw.lower().replace("-", "_").replace(" ", "_").replace("+", "_plus_")
        key = "_".join(part for part in key.split("_") if part)
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        return cls.TITLE


class NoteIdentifierRule(StrEnum):
    """How a note's unique identifier is composed from its title and an aux field."""

    TITLE_ONLY = "title_only"
    TITLE_BEFORE_AUX = "title_before_aux"
    TITLE_AFTER_AUX = "title_after_aux"
    AUX_ONLY = "aux_only"


class NumberKind(StrEnum):
    """Character class of a sequence segment.

    ``ROMAN`` is accepted for explicit configuration but never inferred
    from text: ``"I"`` and ``"V"`` parse as ``UPPER``.
    """

    EMPTY = "empty"
    DIGITS = "digits"
    LOWER = "lower"
    UPPER = "upper"
    ROMAN = "roman"
    MIXED = "mixed"
