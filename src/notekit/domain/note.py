"""Note: a set of typed field values belonging to one collection."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from notekit.domain.definitions import FieldDefinition
from notekit.domain.identification import AttachmentName, NoteIdentification
from notekit.domain.labels import DATE_ADDED, DATE_MODIFIED, FieldLabel, normalize_label
from notekit.domain.types import NoteSortParm
from notekit.domain.values import (
    AuthorValue,
    DateTimeValue,
    DateValue,
    IndexValue,
    KlassValue,
    LevelValue,
    LinkValue,
    LongTextValue,
    RankValue,
    RecursValue,
    SeqValue,
    StatusValue,
    StringValue,
    TagsValue,
    TitleValue,
)

if TYPE_CHECKING:
    from notekit.domain.collection import NoteCollection

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=StringValue)

LabelRef = FieldDefinition | FieldLabel | str


@dataclass
class NoteField:
    """A definition paired with this note's value for it."""

    definition: FieldDefinition
    value: StringValue

    def __str__(self) -> str:
        return f"{self.definition.label.proper_form}: {self.value.value}"


def _common(label: LabelRef) -> str:
    if isinstance(label, (FieldDefinition, FieldLabel)):
        return label.common_form
    return normalize_label(label)


class Note:
    """An ordered mapping of common label to :class:`NoteField`.

    All mutation goes through :meth:`set_field` and :meth:`add_field`, which
    defer to the collection for label acceptance. Changing the title or
    the identifier's aux field re-derives :attr:`note_id`.
    """

    def __init__(self, collection: NoteCollection) -> None:
        self.collection = collection
        self.fields: dict[str, NoteField] = {}
        self.note_id = NoteIdentification()
        self.attachments: list[AttachmentName] = []

    # -- field access ------------------------------------------------------

    def get_field(self, label: LabelRef) -> NoteField | None:
        return self.fields.get(_common(label))

    def get_value(self, label: LabelRef | None) -> StringValue:
        """The stored value for *label*, or an empty plain value."""
        if label is None:
            return StringValue()
        note_field = self.get_field(label)
        return note_field.value if note_field is not None else StringValue()

    def contains(self, label: LabelRef) -> bool:
        """Whether the note has a non-empty value for *label*."""
        note_field = self.get_field(label)
        return note_field is not None and note_field.value.has_data

    def __contains__(self, label: object) -> bool:
        if isinstance(label, (FieldDefinition, FieldLabel, str)):
            return self.contains(label)
        return False

    def __iter__(self) -> Iterator[NoteField]:
        """Fields in dictionary order."""
        for definition in self.collection.dictionary:
            note_field = self.fields.get(definition.common_form)
            if note_field is not None:
                yield note_field

    def to_dict(self) -> dict[str, str]:
        """Proper label to written value, in dictionary order."""
        return {f.definition.label.proper_form: f.value.value_to_write() for f in self}

    # -- mutation ----------------------------------------------------------

    def set_field(self, label: LabelRef, text: str) -> bool:
        """Parse *text* into the field named by *label*, replacing any value.

        Returns False, leaving the note untouched, when the collection
        refuses the label.
        """
        if isinstance(label, FieldDefinition):
            definition = self._accept(label)
        else:
            definition = self.collection.resolve_field(label)
        if definition is None:
            return False
        value = definition.parse(text, self.collection.catalog)
        self.fields[definition.common_form] = NoteField(definition, value)
        self._after_change(definition)
        return True

    def add_field(self, definition: FieldDefinition, text: str) -> bool:
        """Like :meth:`set_field`, but fails if the note already has the field."""
        if definition.common_form in self.fields:
            return False
        return self.set_field(definition, text)

    def remove_field(self, label: LabelRef) -> bool:
        removed = self.fields.pop(_common(label), None)
        if removed is None:
            return False
        self._after_change(removed.definition)
        return True

    def _accept(self, definition: FieldDefinition) -> FieldDefinition | None:
        existing = self.collection.dictionary.get_def(definition)
        if existing is not None:
            return existing
        if not definition.label.valid_label:
            return None
        added = self.collection.dictionary.add_def(definition)
        if added is not None:
            self.collection.register_def(added)
        return added

    def _after_change(self, definition: FieldDefinition) -> None:
        if definition.is_title or self.collection.identifier.uses_field(definition.common_form):
            self.identify()

    # -- identity ----------------------------------------------------------

    def identify(self) -> None:
        self.collection.identifier.identify(self, self.note_id)

    def avoid_duplicate(self) -> None:
        self.note_id.avoid_duplicate()

    @property
    def id(self) -> str:
        return self.note_id.common_id

    # -- typed accessors ---------------------------------------------------

    def _typed(
        self,
        definition: FieldDefinition | None,
        value_type: type[V],
        factory: Callable[[str], V] | None = None,
    ) -> V:
        value = self.get_value(definition)
        if isinstance(value, value_type):
            return value
        make = factory or value_type
        return make(value.value)

    @property
    def title(self) -> TitleValue:
        return self._typed(self.collection.roles.title, TitleValue)

    @property
    def body(self) -> LongTextValue:
        return self._typed(self.collection.roles.body, LongTextValue)

    @property
    def date(self) -> DateValue:
        return self._typed(self.collection.roles.date, DateValue)

    @property
    def seq(self) -> SeqValue:
        return self._typed(self.collection.roles.seq, SeqValue)

    @property
    def status(self) -> StatusValue:
        config = self.collection.status_config
        return self._typed(self.collection.roles.status, StatusValue, lambda t: StatusValue(t, config))

    @property
    def rank(self) -> RankValue:
        config = self.collection.rank_config
        return self._typed(self.collection.roles.rank, RankValue, lambda t: RankValue(t, config))

    @property
    def level(self) -> LevelValue:
        config = self.collection.level_config
        return self._typed(self.collection.roles.level, LevelValue, lambda t: LevelValue(t, config))

    @property
    def tags(self) -> TagsValue:
        return self._typed(self.collection.roles.tags, TagsValue)

    @property
    def link(self) -> LinkValue:
        return self._typed(self.collection.roles.link, LinkValue)

    @property
    def klass(self) -> KlassValue:
        return self._typed(self.collection.roles.klass, KlassValue)

    @property
    def creator(self) -> AuthorValue:
        return self._typed(self.collection.roles.creator, AuthorValue)

    @property
    def index(self) -> IndexValue:
        return self._typed(self.collection.roles.index, IndexValue)

    @property
    def recurs(self) -> RecursValue:
        return self._typed(self.collection.roles.recurs, RecursValue)

    @property
    def date_added(self) -> DateTimeValue:
        return self._typed(self.collection.roles.date_added, DateTimeValue)

    @property
    def date_modified(self) -> DateTimeValue:
        return self._typed(self.collection.roles.date_modified, DateTimeValue)

    # -- status and dates --------------------------------------------------

    @property
    def is_done(self) -> bool:
        return self.status.is_done

    def toggle_status(self) -> None:
        if self.contains_role("status"):
            self.status.toggle()

    def increment_status(self) -> None:
        if self.contains_role("status"):
            self.status.increment()

    def close(self) -> None:
        """Complete the note: recurring dated notes move to their next date, others close their status."""
        if self.contains_role("date") and self.recurs.is_recurring:
            self.recurs.recur(self.date)
        elif self.contains_role("status"):
            self.status.close()

    def set_date_added(self, text: str) -> bool:
        return self.set_field(DATE_ADDED, text)

    def set_date_mod_now(self) -> None:
        """Stamp the date-modified field, if the collection defines one."""
        definition = self.collection.dictionary.get_def(DATE_MODIFIED)
        if definition is None:
            return
        value = self.get_value(definition)
        if isinstance(value, DateTimeValue):
            value.set_to_now()
            return
        stamp = DateTimeValue()
        stamp.set_to_now()
        self.fields[definition.common_form] = NoteField(definition, stamp)

    def contains_role(self, role: str) -> bool:
        definition = getattr(self.collection.roles, role)
        return definition is not None and self.contains(definition)

    # -- sorting -----------------------------------------------------------

    @property
    def sort_key(self) -> str:
        """Composite key for the collection's sort policy."""
        parm = self.collection.sort_parm
        if parm == NoteSortParm.TITLE:
            return self.title.sort_key
        if parm == NoteSortParm.SEQ_PLUS_TITLE:
            return self.seq.sort_key + self.title.sort_key
        if parm == NoteSortParm.TASKS_BY_DATE:
            return self.status.done_x + self.date.sort_key + self.seq.sort_key + self.title.sort_key
        if parm == NoteSortParm.TASKS_BY_SEQ:
            return self.status.done_x + self.seq.sort_key + self.date.sort_key + self.title.sort_key
        if parm == NoteSortParm.AUTHOR:
            return self.creator.sort_key + self.date.sort_key + self.title.sort_key
        if parm == NoteSortParm.TAGS_PLUS_TITLE:
            return self.tags.sort_key + self.title.sort_key + self.status.sort_key
        if parm == NoteSortParm.TAGS_PLUS_SEQ:
            return f"{self.tags.sort_key} {self.seq.sort_key} {self.title.sort_key}"
        if parm == NoteSortParm.CUSTOM:
            return "".join(
                self.get_value(sort_field.definition).sort_key for sort_field in self.collection.custom_fields
            )
        if parm == NoteSortParm.DATE_ADDED:
            return self.date_added.sort_key
        if parm == NoteSortParm.DATE_MODIFIED:
            return self.date_modified.sort_key
        if parm == NoteSortParm.DATE_PLUS_SEQ:
            return self.date.sort_key + self.seq.sort_key + self.title.sort_key
        if parm == NoteSortParm.RANK_SEQ_TITLE:
            return self.rank.sort_key + self.seq.sort_key + self.title.sort_key
        if parm == NoteSortParm.KLASS_TITLE:
            return self.klass.sort_key + self.title.sort_key
        if parm == NoteSortParm.KLASS_DATE_TITLE:
            return self.klass.sort_key + self.date.sort_key + self.title.sort_key
        # LAST_NAME_FIRST: the title is a person's name
        return AuthorValue(self.title.value).sort_key + self.title.sort_key

    def __lt__(self, other: Note) -> bool:
        if self.collection.sort_parm == NoteSortParm.CUSTOM:
            return compare_custom_fields(self, other) < 0
        if self.collection.sort_descending:
            return self.sort_key > other.sort_key
        return self.sort_key < other.sort_key

    # -- copying and templates ---------------------------------------------

    def copy(self) -> Note:
        duplicate = Note(self.collection)
        self.copy_fields(duplicate)
        duplicate.attachments = list(self.attachments)
        return duplicate

    def copy_fields(self, to: Note) -> None:
        """Make *to*'s values match this note's for every defined field."""
        for definition in self.collection.dictionary:
            mine = self.get_field(definition)
            theirs = to.get_field(definition)
            if mine is None:
                if theirs is not None:
                    theirs.value.set("")
            elif theirs is None:
                to.add_field(definition, mine.value.value)
            else:
                theirs.value.set(mine.value.value)
        to.identify()

    def apply_klass_template(self) -> bool:
        """Fill empty fields from the template registered for this note's class."""
        template = self.collection.klass_templates.get(self.klass.value.lower())
        if template is None:
            return False
        for definition in self.collection.dictionary:
            if not definition.should_init_from_klass_template or self.contains(definition):
                continue
            source = template.get_field(definition)
            if source is not None and source.value.has_data:
                self.set_field(definition, source.value.value)
        return True

    # -- attachments -------------------------------------------------------

    def add_attachment(self, suffix: str, ext: str = "") -> AttachmentName:
        attachment = AttachmentName.for_note(self.note_id, suffix, ext)
        self.attachments.append(attachment)
        self.attachments.sort()
        return attachment

    def __repr__(self) -> str:
        return f"Note({self.note_id.text or self.title.value!r}, fields={len(self.fields)})"


def compare_custom_fields(lhs: Note, rhs: Note) -> int:
    """Compare two notes key by key over the collection's custom sort fields.

    Returns -1, 0 or 1; the first field whose values differ decides.
    """
    for sort_field in lhs.collection.custom_fields:
        left = lhs.get_value(sort_field.definition)
        right = rhs.get_value(sort_field.definition)
        if left < right:
            return -1 if sort_field.ascending else 1
        if right < left:
            return 1 if sort_field.ascending else -1
    return 0
