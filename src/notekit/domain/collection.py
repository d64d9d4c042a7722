"""NoteCollection: the schema and settings shared by every note of a collection.

A collection owns one :class:`FieldDictionary`, one :class:`TypeCatalog`
and the option tables the catalog hands to status, rank and level values.
It also records which definition plays each singular role (the title
field, the date field, the seq field, ...). Roles are first-wins: once a
definition claims a role, later definitions of the same type are plain
extra fields.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

from notekit.domain.catalog import TypeCatalog
from notekit.domain.definitions import FieldDefinition
from notekit.domain.dictionary import FieldDictionary
from notekit.domain.identification import NoteIdentifier
from notekit.domain.labels import LOCK_EXEMPT, FieldLabel
from notekit.domain.note import Note
from notekit.domain.templates import apply_template as _apply_template
from notekit.domain.types import NoteIdentifierRule, NoteSortParm
from notekit.domain.values import IntWithLabelConfig, RankValueConfig, StatusValueConfig

if TYPE_CHECKING:
    from notekit.config.models import CollectionConfig

logger = logging.getLogger(__name__)


@dataclass
class FieldRoles:
    """First-registered definition for each singular field role."""

    title: FieldDefinition | None = None
    body: FieldDefinition | None = None
    date: FieldDefinition | None = None
    link: FieldDefinition | None = None
    seq: FieldDefinition | None = None
    status: FieldDefinition | None = None
    rank: FieldDefinition | None = None
    level: FieldDefinition | None = None
    tags: FieldDefinition | None = None
    klass: FieldDefinition | None = None
    creator: FieldDefinition | None = None
    index: FieldDefinition | None = None
    recurs: FieldDefinition | None = None
    teaser: FieldDefinition | None = None
    aka: FieldDefinition | None = None
    timestamp: FieldDefinition | None = None
    date_added: FieldDefinition | None = None
    date_modified: FieldDefinition | None = None
    work_title: FieldDefinition | None = None
    work_type: FieldDefinition | None = None
    work_link: FieldDefinition | None = None
    text_format: FieldDefinition | None = None
    minutes_to_read: FieldDefinition | None = None
    short_id: FieldDefinition | None = None
    date_count: int = 0
    link_count: int = 0

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, f.default)


# type_string -> role attribute
_ROLE_BY_TYPE: dict[str, str] = {
    "title": "title",
    "body": "body",
    "date": "date",
    "link": "link",
    "seq": "seq",
    "status": "status",
    "rank": "rank",
    "level": "level",
    "tags": "tags",
    "klass": "klass",
    "author": "creator",
    "artist": "creator",
    "index": "index",
    "recurs": "recurs",
    "teaser": "teaser",
    "aka": "aka",
    "timestamp": "timestamp",
    "dateadded": "date_added",
    "datemodified": "date_modified",
    "worktitle": "work_title",
    "worktype": "work_type",
    "worklink": "work_link",
    "textformat": "text_format",
    "minutestoread": "minutes_to_read",
    "shortid": "short_id",
}


@dataclass
class SortField:
    """One key of a custom sort: a field and its direction."""

    definition: FieldDefinition
    ascending: bool = True


class NoteCollection:
    """Schema, type catalog and configuration for a set of notes."""

    def __init__(self, title: str = "", *, catalog: TypeCatalog | None = None) -> None:
        self.title = title
        self.catalog = catalog or TypeCatalog()
        self.dictionary = FieldDictionary()
        self.roles = FieldRoles()
        self.sort_parm = NoteSortParm.TITLE
        self.sort_descending = False
        self.custom_fields: list[SortField] = []
        self.identifier = NoteIdentifier()
        self.klass_templates: dict[str, Note] = {}

    # -- configuration -----------------------------------------------------

    @property
    def status_config(self) -> StatusValueConfig:
        return self.catalog.status_config

    @property
    def rank_config(self) -> RankValueConfig:
        return self.catalog.rank_config

    @property
    def level_config(self) -> IntWithLabelConfig:
        return self.catalog.level_config

    def set_status_config(self, options: str) -> None:
        self.catalog.status_config.set(options)

    def set_rank_config(self, options: str) -> None:
        self.catalog.rank_config.set(options)

    def set_level_config(self, options: str) -> None:
        self.catalog.level_config.set(options)

    def set_custom_sort(self, keys: Iterable[tuple[str, bool]]) -> None:
        """Set the custom sort keys from ``(label, ascending)`` pairs.

        Labels the collection cannot resolve are skipped with a warning.
        """
        self.custom_fields = []
        for label, ascending in keys:
            definition = self.resolve_field(label)
            if definition is None:
                logger.warning("Custom sort field %r could not be resolved; skipped", label)
                continue
            self.custom_fields.append(SortField(definition, ascending))

    def lock(self) -> None:
        self.dictionary.lock()

    def unlock(self) -> None:
        self.dictionary.unlock()

    @property
    def locked(self) -> bool:
        return self.dictionary.locked

    # -- schema ------------------------------------------------------------

    def resolve_field(self, label: FieldLabel | str, type_hint: str | None = None) -> FieldDefinition | None:
        """Find or create the definition for *label*.

        Returns None when the label is rejected: reserved or over-long
        labels always, unknown labels while the dictionary is locked
        (date-added and date-modified excepted).
        """
        if isinstance(label, str):
            label = FieldLabel(label)
        if not label.valid_label:
            logger.debug("Rejected field label %r", label.proper_form)
            return None
        existing = self.dictionary.get_def(label)
        if existing is not None:
            return existing
        if self.dictionary.locked and label.common_form not in LOCK_EXEMPT:
            logger.debug("Collection locked; unknown field %r refused", label.proper_form)
            return None
        definition = self.dictionary.add_def(FieldDefinition.create(label, self.catalog, type_hint))
        if definition is not None:
            self.register_def(definition)
        return definition

    def register_def(self, definition: FieldDefinition) -> None:
        """Let *definition* claim its type's role if no earlier definition has."""
        role = _ROLE_BY_TYPE.get(definition.type_string)
        if role is None:
            return
        if role == "date":
            self.roles.date_count += 1
        elif role == "link":
            self.roles.link_count += 1
        if getattr(self.roles, role) is None:
            setattr(self.roles, role, definition)
            logger.debug("%s claims the %s role", definition.label.proper_form, role)

    def refresh_roles(self) -> None:
        """Recompute every role from the dictionary, in dictionary order."""
        self.roles.reset()
        for definition in self.dictionary:
            self.register_def(definition)

    def apply_template(self, values: Mapping[str, str]) -> None:
        """Build the schema from a template note's raw ``label -> text`` values."""
        _apply_template(self, values)

    def get_def(self, label: FieldLabel | str) -> FieldDefinition | None:
        return self.dictionary.get_def(label)

    # -- notes -------------------------------------------------------------

    def new_note(self, values: Mapping[str, str] | None = None) -> Note:
        """Create a note and set each ``label -> text`` pair on it.

        Labels the collection refuses are skipped.
        """
        note = Note(self)
        for label, text in (values or {}).items():
            if not note.set_field(label, text):
                logger.debug("Note field %r not accepted", label)
        note.identify()
        return note

    def register_klass_template(self, klass: str, template: Note) -> None:
        """Remember *template* as the model for notes of class *klass*."""
        self.klass_templates[klass.strip().lower()] = template

    # -- construction ------------------------------------------------------

    @classmethod
    def from_config(cls, config: CollectionConfig, *, catalog: TypeCatalog | None = None) -> NoteCollection:
        """Build a collection from its validated configuration."""
        collection = cls(config.title, catalog=catalog)
        if config.status_options:
            collection.set_status_config(config.status_options)
        if config.rank_options:
            collection.set_rank_config(config.rank_options)
        if config.level_options:
            collection.set_level_config(config.level_options)
        for field_config in config.fields:
            definition = collection.resolve_field(field_config.label, field_config.type or None)
            if definition is None:
                logger.warning("Configured field %r rejected", field_config.label)
                continue
            if field_config.config:
                definition.apply_type_config(field_config.config, collection.catalog)
        collection.dictionary.check_title()
        collection.sort_parm = NoteSortParm.parse(config.sort_parm)
        collection.sort_descending = config.sort_descending
        collection.identifier = NoteIdentifier(
            unique_id_rule=NoteIdentifierRule(config.id_rule),
            aux_field=config.id_aux_field,
            text_id_rule=NoteIdentifierRule(config.text_id_rule),
            text_id_sep=config.text_id_sep,
        )
        collection.set_custom_sort((key.field, key.ascending) for key in config.custom_sort)
        if config.locked:
            collection.lock()
        return collection

    def __repr__(self) -> str:
        return f"NoteCollection({self.title!r}, fields={len(self.dictionary)}, sort={self.sort_parm})"
