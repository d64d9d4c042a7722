"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, notekit.toml only contains
overrides. An empty file describes an unlocked collection sorted by title
with the standard status options.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from notekit.domain.types import NoteIdentifierRule, NoteSortParm


class FieldConfig(BaseModel):
    """One ``[[collection.fields]]`` entry: a label with an optional type and type config."""

    model_config = {"frozen": True}

    label: str
    type: str = ""
    config: str = ""


class SortKeyConfig(BaseModel):
    """One ``[[collection.custom_sort]]`` entry."""

    model_config = {"frozen": True}

    field: str
    ascending: bool = True


class CollectionConfig(BaseModel):
    """[collection] section."""

    model_config = {"frozen": True}

    title: str = "Notes"
    sort_parm: NoteSortParm = NoteSortParm.TITLE
    sort_descending: bool = False
    status_options: str = ""
    rank_options: str = ""
    level_options: str = ""
    custom_sort: list[SortKeyConfig] = Field(default_factory=list)
    id_rule: NoteIdentifierRule = NoteIdentifierRule.TITLE_ONLY
    id_aux_field: str = ""
    text_id_rule: NoteIdentifierRule = NoteIdentifierRule.TITLE_ONLY
    text_id_sep: str = ""
    locked: bool = False
    fields: list[FieldConfig] = Field(default_factory=list)

    @field_validator("sort_parm", mode="before")
    @classmethod
    def _parse_sort_parm(cls, value: object) -> NoteSortParm:
        if isinstance(value, NoteSortParm):
            return value
        if isinstance(value, (str, int)):
            return NoteSortParm.parse(value)
        return NoteSortParm.TITLE


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    disabled: list[str] = Field(default_factory=list)


class NotekitConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    collection: CollectionConfig = Field(default_factory=CollectionConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
