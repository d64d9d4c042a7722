"""Tests for the configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from notekit.config.models import CollectionConfig, FieldConfig, NotekitConfig, SortKeyConfig
from notekit.domain.types import NoteIdentifierRule, NoteSortParm


class TestCollectionConfig:
    def test_defaults(self) -> None:
        cfg = CollectionConfig()
        assert cfg.title == "Notes"
        assert cfg.sort_parm == NoteSortParm.TITLE
        assert cfg.sort_descending is False
        assert cfg.id_rule == NoteIdentifierRule.TITLE_ONLY
        assert cfg.locked is False
        assert cfg.fields == []

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("seq_plus_title", NoteSortParm.SEQ_PLUS_TITLE),
            ("Seq + Title", NoteSortParm.SEQ_PLUS_TITLE),
            (2, NoteSortParm.SEQ_PLUS_TITLE),
            ("8", NoteSortParm.CUSTOM),
            ("nonsense", NoteSortParm.TITLE),
        ],
    )
    def test_sort_parm_accepts_names_and_codes(self, raw: object, expected: NoteSortParm) -> None:
        assert CollectionConfig(sort_parm=raw).sort_parm == expected

    def test_invalid_id_rule(self) -> None:
        with pytest.raises(ValidationError):
            CollectionConfig(id_rule="sideways")

    def test_frozen(self) -> None:
        cfg = CollectionConfig()
        with pytest.raises(ValidationError):
            cfg.title = "Other"  # type: ignore[misc]

    def test_nested_entries(self) -> None:
        cfg = CollectionConfig.model_validate(
            {
                "fields": [{"label": "Status", "config": "1 - Open; 9 - Done"}],
                "custom_sort": [{"field": "Priority", "ascending": False}],
            }
        )
        assert cfg.fields == [FieldConfig(label="Status", config="1 - Open; 9 - Done")]
        assert cfg.custom_sort == [SortKeyConfig(field="Priority", ascending=False)]


class TestNotekitConfig:
    def test_sections_default(self) -> None:
        cfg = NotekitConfig()
        assert cfg.collection == CollectionConfig()
        assert cfg.plugins.enabled is True
        assert cfg.plugins.disabled == []
