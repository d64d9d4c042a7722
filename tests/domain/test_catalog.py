"""Tests for field type assignment and field definitions."""

from __future__ import annotations

import pytest

from notekit.domain.catalog import TypeCatalog
from notekit.domain.definitions import FieldDefinition
from notekit.domain.fieldtypes import FieldType
from notekit.domain.values import IntValue, StringValue


class TestAssignType:
    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("Title", "title"),
            ("Body", "body"),
            ("By", "author"),
            ("Creator", "author"),
            ("Artists", "artist"),
            ("Keywords", "tags"),
            ("URL", "link"),
            ("Seq", "seq"),
            ("Seq 2", "seq"),
            ("Version", "seq"),
            ("Priority", "rating"),
            ("Date Added", "dateadded"),
            ("Every", "recurs"),
            ("Class", "klass"),
            ("Comments", "longtext"),
            ("AKA", "aka"),
        ],
    )
    def test_by_label(self, label: str, expected: str) -> None:
        assert TypeCatalog().assign_type(label).type_string == expected

    def test_unknown_label_falls_back_to_string(self) -> None:
        assert TypeCatalog().assign_type("Favorite Color").type_string == "string"

    @pytest.mark.parametrize(
        ("label", "hint", "expected"),
        [
            ("Notes", "int", "int"),
            ("Notes", "Integer", "int"),
            ("Done", "checkbox", "boolean"),
            ("Anything", "date", "date"),
            ("Title", "string", "string"),
            ("Klass", "pick-from", "klass"),
            ("Genre", "pick-from", "pickfrom"),
        ],
    )
    def test_by_hint(self, label: str, hint: str, expected: str) -> None:
        assert TypeCatalog().assign_type(label, hint).type_string == expected

    def test_unknown_hint_falls_back_to_string(self) -> None:
        assert TypeCatalog().assign_type("Title", "no-such-type").type_string == "string"

    def test_assignment_is_pure(self) -> None:
        catalog = TypeCatalog()
        before = [t.type_string for t in catalog]
        catalog.assign_type("Whatever", "int")
        assert [t.type_string for t in catalog] == before

    def test_type_for_sample_value(self) -> None:
        catalog = TypeCatalog()
        assert catalog.assign_type_for_value(" 42 ").type_string == "int"
        assert catalog.assign_type_for_value("forty-two").type_string == "string"


class TestRegister:
    def test_inserted_ahead_of_string(self) -> None:
        catalog = TypeCatalog()
        catalog.register(FieldType("isbn", lambda text, ctx: StringValue(text), "ISBN"))
        order = [t.type_string for t in catalog]
        assert order.index("isbn") < order.index("string")
        assert catalog.assign_type("ISBN").type_string == "isbn"

    def test_replaces_same_type_string(self) -> None:
        catalog = TypeCatalog()
        size = len(catalog)
        catalog.register(FieldType("rating", lambda text, ctx: IntValue(text), "Stars"))
        assert len(catalog) == size
        assert catalog.assign_type("Stars").type_string == "rating"

    def test_get(self) -> None:
        catalog = TypeCatalog()
        assert catalog.get("Date Added") is not None
        assert catalog.get("nope") is None


class TestFieldDefinition:
    def test_create_assigns_type(self) -> None:
        definition = FieldDefinition.create("By", TypeCatalog())
        assert definition.type_string == "author"
        assert definition.label.proper_form == "By"

    def test_equality_by_common_label(self) -> None:
        catalog = TypeCatalog()
        assert FieldDefinition.create("Work Title", catalog) == FieldDefinition.create("worktitle", catalog)

    def test_parse_builds_typed_value(self) -> None:
        catalog = TypeCatalog()
        value = FieldDefinition.create("Notes", catalog, "int").parse(" 7 ", catalog)
        assert isinstance(value, IntValue)
        assert value.value == "7"

    def test_pick_list_collects_values(self) -> None:
        catalog = TypeCatalog()
        definition = FieldDefinition.create("Genre", catalog, "pickfrom")
        definition.parse("Mystery", catalog)
        definition.parse("mystery", catalog)
        definition.parse("Fantasy", catalog)
        assert definition.pick_list is not None
        assert definition.pick_list.values == ["Fantasy", "Mystery"]

    def test_status_config_round_trip(self) -> None:
        catalog = TypeCatalog()
        definition = FieldDefinition.create("Status", catalog)
        definition.apply_type_config("1 - Open; 5 - Closed", catalog)
        assert definition.extract_type_config(catalog) == "1 - Open; 5 - Closed"

    def test_config_ignored_for_plain_types(self) -> None:
        catalog = TypeCatalog()
        definition = FieldDefinition.create("Date", catalog)
        definition.apply_type_config("whatever", catalog)
        assert definition.extract_type_config(catalog) == ""

    def test_klass_template_eligibility(self) -> None:
        catalog = TypeCatalog()
        assert FieldDefinition.create("Tags", catalog).should_init_from_klass_template is True
        assert FieldDefinition.create("Title", catalog).should_init_from_klass_template is False
        assert FieldDefinition.create("Date Added", catalog).should_init_from_klass_template is False
