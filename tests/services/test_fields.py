"""Tests for FieldService."""

from __future__ import annotations

from notekit.domain.collection import NoteCollection
from notekit.domain.values import TagsValue
from notekit.services.base import INVALID_LABEL, LABEL_REJECTED
from notekit.services.fields import FieldService, describe_value


class TestParseField:
    def test_infers_type_from_label(self) -> None:
        result = FieldService(NoteCollection()).parse_field("By", "Jane Doe and John Smith")
        assert result.ok is True
        assert result.data["type"] == "author"
        assert result.data["value_type"] == "AuthorValue"
        assert result.data["items"] == ["Jane Doe", "John Smith"]
        assert result.data["sort_key"] == "doe, jane and smith, john"

    def test_type_hint(self) -> None:
        result = FieldService(NoteCollection()).parse_field("Pages", " 320 ", type_hint="int")
        assert result.ok is True
        assert result.data["type"] == "int"
        assert result.data["value"] == "320"
        assert result.warnings == []

    def test_unknown_hint_warns(self) -> None:
        result = FieldService(NoteCollection()).parse_field("Pages", "320", type_hint="bogus")
        assert result.ok is True
        assert result.data["type"] == "string"
        assert result.warnings == ["Unknown type 'bogus'; using string"]

    def test_existing_definition_wins_over_hint(self, collection: NoteCollection) -> None:
        result = FieldService(collection).parse_field("Seq", "1.2", type_hint="int")
        assert result.data["type"] == "seq"

    def test_invalid_label(self) -> None:
        result = FieldService(NoteCollection()).parse_field("https", "x")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == INVALID_LABEL

    def test_locked_collection_rejects(self, collection: NoteCollection) -> None:
        collection.lock()
        result = FieldService(collection).parse_field("Mood", "happy")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == LABEL_REJECTED

    def test_status_uses_collection_config(self) -> None:
        collection = NoteCollection()
        collection.set_status_config("1 - Open; 5 - Done")
        result = FieldService(collection).parse_field("Status", "done")
        assert result.data["value"] == "5 - Done"


class TestListing:
    def test_list_fields(self, collection: NoteCollection) -> None:
        result = FieldService(collection).list_fields()
        assert result.ok is True
        assert result.data["count"] == 7
        assert result.data["items"][0] == {
            "label": "Title",
            "common_form": "title",
            "type": "title",
            "config": "",
        }
        assert result.data["items"][-1]["label"] == "Body"
        assert result.data["locked"] is False

    def test_list_types(self) -> None:
        result = FieldService(NoteCollection()).list_types()
        types = [item["type"] for item in result.data["items"]]
        assert types.index("author") < types.index("string")
        assert "by" in next(item for item in result.data["items"] if item["type"] == "author")["aliases"]


class TestDescribeValue:
    def test_single_item_has_no_items_list(self) -> None:
        assert "items" not in describe_value(TagsValue("one"))

    def test_multi_item(self) -> None:
        assert describe_value(TagsValue("b, a"))["items"] == ["a", "b"]
