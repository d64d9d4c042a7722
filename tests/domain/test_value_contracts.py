"""Parsing contracts shared by every built-in field type."""

from __future__ import annotations

import pytest

from notekit.domain.catalog import TypeCatalog
from notekit.domain.collection import NoteCollection
from notekit.domain.fieldtypes import BUILTIN_TYPES, FieldType
from notekit.domain.text import is_digits
from notekit.domain.types import NoteSortParm
from notekit.domain.values import (
    DateValue,
    DurationValue,
    LevelValue,
    RankValue,
    RankValueConfig,
    RecursValue,
    StatusValue,
    StatusValueConfig,
)

SAMPLES = [
    "",
    "42",
    "-7",
    "1.2.3",
    "March 5, 2024",
    "2024-03-05 14:30:00 -0500",
    "Jane Doe and John Smith",
    "b, a; c",
    "4 - In Work",
    "https://www.example.com/",
    "every 2 weeks",
    "1:30",
    "yes",
]

# Characters that str.isdigit() accepts but int() does not.
NON_ASCII_DIGITS = ["²", "4²", "①", "1:²", "March ², 2024", "² - Odd", "every ² days"]


def _type_id(field_type: FieldType) -> str:
    return field_type.type_string


def _create(field_type: FieldType, text: str):
    catalog = TypeCatalog()
    ctx = catalog.context(pick_list=field_type.gen_pick_list(), combo_list=field_type.gen_combo_list())
    return field_type.create_value(text, ctx)


@pytest.mark.parametrize("field_type", BUILTIN_TYPES, ids=_type_id)
class TestEveryType:
    @pytest.mark.parametrize("text", SAMPLES + NON_ASCII_DIGITS)
    def test_parsing_never_raises(self, field_type: FieldType, text: str) -> None:
        value = _create(field_type, text)
        assert isinstance(value.value_to_write(), str)
        assert isinstance(value.sort_key, str)

    @pytest.mark.parametrize("text", SAMPLES + NON_ASCII_DIGITS)
    def test_sort_key_stable_when_reparsed(self, field_type: FieldType, text: str) -> None:
        value = _create(field_type, text)
        again = _create(field_type, value.value_to_write())
        assert again.sort_key == value.sort_key


class TestNonAsciiDigits:
    def test_is_digits(self) -> None:
        assert is_digits("2024")
        assert not is_digits("")
        assert not is_digits("²")
        assert not is_digits("①")

    def test_status(self) -> None:
        assert StatusValue("²").value == "²"

    def test_level(self) -> None:
        assert LevelValue("②").value == "②"

    def test_rank(self) -> None:
        assert RankValue("⁵ - Soon").value

    def test_date(self) -> None:
        value = DateValue("March ², 2024")
        assert value.value == "March ², 2024"

    def test_duration_ignores_non_ascii_digits(self) -> None:
        assert DurationValue("1:²").total_seconds == 3600

    def test_recurs_ignores_non_ascii_interval(self) -> None:
        assert RecursValue("every ² days").interval == 1

    def test_status_config_partially_applied(self) -> None:
        config = StatusValueConfig("0 - Idea; ² - Odd; 9 - Done")
        assert config.label_for(0).startswith("Idea")
        assert config.label_for(9) == "Done"

    def test_rank_config_accepts_malformed(self) -> None:
        config = RankValueConfig("1 - High; ³ - Odd")
        assert config.possible[0][0] == 1

    def test_collection_status_options(self) -> None:
        collection = NoteCollection()
        collection.set_status_config("0 - Idea; ² - Odd; 9 - Done")
        assert collection.catalog.status_config.label_for(9) == "Done"

    def test_sort_parm_code(self) -> None:
        assert NoteSortParm.parse("²") is NoteSortParm.TITLE
