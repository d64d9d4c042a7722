"""Text-like values: titles, long text, classes, pick-list backed strings."""

from __future__ import annotations

from notekit.domain.picklists import WORK_TYPES, ComboList, KlassPickList, PickList
from notekit.domain.text import clean_and_trim, to_common
from notekit.domain.values.base import StringValue

_ARTICLES = ("a", "an", "the")


class TitleValue(StringValue):
    """A note title; sorts by its common form."""

    def set(self, text: str) -> None:
        self.value = clean_and_trim(text)
        self.common = to_common(self.value)

    @property
    def sort_key(self) -> str:
        return self.common

    @property
    def is_empty(self) -> bool:
        return not self.value or not self.common

    @property
    def has_data(self) -> bool:
        return not self.is_empty


class WorkTitleValue(TitleValue):
    """Title of a creative work; a leading article is ignored for sorting."""

    @property
    def sort_key(self) -> str:
        words = self.value.split(" ", 1)
        if len(words) == 2 and words[0].lower() in _ARTICLES:
            return to_common(words[1])
        return self.common


class LongTextValue(StringValue):
    """Multi-line text (body, teaser, code). Stored without trimming lines."""

    def set(self, text: str) -> None:
        self.value = text.strip("\n")

    @property
    def sort_key(self) -> str:
        return self.value.lower()

    @property
    def is_empty(self) -> bool:
        return not self.value.strip()

    @property
    def has_data(self) -> bool:
        return not self.is_empty

    def value_to_display(self) -> str:
        return self.value.strip()


class TextFormatValue(StringValue):
    """Body text format: ``md`` (default) or ``txt``."""

    def set(self, text: str) -> None:
        common = to_common(text)
        if common in ("txt", "text", "plaintext"):
            self.value = "txt"
        else:
            self.value = "md"

    @property
    def is_text(self) -> bool:
        return self.value == "txt"

    def value_to_display(self) -> str:
        return "Plain Text" if self.is_text else "Markdown"


class PickListValue(StringValue):
    """A string constrained to, or normalized by, a pick list."""

    def __init__(self, text: str = "", pick_list: PickList | None = None) -> None:
        self.pick_list = pick_list if pick_list is not None else PickList()
        super().__init__(text)

    def set(self, text: str) -> None:
        match = self.pick_list.match(text)
        self.value = match if match is not None else text.strip()


class ShortIdValue(PickListValue):
    """Short identifier, matched case-insensitively against known ids."""


class KlassValue(PickListValue):
    """Class of a note; matches known classes exactly or by prefix."""

    def __init__(self, text: str = "", pick_list: PickList | None = None) -> None:
        if pick_list is None:
            pick_list = KlassPickList()
            pick_list.set_defaults()
        super().__init__(text, pick_list)

    def set(self, text: str) -> None:
        text = text.strip()
        match = self.pick_list.match(text) or self.pick_list.starts_with(text)
        self.value = match if match is not None else text.lower()

    @property
    def sort_key(self) -> str:
        return self.value.lower()


class WorkTypeValue(StringValue):
    """Kind of creative work, normalized to a standard spelling where known."""

    def set(self, text: str) -> None:
        text = clean_and_trim(text)
        lower = text.lower()
        for name in WORK_TYPES:
            if name.lower() == lower:
                self.value = name
                return
        self.value = text

    @property
    def sort_key(self) -> str:
        return self.value.lower()


class ComboValue(StringValue):
    """Free text whose distinct values accumulate in a combo list."""

    def __init__(self, text: str = "", combo_list: ComboList | None = None) -> None:
        self.combo_list = combo_list if combo_list is not None else ComboList()
        super().__init__(text)

    def set(self, text: str) -> None:
        super().set(text)
        self.combo_list.register_value(self.value)
