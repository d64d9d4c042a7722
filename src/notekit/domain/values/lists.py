"""List-shaped values: tags, index terms, aliases and note pointer lists."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from notekit.domain.text import clean_and_trim, to_common, to_common_file_name
from notekit.domain.values.base import ListValue, StringValue

TAG_SEPARATORS = ",;"
TAG_LEVEL_SEPARATORS = "./"
_TAG_EXTRA_CHARS = "-_"


@dataclass
class TagValue:
    """One tag, possibly hierarchical (``project.notekit``)."""

    levels: list[str] = field(default_factory=list)

    @property
    def value(self) -> str:
        return ".".join(self.levels)

    def get_tag(self, delim: str = ".") -> str:
        return delim.join(self.levels)

    @property
    def file_name(self) -> str:
        return "-".join(to_common_file_name(level) for level in self.levels)

    def __len__(self) -> int:
        return len(self.levels)

    def __str__(self) -> str:
        return self.value


class TagsValue(StringValue):
    """Comma- or semicolon-separated tags, each split into levels on ``.`` or ``/``.

    Tags are sorted and deduplicated ignoring case, then written back as
    ``a.b, c``.
    """

    multi_delimiter = ", "

    def set(self, text: str) -> None:
        tags: list[TagValue] = []
        tag = TagValue()
        level = ""
        for c in text:
            if c in TAG_SEPARATORS or c in TAG_LEVEL_SEPARATORS:
                if level.strip():
                    tag.levels.append(level.strip())
                level = ""
                if c in TAG_SEPARATORS and tag.levels:
                    tags.append(tag)
                    tag = TagValue()
            elif c == " ":
                if level:
                    level += c
            elif c.isalnum() or c in _TAG_EXTRA_CHARS:
                level += c
        if level.strip():
            tag.levels.append(level.strip())
        if tag.levels:
            tags.append(tag)
        self.tags = self._sorted_unique(tags)
        self.value = ", ".join(t.value for t in self.tags)

    @staticmethod
    def _sorted_unique(tags: list[TagValue]) -> list[TagValue]:
        seen: set[str] = set()
        unique: list[TagValue] = []
        for tag in sorted(tags, key=lambda t: t.value.lower()):
            key = tag.value.lower()
            if key not in seen:
                seen.add(key)
                unique.append(tag)
        return unique

    @property
    def sort_key(self) -> str:
        return self.value.lower()

    @property
    def multi_count(self) -> int:
        return len(self.tags)

    def multi_at(self, index: int) -> str | None:
        if 0 <= index < len(self.tags):
            return self.tags[index].value
        return None

    def get_level(self, tag_index: int, level_index: int) -> str | None:
        if not 0 <= tag_index < len(self.tags):
            return None
        levels = self.tags[tag_index].levels
        if not 0 <= level_index < len(levels):
            return None
        return levels[level_index]

    def add_tag(self, text: str) -> None:
        self.set(f"{self.value}, {text}" if self.value else text)

    def remove_tag(self, text: str) -> None:
        key = TagsValue(text).value.lower()
        self.set(", ".join(t.value for t in self.tags if t.value.lower() != key))

    def copy(self) -> TagsValue:
        dup = copy.copy(self)
        dup.tags = [TagValue(list(t.levels)) for t in self.tags]
        return dup


class IndexValue(ListValue):
    """Index terms for a note, semicolon-separated."""

    split_on = ";"

    def value_to_write(self) -> str:
        return "; ".join(self.items) + ";" if self.items else ""


class AKAValue(ListValue):
    """Alternate titles ("also known as"), comma- or semicolon-separated."""

    delimiter = "; "

    def matches(self, title: str) -> bool:
        common = to_common(title)
        return any(to_common(item) == common for item in self.items)


class NotePointerListValue(StringValue):
    """Titles of other notes, separated by ``;;`` and kept in title order."""

    multi_delimiter = ";; "

    def set(self, text: str) -> None:
        self.titles: list[str] = []
        for chunk in text.split(";;"):
            self.add_title(chunk)
        self._refresh()

    def _refresh(self) -> None:
        self.value = "".join(f"{title};; " for title in self.titles).rstrip()

    def add_title(self, title: str) -> None:
        title = clean_and_trim(title)
        if not title:
            return
        common = to_common(title)
        keys = [to_common(t) for t in self.titles]
        if common in keys:
            return
        index = 0
        while index < len(keys) and keys[index] < common:
            index += 1
        self.titles.insert(index, title)
        self._refresh()

    def remove_title(self, title: str) -> None:
        common = to_common(title)
        self.titles = [t for t in self.titles if to_common(t) != common]
        self._refresh()

    @property
    def sort_key(self) -> str:
        return self.value.lower()

    @property
    def multi_count(self) -> int:
        return len(self.titles)

    def multi_at(self, index: int) -> str | None:
        if 0 <= index < len(self.titles):
            return self.titles[index]
        return None

    def copy(self) -> NotePointerListValue:
        dup = copy.copy(self)
        dup.titles = list(self.titles)
        return dup


class BacklinkValue(NotePointerListValue):
    """Titles of notes that link to this one."""


class WikilinkValue(NotePointerListValue):
    """Titles of notes this one links to."""
