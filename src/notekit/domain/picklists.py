"""Pick lists and combo lists: accumulated sets of previously seen field values.

A pick list keeps values sorted and unique by a case-insensitive key and
can be declared up front with a ``pick-from:`` configuration string. A
combo list does the same but keeps the first spelling it saw.
"""

from __future__ import annotations

import bisect

from notekit.domain.text import clean_and_trim

PICK_FROM = "pick-from"

KLASS_DEFAULTS = ("biblio", "cover", "def", "text", "title")

WORK_TYPES = (
    "Album",
    "Article",
    "Blog Post",
    "Book",
    "CD",
    "Comment",
    "Conference",
    "Editorial",
    "Essay",
    "Film",
    "Interview",
    "Lecture",
    "Letter",
    "Lyrics",
    "Novel",
    "Obituary",
    "Play",
    "Podcast",
    "Poem",
    "Presentation",
    "Sermon",
    "Song",
    "Speech",
    "Story",
    "Television Show",
    "Video",
    "Web Page",
    "Website",
)


class PickList:
    """Sorted, case-insensitively unique list of allowed or seen values."""

    def __init__(self, values: str = "", *, force_lowercase: bool = False) -> None:
        self.force_lowercase = force_lowercase
        self._keys: list[str] = []
        self.values: list[str] = []
        if values:
            self.set_from_string(values)

    def set_from_string(self, text: str) -> None:
        """Register every value in a ``pick-from: a, b, c`` declaration."""
        body = text.strip().lstrip("<").rstrip(">").strip()
        if body.lower().startswith(PICK_FROM):
            body = body[len(PICK_FROM) :].lstrip(":").strip()
        for chunk in body.replace(";", ",").split(","):
            self.register_value(chunk)

    def register_value(self, text: str) -> str:
        """Add *text* if no equivalent value exists; return the stored spelling."""
        value = clean_and_trim(text)
        if self.force_lowercase:
            value = value.lower()
        if not value:
            return value
        key = value.lower()
        index = bisect.bisect_left(self._keys, key)
        if index < len(self._keys) and self._keys[index] == key:
            return self.values[index]
        self._keys.insert(index, key)
        self.values.insert(index, value)
        return value

    def match(self, text: str) -> str | None:
        """Return the stored spelling equal to *text* ignoring case."""
        key = clean_and_trim(text).lower()
        index = bisect.bisect_left(self._keys, key)
        if index < len(self._keys) and self._keys[index] == key:
            return self.values[index]
        return None

    def starts_with(self, prefix: str) -> str | None:
        """Return the first stored value starting with *prefix* ignoring case."""
        key = prefix.strip().lower()
        if not key:
            return None
        index = bisect.bisect_left(self._keys, key)
        if index < len(self._keys) and self._keys[index].startswith(key):
            return self.values[index]
        return None

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.match(text) is not None

    @property
    def value_string(self) -> str:
        return f"{PICK_FROM}: " + ", ".join(self.values)


class KlassPickList(PickList):
    """Pick list of note classes; always lowercase."""

    def __init__(self, values: str = "") -> None:
        super().__init__(values, force_lowercase=True)

    def set_defaults(self) -> None:
        if not self.values:
            for name in KLASS_DEFAULTS:
                self.register_value(name)

    @property
    def value_string(self) -> str:
        return "class: " + ", ".join(self.values)


class ComboList:
    """Values seen so far, deduplicated ignoring case, first spelling wins."""

    def __init__(self) -> None:
        self._lowers: list[str] = []
        self.values: list[str] = []

    def register_value(self, text: str) -> None:
        value = clean_and_trim(text)
        if not value:
            return
        lower = value.lower()
        index = bisect.bisect_left(self._lowers, lower)
        if index < len(self._lowers) and self._lowers[index] == lower:
            return
        self._lowers.insert(index, lower)
        self.values.insert(index, value)

    def value_at(self, index: int) -> str | None:
        if 0 <= index < len(self.values):
            return self.values[index]
        return None

    def __len__(self) -> int:
        return len(self.values)


def work_type_pick_list() -> PickList:
    """Pick list pre-populated with the standard kinds of creative work."""
    pick_list = PickList()
    for name in WORK_TYPES:
        pick_list.register_value(name)
    return pick_list
