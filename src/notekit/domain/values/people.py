"""Author and artist values: one or more personal names.

Names may be written first-name-first (``Jane Doe``), last-name-first
(``Doe, Jane``), with a suffix (``John Smith Jr.``), or as a list joined
by commas and ``and`` / ``&``.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass

from notekit.domain.values.base import StringValue

_SUFFIXES = frozenset({"jr", "jr.", "sr", "sr.", "ii", "iii", "iv"})
_AND_WORDS = frozenset({"and", "&", "&amp;"})
_SEPARATORS = " \t\n\r~_"
# Corporate names read naturally and are never inverted.
_NO_INVERT = frozenset({"association"})


@dataclass
class PersonName:
    first_name: str = ""
    last_name: str = ""
    suffix: str = ""
    complete_name: str = ""

    @property
    def first_name_first(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name, self.suffix) if p)

    @property
    def last_name_first(self) -> str:
        if self.last_name.lower() in _NO_INVERT:
            return self.first_name_first
        text = self.last_name
        if text and self.first_name:
            text += ", "
        text += self.first_name
        if text and self.suffix:
            text += " "
        return text + self.suffix


@dataclass
class _Word:
    word: str
    delim: str = " "

    @property
    def is_and(self) -> bool:
        return self.word.lower() in _AND_WORDS


class _NameBuilder:
    def __init__(self) -> None:
        self.name = PersonName()
        self.last_name_first = False

    @property
    def has_data(self) -> bool:
        n = self.name
        return bool(n.complete_name or n.first_name or n.last_name)

    def add(self, word: _Word, multiple_people: bool) -> None:
        n = self.name
        lower = word.word.lower()
        if not n.suffix and self.has_data and lower in _SUFFIXES:
            n.suffix = word.word
            self._complete(word.word)
        elif word.delim == ",":
            self._complete(word.word)
            if multiple_people:
                self._new_last_name(word.word)
            else:
                self.last_name_first = True
                n.last_name = f"{n.last_name} {word.word}".strip()
        else:
            self._complete(word.word)
            if self.last_name_first:
                n.first_name = f"{n.first_name} {word.word}".strip()
            else:
                self._new_last_name(word.word)

    def _complete(self, word: str) -> None:
        self.name.complete_name = f"{self.name.complete_name} {word}".strip()

    def _new_last_name(self, word: str) -> None:
        n = self.name
        n.first_name = f"{n.first_name} {n.last_name}".strip()
        n.last_name = word


def _split_words(text: str) -> tuple[list[_Word], bool]:
    words: list[_Word] = []
    multiple = False
    current = ""
    for c in text:
        if c in _SEPARATORS:
            if current:
                word = _Word(current)
                multiple = multiple or word.is_and
                words.append(word)
                current = ""
        elif c == ",":
            if current:
                words.append(_Word(current, ","))
                current = ""
                if len(words) > 1:
                    multiple = True
        else:
            current += c
    if current:
        words.append(_Word(current))
    return words, multiple


def parse_people(text: str) -> list[PersonName]:
    """Split *text* into the people it names.

    Examples:
        >>> [p.last_name for p in parse_people("Jane Doe and John Smith")]
        ['Doe', 'Smith']
        >>> parse_people("Doe, Jane")[0].first_name
        'Jane'
    """
    words, multiple = _split_words(text)
    people: list[PersonName] = []
    builder = _NameBuilder()
    for number, word in enumerate(words, start=1):
        end_name = False
        if multiple and word.is_and:
            end_name = True
        else:
            builder.add(word, multiple)
            if multiple and word.delim == ",":
                end_name = True
            if number == len(words):
                end_name = True
        if end_name and builder.has_data:
            people.append(builder.name)
            builder = _NameBuilder()
    return people


class AuthorValue(StringValue):
    """Creator(s) of a work; sorts last name first."""

    multi_delimiter = ", "

    def set(self, text: str) -> None:
        self.value = text.strip()
        self.people = parse_people(self.value)

    @property
    def multi_count(self) -> int:
        return len(self.people)

    def multi_at(self, index: int) -> str | None:
        if not 0 <= index < len(self.people):
            return None
        if len(self.people) == 1:
            return self.value
        return self.people[index].first_name_first

    @staticmethod
    def _join(names: list[str]) -> str:
        if len(names) <= 1:
            return "".join(names)
        return ", ".join(names[:-1]) + " and " + names[-1]

    @property
    def first_name_first(self) -> str:
        return self._join([p.first_name_first for p in self.people])

    @property
    def last_name_first(self) -> str:
        return self._join([p.last_name_first for p in self.people])

    @property
    def last_names(self) -> str:
        return ", ".join(p.last_name for p in self.people)

    @property
    def first_name(self) -> str:
        return self.people[0].first_name if self.people else ""

    @property
    def last_name(self) -> str:
        return self.people[0].last_name if self.people else ""

    @property
    def sort_key(self) -> str:
        return self.last_name_first.lower()

    def append(self, text: str) -> None:
        """Add another person to the list."""
        if self.is_empty:
            self.set(text)
        else:
            self.set(self._join([p.first_name_first for p in self.people] + [text.strip()]))

    def copy(self) -> AuthorValue:
        dup = copy.copy(self)
        dup.people = [copy.copy(p) for p in self.people]
        return dup


class ArtistValue(AuthorValue):
    """Performer or visual artist; same parsing as authors."""
