"""Base value type and the multi-value protocol.

Every field value keeps the text it was given (``value``), a derived
``sort_key`` whose plain string ordering matches the intended domain
ordering, and serialization for storage (``value_to_write``) and display
(``value_to_display``). Parsing never raises: text that cannot be
interpreted is kept verbatim.
"""

from __future__ import annotations

import copy
import logging
from typing import Protocol, runtime_checkable

from notekit.domain.text import clean_and_trim, split_list

logger = logging.getLogger(__name__)


class StringValue:
    """Plain single-line text. Base of the value hierarchy."""

    def __init__(self, text: str = "") -> None:
        self.value = ""
        self.set(text)

    def set(self, text: str) -> None:
        self.value = text.strip()

    @property
    def sort_key(self) -> str:
        return self.value

    def value_to_write(self) -> str:
        return self.value

    def value_to_display(self) -> str:
        return self.value

    @property
    def is_empty(self) -> bool:
        return not self.value

    @property
    def has_data(self) -> bool:
        return bool(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def copy(self) -> StringValue:
        return copy.copy(self)

    def operate(self, opcode: str, operand: str) -> None:
        """Apply a template operation: ``=`` assigns, ``+``/``+=`` add or append, ``++`` increments."""
        if opcode == "=":
            self.set(operand)
        elif opcode in ("+", "+=", "++"):
            current = _as_int(self.value)
            other = _as_int(operand)
            if current is not None and opcode == "++":
                self.set(str(current + 1))
            elif current is None or other is None:
                self.set(self.value + operand)
            else:
                self.set(str(current + other))
        else:
            logger.warning("Invalid operator %r for a %s", opcode, type(self).__name__)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringValue):
            return NotImplemented
        return self.sort_key == other.sort_key

    def __lt__(self, other: StringValue) -> bool:
        return self.sort_key < other.sort_key

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.value_to_write()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value_to_write()!r})"


def _as_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


@runtime_checkable
class MultiValues(Protocol):
    """A value composed of several delimited items (authors, tags, terms...)."""

    @property
    def multi_count(self) -> int: ...

    def multi_at(self, index: int) -> str | None: ...

    @property
    def multi_delimiter(self) -> str: ...


class ListValue(StringValue):
    """A delimited list of text items, kept in entry order without duplicates."""

    delimiter = "; "
    split_on = ",;"

    def __init__(self, text: str = "") -> None:
        self.items: list[str] = []
        super().__init__(text)

    def set(self, text: str) -> None:
        self.items = []
        self.value = ""
        for item in split_list(text, self.split_on):
            self.append(item)

    def append(self, item: str) -> None:
        item = clean_and_trim(item)
        if item and item not in self.items:
            self.items.append(item)
        self.value = self.delimiter.join(self.items)

    @property
    def sort_key(self) -> str:
        return self.value.lower()

    @property
    def multi_count(self) -> int:
        return len(self.items)

    def multi_at(self, index: int) -> str | None:
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    @property
    def multi_delimiter(self) -> str:
        return self.delimiter

    def copy(self) -> ListValue:
        dup = copy.copy(self)
        dup.items = list(self.items)
        return dup
