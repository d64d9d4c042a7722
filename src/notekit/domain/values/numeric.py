"""Numeric and boolean values."""

from __future__ import annotations

from notekit.domain.text import is_digits
from notekit.domain.values.base import StringValue

INT_KEY_WIDTH = 10
_NEGATIVE_OFFSET = 10**INT_KEY_WIDTH
# Sorts after every numeric key.
_NON_NUMERIC_PREFIX = "~"

WORDS_PER_MINUTE = 200

TRUE_WORDS = frozenset({"true", "yes", "y", "1", "x", "on", "t"})


def int_sort_key(text: str) -> str:
    """Fixed-width key ordering integers numerically, other text afterwards.

    Examples:
        >>> int_sort_key("42") < int_sort_key("100")
        True
        >>> int_sort_key("-5") < int_sort_key("-1") < int_sort_key("0")
        True
    """
    text = text.strip()
    if not text:
        return ""
    try:
        number = int(text)
    except ValueError:
        return _NON_NUMERIC_PREFIX + text.lower()
    if number < 0:
        return "-" + str(_NEGATIVE_OFFSET + number).zfill(INT_KEY_WIDTH)
    return str(number).zfill(INT_KEY_WIDTH)


class IntValue(StringValue):
    """An integer; non-numeric text is kept and sorts after numbers."""

    @property
    def sort_key(self) -> str:
        return int_sort_key(self.value)

    def get_int(self, default: int = 0) -> int:
        try:
            return int(self.value)
        except ValueError:
            return default


class RatingValue(IntValue):
    """A rating or priority: a number, or a run of stars counted as one."""

    def set(self, text: str) -> None:
        text = text.strip()
        if text and set(text) <= {"*", " "}:
            text = str(text.count("*"))
        self.value = text


class MinutesToReadValue(IntValue):
    """Estimated reading time in whole minutes."""

    def calculate(self, word_count: int) -> None:
        self.set(str(round(word_count / WORDS_PER_MINUTE)))

    def calculate_from_text(self, text: str) -> None:
        self.calculate(len(text.split()))


class BooleanValue(StringValue):
    """``true`` or ``false``; any other non-empty text counts as false."""

    def set(self, text: str) -> None:
        text = text.strip()
        if not text:
            self.value = ""
        elif text.lower() in TRUE_WORDS:
            self.value = "true"
        else:
            self.value = "false"

    @property
    def is_true(self) -> bool:
        return self.value == "true"

    def toggle(self) -> None:
        self.value = "false" if self.is_true else "true"


class DurationValue(StringValue):
    """Elapsed time written as ``H:MM:SS`` or ``H:MM``."""

    def set(self, text: str) -> None:
        self.value = text.strip()
        self.hours = self.minutes = self.seconds = 0
        parts = self.value.split(":")
        numbers: list[int] = []
        for part in parts[:3]:
            digits = "".join(c for c in part if is_digits(c))
            numbers.append(int(digits) if digits else 0)
        numbers += [0] * (3 - len(numbers))
        self.hours, self.minutes, self.seconds = numbers

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    @property
    def sort_key(self) -> str:
        if not self.value:
            return ""
        return str(self.total_seconds).zfill(INT_KEY_WIDTH)
