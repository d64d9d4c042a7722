"""Liberal date and time parsing.

Accepts the many ways people write dates in notes (``2024-03-05``,
``March 5, 2024``, ``5 Mar 24``, ``3/5/2024 2:30 PM``) and extracts year,
month, day and time parts without ever raising. Parts that cannot be
found are left empty.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from notekit.domain.text import is_digits

MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)


def match_month_name(word: str) -> int:
    """Return 1-12 for a month name or its three-letter prefix, else 0."""
    lower = word.lower()
    if len(lower) < 3:
        return 0
    for index, name in enumerate(MONTH_NAMES, start=1):
        if name.startswith(lower) or lower[:3] == name[:3]:
            return index
    return 0


@dataclass
class ParsedDate:
    yyyy: str = ""
    mm: str = ""
    dd: str = ""
    hours: str = ""
    minutes: str = ""
    seconds: str = ""
    time_zone: str = ""

    @property
    def has_date(self) -> bool:
        return bool(self.yyyy)

    @property
    def ymd(self) -> str:
        """``YYYY-MM-DD`` with unknown month or day written as ``00``."""
        if not self.yyyy:
            return ""
        return f"{self.yyyy}-{self.mm or '00'}-{self.dd or '00'}"

    def to_date(self) -> dt.date | None:
        if not (self.yyyy and self.mm and self.dd):
            return None
        try:
            return dt.date(int(self.yyyy), int(self.mm), int(self.dd))
        except ValueError:
            return None

    def to_datetime(self) -> dt.datetime | None:
        day = self.to_date()
        if day is None:
            return None
        try:
            return dt.datetime(
                day.year,
                day.month,
                day.day,
                int(self.hours or 0),
                int(self.minutes or 0),
                int(self.seconds or 0),
            )
        except ValueError:
            return None


class _LiberalParser:
    def __init__(self) -> None:
        self.result = ParsedDate()
        self.looking_for_time = False
        self.pm = False

    def parse(self, text: str) -> ParsedDate:
        word = ""
        kind = ""  # "digits" or "letters"
        for c in text:
            if kind == "digits" and c == ":":
                self.looking_for_time = True
                self._word(word, kind)
                word, kind = "", ""
            elif is_digits(c):
                if kind == "letters":
                    self._word(word, kind)
                    word, kind = "", ""
                elif kind == "digits" and (
                    len(word) == 4 or (len(self.result.yyyy) == 4 and len(word) == 2)
                ):
                    self._word(word, kind)
                    word = ""
                kind = "digits"
                word += c
            elif c.isalpha():
                if kind == "digits":
                    self._word(word, kind)
                    word = ""
                kind = "letters"
                word += c
            elif word:
                self._word(word, kind)
                word, kind = "", ""
                if c == "," and self.result.dd:
                    self.looking_for_time = True
        if word:
            self._word(word, kind)
        if self.pm and self.result.hours and int(self.result.hours) < 12:
            self.result.hours = f"{int(self.result.hours) + 12:02d}"
        return self.result

    def _word(self, word: str, kind: str) -> None:
        if kind == "letters":
            self._letters(word)
        elif kind == "digits":
            self._digits(int(word))

    def _letters(self, word: str) -> None:
        r = self.result
        lower = word.lower()
        if lower in ("am", "pm"):
            self.pm = lower == "pm"
            return
        if self.looking_for_time and not r.time_zone:
            r.time_zone = word
            return
        if r.mm and r.dd:
            # keep the first month of a range
            return
        month = match_month_name(word)
        if month:
            if r.mm:
                r.dd = r.mm
            r.mm = f"{month:02d}"

    def _digits(self, number: int) -> None:
        r = self.result
        if number > 1000:
            r.yyyy = str(number)
        elif self.looking_for_time:
            if not r.hours:
                r.hours = f"{number:02d}"
            elif not r.minutes:
                r.minutes = f"{number:02d}"
            elif not r.seconds:
                r.seconds = f"{number:02d}"
        elif not r.mm and 1 <= number <= 12:
            r.mm = f"{number:02d}"
        elif not r.dd and 1 <= number <= 31:
            r.dd = f"{number:02d}"
        elif not r.yyyy:
            if number > 9:
                r.yyyy = f"20{number:02d}"
            else:
                r.yyyy = f"200{number}"


def parse_liberal(text: str) -> ParsedDate:
    """Extract date and time parts from free-form *text*.

    Examples:
        >>> parse_liberal("March 5, 2024").ymd
        '2024-03-05'
        >>> parse_liberal("2024-03-05").ymd
        '2024-03-05'
        >>> parse_liberal("someday").ymd
        ''
    """
    return _LiberalParser().parse(text)
