"""Date, date-time, timestamp and recurrence values."""

from __future__ import annotations

import calendar
import datetime as dt

from notekit.domain.dates import ParsedDate, parse_liberal
from notekit.domain.text import is_digits, to_common
from notekit.domain.values.base import StringValue

YMD_HMS = "%Y-%m-%d %H:%M:%S"
YMD_HMS_Z = "%Y-%m-%d %H:%M:%S %z"
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


class DateValue(StringValue):
    """A calendar date written however the user likes.

    The text is kept as entered; the sort key is ``YYYY-MM-DD`` when a year
    can be found, otherwise the raw text.
    """

    def set(self, text: str) -> None:
        self.value = text.strip()
        self.parsed = parse_liberal(self.value) if self.value else ParsedDate()

    @property
    def sort_key(self) -> str:
        if self.parsed.has_date:
            return self.parsed.ymd
        return self.value

    @property
    def ymd(self) -> str:
        return self.parsed.ymd

    def get_date(self) -> dt.date | None:
        return self.parsed.to_date()

    def set_date(self, day: dt.date) -> None:
        self.set(day.isoformat())

    def set_today(self) -> None:
        self.set_date(dt.date.today())

    def formatted(self, fmt: str) -> str:
        """Format with :meth:`datetime.date.strftime`, or return the raw text."""
        day = self.get_date()
        return day.strftime(fmt) if day is not None else self.value


class DateTimeValue(StringValue):
    """A point in time, stored as ``YYYY-MM-DD HH:MM:SS``."""

    def set(self, text: str) -> None:
        text = text.strip()
        self.moment: dt.datetime | None = None
        if not text:
            self.value = ""
            return
        for fmt in (YMD_HMS_Z, YMD_HMS):
            try:
                self.moment = dt.datetime.strptime(text, fmt).replace(tzinfo=None)
                break
            except ValueError:
                continue
        if self.moment is None:
            self.moment = parse_liberal(text).to_datetime()
        self.value = self.moment.strftime(YMD_HMS) if self.moment is not None else text

    def set_to_now(self) -> None:
        self.set(dt.datetime.now().strftime(YMD_HMS))

    @property
    def date_part(self) -> str:
        return self.value[:10] if self.moment is not None else ""


class TimestampValue(StringValue):
    """A compact ``YYYYMMDDHHMMSS`` stamp; only digits are kept."""

    def set(self, text: str) -> None:
        self.value = "".join(c for c in text if is_digits(c))

    def set_to_now(self) -> None:
        self.set(dt.datetime.now().strftime(TIMESTAMP_FORMAT))


def _add_months(day: dt.date, months: int) -> dt.date:
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last = calendar.monthrange(year, month)[1]
    return dt.date(year, month, min(day.day, last))


class RecursValue(StringValue):
    """A simple recurrence rule such as ``weekly`` or ``every 2 months``.

    Understands daily, weekly, monthly, quarterly and annual rules, an
    optional interval, and weekday names (``every Friday``).
    """

    def set(self, text: str) -> None:
        self.value = text.strip()
        self.unit = ""
        self.interval = 1
        self.weekday: int | None = None
        words = [to_common(w) for w in self.value.split()]
        for word in words:
            if is_digits(word):
                self.interval = max(int(word), 1)
            elif word in ("day", "days", "daily"):
                self.unit = "day"
            elif word in ("week", "weeks", "weekly"):
                self.unit = "week"
            elif word in ("biweekly", "fortnightly"):
                self.unit, self.interval = "week", 2
            elif word in ("month", "months", "monthly"):
                self.unit = "month"
            elif word == "quarterly":
                self.unit, self.interval = "month", 3
            elif word in ("year", "years", "yearly", "annually", "annual"):
                self.unit = "year"
            elif word in ("weekday", "weekdays", "workday", "workdays"):
                self.unit = "workday"
            else:
                for index, name in enumerate(WEEKDAYS):
                    if len(word) >= 3 and name.startswith(word):
                        self.unit, self.weekday = "weekday", index

    @property
    def is_recurring(self) -> bool:
        return bool(self.unit)

    def next_date(self, day: dt.date) -> dt.date:
        """Return the next occurrence after *day*, or *day* if not recurring."""
        if self.unit == "day":
            return day + dt.timedelta(days=self.interval)
        if self.unit == "week":
            return day + dt.timedelta(weeks=self.interval)
        if self.unit == "month":
            return _add_months(day, self.interval)
        if self.unit == "year":
            return _add_months(day, 12 * self.interval)
        if self.unit == "workday":
            nxt = day + dt.timedelta(days=1)
            while nxt.weekday() >= 5:
                nxt += dt.timedelta(days=1)
            return nxt
        if self.unit == "weekday" and self.weekday is not None:
            ahead = (self.weekday - day.weekday()) % 7 or 7
            return day + dt.timedelta(days=ahead + 7 * (self.interval - 1))
        return day

    def recur(self, date_value: DateValue) -> bool:
        """Advance *date_value* to its next occurrence. False if it cannot."""
        day = date_value.get_date()
        if day is None or not self.is_recurring:
            return False
        date_value.set_date(self.next_date(day))
        return True
