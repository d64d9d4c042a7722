"""Numbered-label values: status, rank and level, with their configurations.

Each configuration is built from an option string such as
``"0 - Idea; 4 - In Work; 9 - Closed"``. Parsing is forgiving: digits
start a new entry, letters and spaces accumulate into its label, and
anything else is skipped.
"""

from __future__ import annotations

from notekit.domain.text import clean_and_trim, is_digits, pad_left
from notekit.domain.values.base import StringValue

DEFAULT_STATUS_OPTIONS = (
    "Idea",
    "Proposed",
    "Approved",
    "Planned",
    "In Work",
    "Held",
    "Completed",
    "Follow-Up",
    "Canceled",
    "Closed",
)
DEFAULT_DONE_THRESHOLD = 6
SLOTS = 10


def _label_char(c: str) -> bool:
    return c.isalpha() or c.isspace() or c == "-"


def _strip_number(text: str) -> str:
    """Drop leading digits, spaces and dashes from *text*."""
    index = 0
    while index < len(text) and (is_digits(text[index]) or text[index] in " -"):
        index += 1
    return text[index:]


class IntWithLabelConfig:
    """Ten single-digit slots, each with an optional label."""

    def __init__(self, options: str = "") -> None:
        self.labels: list[str] = [""] * SLOTS
        self.low = 0
        self.high = SLOTS - 1
        if options:
            self.set(options)

    def set(self, options: str) -> None:
        self.labels = [""] * SLOTS
        self.low, self.high = 0, SLOTS - 1
        first = True
        index = -1
        label = ""
        for c in options:
            if is_digits(c):
                first = self._assign(index, label, first)
                label = ""
                index = int(c)
            elif _label_char(c):
                label += c
        self._assign(index, label, first)

    def _assign(self, index: int, label: str, first: bool) -> bool:
        if 0 <= index < SLOTS:
            self.labels[index] = clean_and_trim(label).strip("-").strip()
            if first:
                self.low = index
                first = False
            self.high = index
        return first

    def valid_int(self, index: int) -> bool:
        return self.low <= index <= self.high and bool(self.labels[index].strip())

    def label_for(self, index: int) -> str:
        if 0 <= index < SLOTS:
            return self.labels[index]
        return ""

    def int_with_label(self, index: int) -> str:
        if not 0 <= index < SLOTS:
            return ""
        return f"{index} - {self.labels[index]}"

    def lookup(self, text: str) -> int:
        """Find the slot for ``"4"``, ``"4 - In Work"`` or a label prefix like ``"in w"``."""
        text = text.strip()
        if not text:
            return -1
        if is_digits(text[0]):
            index = int(text[0])
            if self.labels[index]:
                return index
        alpha = _strip_number(text.lower()).strip()
        if not alpha:
            return -1
        for index in range(self.low, self.high + 1):
            label = self.labels[index]
            if label and label.lower().startswith(alpha):
                return index
        return -1

    @property
    def options_string(self) -> str:
        return "; ".join(
            self.int_with_label(i) for i in range(self.low, self.high + 1) if self.valid_int(i)
        )


class StatusValueConfig(IntWithLabelConfig):
    """Status labels plus the threshold at which a status counts as done."""

    def __init__(self, options: str = "", done_threshold: int = DEFAULT_DONE_THRESHOLD) -> None:
        super().__init__()
        self.labels = list(DEFAULT_STATUS_OPTIONS)
        self.done_threshold = done_threshold
        if options:
            self.set(options)

    @property
    def low_index(self) -> int:
        for index, label in enumerate(self.labels):
            if label.strip():
                return index
        return 0

    @property
    def high_index(self) -> int:
        for index in range(SLOTS - 1, -1, -1):
            if self.labels[index].strip():
                return index
        return SLOTS - 1


class StatusValue(StringValue):
    """Workflow status such as ``4 - In Work``.

    Text matching a configured status is normalized to ``N - Label``;
    anything else is kept as given with :attr:`status_int` of ``-1``.
    """

    def __init__(self, text: str = "", config: StatusValueConfig | None = None) -> None:
        self.config = config if config is not None else StatusValueConfig()
        self.status_int = -1
        self.label = ""
        super().__init__(text)

    def set(self, text: str) -> None:
        self.value = text.strip()
        self.status_int = self.config.lookup(self.value)
        if self.status_int >= 0:
            self.label = self.config.label_for(self.status_int)
            self.value = self.config.int_with_label(self.status_int)
        else:
            self.label = ""

    def set_int(self, index: int) -> None:
        if self.config.valid_int(index):
            self.status_int = index
            self.label = self.config.label_for(index)
            self.value = self.config.int_with_label(index)

    @property
    def is_done(self) -> bool:
        return self.status_int >= self.config.done_threshold

    @property
    def done_x(self) -> str:
        """``"X"`` for completed statuses, a blank otherwise; used in sort keys."""
        return "X" if self.is_done else " "

    def toggle(self) -> None:
        """Flip between the lowest and highest configured statuses."""
        if self.status_int >= self.config.high_index:
            self.set_int(self.config.low_index)
        else:
            self.set_int(self.config.high_index)

    def increment(self) -> None:
        """Move to the next configured status, if any."""
        if self.status_int < 0 or self.status_int >= self.config.high_index:
            return
        index = self.status_int + 1
        while index < self.config.high_index and not self.config.valid_int(index):
            index += 1
        self.set_int(index)

    def close(self) -> None:
        self.set_int(self.config.high_index)


def split_number_and_label(text: str) -> tuple[int, str]:
    """Split ``"12 - Must Have"`` into ``(12, "Must Have")``; number is -1 if absent."""
    digits = ""
    label = ""
    for c in text:
        if is_digits(c) and not label:
            digits += c
        elif c.isalpha():
            label += c
        elif c.isspace() and label:
            label += " "
    return (int(digits) if digits else -1), label.strip()


class RankValueConfig:
    """Ranks with multi-digit numbers and labels, kept in numeric order."""

    def __init__(self, options: str = "") -> None:
        self.possible: list[tuple[int, str]] = []
        self.pad_to = 2
        if options:
            self.set(options)

    def set(self, options: str) -> None:
        self.possible = []
        self.pad_to = 2
        number = 0
        label = ""
        for c in options:
            if is_digits(c) and label.strip():
                self._add(number, label)
                label = ""
                number = int(c)
            elif is_digits(c):
                number = number * 10 + int(c)
            elif c.isalpha() or (c.isspace() and label):
                label += c
        self._add(number, label)

    def _add(self, number: int, label: str) -> None:
        label = clean_and_trim(label)
        if number < 0 or not label:
            return
        self.pad_to = max(self.pad_to, len(str(number)))
        for index, (existing, _) in enumerate(self.possible):
            if existing == number:
                self.possible[index] = (number, label)
                return
            if existing > number:
                self.possible.insert(index, (number, label))
                return
        self.possible.append((number, label))

    def lookup(self, text: str) -> tuple[int, str] | None:
        number, label = split_number_and_label(text)
        if label:
            for entry in self.possible:
                if entry[1].lower() == label.lower():
                    return entry
        if number >= 0:
            for entry in self.possible:
                if entry[0] == number:
                    return entry
        return None

    def combine(self, number: int, label: str) -> str:
        if number <= 0 and not label:
            return ""
        padded = pad_left(str(number), self.pad_to, "0")
        return f"{padded} - {label}" if label else padded

    @property
    def options_string(self) -> str:
        return "; ".join(f"{n} - {label}" for n, label in self.possible)


class RankValue(StringValue):
    """A ranking such as ``01 - Must Have``; sorts by zero-padded number."""

    def __init__(self, text: str = "", config: RankValueConfig | None = None) -> None:
        self.config = config if config is not None else RankValueConfig()
        self.number = 0
        self.label = ""
        super().__init__(text)

    def set(self, text: str) -> None:
        entry = self.config.lookup(text)
        if entry is None:
            number, label = split_number_and_label(text)
            entry = (max(number, 0), label)
        self.number, self.label = entry
        self.value = self.config.combine(self.number, self.label)

    @property
    def sort_key(self) -> str:
        return self.value


class LevelValue(StringValue):
    """Outline depth, optionally labeled (``2 - Section``)."""

    def __init__(self, text: str = "", config: IntWithLabelConfig | None = None) -> None:
        self.config = config if config is not None else IntWithLabelConfig()
        self.level = 1
        self.label = ""
        super().__init__(text)

    def set(self, text: str) -> None:
        self.value = text.strip()
        self.label = ""
        if sum(is_digits(c) for c in self.value) > 1:
            return
        index = self.config.lookup(self.value)
        if index >= 0:
            self.set_int(index)
        elif is_digits(self.value[:1]):
            self.level = int(self.value[0])
            if self.config.valid_int(self.level):
                self.set_int(self.level)

    def set_int(self, index: int) -> None:
        self.level = index
        if self.config.valid_int(index):
            self.label = self.config.label_for(index)
            self.value = self.config.int_with_label(index)
        else:
            self.label = ""
            self.value = str(index)

    def get_int(self) -> int:
        return self.level

    def increment(self) -> None:
        if self.level < self.config.high:
            self.set_int(self.level + 1)
