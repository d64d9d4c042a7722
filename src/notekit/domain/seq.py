"""Hierarchical sequence numbers: parsing, increment with carry, sort keys.

A sequence such as ``1.2.3a`` or ``2024-03`` is a stack of segments
separated by ``.``, ``-`` or ``:``. Each segment keeps its own text and
punctuation so that the original string can be rebuilt exactly, while the
sort key pads every segment to a fixed width so plain string comparison
orders sequences segment by segment.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from notekit.domain.text import is_digits, pad_left
from notekit.domain.types import NumberKind

SEGMENT_PUNCTUATION = ".-:"
DEFAULT_SEPARATOR = "."

FIRST_SEGMENT_WIDTH = 8
SEGMENT_WIDTH = 4
MIN_SORT_LEVELS = 6

_ONE = {"digit": "1", "lower": "a", "upper": "A"}


def _char_class(c: str) -> str | None:
    if "0" <= c <= "9":
        return "digit"
    if "a" <= c <= "z":
        return "lower"
    if "A" <= c <= "Z":
        return "upper"
    return None


def increment_char(c: str) -> tuple[str, bool]:
    """Increment one sequence character.

    Returns ``(new_char, carried)``. Digits wrap ``9 -> 0`` and letters wrap
    ``z -> a`` / ``Z -> A`` with a carry; any other character is returned
    unchanged without a carry.

    Examples:
        >>> increment_char("8")
        ('9', False)
        >>> increment_char("z")
        ('a', True)
        >>> increment_char("#")
        ('#', False)
    """
    cls = _char_class(c)
    if cls == "digit":
        return ("0", True) if c == "9" else (chr(ord(c) + 1), False)
    if cls == "lower":
        return ("a", True) if c == "z" else (chr(ord(c) + 1), False)
    if cls == "upper":
        return ("A", True) if c == "Z" else (chr(ord(c) + 1), False)
    return c, False


def increment_text(text: str) -> str:
    """Increment segment text right to left, growing it when the carry overflows.

    Examples:
        >>> increment_text("9")
        '10'
        >>> increment_text("Az")
        'Ba'
        >>> increment_text("9z")
        '10a'
        >>> increment_text("")
        '1'
    """
    if not text:
        return "1"
    out: list[str] = []
    carry = True
    leftmost_class: str | None = None
    for c in reversed(text):
        if not carry:
            out.append(c)
            continue
        new, carry = increment_char(c)
        out.append(new)
        if carry:
            leftmost_class = _char_class(c)
    if carry and leftmost_class is not None:
        out.append(_ONE[leftmost_class])
    return "".join(reversed(out))


def classify(text: str) -> NumberKind:
    """Infer the number kind of segment text from the characters it holds."""
    if not text:
        return NumberKind.EMPTY
    has_digits = any(is_digits(c) for c in text)
    letters = [c for c in text if c.isalpha()]
    if has_digits and letters:
        return NumberKind.MIXED
    if has_digits:
        return NumberKind.DIGITS
    if all(c.isupper() for c in letters):
        return NumberKind.UPPER
    return NumberKind.LOWER


@dataclass
class SeqSegment:
    """One punctuation-delimited component of a sequence."""

    text: str = ""
    start_punct: str = ""
    end_punct: str = ""
    pad_char: str = " "
    number_kind: NumberKind = NumberKind.EMPTY

    @classmethod
    def from_text(cls, text: str, *, start_punct: str = "", end_punct: str = "") -> SeqSegment:
        segment = cls(start_punct=start_punct, end_punct=end_punct)
        for c in text:
            segment.accumulate(c)
        return segment

    @property
    def is_empty(self) -> bool:
        return not self.text

    def accumulate(self, c: str) -> None:
        """Append one alphanumeric character and refresh kind and padding."""
        if c == "0" and not self.text:
            self.pad_char = "0"
        self.text += c
        self._refresh()

    def _refresh(self) -> None:
        self.number_kind = classify(self.text)
        if self.number_kind in (NumberKind.DIGITS, NumberKind.MIXED):
            self.pad_char = "0"
        elif self.number_kind is not NumberKind.EMPTY:
            self.pad_char = " "

    def increment(self) -> None:
        self.text = increment_text(self.text)
        self._refresh()

    def padded(self, width: int) -> str:
        return pad_left(self.text, width, self.pad_char)

    @property
    def value_with_punctuation(self) -> str:
        return self.text + self.end_punct

    def copy(self) -> SeqSegment:
        return SeqSegment(
            text=self.text,
            start_punct=self.start_punct,
            end_punct=self.end_punct,
            pad_char=self.pad_char,
            number_kind=self.number_kind,
        )


@dataclass
class SeqStack:
    """Ordered segments of a single sequence value."""

    segments: list[SeqSegment] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> SeqStack:
        """Parse a raw sequence string.

        ASCII letters and digits accumulate into the current segment;
        ``.``, ``-`` and ``:`` close it. A segment closed while still empty
        becomes ``"0"``. Everything else is ignored.

        Examples:
            >>> SeqStack.parse("1..2").value
            '1.0.2'
            >>> SeqStack.parse(" 2024-03 ").value
            '2024-03'
        """
        stack = cls()
        current = SeqSegment()
        for c in text:
            if c in SEGMENT_PUNCTUATION:
                if current.is_empty:
                    current.accumulate("0")
                current.end_punct = c
                stack.segments.append(current)
                current = SeqSegment(start_punct=c)
            elif c.isascii() and c.isalnum():
                current.accumulate(c)
        if not current.is_empty:
            stack.segments.append(current)
        return stack

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def max_level(self) -> int:
        """Index of the deepest segment, ``-1`` when empty."""
        return len(self.segments) - 1

    @property
    def value(self) -> str:
        return "".join(s.value_with_punctuation for s in self.segments)

    @property
    def sort_key(self) -> str:
        """Fixed-width key: 8 chars for the first segment, 4 for the rest.

        Missing levels up to six are filled with blanks so that a shorter
        sequence sorts ahead of any extension of it.
        """
        parts: list[str] = []
        for index, segment in enumerate(self.segments):
            width = FIRST_SEGMENT_WIDTH if index == 0 else SEGMENT_WIDTH
            parts.append(segment.padded(width) + ".")
        for index in range(len(self.segments), MIN_SORT_LEVELS):
            width = FIRST_SEGMENT_WIDTH if index == 0 else SEGMENT_WIDTH
            parts.append(" " * width + ".")
        return "".join(parts)

    def increment(self) -> None:
        """Increment the deepest level."""
        self.inc_at_level(max(self.max_level, 0))

    def inc_at_level(self, level: int, remove_deeper: bool = False) -> None:
        """Increment the segment at *level*, extending or truncating as needed.

        Missing levels are appended as ``"0"`` (with a ``.`` separator when
        the previous last segment had none) before the increment, so
        ``"1.3"`` incremented at level 2 gives ``"1.3.1"``. With
        *remove_deeper*, levels below *level* are dropped first, so
        ``"1.3.2"`` incremented at level 1 gives ``"1.4"``.
        """
        if level < 0:
            return
        if remove_deeper and level < self.max_level:
            del self.segments[level + 1 :]
            self.segments[-1].end_punct = ""
        while level > self.max_level:
            punct = ""
            if self.segments:
                last = self.segments[-1]
                if not last.end_punct:
                    last.end_punct = DEFAULT_SEPARATOR
                punct = last.end_punct
            self.segments.append(SeqSegment.from_text("0", start_punct=punct))
        self.segments[level].increment()

    def truncate(self, levels: int) -> None:
        """Keep only the first *levels* segments."""
        if levels < len(self.segments):
            del self.segments[max(levels, 0) :]
            if self.segments:
                self.segments[-1].end_punct = ""

    def copy(self) -> SeqStack:
        return SeqStack([s.copy() for s in self.segments])
