"""Sequence values backed by :class:`~notekit.domain.seq.SeqStack`."""

from __future__ import annotations

from notekit.domain.seq import SeqStack
from notekit.domain.values.base import StringValue

SEQ_DELIMITER = ";"


class SeqSingleValue(StringValue):
    """One hierarchical sequence number such as ``1.2.3a``."""

    def set(self, text: str) -> None:
        self.stack = SeqStack.parse(text)
        self.value = self.stack.value

    def _sync(self) -> None:
        self.value = self.stack.value

    @property
    def sort_key(self) -> str:
        return self.stack.sort_key

    @property
    def number_of_levels(self) -> int:
        return len(self.stack)

    @property
    def max_level(self) -> int:
        return self.stack.max_level

    def increment(self) -> None:
        self.stack.increment()
        self._sync()

    def inc_at_level(self, level: int, remove_deeper: bool = False) -> None:
        self.stack.inc_at_level(level, remove_deeper)
        self._sync()

    def inc_by_levels(self, original_level: int, new_level: int) -> None:
        """Re-derive the sequence after an outline moves from one depth to another."""
        target = new_level - original_level + self.stack.max_level
        self.inc_at_level(target, remove_deeper=True)

    def new_child(self) -> None:
        self.set(self.value + ".1" if self.value else "1")

    def drop_level_and_inc(self) -> None:
        if len(self.stack) <= 1:
            self.increment()
            return
        self.stack.truncate(len(self.stack) - 1)
        self.increment()

    def copy(self) -> SeqSingleValue:
        return SeqSingleValue(self.value)


class SeqValue(StringValue):
    """One or more sequence numbers separated by semicolons.

    Sorting and incrementing act on the first sequence.
    """

    multi_delimiter = "; "

    def set(self, text: str) -> None:
        self.seqs = [SeqSingleValue(part) for part in text.split(SEQ_DELIMITER)]
        self.seqs = [s for s in self.seqs if s.has_data]
        self._sync()

    def _sync(self) -> None:
        self.value = self.multi_delimiter.join(s.value for s in self.seqs)

    @property
    def first(self) -> SeqSingleValue:
        if not self.seqs:
            self.seqs.append(SeqSingleValue())
        return self.seqs[0]

    @property
    def sort_key(self) -> str:
        return self.first.sort_key if self.seqs else SeqStack().sort_key

    @property
    def multi_count(self) -> int:
        return len(self.seqs)

    def multi_at(self, index: int) -> str | None:
        if 0 <= index < len(self.seqs):
            return self.seqs[index].value
        return None

    @property
    def max_level(self) -> int:
        return self.first.max_level if self.seqs else -1

    def increment(self) -> None:
        self.first.increment()
        self._sync()

    def inc_at_level(self, level: int, remove_deeper: bool = False) -> None:
        self.first.inc_at_level(level, remove_deeper)
        self._sync()

    def inc_by_levels(self, original_level: int, new_level: int) -> None:
        self.first.inc_by_levels(original_level, new_level)
        self._sync()

    def new_child(self) -> None:
        self.first.new_child()
        self._sync()

    def drop_level_and_inc(self) -> None:
        self.first.drop_level_and_inc()
        self._sync()

    def copy(self) -> SeqValue:
        return SeqValue(self.value)
