"""SequenceService: parse, increment and key hierarchical sequence numbers."""

from __future__ import annotations

from typing import Any

from notekit.domain.seq import SeqStack
from notekit.domain.values import SeqValue
from notekit.services.base import INVALID_INPUT, BaseService
from notekit.services.result import ServiceResult


class SequenceService(BaseService):
    """Sequence operations that do not need a note."""

    def parse(self, text: str) -> ServiceResult:
        stack = SeqStack.parse(text)
        segments: list[dict[str, Any]] = [
            {
                "text": segment.text,
                "start_punct": segment.start_punct,
                "end_punct": segment.end_punct,
                "number_kind": str(segment.number_kind),
                "pad_char": segment.pad_char,
            }
            for segment in stack.segments
        ]
        return ServiceResult(
            ok=True,
            op="parse_seq",
            data={
                "input": text,
                "value": stack.value,
                "levels": len(stack),
                "max_level": stack.max_level,
                "sort_key": stack.sort_key,
                "segments": segments,
            },
        )

    def increment(self, text: str, *, level: int | None = None, remove_deeper: bool = False) -> ServiceResult:
        """Increment *text* at its deepest level, or at *level* when given."""
        op = "increment_seq"
        if level is not None and level < 0:
            return self._failure(op, INVALID_INPUT, f"Level must be 0 or more, got {level}", {"level": level})

        seq = SeqValue(text)
        if level is None:
            seq.increment()
        else:
            seq.inc_at_level(level, remove_deeper)
        return ServiceResult(
            ok=True,
            op=op,
            data={"input": text, "value": seq.value, "sort_key": seq.sort_key},
        )

    def sort_keys(self, texts: list[str]) -> ServiceResult:
        """Sort key for each of *texts*, listed in sorted order."""
        seqs = sorted((SeqValue(text) for text in texts), key=lambda seq: seq.sort_key)
        items = [{"value": seq.value, "sort_key": seq.sort_key} for seq in seqs]
        return ServiceResult(ok=True, op="seq_keys", data={"items": items, "count": len(items)})
