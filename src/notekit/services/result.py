"""What every service operation hands back to the CLI.

Engine rejections (a refused label, a record that is not an object) come
back as ``ok=False`` results carrying a :class:`ServiceError`; nothing at
this layer raises for bad input.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Machine-readable ``code`` plus a message for people."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation such as ``parse_field`` or ``sort_notes``.

    ``data`` holds the payload (``items`` and ``count`` for listings,
    ``value`` for single parses). ``warnings`` collect skipped input that
    did not stop the operation. ``meta`` records the settings in effect.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail or {}))
