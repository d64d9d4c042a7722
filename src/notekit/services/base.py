"""BaseService: shared foundation for notekit services.

Every service receives the :class:`NoteCollection` it operates on. The
engine itself never raises for bad input; services translate its
None/False rejections into structured :class:`ServiceError` results.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from notekit.services.result import ServiceResult

if TYPE_CHECKING:
    from notekit.domain.collection import NoteCollection

logger = logging.getLogger(__name__)

INVALID_LABEL = "INVALID_LABEL"
LABEL_REJECTED = "LABEL_REJECTED"
INVALID_INPUT = "INVALID_INPUT"


class BaseService:
    """Base for service-layer classes.

    Usage::

        class FieldService(BaseService):
            def parse_field(self, label: str, text: str) -> ServiceResult:
                definition = self._collection.resolve_field(label)
                ...
    """

    def __init__(self, collection: NoteCollection) -> None:
        self._collection = collection

    @property
    def collection(self) -> NoteCollection:
        return self._collection

    @staticmethod
    def _failure(
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        logger.debug("%s failed: %s (%s)", op, message, code)
        return ServiceResult.failure(op, code, message, detail)
