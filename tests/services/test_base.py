"""Tests for BaseService and service inheritance."""

import pytest

from notekit.domain.collection import NoteCollection
from notekit.services.base import INVALID_INPUT, BaseService
from notekit.services.fields import FieldService
from notekit.services.sequence import SequenceService
from notekit.services.sorting import SortService


class TestBaseService:
    def test_collection_stored(self) -> None:
        collection = NoteCollection()
        service = BaseService(collection)
        assert service.collection is collection

    def test_subclass_pattern(self) -> None:
        class MyService(BaseService):
            def describe(self) -> str:
                return f"{self._collection.title} with {len(self._collection.dictionary)} fields"

        assert MyService(NoteCollection("Books")).describe() == "Books with 0 fields"

    def test_failure_result(self) -> None:
        result = BaseService._failure("op", INVALID_INPUT, "bad input", {"index": 3})
        assert result.ok is False
        assert result.op == "op"
        assert result.error is not None
        assert result.error.code == INVALID_INPUT
        assert result.error.detail == {"index": 3}


ALL_SERVICES = [FieldService, SequenceService, SortService]


class TestServiceInheritance:
    @pytest.mark.parametrize("service_cls", ALL_SERVICES, ids=lambda c: c.__name__)
    def test_inherits_base_service(self, service_cls: type) -> None:
        assert issubclass(service_cls, BaseService)

    @pytest.mark.parametrize("service_cls", ALL_SERVICES, ids=lambda c: c.__name__)
    def test_collection_injection(self, service_cls: type) -> None:
        collection = NoteCollection()
        assert service_cls(collection).collection is collection
