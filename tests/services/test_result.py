"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from notekit.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="parse_field", data={"value": "The Hobbit"})
        assert result.ok is True
        assert result.op == "parse_field"
        assert result.data == {"value": "The Hobbit"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_LABEL", message="Not a usable field label")
        result = ServiceResult(ok=False, op="parse_field", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_LABEL"

    def test_failure_constructor(self) -> None:
        result = ServiceResult.failure("increment_seq", "INVALID_INPUT", "Level must be 0 or more", {"level": -1})
        assert result.ok is False
        assert result.data == {}
        assert result.error == ServiceError(
            code="INVALID_INPUT", message="Level must be 0 or more", detail={"level": -1}
        )

    def test_failure_detail_defaults_empty(self) -> None:
        result = ServiceResult.failure("sort_notes", "INVALID_INPUT", "Invalid JSON")
        assert result.error is not None
        assert result.error.detail == {}

    def test_with_warnings(self) -> None:
        result = ServiceResult(ok=True, op="sort_notes", warnings=["Record 0: field 'x' refused"])
        assert len(result.warnings) == 1

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="sort_notes",
            data={"count": 2},
            meta={"sort_parm": "title"},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "sort_notes"
        assert parsed["data"]["count"] == 2
        assert parsed["meta"]["sort_parm"] == "title"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(code="LABEL_REJECTED", message="refused", detail={"label": "Mood"})
        assert error.detail["label"] == "Mood"

    def test_default_detail(self) -> None:
        assert ServiceError(code="E001", message="bad").detail == {}
