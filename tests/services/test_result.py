"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from presence.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"count": 1})
        assert result.ok is True
        assert result.op == "check"
        assert result.data == {"count": 1}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="EVALUATION_ERROR", message="hook failed")
        result = ServiceResult(ok=False, op="check", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "EVALUATION_ERROR"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="coalesce", data={"value": "0"}, warnings=["w"])
        parsed = json.loads(result.model_dump_json())
        assert parsed["data"] == {"value": "0"}
        assert parsed["warnings"] == ["w"]

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="check")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]

    def test_failure_builds_error_with_detail(self) -> None:
        result = ServiceResult.failure(
            "check", "EVALUATION_ERROR", "hook failed", input="x", type="Sensor"
        )
        assert result.ok is False
        assert result.op == "check"
        assert result.data == {}
        assert result.error == ServiceError(
            code="EVALUATION_ERROR",
            message="hook failed",
            detail={"input": "x", "type": "Sensor"},
        )

    def test_failure_without_detail(self) -> None:
        result = ServiceResult.failure("coalesce", "NO_OPERANDS", "nothing to coalesce")
        assert result.error is not None
        assert result.error.detail == {}
