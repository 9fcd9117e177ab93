"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from identiconctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="render", data={"path": "alice.png"})
        assert result.ok is True
        assert result.op == "render"
        assert result.data == {"path": "alice.png"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="UNSUPPORTED_FORMAT", message="unsupported image format: bmp")
        result = ServiceResult(ok=False, op="render", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "UNSUPPORTED_FORMAT"

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="encode",
            data={"encoded": "iVBORw0KGgo="},
            meta={"telemetry": {"name": "encode"}},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "encode"
        assert parsed["data"]["encoded"] == "iVBORw0KGgo="
        assert parsed["meta"]["telemetry"]["name"] == "encode"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="render")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(
            code="HSL_OUT_OF_RANGE",
            message="expect hue between 0.0 and 360.0 but found 400.0",
            detail={"field": "hue", "value": 400.0, "max": 360.0},
        )
        assert error.detail["field"] == "hue"

    def test_detail_defaults_empty(self) -> None:
        assert ServiceError(code="X", message="y").detail == {}
