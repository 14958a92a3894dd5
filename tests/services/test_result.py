"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from countryctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="show_city", data={"name": "Haifa"})
        assert result.ok is True
        assert result.op == "show_city"
        assert result.data == {"name": "Haifa"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NOT_FOUND", message="There is no city with the name X")
        result = ServiceResult(ok=False, op="show_city", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="total_residents",
            data={"residents": 42},
            meta={"num_cities": 3},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["residents"] == 42
        assert parsed["meta"]["num_cities"] == 3

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(code="CAPACITY_EXCEEDED", message="full", detail={"capacity": 2})
        assert error.detail["capacity"] == 2

    def test_default_detail(self) -> None:
        assert ServiceError(code="EMPTY_COUNTRY", message="bad").detail == {}

    def test_unknown_code_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ServiceError(code="BROKEN", message="bad")  # type: ignore[arg-type]


class TestCityNames:
    def test_items(self) -> None:
        items = [{"name": "A"}, {"name": "B"}]
        result = ServiceResult(ok=True, op="list_cities", data={"items": items})
        assert result.city_names == ["A", "B"]

    def test_single_city(self) -> None:
        result = ServiceResult(ok=True, op="show_city", data={"name": "Haifa"})
        assert result.city_names == ["Haifa"]

    def test_scalar_payload(self) -> None:
        assert ServiceResult(ok=True, op="total_residents", data={"residents": 3}).city_names == []
