"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from ledgerport.kernel.errors import (
    ApplicationError,
    BaseError,
    CsvParseError,
    DeliveryError,
    DomainError,
    FileReadError,
    InfrastructureError,
    UnsupportedFormatError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_log_fields(self) -> None:
        assert BaseError("m", code="c").log_fields() == {"error_code": "c", "error": "m"}
        err = BaseError("m", code="c", detail={"row": 3})
        assert err.log_fields()["error_detail"] == {"row": 3}

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestHierarchy:
    @pytest.mark.parametrize(
        ("cls", "parent"),
        [
            (ValidationError, DomainError),
            (CsvParseError, DomainError),
            (UnsupportedFormatError, ApplicationError),
            (DeliveryError, InfrastructureError),
            (FileReadError, InfrastructureError),
        ],
    )
    def test_subclass(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)
        assert issubclass(cls, BaseError)


class TestValidationError:
    def test_errors_default_empty(self) -> None:
        assert ValidationError("bad").errors == []

    def test_to_dict_includes_errors(self) -> None:
        err = ValidationError("bad", errors=[{"field": "amount"}])
        assert err.to_dict()["errors"] == [{"field": "amount"}]


class TestSpecificErrors:
    def test_unsupported_format_lists_choices(self) -> None:
        err = UnsupportedFormatError("pdfx", supported=("csv", "json"))
        assert err.code == "unsupported_format"
        assert "'pdfx'" in err.message
        assert "csv, json" in err.message

    def test_csv_parse_error_keeps_record(self) -> None:
        err = CsvParseError("Unterminated quoted field", record='"abc')
        assert err.record == '"abc'

    def test_delivery_error_default_message(self) -> None:
        err = DeliveryError("report.csv")
        assert err.message == "Could not deliver 'report.csv'"
        assert err.filename == "report.csv"

    def test_file_read_error_message(self) -> None:
        err = FileReadError("/tmp/missing.csv")
        assert err.message == "Failed to read file"
        assert err.path == "/tmp/missing.csv"
