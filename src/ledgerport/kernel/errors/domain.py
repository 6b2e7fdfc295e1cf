"""Domain errors – invalid business input and malformed documents."""

from __future__ import annotations

from typing import Any

from ledgerport.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when input data breaks a domain rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class CsvParseError(DomainError):
    """A delimited-text record could not be split into fields."""

    default_code = "csv_parse_error"

    def __init__(self, message: str, *, record: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.record = record


__all__ = [
    "CsvParseError",
    "DomainError",
    "ValidationError",
]
