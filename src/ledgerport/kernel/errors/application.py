"""Application-layer errors – use-case level failures."""

from __future__ import annotations

from typing import Any

from ledgerport.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnsupportedFormatError(ApplicationError):
    """An export format or accounting system is not known."""

    default_code = "unsupported_format"

    def __init__(self, name: str, *, supported: tuple[str, ...] = (), **kwargs: Any) -> None:
        message = f"Unsupported export format: {name!r}"
        if supported:
            message += f" (expected one of: {', '.join(supported)})"
        super().__init__(message, **kwargs)
        self.name = name
        self.supported = supported


__all__ = [
    "ApplicationError",
    "UnsupportedFormatError",
]
