"""Infrastructure errors – file system and host failures."""

from __future__ import annotations

from typing import Any

from ledgerport.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class DeliveryError(InfrastructureError):
    """An exported file could not be handed to its destination."""

    default_code = "delivery_error"

    def __init__(self, filename: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Could not deliver '{filename}'", **kwargs)
        self.filename = filename


class FileReadError(InfrastructureError):
    """A file selected for import could not be read."""

    default_code = "file_read_error"

    def __init__(self, path: str, message: str = "Failed to read file", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.path = path


__all__ = [
    "DeliveryError",
    "FileReadError",
    "InfrastructureError",
]
