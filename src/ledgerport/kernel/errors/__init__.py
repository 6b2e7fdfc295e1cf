"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── CsvParseError
    ├── ApplicationError     (application.py)
    │   └── UnsupportedFormatError
    └── InfrastructureError  (infrastructure.py)
        ├── DeliveryError
        └── FileReadError
"""

from ledgerport.kernel.errors.application import ApplicationError, UnsupportedFormatError
from ledgerport.kernel.errors.base import BaseError
from ledgerport.kernel.errors.domain import CsvParseError, DomainError, ValidationError
from ledgerport.kernel.errors.infrastructure import (
    DeliveryError,
    FileReadError,
    InfrastructureError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CsvParseError",
    "DeliveryError",
    "DomainError",
    "FileReadError",
    "InfrastructureError",
    "UnsupportedFormatError",
    "ValidationError",
]
