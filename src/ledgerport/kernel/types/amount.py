"""Signed monetary amounts as ``Decimal``."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ledgerport.kernel.errors.domain import ValidationError


def to_decimal(value: Any) -> Decimal:
    """Coerce int/float/str/Decimal into a finite ``Decimal``.

    Floats go through ``str`` so ``0.1`` stays ``Decimal("0.1")``.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid amount: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid amount: {value!r}", cause=exc) from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid amount: {value!r}")
    return result


def format_amount(value: Any) -> str:
    """Shortest plain-decimal text for an amount.

    ``500`` → ``"500"``, ``Decimal("-12.50")`` → ``"-12.5"``; negative zero
    renders as ``"0"``.
    """
    amount = to_decimal(value)
    if amount.is_zero():
        return "0"
    return format(amount.normalize(), "f")


__all__ = ["format_amount", "to_decimal"]
