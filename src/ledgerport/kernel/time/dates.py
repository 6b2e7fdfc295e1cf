"""Kernel time – date coercion and the textual date layouts used by exports."""
from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any

from ledgerport.kernel.errors import ValidationError


def coerce_date(value: Any) -> date:
    """Return *value* as a ``date``/``datetime``.

    Accepts ``date``, ``datetime`` and ISO-8601 strings (a trailing ``Z`` is
    understood as UTC). Date-only strings become a plain ``date``.
    """
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValidationError(f"Invalid date: {value!r}", cause=exc) from exc
    raise ValidationError(f"Invalid date: {value!r}")


def iso_timestamp(moment: datetime) -> str:
    """ISO-8601 with millisecond precision and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_us_date(value: Any) -> str:
    """``M/D/YYYY`` without zero padding."""
    d = coerce_date(value)
    return f"{d.month}/{d.day}/{d.year}"


def format_uk_date(value: Any) -> str:
    """``DD/MM/YYYY``."""
    return coerce_date(value).strftime("%d/%m/%Y")


def format_display_date(value: Any) -> str:
    """``DD Mon YYYY``, the layout used in report captions and columns."""
    return coerce_date(value).strftime("%d %b %Y")


__all__ = [
    "coerce_date",
    "format_display_date",
    "format_uk_date",
    "format_us_date",
    "iso_timestamp",
]
