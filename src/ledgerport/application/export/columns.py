"""Application export – projecting rows through column definitions."""
from __future__ import annotations

import math
from datetime import date
from typing import Any, Callable, Sequence

from ledgerport.application.export.request import ColumnDef, Formatter, Row
from ledgerport.kernel.errors import ValidationError
from ledgerport.kernel.time import format_display_date
from ledgerport.kernel.types import to_decimal

__all__ = [
    "cell_text",
    "display_date",
    "fixed2",
    "optional_date",
    "positive_fixed2",
    "project_row",
    "resolve_value",
    "to_text",
]


def resolve_value(column: ColumnDef, row: Row) -> Any:
    """Value of *column* in *row* after its formatter; missing keys read as ``None``."""
    value = row.get(column.key)
    if column.formatter is not None:
        value = column.formatter(value, row)
    return value


def to_text(value: Any) -> str:
    """Display text of a cell value."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def cell_text(column: ColumnDef, row: Row) -> str:
    return to_text(resolve_value(column, row))


def project_row(columns: Sequence[ColumnDef], row: Row) -> dict[str, Any]:
    """Row as ``{column.key: formatted value}`` in column order.

    ``NaN`` and infinite floats become ``None``.
    """
    return {col.key: _finite_or_none(resolve_value(col, row)) for col in columns}


def _finite_or_none(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


# -- stock formatters ---------------------------------------------------------


def fixed2(value: Any, row: Row) -> str:  # noqa: ARG001
    """Two decimals; missing or zero values read ``0.00``."""
    if value is None or value == "":
        return "0.00"
    try:
        return f"{to_decimal(value):.2f}"
    except ValidationError:
        return "0.00"


def positive_fixed2(value: Any, row: Row) -> str:  # noqa: ARG001
    """Two decimals for positive amounts, empty otherwise (debit/credit columns)."""
    if value is None:
        return ""
    try:
        number = to_decimal(value)
    except ValidationError:
        return ""
    return f"{number:.2f}" if number > 0 else ""


def optional_date(empty: str = "") -> Formatter:
    """Formatter rendering dates as ``DD Mon YYYY`` and *empty* when absent."""

    def _format(value: Any, row: Row) -> str:  # noqa: ARG001
        if not value:
            return empty
        try:
            return format_display_date(value)
        except ValidationError:
            return str(value)

    return _format


display_date: Callable[[Any, Row], str] = optional_date()
