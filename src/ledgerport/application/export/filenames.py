"""Application export – output filename policy."""
from __future__ import annotations

from datetime import date

__all__ = ["build_filename"]


def build_filename(
    base: str,
    extension: str | None,
    today: date,
    *,
    include_timestamp: bool = True,
) -> str:
    """``<base>[_YYYY-MM-DD][.<extension>]``."""
    name = f"{base}_{today:%Y-%m-%d}" if include_timestamp else base
    if extension:
        name = f"{name}.{extension}"
    return name
