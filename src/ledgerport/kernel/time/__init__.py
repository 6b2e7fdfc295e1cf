"""Kernel time – Clock port, implementations and date helpers."""
from ledgerport.kernel.time.clock import Clock, FrozenClock, SystemClock, utc_now
from ledgerport.kernel.time.dates import (
    coerce_date,
    format_display_date,
    format_uk_date,
    format_us_date,
    iso_timestamp,
)

__all__ = [
    "Clock",
    "FrozenClock",
    "SystemClock",
    "coerce_date",
    "format_display_date",
    "format_uk_date",
    "format_us_date",
    "iso_timestamp",
    "utc_now",
]
