"""Kernel value helpers."""
from ledgerport.kernel.types.amount import format_amount, to_decimal

__all__ = ["format_amount", "to_decimal"]
