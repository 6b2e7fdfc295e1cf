"""Unit tests for kernel amount helpers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from ledgerport.kernel.errors import ValidationError
from ledgerport.kernel.types import format_amount, to_decimal


class TestToDecimal:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (500, Decimal("500")),
            (0.1, Decimal("0.1")),
            ("12.50", Decimal("12.50")),
            (" -3 ", Decimal("-3")),
            (Decimal("7.25"), Decimal("7.25")),
        ],
    )
    def test_coerces(self, raw: object, expected: Decimal) -> None:
        assert to_decimal(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", None, True, float("nan"), "Infinity"])
    def test_rejects(self, raw: object) -> None:
        with pytest.raises(ValidationError):
            to_decimal(raw)


class TestFormatAmount:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (500, "500"),
            (-500, "-500"),
            (Decimal("500.00"), "500"),
            (Decimal("-12.50"), "-12.5"),
            (1500.75, "1500.75"),
            (Decimal("1E+3"), "1000"),
            (Decimal("-0"), "0"),
            (0, "0"),
        ],
    )
    def test_format(self, raw: object, expected: str) -> None:
        assert format_amount(raw) == expected
