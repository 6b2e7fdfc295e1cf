"""Unit tests for Hypothesis strategies."""
from __future__ import annotations

import sys
from decimal import Decimal
from unittest.mock import patch

import pytest
from hypothesis import given, settings

from ledgerport.application.accounting import Transaction
from ledgerport.testing.generators import amount_strategy, cell_text_strategy, transaction_strategy


# ---------------------------------------------------------------------------
# Import guard
# ---------------------------------------------------------------------------
class TestRequireHypothesis:
    def test_raises_import_error_without_hypothesis(self):
        from ledgerport.testing.generators.strategies import _require_hypothesis

        with patch.dict(sys.modules, {"hypothesis.strategies": None}):
            with pytest.raises(ImportError, match="pip install hypothesis"):
                _require_hypothesis()


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------
class TestCellTextStrategy:
    @settings(max_examples=50)
    @given(cell_text_strategy(max_size=10))
    def test_no_surrounding_whitespace(self, text):
        assert text == text.strip()
        assert len(text) <= 10


class TestAmountStrategy:
    @settings(max_examples=50)
    @given(amount_strategy(min_amount=0, max_amount=100))
    def test_bounds_and_places(self, amount):
        assert isinstance(amount, Decimal)
        assert Decimal(0) <= amount <= Decimal(100)
        assert amount == amount.quantize(Decimal("0.01"))


class TestTransactionStrategy:
    @settings(max_examples=50)
    @given(transaction_strategy(types=("FEE",)))
    def test_builds_transactions(self, txn):
        assert isinstance(txn, Transaction)
        assert txn.type == "FEE"
        assert isinstance(txn.amount, Decimal)
        assert txn.id
