"""Testing generators – Hypothesis strategies for rows and transactions."""
from ledgerport.testing.generators.strategies import (
    amount_strategy,
    cell_text_strategy,
    transaction_strategy,
)

__all__ = ["amount_strategy", "cell_text_strategy", "transaction_strategy"]
