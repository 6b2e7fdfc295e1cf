"""Application accounting – Transaction and AccountMapping."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Literal, Mapping

from ledgerport.kernel.errors import ValidationError
from ledgerport.kernel.time import coerce_date
from ledgerport.kernel.types import to_decimal

__all__ = ["AccountMapping", "Side", "Transaction", "as_transactions"]

Side = Literal["DEBIT", "CREDIT"]


@dataclass(frozen=True)
class Transaction:
    """A single signed financial movement supplied by the lending backend.

    The sign of ``amount`` decides which side of a ledger pair it lands on.
    ``id`` and ``date`` may be absent; adapters then write empty cells.
    """

    type: str
    amount: Decimal
    id: str | None = None
    date: date | None = None
    client_name: str | None = None
    description: str | None = None
    reference: str | None = None

    def __post_init__(self) -> None:
        if self.id is not None:
            object.__setattr__(self, "id", str(self.id))
        if self.date is not None:
            object.__setattr__(self, "date", coerce_date(self.date))
        object.__setattr__(self, "amount", to_decimal(self.amount))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Transaction":
        """Build from an upstream record (camelCase or snake_case keys)."""
        missing = [key for key in ("type", "amount") if data.get(key) is None]
        if missing:
            raise ValidationError(
                "Transaction is missing required fields",
                errors=[{"field": key, "error": "required"} for key in missing],
            )
        return cls(
            type=str(data["type"]),
            amount=data["amount"],
            id=data.get("id"),
            date=data.get("date") or None,
            client_name=data.get("clientName") or data.get("client_name"),
            description=data.get("description"),
            reference=data.get("reference"),
        )

    @property
    def reference_or_id(self) -> str:
        return self.reference or self.id or ""


class AccountMapping:
    """Translates a transaction type into the target system's account identifiers.

    Lookup for a side is ``<type>_<SIDE>`` → ``DEFAULT_<SIDE>`` → the
    adapter's literal fallback. Empty values count as missing, so a
    resolution always yields a non-empty identifier.
    """

    def __init__(self, mapping: Mapping[str, str] | None = None) -> None:
        self._mapping: dict[str, str] = dict(mapping or {})

    @classmethod
    def from_entries(cls, entries: Iterable[Mapping[str, Any]]) -> "AccountMapping":
        """Build from ``{transactionType, debitCode, creditCode}`` records."""
        mapping: dict[str, str] = {}
        for entry in entries:
            txn_type = entry["transactionType"]
            if entry.get("debitCode"):
                mapping[f"{txn_type}_DEBIT"] = str(entry["debitCode"])
            if entry.get("creditCode"):
                mapping[f"{txn_type}_CREDIT"] = str(entry["creditCode"])
        return cls(mapping)

    @classmethod
    def coerce(cls, value: "AccountMapping | Mapping[str, str] | None") -> "AccountMapping":
        return value if isinstance(value, AccountMapping) else cls(value)

    def first(self, *keys: str, fallback: str) -> str:
        for key in keys:
            value = self._mapping.get(key)
            if value:
                return value
        return fallback

    def resolve(self, txn_type: str, side: Side, fallback: str) -> str:
        return self.first(f"{txn_type}_{side}", f"DEFAULT_{side}", fallback=fallback)

    def debit(self, txn_type: str, fallback: str) -> str:
        return self.resolve(txn_type, "DEBIT", fallback)

    def credit(self, txn_type: str, fallback: str) -> str:
        return self.resolve(txn_type, "CREDIT", fallback)

    def as_dict(self) -> dict[str, str]:
        return dict(self._mapping)

    def __repr__(self) -> str:
        return f"AccountMapping({self._mapping!r})"


def as_transactions(items: Iterable["Transaction | Mapping[str, Any]"]) -> list[Transaction]:
    """Accept :class:`Transaction` objects or raw upstream records."""
    return [item if isinstance(item, Transaction) else Transaction.from_dict(item) for item in items]
