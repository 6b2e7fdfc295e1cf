"""Application accounting – QuickBooks Desktop IIF export.

Layout (tab separated)::

    !TRNS  TRNSTYPE  DATE  ACCNT  NAME  AMOUNT  MEMO
    !SPL   TRNSTYPE  DATE  ACCNT  NAME  AMOUNT  MEMO
    !ENDTRNS
    TRNS   GENERAL JOURNAL  3/5/2026  <debit account>   <client>   500  <memo>
    SPL    GENERAL JOURNAL  3/5/2026  <credit account>  <client>  -500  <memo>
    ENDTRNS

The TRNS and SPL amounts of each transaction always sum to zero.
"""
from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from ledgerport.application.accounting.transaction import AccountMapping, Transaction, as_transactions
from ledgerport.application.export.filenames import build_filename
from ledgerport.application.export.request import ExportFile
from ledgerport.kernel.time import Clock, SystemClock, format_us_date
from ledgerport.kernel.types import format_amount

__all__ = ["IIF_MIME_TYPE", "QuickBooksExporter"]

IIF_MIME_TYPE = "text/plain;charset=utf-8;"
DEFAULT_DEBIT_ACCOUNT = "Loans Receivable"
DEFAULT_CREDIT_ACCOUNT = "Cash"

_FIELDS = ("TRNSTYPE", "DATE", "ACCNT", "NAME", "AMOUNT", "MEMO")
_HEADER = (
    "\t".join(("!TRNS",) + _FIELDS),
    "\t".join(("!SPL",) + _FIELDS),
    "!ENDTRNS",
)
_TRNSTYPE = "GENERAL JOURNAL"
_CONTROL = re.compile(r"[\t\r\n]+")


def _field(value: str | None) -> str:
    # IIF has no quoting; a tab or newline would start a new field or record.
    return _CONTROL.sub(" ", value or "")


class QuickBooksExporter:
    """Balanced TRNS/SPL pairs, one per transaction."""

    extension = "iif"
    mime_type = IIF_MIME_TYPE

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    def lines(
        self,
        transactions: Iterable[Transaction | Mapping[str, Any]],
        mapping: AccountMapping | Mapping[str, str] | None = None,
    ) -> list[str]:
        accounts = AccountMapping.coerce(mapping)
        lines = list(_HEADER)
        for txn in as_transactions(transactions):
            date = format_us_date(txn.date) if txn.date else ""
            name = _field(txn.client_name)
            memo = _field(txn.description)
            debit = _field(accounts.debit(txn.type, DEFAULT_DEBIT_ACCOUNT))
            credit = _field(accounts.credit(txn.type, DEFAULT_CREDIT_ACCOUNT))
            lines.append("\t".join(("TRNS", _TRNSTYPE, date, debit, name, format_amount(txn.amount), memo)))
            lines.append("\t".join(("SPL", _TRNSTYPE, date, credit, name, format_amount(-txn.amount), memo)))
            lines.append("ENDTRNS")
        return lines

    def encode(
        self,
        transactions: Iterable[Transaction | Mapping[str, Any]],
        mapping: AccountMapping | Mapping[str, str] | None = None,
    ) -> str:
        return "\n".join(self.lines(transactions, mapping))

    def export(
        self,
        transactions: Iterable[Transaction | Mapping[str, Any]],
        filename: str,
        mapping: AccountMapping | Mapping[str, str] | None = None,
        *,
        include_timestamp: bool = True,
    ) -> ExportFile:
        return ExportFile(
            content=self.encode(transactions, mapping),
            filename=build_filename(
                filename, self.extension, self._clock.today(), include_timestamp=include_timestamp
            ),
            mime_type=self.mime_type,
        )
