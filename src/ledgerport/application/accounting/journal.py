"""Application accounting – generic journal entry export (Excel-compatible CSV)."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from ledgerport.application.accounting.transaction import AccountMapping, Transaction, as_transactions
from ledgerport.application.export.columns import display_date, positive_fixed2
from ledgerport.application.export.excel_export import ExcelExporter
from ledgerport.application.export.request import ColumnDef, ExportFile, ExportRequest, Row
from ledgerport.kernel.time import Clock

__all__ = ["JOURNAL_COLUMNS", "JournalEntriesExporter", "journal_entries_from_transactions"]

JOURNAL_TITLE = "Journal Entries Export"
DEFAULT_DEBIT_ACCOUNT = "Loans Receivable"
DEFAULT_CREDIT_ACCOUNT = "Cash"

JOURNAL_COLUMNS = [
    ColumnDef("date", "Date", display_date),
    ColumnDef("journalNumber", "Journal #"),
    ColumnDef("accountCode", "Account Code"),
    ColumnDef("accountName", "Account Name"),
    ColumnDef("description", "Description"),
    ColumnDef("debit", "Debit", positive_fixed2),
    ColumnDef("credit", "Credit", positive_fixed2),
    ColumnDef("reference", "Reference"),
]


def journal_entries_from_transactions(
    transactions: Iterable[Transaction | Mapping[str, Any]],
    mapping: AccountMapping | Mapping[str, str] | None = None,
) -> list[dict[str, Any]]:
    """Two journal lines per transaction, debits equal to credits.

    A negative amount swaps which account is debited.
    """
    accounts = AccountMapping.coerce(mapping)
    entries: list[dict[str, Any]] = []
    for txn in as_transactions(transactions):
        debit_account = accounts.debit(txn.type, DEFAULT_DEBIT_ACCOUNT)
        credit_account = accounts.credit(txn.type, DEFAULT_CREDIT_ACCOUNT)
        magnitude = abs(txn.amount)
        if txn.amount < 0:
            debit_account, credit_account = credit_account, debit_account
        shared = {
            "date": txn.date,
            "journalNumber": txn.reference_or_id,
            "description": txn.description or f"{txn.type} - {txn.client_name or 'Unknown'}",
            "reference": txn.reference_or_id,
        }
        entries.append({**shared, "accountCode": debit_account, "accountName": debit_account,
                        "debit": magnitude, "credit": None})
        entries.append({**shared, "accountCode": credit_account, "accountName": credit_account,
                        "debit": None, "credit": magnitude})
    return entries


class JournalEntriesExporter:
    def __init__(self, clock: Clock | None = None) -> None:
        self._excel = ExcelExporter(clock)

    def export(self, entries: Iterable[Row], filename: str, *, include_timestamp: bool = True) -> ExportFile:
        return self._excel.export(
            ExportRequest(
                filename=filename,
                columns=JOURNAL_COLUMNS,
                rows=entries,
                title=JOURNAL_TITLE,
                include_timestamp=include_timestamp,
            )
        )
