"""Application accounting – Xero bank statement CSV export.

Single-entry: one signed row per transaction.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from ledgerport.application.accounting.transaction import AccountMapping, Transaction, as_transactions
from ledgerport.application.export.csv_export import CsvExporter
from ledgerport.application.export.request import ColumnDef, ExportFile, ExportRequest
from ledgerport.kernel.time import Clock, format_uk_date
from ledgerport.kernel.types import format_amount

__all__ = ["XERO_COLUMNS", "XeroExporter"]

DEFAULT_ACCOUNT_CODE = "200"
NO_VAT = "No VAT"

XERO_COLUMNS = [
    ColumnDef("Date", "*Date"),
    ColumnDef("Amount", "*Amount"),
    ColumnDef("Payee", "Payee"),
    ColumnDef("Description", "Description"),
    ColumnDef("Reference", "Reference"),
    ColumnDef("AccountCode", "Account Code"),
    ColumnDef("TaxType", "Tax Type"),
]


class XeroExporter:
    def __init__(self, clock: Clock | None = None) -> None:
        self._csv = CsvExporter(clock)

    @staticmethod
    def account_code(accounts: AccountMapping, txn_type: str) -> str:
        return accounts.first(
            txn_type,
            f"{txn_type}_DEBIT",
            "DEFAULT",
            "DEFAULT_DEBIT",
            fallback=DEFAULT_ACCOUNT_CODE,
        )

    def rows(
        self,
        transactions: Iterable[Transaction | Mapping[str, Any]],
        mapping: AccountMapping | Mapping[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        accounts = AccountMapping.coerce(mapping)
        return [
            {
                "Date": format_uk_date(txn.date) if txn.date else "",
                "Amount": format_amount(txn.amount),
                "Payee": txn.client_name or "",
                "Description": txn.description or txn.type,
                "Reference": txn.reference_or_id,
                "AccountCode": self.account_code(accounts, txn.type),
                "TaxType": NO_VAT,
            }
            for txn in as_transactions(transactions)
        ]

    def encode(
        self,
        transactions: Iterable[Transaction | Mapping[str, Any]],
        mapping: AccountMapping | Mapping[str, str] | None = None,
    ) -> str:
        return self._csv.encode(XERO_COLUMNS, self.rows(transactions, mapping))

    def export(
        self,
        transactions: Iterable[Transaction | Mapping[str, Any]],
        filename: str,
        mapping: AccountMapping | Mapping[str, str] | None = None,
        *,
        include_timestamp: bool = True,
    ) -> ExportFile:
        return self._csv.export(
            ExportRequest(
                filename=f"{filename}_xero",
                columns=XERO_COLUMNS,
                rows=self.rows(transactions, mapping),
                include_timestamp=include_timestamp,
            )
        )
