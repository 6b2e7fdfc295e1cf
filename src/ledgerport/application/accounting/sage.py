"""Application accounting – Sage journal CSV export.

Each transaction becomes two rows at the debit and credit nominal codes with
opposite ``Net Amount`` values.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from ledgerport.application.accounting.transaction import AccountMapping, Transaction, as_transactions
from ledgerport.application.export.csv_export import CsvExporter
from ledgerport.application.export.request import ColumnDef, ExportFile, ExportRequest
from ledgerport.kernel.time import Clock, format_uk_date
from ledgerport.kernel.types import format_amount

__all__ = ["SAGE_COLUMNS", "SageExporter"]

DEFAULT_DEBIT_CODE = "1100"
DEFAULT_CREDIT_CODE = "1200"
NO_TAX = "T0"

SAGE_COLUMNS = [
    ColumnDef("transactionDate", "Transaction Date", lambda v, row: format_uk_date(v) if v else ""),
    ColumnDef("reference", "Reference"),
    ColumnDef("nominalCode", "Nominal Code"),
    ColumnDef("department", "Department"),
    ColumnDef("details", "Details"),
    ColumnDef("netAmount", "Net Amount"),
    ColumnDef("taxCode", "Tax Code"),
    ColumnDef("taxAmount", "Tax Amount"),
]


class SageExporter:
    def __init__(self, clock: Clock | None = None) -> None:
        self._csv = CsvExporter(clock)

    def rows(
        self,
        transactions: Iterable[Transaction | Mapping[str, Any]],
        mapping: AccountMapping | Mapping[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        accounts = AccountMapping.coerce(mapping)
        rows: list[dict[str, Any]] = []
        for txn in as_transactions(transactions):
            shared = {
                "transactionDate": txn.date,
                "reference": txn.reference_or_id,
                "department": "",
                "details": f"{txn.type} - {txn.client_name or 'Unknown'}",
                "taxCode": NO_TAX,
                "taxAmount": "0",
            }
            rows.append({
                **shared,
                "nominalCode": accounts.debit(txn.type, DEFAULT_DEBIT_CODE),
                "netAmount": format_amount(txn.amount),
            })
            rows.append({
                **shared,
                "nominalCode": accounts.credit(txn.type, DEFAULT_CREDIT_CODE),
                "netAmount": format_amount(-txn.amount),
            })
        return rows

    def encode(
        self,
        transactions: Iterable[Transaction | Mapping[str, Any]],
        mapping: AccountMapping | Mapping[str, str] | None = None,
    ) -> str:
        return self._csv.encode(SAGE_COLUMNS, self.rows(transactions, mapping))

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
                filename=f"{filename}_sage",
                columns=SAGE_COLUMNS,
                rows=self.rows(transactions, mapping),
                include_timestamp=include_timestamp,
            )
        )
