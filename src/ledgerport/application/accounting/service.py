"""Application accounting – AccountingExportService."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Literal, Mapping, get_args

from ledgerport.application.accounting.journal import (
    JournalEntriesExporter,
    journal_entries_from_transactions,
)
from ledgerport.application.accounting.quickbooks import QuickBooksExporter
from ledgerport.application.accounting.sage import SageExporter
from ledgerport.application.accounting.transaction import AccountMapping, Transaction
from ledgerport.application.accounting.xero import XeroExporter
from ledgerport.application.export.request import ExportFile
from ledgerport.application.export.sink import DirectoryFileSink, FileSink
from ledgerport.config.settings import ExportSettings
from ledgerport.kernel.errors import UnsupportedFormatError
from ledgerport.kernel.time import Clock, SystemClock
from ledgerport.observability.logging import get_logger

__all__ = ["AccountingExportConfig", "AccountingExportService", "AccountingSystem"]

AccountingSystem = Literal["quickbooks", "sage", "xero", "generic"]

_log = get_logger(__name__)


@dataclass(frozen=True)
class AccountingExportConfig:
    """Target system plus the account mapping to post with."""

    system: AccountingSystem
    account_mappings: Mapping[str, str] = field(default_factory=dict)


class AccountingExportService:
    """Turns transactions into a target ledger dialect and delivers the file."""

    def __init__(self, sink: FileSink, *, clock: Clock | None = None) -> None:
        clock = clock or SystemClock()
        self._sink = sink
        self._quickbooks = QuickBooksExporter(clock)
        self._sage = SageExporter(clock)
        self._xero = XeroExporter(clock)
        self._journal = JournalEntriesExporter(clock)

    @classmethod
    def from_settings(
        cls, settings: ExportSettings, *, clock: Clock | None = None
    ) -> "AccountingExportService":
        return cls(DirectoryFileSink(settings.output_dir), clock=clock)

    def build(
        self,
        system: AccountingSystem,
        transactions: Iterable[Transaction | Mapping[str, Any]],
        filename: str,
        mapping: AccountMapping | Mapping[str, str] | None = None,
        *,
        include_timestamp: bool = True,
    ) -> ExportFile:
        """Encode without delivering."""
        if system == "quickbooks":
            return self._quickbooks.export(
                transactions, filename, mapping, include_timestamp=include_timestamp
            )
        if system == "sage":
            return self._sage.export(transactions, filename, mapping, include_timestamp=include_timestamp)
        if system == "xero":
            return self._xero.export(transactions, filename, mapping, include_timestamp=include_timestamp)
        if system == "generic":
            entries = journal_entries_from_transactions(transactions, mapping)
            return self._journal.export(entries, filename, include_timestamp=include_timestamp)
        raise UnsupportedFormatError(system, supported=get_args(AccountingSystem))

    def export(
        self,
        system: AccountingSystem,
        transactions: Iterable[Transaction | Mapping[str, Any]],
        filename: str,
        mapping: AccountMapping | Mapping[str, str] | None = None,
        *,
        include_timestamp: bool = True,
    ) -> ExportFile:
        transactions = list(transactions)
        result = self.build(system, transactions, filename, mapping, include_timestamp=include_timestamp)
        self._sink.deliver(result.content, result.filename, result.mime_type)
        _log.info(
            "accounting.exported",
            system=system,
            filename=result.filename,
            transaction_count=len(transactions),
        )
        return result

    def export_with_config(
        self,
        config: AccountingExportConfig,
        transactions: Iterable[Transaction | Mapping[str, Any]],
        filename: str,
    ) -> ExportFile:
        return self.export(config.system, transactions, filename, config.account_mappings)

    def export_journal_entries(
        self, entries: Iterable[Mapping[str, Any]], filename: str, *, include_timestamp: bool = True
    ) -> ExportFile:
        """Deliver pre-built journal lines (see ``JOURNAL_COLUMNS``)."""
        result = self._journal.export(entries, filename, include_timestamp=include_timestamp)
        self._sink.deliver(result.content, result.filename, result.mime_type)
        return result
