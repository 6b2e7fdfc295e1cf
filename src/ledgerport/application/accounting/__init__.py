"""Application accounting – ledger exports for external accounting systems."""
from ledgerport.application.accounting.journal import (
    JOURNAL_COLUMNS,
    JournalEntriesExporter,
    journal_entries_from_transactions,
)
from ledgerport.application.accounting.quickbooks import IIF_MIME_TYPE, QuickBooksExporter
from ledgerport.application.accounting.sage import SAGE_COLUMNS, SageExporter
from ledgerport.application.accounting.service import (
    AccountingExportConfig,
    AccountingExportService,
    AccountingSystem,
)
from ledgerport.application.accounting.transaction import (
    AccountMapping,
    Side,
    Transaction,
    as_transactions,
)
from ledgerport.application.accounting.xero import XERO_COLUMNS, XeroExporter

__all__ = [
    "AccountMapping",
    "AccountingExportConfig",
    "AccountingExportService",
    "AccountingSystem",
    "IIF_MIME_TYPE",
    "JOURNAL_COLUMNS",
    "JournalEntriesExporter",
    "QuickBooksExporter",
    "SAGE_COLUMNS",
    "SageExporter",
    "Side",
    "Transaction",
    "XERO_COLUMNS",
    "XeroExporter",
    "as_transactions",
    "journal_entries_from_transactions",
]
