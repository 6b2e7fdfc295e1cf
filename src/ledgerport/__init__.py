"""
ledgerport – tabular export/import and accounting interchange.

Import path convention::

    from ledgerport.application.export import ColumnDef, ExportRequest, ExportService
    from ledgerport.application.accounting import AccountingExportService, Transaction
    from ledgerport.application.importing import CsvImporter
    from ledgerport.kernel.errors import DomainError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
