"""Application export – tabular data export helpers."""
from ledgerport.application.export.columns import (
    cell_text,
    display_date,
    fixed2,
    optional_date,
    positive_fixed2,
    project_row,
    resolve_value,
    to_text,
)
from ledgerport.application.export.csv_export import CSV_MIME_TYPE, CsvExporter, quote_cell
from ledgerport.application.export.document_export import HTML_MIME_TYPE, DocumentExporter
from ledgerport.application.export.excel_export import BOM, ExcelExporter
from ledgerport.application.export.export_service import ExportFormat, ExportService
from ledgerport.application.export.filenames import build_filename
from ledgerport.application.export.json_export import JSON_MIME_TYPE, JsonExporter
from ledgerport.application.export.request import (
    ColumnDef,
    ExportFile,
    ExportRequest,
    Formatter,
    Row,
)
from ledgerport.application.export.sink import (
    BrowserDocumentPresenter,
    DirectoryFileSink,
    DocumentPresenter,
    FileSink,
)

__all__ = [
    "BOM",
    "BrowserDocumentPresenter",
    "CSV_MIME_TYPE",
    "ColumnDef",
    "CsvExporter",
    "DirectoryFileSink",
    "DocumentExporter",
    "DocumentPresenter",
    "ExcelExporter",
    "ExportFile",
    "ExportFormat",
    "ExportRequest",
    "ExportService",
    "FileSink",
    "Formatter",
    "HTML_MIME_TYPE",
    "JSON_MIME_TYPE",
    "JsonExporter",
    "Row",
    "build_filename",
    "cell_text",
    "display_date",
    "fixed2",
    "optional_date",
    "positive_fixed2",
    "project_row",
    "quote_cell",
    "resolve_value",
    "to_text",
]
