"""Application export – ExportService dispatches to the right exporter and delivers."""
from __future__ import annotations

import dataclasses
import time
from typing import Literal, get_args

from ledgerport.application.export.csv_export import CsvExporter
from ledgerport.application.export.document_export import DocumentExporter
from ledgerport.application.export.excel_export import ExcelExporter
from ledgerport.application.export.json_export import JsonExporter
from ledgerport.application.export.request import ExportFile, ExportRequest
from ledgerport.application.export.sink import (
    BrowserDocumentPresenter,
    DirectoryFileSink,
    DocumentPresenter,
    FileSink,
)
from ledgerport.config.settings import ExportSettings
from ledgerport.kernel.errors import UnsupportedFormatError
from ledgerport.kernel.time import Clock, SystemClock
from ledgerport.observability.logging import get_logger

__all__ = ["ExportFormat", "ExportService"]

ExportFormat = Literal["csv", "excel", "pdf", "json"]

_log = get_logger(__name__)


class ExportService:
    """Encodes an :class:`ExportRequest` and hands the result to the host.

    ``csv``, ``excel`` and ``json`` go to the :class:`FileSink`; ``pdf``
    renders a printable document for the :class:`DocumentPresenter`. A
    blocked presenter is not an error: the returned file carries
    ``delivered=False`` and the caller decides how to surface it.
    """

    def __init__(
        self,
        sink: FileSink,
        presenter: DocumentPresenter | None = None,
        *,
        clock: Clock | None = None,
        escape_html: bool = True,
        brand: str = "",
    ) -> None:
        clock = clock or SystemClock()
        self._sink = sink
        self._presenter = presenter or BrowserDocumentPresenter()
        self._csv = CsvExporter(clock)
        self._excel = ExcelExporter(clock)
        self._json = JsonExporter(clock)
        self._document = DocumentExporter(clock, escape_html=escape_html, brand=brand)

    @classmethod
    def from_settings(cls, settings: ExportSettings, *, clock: Clock | None = None) -> "ExportService":
        return cls(
            DirectoryFileSink(settings.output_dir),
            BrowserDocumentPresenter(settings.print_dir or None),
            clock=clock,
            escape_html=settings.escape_html,
            brand=settings.document_brand,
        )

    def export(self, request: ExportRequest, format: ExportFormat = "csv") -> ExportFile:  # noqa: A002
        start = time.monotonic()

        if format == "csv":
            result = self._csv.export(request)
        elif format == "excel":
            result = self._excel.export(request)
        elif format == "json":
            result = self._json.export(request)
        elif format == "pdf":
            result = self._document.export(request)
        else:
            raise UnsupportedFormatError(format, supported=get_args(ExportFormat))

        if format == "pdf":
            presented = self._presenter.present(result.content, result.filename)
            result = dataclasses.replace(result, delivered=presented)
        else:
            self._sink.deliver(result.content, result.filename, result.mime_type)

        _log.info(
            "export.delivered",
            format=format,
            filename=result.filename,
            record_count=request.record_count,
            delivered=result.delivered,
            duration_ms=round((time.monotonic() - start) * 1000, 3),
        )
        return result

    def export_csv(self, request: ExportRequest) -> ExportFile:
        return self.export(request, "csv")

    def export_excel(self, request: ExportRequest) -> ExportFile:
        return self.export(request, "excel")

    def export_pdf(self, request: ExportRequest) -> ExportFile:
        return self.export(request, "pdf")

    def export_json(self, request: ExportRequest) -> ExportFile:
        return self.export(request, "json")

    def deliver(self, file: ExportFile) -> None:
        """Send an already-encoded file to the sink."""
        self._sink.deliver(file.content, file.filename, file.mime_type)
