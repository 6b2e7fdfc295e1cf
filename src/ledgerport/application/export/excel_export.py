"""Application export – ExcelExporter (spreadsheet-friendly CSV)."""
from __future__ import annotations

import io
from typing import Iterable, Sequence

from ledgerport.application.export.csv_export import CSV_MIME_TYPE, table_writer, write_table
from ledgerport.application.export.filenames import build_filename
from ledgerport.application.export.request import ColumnDef, ExportFile, ExportRequest, Row
from ledgerport.kernel.time import Clock, SystemClock

__all__ = ["BOM", "ExcelExporter"]

BOM = "\ufeff"


class ExcelExporter:
    """CSV with a UTF-8 byte-order mark and an optional title block.

    The BOM makes spreadsheet applications pick UTF-8 instead of a legacy
    code page. The output is still a ``.csv`` file.
    """

    extension = "csv"
    mime_type = CSV_MIME_TYPE

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    def encode(
        self,
        columns: Sequence[ColumnDef],
        rows: Iterable[Row],
        *,
        title: str | None = None,
        subtitle: str | None = None,
    ) -> str:
        buf = io.StringIO()
        writer = table_writer(buf)
        if title:
            writer.writerow([title])
        if subtitle:
            writer.writerow([subtitle])
        if title or subtitle:
            buf.write("\n")
        write_table(writer, columns, rows)
        return BOM + buf.getvalue()

    def export(self, request: ExportRequest) -> ExportFile:
        return ExportFile(
            content=self.encode(
                request.columns,
                request.rows,
                title=request.title,
                subtitle=request.subtitle,
            ),
            filename=build_filename(
                request.filename,
                self.extension,
                self._clock.today(),
                include_timestamp=request.include_timestamp,
            ),
            mime_type=self.mime_type,
        )
