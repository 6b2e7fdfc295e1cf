"""Application export – CsvExporter.

Every cell is quoted and embedded double quotes are doubled, so commas and
newlines inside values never move column boundaries.
"""
from __future__ import annotations

import csv
import io
from typing import Any, Iterable, Sequence

from ledgerport.application.export.columns import cell_text
from ledgerport.application.export.filenames import build_filename
from ledgerport.application.export.request import ColumnDef, ExportFile, ExportRequest, Row
from ledgerport.kernel.time import Clock, SystemClock

__all__ = ["CSV_MIME_TYPE", "CsvExporter", "quote_cell", "table_writer", "write_table"]

CSV_MIME_TYPE = "text/csv;charset=utf-8;"


def quote_cell(text: str) -> str:
    """Wrap *text* in quotes, doubling embedded quotes."""
    return '"' + text.replace('"', '""') + '"'


def table_writer(buf: io.StringIO) -> Any:
    return csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")


def write_table(writer: Any, columns: Sequence[ColumnDef], rows: Iterable[Row]) -> None:
    """Header line followed by one line per row, ``len(columns)`` cells each."""
    writer.writerow([col.header for col in columns])
    for row in rows:
        writer.writerow([cell_text(col, row) for col in columns])


class CsvExporter:
    """Encodes rows into fully quoted, comma-separated text."""

    extension = "csv"
    mime_type = CSV_MIME_TYPE

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    def encode(self, columns: Sequence[ColumnDef], rows: Iterable[Row]) -> str:
        """Lines joined by ``\\n``; no trailing terminator."""
        buf = io.StringIO()
        write_table(table_writer(buf), columns, rows)
        return buf.getvalue().removesuffix("\n")

    def export(self, request: ExportRequest) -> ExportFile:
        return ExportFile(
            content=self.encode(request.columns, request.rows),
            filename=build_filename(
                request.filename,
                self.extension,
                self._clock.today(),
                include_timestamp=request.include_timestamp,
            ),
            mime_type=self.mime_type,
        )
