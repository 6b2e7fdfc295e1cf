"""Application export – DocumentExporter (printable HTML table).

The document is shown in a new browser window where the user prints it or
saves it as PDF; it is not downloaded.
"""
from __future__ import annotations

from typing import Iterable, Sequence

import jinja2

from ledgerport.application.export.columns import cell_text
from ledgerport.application.export.request import ColumnDef, ExportFile, ExportRequest, Row
from ledgerport.kernel.time import Clock, SystemClock, format_display_date

__all__ = ["DocumentExporter", "HTML_MIME_TYPE"]

HTML_MIME_TYPE = "text/html;charset=utf-8;"
_TEMPLATE = "printable_document.html.j2"


class DocumentExporter:
    """Renders rows into a self-contained HTML document with a print button.

    Cell values are HTML-escaped unless ``escape_html=False``, which keeps
    the legacy behaviour of interpolating raw markup.
    """

    mime_type = HTML_MIME_TYPE

    def __init__(
        self,
        clock: Clock | None = None,
        *,
        escape_html: bool = True,
        brand: str = "",
    ) -> None:
        self._clock = clock or SystemClock()
        self._brand = brand
        self._env = jinja2.Environment(
            loader=jinja2.PackageLoader("ledgerport.application.export", "templates"),
            autoescape=escape_html,
        )

    def encode(
        self,
        columns: Sequence[ColumnDef],
        rows: Iterable[Row],
        *,
        title: str | None = None,
        subtitle: str | None = None,
        filename: str = "",
        include_timestamp: bool = True,
    ) -> str:
        body = [[cell_text(col, row) for col in columns] for row in rows]
        generated = format_display_date(self._clock.now()) if include_timestamp else ""
        return self._env.get_template(_TEMPLATE).render(
            title=title,
            subtitle=subtitle,
            heading=title or filename,
            generated=generated,
            record_count=len(body),
            headers=[col.header for col in columns],
            body=body,
            brand=self._brand,
        )

    def export(self, request: ExportRequest) -> ExportFile:
        return ExportFile(
            content=self.encode(
                request.columns,
                request.rows,
                title=request.title,
                subtitle=request.subtitle,
                filename=request.filename,
                include_timestamp=request.include_timestamp,
            ),
            filename=request.filename,
            mime_type=self.mime_type,
        )
