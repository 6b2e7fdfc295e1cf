"""Application export – JsonExporter."""
from __future__ import annotations

import json
from typing import Iterable, Sequence

from ledgerport.application.export.columns import project_row
from ledgerport.application.export.filenames import build_filename
from ledgerport.application.export.request import ColumnDef, ExportFile, ExportRequest, Row
from ledgerport.kernel.time import Clock, SystemClock, iso_timestamp

__all__ = ["JSON_MIME_TYPE", "JsonExporter"]

JSON_MIME_TYPE = "application/json;charset=utf-8;"


class JsonExporter:
    """Wraps formatted rows in ``{exportDate, recordCount, data}``.

    Objects are keyed by ``ColumnDef.key``, not by header text.
    """

    extension = "json"
    mime_type = JSON_MIME_TYPE

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    def encode(self, columns: Sequence[ColumnDef], rows: Iterable[Row]) -> str:
        data = [project_row(columns, row) for row in rows]
        envelope = {
            "exportDate": iso_timestamp(self._clock.now()),
            "recordCount": len(data),
            "data": data,
        }
        return json.dumps(envelope, indent=2, default=str, ensure_ascii=False, allow_nan=False)

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
