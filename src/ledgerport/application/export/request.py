"""Application export – ColumnDef, ExportRequest and ExportFile."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

__all__ = ["ColumnDef", "ExportFile", "ExportRequest", "Formatter", "Row"]

Row = Mapping[str, Any]
Formatter = Callable[[Any, Row], Any]


@dataclass(frozen=True)
class ColumnDef:
    """Defines a single column in an export."""

    key: str                           # mapping key read from each row
    header: str                        # column header text, used verbatim
    formatter: Formatter | None = None  # (value, row) -> display value


@dataclass
class ExportRequest:
    """Describes a data export to be performed.

    ``rows`` may be any iterable; it is materialised once on construction so
    an exporter can walk it more than once (e.g. to count records).
    """

    filename: str
    columns: list[ColumnDef]
    rows: Iterable[Row] = field(default_factory=list)
    title: str | None = None
    subtitle: str | None = None
    include_timestamp: bool = True

    def __post_init__(self) -> None:
        self.rows = list(self.rows)

    @property
    def record_count(self) -> int:
        return len(self.rows)  # type: ignore[arg-type]


@dataclass(frozen=True)
class ExportFile:
    """Final encoded output, ready for a sink.

    ``delivered`` is ``False`` only when the host refused to show a document.
    """

    content: str
    filename: str
    mime_type: str
    delivered: bool = True
