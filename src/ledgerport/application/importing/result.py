"""Application importing – ImportResult."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["ImportResult"]


@dataclass(frozen=True)
class ImportResult:
    """Outcome of one decode call.

    ``success=False`` never carries ``data``. ``errors`` is ``None`` when
    there is nothing to report.
    """

    success: bool
    data: list[dict[str, str]] | None = None
    errors: list[str] | None = None
    row_count: int | None = None

    @classmethod
    def ok(cls, data: list[dict[str, str]], errors: list[str] | None = None) -> "ImportResult":
        return cls(success=True, data=data, errors=errors or None, row_count=len(data))

    @classmethod
    def fail(cls, *errors: str) -> "ImportResult":
        return cls(success=False, errors=list(errors))

    def to_dict(self) -> dict[str, Any]:
        """camelCase payload, omitting absent fields."""
        payload: dict[str, Any] = {"success": self.success}
        if self.data is not None:
            payload["data"] = self.data
        if self.errors is not None:
            payload["errors"] = self.errors
        if self.row_count is not None:
            payload["rowCount"] = self.row_count
        return payload
