"""Root error class for the ledgerport error hierarchy.

Every failure the package raises on purpose (bad input, unknown export
format, unreadable import file, undeliverable output, bad ``LEDGERPORT_*``
setting) derives from :class:`BaseError`, so callers can catch one type and
still branch on ``code``.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context; must be JSON-serialisable because ``str()``
            renders the whole error as one JSON line.
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """``{code, message, detail[, cause]}``; ``cause`` is the ``repr`` of the original."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Key/value pairs to splat into a structlog event."""
        fields: dict[str, Any] = {"error_code": self.code, "error": self.message}
        if self.detail:
            fields["error_detail"] = self.detail
        return fields


__all__ = ["BaseError"]
