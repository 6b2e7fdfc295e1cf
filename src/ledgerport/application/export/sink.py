"""Application export – FileSink / DocumentPresenter ports and host adapters."""
from __future__ import annotations

import os
import re
import tempfile
import webbrowser
from pathlib import Path
from typing import Protocol, runtime_checkable

from ledgerport.kernel.errors import DeliveryError
from ledgerport.observability.logging import get_logger

__all__ = [
    "BrowserDocumentPresenter",
    "DirectoryFileSink",
    "DocumentPresenter",
    "FileSink",
]

_log = get_logger(__name__)
_UNSAFE = re.compile(r"[^\w.\- ]+")


@runtime_checkable
class FileSink(Protocol):
    """Port: hand finished export content to the user."""

    def deliver(self, content: str | bytes, filename: str, mime_type: str) -> None: ...


@runtime_checkable
class DocumentPresenter(Protocol):
    """Port: show an HTML document in a new top-level window.

    Returns ``False`` when the host refuses to open one.
    """

    def present(self, html: str, title: str) -> bool: ...


def _safe_name(filename: str) -> str:
    name = _UNSAFE.sub("_", Path(filename).name).strip()
    return name or "export"


def _as_bytes(content: str | bytes) -> bytes:
    return content if isinstance(content, bytes) else content.encode("utf-8")


class DirectoryFileSink:
    """Writes each delivered file into *directory*.

    Content goes to a temporary file in the same directory which is renamed
    into place once complete, so readers never observe a partial file.
    """

    def __init__(self, directory: str | Path = ".") -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def deliver(self, content: str | bytes, filename: str, mime_type: str) -> None:
        target = self._directory / _safe_name(filename)
        data = _as_bytes(content)
        tmp_path: Path | None = None
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=self._directory, prefix=".ledgerport-", delete=False
            ) as handle:
                tmp_path = Path(handle.name)
                handle.write(data)
            os.replace(tmp_path, target)
        except OSError as exc:
            raise DeliveryError(filename, cause=exc) from exc
        finally:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
        _log.info(
            "sink.delivered",
            path=str(target),
            mime_type=mime_type,
            size_bytes=len(data),
        )


class BrowserDocumentPresenter:
    """Writes the document to disk and opens it in a new browser window."""

    def __init__(self, directory: str | Path | None = None) -> None:
        self._directory = Path(directory) if directory else Path(tempfile.gettempdir())

    def present(self, html: str, title: str) -> bool:
        path = self._directory / f"{_safe_name(title)}.html"
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            path.write_text(html, encoding="utf-8")
            opened = webbrowser.open_new(path.resolve().as_uri())
        except (OSError, webbrowser.Error) as exc:
            _log.warning("document.present_blocked", path=str(path), error=str(exc))
            return False
        if not opened:
            _log.warning("document.present_blocked", path=str(path))
        return opened
