"""Testing fakes – in-memory FileSink and DocumentPresenter."""
from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DeliveredFile", "InMemoryFileSink", "RecordingDocumentPresenter"]


@dataclass(frozen=True)
class DeliveredFile:
    content: bytes
    filename: str
    mime_type: str

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")


class InMemoryFileSink:
    """Fake FileSink that records every delivery."""

    def __init__(self) -> None:
        self.files: list[DeliveredFile] = []

    def deliver(self, content: str | bytes, filename: str, mime_type: str) -> None:
        data = content if isinstance(content, bytes) else content.encode("utf-8")
        self.files.append(DeliveredFile(data, filename, mime_type))

    @property
    def last(self) -> DeliveredFile:
        if not self.files:
            raise AssertionError("No file has been delivered")
        return self.files[-1]

    def clear(self) -> None:
        self.files.clear()


class RecordingDocumentPresenter:
    """Fake DocumentPresenter; ``blocked=True`` simulates a refused popup."""

    def __init__(self, *, blocked: bool = False) -> None:
        self.blocked = blocked
        self.documents: list[tuple[str, str]] = []

    def present(self, html: str, title: str) -> bool:
        if self.blocked:
            return False
        self.documents.append((title, html))
        return True
