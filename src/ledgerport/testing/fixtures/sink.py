"""Testing fixtures – in-memory sink and presenter."""
from __future__ import annotations

import pytest

from ledgerport.testing.fakes import InMemoryFileSink, RecordingDocumentPresenter


@pytest.fixture
def memory_sink() -> InMemoryFileSink:
    return InMemoryFileSink()


@pytest.fixture
def recording_presenter() -> RecordingDocumentPresenter:
    return RecordingDocumentPresenter()


__all__ = ["memory_sink", "recording_presenter"]
