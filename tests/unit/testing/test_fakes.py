"""Unit tests for in-memory test fakes and their fixtures."""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from ledgerport.kernel.time import FrozenClock
from ledgerport.testing.fakes import (
    DeliveredFile,
    FakeClock,
    InMemoryFileSink,
    RecordingDocumentPresenter,
)


# ---------------------------------------------------------------------------
# FakeClock
# ---------------------------------------------------------------------------


class TestFakeClock:
    def test_is_frozen_clock(self) -> None:
        assert isinstance(FakeClock(), FrozenClock)

    def test_pinned_instant(self) -> None:
        clock = FakeClock()
        assert clock.now() == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        assert clock.today() == date(2026, 1, 1)

    def test_instances_are_independent(self) -> None:
        a, b = FakeClock(), FakeClock()
        a.advance(days=1)
        assert b.today() == date(2026, 1, 1)


# ---------------------------------------------------------------------------
# InMemoryFileSink
# ---------------------------------------------------------------------------


class TestInMemoryFileSink:
    def test_records_text_as_utf8_bytes(self) -> None:
        sink = InMemoryFileSink()
        sink.deliver("Zürich", "a.csv", "text/csv")
        assert sink.files == [DeliveredFile("Zürich".encode(), "a.csv", "text/csv")]
        assert sink.last.text == "Zürich"

    def test_records_bytes_verbatim(self) -> None:
        sink = InMemoryFileSink()
        sink.deliver(b"\x00\x01", "a.bin", "application/octet-stream")
        assert sink.last.content == b"\x00\x01"

    def test_last_without_delivery(self) -> None:
        with pytest.raises(AssertionError):
            _ = InMemoryFileSink().last

    def test_clear(self) -> None:
        sink = InMemoryFileSink()
        sink.deliver("x", "a", "text/plain")
        sink.clear()
        assert sink.files == []


# ---------------------------------------------------------------------------
# RecordingDocumentPresenter
# ---------------------------------------------------------------------------


class TestRecordingDocumentPresenter:
    def test_records_documents(self) -> None:
        presenter = RecordingDocumentPresenter()
        assert presenter.present("<p/>", "doc") is True
        assert presenter.documents == [("doc", "<p/>")]

    def test_blocked(self) -> None:
        presenter = RecordingDocumentPresenter(blocked=True)
        assert presenter.present("<p/>", "doc") is False
        assert presenter.documents == []


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


class TestFixtures:
    def test_fake_clock_fixture(self, fake_clock: FrozenClock) -> None:
        assert fake_clock.today() == date(2026, 1, 1)

    def test_memory_sink_fixture_starts_empty(self, memory_sink: InMemoryFileSink) -> None:
        assert memory_sink.files == []

    def test_recording_presenter_fixture(self, recording_presenter: RecordingDocumentPresenter) -> None:
        assert recording_presenter.blocked is False
