"""Testing fakes – in-memory doubles for kernel and export ports."""
from ledgerport.kernel.time import FrozenClock
from ledgerport.testing.fakes.clock import FakeClock
from ledgerport.testing.fakes.sink import DeliveredFile, InMemoryFileSink, RecordingDocumentPresenter

__all__ = [
    "DeliveredFile",
    "FakeClock",
    "FrozenClock",
    "InMemoryFileSink",
    "RecordingDocumentPresenter",
]
