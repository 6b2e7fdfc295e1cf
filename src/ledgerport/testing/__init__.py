"""Testing support – fakes, fixtures and generators.

Import in your ``conftest.py``::

    pytest_plugins = ["ledgerport.testing.fixtures"]
"""

from ledgerport.testing.fakes import (
    DeliveredFile,
    FakeClock,
    InMemoryFileSink,
    RecordingDocumentPresenter,
)

__all__ = [
    "DeliveredFile",
    "FakeClock",
    "InMemoryFileSink",
    "RecordingDocumentPresenter",
]
