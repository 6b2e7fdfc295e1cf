"""Testing fixtures – pytest fixtures for fake doubles.

Enable them from a ``conftest.py``::

    pytest_plugins = ["ledgerport.testing.fixtures"]
"""
from ledgerport.testing.fixtures.clock import fake_clock
from ledgerport.testing.fixtures.sink import memory_sink, recording_presenter

__all__ = ["fake_clock", "memory_sink", "recording_presenter"]
