"""Observability – structured logging helpers."""
from ledgerport.observability.logging.factory import JsonLoggerFactory
from ledgerport.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
