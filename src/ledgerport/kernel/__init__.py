"""Kernel – errors, time and value helpers shared by every layer."""
