"""Shared pytest configuration."""

pytest_plugins = ["ledgerport.testing.fixtures"]
