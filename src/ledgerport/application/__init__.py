"""Application – export, accounting and import use cases."""
