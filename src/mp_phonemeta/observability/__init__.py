"""Observability – structured logging for compile runs."""
