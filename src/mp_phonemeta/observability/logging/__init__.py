"""Observability – structured logging helpers."""
from mp_phonemeta.observability.logging.factory import JsonLoggerFactory
from mp_phonemeta.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
