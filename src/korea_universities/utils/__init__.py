"""Utility helpers shared across the build and the query catalog."""

from .helpers import ensure_directory, serialize_json, strip_whitespace
from .logging import configure_logging, get_logger, log_timing, logging_context

__all__ = [
    "configure_logging",
    "ensure_directory",
    "get_logger",
    "log_timing",
    "logging_context",
    "serialize_json",
    "strip_whitespace",
]
