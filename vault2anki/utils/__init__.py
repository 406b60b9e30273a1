"""Utility functions."""

from vault2anki.utils.logging import get_logger, log_exceptions

__all__ = [
    "get_logger",
    "log_exceptions",
]
