"""Utility functions."""

from .console import console
from .logging import get_logger, setup_logging, source_logger
from .security import sanitize, sanitize_style, sanitize_url

__all__ = [
    "console",
    "get_logger",
    "setup_logging",
    "source_logger",
    "sanitize",
    "sanitize_style",
    "sanitize_url",
]
