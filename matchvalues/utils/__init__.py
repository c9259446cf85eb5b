"""Utility helpers."""

from matchvalues.utils.logging_utils import configure_logging, get_log_format

__all__ = ["configure_logging", "get_log_format"]
