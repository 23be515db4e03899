"""Logging module for regionhist."""

from .logger import configure_logging_from_settings, get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "configure_logging_from_settings",
]
