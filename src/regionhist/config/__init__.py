"""Configuration package.

Usage:
    from regionhist.config import get_settings

    settings = get_settings()
    if settings.strict_intersection:
        ...
"""

from .settings import HistogramSettings, configure, get_settings, reset_settings

__all__ = [
    "HistogramSettings",
    "configure",
    "get_settings",
    "reset_settings",
]
