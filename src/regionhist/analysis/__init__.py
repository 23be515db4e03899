"""Analysis package.

Contains image region histogram utilities.
"""

from .histogram import HistogramRegion

__all__ = [
    "HistogramRegion",
]
