"""Histogram analysis package.

Fixed-bin histograms of scalar samples and image regions, histogram
intersection, and text I/O for bin-count vectors.
"""

from .histogram_intersection import (
    compare_histograms,
    histogram_intersection,
    symmetric_histogram_intersection,
)
from .histogram_io import format_histogram, output_histogram, read_histogram, write_histogram
from .histogram_region import HistogramRegion
from .histogram_result import (
    ErrorKind,
    HistogramError,
    HistogramType,
    IntersectionResult,
)
from .multi_channel_histogram import multi_channel_histogram
from .scalar_histogram import scalar_histogram

__all__ = [
    "ErrorKind",
    "HistogramError",
    "HistogramRegion",
    "HistogramType",
    "IntersectionResult",
    "compare_histograms",
    "format_histogram",
    "histogram_intersection",
    "multi_channel_histogram",
    "output_histogram",
    "read_histogram",
    "scalar_histogram",
    "symmetric_histogram_intersection",
    "write_histogram",
]
