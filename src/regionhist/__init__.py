"""regionhist: fixed-bin histograms of image regions and histogram intersection."""

from .analysis.histogram import (
    ErrorKind,
    HistogramError,
    HistogramRegion,
    HistogramType,
    IntersectionResult,
    compare_histograms,
    format_histogram,
    histogram_intersection,
    multi_channel_histogram,
    output_histogram,
    read_histogram,
    scalar_histogram,
    symmetric_histogram_intersection,
    write_histogram,
)
from .base_exceptions import RegionHistException
from .histogram_exceptions import (
    BinningError,
    EmptyHistogramError,
    HistogramException,
    HistogramLengthMismatchError,
    HistogramNotComputedError,
    HistogramReadError,
    HistogramWriteError,
    InvalidRegionError,
)
from .model import ChannelSource, NumpyChannelSource, Region

__version__ = "0.1.0"

__all__ = [
    # Histograms
    "scalar_histogram",
    "multi_channel_histogram",
    "histogram_intersection",
    "symmetric_histogram_intersection",
    "compare_histograms",
    "format_histogram",
    "write_histogram",
    "output_histogram",
    "read_histogram",
    "HistogramRegion",
    "HistogramType",
    # Results
    "ErrorKind",
    "HistogramError",
    "IntersectionResult",
    # Model
    "ChannelSource",
    "NumpyChannelSource",
    "Region",
    # Exceptions
    "RegionHistException",
    "HistogramException",
    "BinningError",
    "EmptyHistogramError",
    "HistogramLengthMismatchError",
    "HistogramNotComputedError",
    "HistogramReadError",
    "HistogramWriteError",
    "InvalidRegionError",
]
