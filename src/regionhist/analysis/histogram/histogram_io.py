"""Histogram text I/O.

A histogram is dumped as its bin values, each followed by a single space,
with no header and no trailing newline. Values are written in the shortest
positional form that reads back to the same float64, so integral counts
print without a decimal point and are never rounded.
"""

import sys
from pathlib import Path
from typing import Any, TextIO

import numpy as np

from ...histogram_exceptions import HistogramReadError, HistogramWriteError
from ...logging import get_logger
from .histogram_result import HistogramType, freeze

logger = get_logger(__name__)


def format_histogram(histogram: np.ndarray[Any, Any] | list[float]) -> str:
    """Render a histogram as space-separated values.

    Example:
        >>> format_histogram([3, 0, 7, 2])
        '3 0 7 2 '
    """
    values = np.asarray(histogram, dtype=np.float64).ravel()
    return "".join(f"{np.format_float_positional(value, trim='-')} " for value in values)


def write_histogram(histogram: np.ndarray[Any, Any] | list[float], filename: str | Path) -> None:
    """Write a histogram to a file, replacing its contents.

    Args:
        histogram: Bin counts to write
        filename: Destination path

    Raises:
        HistogramWriteError: If the destination cannot be opened or written
    """
    path = Path(filename)
    text = format_histogram(histogram)
    try:
        with open(path, "w", encoding="ascii") as fout:
            fout.write(text)
    except OSError as e:
        error = HistogramWriteError(str(path), str(e))
        logger.error("histogram_write_failed", **error.to_dict())
        raise error from e


def output_histogram(
    histogram: np.ndarray[Any, Any] | list[float], stream: TextIO | None = None
) -> None:
    """Print a histogram to standard output (or another text stream)."""
    if stream is None:
        stream = sys.stdout
    stream.write(format_histogram(histogram))


def read_histogram(filename: str | Path) -> HistogramType:
    """Read a histogram written by write_histogram.

    Any whitespace separates values.

    Args:
        filename: Source path

    Returns:
        Read-only float64 array of bin counts

    Raises:
        HistogramReadError: If the file cannot be read or holds a non-numeric token
    """
    path = Path(filename)
    try:
        text = path.read_text(encoding="ascii")
    except (OSError, UnicodeDecodeError) as e:
        raise HistogramReadError(str(path), str(e)) from e

    tokens = text.split()
    try:
        values = [float(token) for token in tokens]
    except ValueError as e:
        raise HistogramReadError(str(path), str(e)) from e

    return freeze(np.array(values, dtype=np.float64))
