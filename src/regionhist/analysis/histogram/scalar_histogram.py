"""Scalar histogram - equal-width binning of scalar samples."""

from collections.abc import Iterable
from typing import Any

import numpy as np

from ...config import get_settings
from ...histogram_exceptions import BinningError
from ...logging import get_logger
from .histogram_result import HistogramType, freeze

logger = get_logger(__name__)


def scalar_histogram(
    values: Iterable[Any] | np.ndarray[Any, Any],
    number_of_bins: int,
    range_min: float,
    range_max: float,
    *,
    tolerance: float | None = None,
) -> HistogramType:
    """Count how many samples fall in each of ``number_of_bins`` equal-width bins.

    The bins cover ``[range_min, range_max]`` inclusive on both ends. A sample
    equal to ``range_max`` goes to the last bin. Counts are stored as floats
    so the histogram can be normalized later without truncation.

    All arithmetic is done in float64, so bounded sample types such as
    ``uint8`` at their maximum value never overflow.

    Args:
        values: Scalar samples, any shape (flattened)
        number_of_bins: Number of bins, at least 1
        range_min: Lower bound of the first bin
        range_max: Upper bound of the last bin
        tolerance: Bin widths smaller than this in magnitude yield an all-zero
            histogram. Defaults to the ``zero_width_tolerance`` setting.

    Returns:
        Read-only float64 array of length ``number_of_bins``

    Raises:
        ValueError: If number_of_bins is less than 1
        BinningError: If any sample lies outside ``[range_min, range_max]``
    """
    if number_of_bins < 1:
        raise ValueError(f"number_of_bins must be at least 1, got {number_of_bins}")

    bins = np.zeros(number_of_bins, dtype=np.float64)

    lower = float(range_min)
    upper = float(range_max)
    bin_width = (upper - lower) / float(number_of_bins)

    if tolerance is None:
        tolerance = get_settings().zero_width_tolerance

    if abs(bin_width) < tolerance:
        logger.debug(
            "histogram_degenerate_range",
            range_min=lower,
            range_max=upper,
            number_of_bins=number_of_bins,
        )
        return freeze(bins)

    if not isinstance(values, np.ndarray):
        values = list(values)
    samples = np.asarray(values).ravel().astype(np.float64)
    if samples.size == 0:
        return freeze(bins)

    # Exact match on the top of the range short-circuits the division
    at_max = samples == upper
    inside = (samples >= lower) & (samples <= upper)
    positions = np.floor((samples - lower) / bin_width)
    # Rounding can push a sample just below range_max onto number_of_bins
    positions = np.where(
        inside & (positions >= number_of_bins), number_of_bins - 1, positions
    )
    in_range = inside & (positions >= 0) & (positions < number_of_bins)

    out_of_range = ~(at_max | in_range)
    if out_of_range.any():
        index = int(np.flatnonzero(out_of_range)[0])
        position = positions[index]
        raise BinningError(
            bin_index=int(position) if np.isfinite(position) else None,
            value=float(samples[index]),
            value_index=index,
            number_of_values=int(samples.size),
            range_min=lower,
            range_max=upper,
            bin_width=bin_width,
        )

    counts = np.bincount(positions[~at_max].astype(np.intp), minlength=number_of_bins)
    bins += counts
    bins[-1] += np.count_nonzero(at_max)

    return freeze(bins)
