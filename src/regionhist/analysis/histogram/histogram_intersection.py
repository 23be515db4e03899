"""Histogram intersection similarity.

The score is the sum of per-bin minima divided by the total mass of the
first histogram. Normalizing by the first argument only makes the measure
asymmetric: pass the reference histogram first, or use
symmetric_histogram_intersection.
"""

from typing import Any

import numpy as np

from ...config import get_settings
from ...histogram_exceptions import EmptyHistogramError, HistogramLengthMismatchError
from ...logging import get_logger
from .histogram_result import HistogramError, IntersectionResult

logger = get_logger(__name__)


def compare_histograms(
    histogram1: np.ndarray[Any, Any] | list[float],
    histogram2: np.ndarray[Any, Any] | list[float],
) -> IntersectionResult:
    """Compute the normalized intersection without logging or raising.

    Args:
        histogram1: Reference histogram
        histogram2: Histogram compared against the reference

    Returns:
        IntersectionResult with the score, or a REPORTED error and a score of
        0.0 when the lengths differ or the reference has no mass
    """
    h1 = np.asarray(histogram1, dtype=np.float64).ravel()
    h2 = np.asarray(histogram2, dtype=np.float64).ravel()

    if h1.size != h2.size:
        error = HistogramLengthMismatchError(int(h1.size), int(h2.size))
        return IntersectionResult(0.0, HistogramError.classify(error))

    total_frequency = float(h1.sum())
    if total_frequency == 0.0:
        error = EmptyHistogramError(int(h1.size))
        return IntersectionResult(0.0, HistogramError.classify(error))

    total_intersection = float(np.minimum(h1, h2).sum())
    return IntersectionResult(total_intersection / total_frequency)


def histogram_intersection(
    histogram1: np.ndarray[Any, Any] | list[float],
    histogram2: np.ndarray[Any, Any] | list[float],
    *,
    strict: bool | None = None,
) -> float:
    """Normalized histogram intersection, in [0, 1] for non-negative input.

    Mismatched lengths and an empty reference histogram are reported through
    the log and scored 0.0 so one malformed histogram does not abort a batch
    of comparisons.

    Args:
        histogram1: Reference histogram (its total mass is the denominator)
        histogram2: Histogram compared against the reference
        strict: Raise reported errors instead of returning 0.0. Defaults to
            the ``strict_intersection`` setting.

    Returns:
        Similarity score

    Raises:
        HistogramLengthMismatchError: In strict mode, if lengths differ
        EmptyHistogramError: In strict mode, if histogram1 sums to zero
    """
    result = compare_histograms(histogram1, histogram2)
    error = result.error
    if error is None:
        return result.score

    if strict is None:
        strict = get_settings().strict_intersection
    if strict:
        raise error.exception

    if isinstance(error.exception, HistogramLengthMismatchError):
        logger.error("histogram_length_mismatch", **error.context)
    else:
        logger.warning("histogram_empty_reference", **error.context)
    return result.score


def symmetric_histogram_intersection(
    histogram1: np.ndarray[Any, Any] | list[float],
    histogram2: np.ndarray[Any, Any] | list[float],
    *,
    strict: bool | None = None,
) -> float:
    """Mean of the intersection taken in both argument orders."""
    forward = histogram_intersection(histogram1, histogram2, strict=strict)
    backward = histogram_intersection(histogram2, histogram1, strict=strict)
    return (forward + backward) / 2.0
