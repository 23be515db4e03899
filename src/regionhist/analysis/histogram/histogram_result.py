"""Histogram result types.

Bin-count vectors are returned as read-only float64 arrays. Comparison
results carry an optional error tagged with how the caller is expected to
treat it.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

import numpy as np

from ...histogram_exceptions import BinningError, HistogramException, InvalidRegionError

HistogramType = np.ndarray
"""One-dimensional float64 array of bin counts, lowest bin first."""


def freeze(bins: np.ndarray[Any, Any]) -> np.ndarray[Any, Any]:
    """Mark a freshly computed bin array read-only and return it."""
    bins.flags.writeable = False
    return bins


class ErrorKind(Enum):
    """How an error should be propagated."""

    FATAL = auto()  # Abort the computation or batch
    REPORTED = auto()  # Log it and continue with a sentinel value


@dataclass(frozen=True)
class HistogramError:
    """An error paired with its propagation kind."""

    kind: ErrorKind
    exception: HistogramException

    @classmethod
    def classify(cls, exception: HistogramException) -> "HistogramError":
        """Wrap an exception with the kind its type calls for.

        Binning and region errors mean the counts cannot be trusted, so they
        are FATAL. Everything else is REPORTED.
        """
        if isinstance(exception, (BinningError, InvalidRegionError)):
            return cls(ErrorKind.FATAL, exception)
        return cls(ErrorKind.REPORTED, exception)

    @property
    def code(self) -> str | None:
        return self.exception.error_code

    @property
    def message(self) -> str:
        return self.exception.message

    @property
    def context(self) -> dict[str, Any]:
        return self.exception.context

    def is_fatal(self) -> bool:
        return self.kind is ErrorKind.FATAL


@dataclass(frozen=True)
class IntersectionResult:
    """Result of comparing two histograms.

    ``score`` is the normalized intersection, or 0.0 when ``error`` is set.
    """

    score: float
    error: HistogramError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """Return the score, raising the stored exception if there is one."""
        if self.error is not None:
            raise self.error.exception
        return self.score
