"""Histogram region - a region of interest bound to its histogram.

Used to compare one reference region against many candidate regions.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from ...histogram_exceptions import HistogramNotComputedError
from ...logging import get_logger
from ...model import ChannelSource, Region
from .histogram_intersection import histogram_intersection
from .multi_channel_histogram import multi_channel_histogram

logger = get_logger(__name__)


@dataclass
class HistogramRegion:
    """Represents a region of an image and its concatenated channel histogram.

    The histogram is computed with a fixed number of bins per channel over a
    value range shared by all channels. Two HistogramRegions built with the
    same settings produce histograms of the same length and channel layout,
    which is what makes them comparable.

    Example:
        reference = HistogramRegion(Region(0, 0, 32, 32), 16, 0, 255)
        reference.compute(source)
        scores = reference.compare_all(candidates, source=source)
    """

    region: Region | None
    """Region to sample; None samples the whole image."""

    number_of_bins_per_channel: int
    """Bins in each channel's histogram."""

    range_min: float
    """Lower bound of the value range, shared by all channels."""

    range_max: float
    """Upper bound of the value range, shared by all channels."""

    name: str | None = None
    """Optional name used in log and error messages."""

    histogram: np.ndarray | None = field(default=None, repr=False)
    """Concatenated histogram, set by compute()."""

    @property
    def label(self) -> str:
        if self.name:
            return self.name
        return str(self.region) if self.region is not None else "full image"

    def is_computed(self) -> bool:
        return self.histogram is not None

    def compute(self, source: ChannelSource) -> np.ndarray:
        """Compute and store the histogram of this region in ``source``.

        Raises:
            BinningError: If a sample falls outside the value range
            InvalidRegionError: If the region does not fit inside the image
        """
        self.histogram = multi_channel_histogram(
            source,
            self.region,
            self.number_of_bins_per_channel,
            self.range_min,
            self.range_max,
        )
        return self.histogram

    def get_histogram(self) -> np.ndarray:
        """Get the computed histogram.

        Raises:
            HistogramNotComputedError: If compute() has not been called
        """
        if self.histogram is None:
            raise HistogramNotComputedError(self.label)
        return self.histogram

    def compare_to(self, other: "HistogramRegion") -> float:
        """Intersection of ``other`` against this region as the reference."""
        return histogram_intersection(self.get_histogram(), other.get_histogram())

    def compare_all(
        self, others: Iterable["HistogramRegion"], source: ChannelSource | None = None
    ) -> list[float]:
        """Score every candidate region against this one.

        Candidates that have no histogram yet are computed from ``source``
        first. A binning failure aborts the whole batch, while a candidate
        whose histogram length differs is reported and scored 0.0.

        Args:
            others: Candidate regions
            source: Image used to compute missing histograms

        Returns:
            Scores in candidate order
        """
        reference = self.get_histogram()
        scores: list[float] = []
        for other in others:
            if not other.is_computed() and source is not None:
                other.compute(source)
            scores.append(histogram_intersection(reference, other.get_histogram()))

        logger.debug("histogram_batch_compared", reference=self.label, count=len(scores))
        return scores
