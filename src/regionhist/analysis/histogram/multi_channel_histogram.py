"""Concatenated histogram of a multi-channel image region."""

import numpy as np

from ...logging import get_logger
from ...model import ChannelSource, Region
from .histogram_result import HistogramType, freeze
from .scalar_histogram import scalar_histogram

logger = get_logger(__name__)


def multi_channel_histogram(
    source: ChannelSource,
    region: Region | None,
    number_of_bins_per_channel: int,
    range_min: float,
    range_max: float,
    *,
    tolerance: float | None = None,
) -> HistogramType:
    """Compute one histogram per channel and lay them end to end.

    Every channel is binned with the same bin count and range. The output
    follows the source's component order, so the first
    ``number_of_bins_per_channel`` entries depend only on channel 0.

    Args:
        source: Image to sample
        region: Region to sample, or None for the whole image
        number_of_bins_per_channel: Bins per channel
        range_min: Lower bound shared by all channels
        range_max: Upper bound shared by all channels
        tolerance: Forwarded to scalar_histogram

    Returns:
        Read-only array of length ``components * number_of_bins_per_channel``

    Raises:
        BinningError: If any channel has a sample outside the range. No
            partial result is returned.
        InvalidRegionError: If the region does not fit inside the image
    """
    histograms: list[np.ndarray] = []

    for channel in range(source.number_of_components):
        extracted = source.extract_channel(channel)

        channel_region = region
        if channel_region is None:
            channel_region = Region.full(extracted.shape[1], extracted.shape[0])

        pixel_values = source.pixel_values_in_region(extracted, channel_region)
        histogram = scalar_histogram(
            pixel_values,
            number_of_bins_per_channel,
            range_min,
            range_max,
            tolerance=tolerance,
        )
        logger.debug(
            "channel_histogram_computed",
            channel=channel,
            region=str(channel_region),
            samples=int(pixel_values.size),
        )
        histograms.append(histogram)

    if not histograms:
        return freeze(np.zeros(0, dtype=np.float64))

    return freeze(np.concatenate(histograms))
