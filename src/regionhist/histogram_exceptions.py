"""Histogram-related exceptions.

This module contains exceptions for binning, region sampling, comparison
and persistence of bin-count vectors.
"""

from .base_exceptions import RegionHistException


class HistogramException(RegionHistException):
    """Base exception for histogram errors."""

    pass


class BinningError(HistogramException):
    """Raised when a sample maps to a bin outside the histogram.

    This is always fatal: a silently dropped or clamped sample would
    corrupt the counts without any trace.
    """

    def __init__(
        self,
        bin_index: int | None,
        value: float,
        value_index: int,
        number_of_values: int,
        range_min: float,
        range_max: float,
        bin_width: float,
        **kwargs,
    ) -> None:
        """Initialize with the full binning context."""
        message = (
            f"Can't write to bin {bin_index}! "
            f"There are {number_of_values} values. "
            f"Range min {range_min:g}, range max {range_max:g}. "
            f"values[{value_index}] = {value:g}, bin width {bin_width:g}"
        )

        super().__init__(
            message,
            error_code="BIN_OUT_OF_RANGE",
            context={
                "bin_index": bin_index,
                "value": value,
                "value_index": value_index,
                "number_of_values": number_of_values,
                "range_min": range_min,
                "range_max": range_max,
                "bin_width": bin_width,
                **kwargs,
            },
        )
        self.bin_index = bin_index
        self.value = value


class HistogramLengthMismatchError(HistogramException):
    """Raised when two histograms being compared differ in length."""

    def __init__(self, length1: int, length2: int, **kwargs) -> None:
        """Initialize with both lengths."""
        super().__init__(
            f"Histograms must be the same size! Got {length1} and {length2}",
            error_code="HISTOGRAM_LENGTH_MISMATCH",
            context={"length1": length1, "length2": length2, **kwargs},
        )


class InvalidRegionError(HistogramException):
    """Raised when a region does not fit inside the sampled image."""

    def __init__(self, region: str, image_width: int, image_height: int, **kwargs) -> None:
        """Initialize with region and image bounds."""
        super().__init__(
            f"Region {region} does not fit inside image of size {image_width}x{image_height}",
            error_code="INVALID_REGION",
            context={
                "region": region,
                "image_width": image_width,
                "image_height": image_height,
                **kwargs,
            },
        )


class HistogramWriteError(HistogramException):
    """Raised when a histogram cannot be written to its destination."""

    def __init__(self, path: str, reason: str, **kwargs) -> None:
        """Initialize with destination details."""
        super().__init__(
            f"Failed to write histogram to '{path}': {reason}",
            error_code="HISTOGRAM_WRITE_FAILED",
            context={"path": path, "reason": reason, **kwargs},
        )


class HistogramReadError(HistogramException):
    """Raised when a histogram dump cannot be read or parsed."""

    def __init__(self, path: str, reason: str, **kwargs) -> None:
        """Initialize with source details."""
        super().__init__(
            f"Failed to read histogram from '{path}': {reason}",
            error_code="HISTOGRAM_READ_FAILED",
            context={"path": path, "reason": reason, **kwargs},
        )


class EmptyHistogramError(HistogramException):
    """Raised when a reference histogram has no mass to normalize by."""

    def __init__(self, length: int, **kwargs) -> None:
        """Initialize with the histogram length."""
        super().__init__(
            f"Reference histogram of length {length} sums to zero",
            error_code="EMPTY_REFERENCE_HISTOGRAM",
            context={"length": length, **kwargs},
        )


class HistogramNotComputedError(HistogramException):
    """Raised when a histogram is used before it has been computed."""

    def __init__(self, name: str, **kwargs) -> None:
        """Initialize with the owner's name."""
        super().__init__(
            f"Histogram for '{name}' has not been computed",
            error_code="HISTOGRAM_NOT_COMPUTED",
            context={"name": name, **kwargs},
        )
