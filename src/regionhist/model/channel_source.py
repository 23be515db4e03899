"""Channel source - the image surface consumed by histogram computation.

Histogram code never touches a concrete image type. It only needs the
number of components per pixel, single-channel extraction, and the pixel
values of a single-channel image inside a region.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np
from PIL import Image as PILImage

from ..histogram_exceptions import InvalidRegionError
from .region import Region


@runtime_checkable
class ChannelSource(Protocol):
    """Minimal image interface for multi-channel histograms."""

    @property
    def number_of_components(self) -> int:
        """Number of components (channels) per pixel."""
        ...

    def extract_channel(self, channel: int) -> np.ndarray[Any, Any]:
        """Extract one channel as a 2-D array."""
        ...

    def pixel_values_in_region(
        self, channel_image: np.ndarray[Any, Any], region: Region
    ) -> np.ndarray[Any, Any]:
        """Enumerate the values of a single-channel image inside a region."""
        ...


class NumpyChannelSource:
    """ChannelSource adapter over an ``H x W`` or ``H x W x C`` numpy array.

    Channel order is the order of the last axis, so an OpenCV BGR array
    yields B, G, R and a PIL-derived array yields R, G, B.
    """

    def __init__(self, image: np.ndarray[Any, Any], name: str | None = None) -> None:
        """Initialize with image data.

        Args:
            image: 2-D (single channel) or 3-D (channel-last) array
            name: Optional name used in log and error messages
        """
        array = np.asarray(image)
        if array.ndim not in (2, 3):
            raise ValueError(f"Expected a 2-D or 3-D image array, got shape {array.shape}")
        self._image = array
        self.name = name

    @classmethod
    def from_pil(cls, pil_image: PILImage.Image, name: str | None = None) -> NumpyChannelSource:
        """Create a source from a PIL Image.

        Args:
            pil_image: PIL Image object
            name: Optional name

        Returns:
            NumpyChannelSource with the image's bands as channels
        """
        return cls(np.asarray(pil_image), name=name)

    @property
    def width(self) -> int:
        return int(self._image.shape[1])

    @property
    def height(self) -> int:
        return int(self._image.shape[0])

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._image.dtype

    @property
    def number_of_components(self) -> int:
        if self._image.ndim == 2:
            return 1
        return int(self._image.shape[2])

    def extract_channel(self, channel: int) -> np.ndarray[Any, Any]:
        """Extract one channel as a 2-D array.

        Args:
            channel: Channel index

        Returns:
            ``H x W`` view of the channel

        Raises:
            IndexError: If channel is not a valid component index
        """
        if not 0 <= channel < self.number_of_components:
            raise IndexError(
                f"Channel {channel} out of range for image with "
                f"{self.number_of_components} components"
            )
        if self._image.ndim == 2:
            return self._image
        return self._image[:, :, channel]

    def pixel_values_in_region(
        self, channel_image: np.ndarray[Any, Any], region: Region
    ) -> np.ndarray[Any, Any]:
        """Enumerate pixel values inside a region, row by row.

        Args:
            channel_image: 2-D array returned by extract_channel
            region: Region to sample

        Returns:
            1-D array of the region's values, x varying fastest

        Raises:
            InvalidRegionError: If the region does not fit inside the image
        """
        height, width = channel_image.shape[:2]
        if not region.fits_within(width, height):
            raise InvalidRegionError(str(region), width, height, source=self.name)
        rows, cols = region.to_slices()
        return channel_image[rows, cols].ravel()

    def full_region(self) -> Region:
        """Region covering the whole image."""
        return Region.full(self.width, self.height)
