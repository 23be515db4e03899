"""Model package - regions and image sources."""

from .channel_source import ChannelSource, NumpyChannelSource
from .region import Region

__all__ = [
    "ChannelSource",
    "NumpyChannelSource",
    "Region",
]
