"""Region - rectangular area of an image.

Represents the pixels sampled for a histogram.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Region:
    """Represents a rectangular area of an image.

    A Region is defined by the x,y coordinates of its top-left corner and its
    width,height dimensions. Pixel (x, y) belongs to the region when
    ``x <= px < right`` and ``y <= py < bottom``.
    """

    x: int = 0
    """X coordinate of top-left corner."""

    y: int = 0
    """Y coordinate of top-left corner."""

    width: int = 0
    """Width of the region."""

    height: int = 0
    """Height of the region."""

    name: str | None = None
    """Optional name for this region."""

    @property
    def right(self) -> int:
        """X coordinate one past the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Y coordinate one past the bottom edge."""
        return self.y + self.height

    @property
    def area(self) -> int:
        """Get area of the region.

        Returns:
            Area in pixels
        """
        return self.width * self.height

    def is_empty(self) -> bool:
        """Check whether the region covers no pixels."""
        return self.width <= 0 or self.height <= 0

    def fits_within(self, width: int, height: int) -> bool:
        """Check if this region lies inside an image of the given size.

        Args:
            width: Image width
            height: Image height

        Returns:
            True if every pixel of the region is inside the image
        """
        if self.width < 0 or self.height < 0:
            return False
        return self.x >= 0 and self.y >= 0 and self.right <= width and self.bottom <= height

    def to_slices(self) -> tuple[slice, slice]:
        """Get (row, column) slices for indexing a numpy image.

        Returns:
            Tuple of slices selecting this region from an ``H x W`` array
        """
        return slice(self.y, self.bottom), slice(self.x, self.right)

    @classmethod
    def from_bounds(cls, x1: int, y1: int, x2: int, y2: int) -> Region:
        """Create Region from bounding coordinates.

        Args:
            x1: Left x coordinate
            y1: Top y coordinate
            x2: Right x coordinate (exclusive)
            y2: Bottom y coordinate (exclusive)

        Returns:
            New Region instance
        """
        return cls(x=min(x1, x2), y=min(y1, y2), width=abs(x2 - x1), height=abs(y2 - y1))

    @classmethod
    def full(cls, width: int, height: int) -> Region:
        """Create a Region covering a whole image."""
        return cls(x=0, y=0, width=width, height=height)

    def __str__(self) -> str:
        """String representation."""
        label = f"{self.name}:" if self.name else ""
        return f"Region({label}{self.x},{self.y} {self.width}x{self.height})"
