"""Root of the regionhist exception hierarchy.

Every error raised by histogram computation, comparison or I/O derives from
RegionHistException and carries a stable error code plus a flat context
dictionary that can be passed straight to a structured log call.
"""

from typing import Any


class RegionHistException(Exception):
    """Base exception for all regionhist errors.

    Attributes:
        message: Human-readable error message
        error_code: Stable upper-case code, e.g. ``BIN_OUT_OF_RANGE``
        context: Flat mapping of the values that caused the error. Binning
            errors use ``bin_index``, ``value``, ``value_index``,
            ``number_of_values``, ``range_min``, ``range_max`` and
            ``bin_width``; comparison errors use ``length``/``length1``/
            ``length2``; I/O errors use ``path`` and ``reason``.
    """

    def __init__(
        self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Flatten code, message and context into log-friendly fields."""
        return {"error_code": self.error_code, "error_message": self.message, **self.context}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message
