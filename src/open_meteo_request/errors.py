"""Error types."""

from __future__ import annotations


class OpenMeteoRequestError(Exception):
    """Base exception for this package."""


class MissingCoordinatesError(OpenMeteoRequestError):
    """Raised when a URL is requested before coordinates were set."""

    def __init__(self, message: str = "latitude and longitude are required") -> None:
        super().__init__(message)


class OpenMeteoConfigError(OpenMeteoRequestError):
    """Invalid runtime configuration."""


__all__ = [
    "OpenMeteoRequestError",
    "MissingCoordinatesError",
    "OpenMeteoConfigError",
]
