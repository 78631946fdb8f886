"""Exceptions raised by artifind."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from artifind.location import Location


class ArtifindError(Exception):
    """Base class for all artifind errors."""


class InvalidLocationError(ArtifindError, ValueError):
    """A location descriptor could not be parsed."""


class ClassLoadError(ArtifindError, ImportError):
    """A class reference could not be resolved."""


class ScanError(ArtifindError):
    """Scanning a location for resources failed.

    The backend exception is available as ``__cause__``.
    """

    def __init__(self, location: Location) -> None:
        self.location = location
        super().__init__(f"Unable to scan for resources in location: {location}")
