"""
Collaborator interfaces.

The engine never talks to image models, text models or device sensors
directly. Anything that does implements one of these protocols and raises a
``ProviderFailure`` subclass when it cannot deliver:

- ``ImageProvider``     prompt -> image bytes
- ``DetailProvider``    descriptor (+ context) -> FlowerDetails
- ``LocationProvider``  -> LocationSnapshot or None
- ``WeatherProvider``   (lat, lon) -> WeatherSnapshot or None

See ``datasources/weather.py`` for a concrete weather provider.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from flower_discovery.schemas import FlowerDetails, LocationSnapshot, WeatherSnapshot
    from flower_discovery.selector import FlowerContext


class ImageProvider(Protocol):
    def generate(self, prompt: str) -> bytes:
        """Render ``prompt`` to image bytes (InvalidKey / NetworkFailure / NoResult)."""
        ...


class DetailProvider(Protocol):
    def generate(self, descriptor: str, context: FlowerContext | None = None) -> FlowerDetails:
        """Write meaning, properties, origins and description for a flower."""
        ...


class LocationProvider(Protocol):
    def current(self) -> LocationSnapshot | None:
        """Most recent known position, or None if unavailable."""
        ...


class WeatherProvider(Protocol):
    def current(self, latitude: float, longitude: float) -> WeatherSnapshot | None:
        """Current conditions at a position, or None if unavailable."""
        ...


class StaticLocationProvider:
    """Location provider returning a fixed position (e.g. from settings)."""

    def __init__(self, location: LocationSnapshot | None) -> None:
        self._location = location

    def current(self) -> LocationSnapshot | None:
        return self._location
