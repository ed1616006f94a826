"""Current conditions from the Open-Meteo Forecast API."""

from __future__ import annotations

import logging
from typing import Any

import requests

from flower_discovery.datasources.weather.client import (
    CURRENT_VARS,
    OPEN_METEO_API,
    condition_for_code,
)
from flower_discovery.exceptions import NetworkFailure, NoResult
from flower_discovery.schemas import WeatherSnapshot
from flower_discovery.services.http import session

logger = logging.getLogger(__name__)


def fetch_current(lat: float, lon: float, *, fahrenheit: bool = False) -> dict[str, Any]:
    """
    Fetch the raw ``current`` block for a position.

    Args:
        lat: Latitude.
        lon: Longitude.
        fahrenheit: Report temperature in Fahrenheit instead of Celsius.

    Returns:
        Raw API response dict with ``current`` and ``current_units`` keys.
    """
    params: dict[str, Any] = {
        "latitude": lat,
        "longitude": lon,
        "current": ",".join(CURRENT_VARS),
        "timezone": "auto",
    }
    if fahrenheit:
        params["temperature_unit"] = "fahrenheit"

    resp = session.get(OPEN_METEO_API, params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result


def parse_current(payload: dict[str, Any], unit: str = "C") -> WeatherSnapshot:
    """Turn an Open-Meteo response into a WeatherSnapshot.

    Raises:
        NoResult: The response lacks temperature or weather code.
    """
    current = payload.get("current") or {}
    temperature = current.get("temperature_2m")
    code = current.get("weather_code")
    if temperature is None or code is None:
        msg = "Open-Meteo response has no current conditions"
        raise NoResult(msg)
    return WeatherSnapshot(
        condition=condition_for_code(int(code)),
        temperature=float(temperature),
        unit=unit,
    )


class OpenMeteoWeatherProvider:
    """``WeatherProvider`` backed by Open-Meteo."""

    def __init__(self, fahrenheit: bool = False) -> None:
        self.fahrenheit = fahrenheit

    def current(self, latitude: float, longitude: float) -> WeatherSnapshot | None:
        try:
            payload = fetch_current(latitude, longitude, fahrenheit=self.fahrenheit)
        except requests.HTTPError as err:
            msg = f"Open-Meteo rejected the request: {err}"
            raise NoResult(msg) from err
        except requests.RequestException as err:
            msg = f"Open-Meteo unreachable: {err}"
            raise NetworkFailure(msg) from err

        weather = parse_current(payload, unit="F" if self.fahrenheit else "C")
        logger.debug(
            "Weather at (%.2f, %.2f): %s %.1f%s",
            latitude,
            longitude,
            weather.condition,
            weather.temperature,
            weather.unit,
        )
        return weather
