"""Open-Meteo current conditions (free, no API key).

Public API:
  - current: OpenMeteoWeatherProvider, fetch_current
  - client: API URL, WMO code table
"""

from flower_discovery.datasources.weather.client import OPEN_METEO_API, condition_for_code
from flower_discovery.datasources.weather.current import (
    OpenMeteoWeatherProvider,
    fetch_current,
)

__all__ = [
    "OPEN_METEO_API",
    "OpenMeteoWeatherProvider",
    "condition_for_code",
    "fetch_current",
]
