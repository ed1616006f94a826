"""Open-Meteo constants.

API docs: https://open-meteo.com/en/docs
"""

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

CURRENT_VARS = ["temperature_2m", "weather_code"]

# WMO weather interpretation codes collapsed to the plain words used in
# flower descriptions ("Found on a rainy day ...").
WMO_CONDITIONS: dict[int, str] = {
    0: "Sunny",
    1: "Sunny",
    2: "Partly Cloudy",
    3: "Cloudy",
    45: "Foggy",
    48: "Foggy",
    51: "Drizzly",
    53: "Drizzly",
    55: "Drizzly",
    56: "Icy",
    57: "Icy",
    61: "Rainy",
    63: "Rainy",
    65: "Rainy",
    66: "Icy",
    67: "Icy",
    71: "Snowy",
    73: "Snowy",
    75: "Snowy",
    77: "Snowy",
    80: "Showery",
    81: "Showery",
    82: "Showery",
    85: "Snowy",
    86: "Snowy",
    95: "Stormy",
    96: "Stormy",
    99: "Stormy",
}


def condition_for_code(code: int) -> str:
    """Simple condition word for a WMO code; unknown codes map to "Mild"."""
    return WMO_CONDITIONS.get(code, "Mild")
