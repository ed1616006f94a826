"""Tests for the Open-Meteo weather provider."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest
import requests

from flower_discovery.datasources.weather import OpenMeteoWeatherProvider, condition_for_code
from flower_discovery.datasources.weather.current import parse_current
from flower_discovery.exceptions import NetworkFailure, NoResult


def response(payload: dict) -> Mock:  # type: ignore[type-arg]
    resp = Mock()
    resp.json.return_value = payload
    resp.raise_for_status = Mock()
    return resp


class TestConditions:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [(0, "Sunny"), (3, "Cloudy"), (45, "Foggy"), (63, "Rainy"), (75, "Snowy"), (95, "Stormy")],
    )
    def test_known_codes(self, code: int, expected: str) -> None:
        assert condition_for_code(code) == expected

    def test_unknown_code(self) -> None:
        assert condition_for_code(42) == "Mild"


class TestParseCurrent:
    def test_parse(self) -> None:
        weather = parse_current({"current": {"temperature_2m": 18.3, "weather_code": 61}})
        assert weather.condition == "Rainy"
        assert weather.temperature == 18.3
        assert weather.unit == "C"

    def test_missing_block(self) -> None:
        with pytest.raises(NoResult):
            parse_current({})


class TestOpenMeteoWeatherProvider:
    @patch("flower_discovery.datasources.weather.current.session.get")
    def test_current(self, mock_get: Mock) -> None:
        mock_get.return_value = response({"current": {"temperature_2m": 22.0, "weather_code": 1}})

        weather = OpenMeteoWeatherProvider().current(38.72, -9.14)

        assert weather is not None
        assert weather.condition == "Sunny"
        params = mock_get.call_args.kwargs["params"]
        assert params["latitude"] == 38.72
        assert params["longitude"] == -9.14
        assert params["current"] == "temperature_2m,weather_code"
        assert "temperature_unit" not in params

    @patch("flower_discovery.datasources.weather.current.session.get")
    def test_fahrenheit(self, mock_get: Mock) -> None:
        mock_get.return_value = response({"current": {"temperature_2m": 71.6, "weather_code": 2}})
        weather = OpenMeteoWeatherProvider(fahrenheit=True).current(40.7, -74.0)
        assert weather is not None
        assert weather.unit == "F"
        assert mock_get.call_args.kwargs["params"]["temperature_unit"] == "fahrenheit"

    @patch("flower_discovery.datasources.weather.current.session.get")
    def test_network_error(self, mock_get: Mock) -> None:
        mock_get.side_effect = requests.ConnectionError("no route")
        with pytest.raises(NetworkFailure):
            OpenMeteoWeatherProvider().current(0.0, 0.0)

    @patch("flower_discovery.datasources.weather.current.session.get")
    def test_http_error(self, mock_get: Mock) -> None:
        resp = response({})
        resp.raise_for_status.side_effect = requests.HTTPError("400 Bad Request")
        mock_get.return_value = resp
        with pytest.raises(NoResult):
            OpenMeteoWeatherProvider().current(0.0, 0.0)
