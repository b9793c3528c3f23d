"""
Tests for current conditions and condition labels.
"""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest
import requests

from species_atlas.conditions import c_to_f
from species_atlas.datasources.weather import describe_condition, fetch_location_weather

SAMPLE_CURRENT_RESPONSE: dict = {
    "latitude": 19.6,
    "longitude": -100.27,
    "timezone": "America/Mexico_City",
    "current": {
        "time": "2026-01-15T10:30",
        "temperature_2m": 14.2,
        "weather_code": 2,
        "is_day": 1,
    },
}


def _response(payload: object) -> Mock:
    resp = Mock()
    resp.json.return_value = payload
    resp.raise_for_status = Mock()
    return resp


class TestDescribeCondition:
    @pytest.mark.parametrize(
        ("code", "label"),
        [
            (0, "Clear sky"),
            (1, "Cloudy"),
            (3, "Cloudy"),
            (45, "Foggy"),
            (48, "Foggy"),
            (51, "Rainy"),
            (67, "Rainy"),
            (71, "Snowy"),
            (86, "Snowy"),
            (95, "Stormy"),
            (99, "Stormy"),
            (10, "Variable"),
            (90, "Variable"),
        ],
    )
    def test_buckets(self, code: int, label: str) -> None:
        assert describe_condition(code) == label


class TestTempConversion:
    def test_c_to_f(self) -> None:
        assert c_to_f(0) == 32
        assert c_to_f(100) == 212


class TestFetchLocationWeather:
    @patch("species_atlas.services.http.session.get")
    def test_snapshot(self, mock_get: Mock) -> None:
        mock_get.return_value = _response(SAMPLE_CURRENT_RESPONSE)

        snap = fetch_location_weather(19.6, -100.27, "Michoacán")

        assert snap is not None
        assert snap.temperature == 14.2
        assert snap.condition_code == 2
        assert snap.condition == "Cloudy"
        assert snap.is_day is True
        assert snap.location == "Michoacán"
        params = mock_get.call_args.kwargs["params"]
        assert params["latitude"] == 19.6
        assert params["current"] == "temperature_2m,weather_code,is_day"
        assert params["timezone"] == "auto"

    @patch("species_atlas.services.http.session.get")
    def test_night(self, mock_get: Mock) -> None:
        payload = {"current": {"temperature_2m": 4.0, "weather_code": 0, "is_day": 0}}
        mock_get.return_value = _response(payload)

        snap = fetch_location_weather(0.0, 0.0, "Null Island")

        assert snap is not None
        assert snap.is_day is False

    @patch("species_atlas.services.http.session.get")
    def test_missing_current_block(self, mock_get: Mock) -> None:
        mock_get.return_value = _response({"latitude": 0.0})
        assert fetch_location_weather(0.0, 0.0, "Null Island") is None

    @patch("species_atlas.services.http.session.get")
    def test_timeout(self, mock_get: Mock) -> None:
        mock_get.side_effect = requests.Timeout("slow")
        assert fetch_location_weather(0.0, 0.0, "Null Island") is None
