"""Current conditions at a point from the Open-Meteo Forecast API."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from species_atlas.datasources.weather.client import CURRENT_VARS, OPEN_METEO_API
from species_atlas.schemas import WeatherSnapshot
from species_atlas.services.http import DEFAULT_TIMEOUT, fetch_json


def fetch_location_weather(
    lat: float,
    lon: float,
    location: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> WeatherSnapshot | None:
    """
    Fetch current temperature, weather code and day/night at a location.

    Args:
        lat: Latitude.
        lon: Longitude.
        location: Human label carried onto the snapshot.
        timeout: Per-call timeout in seconds.

    Returns:
        A ``WeatherSnapshot``, or None if the source is unavailable or the
        response lacks current conditions.
    """
    params: dict[str, Any] = {
        "latitude": lat,
        "longitude": lon,
        "current": ",".join(CURRENT_VARS),
        "timezone": "auto",
    }
    data = fetch_json(OPEN_METEO_API, params, timeout=timeout)
    current = data.get("current") if isinstance(data, dict) else None
    if not isinstance(current, dict):
        return None

    temperature = current.get("temperature_2m")
    code = current.get("weather_code")
    if temperature is None or code is None:
        return None
    try:
        return WeatherSnapshot(
            temperature=temperature,
            condition_code=code,
            is_day=current.get("is_day") == 1,
            location=location,
            latitude=lat,
            longitude=lon,
        )
    except ValidationError:
        return None
