"""Open-Meteo weather data source.

Fetches current conditions from Open-Meteo (free, no API key).

Public API:
  - current: fetch_location_weather (temperature, WMO code, day/night)
  - client: API URL, requested variables
  - describe_condition: WMO code → short label
"""

from species_atlas.conditions import describe_condition
from species_atlas.datasources.weather.client import OPEN_METEO_API
from species_atlas.datasources.weather.current import fetch_location_weather

__all__ = [
    "OPEN_METEO_API",
    "describe_condition",
    "fetch_location_weather",
]
