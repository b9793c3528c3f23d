"""Open-Meteo API client constants and shared configuration.

API docs:
  - Forecast: https://open-meteo.com/en/docs
"""

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

# Current-conditions variables we request from Open-Meteo
CURRENT_VARS = [
    "temperature_2m",
    "weather_code",
    "is_day",
]
