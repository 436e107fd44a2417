"""Shared test fixtures."""

import pytest

from weather_mcp.config import Settings
from weather_mcp.service import WeatherService

NWS = "https://nws.test"
OPEN_METEO = "https://open-meteo.test/v1"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        nws_api_base=NWS,
        open_meteo_api_base=OPEN_METEO,
        user_agent="weather-mcp-tests/1.0",
    )


@pytest.fixture
def service(settings: Settings) -> WeatherService:
    return WeatherService(settings)


@pytest.fixture
def alert_payload() -> dict:
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "properties": {
                    "event": "Flood Warning",
                    "severity": "Severe",
                    "areaDesc": "Sacramento, CA",
                    "headline": "Flood Warning issued for Sacramento",
                    "description": "Heavy rain is causing river flooding.",
                }
            },
            {
                "properties": {
                    "event": "Wind Advisory",
                    "severity": "Moderate",
                    "areaDesc": "Kern, CA",
                    "headline": None,
                }
            },
        ],
    }


@pytest.fixture
def points_payload() -> dict:
    return {"properties": {"gridId": "OKX", "gridX": 33, "gridY": 35, "forecast": "ignored"}}


@pytest.fixture
def nws_forecast_payload() -> dict:
    return {
        "properties": {
            "periods": [
                {
                    "number": 1,
                    "name": "Tonight",
                    "temperature": 54,
                    "temperatureUnit": "F",
                    "windSpeed": "5 to 10 mph",
                    "windDirection": "SW",
                    "shortForecast": "Mostly Clear",
                    "detailedForecast": "Mostly clear, with a low around 54.",
                },
                {
                    "number": 2,
                    "name": "Monday",
                    "temperature": 71,
                    "temperatureUnit": "F",
                    "windSpeed": "10 mph",
                    "windDirection": "W",
                    "shortForecast": "Sunny",
                    "detailedForecast": "Sunny, with a high near 71.",
                },
            ]
        }
    }


def make_open_meteo_payload(days: int) -> dict:
    return {
        "latitude": 52.52,
        "longitude": 13.419998,
        "timezone": "Europe/Berlin",
        "daily_units": {
            "time": "iso8601",
            "temperature_2m_max": "C",
            "temperature_2m_min": "F",
            "weather_code": "wmo code",
            "wind_speed_10m_max": "km/h",
            "precipitation_sum": "mm",
        },
        "daily": {
            "time": [f"2026-10-{18 + i:02d}" for i in range(days)],
            "temperature_2m_max": [14.26 + i for i in range(days)],
            "temperature_2m_min": [6.04 + i for i in range(days)],
            "weather_code": [61] * days,
            "wind_speed_10m_max": [18.0] * days,
            "precipitation_sum": [2.5] * days,
        },
    }


@pytest.fixture
def open_meteo_payload() -> dict:
    return make_open_meteo_payload(7)
