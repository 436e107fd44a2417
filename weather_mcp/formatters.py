"""Render upstream records into the text returned by the tools."""

from collections.abc import Sequence

from .models import AlertProperties, ForecastPeriod, OpenMeteoResponse

NO_ALERTS = "No active weather alerts."
MAX_DAILY_DAYS = 7

# WMO weather interpretation codes
WEATHER_CODES = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy", 48: "Foggy",
    51: "Drizzle", 53: "Drizzle", 55: "Drizzle",
    61: "Rain", 63: "Rain", 65: "Rain",
    71: "Snow", 73: "Snow", 75: "Snow",
    77: "Snow grains",
    80: "Rain showers", 81: "Rain showers", 82: "Rain showers",
    85: "Snow showers", 86: "Snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with hail", 99: "Thunderstorm with hail",
}


def weather_code_to_description(code: int) -> str:
    return WEATHER_CODES.get(code, "Unknown")


def format_alerts(alerts: Sequence[AlertProperties]) -> str:
    """Format active alerts, numbered from 1 in upstream order."""
    if not alerts:
        return NO_ALERTS

    output = "Active Weather Alerts:\n\n"
    for i, alert in enumerate(alerts, start=1):
        output += (
            f"Alert {i}:\n"
            f"  Event: {alert.event}\n"
            f"  Severity: {alert.severity}\n"
            f"  Area: {alert.area_desc}\n"
        )
        if alert.headline is not None:
            output += f"  Headline: {alert.headline}\n"
        if alert.description is not None:
            output += f"  Description: {alert.description}\n"
        output += "\n"
    return output


def format_forecast(periods: Sequence[ForecastPeriod]) -> str:
    """Format every NWS forecast period."""
    output = "Weather Forecast:\n\n"
    for period in periods:
        output += f"""{period.name}:
  Temperature: {period.temperature}°{period.temperature_unit}
  Wind: {period.wind_speed} {period.wind_direction}
  Conditions: {period.short_forecast}
  Details: {period.detailed_forecast}

"""
    return output


def format_daily_forecast(forecast: OpenMeteoResponse) -> str:
    """Format at most a week of Open-Meteo daily aggregates.

    The minimum temperature is labelled with the maximum temperature's unit;
    Open-Meteo reports the same unit for both.
    """
    daily = forecast.daily
    units = forecast.daily_units
    output = (
        "Weather Forecast (Open-Meteo)\n"
        f"Location: {forecast.latitude:.4f}, {forecast.longitude:.4f}\n"
        f"Timezone: {forecast.timezone}\n\n"
    )

    for i in range(min(MAX_DAILY_DAYS, len(daily.time))):
        conditions = weather_code_to_description(daily.weather_code[i])
        output += (
            f"{daily.time[i]}:\n"
            f"  Temperature: {daily.temperature_min[i]:.1f}°{units.temperature_max}"
            f" - {daily.temperature_max[i]:.1f}°{units.temperature_max}\n"
            f"  Conditions: {conditions}\n"
            f"  Wind Speed: {daily.wind_speed_max[i]:.1f} {units.wind_speed_max}\n"
            f"  Precipitation: {daily.precipitation_sum[i]:.1f} {units.precipitation_sum}\n\n"
        )
    return output
