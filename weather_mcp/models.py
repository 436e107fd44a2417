"""Record types for upstream API responses and tool requests.

All records are immutable. Required fields are required: a missing or
mistyped field makes validation fail instead of falling back to a default.
Unknown upstream fields are ignored.
"""

from pydantic import BaseModel, Field, model_validator


class Record(BaseModel):
    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# National Weather Service
# ---------------------------------------------------------------------------

class AlertProperties(Record):
    event: str
    severity: str
    area_desc: str = Field(alias="areaDesc")
    headline: str | None = None
    description: str | None = None


class AlertFeature(Record):
    properties: AlertProperties


class AlertResponse(Record):
    features: list[AlertFeature]


class PointsProperties(Record):
    grid_id: str = Field(alias="gridId")
    grid_x: int = Field(alias="gridX")
    grid_y: int = Field(alias="gridY")


class PointsResponse(Record):
    properties: PointsProperties


class ForecastPeriod(Record):
    name: str
    temperature: int
    temperature_unit: str = Field(alias="temperatureUnit")
    wind_speed: str = Field(alias="windSpeed")
    wind_direction: str = Field(alias="windDirection")
    short_forecast: str = Field(alias="shortForecast")
    detailed_forecast: str = Field(alias="detailedForecast")


class ForecastProperties(Record):
    periods: list[ForecastPeriod]


class ForecastResponse(Record):
    properties: ForecastProperties


# ---------------------------------------------------------------------------
# Open-Meteo
# ---------------------------------------------------------------------------

class DailyData(Record):
    time: list[str]
    temperature_max: list[float] = Field(alias="temperature_2m_max")
    temperature_min: list[float] = Field(alias="temperature_2m_min")
    weather_code: list[int]
    wind_speed_max: list[float] = Field(alias="wind_speed_10m_max")
    precipitation_sum: list[float]

    @model_validator(mode="after")
    def _same_length(self):
        lengths = {
            len(self.time),
            len(self.temperature_max),
            len(self.temperature_min),
            len(self.weather_code),
            len(self.wind_speed_max),
            len(self.precipitation_sum),
        }
        if len(lengths) > 1:
            raise ValueError("daily arrays must all have the same length")
        return self


class DailyUnits(Record):
    temperature_max: str = Field(alias="temperature_2m_max")
    wind_speed_max: str = Field(alias="wind_speed_10m_max")
    precipitation_sum: str


class OpenMeteoResponse(Record):
    latitude: float
    longitude: float
    timezone: str
    daily: DailyData
    daily_units: DailyUnits

