"""Tool implementations: route, fetch, map failures, format."""

import logging
import math

from .config import Settings
from .errors import FetchError, NotFound, ToolInternalError, ToolInvalidInput
from .fetch import WeatherHTTPClient
from .formatters import format_alerts, format_daily_forecast, format_forecast
from .geo import covers_location
from .models import AlertResponse, ForecastResponse, OpenMeteoResponse, PointsResponse

logger = logging.getLogger(__name__)

OPEN_METEO_DAILY_FIELDS = ",".join([
    "temperature_2m_max",
    "temperature_2m_min",
    "weather_code",
    "wind_speed_10m_max",
    "precipitation_sum",
])

NOT_IN_COVERAGE = (
    "Location not found in NWS coverage area. This location may be open water "
    "not covered by the grid system."
)


def _internal(context: str, error: FetchError) -> ToolInternalError:
    logger.error(f"[{context}] {error.url}: {error}")
    return ToolInternalError(f"{context}: {error}")


class WeatherService:
    """Serves ``get_alerts`` and ``get_forecast`` against NWS and Open-Meteo.

    The only state is the shared HTTP client; every call is independent.
    """

    def __init__(self, settings: Settings | None = None, http: WeatherHTTPClient | None = None):
        self.settings = settings or Settings.from_env()
        self.http = http or WeatherHTTPClient(self.settings.user_agent)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def get_alerts(self, state: str) -> str:
        """Active NWS alerts for a two-letter state code."""
        logger.info(f"Getting alerts for state: {state}")

        # The state code is passed through as given; NWS rejects unknown areas.
        url = f"{self.settings.nws_api_base}/alerts/active?area={state}"
        try:
            alerts = await self.http.fetch(url, AlertResponse)
        except FetchError as e:
            raise _internal("Failed to fetch alerts", e) from e

        return format_alerts([feature.properties for feature in alerts.features])

    async def get_forecast(self, latitude: float, longitude: float) -> str:
        """Forecast for any coordinate, NWS inside its coverage box and Open-Meteo elsewhere."""
        logger.info(f"Getting forecast for coordinates: {latitude}, {longitude}")

        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            logger.warning(f"Rejected non-finite coordinates: {latitude}, {longitude}")
            raise ToolInvalidInput("Latitude and longitude must be finite numbers.")

        if covers_location(latitude, longitude):
            return await self._nws_forecast(latitude, longitude)
        return await self._open_meteo_forecast(latitude, longitude)

    async def _nws_forecast(self, latitude: float, longitude: float) -> str:
        logger.info("Using NWS API for US location")
        base = self.settings.nws_api_base

        points_url = f"{base}/points/{latitude},{longitude}"
        try:
            points = await self.http.fetch(points_url, PointsResponse)
        except NotFound as e:
            logger.warning(f"No NWS grid point for {latitude}, {longitude}")
            raise ToolInvalidInput(NOT_IN_COVERAGE) from e
        except FetchError as e:
            raise _internal("Failed to fetch grid points", e) from e

        grid = points.properties
        forecast_url = f"{base}/gridpoints/{grid.grid_id}/{grid.grid_x},{grid.grid_y}/forecast"
        try:
            forecast = await self.http.fetch(forecast_url, ForecastResponse)
        except FetchError as e:
            raise _internal("Failed to fetch forecast", e) from e

        return format_forecast(forecast.properties.periods)

    async def _open_meteo_forecast(self, latitude: float, longitude: float) -> str:
        logger.info("Using Open-Meteo API for non-US location")

        url = (
            f"{self.settings.open_meteo_api_base}/forecast"
            f"?latitude={latitude}&longitude={longitude}"
            f"&daily={OPEN_METEO_DAILY_FIELDS}&timezone=auto"
        )
        try:
            forecast = await self.http.fetch(url, OpenMeteoResponse)
        except FetchError as e:
            raise _internal("Failed to fetch Open-Meteo forecast", e) from e

        return format_daily_forecast(forecast)
