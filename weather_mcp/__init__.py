"""Weather MCP server: NWS alerts and worldwide forecasts as MCP tools.

This module avoids importing `weather_mcp.server` at package import time to
prevent a `RuntimeWarning` when starting the server with
`python -m weather_mcp.server`.
"""

from importlib import import_module

from .config import Settings
from .errors import (
    DecodeFailed,
    FetchError,
    NotFound,
    RequestFailed,
    ToolInternalError,
    ToolInvalidInput,
    TransportFailed,
)
from .formatters import format_alerts, format_daily_forecast, format_forecast, weather_code_to_description
from .geo import covers_location
from .service import WeatherService

__all__ = [
    "Settings",
    "WeatherService",
    "covers_location",
    "format_alerts",
    "format_forecast",
    "format_daily_forecast",
    "weather_code_to_description",
    "FetchError",
    "RequestFailed",
    "NotFound",
    "DecodeFailed",
    "TransportFailed",
    "ToolInvalidInput",
    "ToolInternalError",
    "mcp",
    "get_alerts",
    "get_forecast",
    "get_tool_specs",
    "run_server",
]

# Attributes provided by the server module. We lazily import `weather_mcp.server`
# only when one of these attributes is accessed.
_server_attrs = {
    "mcp",
    "get_alerts",
    "get_forecast",
    "get_tool_specs",
    "run_server",
}


def _load_server():
    return import_module(".server", __package__)


def __getattr__(name: str):
    if name in _server_attrs:
        return getattr(_load_server(), name)
    raise AttributeError(f"module {__name__} has no attribute {name}")


def __dir__():
    return sorted(list(globals().keys()) + list(_server_attrs))
