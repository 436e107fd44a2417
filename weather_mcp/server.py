import json
import logging
import os
from contextlib import asynccontextmanager

from .config import Settings

logger = logging.getLogger("weather_mcp.server")

# A small registry to export tool metadata (server-first source of truth)
_TOOL_SPECS: list[dict] = []
# Tool functions (and args/kwargs for mcp.tool) waiting for the MCP server to
# be created. Importing this module does not import FastMCP.
_REGISTERED_FUNCS: list[tuple] = []
_tools_registered = False

SERVER_INSTRUCTIONS = (
    "A weather information service powered by the National Weather Service API "
    "and Open-Meteo. Provides active weather alerts for US states and forecasts "
    "for any location worldwide."
)

settings = Settings.from_env()

# The MCP instance is created lazily via `get_mcp()` / `register_tools_with_mcp()`.
mcp = None
# Shared WeatherService, created on the first tool call.
_service = None
# Sessions currently inside the server lifespan. SSE and streamable-HTTP enter
# the lifespan once per session, so the shared client is closed only when the
# last one leaves.
_open_sessions = 0


def get_service():
    """Return the process-wide WeatherService, creating it on first use."""
    global _service
    if _service is None or _service.http.is_closed:
        from .service import WeatherService
        _service = WeatherService(settings)
    return _service


async def close_service() -> None:
    global _service
    if _service is not None:
        await _service.aclose()
        _service = None


@asynccontextmanager
async def _lifespan(server):
    global _open_sessions
    _open_sessions += 1
    try:
        yield {}
    finally:
        _open_sessions -= 1
        if _open_sessions == 0:
            await close_service()


def get_mcp():
    """Lazily initialize and return the FastMCP server instance."""
    global mcp
    if mcp is not None:
        return mcp
    from mcp.server.fastmcp import FastMCP
    mcp = FastMCP("weather", instructions=SERVER_INSTRUCTIONS, lifespan=_lifespan)
    return mcp


def register_tools_with_mcp():
    """Register all previously-decorated functions with the MCP instance."""
    global _tools_registered
    if _tools_registered:
        return
    m = get_mcp()
    for fn, args, kwargs in _REGISTERED_FUNCS:
        decorated = m.tool(*args, **kwargs)(fn)
        # Preserve attached tool metadata if any
        if hasattr(fn, "__tool_spec__"):
            setattr(decorated, "__tool_spec__", getattr(fn, "__tool_spec__"))
        globals()[fn.__name__] = decorated
    _tools_registered = True


def tool(*args, schema: dict | None = None, **kwargs):
    """Decorator that records tool metadata without initializing MCP.

    Use as `@tool(schema={...})`. The functions are registered with the MCP
    instance when `register_tools_with_mcp()` is called (e.g., inside `run_server`).

    `schema` is export-only: it is recorded for `get_tool_specs()` and
    `export_tools_json()` (tool definitions for LLM clients that call the
    server directly). FastMCP derives its own input schema from the function
    signature.
    """
    def decorator(fn):
        spec = {
            "name": fn.__name__,
            "description": (fn.__doc__ or "").strip(),
            "input_schema": schema or {},
        }
        _TOOL_SPECS.append(spec)
        _REGISTERED_FUNCS.append((fn, args, kwargs))
        setattr(fn, "__tool_spec__", spec)
        return fn
    return decorator


def get_tool_specs() -> list[dict]:
    """Return a copy of the registered tool specs."""
    return [dict(s) for s in _TOOL_SPECS]


def export_tools_json(path: str = "tools.json") -> None:
    """Write the exported tool metadata to a JSON file."""
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(get_tool_specs(), fh, indent=2)


@tool(schema={
    "type": "object",
    "properties": {"state": {"type": "string", "description": "Two-letter US state code (e.g., CA, NY, TX)"}},
    "required": ["state"],
    "additionalProperties": False,
})
async def get_alerts(state: str) -> str:
    """Get active weather alerts for a US state. Provide a two-letter state code (e.g., 'CA' for California, 'NY' for New York)."""
    return await get_service().get_alerts(state)


@tool(schema={
    "type": "object",
    "properties": {
        "latitude": {"type": "number", "description": "Latitude of the location"},
        "longitude": {"type": "number", "description": "Longitude of the location"},
    },
    "required": ["latitude", "longitude"],
    "additionalProperties": False,
})
async def get_forecast(latitude: float, longitude: float) -> str:
    """Get weather forecast for any location worldwide. Provide latitude and longitude (e.g., latitude: 52.52, longitude: 13.41 for Berlin, or latitude: 40.7128, longitude: -74.0060 for New York). Automatically uses the best weather service for the location (NWS for US, Open-Meteo for rest of world)."""
    return await get_service().get_forecast(latitude, longitude)


def configure_logging(config: Settings) -> None:
    """Send server logs to a file; stdout carries the stdio protocol stream."""
    os.makedirs(config.log_dir, exist_ok=True)
    logging.basicConfig(
        filename=os.path.join(config.log_dir, "weather_server.log"),
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(message)s",
    )


def run_server(transport: str = "stdio") -> None:
    """Run the MCP server (convenience wrapper)."""
    # Ensure MCP instance is initialized and tools are registered prior to run.
    register_tools_with_mcp()
    m = get_mcp()
    logger.info(f"Starting MCP weather server ({transport})")
    m.run(transport=transport)
    logger.info("Server shutdown complete")


def main() -> None:
    configure_logging(settings)
    run_server(settings.transport)


if __name__ == "__main__":
    main()
