"""Process-wide settings for the weather MCP server.

Values are read once from the environment when the server starts and are
never mutated afterwards. Tests build ``Settings`` directly to point the
service at stub hosts.
"""

import logging
import os
from dataclasses import dataclass

NWS_API_BASE = "https://api.weather.gov"
OPEN_METEO_API_BASE = "https://api.open-meteo.com/v1"
USER_AGENT = "weather-mcp/0.1.0"


def _log_level(name: str) -> str:
    """Normalize a level name, falling back to INFO for names logging does not know."""
    name = name.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return "INFO"


@dataclass(frozen=True)
class Settings:
    nws_api_base: str = NWS_API_BASE
    open_meteo_api_base: str = OPEN_METEO_API_BASE
    user_agent: str = USER_AGENT
    log_dir: str = "logs"
    log_level: str = "INFO"
    transport: str = "stdio"

    def __post_init__(self):
        # Endpoint paths are appended with a leading slash
        object.__setattr__(self, "nws_api_base", self.nws_api_base.rstrip("/"))
        object.__setattr__(self, "open_meteo_api_base", self.open_meteo_api_base.rstrip("/"))

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        return cls(
            nws_api_base=os.environ.get("NWS_API_BASE", NWS_API_BASE),
            open_meteo_api_base=os.environ.get("OPEN_METEO_API_BASE", OPEN_METEO_API_BASE),
            user_agent=os.environ.get("WEATHER_USER_AGENT", USER_AGENT),
            log_dir=os.environ.get("LOG_DIR", "logs"),
            log_level=_log_level(os.environ.get("LOG_LEVEL", "INFO")),
            transport=os.environ.get("MCP_TRANSPORT", "stdio"),
        )
