"""Tests for environment-driven settings."""

from weather_mcp.config import NWS_API_BASE, OPEN_METEO_API_BASE, USER_AGENT, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("NWS_API_BASE", "OPEN_METEO_API_BASE", "WEATHER_USER_AGENT",
                     "LOG_DIR", "LOG_LEVEL", "MCP_TRANSPORT"):
            monkeypatch.delenv(name, raising=False)

        s = Settings.from_env()
        assert s.nws_api_base == NWS_API_BASE
        assert s.open_meteo_api_base == OPEN_METEO_API_BASE
        assert s.user_agent == USER_AGENT
        assert s.log_dir == "logs"
        assert s.log_level == "INFO"
        assert s.transport == "stdio"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("NWS_API_BASE", "http://localhost:9000/")
        monkeypatch.setenv("OPEN_METEO_API_BASE", "http://localhost:9001/v1/")
        monkeypatch.setenv("WEATHER_USER_AGENT", "custom/2.0")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("MCP_TRANSPORT", "sse")

        s = Settings.from_env()
        assert s.nws_api_base == "http://localhost:9000"
        assert s.open_meteo_api_base == "http://localhost:9001/v1"
        assert s.user_agent == "custom/2.0"
        assert s.log_level == "DEBUG"
        assert s.transport == "sse"

    def test_trailing_slash_stripped(self):
        s = Settings(nws_api_base="https://nws.test/")
        assert s.nws_api_base == "https://nws.test"

    def test_unknown_log_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        assert Settings.from_env().log_level == "INFO"

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", " warning ")
        assert Settings.from_env().log_level == "WARNING"
