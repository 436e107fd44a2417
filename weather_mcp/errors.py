"""Error types raised while fetching upstream data and while serving tools."""

from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS


class FetchError(Exception):
    """Base class for failures of a single upstream GET."""

    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url


class RequestFailed(FetchError):
    """Upstream answered with a non-success status."""

    def __init__(self, url: str, status: int, reason: str = ""):
        message = f"Request failed with status: {status}"
        if reason:
            message = f"{message} {reason}"
        super().__init__(url, message)
        self.status = status


class NotFound(RequestFailed):
    def __init__(self, url: str, reason: str = "Not Found"):
        super().__init__(url, 404, reason)


class DecodeFailed(FetchError):
    """Response body did not match the expected record type."""

    def __init__(self, url: str, detail: str):
        super().__init__(url, f"Failed to decode response: {detail}")


class TransportFailed(FetchError):
    """The request never produced a response (DNS, connect, timeout...)."""

    def __init__(self, url: str, detail: str):
        super().__init__(url, f"Request error: {detail}")


class WeatherToolError(ToolError):
    """A tool call failure reported back to the MCP client.

    FastMCP re-wraps tool exceptions into a plain text result, so the kind of
    failure travels as a fixed prefix of the message (`Invalid params: ...`,
    `Internal error: ...`). ``code`` is the matching JSON-RPC error code and
    ``detail`` the message without the prefix.
    """

    code: int = INTERNAL_ERROR
    kind: str = "Internal error"

    def __init__(self, detail: str):
        super().__init__(f"{self.kind}: {detail}")
        self.detail = detail


class ToolInvalidInput(WeatherToolError):
    code = INVALID_PARAMS
    kind = "Invalid params"


class ToolInternalError(WeatherToolError):
    code = INTERNAL_ERROR
    kind = "Internal error"
