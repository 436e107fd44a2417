"""Shared HTTP client used for every upstream request."""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .errors import DecodeFailed, NotFound, RequestFailed, TransportFailed

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    where = ".".join(str(part) for part in first.get("loc", ())) or "body"
    return f"{exc.title}: {where}: {first['msg']}"


class WeatherHTTPClient:
    """Thin wrapper around ``httpx.AsyncClient`` that decodes into records.

    One instance is shared by all tool calls; ``httpx.AsyncClient`` pools
    connections and is safe to use from concurrent tasks.
    """

    def __init__(self, user_agent: str, client: httpx.AsyncClient | None = None):
        self.user_agent = user_agent
        self._client = client or httpx.AsyncClient(follow_redirects=True)
        self._headers = {"User-Agent": user_agent}

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def fetch(self, url: str, model: type[T]) -> T:
        """GET ``url`` and validate the JSON body against ``model``.

        Raises:
            NotFound: upstream returned 404
            RequestFailed: upstream returned any other non-success status
            DecodeFailed: the body is not JSON or does not match ``model``
            TransportFailed: no response was received
        """
        logger.debug(f"GET {url}")
        try:
            response = await self._client.get(url, headers=self._headers)
        except httpx.HTTPError as e:
            raise TransportFailed(url, str(e) or type(e).__name__) from e

        if response.status_code == 404:
            raise NotFound(url, response.reason_phrase)
        if not response.is_success:
            raise RequestFailed(url, response.status_code, response.reason_phrase)

        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeFailed(url, _describe(e)) from e

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "WeatherHTTPClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
