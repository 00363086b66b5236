"""Typed GET/PUT/POST/DELETE calls returning unwrapped payloads."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from telegram_bot_client.adapters.http_transport import ApiTransport, HttpxTransport
from telegram_bot_client.api.envelope import ApiResponse
from telegram_bot_client.config import Settings
from telegram_bot_client.errors import ApiRequestError

_logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class WebApiClient:
    """Call surface over an ``ApiTransport``.

    An ``ok: false`` reply raises ``ApiRequestError`` unless ``raise_on_error``
    is off, in which case the (empty) payload is returned. The synthetic
    "No response received" envelope never raises.
    """

    transport: ApiTransport
    raise_on_error: bool = True

    @classmethod
    def create(cls, settings: Settings) -> "WebApiClient":
        """Create a client with an httpx transport."""
        return cls(
            transport=HttpxTransport.create(settings),
            raise_on_error=settings.telegram_raise_on_error,
        )

    async def get(
        self,
        path: str,
        result_type: type[T],
        params: Mapping[str, object] | None = None,
    ) -> T | None:
        response = await self.transport.send("GET", path, result_type, params=params)
        return self._unwrap(path, response)

    async def put(
        self,
        path: str,
        params: Mapping[str, object] | None = None,
        body: object | None = None,
        result_type: Any = Any,
    ) -> Any:
        response = await self.transport.send(
            "PUT", path, result_type, params=params, body=body
        )
        return self._unwrap(path, response)

    async def post(
        self,
        path: str,
        params: Mapping[str, object] | None = None,
        body: object | None = None,
        result_type: Any = Any,
    ) -> Any:
        response = await self.transport.send(
            "POST", path, result_type, params=params, body=body
        )
        return self._unwrap(path, response)

    async def delete(
        self,
        path: str,
        params: Mapping[str, object] | None = None,
        body: object | None = None,
        result_type: Any = Any,
    ) -> Any:
        response = await self.transport.send(
            "DELETE", path, result_type, params=params, body=body
        )
        return self._unwrap(path, response)

    def _unwrap(self, path: str, response: ApiResponse[Any]) -> Any:
        if response.ok:
            return response.result
        if not response.received:
            _logger.warning("Bot API %s: %s", path, response.message)
            return response.result
        if self.raise_on_error:
            raise ApiRequestError.from_api_response(response)
        _logger.warning(
            "Bot API %s failed: error_code=%s message=%s",
            path,
            response.error_code,
            response.message,
        )
        return response.result
