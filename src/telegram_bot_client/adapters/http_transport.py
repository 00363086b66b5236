"""HTTP transport for the Telegram Bot API."""

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from telegram_bot_client.api.envelope import ApiResponse
from telegram_bot_client.codecs import query_value, to_wire
from telegram_bot_client.config import Settings, parse_proxy_url
from telegram_bot_client.errors import (
    ApiRequestError,
    InvalidTokenError,
    RequestTimeoutError,
)

_logger = logging.getLogger(__name__)


class ApiTransport(Protocol):
    """Interface for a single Bot API round trip."""

    async def send(
        self,
        method: str,
        path: str,
        result_type: Any = Any,
        params: Mapping[str, object] | None = None,
        body: object | None = None,
        timeout: float | None = None,
    ) -> ApiResponse[Any]:
        """Send a request and return the decoded envelope."""


def build_path_with_query(path: str, params: Mapping[str, object] | None) -> str:
    """Append ``params`` to ``path`` as a query string.

    Only values are escaped. A ``None`` value emits the bare key.
    """
    if not path:
        raise ValueError("Request path must not be empty")
    if not params:
        return path
    pairs = [
        key if value is None else f"{key}={quote(query_value(value), safe='')}"
        for key, value in params.items()
    ]
    return f"{path}?{'&'.join(pairs)}"


def encode_body(body: object) -> bytes:
    """Serialize a request body to UTF-8 JSON."""
    return json.dumps(to_wire(body), ensure_ascii=False).encode("utf-8")


def decode_envelope(content: bytes, result_type: Any) -> ApiResponse[Any]:
    """Decode a response body, substituting the synthetic envelope on failure.

    ``result_type=None`` discards the payload. A successful envelope without
    a payload is undecodable when a concrete ``result_type`` is expected.
    """
    if result_type is None:
        result_type = Any
    envelope_type = ApiResponse[result_type]
    try:
        envelope = envelope_type.model_validate_json(content)
    except ValidationError as exc:
        _logger.warning(
            "Undecodable Bot API response: errors=%s", exc.error_count()
        )
        return envelope_type.no_response()
    if envelope.ok and envelope.result is None and result_type is not Any:
        _logger.warning("Bot API response is ok but carries no result")
        return envelope_type.no_response()
    return envelope


def redact_status_error(
    exc: httpx.HTTPStatusError, method: str, path: str
) -> httpx.HTTPStatusError:
    """Copy of ``exc`` whose message omits the URL and so the bot token."""
    return httpx.HTTPStatusError(
        f"HTTP {exc.response.status_code} for {method} {path}",
        request=exc.request,
        response=exc.response,
    )


@dataclass
class HttpxTransport(ApiTransport):
    """Bot API transport opening one httpx client per call."""

    base_url: str
    proxy: str | None = None
    timeout: float = 10.0
    transport_factory: Callable[[], httpx.AsyncBaseTransport] | None = None

    @classmethod
    def create(cls, settings: Settings) -> "HttpxTransport":
        """Create a transport from client settings."""
        return cls(
            base_url=settings.bot_base_url,
            proxy=parse_proxy_url(settings.telegram_proxy_url),
            timeout=settings.telegram_request_timeout,
        )

    def open_client(self) -> httpx.AsyncClient:
        """Open an httpx client scoped to a single call."""
        if self.transport_factory is not None:
            return httpx.AsyncClient(
                base_url=self.base_url,
                transport=self.transport_factory(),
                timeout=self.timeout,
            )
        return httpx.AsyncClient(
            base_url=self.base_url, proxy=self.proxy, timeout=self.timeout
        )

    def build_request(
        self,
        client: httpx.AsyncClient,
        method: str,
        path: str,
        params: Mapping[str, object] | None = None,
        body: object | None = None,
        timeout: float | None = None,
    ) -> httpx.Request:
        """Build the request with JSON accept/content headers."""
        headers = {"Accept": "application/json"}
        content = None
        if body is not None:
            content = encode_body(body)
            headers["Content-Type"] = "application/json"
        return client.build_request(
            method,
            build_path_with_query(path, params),
            content=content,
            headers=headers,
            timeout=timeout if timeout is not None else self.timeout,
        )

    async def send(
        self,
        method: str,
        path: str,
        result_type: Any = Any,
        params: Mapping[str, object] | None = None,
        body: object | None = None,
        timeout: float | None = None,
    ) -> ApiResponse[Any]:
        """Send a request and decode the envelope.

        Raises InvalidTokenError on HTTP 401 and RequestTimeoutError on a
        network timeout. Caller cancellation propagates unchanged.
        """
        status_error: httpx.HTTPStatusError | None = None
        async with self.open_client() as client:
            request = self.build_request(client, method, path, params, body, timeout)
            _logger.debug("Bot API request: method=%s path=%s", method, path)
            try:
                response = await client.send(request)
            except httpx.TimeoutException as exc:
                raise RequestTimeoutError("Request timed out", 408) from exc
            _logger.debug(
                "Bot API response: path=%s status=%s", path, response.status_code
            )
            try:
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                redacted = redact_status_error(exc, method, path)
                if exc.response.status_code == httpx.codes.UNAUTHORIZED:
                    raise InvalidTokenError("Invalid token", 401) from redacted
                status_error = redacted
            envelope = decode_envelope(response.content, result_type)
        if status_error is not None and not envelope.received:
            status_code = status_error.response.status_code
            raise ApiRequestError(f"HTTP {status_code}", status_code) from status_error
        return envelope
