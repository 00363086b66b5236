"""Shared test fixtures."""

from collections.abc import Callable

import httpx
import pytest

from telegram_bot_client.adapters.http_transport import HttpxTransport
from telegram_bot_client.adapters.web_api_client import WebApiClient
from telegram_bot_client.config import Settings

BASE_URL = "https://api.test/bottest-token/"

Handler = Callable[[httpx.Request], httpx.Response]


def make_transport(handler: Handler, timeout: float = 10.0) -> HttpxTransport:
    """Build a transport whose per-call clients talk to ``handler``."""
    return HttpxTransport(
        base_url=BASE_URL,
        timeout=timeout,
        transport_factory=lambda: httpx.MockTransport(handler),
    )


def make_api(handler: Handler, raise_on_error: bool = True) -> WebApiClient:
    return WebApiClient(
        transport=make_transport(handler), raise_on_error=raise_on_error
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        telegram_bot_token="test-token",
        telegram_api_base_url="https://api.test",
    )
