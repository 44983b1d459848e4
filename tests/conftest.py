"""
Pytest fixtures for ton_history tests.

HTTP is stubbed with httpx.MockTransport injected into IndexerClient, so no
test touches the network. Async tests run on the asyncio AnyIO backend.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from payloads import MAINNET_URL, TESTNET_URL
from ton_history.config.settings import IndexerSettings
from ton_history.indexer.client import IndexerClient


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> IndexerSettings:
    return IndexerSettings(
        mainnet_api_url=MAINNET_URL,
        testnet_api_url=TESTNET_URL,
        mainnet_api_key="main-key",
        testnet_api_key=None,
        api_headers={"X-Client": "ton-history-tests"},
    )


@pytest.fixture
def make_client(settings) -> Callable[..., IndexerClient]:
    """
    Return a factory: make_client(handler) -> IndexerClient backed by MockTransport.

    handler receives the httpx.Request and returns an httpx.Response (sync or async).
    """

    def _make(handler: Callable[[httpx.Request], Any], client_settings: IndexerSettings | None = None) -> IndexerClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return IndexerClient(client_settings or settings, http_client=http_client)

    return _make


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def json_handler(requests_seen):
    """Return a factory building a handler that records requests and replies with payload."""

    def _factory(payload: Any, status_code: int = 200):
        def _handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return httpx.Response(status_code, json=payload)

        return _handler

    return _factory
