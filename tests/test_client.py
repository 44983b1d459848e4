"""
Tests for IndexerClient (remote query primitive): URL/key selection per
network, header policy, parameter encoding and error classification.
"""

from __future__ import annotations

import httpx
import pytest

from payloads import MAINNET_URL, TESTNET_URL
from ton_history.config.settings import IndexerSettings, Network
from ton_history.core.exceptions import IndexerError, TransportError
from ton_history.indexer.client import API_KEY_HEADER, IndexerClient


@pytest.mark.anyio
async def test_mainnet_uses_mainnet_url_and_key(make_client, json_handler, requests_seen):
    client = make_client(json_handler({"ok": True}))
    data = await client.call(Network.MAINNET, "/transactions", {"limit": 5})
    assert data == {"ok": True}
    request = requests_seen[0]
    assert str(request.url).startswith(f"{MAINNET_URL}/transactions")
    assert request.method == "GET"
    assert request.headers[API_KEY_HEADER] == "main-key"
    assert request.headers["X-Client"] == "ton-history-tests"


@pytest.mark.anyio
async def test_missing_key_omits_header(make_client, json_handler, requests_seen):
    """Testnet has no key configured: header must be absent, never empty."""
    client = make_client(json_handler({}))
    await client.call("testnet", "/addressBook")
    request = requests_seen[0]
    assert str(request.url).startswith(f"{TESTNET_URL}/addressBook")
    assert API_KEY_HEADER not in request.headers
    assert request.headers["X-Client"] == "ton-history-tests"


def test_blank_key_treated_as_unset():
    client = IndexerClient(IndexerSettings(mainnet_api_key="   "))
    assert API_KEY_HEADER not in client.build_headers(Network.MAINNET)


def test_extra_headers_win_on_conflict():
    settings = IndexerSettings(mainnet_api_key="k1", api_headers={API_KEY_HEADER: "override"})
    assert IndexerClient(settings).build_headers("mainnet")[API_KEY_HEADER] == "override"


@pytest.mark.anyio
async def test_params_drop_none_and_repeat_lists(make_client, json_handler, requests_seen):
    client = make_client(json_handler([]))
    await client.call(Network.MAINNET, "/transactions", {
        "account": ["a1", "a2"],
        "limit": 3,
        "start_utime": None,
        "sort": "desc",
    })
    params = requests_seen[0].url.params
    assert params.get_list("account") == ["a1", "a2"]
    assert params["limit"] == "3"
    assert params["sort"] == "desc"
    assert "start_utime" not in params


@pytest.mark.anyio
async def test_http_error_status_raises_transport_error(make_client, json_handler):
    client = make_client(json_handler({"error": "rate limited"}, status_code=429))
    with pytest.raises(TransportError) as exc_info:
        await client.call(Network.MAINNET, "/transactions")
    assert exc_info.value.status_code == 429
    assert exc_info.value.path == "/transactions"
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)


@pytest.mark.anyio
async def test_connection_error_raises_transport_error(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)
    with pytest.raises(TransportError) as exc_info:
        await client.call(Network.MAINNET, "/transactions")
    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value, IndexerError)


@pytest.mark.anyio
async def test_invalid_json_raises_transport_error(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>gateway</html>")

    client = make_client(handler)
    with pytest.raises(TransportError, match="not valid JSON"):
        await client.call(Network.MAINNET, "/transactions")


@pytest.mark.anyio
async def test_context_manager_owns_and_closes_pool():
    client = IndexerClient(IndexerSettings())
    async with client as entered:
        assert entered is client
        assert client._http is not None
    assert client._http is None


@pytest.mark.anyio
async def test_injected_http_client_not_closed(settings):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
    async with IndexerClient(settings, http_client=http_client):
        pass
    assert not http_client.is_closed
    await http_client.aclose()


def test_unknown_network_rejected():
    with pytest.raises(ValueError):
        IndexerSettings().base_url_for("devnet")
