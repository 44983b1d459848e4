"""
Remote query primitive for the TON HTTP API v3 indexer.

Responsibilities:
- Pick the base URL and API key for the requested network from injected settings.
- Send X-Api-Key only when a key is configured, then merge configured extra headers.
- Issue the GET and return decoded JSON, or raise TransportError.

No retries and no interpretation of response content; callers validate the
payload against indexer.schemas.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from ton_history.config.settings import IndexerSettings, Network
from ton_history.core.exceptions import TransportError
from ton_history.history_logging import get_logger, register_secrets

logger = get_logger(__name__)

API_KEY_HEADER = "X-Api-Key"


def _clean_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop unset values; httpx sends list values as repeated keys."""
    if not params:
        return {}
    out: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            out[key] = [str(v) for v in value]
        elif isinstance(value, bool):
            out[key] = "true" if value else "false"
        else:
            out[key] = value
    return out


class IndexerClient:
    """
    Thin async client over the indexer's JSON API.

    Use as an async context manager to share one connection pool across
    calls; otherwise every call opens a short-lived httpx.AsyncClient. An
    injected http_client is used as-is and never closed here.
    """

    def __init__(
        self,
        settings: IndexerSettings,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._owns_http = False
        register_secrets([
            settings.mainnet_api_key,
            settings.testnet_api_key,
            *settings.api_headers.values(),
        ])

    @property
    def settings(self) -> IndexerSettings:
        return self._settings

    async def __aenter__(self) -> "IndexerClient":
        if self._http is None:
            self._http = httpx.AsyncClient(
                timeout=httpx.Timeout(self._settings.request_timeout_sec)
            )
            self._owns_http = True
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None
            self._owns_http = False

    def build_headers(self, network: Network | str) -> dict[str, str]:
        headers: dict[str, str] = {}
        api_key = self._settings.api_key_for(network)
        if api_key:
            headers[API_KEY_HEADER] = api_key
        headers.update(self._settings.api_headers)
        return headers

    async def call(
        self,
        network: Network | str,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """GET {base_url}{path} for network; return decoded JSON or raise TransportError."""
        url = f"{self._settings.base_url_for(network)}{path}"
        headers = self.build_headers(network)
        query = _clean_params(params)
        logger.debug(
            "indexer_request",
            network=Network(network).value,
            path=path,
            param_keys=sorted(query),
            header_names=sorted(headers),
        )
        if self._http is not None:
            return await self._send(self._http, url, path, headers, query)
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.request_timeout_sec)
        ) as client:
            return await self._send(client, url, path, headers, query)

    async def _send(
        self,
        client: httpx.AsyncClient,
        url: str,
        path: str,
        headers: dict[str, str],
        query: dict[str, Any],
    ) -> Any:
        try:
            resp = await client.get(url, params=query, headers=headers)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("indexer_request_failed", path=path, status_code=status)
            raise TransportError(
                f"Indexer returned HTTP {status} for {path}",
                path=path,
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            logger.warning("indexer_request_failed", path=path, error=str(e))
            raise TransportError(f"Indexer request to {path} failed: {e}", path=path) from e
        try:
            return resp.json()
        except ValueError as e:
            logger.warning("indexer_response_not_json", path=path, status_code=resp.status_code)
            raise TransportError(
                f"Indexer response for {path} is not valid JSON",
                path=path,
                status_code=resp.status_code,
            ) from e
