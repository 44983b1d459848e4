"""
Indexer settings.

An IndexerSettings value is built once (see config.env.load_settings_from_env)
and injected into IndexerClient; nothing below the client reads the process
environment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_MAINNET_API_URL = "https://toncenter.com/api/v3"
DEFAULT_TESTNET_API_URL = "https://testnet.toncenter.com/api/v3"
DEFAULT_REQUEST_TIMEOUT_SEC = 15.0


class Network(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"


@dataclass(frozen=True)
class IndexerSettings:
    """Per-network base URLs and API keys, plus headers added to every request."""

    mainnet_api_url: str = DEFAULT_MAINNET_API_URL
    testnet_api_url: str = DEFAULT_TESTNET_API_URL
    mainnet_api_key: str | None = None
    testnet_api_key: str | None = None
    api_headers: dict[str, str] = field(default_factory=dict)
    request_timeout_sec: float = DEFAULT_REQUEST_TIMEOUT_SEC

    def base_url_for(self, network: Network | str) -> str:
        if Network(network) is Network.TESTNET:
            return self.testnet_api_url.rstrip("/")
        return self.mainnet_api_url.rstrip("/")

    def api_key_for(self, network: Network | str) -> str | None:
        """Return the key for network, or None when unset or blank."""
        key = self.testnet_api_key if Network(network) is Network.TESTNET else self.mainnet_api_key
        key = (key or "").strip()
        return key or None


_settings: IndexerSettings | None = None


def get_settings() -> IndexerSettings:
    """
    Return settings loaded from the environment, cached after the first call.

    Callers that need isolation (tests, multi-tenant services) should build
    IndexerSettings directly instead.
    """
    global _settings
    if _settings is None:
        from ton_history.config.env import load_settings_from_env

        _settings = load_settings_from_env()
    return _settings


def reset_settings_for_test() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
