"""
Environment variable loading and validation for ton_history.

- TONHTTPAPI_V3_MAINNET_API_URL: mainnet indexer base URL (default: toncenter v3)
- TONHTTPAPI_V3_TESTNET_API_URL: testnet indexer base URL (default: testnet toncenter v3)
- TONHTTPAPI_MAINNET_KEY / TONHTTPAPI_TESTNET_KEY: API keys sent as X-Api-Key (optional)
- TONHTTPAPI_API_HEADERS: JSON object of extra headers added to every request (optional)
- TONHTTPAPI_TIMEOUT_SEC: per-request timeout in seconds (default: 15)
- Loads .env from project root when available.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from dotenv import load_dotenv

from ton_history.config.settings import (
    DEFAULT_MAINNET_API_URL,
    DEFAULT_REQUEST_TIMEOUT_SEC,
    DEFAULT_TESTNET_API_URL,
    IndexerSettings,
)
from ton_history.core.exceptions import ConfigError

# Project root: config is ton_history/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_ROOT = _CONFIG_DIR.parent.parent
_ENV_PATH = _ROOT / ".env"


def load_history_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides set variables."""
    load_dotenv(_ENV_PATH)


def _parse_api_headers(raw: str) -> dict[str, str]:
    if not raw:
        return {}
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"TONHTTPAPI_API_HEADERS is not valid JSON: {e}") from e
    if not isinstance(value, dict):
        raise ConfigError("TONHTTPAPI_API_HEADERS must be a JSON object")
    return {str(k): str(v) for k, v in value.items()}


def _parse_timeout(raw: str) -> float:
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT_SEC
    try:
        timeout = float(raw)
    except ValueError as e:
        raise ConfigError(f"TONHTTPAPI_TIMEOUT_SEC must be a number, got {raw!r}") from e
    if timeout <= 0:
        raise ConfigError("TONHTTPAPI_TIMEOUT_SEC must be positive")
    return timeout


def load_settings_from_env() -> IndexerSettings:
    """Build IndexerSettings from the environment (after loading .env)."""
    load_history_env()
    return IndexerSettings(
        mainnet_api_url=(os.getenv("TONHTTPAPI_V3_MAINNET_API_URL") or "").strip() or DEFAULT_MAINNET_API_URL,
        testnet_api_url=(os.getenv("TONHTTPAPI_V3_TESTNET_API_URL") or "").strip() or DEFAULT_TESTNET_API_URL,
        mainnet_api_key=(os.getenv("TONHTTPAPI_MAINNET_KEY") or "").strip() or None,
        testnet_api_key=(os.getenv("TONHTTPAPI_TESTNET_KEY") or "").strip() or None,
        api_headers=_parse_api_headers((os.getenv("TONHTTPAPI_API_HEADERS") or "").strip()),
        request_timeout_sec=_parse_timeout((os.getenv("TONHTTPAPI_TIMEOUT_SEC") or "").strip()),
    )
