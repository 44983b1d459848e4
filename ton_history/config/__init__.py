"""
Configuration for the ton_history indexer adapter.

Settings are loaded from environment variables and an optional .env file,
then passed explicitly to IndexerClient.
"""

from ton_history.config.settings import IndexerSettings, Network, get_settings  # noqa: F401

__all__ = ["IndexerSettings", "Network", "get_settings"]
