"""
Core utilities: the typed error hierarchy shared by the indexer client,
transaction fetcher and address resolver.
"""

from ton_history.core.exceptions import (
    AddressLookupError,
    ConfigError,
    IndexerError,
    InvalidAddressError,
    ResponseSchemaError,
    TransportError,
)

__all__ = [
    "AddressLookupError",
    "ConfigError",
    "IndexerError",
    "InvalidAddressError",
    "ResponseSchemaError",
    "TransportError",
]
