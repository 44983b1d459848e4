"""
Adapter-level exceptions.

Every failure the indexer adapter surfaces is an IndexerError subclass so
callers can decide on retry or degraded display by type:

- TransportError: the remote call failed or did not return JSON.
- ResponseSchemaError: JSON arrived but did not match the expected shape.
- AddressLookupError: an address book did not contain a referenced address.
"""

from __future__ import annotations


class IndexerError(Exception):
    """Base class for errors raised by ton_history."""


class ConfigError(IndexerError, ValueError):
    """A configuration value is missing or malformed."""


class TransportError(IndexerError):
    """Remote query failed: connection error, timeout, non-2xx status or undecodable body."""

    def __init__(self, message: str, *, path: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.status_code = status_code


class ResponseSchemaError(TransportError):
    """Decoded response does not match the expected schema."""


class AddressLookupError(IndexerError, LookupError):
    """Address is absent from an address book that should contain it."""

    def __init__(self, address: str) -> None:
        super().__init__(f"Address not found in address book: {address}")
        self.address = address


class InvalidAddressError(IndexerError, ValueError):
    """Address string cannot be parsed as a TON address."""

    def __init__(self, address: str, reason: str = "") -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid TON address {address!r}{detail}")
        self.address = address
