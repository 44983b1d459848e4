"""
Canonical transaction model produced by the indexer adapter.

One TransactionRecord per value transfer; a ledger event with several
outbound messages yields several records sharing timestamp, fee and base id.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ton_history.config.settings import Network

TONCOIN_ASSET_ID = "toncoin"

AddressBook = dict[str, str]
"""Raw address -> human-readable form, scoped to one query."""


class Direction(str, Enum):
    INCOMING = "incoming"
    OUTGOING = "outgoing"


@dataclass(frozen=True)
class TransactionRecord:
    """
    Normalized transfer of the native coin into or out of a queried account.

    Built fresh per call by parse_raw_transaction; owned by the caller.
    """

    tx_id: str
    """Composite "lt:hash" id, suffixed ":N" for the N-th (N >= 2) output of an event."""
    timestamp_ms: int
    direction: Direction
    counterparty_from: str | None
    """Human-readable source address (address book form)."""
    counterparty_to: str | None
    """Human-readable destination address (address book form)."""
    normalized_counterparty: str | None
    """The other party as bounceable base64, independent of the address book."""
    amount: int
    """Nanotons; positive incoming, negative outgoing."""
    fee: int
    """Total fee of the enclosing event, repeated on every output."""
    inbound_message_hash: str | None = None
    should_hide: bool = False
    """Set when the compute phase exited non-zero."""
    asset_id: str = TONCOIN_ASSET_ID
    extra_data: dict[str, Any] = field(default_factory=dict)

    @property
    def is_incoming(self) -> bool:
        return self.direction is Direction.INCOMING

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict with unset (None) fields omitted."""
        out: dict[str, Any] = {
            "tx_id": self.tx_id,
            "timestamp_ms": self.timestamp_ms,
            "direction": self.direction.value,
            "counterparty_from": self.counterparty_from,
            "counterparty_to": self.counterparty_to,
            "normalized_counterparty": self.normalized_counterparty,
            "amount": self.amount,
            "asset_id": self.asset_id,
            "fee": self.fee,
            "inbound_message_hash": self.inbound_message_hash,
            "should_hide": self.should_hide,
        }
        extra = {k: v for k, v in self.extra_data.items() if v is not None}
        if extra:
            out["extra_data"] = extra
        return {k: v for k, v in out.items() if v is not None}


__all__ = [
    "AddressBook",
    "Direction",
    "Network",
    "TONCOIN_ASSET_ID",
    "TransactionRecord",
]
