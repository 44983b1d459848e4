"""
Raw v3 transaction -> TransactionRecord list.

Pure functions: no I/O and no logging, so the splitting rules can be tested
directly. An event is incoming when its inbound message has a source; then
only that message is used. Otherwise the outbound messages are used, in the
order the indexer lists them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import NamedTuple

from ton_history.core.exceptions import AddressLookupError
from ton_history.indexer.models import Direction, Network, TransactionRecord
from ton_history.indexer.schemas import RawMessage, RawTransaction
from ton_history.utils.address import to_base64_address


class TxIdParts(NamedTuple):
    lt: str
    hash: str
    output_index: int | None = None


def stringify_tx_id(lt: str | int, hash: str, index: int | None = None) -> str:
    """Build a composite id; index is the 1-based output number, omitted for the first."""
    base = f"{lt}:{hash}"
    if index is None or index == 1:
        return base
    return f"{base}:{index}"


def parse_tx_id(tx_id: str) -> TxIdParts:
    """Inverse of stringify_tx_id. Raises ValueError on malformed ids."""
    parts = tx_id.split(":")
    if len(parts) == 2 and all(parts):
        return TxIdParts(parts[0], parts[1])
    if len(parts) == 3 and all(parts) and parts[2].isdigit():
        return TxIdParts(parts[0], parts[1], int(parts[2]))
    raise ValueError(f"Malformed transaction id: {tx_id!r}")


def ms_to_sec(ms: int) -> int:
    """Milliseconds to seconds, truncating toward zero."""
    return ms // 1000 if ms >= 0 else -((-ms) // 1000)


def _resolve(address_book: Mapping[str, str], address: str | None) -> str | None:
    if not address:
        return None
    try:
        return address_book[address]
    except KeyError:
        raise AddressLookupError(address) from None


def _relevant_messages(raw_tx: RawTransaction) -> tuple[bool, list[RawMessage]]:
    in_msg = raw_tx.in_msg
    if in_msg is not None and in_msg.source:
        return True, [in_msg]
    return False, list(raw_tx.out_msgs)


def _extra_data(msg: RawMessage) -> dict[str, str]:
    if msg.message_content is None or msg.message_content.body is None:
        return {}
    return {"body": msg.message_content.body}


def parse_raw_transaction(
    network: Network | str,
    raw_tx: RawTransaction,
    address_book: Mapping[str, str],
) -> list[TransactionRecord]:
    """
    Split one ledger event into one record per relevant message.

    Raises AddressLookupError when a message endpoint is missing from address_book.
    """
    is_incoming, msgs = _relevant_messages(raw_tx)
    if not msgs:
        return []

    direction = Direction.INCOMING if is_incoming else Direction.OUTGOING
    timestamp_ms = raw_tx.now * 1000
    in_msg_hash = raw_tx.in_msg.hash if raw_tx.in_msg is not None else None
    should_hide = bool(raw_tx.exit_code)
    is_multi = len(msgs) > 1

    def to_record(i: int, msg: RawMessage) -> TransactionRecord:
        counterparty = msg.source if is_incoming else msg.destination
        value = msg.value or 0
        return TransactionRecord(
            tx_id=stringify_tx_id(raw_tx.lt, raw_tx.hash, i + 1 if is_multi else None),
            timestamp_ms=timestamp_ms,
            direction=direction,
            counterparty_from=_resolve(address_book, msg.source),
            counterparty_to=_resolve(address_book, msg.destination),
            normalized_counterparty=(
                to_base64_address(counterparty, True, network) if counterparty else None
            ),
            amount=value if is_incoming else -value,
            fee=raw_tx.total_fees,
            inbound_message_hash=in_msg_hash,
            should_hide=should_hide,
            extra_data=_extra_data(msg),
        )

    return [to_record(i, msg) for i, msg in enumerate(msgs)]
