"""
Transaction fetcher: one /transactions page -> flat list of TransactionRecord.

Time bounds arrive in milliseconds and are sent as whole seconds. Exclusive
bounds shift by one second inward. Results keep the indexer's descending
order; endpoints are resolved only through the address book returned in the
same response.
"""

from __future__ import annotations

from collections.abc import Sequence

from ton_history.history_logging import bind_account
from ton_history.indexer.client import IndexerClient
from ton_history.indexer.models import Network, TransactionRecord
from ton_history.indexer.parser import ms_to_sec, parse_raw_transaction, stringify_tx_id
from ton_history.indexer.schemas import TransactionsResponse, validate_response

TRANSACTIONS_PATH = "/transactions"


def _time_bound(ms: int | None, include: bool, shift: int) -> int | None:
    if ms is None:
        return None
    sec = ms_to_sec(ms)
    return sec if include else sec + shift


async def fetch_transactions(
    client: IndexerClient,
    network: Network | str,
    address: str | Sequence[str],
    limit: int,
    from_time_ms: int | None = None,
    to_time_ms: int | None = None,
    include_from: bool = False,
    include_to: bool = False,
) -> list[TransactionRecord]:
    """
    Fetch up to limit ledger events for address(es) and normalize them.

    limit bounds events, not records; multi-output events yield several
    records. Raises TransportError, ResponseSchemaError or AddressLookupError.
    """
    if limit <= 0:
        raise ValueError("limit must be positive")
    accounts = [address] if isinstance(address, str) else list(address)
    if not accounts:
        raise ValueError("at least one address is required")
    log = bind_account(accounts if len(accounts) > 1 else accounts[0])

    data = await client.call(network, TRANSACTIONS_PATH, {
        "account": accounts,
        "limit": limit,
        "start_utime": _time_bound(from_time_ms, include_from, 1),
        "end_utime": _time_bound(to_time_ms, include_to, -1),
        "sort": "desc",
    })
    page = validate_response(TransactionsResponse, data, path=TRANSACTIONS_PATH)

    if not page.transactions:
        log.debug("transactions_empty", network=Network(network).value)
        return []

    address_book = {raw: entry.user_friendly for raw, entry in page.address_book.items()}
    records = [
        record
        for raw_tx in page.transactions
        for record in parse_raw_transaction(network, raw_tx, address_book)
    ]
    log.info(
        "transactions_fetched",
        network=Network(network).value,
        event_count=len(page.transactions),
        record_count=len(records),
    )
    return records


async def fetch_latest_transaction_id(
    client: IndexerClient,
    network: Network | str,
    address: str,
) -> str | None:
    """Return the composite id of the newest event for address, or None if it has no history."""
    data = await client.call(network, TRANSACTIONS_PATH, {
        "account": address,
        "limit": 1,
        "sort": "desc",
    })
    page = validate_response(TransactionsResponse, data, path=TRANSACTIONS_PATH)
    if not page.transactions:
        return None
    latest = page.transactions[0]
    return stringify_tx_id(latest.lt, latest.hash)
