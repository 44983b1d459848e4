"""
Address resolver: raw addresses -> human-readable form via /addressBook.

Large inputs are split into batches of ADDRESS_BOOK_CHUNK_SIZE and all
batches are requested concurrently; one failed batch fails the whole lookup.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

from ton_history.core.exceptions import AddressLookupError
from ton_history.history_logging import get_logger
from ton_history.indexer.client import IndexerClient
from ton_history.indexer.models import AddressBook, Network
from ton_history.indexer.schemas import AddressBookResponse, validate_response
from ton_history.utils.iteratees import split, unique

logger = get_logger(__name__)

ADDRESS_BOOK_PATH = "/addressBook"
ADDRESS_BOOK_CHUNK_SIZE = 128


async def _fetch_chunk(
    client: IndexerClient,
    network: Network | str,
    chunk: list[str],
) -> AddressBook:
    data = await client.call(network, ADDRESS_BOOK_PATH, {"address": chunk})
    return validate_response(AddressBookResponse, data, path=ADDRESS_BOOK_PATH).to_mapping()


async def fetch_address_book(
    client: IndexerClient,
    network: Network | str,
    addresses: Iterable[str],
) -> AddressBook:
    """Resolve addresses in concurrent batches and merge into one mapping."""
    chunks = split(unique(addresses), ADDRESS_BOOK_CHUNK_SIZE)
    if not chunks:
        return {}

    tasks = [asyncio.ensure_future(_fetch_chunk(client, network, chunk)) for chunk in chunks]
    try:
        results = await asyncio.gather(*tasks)
    except BaseException:
        # First failure wins; no batch may outlive the call.
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    address_book: AddressBook = {}
    for result in results:
        address_book.update(result)
    logger.info(
        "address_book_fetched",
        network=Network(network).value,
        batch_count=len(chunks),
        entry_count=len(address_book),
    )
    return address_book


async def fix_address_format(
    client: IndexerClient,
    network: Network | str,
    address: str,
) -> str:
    """
    Return the indexer's human-readable form of a single address.

    Expects the /addressBook shape {address: {"user_friendly": ..., "domain": ...}}.
    """
    data = await client.call(network, ADDRESS_BOOK_PATH, {"address": address})
    address_book = validate_response(AddressBookResponse, data, path=ADDRESS_BOOK_PATH).to_mapping()
    try:
        return address_book[address]
    except KeyError:
        logger.warning("address_lookup_missing", network=Network(network).value, address=address)
        raise AddressLookupError(address) from None
