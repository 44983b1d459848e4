"""
TON HTTP API v3 indexer adapter.

Fetches one page of account transactions, normalizes each ledger event into
TransactionRecord values, and resolves raw addresses through the indexer's
address book.
"""

from ton_history.indexer.address_book import (
    ADDRESS_BOOK_CHUNK_SIZE,
    fetch_address_book,
    fix_address_format,
)
from ton_history.indexer.client import IndexerClient
from ton_history.indexer.models import (
    TONCOIN_ASSET_ID,
    AddressBook,
    Direction,
    Network,
    TransactionRecord,
)
from ton_history.indexer.parser import (
    TxIdParts,
    parse_raw_transaction,
    parse_tx_id,
    stringify_tx_id,
)
from ton_history.indexer.transactions import (
    fetch_latest_transaction_id,
    fetch_transactions,
)

__all__ = [
    "ADDRESS_BOOK_CHUNK_SIZE",
    "TONCOIN_ASSET_ID",
    "AddressBook",
    "Direction",
    "IndexerClient",
    "Network",
    "TransactionRecord",
    "TxIdParts",
    "fetch_address_book",
    "fetch_latest_transaction_id",
    "fetch_transactions",
    "fix_address_format",
    "parse_raw_transaction",
    "parse_tx_id",
    "stringify_tx_id",
]
