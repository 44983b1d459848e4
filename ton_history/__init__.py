"""
ton_history: transaction-history sync adapter for TON accounts.

Reads account transactions and address books from a TON HTTP API v3
indexer and normalizes them into TransactionRecord values. Polling,
deduplication and persistence are left to the caller.
"""

__version__ = "0.1.0"
