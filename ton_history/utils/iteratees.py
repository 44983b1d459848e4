"""Small sequence helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def split(items: Iterable[T], size: int) -> list[list[T]]:
    """Partition items into consecutive chunks of at most size elements."""
    if size <= 0:
        raise ValueError("size must be positive")
    values = list(items)
    return [values[i:i + size] for i in range(0, len(values), size)]


def unique(items: Iterable[T]) -> list[T]:
    """Drop duplicates, keeping first-seen order."""
    return list(dict.fromkeys(items))
