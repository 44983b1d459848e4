"""
Tests for TON address normalization (utils.address) and sequence helpers.
"""

from __future__ import annotations

import pytest

from payloads import PEER_A
from ton_history.config.settings import Network
from ton_history.core.exceptions import InvalidAddressError
from ton_history.utils.address import to_base64_address
from ton_history.utils.iteratees import split, unique


def test_raw_to_bounceable_mainnet():
    friendly = to_base64_address(PEER_A, True, Network.MAINNET)
    assert len(friendly) == 48
    assert friendly.startswith("EQ")
    assert "+" not in friendly and "/" not in friendly


def test_non_bounceable_and_testnet_tags():
    assert to_base64_address(PEER_A, False, Network.MAINNET).startswith("UQ")
    assert to_base64_address(PEER_A, True, Network.TESTNET).startswith("kQ")


def test_any_input_form_gives_same_output():
    """Raw and already-friendly inputs for the same account normalize identically."""
    bounceable = to_base64_address(PEER_A, True, "mainnet")
    non_bounceable = to_base64_address(PEER_A, False, "mainnet")
    assert to_base64_address(non_bounceable, True, "mainnet") == bounceable
    assert to_base64_address(bounceable, True, "mainnet") == bounceable


def test_invalid_address():
    with pytest.raises(InvalidAddressError) as exc_info:
        to_base64_address("not-an-address")
    assert exc_info.value.address == "not-an-address"
    assert isinstance(exc_info.value, ValueError)


def test_split():
    assert split([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert split([], 3) == []
    with pytest.raises(ValueError):
        split([1], 0)


def test_unique_keeps_first_seen_order():
    assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
