"""TON address normalization utilities."""

from __future__ import annotations

from pytoniq_core.boc.address import Address, AddressError

from ton_history.config.settings import Network
from ton_history.core.exceptions import InvalidAddressError


def to_base64_address(
    address: str,
    bounceable: bool = True,
    network: Network | str = Network.MAINNET,
) -> str:
    """
    Render any TON address form (raw "0:<hex>" or user-friendly) as URL-safe base64.

    The testnet flag is set for testnet so the result is stable per network,
    independent of how the indexer's address book chooses to render it.
    """
    try:
        parsed = Address(address.strip())
    except (AddressError, ValueError) as e:
        raise InvalidAddressError(address, str(e)) from e
    return parsed.to_str(
        is_user_friendly=True,
        is_url_safe=True,
        is_bounceable=bounceable,
        is_test_only=Network(network) is Network.TESTNET,
    )
