"""Pools with known state for quoting tests."""

from __future__ import annotations

import pytest
from eth_utils import to_checksum_address

from yieldquote.interface import QuoteInterface, StaticPoolProvider, StaticVaultProvider

FIXED_NOW = 1_700_000_000
ONE_YEAR = 31_536_000
HALF_YEAR = 15_768_000

POOL_ID = bytes.fromhex("aa" * 32)
BASE_ADDRESS = to_checksum_address("0x" + "11" * 20)
BOND_ADDRESS = to_checksum_address("0x" + "22" * 20)
OTHER_ADDRESS = to_checksum_address("0x" + "33" * 20)


def make_static_pool(
    base_reserves: int = 1_000_000 * 10**6,
    bond_reserves: int = 500_000 * 10**6,
    total_supply: int = 200_000 * 10**18,
    expiration: int = FIXED_NOW + HALF_YEAR,
    decimals: int = 6,
    unit_seconds: int = ONE_YEAR,
    bond_first: bool = False,
) -> StaticPoolProvider:
    """Build an in-memory pool; the vault lists the bond first if `bond_first`."""
    # pylint: disable=too-many-arguments
    if bond_first:
        tokens = (BOND_ADDRESS, BASE_ADDRESS)
        balances = (bond_reserves, base_reserves)
    else:
        tokens = (BASE_ADDRESS, BOND_ADDRESS)
        balances = (base_reserves, bond_reserves)
    return StaticPoolProvider(
        pool_identifier=POOL_ID,
        base=BASE_ADDRESS,
        bond=BOND_ADDRESS,
        reserve_provider=StaticVaultProvider(pool_tokens={POOL_ID: (tokens, balances)}),
        supply=total_supply,
        maturity=expiration,
        decimals=decimals,
        unit_period=unit_seconds,
    )


@pytest.fixture(scope="function")
def half_year_pool() -> StaticPoolProvider:
    """A 6-decimal pool half a year from maturity with a one year unit period.

    Returns
    -------
    StaticPoolProvider
        1,000,000 base and 500,000 bonds in the vault plus 200,000 outstanding supply.
    """
    return make_static_pool()


@pytest.fixture(scope="function")
def quote_interface() -> QuoteInterface:
    """A quote interface whose clock is fixed at FIXED_NOW."""
    return QuoteInterface(clock=lambda: FIXED_NOW)
