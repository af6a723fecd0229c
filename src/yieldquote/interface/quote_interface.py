"""Read-only quoting API for fixed-maturity YieldSpace pools."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Callable

from yieldquote.errors import QuoteStage
from yieldquote.pricing import get_yield_exponent, solve_trade_invariant
from yieldquote.state import PoolSnapshot, TradeSpec

from ._quote_calls import _calc_swap, _get_pool_details, _quote_stage

if TYPE_CHECKING:
    from web3.types import BlockIdentifier

    from .providers import PoolMetadataProvider

# pylint: disable=too-many-arguments
# ruff: noqa: PLR0913


def _wall_clock() -> int:
    return int(time.time())


class QuoteInterface:
    """Read-only end-point API for quoting trades against a fixed-maturity YieldSpace pool.

    Every quote is computed from a single pool snapshot and a single reading of the current time.
    The interface holds no pool state, so one instance can serve any number of pools and threads.
    """

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        """Initialize the QuoteInterface API.

        Arguments
        ---------
        clock: Callable[[], int], optional
            Returns the current unix time in seconds. Only consulted when neither the caller
            nor the snapshot provide a time. Defaults to the system wall clock.
        """
        self.clock = clock if clock is not None else _wall_clock

    def get_pool_details(
        self, pool: PoolMetadataProvider, block_identifier: BlockIdentifier | None = None
    ) -> PoolSnapshot:
        """Read a consistent snapshot of the pool.

        Arguments
        ---------
        pool: PoolMetadataProvider
            The pool to read.
        block_identifier: BlockIdentifier, optional
            The block to read at. Defaults to the latest block.

        Returns
        -------
        PoolSnapshot
            Reserves and metadata, all read at the same block.
        """
        with _quote_stage(QuoteStage.FETCH_SNAPSHOT):
            return _get_pool_details(pool, block_identifier)

    def calculate_swap(
        self,
        pool: PoolMetadataProvider,
        amount: int,
        base_asset_in: bool,
        out: bool,
        block_identifier: BlockIdentifier | None = None,
        now: int | None = None,
    ) -> int:
        """Quote a trade against the pool.

        Arguments
        ---------
        pool: PoolMetadataProvider
            The pool to quote against.
        amount: int
            The trade amount in the pool's native token decimals.
        base_asset_in: bool
            True if the trader supplies the base asset and receives bonds.
        out: bool
            True if `amount` is the input and the quote is the output.
            False if `amount` is the desired output and the quote is the required input.
        block_identifier: BlockIdentifier, optional
            The block to read the pool at. Defaults to the latest block.
        now: int, optional
            Unix time to price at. Defaults to the snapshot's block time, then the clock.

        Returns
        -------
        int
            The quoted amount in the pool's native token decimals.
        """
        snapshot = self.get_pool_details(pool, block_identifier)
        return self.calculate_swap_for_snapshot(snapshot, amount, base_asset_in, out, now)

    def calculate_swap_for_snapshot(
        self, snapshot: PoolSnapshot, amount: int, base_asset_in: bool, out: bool, now: int | None = None
    ) -> int:
        """Quote a trade against a snapshot the caller already holds.

        See `calculate_swap` for the arguments.
        """
        trade = TradeSpec(amount=amount, base_asset_in=base_asset_in, wants_exact_out=not out)
        if now is None:
            now = snapshot.block_timestamp if snapshot.block_timestamp is not None else self.clock()
        return _calc_swap(snapshot, trade, now)

    @staticmethod
    def get_yield_exponent(expiration: int, unit_seconds: int, now: int | None = None) -> int:
        """See `yieldquote.pricing.get_yield_exponent`."""
        return get_yield_exponent(expiration, unit_seconds, now)

    @staticmethod
    def solve_trade_invariant(amount_x: int, reserve_x: int, reserve_y: int, a: int, out: bool) -> int:
        """See `yieldquote.pricing.solve_trade_invariant`."""
        return solve_trade_invariant(amount_x, reserve_x, reserve_y, a, out)
