"""Quote pipeline stages behind the QuoteInterface API."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from eth_utils import to_checksum_address
from fixedpointmath import FixedPoint

from yieldquote.errors import InsufficientLiquidity, QuoteError, QuoteStage, SnapshotFetchError
from yieldquote.fixedpoint import from_fixed_point, to_fixed_point
from yieldquote.pricing import get_yield_exponent, solve_trade_invariant
from yieldquote.state import PoolSnapshot, TradeSpec

if TYPE_CHECKING:
    from web3.types import BlockIdentifier

    from .providers import PoolMetadataProvider


@contextmanager
def _quote_stage(stage: QuoteStage) -> Iterator[None]:
    """Tag quote errors leaving the block with the stage that raised them."""
    try:
        yield
    except QuoteError as err:
        if err.stage is None:
            err.stage = stage
        if isinstance(err, InsufficientLiquidity):
            logging.debug("Quote failed during %s: %s", err.stage.value, repr(err))
        else:
            logging.warning("Quote failed during %s: %s", err.stage.value, repr(err))
        raise


def _find_token_index(tokens: list[str], token_address: str, name: str) -> int:
    checksum_address = to_checksum_address(token_address)
    for index, token in enumerate(tokens):
        if to_checksum_address(token) == checksum_address:
            return index
    raise SnapshotFetchError(f"{name} asset {checksum_address} is not one of the vault's pool tokens {tokens}")


def _get_pool_details(pool: PoolMetadataProvider, block_identifier: BlockIdentifier | None = None) -> PoolSnapshot:
    """See API for documentation."""
    try:
        block_number, block_timestamp = pool.resolve_block(block_identifier)
        # Pin every read to one block so the snapshot is consistent
        read_block = block_number if block_number is not None else block_identifier
        pool_id = pool.pool_id(read_block)
        base_address = pool.base_address(read_block)
        bond_address = pool.bond_address(read_block)
        tokens, balances = pool.vault(read_block).get_pool_tokens(pool_id, read_block)
        tokens = list(tokens)
        base_index = _find_token_index(tokens, base_address, "base")
        bond_index = _find_token_index(tokens, bond_address, "bond")
        snapshot = PoolSnapshot(
            base_reserves=int(balances[base_index]),
            bond_reserves=int(balances[bond_index]),
            total_supply=pool.total_supply(read_block),
            expiration=pool.expiration(read_block),
            token_decimals=pool.underlying_decimals(read_block),
            unit_seconds=pool.unit_seconds(read_block),
            pool_id=pool_id,
            base_address=base_address,
            bond_address=bond_address,
            vault_address=pool.vault_address(read_block),
            block_number=block_number,
            block_timestamp=block_timestamp,
        )
    except QuoteError as err:
        if isinstance(err, SnapshotFetchError):
            err.block_identifier = block_identifier
        raise
    # Collaborator failures are wrapped so the caller sees which stage failed
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise SnapshotFetchError(
            f"Failed to read the pool snapshot: {repr(exc)}", orig_exception=exc, block_identifier=block_identifier
        ) from exc
    logging.debug("Read pool snapshot %s", snapshot.to_dict())
    return snapshot


def _calc_swap(snapshot: PoolSnapshot, trade: TradeSpec, now: int) -> int:
    """See API for documentation."""
    with _quote_stage(QuoteStage.NORMALIZE):
        base_reserves = snapshot.normalized_base_reserves
        bond_reserves = snapshot.normalized_bond_reserves
        amount = to_fixed_point(trade.amount, snapshot.token_decimals)
    if trade.base_asset_in:
        x_reserves, y_reserves = base_reserves, bond_reserves
    else:
        x_reserves, y_reserves = bond_reserves, base_reserves
    with _quote_stage(QuoteStage.YIELD_EXPONENT):
        a = get_yield_exponent(snapshot.expiration, snapshot.unit_seconds, now)
    with _quote_stage(QuoteStage.SOLVE_INVARIANT):
        if not trade.wants_exact_out:
            # amount in, solve for amount out
            result = solve_trade_invariant(amount, x_reserves, y_reserves, a, out=True)
        else:
            # amount out, solve for amount in by letting the output side absorb the amount
            result = solve_trade_invariant(amount, y_reserves, x_reserves, a, out=False)
    with _quote_stage(QuoteStage.NORMALIZE):
        quote = from_fixed_point(result, snapshot.token_decimals)
    logging.debug(
        "Quoted base_asset_in=%s wants_exact_out=%s amount=%s with a=%s at %s: %s",
        trade.base_asset_in,
        trade.wants_exact_out,
        FixedPoint(scaled_value=amount),
        FixedPoint(scaled_value=a),
        now,
        FixedPoint(scaled_value=result),
    )
    return quote
