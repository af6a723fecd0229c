"""Point-in-time state of a pool used to compute a single quote."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fixedpointmath import FixedPoint

from yieldquote.fixedpoint import FixedPointIntegerMath, to_fixed_point

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class PoolSnapshot:
    r"""A consistent read of every pool variable needed for one quote."""

    base_reserves: int
    """Base asset held by the vault for the pool, in native token decimals."""
    bond_reserves: int
    """Bond asset held by the vault for the pool, in native token decimals."""
    total_supply: int
    """Outstanding pool supply in 18-decimal fixed point; counts as bond-side liquidity."""
    expiration: int
    """Unix timestamp at which the pool matures."""
    token_decimals: int
    """Native decimals shared by the base and bond assets."""
    unit_seconds: int
    """Seconds over which the curve fully linearizes."""
    pool_id: bytes | None = None
    base_address: str | None = None
    bond_address: str | None = None
    vault_address: str | None = None
    block_number: int | None = None
    """The block the snapshot was read at, or None for sources without blocks."""
    block_timestamp: int | None = None
    """The timestamp of `block_number`, or None for sources without blocks."""

    @property
    def normalized_base_reserves(self) -> int:
        """Base reserves in 18-decimal fixed point."""
        return to_fixed_point(self.base_reserves, self.token_decimals)

    @property
    def normalized_bond_reserves(self) -> int:
        """Effective bond reserves in 18-decimal fixed point.

        Bond tokens are redeemable claims, so the outstanding supply is tradeable alongside the vault balance.
        """
        return FixedPointIntegerMath.add(to_fixed_point(self.bond_reserves, self.token_decimals), self.total_supply)

    def to_dict(self) -> dict[str, Any]:
        """Summarize the snapshot with human readable fixed-point values."""
        return {
            "pool_id": "0x" + self.pool_id.hex() if self.pool_id is not None else None,
            "block_number": self.block_number,
            "block_timestamp": self.block_timestamp,
            "base_reserves": str(FixedPoint(scaled_value=self.normalized_base_reserves)),
            "bond_reserves": str(FixedPoint(scaled_value=to_fixed_point(self.bond_reserves, self.token_decimals))),
            "total_supply": str(FixedPoint(scaled_value=self.total_supply)),
            "expiration": self.expiration,
            "unit_seconds": self.unit_seconds,
            "token_decimals": self.token_decimals,
        }


@dataclass(frozen=True)
class TradeSpec:
    r"""A requested trade against a pool."""

    amount: int
    """The trade amount in native token decimals."""
    base_asset_in: bool
    """True if the trader supplies the base asset."""
    wants_exact_out: bool
    """True if `amount` is the desired output, False if it is the supplied input."""

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError(f"TradeSpec: {self.amount=} must be non-negative")
