"""Capabilities the quote interface needs from a pool data source."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence

from web3.types import BlockIdentifier


class ReserveProvider(Protocol):
    """Anything that reports the token balances a vault holds for a pool."""

    def get_pool_tokens(
        self, pool_id: bytes, block_identifier: BlockIdentifier | None = None
    ) -> tuple[Sequence[str], Sequence[int]]:
        """Return the pool's token addresses and their balances, in matching provider-defined order."""
        ...


class PoolMetadataProvider(Protocol):
    """Anything that reports the metadata of a fixed-maturity pool."""

    # pylint: disable=missing-function-docstring

    def resolve_block(self, block_identifier: BlockIdentifier | None = None) -> tuple[int | None, int | None]:
        """Pin the block to read at.

        Returns the block number and timestamp, or (None, None) for sources without blocks.
        """
        ...

    def pool_id(self, block_identifier: BlockIdentifier | None = None) -> bytes: ...

    def base_address(self, block_identifier: BlockIdentifier | None = None) -> str: ...

    def bond_address(self, block_identifier: BlockIdentifier | None = None) -> str: ...

    def vault_address(self, block_identifier: BlockIdentifier | None = None) -> str: ...

    def total_supply(self, block_identifier: BlockIdentifier | None = None) -> int: ...

    def expiration(self, block_identifier: BlockIdentifier | None = None) -> int: ...

    def underlying_decimals(self, block_identifier: BlockIdentifier | None = None) -> int: ...

    def unit_seconds(self, block_identifier: BlockIdentifier | None = None) -> int: ...

    def vault(self, block_identifier: BlockIdentifier | None = None) -> ReserveProvider:
        """Return the reserve provider that holds this pool's balances, as of `block_identifier`."""
        ...


@dataclass(frozen=True)
class StaticVaultProvider:
    """A vault whose balances are fixed in memory."""

    pool_tokens: dict[bytes, tuple[tuple[str, ...], tuple[int, ...]]] = field(default_factory=dict)

    def get_pool_tokens(
        self, pool_id: bytes, block_identifier: BlockIdentifier | None = None
    ) -> tuple[Sequence[str], Sequence[int]]:
        """Return the stored tokens and balances; the block identifier is ignored."""
        _ = block_identifier
        if pool_id not in self.pool_tokens:
            raise KeyError(f"pool {pool_id.hex()} is not registered with the vault")
        return self.pool_tokens[pool_id]


# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class StaticPoolProvider:
    """Pool metadata fixed in memory, for offline quoting against known state."""

    # pylint: disable=missing-function-docstring

    pool_identifier: bytes
    base: str
    bond: str
    reserve_provider: StaticVaultProvider
    supply: int
    maturity: int
    decimals: int
    unit_period: int
    vault_address_: str = "0x0000000000000000000000000000000000000000"

    def resolve_block(self, block_identifier: BlockIdentifier | None = None) -> tuple[int | None, int | None]:
        _ = block_identifier
        return None, None

    def pool_id(self, block_identifier: BlockIdentifier | None = None) -> bytes:
        return self.pool_identifier

    def base_address(self, block_identifier: BlockIdentifier | None = None) -> str:
        return self.base

    def bond_address(self, block_identifier: BlockIdentifier | None = None) -> str:
        return self.bond

    def vault_address(self, block_identifier: BlockIdentifier | None = None) -> str:
        return self.vault_address_

    def total_supply(self, block_identifier: BlockIdentifier | None = None) -> int:
        return self.supply

    def expiration(self, block_identifier: BlockIdentifier | None = None) -> int:
        return self.maturity

    def underlying_decimals(self, block_identifier: BlockIdentifier | None = None) -> int:
        return self.decimals

    def unit_seconds(self, block_identifier: BlockIdentifier | None = None) -> int:
        return self.unit_period

    def vault(self, block_identifier: BlockIdentifier | None = None) -> StaticVaultProvider:
        return self.reserve_provider
