"""Pool and vault reads from deployed contracts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from eth_utils import to_checksum_address
from web3 import Web3

from yieldquote.abi import POOL_ABI_NAME, VAULT_ABI_NAME, load_all_abis
from yieldquote.utils import DEFAULT_READ_RETRY_COUNT, is_transient_read_error, retry_call
from yieldquote.web3_setup import initialize_web3_with_http_provider

if TYPE_CHECKING:
    from web3.contract.contract import Contract
    from web3.types import BlockIdentifier

    from yieldquote.config import QuoteConfig


def smart_contract_read(
    contract: Contract,
    function_name: str,
    *fn_args,
    block_identifier: BlockIdentifier | None = None,
    read_retry_count: int | None = None,
) -> Any:
    """Call a view function of a contract, retrying failed reads.

    Arguments
    ---------
    contract: Contract
        The contract that we are reading from.
    function_name: str
        The name of the function to query.
    *fn_args: Any
        The arguments passed to the contract method.
    block_identifier: BlockIdentifier, optional
        The block to read at. Defaults to "latest".
    read_retry_count: int, optional
        The number of attempts. Defaults to 5.

    Returns
    -------
    Any
        The decoded return value of the call.
    """
    if read_retry_count is None:
        read_retry_count = DEFAULT_READ_RETRY_COUNT
    function = contract.get_function_by_name(function_name)(*fn_args)
    # reverts and undecodable outputs are raised on the first attempt
    return retry_call(
        read_retry_count, is_transient_read_error, function.call, block_identifier=block_identifier or "latest"
    )


class ContractVaultProvider:
    """Reserve reads from a deployed vault contract."""

    def __init__(self, web3: Web3, vault_address: str, abi: list, read_retry_count: int | None = None) -> None:
        self.web3 = web3
        self.vault_contract = web3.eth.contract(address=to_checksum_address(vault_address), abi=abi)
        self.read_retry_count = read_retry_count

    def get_pool_tokens(
        self, pool_id: bytes, block_identifier: BlockIdentifier | None = None
    ) -> tuple[Sequence[str], Sequence[int]]:
        """Return the pool's token addresses and balances as ordered by the vault."""
        tokens, balances, _ = smart_contract_read(
            self.vault_contract,
            "getPoolTokens",
            pool_id,
            block_identifier=block_identifier,
            read_retry_count=self.read_retry_count,
        )
        return [to_checksum_address(token) for token in tokens], [int(balance) for balance in balances]


class ContractPoolProvider:
    """Metadata reads from a deployed fixed-maturity pool contract."""

    # pylint: disable=missing-function-docstring

    def __init__(
        self,
        pool_address: str,
        rpc_uri: str | None = None,
        web3: Web3 | None = None,
        abi_dir: str | None = None,
        read_retry_count: int | None = None,
    ) -> None:
        """Initialize the provider.

        Arguments
        ---------
        pool_address: str
            The address of the deployed pool.
        rpc_uri: str, optional
            The URI to initialize the web3 provider. Not used if web3 is provided.
        web3: Web3, optional
            web3 provider object. If not given, one is constructed from `rpc_uri`.
        abi_dir: str, optional
            The directory holding the pool and vault ABIs. Defaults to the bundled ABIs.
        read_retry_count: int, optional
            The number of attempts for each contract read. Defaults to 5.
        """
        if web3 is None and rpc_uri is None:
            raise ValueError("Must provide either `web3` or `rpc_uri`")
        if web3 is None:
            assert rpc_uri is not None
            web3 = initialize_web3_with_http_provider(rpc_uri)
        self.web3 = web3
        self.abis = load_all_abis(abi_dir)
        for abi_name in (POOL_ABI_NAME, VAULT_ABI_NAME):
            if abi_name not in self.abis:
                raise AssertionError(f"{abi_name} ABI was not provided")
        self.pool_address = to_checksum_address(pool_address)
        self.pool_contract = web3.eth.contract(address=self.pool_address, abi=self.abis[POOL_ABI_NAME])
        self.read_retry_count = read_retry_count
        self._vault: ContractVaultProvider | None = None

    @classmethod
    def from_config(cls, config: QuoteConfig, web3: Web3 | None = None) -> ContractPoolProvider:
        """Build a provider for the pool named in the config."""
        if config.pool_address is None:
            raise ValueError("QuoteConfig.pool_address must be set to read a pool")
        return cls(
            pool_address=config.pool_address,
            rpc_uri=str(config.rpc_uri),
            web3=web3,
            abi_dir=config.abi_dir,
            read_retry_count=config.read_retry_count,
        )

    def _read(self, function_name: str, block_identifier: BlockIdentifier | None) -> Any:
        return smart_contract_read(
            self.pool_contract,
            function_name,
            block_identifier=block_identifier,
            read_retry_count=self.read_retry_count,
        )

    def resolve_block(self, block_identifier: BlockIdentifier | None = None) -> tuple[int | None, int | None]:
        """Look up the block so every read of a snapshot happens at the same block number."""
        block = retry_call(
            self.read_retry_count or DEFAULT_READ_RETRY_COUNT,
            is_transient_read_error,
            self.web3.eth.get_block,
            block_identifier or "latest",
        )
        block_number = block.get("number", None)
        block_timestamp = block.get("timestamp", None)
        if block_number is None or block_timestamp is None:
            raise AssertionError(f"Block {block_identifier} has no number or timestamp")
        return int(block_number), int(block_timestamp)

    def pool_id(self, block_identifier: BlockIdentifier | None = None) -> bytes:
        return bytes(self._read("getPoolId", block_identifier))

    def base_address(self, block_identifier: BlockIdentifier | None = None) -> str:
        return to_checksum_address(self._read("underlying", block_identifier))

    def bond_address(self, block_identifier: BlockIdentifier | None = None) -> str:
        return to_checksum_address(self._read("bond", block_identifier))

    def vault_address(self, block_identifier: BlockIdentifier | None = None) -> str:
        return to_checksum_address(self._read("getVault", block_identifier))

    def total_supply(self, block_identifier: BlockIdentifier | None = None) -> int:
        return int(self._read("totalSupply", block_identifier))

    def expiration(self, block_identifier: BlockIdentifier | None = None) -> int:
        return int(self._read("expiration", block_identifier))

    def underlying_decimals(self, block_identifier: BlockIdentifier | None = None) -> int:
        return int(self._read("underlyingDecimals", block_identifier))

    def unit_seconds(self, block_identifier: BlockIdentifier | None = None) -> int:
        return int(self._read("unitSeconds", block_identifier))

    def vault(self, block_identifier: BlockIdentifier | None = None) -> ContractVaultProvider:
        # The vault address is immutable, so the contract is built once from the first read
        if self._vault is None:
            self._vault = ContractVaultProvider(
                self.web3, self.vault_address(block_identifier), self.abis[VAULT_ABI_NAME], self.read_retry_count
            )
        return self._vault
