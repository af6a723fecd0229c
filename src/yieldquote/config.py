"""Defines the quoting configuration from env vars."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from eth_typing import URI

from yieldquote.utils import DEFAULT_READ_RETRY_COUNT


@dataclass(frozen=True)
class QuoteConfig:
    """Immutable settings for reading pools from a chain."""

    rpc_uri: URI | str = URI("http://localhost:8545")
    """The uri to the ethereum node."""
    pool_address: str | None = None
    """The address of the pool to quote against."""
    abi_dir: str | None = None
    """The path to the abi directory. Defaults to the ABIs bundled with the package."""
    read_retry_count: int = DEFAULT_READ_RETRY_COUNT
    """The number of attempts for each contract read."""

    def __post_init__(self):
        if self.read_retry_count <= 0:
            raise ValueError(f"{self.read_retry_count=} must be greater than zero")


def build_quote_config(dotenv_file: str = "quote.env") -> QuoteConfig:
    """Build a quote config that looks for environmental variables.
    If env var exists, use that, otherwise, default.

    Arguments
    ---------
    dotenv_file: str, optional
        The path location of the dotenv file to load from.
        Defaults to "quote.env".

    Returns
    -------
    QuoteConfig
        Config settings required to read pools from the chain
    """
    # Look for and load local config if it exists
    if os.path.exists(dotenv_file):
        load_dotenv(dotenv_file)

    rpc_uri = os.getenv("RPC_URI")
    pool_address = os.getenv("POOL_ADDRESS")
    abi_dir = os.getenv("ABI_DIR")
    read_retry_count = os.getenv("READ_RETRY_COUNT")

    arg_dict = {}
    if rpc_uri is not None:
        arg_dict["rpc_uri"] = URI(rpc_uri)
    if pool_address is not None:
        arg_dict["pool_address"] = pool_address
    if abi_dir is not None:
        arg_dict["abi_dir"] = abi_dir
    if read_retry_count is not None:
        arg_dict["read_retry_count"] = int(read_retry_count)
    return QuoteConfig(**arg_dict)
