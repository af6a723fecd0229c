"""Contract ABIs for the pool and vault reads"""

from .load_abis import DEFAULT_ABI_DIR, load_abi_from_file, load_all_abis

POOL_ABI_NAME = "IYieldSpacePool"
VAULT_ABI_NAME = "IVault"
