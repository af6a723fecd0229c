"""Quote interface and the pool data providers it reads from"""

# pyright: reportUnusedImport=false

from .contract_provider import ContractPoolProvider, ContractVaultProvider, smart_contract_read
from .providers import PoolMetadataProvider, ReserveProvider, StaticPoolProvider, StaticVaultProvider
from .quote_interface import QuoteInterface
