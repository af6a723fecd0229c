"""Quote trades against fixed-maturity YieldSpace pools with exact fixed-point math."""

# pyright: reportUnusedImport=false

from .config import QuoteConfig, build_quote_config
from .errors import (
    DivisionByZero,
    ExponentiationDomainError,
    InsufficientLiquidity,
    Overflow,
    QuoteError,
    QuoteStage,
    SanityCheckFailure,
    SnapshotFetchError,
    Underflow,
)
from .fixedpoint import ONE_18, FixedPointIntegerMath, normalize
from .interface import (
    ContractPoolProvider,
    ContractVaultProvider,
    PoolMetadataProvider,
    QuoteInterface,
    ReserveProvider,
    StaticPoolProvider,
    StaticVaultProvider,
)
from .pricing import get_yield_exponent, solve_trade_invariant
from .state import PoolSnapshot, TradeSpec
