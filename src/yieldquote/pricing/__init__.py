"""Pricing functions for fixed-maturity YieldSpace pools"""

# pyright: reportUnusedImport=false

from .invariant import solve_trade_invariant
from .yield_exponent import get_yield_exponent
