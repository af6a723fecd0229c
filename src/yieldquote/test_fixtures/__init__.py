"""Test fixtures for yieldquote"""

from .pool_fixtures import (
    BASE_ADDRESS,
    BOND_ADDRESS,
    FIXED_NOW,
    HALF_YEAR,
    ONE_YEAR,
    OTHER_ADDRESS,
    POOL_ID,
    half_year_pool,
    make_static_pool,
    quote_interface,
)
