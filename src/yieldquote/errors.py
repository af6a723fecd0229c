"""Errors raised while computing a quote."""

from __future__ import annotations

from enum import Enum
from typing import Any


class QuoteStage(Enum):
    r"""A stage of the quote pipeline."""

    FETCH_SNAPSHOT = "fetch_snapshot"
    NORMALIZE = "normalize"
    YIELD_EXPONENT = "yield_exponent"
    SOLVE_INVARIANT = "solve_invariant"


class QuoteError(Exception):
    """Base class for every failure of the quote pipeline.

    The quote interface fills in `stage` with the pipeline stage that raised the error,
    so callers can tell a slippage condition apart from a misconfigured pool.
    """

    def __init__(self, *args, stage: QuoteStage | None = None):
        super().__init__(*args)
        self.stage = stage


class DivisionByZero(QuoteError, ZeroDivisionError):
    """A fixed-point division with a zero divisor, e.g. a pool with `unit_seconds == 0`."""


class Underflow(QuoteError, ArithmeticError):
    """An unsigned fixed-point subtraction would go below zero.

    Raised as-is when the yield exponent cannot be computed because the time left until
    maturity exceeds one unit period.
    """


class Overflow(QuoteError, OverflowError):
    """A fixed-point sum does not fit in a uint256, e.g. a trade amount near 2**256."""


class InsufficientLiquidity(Underflow):
    """The trade is larger than the curve and reserves can support.

    Reducing the trade size recovers from this error.
    """


class SanityCheckFailure(QuoteError):
    """The curve exponent is zero, i.e. the pool sits on a degenerate boundary."""


class ExponentiationDomainError(QuoteError, ValueError):
    """`ln`, `exp` or `pow` was called with operands outside of the supported domain."""


class SnapshotFetchError(QuoteError):
    """Reading the pool snapshot from an external provider failed."""

    def __init__(
        self,
        *args,
        orig_exception: Exception | BaseException | None = None,
        block_identifier: Any | None = None,
    ):
        super().__init__(*args, stage=QuoteStage.FETCH_SNAPSHOT)
        self.orig_exception = orig_exception
        self.block_identifier = block_identifier
