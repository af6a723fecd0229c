"""Tests for errors.py"""

from __future__ import annotations

import pytest

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


@pytest.mark.parametrize(
    "error_type, builtin_type",
    [
        (DivisionByZero, ZeroDivisionError),
        (Underflow, ArithmeticError),
        (InsufficientLiquidity, Underflow),
        (Overflow, OverflowError),
        (ExponentiationDomainError, ValueError),
        (SanityCheckFailure, QuoteError),
    ],
)
def test_error_hierarchy(error_type: type[QuoteError], builtin_type: type[Exception]):
    """Quote errors can be caught as their builtin counterparts."""
    with pytest.raises(builtin_type):
        raise error_type("test")
    assert issubclass(error_type, QuoteError)


def test_stage_defaults_to_none():
    assert Underflow("test").stage is None
    assert Underflow("test", stage=QuoteStage.YIELD_EXPONENT).stage == QuoteStage.YIELD_EXPONENT


def test_snapshot_fetch_error():
    orig = ConnectionError("node down")
    err = SnapshotFetchError("failed", orig_exception=orig, block_identifier=12)
    assert err.stage == QuoteStage.FETCH_SNAPSHOT
    assert err.orig_exception is orig
    assert err.block_identifier == 12
    assert str(err) == "failed"
