"""Rescale integer token amounts between decimal precisions."""

from __future__ import annotations

FIXED_POINT_DECIMALS = 18


def normalize(amount: int, decimals_before: int, decimals_after: int) -> int:
    """Rescale an amount from one decimal precision to another.

    Scaling down truncates; any remainder below the target precision is dropped, never rounded.

    Arguments
    ---------
    amount: int
        The non-negative integer amount in `decimals_before` precision.
    decimals_before: int
        The number of decimals the amount is expressed in.
    decimals_after: int
        The number of decimals to express the amount in.

    Returns
    -------
    int
        The amount in `decimals_after` precision.
    """
    if amount < 0:
        raise ValueError(f"normalize: {amount=} must be non-negative")
    if decimals_before < 0 or decimals_after < 0:
        raise ValueError(f"normalize: decimals must be non-negative, not {decimals_before=}, {decimals_after=}")
    if decimals_before < decimals_after:
        return amount * 10 ** (decimals_after - decimals_before)
    if decimals_before > decimals_after:
        return amount // 10 ** (decimals_before - decimals_after)
    return amount


def to_fixed_point(amount: int, decimals: int) -> int:
    """Rescale a native token amount to 18-decimal fixed point."""
    return normalize(amount, decimals, FIXED_POINT_DECIMALS)


def from_fixed_point(amount: int, decimals: int) -> int:
    """Rescale an 18-decimal fixed-point amount to native token decimals, truncating."""
    return normalize(amount, FIXED_POINT_DECIMALS, decimals)
