"""Solve the YieldSpace trade invariant x^a + y^a = k."""

from __future__ import annotations

from yieldquote.errors import InsufficientLiquidity, SanityCheckFailure, Underflow
from yieldquote.fixedpoint import FixedPointIntegerMath

ONE_18 = FixedPointIntegerMath.ONE_18


def _sub_reserves(a: int, b: int, what: str) -> int:
    try:
        return FixedPointIntegerMath.sub(a, b)
    except Underflow as err:
        raise InsufficientLiquidity(f"solve_trade_invariant: {what}; {a=} < {b=}") from err


def solve_trade_invariant(amount_x: int, reserve_x: int, reserve_y: int, a: int, out: bool) -> int:
    r"""Calculate the change in the y reserves that keeps the invariant constant.

    .. math::
        x^a + y^a = x'^a + y'^a

    The x side changes by `amount_x`; the returned value is the magnitude of the y side change.
    With `out` the pool receives `amount_x` of x and pays out y, so the result is :math:`y - y'`.
    Without it, `amount_x` of x leaves the pool and the result is the y the pool must receive,
    :math:`y' - y`.

    Arguments
    ---------
    amount_x: int
        The change to the x reserves in 18-decimal fixed point.
    reserve_x: int
        The x reserves in 18-decimal fixed point.
    reserve_y: int
        The y reserves in 18-decimal fixed point.
    a: int
        The curve exponent in 18-decimal fixed point.
    out: bool
        True if the pool receives `amount_x` and pays out y.

    Returns
    -------
    int
        The y amount in 18-decimal fixed point.
    """
    if amount_x == 0:
        return 0
    if a <= 0:
        raise SanityCheckFailure(f"solve_trade_invariant: curve exponent must be positive, not {a=}")
    x_before_pow_a = FixedPointIntegerMath.pow(reserve_x, a)
    y_before_pow_a = FixedPointIntegerMath.pow(reserve_y, a)
    if out:
        new_reserve_x = FixedPointIntegerMath.add(reserve_x, amount_x)
    else:
        new_reserve_x = _sub_reserves(reserve_x, amount_x, "trade exceeds the x reserves")
    x_after_pow_a = FixedPointIntegerMath.pow(new_reserve_x, a)
    y_after_pow_a = _sub_reserves(
        FixedPointIntegerMath.add(x_before_pow_a, y_before_pow_a),
        x_after_pow_a,
        "trade exceeds the liquidity of the curve",
    )
    new_reserve_y = FixedPointIntegerMath.pow(y_after_pow_a, FixedPointIntegerMath.div_down(ONE_18, a))
    if out:
        return _sub_reserves(reserve_y, new_reserve_y, "y reserves cannot cover the output")
    return _sub_reserves(new_reserve_y, reserve_y, "y reserves did not grow")
