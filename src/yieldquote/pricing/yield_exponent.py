"""Time decay of the curve exponent toward maturity."""

from __future__ import annotations

import time

from yieldquote.errors import SanityCheckFailure, Underflow
from yieldquote.fixedpoint import FixedPointIntegerMath

ONE_18 = FixedPointIntegerMath.ONE_18


def get_yield_exponent(expiration: int, unit_seconds: int, now: int | None = None) -> int:
    r"""Calculate the curve exponent :math:`a = 1 - t` for a pool.

    :math:`t` is the fraction of one normalization period left until maturity. As maturity
    approaches :math:`t \to 0` and :math:`a \to 1`.

    Arguments
    ---------
    expiration: int
        Unix timestamp at which the pool matures.
    unit_seconds: int
        Duration of the normalization period in seconds.
    now: int, optional
        Unix timestamp to price at. Defaults to the wall clock.

    Returns
    -------
    int
        The exponent in 18-decimal fixed point, in (0, 1e18].
    """
    if expiration < 0 or unit_seconds < 0:
        raise ValueError(f"get_yield_exponent: {expiration=} and {unit_seconds=} must be non-negative")
    if now is None:
        now = int(time.time())
    time_till_expiry = max(expiration - now, 0)
    t = FixedPointIntegerMath.div_down(time_till_expiry * ONE_18, unit_seconds * ONE_18)
    # subtract first: this only underflows when t > 1
    try:
        a = FixedPointIntegerMath.sub(ONE_18, t)
    except Underflow as err:
        raise Underflow(
            f"get_yield_exponent: {time_till_expiry=} seconds exceeds one unit period of {unit_seconds=} seconds"
        ) from err
    # t == 1 passes the subtraction and lands here
    if a == 0:
        raise SanityCheckFailure(f"get_yield_exponent: curve exponent is zero with {time_till_expiry=}")
    return a
