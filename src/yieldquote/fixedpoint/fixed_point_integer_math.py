"""Fixed Point Integer math library"""

from __future__ import annotations

import fixedpointmath

from yieldquote.errors import DivisionByZero, ExponentiationDomainError, Overflow, Underflow

# we will use single letter names for the FixedPointIntegerMath class since all functions do basic arithmetic
# pylint: disable=invalid-name


class FixedPointIntegerMath:
    """Unsigned integer arithmetic that assumes a 18-decimal fixed-point representation

    Values are plain Python ints scaled by 1e18. Nothing here wraps around; a subtraction that would
    go below zero raises `Underflow`, which the pricing layer reads as "not enough liquidity".

    `ln`, `exp` and `pow` run on `fixedpointmath.FixedPointIntegerMath`, the Hyperdrive rational
    approximations; this class narrows them to unsigned operands and quote errors.
    """

    UINT_MAX = 2**256 - 1
    EXP_MAX = fixedpointmath.FixedPointIntegerMath.EXP_MAX
    EXP_MIN = fixedpointmath.FixedPointIntegerMath.EXP_MIN
    ONE_18 = fixedpointmath.FixedPointIntegerMath.ONE_18

    @staticmethod
    def add(a: int, b: int) -> int:
        """Add two fixed-point numbers in 1e18 format.

        Raises `Overflow` if the sum does not fit in a uint256.
        """
        c = a + b
        if c > FixedPointIntegerMath.UINT_MAX:
            raise Overflow(f"add: sum cannot be greater than {FixedPointIntegerMath.UINT_MAX=}")
        return c

    @staticmethod
    def sub(a: int, b: int) -> int:
        """Subtract two fixed-point numbers in 1e18 format.

        Raises `Underflow` if b > a.
        """
        if b > a:
            raise Underflow(f"sub: {b=} cannot be greater than {a=}")
        return a - b

    @staticmethod
    def mul_div_down(x: int, y: int, d: int) -> int:
        """Multiply x and y, then divide by d, rounding down.

        Python ints are unbounded, so the product never overflows before the division.
        """
        if d == 0:
            raise DivisionByZero(f"mul_div_down: cannot divide {x=} * {y=} by zero")
        # floor div automatically rounds down
        return (x * y) // d

    @staticmethod
    def mul_down(a: int, b: int) -> int:
        """Multiply two fixed-point numbers in 1e18 format and round down."""
        return FixedPointIntegerMath.mul_div_down(a, b, FixedPointIntegerMath.ONE_18)

    @staticmethod
    def div_down(a: int, b: int) -> int:
        """Divide two fixed-point numbers in 1e18 format and round down."""
        return FixedPointIntegerMath.mul_div_down(a, FixedPointIntegerMath.ONE_18, b)

    @staticmethod
    def ln(x: int) -> int:
        """Computes ln(x) in 1e18 fixed point.

        Raises `ExponentiationDomainError` if the value is negative or 0.
        """
        try:
            return fixedpointmath.FixedPointIntegerMath.ln(x)
        except ValueError as err:
            raise ExponentiationDomainError(str(err)) from err

    @staticmethod
    def exp(x: int) -> int:
        """Computes e**x in 1e18 fixed point; 0 at or below EXP_MIN.

        Raises `ExponentiationDomainError` at or above EXP_MAX.
        """
        try:
            return fixedpointmath.FixedPointIntegerMath.exp(x)
        except ValueError as err:
            raise ExponentiationDomainError(str(err)) from err

    @staticmethod
    def pow(x: int, y: int) -> int:
        r"""Using logarithms we calculate x ** y

        .. math::
            \begin{align*}
                &ln(x^y) = y * ln(x)\\
                &e^{(y * ln(x))} = x^y
            \end{align*}

        Both operands are unsigned. The curve exponents used for pricing are in (0, 1] or their
        reciprocals, so `pow(0, 0)` is rejected rather than defined as 1.
        """
        if x < 0 or y < 0:
            raise ExponentiationDomainError(f"pow: operands must be non-negative, not {x=}, {y=}")
        if x == 0:
            if y == 0:
                raise ExponentiationDomainError("pow: 0 ** 0 is undefined")
            return 0
        try:
            return fixedpointmath.FixedPointIntegerMath.pow(x, y)
        except ValueError as err:
            raise ExponentiationDomainError(f"pow: {x=} ** {y=} is not representable") from err
