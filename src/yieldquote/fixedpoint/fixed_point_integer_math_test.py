"""FixedPoint integer math tests inspired from the solidity hyperdrive implementation"""

from __future__ import annotations

import math
from decimal import Decimal, localcontext

import pytest

from yieldquote.errors import DivisionByZero, ExponentiationDomainError, Overflow, Underflow

from .fixed_point_integer_math import FixedPointIntegerMath

ONE_18 = FixedPointIntegerMath.ONE_18
APPROX_EQ = 10**6  # 1e-12 for 18-decimal integers near 1


def _decimal_pow(x: int, y: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = 60
        return (Decimal(x) / ONE_18) ** (Decimal(y) / ONE_18) * ONE_18


class TestArithmetic:
    """Tests for the basic unsigned operators."""

    def test_add(self):
        assert FixedPointIntegerMath.add(ONE_18, 5 * ONE_18) == 6 * ONE_18
        assert FixedPointIntegerMath.add(ONE_18, 0) == ONE_18
        assert FixedPointIntegerMath.add(0, 0) == 0

    def test_fail_add_overflow(self):
        with pytest.raises(Overflow):
            FixedPointIntegerMath.add(FixedPointIntegerMath.UINT_MAX, 1)
        with pytest.raises(OverflowError):
            FixedPointIntegerMath.add(2**255, 2**255)

    def test_sub(self):
        assert FixedPointIntegerMath.sub(5 * ONE_18, 3 * ONE_18) == 2 * ONE_18
        assert FixedPointIntegerMath.sub(ONE_18, ONE_18) == 0
        assert FixedPointIntegerMath.sub(ONE_18, 0) == ONE_18
        assert FixedPointIntegerMath.sub(0, 0) == 0

    def test_fail_sub_underflow(self):
        """Going below zero is an explicit Underflow, never a negative number."""
        with pytest.raises(Underflow):
            FixedPointIntegerMath.sub(ONE_18, ONE_18 + 1)
        with pytest.raises(ArithmeticError):
            FixedPointIntegerMath.sub(0, 1)

    def test_mul_down(self):
        assert FixedPointIntegerMath.mul_down(2 * ONE_18, 3 * ONE_18) == 6 * ONE_18
        assert FixedPointIntegerMath.mul_down(int(2.5 * ONE_18), int(0.5 * ONE_18)) == int(1.25 * ONE_18)
        assert FixedPointIntegerMath.mul_down(369, 271) == 0
        assert FixedPointIntegerMath.mul_down(0, ONE_18) == 0

    def test_div_down(self):
        assert FixedPointIntegerMath.div_down(6 * ONE_18, 2 * ONE_18) == 3 * ONE_18
        assert FixedPointIntegerMath.div_down(int(1.25 * ONE_18), int(0.5 * ONE_18)) == int(2.5 * ONE_18)
        assert FixedPointIntegerMath.div_down(ONE_18, 3 * ONE_18) == 333333333333333333
        assert FixedPointIntegerMath.div_down(2 * ONE_18, 10**37) == 0
        assert FixedPointIntegerMath.div_down(0, ONE_18) == 0

    def test_div_down_extended_precision(self):
        """Products beyond 256 bits are still divided exactly."""
        big = 2**250
        assert FixedPointIntegerMath.div_down(big, big) == ONE_18

    def test_fail_div_down_zero_denominator(self):
        with pytest.raises(DivisionByZero):
            FixedPointIntegerMath.div_down(ONE_18, 0)
        with pytest.raises(ZeroDivisionError):
            FixedPointIntegerMath.mul_div_down(ONE_18, ONE_18, 0)


class TestExpLn:
    """Tests for the rational approximations of exp and ln."""

    def test_ln(self):
        assert abs(FixedPointIntegerMath.ln(ONE_18)) <= APPROX_EQ
        assert abs(FixedPointIntegerMath.ln(2 * ONE_18) - 693147180559945309) <= APPROX_EQ
        assert abs(FixedPointIntegerMath.ln(2718281828459045235) - ONE_18) <= APPROX_EQ
        assert abs(FixedPointIntegerMath.ln(ONE_18 // 2) + 693147180559945309) <= APPROX_EQ

    def test_fail_ln(self):
        with pytest.raises(ExponentiationDomainError):
            FixedPointIntegerMath.ln(0)
        with pytest.raises(ValueError):
            FixedPointIntegerMath.ln(-ONE_18)

    def test_exp(self):
        assert abs(FixedPointIntegerMath.exp(0) - ONE_18) <= APPROX_EQ
        assert abs(FixedPointIntegerMath.exp(ONE_18) - 2718281828459045235) <= APPROX_EQ
        assert abs(FixedPointIntegerMath.exp(-ONE_18) - 367879441171442321) <= APPROX_EQ
        assert FixedPointIntegerMath.exp(FixedPointIntegerMath.EXP_MIN) == 0

    def test_fail_exp_too_large(self):
        with pytest.raises(ExponentiationDomainError) as err:
            FixedPointIntegerMath.exp(FixedPointIntegerMath.EXP_MAX)
        # the fixedpointmath error is kept as the cause
        assert isinstance(err.value.__cause__, ValueError)


class TestPow:
    """Tests for fractional exponentiation."""

    def test_pow_known_values(self):
        assert abs(FixedPointIntegerMath.pow(4 * ONE_18, ONE_18 // 2) - 2 * ONE_18) <= APPROX_EQ
        assert abs(FixedPointIntegerMath.pow(2 * ONE_18, ONE_18 // 2) - int(math.sqrt(2) * 1e18)) <= APPROX_EQ
        assert abs(FixedPointIntegerMath.pow(3 * ONE_18, 2 * ONE_18) - 9 * ONE_18) <= 10 * APPROX_EQ
        assert abs(FixedPointIntegerMath.pow(7 * ONE_18, ONE_18) - 7 * ONE_18) <= 10 * APPROX_EQ

    def test_pow_zero_base(self):
        assert FixedPointIntegerMath.pow(0, ONE_18 // 2) == 0
        assert FixedPointIntegerMath.pow(0, ONE_18) == 0

    def test_fail_pow_domain(self):
        with pytest.raises(ExponentiationDomainError):
            FixedPointIntegerMath.pow(0, 0)
        with pytest.raises(ExponentiationDomainError):
            FixedPointIntegerMath.pow(-ONE_18, ONE_18 // 2)
        with pytest.raises(ExponentiationDomainError):
            FixedPointIntegerMath.pow(ONE_18, -ONE_18)
        # (1e30)^10 = 1e300 is not representable
        with pytest.raises(ExponentiationDomainError):
            FixedPointIntegerMath.pow(10**30, 10 * ONE_18)

    @pytest.mark.parametrize(
        "x",
        [ONE_18, 10**19 + 7, 123_456_789 * 10**15, 10**24, 7 * 10**23 + 1, 10**30],
    )
    @pytest.mark.parametrize(
        "y",
        [ONE_18 // 2, ONE_18 // 10, 333_333_333_333_333_333, 999_999_999_999_999_999, ONE_18],
    )
    def test_pow_relative_error(self, x: int, y: int):
        """Reserves from 1 to 1e12 tokens raised to curve exponents stay within 1e-9 of the exact value."""
        expected = _decimal_pow(x, y)
        result = FixedPointIntegerMath.pow(x, y)
        assert abs(Decimal(result) - expected) <= expected * Decimal("1e-9")
