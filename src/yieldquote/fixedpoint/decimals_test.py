"""Tests for decimals.py"""

from __future__ import annotations

import pytest

from .decimals import from_fixed_point, normalize, to_fixed_point


class TestNormalize:
    """Tests for decimals.py::normalize()."""

    def test_scale_up(self):
        assert normalize(1_000_000, 6, 18) == 10**18
        assert normalize(1, 0, 18) == 10**18
        assert normalize(0, 6, 18) == 0

    def test_scale_down(self):
        assert normalize(10**18, 18, 6) == 1_000_000
        assert normalize(25 * 10**17, 18, 0) == 2

    def test_same_decimals(self):
        assert normalize(123_456, 6, 6) == 123_456

    def test_round_trip(self):
        """Amounts without a remainder below 6 decimals survive a round trip."""
        for amount in [0, 1, 999_999, 1_000 * 10**6, 123_456_789_012]:
            assert normalize(normalize(amount, 6, 18), 18, 6) == amount

    def test_truncates_remainder(self):
        """Scaling down drops the remainder instead of rounding it."""
        assert normalize(1_999_999_999_999, 18, 6) == 1
        assert normalize(123_456_789 * 10**12 + 999_999_999_999, 18, 6) == 123_456_789
        assert normalize(999_999_999_999, 18, 6) == 0

    def test_more_than_18_decimals(self):
        assert to_fixed_point(10**24, 24) == 10**18
        assert from_fixed_point(10**18, 24) == 10**24

    def test_fail_negative(self):
        with pytest.raises(ValueError):
            normalize(-1, 6, 18)
        with pytest.raises(ValueError):
            normalize(1, -6, 18)
