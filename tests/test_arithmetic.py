"""Tests for exact integer arithmetic: factorial, binomial, gcd, lcm."""

from __future__ import annotations

import math

import pytest

from tuplesmith.combinatorial import binomial, factorial, gcd, lcm


# ============================================================
# Factorial Tests
# ============================================================


class TestFactorial:
    """Tests for factorial()."""

    @pytest.mark.parametrize(
        "n, expected",
        [(0, 1), (1, 1), (2, 2), (3, 6), (4, 24), (5, 120), (10, 3628800)],
    )
    def test_small_values(self, n, expected):
        assert factorial(n) == expected

    def test_negative_returns_sentinel(self):
        assert factorial(-1) == -1
        assert factorial(-10) == -1

    def test_exact_beyond_64_bits(self):
        assert factorial(60) == math.factorial(60)
        assert factorial(60) > 2**64


# ============================================================
# Binomial Tests
# ============================================================


class TestBinomial:
    """Tests for binomial()."""

    @pytest.mark.parametrize(
        "n, k, expected",
        [
            (5, 0, 1),
            (5, 1, 5),
            (5, 2, 10),
            (5, 3, 10),
            (5, 5, 1),
            (6, 4, 15),
            (49, 6, 13983816),
            (50, 5, 2118760),
            (90, 5, 43949268),
        ],
    )
    def test_known_values(self, n, k, expected):
        assert binomial(n, k) == expected

    def test_out_of_range_is_zero(self):
        assert binomial(5, -1) == 0
        assert binomial(5, 6) == 0
        assert binomial(0, 1) == 0

    def test_zero_choose_zero(self):
        assert binomial(0, 0) == 1

    def test_symmetry(self):
        for n in range(0, 30):
            for k in range(0, n + 1):
                assert binomial(n, k) == binomial(n, n - k)

    def test_matches_math_comb_at_scale(self):
        assert binomial(90, 45) == math.comb(90, 45)
        assert binomial(200, 73) == math.comb(200, 73)
        assert binomial(90, 45) > 2**64


# ============================================================
# GCD / LCM Tests
# ============================================================


class TestGcdLcm:
    """Tests for gcd() and lcm()."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [(12, 18, 6), (18, 12, 6), (17, 5, 1), (100, 75, 25), (7, 7, 7)],
    )
    def test_gcd(self, a, b, expected):
        assert gcd(a, b) == expected

    def test_gcd_with_zero(self):
        assert gcd(9, 0) == 9
        assert gcd(0, 9) == 9
        assert gcd(-9, 0) == 9

    def test_gcd_signed_arguments(self):
        assert gcd(-12, 18) == 6
        assert gcd(12, -18) == 6
        assert gcd(-12, -18) == 6

    @pytest.mark.parametrize(
        "a, b, expected",
        [(4, 6, 12), (6, 4, 12), (3, 5, 15), (21, 6, 42), (8, 8, 8)],
    )
    def test_lcm(self, a, b, expected):
        assert lcm(a, b) == expected

    def test_lcm_with_zero(self):
        assert lcm(0, 5) == 0
        assert lcm(5, 0) == 0

    def test_lcm_is_non_negative(self):
        assert lcm(-4, 6) == 12
