"""Exact integer arithmetic used by every other component.

All results are Python ints, so counts such as C(80, 20) or 60! are exact
and never overflow.
"""

from __future__ import annotations


def factorial(n: int) -> int:
    """n! computed exactly. Returns -1 for negative n."""
    if n < 0:
        return -1
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def binomial(n: int, k: int) -> int:
    """Binomial coefficient C(n, k).

    Built as a running product of ratios: after step i the accumulator
    equals C(n, i), so every floor division is exact and no factorial is
    ever formed.

    Args:
        n: Size of the universe.
        k: Size of the selection.

    Returns:
        C(n, k), or 0 when k < 0 or k > n.
    """
    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1

    k = min(k, n - k)
    result = 1
    for i in range(1, k + 1):
        result = result * (n - i + 1) // i
    return result


def gcd(a: int, b: int) -> int:
    """Greatest common divisor (Euclid), for either argument order.

    The result is never negative; gcd(a, 0) == abs(a).
    """
    a, b = abs(a), abs(b)
    if a < b:
        return gcd(b, a)
    if b == 0:
        return a
    r = a % b
    if r != 0:
        return gcd(b, r)
    return b


def lcm(a: int, b: int) -> int:
    """Least common multiple. 0 when either argument is 0."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)
