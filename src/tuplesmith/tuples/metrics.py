"""Gap and distance metrics over tuples.

Two families of metrics live here:

- value metrics (``linear_*``/``modular_*``) read the integers themselves,
  the modular ones wrapping around a pool of size ``pool``;
- alphabet metrics (``distance``, ``alphabet_*``) read the positions of
  the symbols inside an ordered alphabet.

All metrics sort a working copy; the caller's tuple is never reordered.
A missing tuple or alphabet gives -1, fewer than two elements give 0.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Sequence

from tuplesmith.errors import ErrorContext, InvalidParameterError


def _consecutive_gaps(values: Sequence[int]) -> list[int]:
    return [b - a for a, b in zip(values, values[1:])]


def _is_pool_size(pool: object) -> bool:
    if isinstance(pool, bool):
        return False
    if isinstance(pool, float):
        return math.isfinite(pool) and pool.is_integer() and pool > 0
    return isinstance(pool, int) and pool > 0


def _check_pool(pool: int, operation: str) -> None:
    if not _is_pool_size(pool):
        raise InvalidParameterError(
            message=f"Pool size must be a finite positive integer, got {pool!r}",
            field="pool",
            value=pool,
            expected="integer > 0",
            context=ErrorContext(operation=operation, parameters={"pool": pool}),
        )


def linear_minimum_gap(numbers: Sequence[int] | None) -> int:
    """Smallest difference between two consecutive sorted elements."""
    if numbers is None:
        return -1
    if len(numbers) < 2:
        return 0
    return min(_consecutive_gaps(sorted(numbers)))


def linear_maximum_gap(numbers: Sequence[int] | None) -> int:
    """Largest difference between two consecutive sorted elements."""
    if numbers is None:
        return -1
    if len(numbers) < 2:
        return 0
    return max(_consecutive_gaps(sorted(numbers)))


def _modular_gaps(numbers: Sequence[int], pool: int) -> list[int]:
    values = sorted(numbers)
    gaps = _consecutive_gaps(values)
    gaps.append(int(pool) + values[0] - values[-1])
    return gaps


def modular_minimum_gap(numbers: Sequence[int] | None, pool: int) -> int:
    """Smallest gap on a circle of `pool` numbers, wrap-around included.

    Raises:
        InvalidParameterError: If pool is not a finite positive integer.
    """
    _check_pool(pool, "modular_minimum_gap")
    if numbers is None:
        return -1
    if len(numbers) < 2:
        return 0
    return min(_modular_gaps(numbers, pool))


def modular_maximum_gap(numbers: Sequence[int] | None, pool: int) -> int:
    """Largest gap on a circle of `pool` numbers, wrap-around included.

    Raises:
        InvalidParameterError: If pool is not a finite positive integer.
    """
    _check_pool(pool, "modular_maximum_gap")
    if numbers is None:
        return -1
    if len(numbers) < 2:
        return 0
    return max(_modular_gaps(numbers, pool))


def _alphabet_positions(
    alphabet: Sequence[Hashable],
    numbers: Sequence[Hashable],
) -> list[int] | None:
    index = {symbol: position for position, symbol in enumerate(alphabet)}
    positions = []
    for symbol in numbers:
        if symbol not in index:
            return None
        positions.append(index[symbol])
    return sorted(positions)


def _circular_position_gaps(alphabet_size: int, positions: list[int]) -> list[int]:
    gaps = _consecutive_gaps(positions)
    gaps.append(alphabet_size + positions[0] - positions[-1])
    return gaps


def distance(alphabet: Sequence[Hashable] | None, numbers: Sequence[Hashable] | None) -> int:
    """Span between the first and last symbol of a tuple, in alphabet positions."""
    if alphabet is None or numbers is None:
        return -1
    if len(numbers) <= 1:
        return 0
    positions = _alphabet_positions(alphabet, numbers)
    if positions is None:
        return -1
    return positions[-1] - positions[0]


def alphabet_minimum_gap(
    alphabet: Sequence[Hashable] | None,
    numbers: Sequence[Hashable] | None,
) -> int:
    """Smallest gap between neighbouring symbols, the alphabet read as a circle."""
    if alphabet is None or numbers is None:
        return -1
    if len(numbers) <= 1:
        return 0
    positions = _alphabet_positions(alphabet, numbers)
    if positions is None:
        return -1
    return min(_circular_position_gaps(len(alphabet), positions))


def alphabet_minimum_right_gap(
    alphabet: Sequence[Hashable] | None,
    numbers: Sequence[Hashable] | None,
) -> int:
    """Smallest gap between neighbouring symbols, without wrapping."""
    if alphabet is None or numbers is None:
        return -1
    if len(numbers) <= 1:
        return 0
    positions = _alphabet_positions(alphabet, numbers)
    if positions is None:
        return -1
    return min(_consecutive_gaps(positions))


def alphabet_maximum_gap(
    alphabet: Sequence[Hashable] | None,
    numbers: Sequence[Hashable] | None,
) -> int:
    """Largest gap left once the circle is cut at its widest hole.

    This is the second largest circular gap (ties count twice), so a tuple
    clustered on one side of the alphabet is measured by its inner spread.

    Example:
        >>> alphabet_maximum_gap(list(range(1, 21)), [1, 4, 8, 11])
        4
    """
    if alphabet is None or numbers is None:
        return -1
    if len(numbers) <= 1:
        return 0
    positions = _alphabet_positions(alphabet, numbers)
    if positions is None:
        return -1
    return sorted(_circular_position_gaps(len(alphabet), positions))[-2]


def alphabet_maximum_right_gap(
    alphabet: Sequence[Hashable] | None,
    numbers: Sequence[Hashable] | None,
) -> int:
    """Largest gap between neighbouring symbols, without wrapping."""
    if alphabet is None or numbers is None:
        return -1
    if len(numbers) <= 1:
        return 0
    positions = _alphabet_positions(alphabet, numbers)
    if positions is None:
        return -1
    return max(_consecutive_gaps(positions))
