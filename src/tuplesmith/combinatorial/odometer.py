"""Index odometer shared by every enumerator in tuplesmith.

An odometer is a vector of indices turned one notch at a time. Each turn
finds the rightmost slot that can still move, moves it by one, and refills
every slot to its right. Two families of bounds are supported:

- increasing vectors: k strictly increasing indices over [0, n - 1]
  (k-subsets, also used for sub-subsets of a tuple's positions);
- mixed-radix vectors: one independent index per part, bounded by the
  part size (Cartesian products).

All functions mutate ``indices`` in place and return False, leaving the
vector untouched, when no further turn is possible.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence


def _roll(
    indices: list[int],
    blocked: Callable[[int], bool],
    step: int,
    refill: Callable[[int], int],
) -> bool:
    i = len(indices) - 1
    while i >= 0 and blocked(i):
        i -= 1
    if i < 0:
        return False

    indices[i] += step
    # refill left to right: increasing refills read the slot just written
    for j in range(i + 1, len(indices)):
        indices[j] = refill(j)
    return True


def advance_increasing(indices: list[int], n: int) -> bool:
    """Move a strictly increasing index vector to its lexicographic successor.

    Slot i may not exceed n - k + i.
    """
    k = len(indices)
    return _roll(
        indices,
        blocked=lambda i: indices[i] == n - k + i,
        step=1,
        refill=lambda j: indices[j - 1] + 1,
    )


def retreat_increasing(indices: list[int], n: int) -> bool:
    """Move a strictly increasing index vector to its lexicographic predecessor.

    Slot i may not go below its left neighbour plus one (0 for slot 0);
    slots to the right of the moved one take their highest legal values.
    """
    k = len(indices)
    return _roll(
        indices,
        blocked=lambda i: indices[i] == (indices[i - 1] + 1 if i > 0 else 0),
        step=-1,
        refill=lambda j: n - k + j,
    )


def advance_mixed_radix(indices: list[int], radices: Sequence[int]) -> bool:
    """Increment a mixed-radix vector, carrying from the last slot."""
    return _roll(
        indices,
        blocked=lambda i: indices[i] == radices[i] - 1,
        step=1,
        refill=lambda j: 0,
    )


def retreat_mixed_radix(indices: list[int], radices: Sequence[int]) -> bool:
    """Decrement a mixed-radix vector, borrowing from the last slot."""
    return _roll(
        indices,
        blocked=lambda i: indices[i] == 0,
        step=-1,
        refill=lambda j: radices[j] - 1,
    )


def mixed_radix_digits(position: int, radices: Sequence[int]) -> list[int]:
    """Decompose a 0-based position into mixed-radix digits (last slot least significant)."""
    digits = [0] * len(radices)
    for i in range(len(radices) - 1, -1, -1):
        position, digits[i] = divmod(position, radices[i])
    return digits


def mixed_radix_position(indices: Sequence[int], radices: Sequence[int]) -> int:
    """Inverse of mixed_radix_digits."""
    position = 0
    for index, radix in zip(indices, radices, strict=True):
        position = position * radix + index
    return position


def increasing_indices(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield every strictly increasing k-vector over [0, n - 1] in lexicographic order.

    Nothing is yielded when k < 1 or k > n.
    """
    if k < 1 or k > n:
        return
    indices = list(range(k))
    yield tuple(indices)
    while advance_increasing(indices, n):
        yield tuple(indices)
