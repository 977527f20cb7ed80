"""Rank <-> subset bijection for k-subsets of {1..n}.

Subsets are ranked in lexicographic order starting at 1, using the
combinatorial number system. Ranks are exact Python ints: C(90, 45) is far
beyond 64 bits and is still handled directly.

Example:
    >>> tuple_to_rank(5, [3, 4, 5])
    10
    >>> rank_to_tuple(5, 3, 7)
    [2, 3, 4]

Invalid inputs return sentinels rather than raising: -1 for
``tuple_to_rank`` and an empty list for ``rank_to_tuple``.
"""

from __future__ import annotations

from collections.abc import Hashable, MutableSequence, Sequence

from tuplesmith.combinatorial.arithmetic import binomial


def tuple_to_rank(n: int, subset: MutableSequence[int] | Sequence[int] | None) -> int:
    """Give the 1-based lexicographic rank of a subset of {1..n}.

    A list argument is sorted in place before ranking. Pass a copy if the
    caller needs to keep its original order.

    Args:
        n: The maximum possible element value.
        subset: The selection to rank.

    Returns:
        The rank in [1, C(n, k)], or -1 if n < 0, the subset is empty or
        missing, or an element exceeds n.
    """
    if n < 0:
        return -1
    if not subset:
        return -1

    if isinstance(subset, list):
        subset.sort()
    else:
        subset = sorted(subset)

    length = len(subset)
    rank = binomial(n, length)
    for i in range(length, 0, -1):
        element = subset[length - i]
        if element > n:
            return -1
        rank -= binomial(n - element + 1, i)
        if i > 1:
            rank += binomial(n - element, i - 1)
    return rank + 1


def rank_to_tuple(n: int, k: int, rank: int) -> list[int]:
    """Give the k-subset of {1..n} sitting at the given rank.

    Slots are fixed from left to right. For each slot, candidates are tried
    from n downwards: the slot and every slot to its right are filled with
    the consecutive run ending at the candidate, and the first candidate
    whose partial tuple ranks at or below the target is kept.

    Args:
        n: The maximum possible element value.
        k: The length of the tuple to return.
        rank: The 1-based rank of the tuple to return.

    Returns:
        The sorted subset, or an empty list when n, k or rank is invalid.
    """
    if n <= 0 or k <= 0 or k > n:
        return []
    if rank <= 0 or rank > binomial(n, k):
        return []

    numbers = [0] * k
    for i in range(k):
        for candidate in range(n, k - 1, -1):
            m = candidate
            for j in range(k - 1, i - 1, -1):
                numbers[j] = m
                m -= 1
            if tuple_to_rank(n, numbers) <= rank:
                break
    return numbers


def rank_in_alphabet(alphabet: Sequence[Hashable], subset: Sequence[Hashable] | None) -> int:
    """Rank a selection of symbols among all same-size selections of an alphabet.

    Symbols are ranked through their 1-based alphabet positions, so the
    alphabet order defines the lexicographic order. The subset is not
    modified.

    Returns:
        The rank, or -1 when the subset is empty or holds a symbol absent
        from the alphabet.
    """
    if not alphabet or not subset:
        return -1
    positions = {symbol: index + 1 for index, symbol in enumerate(alphabet)}
    try:
        indices = [positions[symbol] for symbol in subset]
    except KeyError:
        return -1
    return tuple_to_rank(len(alphabet), indices)


def tuple_in_alphabet(alphabet: Sequence[Hashable], k: int, rank: int) -> list[Hashable]:
    """Inverse of rank_in_alphabet. Empty list for an invalid k or rank."""
    positions = rank_to_tuple(len(alphabet), k, rank)
    return [alphabet[p - 1] for p in positions]
