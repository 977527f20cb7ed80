"""Set algebra and relabeling over tuples.

Tuples are plain integer lists that need not be sorted. Every function
returns a new list and leaves its arguments untouched. Results keep the
order of the first operand; duplicates are dropped by first occurrence
unless a function says otherwise.

Example:
    >>> union([8, 3, 1], [4, 3, 2])
    [8, 3, 1, 4, 2]
    >>> complement(list(range(1, 11)), [8, 3, 1])
    [3, 8, 10]
    >>> translate([1, 2, 3], [1, 2, 3, 4], [10, 20, 30, 40])
    [10, 20, 30]
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import Any

from tuplesmith.errors import AlphabetError, ErrorContext


def _unique(items: Iterable[Any]) -> list[Any]:
    return list(dict.fromkeys(items))


def canonical(numbers: Iterable[int] | None) -> list[int]:
    """Ascending, duplicate-free copy of a tuple. Empty for None."""
    if numbers is None:
        return []
    return sorted(set(numbers))


def union(
    first: Sequence[Hashable] | None,
    second: Sequence[Hashable] | None,
    duplicate: bool = False,
) -> list[Hashable]:
    """Concatenate two tuples.

    Args:
        first: Leading operand. None is treated as absent.
        second: Trailing operand. None is treated as absent.
        duplicate: Keep repeated symbols instead of keeping only the first
            occurrence of each.
    """
    combined = [*(first or []), *(second or [])]
    if duplicate:
        return combined
    return _unique(combined)


def intersection(
    first: Sequence[Hashable] | None,
    second: Sequence[Hashable] | None,
) -> list[Hashable]:
    """Symbols of `first` that also appear in `second`. Empty when either is None."""
    if first is None or second is None:
        return []
    keep = set(second)
    return _unique(item for item in first if item in keep)


def difference(
    first: Sequence[Hashable] | None,
    second: Sequence[Hashable] | None,
) -> list[Hashable]:
    """Symbols of `first` that do not appear in `second`."""
    if first is None:
        return []
    drop = set(second or [])
    return _unique(item for item in first if item not in drop)


def collisions_count(first: Sequence[Hashable], second: Sequence[Hashable]) -> int:
    """How many elements of `first` also appear in `second` (repeats counted)."""
    shared = set(second)
    return sum(1 for item in first if item in shared)


def complement(
    alphabet: Sequence[Hashable] | None,
    numbers: Sequence[Hashable] | None,
) -> list[Hashable] | None:
    """Mirror each symbol across the alphabet.

    The symbol at position p maps to the symbol at position len - 1 - p,
    so applying the complement twice gives the tuple back.

    Returns:
        The mirrored tuple in input order, or None when either argument is
        None or a symbol is not in the alphabet.
    """
    if alphabet is None or numbers is None:
        return None

    positions = {symbol: index for index, symbol in enumerate(alphabet)}
    last = len(alphabet) - 1
    mirrored: list[Hashable] = []
    for symbol in numbers:
        position = positions.get(symbol)
        if position is None:
            return None
        mirrored.append(alphabet[last - position])
    return mirrored


def complement_to_max(maximum: int, numbers: Sequence[int]) -> list[int]:
    """Mirror each number inside 1..maximum (x -> maximum + 1 - x)."""
    return [maximum + 1 - x for x in numbers]


def translate(
    numbers: Sequence[Hashable],
    origin: Sequence[Hashable] | None,
    target: Sequence[Hashable] | None,
) -> list[Hashable]:
    """Relabel a tuple from one alphabet to another by shared position.

    Args:
        numbers: The tuple to relabel.
        origin: Alphabet the tuple is written in.
        target: Alphabet to write it in; must match `origin` in length.

    Returns:
        The relabeled tuple, in input order.

    Raises:
        AlphabetError: If an alphabet is missing, the alphabets differ in
            length, or a symbol is not in the origin alphabet.
    """
    context = ErrorContext(
        operation="translate",
        parameters={"numbers": list(numbers) if numbers is not None else None},
    )
    if origin is None or target is None:
        raise AlphabetError(
            message="Invalid origin or target alphabet",
            field="origin" if origin is None else "target",
            value=None,
            context=context,
        )
    if len(origin) != len(target):
        raise AlphabetError(
            message=(
                f"Origin and target alphabets differ in length "
                f"({len(origin)} != {len(target)})"
            ),
            field="target",
            value=len(target),
            expected=str(len(origin)),
            context=context,
        )

    mapping = dict(zip(origin, target, strict=True))
    translated: list[Hashable] = []
    for symbol in numbers:
        if symbol not in mapping:
            raise AlphabetError(
                message=f"Number {symbol} not found in the origin alphabet",
                field="numbers",
                value=symbol,
                context=context,
            )
        translated.append(mapping[symbol])
    return translated


def translate_all(
    tuples: Iterable[Sequence[Hashable]],
    origin: Sequence[Hashable] | None,
    target: Sequence[Hashable] | None,
) -> list[list[Hashable]]:
    """translate() applied to every tuple; fails on the first bad one."""
    return [translate(numbers, origin, target) for numbers in tuples]
