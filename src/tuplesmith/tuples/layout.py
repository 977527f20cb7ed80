"""Display and rearrangement helpers for tuples.

These helpers render tuples as text and cut, merge, rotate or reshape
lists of numbers. None of them mutates its arguments.

Example:
    >>> to_string([7, 1, 23])
    '07 01 23'
    >>> split([1, 2, 3, 4, 5, 6, 7, 8, 9], 4)
    [[1, 2, 3], [4, 5], [6, 7], [8, 9]]
    >>> rotate([1, 2, 3, 4], 1)
    [4, 1, 2, 3]
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from tuplesmith.errors import ErrorContext, InvalidParameterError
from tuplesmith.tuples.algebra import canonical


def to_string(numbers: Sequence[int] | None, sep: str = " ", width: int = 2) -> str:
    """Join numbers, each left-padded with zeros to `width` characters."""
    if not numbers:
        return ""
    return sep.join(str(x).rjust(width, "0") for x in numbers)


def to_canonical_string(numbers: Sequence[int] | None, sep: str = " ", width: int = 2) -> str:
    """to_string() of the ascending, duplicate-free form."""
    if not numbers:
        return ""
    return to_string(canonical(numbers), sep=sep, width=width)


def split(numbers: Sequence[Any] | None, parts: int) -> list[list[Any]]:
    """Cut a list into `parts` contiguous chunks, longer chunks first.

    Returns an empty list when `parts` is 0, the list is missing, or it
    holds fewer than `parts` elements.

    Raises:
        InvalidParameterError: If parts is negative.
    """
    if parts < 0:
        raise InvalidParameterError(
            message=f"Number of parts cannot be negative, got {parts}",
            field="parts",
            value=parts,
            context=ErrorContext(operation="split", parameters={"parts": parts}),
        )
    if parts == 0 or numbers is None:
        return []
    if parts == 1:
        return [list(numbers)]
    if len(numbers) < parts:
        return []

    size, remainder = divmod(len(numbers), parts)
    chunks = []
    start = 0
    for i in range(parts):
        end = start + size + (1 if i < remainder else 0)
        chunks.append(list(numbers[start:end]))
        start = end
    return chunks


def concat(*parts: Sequence[Any]) -> list[Any]:
    return [item for part in parts for item in part]


def rotate(numbers: Sequence[Any], offset: int) -> list[Any]:
    """Rotate right by `offset` (left when negative); shifted items wrap around."""
    numbers = list(numbers)
    return numbers[-offset:] + numbers[:-offset]


def rotate_round_robin(numbers: Sequence[Any], offset: int) -> list[Any]:
    """Keep the first item in place and rotate the rest, as in round-robin scheduling."""
    numbers = list(numbers)
    if len(numbers) <= 1:
        return numbers
    rest = numbers[1:]
    return [numbers[0], *rotate(rest, offset % len(rest))]


def reverse(numbers: Sequence[Any]) -> list[Any]:
    return list(reversed(numbers))


def transpose(rows: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Turn rows into columns.

    Raises:
        InvalidParameterError: If the rows differ in length.
    """
    if not rows:
        return []
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise InvalidParameterError(
                message="All rows must have the same length to be transposed",
                field=f"rows[{i}]",
                value=len(row),
                expected=str(width),
                context=ErrorContext(operation="transpose"),
            )
    return [[row[j] for row in rows] for j in range(width)]


def gap_series(maximum: int, gap: int) -> list[list[int]]:
    """Walk 1..maximum in steps of `gap` (wrapping), one closed cycle per series.

    Each series starts at the smallest number not yet visited and ends by
    repeating its start.

    Example:
        >>> gap_series(6, 2)
        [[1, 3, 5, 1], [2, 4, 6, 2]]
    """
    visited: set[int] = set()
    series: list[list[int]] = []

    while len(visited) < maximum:
        start = next(i for i in range(1, maximum + 1) if i not in visited)
        cycle = []
        current = start
        while current not in visited:
            cycle.append(current)
            visited.add(current)
            current = (current + gap - 1) % maximum + 1
        cycle.append(start)
        series.append(cycle)

    return series


def interleaved_merge(lists: Sequence[Sequence[Any]]) -> list[Any]:
    """Take the first item of every list, then the second of every list, and so on."""
    if not lists:
        return []
    longest = max(len(items) for items in lists)
    return [items[i] for i in range(longest) for items in lists if i < len(items)]


def split_into_lines(numbers: Sequence[Any], size: int) -> list[list[Any]]:
    """Cut a list into lines of `size` items; the last line may be shorter."""
    if size <= 0:
        raise InvalidParameterError(
            message=f"Line size must be positive, got {size}",
            field="size",
            value=size,
            context=ErrorContext(operation="split_into_lines", parameters={"size": size}),
        )
    return [list(numbers[i:i + size]) for i in range(0, len(numbers), size)]


def extract_n_minus_1(*parts: Sequence[Any]) -> list[list[Any]]:
    """Every concatenation of all parts but one, dropping the last part first."""
    if len(parts) <= 1:
        return []
    return [
        concat(*(part for index, part in enumerate(parts) if index != skipped))
        for skipped in range(len(parts) - 1, -1, -1)
    ]


def split_and_extract_n_minus_1(numbers: Sequence[Any] | None, parts: int) -> list[list[Any]]:
    """split() into `parts` chunks, then extract_n_minus_1() over the chunks.

    Raises:
        InvalidParameterError: If parts is negative.
    """
    if parts < 0:
        raise InvalidParameterError(
            message=f"Number of parts cannot be negative, got {parts}",
            field="parts",
            value=parts,
            context=ErrorContext(
                operation="split_and_extract_n_minus_1", parameters={"parts": parts}
            ),
        )
    if parts <= 1 or numbers is None or len(numbers) < parts:
        return []
    return extract_n_minus_1(*split(numbers, parts))


def pairwise_merge(*parts: Sequence[Any]) -> list[list[Any]]:
    """Merge parts two by two; an odd last part is kept alone."""
    if len(parts) <= 1:
        return []
    return [concat(*parts[i:i + 2]) for i in range(0, len(parts), 2)]


def cyclic_sequence(total: int, count: int, size: int) -> list[int]:
    """Flat run of count * size numbers counting 1..total and starting over.

    Example:
        >>> cyclic_sequence(10, 3, 5)
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 1, 2, 3, 4, 5]
    """
    return [i % total + 1 for i in range(count * size)]
