"""Bidirectional enumerators over k-subsets and Cartesian products.

Both enumerators are cursors: they hold an index vector, the matching
value vector and a position counter, and step one state at a time in
either direction. Stepping past either end returns None; the cursor never
wraps and stays on its boundary state.

Example:
    >>> from tuplesmith.combinatorial import Combination, CartesianProduct
    >>>
    >>> combination = Combination(range(1, 6), k=3)
    >>> combination.start()
    [1, 2, 3]
    >>> combination.next()
    [1, 2, 4]
    >>> combination.count
    10
    >>>
    >>> product = CartesianProduct([1, 2, 3], [4, 5, 6], [7, 8, 9])
    >>> product.end()
    [3, 6, 9]
    >>> product.previous()
    [3, 6, 8]
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Iterable, Iterator, Sequence
from typing import Any

from tuplesmith.combinatorial.arithmetic import binomial
from tuplesmith.combinatorial.odometer import (
    advance_increasing,
    advance_mixed_radix,
    mixed_radix_digits,
    mixed_radix_position,
    retreat_increasing,
    retreat_mixed_radix,
)
from tuplesmith.combinatorial.ranking import rank_to_tuple, tuple_to_rank
from tuplesmith.errors import (
    EmptyPartError,
    ErrorContext,
    InvalidParameterError,
    SubsetSizeError,
)

logger = logging.getLogger(__name__)


class _Enumerator:
    """Cursor bookkeeping shared by Combination and CartesianProduct.

    Subclasses provide the boundary index vectors, the one-notch moves,
    the rank -> indices jump and the projection of indices onto values.
    """

    count: int

    def __init__(self) -> None:
        self._indices: list[int] = self._first_indices()
        self._position = 0

    # -- subclass hooks -----------------------------------------------------

    def _first_indices(self) -> list[int]:
        raise NotImplementedError

    def _last_indices(self) -> list[int]:
        raise NotImplementedError

    def _advance(self) -> bool:
        raise NotImplementedError

    def _retreat(self) -> bool:
        raise NotImplementedError

    def _indices_at(self, position: int) -> list[int]:
        raise NotImplementedError

    def _project(self) -> list[Any]:
        raise NotImplementedError

    # -- public cursor API --------------------------------------------------

    @property
    def last_position(self) -> int:
        return self.count - 1

    @property
    def position(self) -> int:
        """0-based distance of the current state from the first state."""
        return self._position

    @property
    def rank(self) -> int:
        """1-based rank of the current state."""
        return self._position + 1

    @property
    def indices(self) -> list[int]:
        return list(self._indices)

    @property
    def current(self) -> list[Any]:
        """The current value vector, as a fresh list."""
        return self._project()

    def start(self) -> list[Any]:
        """Move to the first state and return it."""
        self._indices = self._first_indices()
        self._position = 0
        return self._project()

    def reset(self) -> list[Any]:
        """Alias of start()."""
        return self.start()

    def end(self) -> list[Any]:
        """Move to the last state and return it."""
        self._indices = self._last_indices()
        self._position = self.last_position
        return self._project()

    def next(self) -> list[Any] | None:
        """Step to the successor, or return None on the last state."""
        if self._position >= self.last_position or not self._advance():
            return None
        self._position += 1
        return self._project()

    def previous(self) -> list[Any] | None:
        """Step to the predecessor, or return None on the first state."""
        if self._position <= 0 or not self._retreat():
            return None
        self._position -= 1
        return self._project()

    def seek(self, rank: int) -> list[Any] | None:
        """Jump to a 1-based rank.

        Returns:
            The state at that rank, or None when the rank is outside
            [1, count]. The cursor is left unchanged in that case.
        """
        if rank < 1 or rank > self.count:
            return None
        self._indices = self._indices_at(rank - 1)
        self._position = rank - 1
        return self._project()

    def __iter__(self) -> Iterator[list[Any]]:
        """Walk every state from the first, moving this cursor along.

        Each call restarts from start(); the walk ends after exactly
        ``count`` states.
        """
        value: list[Any] | None = self.start()
        while value is not None:
            yield value
            value = self.next()


class Combination(_Enumerator):
    """Enumerates the k-subsets of an ordered universe in lexicographic order.

    Indices are strictly increasing positions into the universe, so each
    state is a sorted selection by universe order.

    Attributes:
        universe: The ordered symbols selections are drawn from.
        k: Size of every selection.
        count: Number of selections, C(n, k).

    Example:
        >>> combination = Combination([1, 2, 3, 4, 5], 3)
        >>> combination.seek(7)
        [2, 3, 4]
        >>> combination.rank_of([3, 4, 5])
        10
    """

    def __init__(self, universe: Iterable[Hashable], k: int) -> None:
        self.universe: tuple[Hashable, ...] = tuple(universe)
        self.k = k
        n = len(self.universe)

        if n == 0:
            raise InvalidParameterError(
                message="Combination universe cannot be empty",
                field="universe",
                value=self.universe,
                context=ErrorContext(operation="Combination", parameters={"k": k}),
            )
        if len(set(self.universe)) != n:
            raise InvalidParameterError(
                message="Combination universe cannot hold duplicate symbols",
                field="universe",
                value=self.universe,
                context=ErrorContext(operation="Combination", parameters={"k": k}),
            )
        if k < 1 or k > n:
            raise SubsetSizeError(
                message=f"Subset size {k} is outside [1, {n}]",
                field="k",
                value=k,
                expected=f"1 <= k <= {n}",
                context=ErrorContext(operation="Combination", parameters={"n": n, "k": k}),
            )

        self.n = n
        self.count = binomial(n, k)
        self._positions = {symbol: i for i, symbol in enumerate(self.universe)}
        super().__init__()

        logger.debug(f"Combination over {n} symbols, k={k}: {self.count} selections")

    def _first_indices(self) -> list[int]:
        return list(range(self.k))

    def _last_indices(self) -> list[int]:
        return list(range(self.n - self.k, self.n))

    def _advance(self) -> bool:
        return advance_increasing(self._indices, self.n)

    def _retreat(self) -> bool:
        return retreat_increasing(self._indices, self.n)

    def _indices_at(self, position: int) -> list[int]:
        return [p - 1 for p in rank_to_tuple(self.n, self.k, position + 1)]

    def _project(self) -> list[Hashable]:
        return [self.universe[i] for i in self._indices]

    def rank_of(self, values: Sequence[Hashable]) -> int:
        """1-based rank of a selection from the universe, in any order.

        Returns:
            The rank, or -1 when the selection has the wrong size, repeats
            a symbol or holds a symbol outside the universe.
        """
        if len(values) != self.k or len(set(values)) != self.k:
            return -1
        try:
            positions = [self._positions[value] + 1 for value in values]
        except KeyError:
            return -1
        return tuple_to_rank(self.n, positions)

    def __repr__(self) -> str:
        return f"Combination(n={self.n}, k={self.k}, rank={self.rank}/{self.count})"


class CartesianProduct(_Enumerator):
    """Enumerates the Cartesian product of several parts.

    The state is a mixed-radix number with one digit per part; the last
    part varies fastest.

    Attributes:
        parts: The value lists, one per output slot.
        count: Product of the part sizes.

    Example:
        >>> product = CartesianProduct([1, 2, 3], [4, 5, 6], [7, 8, 9])
        >>> product.count
        27
        >>> product.seek(10)
        [2, 4, 7]
    """

    def __init__(self, *parts: Sequence[Any]) -> None:
        if not parts:
            raise InvalidParameterError(
                message="CartesianProduct needs at least one part",
                field="parts",
                value=parts,
                context=ErrorContext(operation="CartesianProduct"),
            )

        self.parts: tuple[tuple[Any, ...], ...] = tuple(tuple(part) for part in parts)
        for i, part in enumerate(self.parts):
            if not part:
                raise EmptyPartError(
                    message=f"CartesianProduct part {i} is empty",
                    field=f"parts[{i}]",
                    value=part,
                    context=ErrorContext(
                        operation="CartesianProduct",
                        parameters={"sizes": [len(p) for p in self.parts]},
                    ),
                )

        self._radices = [len(part) for part in self.parts]
        self.count = math.prod(self._radices)
        super().__init__()

        logger.debug(
            f"CartesianProduct of {len(self.parts)} parts {self._radices}: "
            f"{self.count} tuples"
        )

    @property
    def part_count(self) -> int:
        return len(self.parts)

    def _first_indices(self) -> list[int]:
        return [0] * len(self._radices)

    def _last_indices(self) -> list[int]:
        return [radix - 1 for radix in self._radices]

    def _advance(self) -> bool:
        return advance_mixed_radix(self._indices, self._radices)

    def _retreat(self) -> bool:
        return retreat_mixed_radix(self._indices, self._radices)

    def _indices_at(self, position: int) -> list[int]:
        return mixed_radix_digits(position, self._radices)

    def _project(self) -> list[Any]:
        return [part[i] for part, i in zip(self.parts, self._indices, strict=True)]

    def rank_of_indices(self, indices: Sequence[int]) -> int:
        """1-based rank of an index vector, or -1 when it is out of range."""
        if len(indices) != len(self._radices):
            return -1
        if any(i < 0 or i >= radix for i, radix in zip(indices, self._radices, strict=True)):
            return -1
        return mixed_radix_position(indices, self._radices) + 1

    def __repr__(self) -> str:
        return (
            f"CartesianProduct(parts={self.part_count}, "
            f"rank={self.rank}/{self.count})"
        )
