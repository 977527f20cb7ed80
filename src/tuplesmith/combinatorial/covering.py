"""Covering design feasibility.

A (v, k, t) covering design is a family of k-subsets ("blocks") of a
v-set such that every t-subset lies in at least one block. This module
answers cheap feasibility questions about such designs: the Schönheim
lower bound on the number of blocks, a tri-state existence predicate, and
coverage statistics for a concrete list of blocks.

Example:
    >>> schoenheim_lower_bound(10, 3, 2)
    17
    >>> covering_exists(50, 5, 2, lines=1)
    False
    >>> analyzer = CoveringDesignAnalyzer(v=7, k=3, t=2)
    >>> analyzer.is_covering([[1, 2, 4], [2, 3, 5], [3, 4, 6], [4, 5, 7],
    ...                       [1, 5, 6], [2, 6, 7], [1, 3, 7]])
    True
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from tuplesmith.combinatorial.arithmetic import binomial
from tuplesmith.combinatorial.enumerators import Combination
from tuplesmith.combinatorial.ranking import tuple_to_rank
from tuplesmith.errors import ErrorContext, InvalidParameterError

logger = logging.getLogger(__name__)


def _parameters_valid(v: int, k: int, t: int) -> bool:
    return v >= 1 and k >= 1 and t >= 1 and t <= k <= v


def _ceil_div(a: int, b: int) -> int:
    return (a + b - 1) // b


def schoenheim_lower_bound(v: int, k: int, t: int) -> int:
    """Schönheim lower bound L(v, k, t) on the size of a covering design.

    L = ceil(v/k * ceil((v-1)/(k-1) * ... ceil((v-t+1)/(k-t+1)))),
    evaluated from the innermost ceiling outwards with exact integers.

    Raises:
        InvalidParameterError: unless v, k, t >= 1 and t <= k <= v.
    """
    if not _parameters_valid(v, k, t):
        raise InvalidParameterError(
            message=f"Covering parameters must satisfy 1 <= t <= k <= v, got v={v}, k={k}, t={t}",
            field="v, k, t",
            value=(v, k, t),
            expected="1 <= t <= k <= v",
            context=ErrorContext(
                operation="schoenheim_lower_bound",
                parameters={"v": v, "k": k, "t": t},
            ),
        )

    bound = 1
    for i in range(t - 1, -1, -1):
        bound = _ceil_div(bound * (v - i), k - i)
    return bound


def covering_exists(v: int, k: int, t: int, lines: int) -> bool | None:
    """Decide, where cheaply possible, whether a covering with `lines` blocks exists.

    Returns:
        False when the parameters are invalid or `lines` is below the
        Schönheim bound. True when `lines` reaches C(v, t) (one block per
        t-subset), when k == v (one block is the whole set) or when t == 1
        and the bound is met. None when neither can be shown cheaply.
    """
    if lines < 1 or not _parameters_valid(v, k, t):
        return False

    if lines < schoenheim_lower_bound(v, k, t):
        return False
    if lines >= binomial(v, t):
        return True
    if k == v or t == 1:
        return True
    return None


class CoveringVerdict(Enum):
    """Outcome of a feasibility check for a number of blocks."""

    IMPOSSIBLE = "impossible"
    TRIVIAL = "trivial"
    UNDECIDED = "undecided"


@dataclass
class CoverageStats:
    """How much of the t-subset space a list of blocks covers.

    Attributes:
        strength: The t the blocks were measured against.
        total_subsets: C(v, t).
        covered_subsets: Number of distinct t-subsets inside some block.
        coverage_pct: Percentage coverage (0-100).
        block_count: Number of blocks measured.
    """

    strength: int
    total_subsets: int
    covered_subsets: int
    coverage_pct: float
    block_count: int

    @property
    def complete(self) -> bool:
        return self.covered_subsets == self.total_subsets

    def __repr__(self) -> str:
        return (
            f"CoverageStats(t={self.strength}, "
            f"{self.covered_subsets}/{self.total_subsets} subsets covered "
            f"({self.coverage_pct:.1f}%), "
            f"{self.block_count} blocks)"
        )


class CoveringDesignAnalyzer:
    """Feasibility checks for one (v, k, t) parameter set.

    Blocks are selections from {1..v}.

    Attributes:
        v: Size of the point set.
        k: Block size.
        t: Strength: the size of the subsets that must be covered.

    Example:
        >>> analyzer = CoveringDesignAnalyzer(10, 3, 2)
        >>> analyzer.lower_bound
        17
        >>> analyzer.verdict(16)
        <CoveringVerdict.IMPOSSIBLE: 'impossible'>
    """

    def __init__(self, v: int, k: int, t: int) -> None:
        self.v = v
        self.k = k
        self.t = t
        self.lower_bound = schoenheim_lower_bound(v, k, t)
        self.trivial_bound = binomial(v, t)

        logger.debug(
            f"Covering C({v},{k},{t}): bounds {self.lower_bound}..{self.trivial_bound}"
        )

    def exists(self, lines: int) -> bool | None:
        return covering_exists(self.v, self.k, self.t, lines)

    def verdict(self, lines: int) -> CoveringVerdict:
        """Classify a block count as impossible, trivially sufficient or undecided."""
        exists = self.exists(lines)
        if exists is None:
            return CoveringVerdict.UNDECIDED
        return CoveringVerdict.TRIVIAL if exists else CoveringVerdict.IMPOSSIBLE

    def coverage_stats(self, blocks: Iterable[Sequence[int]]) -> CoverageStats:
        """Count the t-subsets of {1..v} covered by the given blocks.

        Every t-subset of each block is ranked, so blocks may have any size
        of at least t; smaller blocks cover nothing.

        Raises:
            InvalidParameterError: when a block holds a value outside 1..v.
        """
        covered: set[int] = set()
        block_count = 0

        for block in blocks:
            block_count += 1
            points = sorted(set(block))
            for point in points:
                if point < 1 or point > self.v:
                    raise InvalidParameterError(
                        message=f"Block value {point} is outside 1..{self.v}",
                        field="blocks",
                        value=list(block),
                        expected=f"values in 1..{self.v}",
                        context=ErrorContext(
                            operation="CoveringDesignAnalyzer.coverage_stats",
                            parameters={"v": self.v, "k": self.k, "t": self.t},
                        ),
                    )
            if len(points) < self.t:
                continue
            for subset in Combination(points, self.t):
                covered.add(tuple_to_rank(self.v, subset))

        total = self.trivial_bound
        pct = len(covered) / total * 100

        stats = CoverageStats(
            strength=self.t,
            total_subsets=total,
            covered_subsets=len(covered),
            coverage_pct=pct,
            block_count=block_count,
        )
        logger.info(f"Coverage of C({self.v},{self.k},{self.t}): {stats!r}")
        return stats

    def is_covering(self, blocks: Iterable[Sequence[int]]) -> bool:
        return self.coverage_stats(blocks).complete

    def __repr__(self) -> str:
        return f"CoveringDesignAnalyzer(v={self.v}, k={self.k}, t={self.t})"
