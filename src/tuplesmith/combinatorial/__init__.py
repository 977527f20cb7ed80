"""Combinatorial core: counting, ranking, enumeration and covering bounds.

Example:
    >>> from tuplesmith.combinatorial import Combination, binomial
    >>> binomial(90, 5)
    43949268
    >>> [t for t in Combination([1, 2, 3, 4], 3)]
    [[1, 2, 3], [1, 2, 4], [1, 3, 4], [2, 3, 4]]
"""

from tuplesmith.combinatorial.arithmetic import binomial, factorial, gcd, lcm
from tuplesmith.combinatorial.covering import (
    CoverageStats,
    CoveringDesignAnalyzer,
    CoveringVerdict,
    covering_exists,
    schoenheim_lower_bound,
)
from tuplesmith.combinatorial.enumerators import CartesianProduct, Combination
from tuplesmith.combinatorial.odometer import (
    advance_increasing,
    advance_mixed_radix,
    increasing_indices,
    retreat_increasing,
    retreat_mixed_radix,
)
from tuplesmith.combinatorial.ranking import (
    rank_in_alphabet,
    rank_to_tuple,
    tuple_in_alphabet,
    tuple_to_rank,
)

__all__ = [
    # Arithmetic
    "factorial",
    "binomial",
    "gcd",
    "lcm",
    # Ranking
    "tuple_to_rank",
    "rank_to_tuple",
    "rank_in_alphabet",
    "tuple_in_alphabet",
    # Odometer
    "advance_increasing",
    "retreat_increasing",
    "advance_mixed_radix",
    "retreat_mixed_radix",
    "increasing_indices",
    # Enumerators
    "Combination",
    "CartesianProduct",
    # Covering designs
    "schoenheim_lower_bound",
    "covering_exists",
    "CoveringDesignAnalyzer",
    "CoveringVerdict",
    "CoverageStats",
]
