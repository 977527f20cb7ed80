"""tuplesmith - combinatorial enumeration and analysis of fixed-size selections.

Rank and unrank k-subsets, step through subsets and Cartesian products in
both directions, measure tuples against an alphabet, and check covering
design feasibility. All counts are exact Python ints.

Quick Start:
    from tuplesmith import Combination, tuple_to_rank, schoenheim_lower_bound

    combination = Combination(range(1, 50), 6)
    combination.seek(1_000_000)          # jump straight to a rank
    combination.next()                   # then step from there

    tuple_to_rank(5, [3, 4, 5])          # 10
    schoenheim_lower_bound(10, 3, 2)     # 17
"""

from __future__ import annotations

# Combinatorial core
from tuplesmith.combinatorial import (
    CartesianProduct,
    Combination,
    CoverageStats,
    CoveringDesignAnalyzer,
    CoveringVerdict,
    binomial,
    covering_exists,
    factorial,
    gcd,
    lcm,
    rank_in_alphabet,
    rank_to_tuple,
    schoenheim_lower_bound,
    tuple_in_alphabet,
    tuple_to_rank,
)

# Configuration
from tuplesmith.config import TuplesmithConfig, load_config

# Errors
from tuplesmith.errors import (
    AlphabetError,
    ConfigValidationError,
    EmptyPartError,
    ErrorCode,
    InvalidParameterError,
    NumericRangeError,
    SpectrumLimitError,
    SubsetSizeError,
    TuplesmithError,
    ValidationError,
)

# Logging
from tuplesmith.observability import configure_logging

# Tuple operations
from tuplesmith.tuples import (
    GapMode,
    canonical,
    complement,
    difference,
    diversity_score,
    gap_spectrum_cardinality,
    gap_spectrum_sum,
    intersection,
    linear_maximum_gap,
    linear_minimum_gap,
    modular_maximum_gap,
    modular_minimum_gap,
    translate,
    union,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Arithmetic and ranking
    "factorial",
    "binomial",
    "gcd",
    "lcm",
    "tuple_to_rank",
    "rank_to_tuple",
    "rank_in_alphabet",
    "tuple_in_alphabet",
    # Enumerators
    "Combination",
    "CartesianProduct",
    # Covering designs
    "schoenheim_lower_bound",
    "covering_exists",
    "CoveringDesignAnalyzer",
    "CoveringVerdict",
    "CoverageStats",
    # Tuple operations
    "canonical",
    "union",
    "intersection",
    "difference",
    "complement",
    "translate",
    "linear_minimum_gap",
    "linear_maximum_gap",
    "modular_minimum_gap",
    "modular_maximum_gap",
    "GapMode",
    "gap_spectrum_cardinality",
    "gap_spectrum_sum",
    "diversity_score",
    # Configuration and logging
    "TuplesmithConfig",
    "load_config",
    "configure_logging",
    # Errors
    "TuplesmithError",
    "ErrorCode",
    "ValidationError",
    "InvalidParameterError",
    "EmptyPartError",
    "SubsetSizeError",
    "AlphabetError",
    "ConfigValidationError",
    "NumericRangeError",
    "SpectrumLimitError",
]
