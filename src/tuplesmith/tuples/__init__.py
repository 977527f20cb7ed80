"""Stateless operations over tuples: set algebra, gap metrics, spectra, layout."""

from tuplesmith.tuples.algebra import (
    canonical,
    collisions_count,
    complement,
    complement_to_max,
    difference,
    intersection,
    translate,
    translate_all,
    union,
)
from tuplesmith.tuples.layout import (
    concat,
    cyclic_sequence,
    extract_n_minus_1,
    gap_series,
    interleaved_merge,
    pairwise_merge,
    reverse,
    rotate,
    rotate_round_robin,
    split,
    split_and_extract_n_minus_1,
    split_into_lines,
    to_canonical_string,
    to_string,
    transpose,
)
from tuplesmith.tuples.metrics import (
    alphabet_maximum_gap,
    alphabet_maximum_right_gap,
    alphabet_minimum_gap,
    alphabet_minimum_right_gap,
    distance,
    linear_maximum_gap,
    linear_minimum_gap,
    modular_maximum_gap,
    modular_minimum_gap,
)
from tuplesmith.tuples.spectrum import (
    GapMode,
    diversity_score,
    gap_spectrum_cardinality,
    gap_spectrum_sum,
)

__all__ = [
    # Set algebra
    "canonical",
    "union",
    "intersection",
    "difference",
    "collisions_count",
    "complement",
    "complement_to_max",
    "translate",
    "translate_all",
    # Gap metrics
    "linear_minimum_gap",
    "linear_maximum_gap",
    "modular_minimum_gap",
    "modular_maximum_gap",
    "distance",
    "alphabet_minimum_gap",
    "alphabet_minimum_right_gap",
    "alphabet_maximum_gap",
    "alphabet_maximum_right_gap",
    # Gap spectrum
    "GapMode",
    "gap_spectrum_cardinality",
    "gap_spectrum_sum",
    "diversity_score",
    # Layout
    "to_string",
    "to_canonical_string",
    "split",
    "concat",
    "rotate",
    "rotate_round_robin",
    "reverse",
    "transpose",
    "gap_series",
    "interleaved_merge",
    "split_into_lines",
    "extract_n_minus_1",
    "split_and_extract_n_minus_1",
    "pairwise_merge",
    "cyclic_sequence",
]
