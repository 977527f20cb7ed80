"""Gap spectrum statistics over the sub-subsets of a tuple.

For a tuple and a guarantee size g, every size-g sub-subset of the sorted
tuple is visited with the shared index odometer. Each sub-subset yields
its pairwise differences, read in one of three ways (see GapMode). The
spectrum is then summarized either as a count of distinct values (for
g == 2) or distinct signatures (for g > 2), or as a plain sum.

Example:
    >>> gap_spectrum_cardinality([1, 2, 4, 8], 2)
    6
    >>> gap_spectrum_cardinality([1, 2, 4, 8], 2, GapMode.MODULAR, modulo=8)
    4
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from enum import Enum

from tuplesmith.combinatorial.arithmetic import binomial
from tuplesmith.combinatorial.odometer import increasing_indices
from tuplesmith.errors import ErrorContext, InvalidParameterError, SpectrumLimitError

logger = logging.getLogger(__name__)


class GapMode(Enum):
    """How the difference between two sorted values a <= b is read.

    - LINEAR: b - a.
    - MODULAR: the shorter way round a circle of m values,
      min(d, m - d) with d = (b - a) % m.
    - ORIENTED: both directions round the circle, d and (m - d) % m.
    """

    LINEAR = "linear"
    MODULAR = "modular"
    ORIENTED = "oriented"


def _differences(a: int, b: int, mode: GapMode, modulo: int | None) -> tuple[int, ...]:
    if mode is GapMode.LINEAR:
        return (b - a,)
    assert modulo is not None
    d = (b - a) % modulo
    if mode is GapMode.MODULAR:
        return (min(d, modulo - d),)
    return (d, (modulo - d) % modulo)


def _pairwise(values: Sequence[int], mode: GapMode, modulo: int | None) -> list[int]:
    diffs: list[int] = []
    for i in range(len(values)):
        for j in range(i + 1, len(values)):
            diffs.extend(_differences(values[i], values[j], mode, modulo))
    return diffs


def _sub_subsets(
    numbers: Sequence[int] | None,
    guarantee: int,
    mode: GapMode,
    modulo: int | None,
    limit: int | None,
    operation: str,
) -> Iterator[list[int]] | None:
    """Validate the arguments and return the sub-subset walk, or None when empty."""
    if mode is not GapMode.LINEAR and modulo is None:
        raise InvalidParameterError(
            message=f"{mode.name} gap mode needs a modulo",
            field="modulo",
            value=modulo,
            context=ErrorContext(
                operation=operation,
                parameters={"guarantee": guarantee, "mode": mode.value},
            ),
        )
    if not numbers or guarantee < 2 or len(numbers) < guarantee:
        return None
    if modulo is not None and modulo < guarantee:
        return None

    subsets = binomial(len(numbers), guarantee)
    if limit and subsets > limit:
        raise SpectrumLimitError(
            message=(
                f"Gap spectrum of {len(numbers)} values at guarantee {guarantee} "
                f"visits {subsets} sub-subsets, limit is {limit}"
            ),
            subsets=subsets,
            limit=limit,
            context=ErrorContext(
                operation=operation,
                parameters={"length": len(numbers), "guarantee": guarantee},
            ),
        )

    logger.debug(f"{operation}: {subsets} sub-subsets of size {guarantee} ({mode.value})")

    values = sorted(numbers)
    return (
        [values[i] for i in indices]
        for indices in increasing_indices(len(values), guarantee)
    )


def gap_spectrum_cardinality(
    numbers: Sequence[int] | None,
    guarantee: int,
    mode: GapMode = GapMode.LINEAR,
    modulo: int | None = None,
    limit: int | None = None,
) -> int:
    """Count the distinct gap values (g == 2) or gap signatures (g > 2).

    A signature is the sorted list of every pairwise difference inside one
    sub-subset. Zero differences do not count as gap values for g == 2.

    Args:
        numbers: The tuple to analyse, in any order.
        guarantee: Size g of the sub-subsets.
        mode: How differences are read.
        modulo: Circle size, required by the modular modes.
        limit: Largest number of sub-subsets to visit (None or 0 = unlimited).

    Returns:
        The count, or 0 when g < 2, the tuple is shorter than g, or
        modulo < g.

    Raises:
        InvalidParameterError: If a modular mode is used without a modulo.
        SpectrumLimitError: If C(len(numbers), g) exceeds `limit`.
    """
    walk = _sub_subsets(numbers, guarantee, mode, modulo, limit, "gap_spectrum_cardinality")
    if walk is None:
        return 0

    if guarantee == 2:
        gaps = {d for pair in walk for d in _pairwise(pair, mode, modulo) if d > 0}
        return len(gaps)

    signatures = {tuple(sorted(_pairwise(subset, mode, modulo))) for subset in walk}
    return len(signatures)


def gap_spectrum_sum(
    numbers: Sequence[int] | None,
    guarantee: int,
    mode: GapMode = GapMode.LINEAR,
    modulo: int | None = None,
    limit: int | None = None,
) -> int:
    """Sum every pairwise difference over every size-g sub-subset.

    Arguments, empty cases and errors are those of gap_spectrum_cardinality.
    """
    walk = _sub_subsets(numbers, guarantee, mode, modulo, limit, "gap_spectrum_sum")
    if walk is None:
        return 0
    return sum(sum(_pairwise(subset, mode, modulo)) for subset in walk)


def diversity_score(
    numbers: Sequence[int] | None,
    guarantee: int,
    modulo: int | None = None,
) -> int:
    """Structural diversity of a tuple.

    The number of distinct minimal circular differences when a modulo is
    given, of distinct plain differences otherwise (or of signatures, for
    guarantee > 2). A modulo smaller than the guarantee, 0 included, scores 0.
    """
    mode = GapMode.MODULAR if modulo is not None else GapMode.LINEAR
    return gap_spectrum_cardinality(numbers, guarantee, mode, modulo)
