"""Tests for tuple set algebra, complement and translation."""

from __future__ import annotations

import pytest

from tuplesmith.errors import AlphabetError
from tuplesmith.tuples import (
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


# ============================================================
# Set Algebra Tests
# ============================================================


class TestUnion:
    """Tests for union()."""

    def test_unique(self):
        result = union([8, 3, 1, 7, 6, 5], [4, 3, 1, 2, 6, 9])
        assert result == [8, 3, 1, 7, 6, 5, 4, 2, 9]
        assert canonical(result) == [1, 2, 3, 4, 5, 6, 7, 8, 9]

    def test_with_duplicates(self):
        result = union([8, 3, 1, 7, 6, 5], [4, 3, 1, 2, 6, 9], duplicate=True)
        assert result == [8, 3, 1, 7, 6, 5, 4, 3, 1, 2, 6, 9]

    def test_deduplicates_first_operand_too(self):
        assert union([1, 1, 2], [2, 3]) == [1, 2, 3]

    def test_none_operands(self):
        assert union(None, [2, 2, 1]) == [2, 1]
        assert union([2, 2, 1], None) == [2, 1]
        assert union(None, [2, 2, 1], duplicate=True) == [2, 2, 1]
        assert union(None, None) == []

    def test_does_not_modify_arguments(self):
        first, second = [3, 1], [2, 1]
        union(first, second)
        assert first == [3, 1]
        assert second == [2, 1]


class TestIntersection:
    """Tests for intersection()."""

    def test_basic(self):
        result = intersection([8, 3, 1, 7, 6, 5], [4, 3, 1, 2, 6, 9])
        assert result == [3, 1, 6]
        assert canonical(result) == [1, 3, 6]

    def test_keeps_first_occurrence(self):
        assert intersection([3, 1, 3, 6, 1], [1, 3]) == [3, 1]

    def test_disjoint(self):
        assert intersection([1, 2], [3, 4]) == []

    def test_none(self):
        assert intersection(None, [1]) == []
        assert intersection([1], None) == []


class TestDifference:
    """Tests for difference()."""

    def test_basic(self):
        result = difference([8, 3, 7, 8, 6, 5, 3, 1], [4, 3, 1, 2, 6, 9, 1, 9, 3])
        assert result == [8, 7, 5]
        assert canonical(result) == [5, 7, 8]

    def test_none(self):
        assert difference(None, [1]) == []
        assert difference([2, 1, 2], None) == [2, 1]

    def test_nothing_removed(self):
        assert difference([1, 2, 3], [4]) == [1, 2, 3]


class TestHelpers:
    """Tests for canonical() and collisions_count()."""

    def test_canonical(self):
        assert canonical([5, 1, 3, 1]) == [1, 3, 5]
        assert canonical(None) == []

    def test_collisions_count(self):
        assert collisions_count([1, 2, 3, 4], [3, 4, 5]) == 2
        assert collisions_count([1, 1, 2], [1]) == 2
        assert collisions_count([], [1]) == 0


# ============================================================
# Complement Tests
# ============================================================


class TestComplement:
    """Tests for complement() and complement_to_max()."""

    def test_complement(self, alphabet_10):
        assert complement(alphabet_10, [8, 3, 1]) == [3, 8, 10]
        assert complement(alphabet_10, [10, 2, 4, 5]) == [1, 9, 7, 6]

    def test_complement_is_involution(self, alphabet_10):
        numbers = [8, 3, 1, 10]
        assert complement(alphabet_10, complement(alphabet_10, numbers)) == numbers

    def test_complement_of_symbols(self):
        assert complement(["a", "b", "c", "d"], ["a", "c"]) == ["d", "b"]

    def test_unknown_symbol(self, alphabet_10):
        assert complement(alphabet_10, [1, 11]) is None

    def test_none(self, alphabet_10):
        assert complement(None, [1]) is None
        assert complement(alphabet_10, None) is None

    def test_complement_to_max(self):
        assert complement_to_max(9, [8, 3, 1, 7, 8, 6, 5, 3, 7, 1]) == [
            2, 7, 9, 3, 2, 4, 5, 7, 3, 9,
        ]


# ============================================================
# Translation Tests
# ============================================================


class TestTranslate:
    """Tests for translate() and translate_all()."""

    def test_translate(self):
        assert translate([1, 2, 3], [1, 2, 3, 4], [10, 20, 30, 40]) == [10, 20, 30]

    def test_keeps_input_order(self):
        assert translate([4, 1], [1, 2, 3, 4], ["a", "b", "c", "d"]) == ["d", "a"]

    def test_missing_symbol_raises(self):
        with pytest.raises(AlphabetError, match="Number 5 not found") as exc_info:
            translate([1, 5], [1, 2, 3, 4], [10, 20, 30, 40])
        assert exc_info.value.value == 5

    def test_missing_alphabet_raises(self):
        with pytest.raises(AlphabetError, match="Invalid origin or target alphabet"):
            translate([1], None, [10])
        with pytest.raises(AlphabetError):
            translate([1], [1], None)

    def test_length_mismatch_raises(self):
        with pytest.raises(AlphabetError, match="differ in length"):
            translate([1], [1, 2, 3], [10, 20])

    def test_translate_all(self):
        result = translate_all([[1, 2], [3, 4]], [1, 2, 3, 4], [10, 20, 30, 40])
        assert result == [[10, 20], [30, 40]]

    def test_translate_all_fails_on_bad_tuple(self):
        with pytest.raises(AlphabetError):
            translate_all([[1, 2], [3, 9]], [1, 2, 3, 4], [10, 20, 30, 40])

    def test_round_trip(self):
        origin = list(range(1, 11))
        target = list(range(101, 111))
        numbers = [7, 2, 9]
        assert translate(translate(numbers, origin, target), target, origin) == numbers
