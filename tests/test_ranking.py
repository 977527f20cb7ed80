"""Tests for the rank <-> subset bijection."""

from __future__ import annotations

import pytest

from tuplesmith.combinatorial import (
    binomial,
    rank_in_alphabet,
    rank_to_tuple,
    tuple_in_alphabet,
    tuple_to_rank,
)

RANKS_5_3 = [
    ([1, 2, 3], 1),
    ([1, 2, 4], 2),
    ([1, 2, 5], 3),
    ([1, 3, 4], 4),
    ([1, 3, 5], 5),
    ([1, 4, 5], 6),
    ([2, 3, 4], 7),
    ([2, 3, 5], 8),
    ([2, 4, 5], 9),
    ([3, 4, 5], 10),
]

RANKS_6_4 = [
    ([1, 2, 3, 4], 1),
    ([1, 2, 3, 5], 2),
    ([1, 2, 3, 6], 3),
    ([1, 2, 4, 5], 4),
    ([1, 2, 4, 6], 5),
    ([1, 2, 5, 6], 6),
    ([1, 3, 4, 5], 7),
    ([1, 3, 4, 6], 8),
    ([1, 3, 5, 6], 9),
    ([1, 4, 5, 6], 10),
    ([2, 3, 4, 5], 11),
    ([2, 3, 4, 6], 12),
    ([2, 3, 5, 6], 13),
    ([2, 4, 5, 6], 14),
    ([3, 4, 5, 6], 15),
]


# ============================================================
# tuple_to_rank Tests
# ============================================================


class TestTupleToRank:
    """Tests for tuple_to_rank()."""

    @pytest.mark.parametrize("value", [1, 2, 3, 4, 5])
    def test_singletons(self, value):
        assert tuple_to_rank(5, [value]) == value

    @pytest.mark.parametrize("subset, rank", RANKS_5_3)
    def test_triples_of_five(self, subset, rank):
        assert tuple_to_rank(5, list(subset)) == rank

    @pytest.mark.parametrize("subset, rank", RANKS_6_4)
    def test_quadruples_of_six(self, subset, rank):
        assert tuple_to_rank(6, list(subset)) == rank

    def test_quadruples_of_five(self):
        assert tuple_to_rank(5, [1, 2, 3, 4]) == 1
        assert tuple_to_rank(5, [1, 2, 3, 5]) == 2
        assert tuple_to_rank(5, [1, 2, 4, 5]) == 3
        assert tuple_to_rank(5, [1, 3, 4, 5]) == 4
        assert tuple_to_rank(5, [2, 3, 4, 5]) == 5

    def test_sorts_list_in_place(self):
        subset = [5, 3, 4]
        assert tuple_to_rank(5, subset) == 10
        assert subset == [3, 4, 5]

    def test_tuple_argument_is_not_modified(self):
        subset = (5, 3, 4)
        assert tuple_to_rank(5, subset) == 10
        assert subset == (5, 3, 4)

    def test_invalid_inputs_return_sentinel(self):
        assert tuple_to_rank(-1, [1]) == -1
        assert tuple_to_rank(5, []) == -1
        assert tuple_to_rank(5, None) == -1
        assert tuple_to_rank(5, [1, 2, 6]) == -1

    def test_large_universe_is_exact(self):
        last = list(range(46, 91))
        assert tuple_to_rank(90, last) == binomial(90, 45)


# ============================================================
# rank_to_tuple Tests
# ============================================================


class TestRankToTuple:
    """Tests for rank_to_tuple()."""

    @pytest.mark.parametrize("rank", [1, 2, 3, 4, 5])
    def test_singletons(self, rank):
        assert rank_to_tuple(5, 1, rank) == [rank]

    @pytest.mark.parametrize(
        "rank, expected",
        [
            (1, [1, 2]),
            (2, [1, 3]),
            (3, [1, 4]),
            (4, [1, 5]),
            (5, [2, 3]),
            (6, [2, 4]),
            (7, [2, 5]),
            (8, [3, 4]),
            (9, [3, 5]),
            (10, [4, 5]),
        ],
    )
    def test_pairs_of_five(self, rank, expected):
        assert rank_to_tuple(5, 2, rank) == expected

    @pytest.mark.parametrize("subset, rank", RANKS_5_3)
    def test_triples_of_five(self, subset, rank):
        assert rank_to_tuple(5, 3, rank) == subset

    @pytest.mark.parametrize("subset, rank", RANKS_6_4)
    def test_quadruples_of_six(self, subset, rank):
        assert rank_to_tuple(6, 4, rank) == subset

    def test_invalid_inputs_return_empty(self):
        assert rank_to_tuple(0, 1, 1) == []
        assert rank_to_tuple(5, 0, 1) == []
        assert rank_to_tuple(5, 6, 1) == []
        assert rank_to_tuple(5, 3, 0) == []
        assert rank_to_tuple(5, 3, 11) == []

    def test_full_universe(self):
        assert rank_to_tuple(4, 4, 1) == [1, 2, 3, 4]

    def test_round_trip_lotto(self):
        for rank in (1, 2, 999_999, 6_000_000, 13_983_816):
            subset = rank_to_tuple(49, 6, rank)
            assert tuple_to_rank(49, list(subset)) == rank

    def test_last_rank_of_large_universe(self):
        assert rank_to_tuple(90, 5, binomial(90, 5)) == [86, 87, 88, 89, 90]


# ============================================================
# Alphabet Ranking Tests
# ============================================================


class TestAlphabetRanking:
    """Tests for rank_in_alphabet() and tuple_in_alphabet()."""

    def test_rank_of_letters(self):
        alphabet = ["a", "b", "c", "d", "e"]
        assert rank_in_alphabet(alphabet, ["a", "b", "c"]) == 1
        assert rank_in_alphabet(alphabet, ["e", "c", "d"]) == 10

    def test_alphabet_order_defines_rank(self):
        alphabet = [10, 8, 6, 4, 2]
        assert rank_in_alphabet(alphabet, [10, 8, 6]) == 1
        assert rank_in_alphabet(alphabet, [6, 4, 2]) == 10

    def test_subset_is_not_modified(self):
        subset = ["e", "c", "d"]
        rank_in_alphabet(["a", "b", "c", "d", "e"], subset)
        assert subset == ["e", "c", "d"]

    def test_unknown_symbol(self):
        assert rank_in_alphabet(["a", "b", "c"], ["a", "z"]) == -1

    def test_empty_inputs(self):
        assert rank_in_alphabet([], ["a"]) == -1
        assert rank_in_alphabet(["a"], []) == -1

    def test_unrank_letters(self):
        alphabet = ["a", "b", "c", "d", "e"]
        assert tuple_in_alphabet(alphabet, 3, 7) == ["b", "c", "d"]
        assert tuple_in_alphabet(alphabet, 3, 11) == []

    def test_round_trip(self):
        alphabet = list("abcdefgh")
        for rank in range(1, binomial(8, 3) + 1):
            subset = tuple_in_alphabet(alphabet, 3, rank)
            assert rank_in_alphabet(alphabet, subset) == rank
