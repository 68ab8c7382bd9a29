"""Test suite for hungarian_match and match_compatible.

Tests the np.inf guard, rectangular matrices, empty matrices, all-inf
matrices, and maximum matching over boolean compatibility matrices.
"""

from __future__ import annotations

import numpy as np
import pytest

from json_snapshot.algorithm.matcher import hungarian_match, match_compatible

# ---------------------------------------------------------------------------
# hungarian_match
# ---------------------------------------------------------------------------


class TestHungarianEmpty:
    def test_zero_by_zero_matrix_returns_empty_arrays(self) -> None:
        row_ind, col_ind = hungarian_match(np.empty((0, 0), dtype=float))
        assert len(row_ind) == 0
        assert len(col_ind) == 0

    def test_zero_by_three_matrix_returns_empty_arrays(self) -> None:
        row_ind, _col_ind = hungarian_match(np.empty((0, 3), dtype=float))
        assert len(row_ind) == 0

    def test_all_inf_returns_empty(self) -> None:
        row_ind, col_ind = hungarian_match(np.full((2, 3), np.inf))
        assert len(row_ind) == 0
        assert len(col_ind) == 0


class TestHungarianInfGuard:
    def test_inf_does_not_raise_value_error(self) -> None:
        cost = np.array([[1.0, np.inf], [np.inf, 2.0]], dtype=float)
        row_ind, col_ind = hungarian_match(cost)
        assert list(row_ind) == [0, 1]
        assert list(col_ind) == [0, 1]

    def test_forbidden_pairs_are_filtered(self) -> None:
        # Row 1 has no finite option left once row 0 takes column 0.
        cost = np.array([[0.0, np.inf], [0.0, np.inf]], dtype=float)
        row_ind, col_ind = hungarian_match(cost)
        assert len(row_ind) == 1
        assert col_ind[0] == 0

    def test_optimal_cost_without_inf(self) -> None:
        cost = np.array([[4.0, 1.0], [2.0, 3.0]], dtype=float)
        row_ind, col_ind = hungarian_match(cost)
        assert cost[row_ind, col_ind].sum() == pytest.approx(3.0)


# ---------------------------------------------------------------------------
# match_compatible
# ---------------------------------------------------------------------------


class TestMatchCompatible:
    def test_empty_matrix(self) -> None:
        assert match_compatible(np.zeros((0, 0), dtype=bool)) == []
        assert match_compatible(np.zeros((0, 2), dtype=bool)) == []

    def test_identity(self) -> None:
        assert match_compatible(np.eye(3, dtype=bool)) == [(0, 0), (1, 1), (2, 2)]

    def test_permutation(self) -> None:
        compatible = np.array(
            [[False, True, False], [False, False, True], [True, False, False]]
        )
        assert match_compatible(compatible) == [(0, 1), (1, 2), (2, 0)]

    def test_greedy_trap_is_avoided(self) -> None:
        # Row 0 fits both columns, row 1 only column 0: a greedy choice of
        # (0, 0) would leave row 1 unmatched.
        compatible = np.array([[True, True], [True, False]])
        assert match_compatible(compatible) == [(0, 1), (1, 0)]

    def test_duplicates_pair_once(self) -> None:
        # expected [3, 3], actual [3]
        compatible = np.array([[True], [True]])
        pairs = match_compatible(compatible)
        assert len(pairs) == 1
        assert pairs[0][1] == 0

    def test_no_compatible_pairs(self) -> None:
        assert match_compatible(np.zeros((2, 2), dtype=bool)) == []

    def test_rectangular(self) -> None:
        compatible = np.array([[True, False, False], [False, False, True]])
        assert match_compatible(compatible) == [(0, 0), (1, 2)]
