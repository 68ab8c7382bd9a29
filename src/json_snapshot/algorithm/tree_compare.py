"""TreeComparator: recursive lock-step comparison of two decoded JSON trees.

Architecture:
- Every node is first run through the SelectionPolicy.  Skipped subtrees are
  never compared and never reported.  Inside a DESCEND region (an ancestor of
  an ``only`` target) a missing or extra value is reported only when it holds
  a selected node.
- Different JSON types at the same path produce TYPE_DIFFERS and stop there.
- Scalars compare by value; numbers compare numerically (``1 == 1.0``).
- OBJECT nodes: keys are looked up by name, so key order never matters.
  Missing expected keys are reported; extra actual keys are reported unless
  the compare mode is extensible.
- ARRAY nodes: positional comparison under ``strict_order``, otherwise a
  maximum bipartite matching where two elements are compatible when they
  compare with zero mismatches under the same policy.

The comparator reports every mismatch it finds rather than stopping at the
first one.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

import numpy as np

from json_snapshot.algorithm.matcher import match_compatible
from json_snapshot.algorithm.policy import Selection, SelectionPolicy
from json_snapshot.result import Mismatch, MismatchKind
from json_snapshot.tree.nodes import ROOT_PATH, FieldPath, NodeType, node_type_of

if TYPE_CHECKING:
    from json_snapshot.config import CompareMode

__all__ = ["TreeComparator"]


def _scalars_equal(node_type: NodeType, expected: Any, actual: Any) -> bool:
    if node_type == NodeType.NUMBER:
        if expected == actual:
            return True
        return (
            isinstance(expected, float)
            and isinstance(actual, float)
            and math.isnan(expected)
            and math.isnan(actual)
        )
    return bool(expected == actual)


class TreeComparator:
    """Compares an expected (baseline) tree against an actual tree.

    Example::

        from json_snapshot.algorithm import SelectionPolicy, TreeComparator
        from json_snapshot.config import CompareMode

        policy = SelectionPolicy.from_patterns(ignore=["**.id"])
        cmp = TreeComparator(CompareMode(), policy)
        cmp.compare({"a": {"id": 1}}, {"a": {"id": 2}})   # []
    """

    def __init__(
        self,
        compare_mode: CompareMode,
        policy: SelectionPolicy | None = None,
    ) -> None:
        self._extensible = compare_mode.extensible
        self._strict_order = compare_mode.strict_order
        self._policy = policy if policy is not None else SelectionPolicy()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, expected: Any, actual: Any) -> list[Mismatch]:
        """Return every mismatch between ``expected`` and ``actual``.

        Raises:
            TypeError: If either value contains a non-JSON type.
        """
        mismatches: list[Mismatch] = []
        selection = self._policy.select(ROOT_PATH)
        if selection is not Selection.SKIP:
            self._compare_node(expected, actual, ROOT_PATH, selection, mismatches)
        return mismatches

    # ------------------------------------------------------------------
    # Recursive walk
    # ------------------------------------------------------------------

    def _compare_node(
        self,
        expected: Any,
        actual: Any,
        path: FieldPath,
        selection: Selection,
        out: list[Mismatch],
    ) -> None:
        expected_type = node_type_of(expected)
        actual_type = node_type_of(actual)

        if expected_type != actual_type:
            if self._reportable(expected, path, selection) or self._reportable(
                actual, path, selection
            ):
                out.append(
                    Mismatch(path, MismatchKind.TYPE_DIFFERS, expected, actual)
                )
            return

        if expected_type == NodeType.OBJECT:
            self._compare_objects(expected, actual, path, selection, out)
        elif expected_type == NodeType.ARRAY:
            self._compare_arrays(expected, actual, path, selection, out)
        elif selection is Selection.COMPARE and not _scalars_equal(
            expected_type, expected, actual
        ):
            out.append(Mismatch(path, MismatchKind.VALUE_DIFFERS, expected, actual))

    def _compare_objects(
        self,
        expected: dict[str, Any],
        actual: dict[str, Any],
        path: FieldPath,
        selection: Selection,
        out: list[Mismatch],
    ) -> None:
        for key, expected_value in expected.items():
            child_path = (*path, key)
            child_selection = self._policy.select(child_path, selection)
            if child_selection is Selection.SKIP:
                continue
            if key not in actual:
                if not self._reportable(expected_value, child_path, child_selection):
                    continue
                out.append(
                    Mismatch(child_path, MismatchKind.MISSING, expected=expected_value)
                )
                continue
            self._compare_node(
                expected_value, actual[key], child_path, child_selection, out
            )

        if self._extensible:
            return

        for key, actual_value in actual.items():
            if key in expected:
                continue
            child_path = (*path, key)
            child_selection = self._policy.select(child_path, selection)
            if not self._reportable(actual_value, child_path, child_selection):
                continue
            out.append(
                Mismatch(child_path, MismatchKind.UNEXPECTED, actual=actual_value)
            )

    def _compare_arrays(
        self,
        expected: list[Any],
        actual: list[Any],
        path: FieldPath,
        selection: Selection,
        out: list[Mismatch],
    ) -> None:
        if self._strict_order:
            self._compare_arrays_strict(expected, actual, path, selection, out)
        else:
            self._compare_arrays_unordered(expected, actual, path, selection, out)

    def _compare_arrays_strict(
        self,
        expected: list[Any],
        actual: list[Any],
        path: FieldPath,
        selection: Selection,
        out: list[Mismatch],
    ) -> None:
        if len(expected) != len(actual):
            if selection is Selection.COMPARE:
                out.append(
                    Mismatch(
                        path, MismatchKind.VALUE_DIFFERS, len(expected), len(actual)
                    )
                )
            else:
                self._report_leftovers(
                    expected[len(actual) :],
                    actual[len(expected) :],
                    path,
                    selection,
                    out,
                    offset=min(len(expected), len(actual)),
                )
        for index, (expected_item, actual_item) in enumerate(
            zip(expected, actual, strict=False)
        ):
            child_path = (*path, index)
            child_selection = self._policy.select(child_path, selection)
            if child_selection is Selection.SKIP:
                continue
            self._compare_node(
                expected_item, actual_item, child_path, child_selection, out
            )

    def _compare_arrays_unordered(
        self,
        expected: list[Any],
        actual: list[Any],
        path: FieldPath,
        selection: Selection,
        out: list[Mismatch],
    ) -> None:
        # Fast path: same length and already positionally equal.
        if len(expected) == len(actual) and all(
            self._elements_match(e, a, (*path, i), selection)
            for i, (e, a) in enumerate(zip(expected, actual, strict=True))
        ):
            return

        compatible = np.zeros((len(expected), len(actual)), dtype=bool)
        for i, expected_item in enumerate(expected):
            for j, actual_item in enumerate(actual):
                compatible[i, j] = self._elements_match(
                    expected_item, actual_item, (*path, i), selection
                )

        pairs = match_compatible(compatible)
        matched_expected = {i for i, _ in pairs}
        matched_actual = {j for _, j in pairs}

        for i, expected_item in enumerate(expected):
            if i in matched_expected:
                continue
            item_path = (*path, i)
            item_selection = self._policy.select(item_path, selection)
            if self._reportable(expected_item, item_path, item_selection):
                out.append(
                    Mismatch(item_path, MismatchKind.MISSING, expected=expected_item)
                )
        for j, actual_item in enumerate(actual):
            if j in matched_actual:
                continue
            item_path = (*path, j)
            item_selection = self._policy.select(item_path, selection)
            if self._reportable(actual_item, item_path, item_selection):
                out.append(
                    Mismatch(item_path, MismatchKind.UNEXPECTED, actual=actual_item)
                )

    def _report_leftovers(
        self,
        expected: list[Any],
        actual: list[Any],
        path: FieldPath,
        selection: Selection,
        out: list[Mismatch],
        *,
        offset: int,
    ) -> None:
        """Report trailing elements of the longer array in an unselected region."""
        for index, item in enumerate(expected, start=offset):
            item_path = (*path, index)
            item_selection = self._policy.select(item_path, selection)
            if self._reportable(item, item_path, item_selection):
                out.append(Mismatch(item_path, MismatchKind.MISSING, expected=item))
        for index, item in enumerate(actual, start=offset):
            item_path = (*path, index)
            item_selection = self._policy.select(item_path, selection)
            if self._reportable(item, item_path, item_selection):
                out.append(Mismatch(item_path, MismatchKind.UNEXPECTED, actual=item))

    def _reportable(self, value: Any, path: FieldPath, selection: Selection) -> bool:
        """Return True if an absent or extra ``value`` at ``path`` is selected.

        Under DESCEND only the selected descendants count, so a value is
        reportable only when it holds a node some ``only`` pattern selects.
        """
        if selection is Selection.COMPARE:
            return True
        if selection is Selection.SKIP:
            return False
        return self._holds_selected(value, path, selection)

    def _holds_selected(
        self, value: Any, path: FieldPath, selection: Selection
    ) -> bool:
        """Return True if any descendant of ``value`` is selected for comparison."""
        if isinstance(value, dict):
            children = [((*path, key), child) for key, child in value.items()]
        elif isinstance(value, list):
            children = [((*path, index), child) for index, child in enumerate(value)]
        else:
            return False
        for child_path, child in children:
            child_selection = self._policy.select(child_path, selection)
            if child_selection is Selection.COMPARE:
                return True
            if child_selection is Selection.DESCEND and self._holds_selected(
                child, child_path, child_selection
            ):
                return True
        return False

    def _elements_match(
        self,
        expected: Any,
        actual: Any,
        path: FieldPath,
        selection: Selection,
    ) -> bool:
        """Return True if two array elements compare with zero mismatches."""
        child_selection = self._policy.select(path, selection)
        if child_selection is Selection.SKIP:
            return True
        found: list[Mismatch] = []
        self._compare_node(expected, actual, path, child_selection, found)
        return not found
