"""Public comparison functions for json-snapshot.

This module provides the user-facing functions compare, find_mismatches and
is_equivalent.  Each call creates a fresh SnapshotComparator to guarantee zero
state shared between calls.
"""

from __future__ import annotations

from typing import Any

from json_snapshot.comparator import SnapshotComparator
from json_snapshot.config import ValidationConfig
from json_snapshot.result import ComparisonResult, Mismatch

__all__ = ["compare", "find_mismatches", "is_equivalent"]


def compare(
    expected: Any,
    actual: Any,
    config: ValidationConfig | None = None,
) -> ComparisonResult:
    """Compare two decoded JSON values and return a ComparisonResult.

    Args:
        expected: The baseline value (dict, list, str, int, float, bool, None).
        actual:   The value produced by the code under test.
        config:   Compare mode and ignore/only patterns.  Defaults to
                  ``ValidationConfig()`` when None.

    Returns:
        A ``ComparisonResult`` with every mismatch and the computation time.
    """
    return SnapshotComparator(config).compare(expected, actual)


def find_mismatches(
    expected: Any,
    actual: Any,
    config: ValidationConfig | None = None,
) -> list[Mismatch]:
    """Return the list of mismatches between two decoded JSON values."""
    return compare(expected, actual, config=config).mismatches


def is_equivalent(
    expected: Any,
    actual: Any,
    config: ValidationConfig | None = None,
) -> bool:
    """Return True if the two values compare with zero mismatches."""
    return compare(expected, actual, config=config).passed
