"""SnapshotComparator: wires ValidationConfig + SelectionPolicy + TreeComparator.

This is the wiring layer between the raw algorithm and the public API.  It
turns a ValidationConfig into a compiled SelectionPolicy, runs the
TreeComparator and wraps the mismatch list in a ComparisonResult with timing
data.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from json_snapshot.algorithm.policy import SelectionPolicy
from json_snapshot.algorithm.tree_compare import TreeComparator
from json_snapshot.config import ValidationConfig
from json_snapshot.result import ComparisonResult

__all__ = ["SnapshotComparator"]

logger = logging.getLogger(__name__)


class SnapshotComparator:
    """Compares decoded JSON trees according to a ValidationConfig.

    The comparator holds no mutable state: calling ``compare`` twice with the
    same inputs always produces identical mismatch lists.

    Example::

        from json_snapshot.comparator import SnapshotComparator
        from json_snapshot.config import ValidationConfig

        cmp = SnapshotComparator(ValidationConfig(ignore=["**.id"]))
        result = cmp.compare({"id": 1, "name": "a"}, {"id": 2, "name": "a"})
        print(result.passed)   # True
    """

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self._config: ValidationConfig = (
            config if config is not None else ValidationConfig()
        )
        self._policy = SelectionPolicy.from_config(self._config)
        self._tree_comparator = TreeComparator(
            self._config.compare_mode, self._policy
        )

    @property
    def config(self) -> ValidationConfig:
        return self._config

    def compare(self, expected: Any, actual: Any) -> ComparisonResult:
        """Compare the baseline ``expected`` tree with the ``actual`` tree.

        Args:
            expected: Decoded baseline value.
            actual:   Decoded value produced by the code under test.

        Returns:
            A ``ComparisonResult`` listing every mismatch.
        """
        t0 = time.perf_counter()
        mismatches = self._tree_comparator.compare(expected, actual)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        logger.debug(
            "Compared trees in %.3f ms: %d mismatch(es)", elapsed_ms, len(mismatches)
        )
        return ComparisonResult(mismatches=mismatches, computation_time_ms=elapsed_ms)
