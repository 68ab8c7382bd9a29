"""Mismatch and ComparisonResult types for comparison output.

A ``Mismatch`` is one located disagreement between the expected (baseline)
and actual trees.  ``ComparisonResult`` aggregates every mismatch found by a
single comparison.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_snapshot.tree.nodes import FieldPath, format_path

__all__ = ["ComparisonResult", "Mismatch", "MismatchKind"]

_MAX_VALUE_CHARS = 120


class MismatchKind(StrEnum):
    """Kinds of disagreement between expected and actual trees.

    - MISSING       : present in expected, absent in actual
    - UNEXPECTED    : present in actual, absent in expected
    - VALUE_DIFFERS : same type, different value (or array length)
    - TYPE_DIFFERS  : different JSON types at the same path
    """

    MISSING = auto()
    UNEXPECTED = auto()
    VALUE_DIFFERS = auto()
    TYPE_DIFFERS = auto()


def _render(value: Any) -> str:
    try:
        text = json.dumps(value, ensure_ascii=False, sort_keys=False)
    except (TypeError, ValueError):
        text = repr(value)
    if len(text) > _MAX_VALUE_CHARS:
        text = text[: _MAX_VALUE_CHARS - 3] + "..."
    return text


@dataclass(frozen=True, slots=True)
class Mismatch:
    """A single located disagreement.

    Attributes:
        path: Where the disagreement is, as a FieldPath.
        kind: What kind of disagreement it is.
        expected: The baseline value at ``path`` (None for UNEXPECTED).
        actual: The actual value at ``path`` (None for MISSING).
    """

    path: FieldPath
    kind: MismatchKind
    expected: Any = None
    actual: Any = None

    @property
    def path_str(self) -> str:
        return format_path(self.path)

    def describe(self) -> str:
        """One-line human-readable description of the mismatch."""
        if self.kind == MismatchKind.MISSING:
            detail = f"expected={_render(self.expected)} but was missing"
        elif self.kind == MismatchKind.UNEXPECTED:
            detail = f"unexpected actual={_render(self.actual)}"
        else:
            detail = f"expected={_render(self.expected)} actual={_render(self.actual)}"
        return f"{self.path_str}: {self.kind} {detail}"


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of comparing two trees.

    Attributes:
        mismatches: Every mismatch found, in traversal order.
        computation_time_ms: Wall-clock duration of the comparison.
    """

    mismatches: list[Mismatch]
    computation_time_ms: float

    @property
    def passed(self) -> bool:
        return not self.mismatches

    def report(self) -> str:
        """Multi-line report enumerating every mismatch."""
        if self.passed:
            return "no mismatches"
        lines = [f"{len(self.mismatches)} mismatch(es):"]
        lines.extend(f"  - {mismatch.describe()}" for mismatch in self.mismatches)
        return "\n".join(lines)
