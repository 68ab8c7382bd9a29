"""algorithm subpackage: path patterns, selection policy and tree comparison.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_snapshot.algorithm import SelectionPolicy, TreeComparator
    from json_snapshot.config import CompareMode

    cmp = TreeComparator(CompareMode(), SelectionPolicy.from_patterns(only=["foo.id"]))
    mismatches = cmp.compare({"foo": {"id": 1}}, {"foo": {"id": 2}})
    # [Mismatch(path=('foo', 'id'), kind='value_differs', ...)]
"""

from __future__ import annotations

from json_snapshot.algorithm.matcher import hungarian_match, match_compatible
from json_snapshot.algorithm.patterns import (
    PathPattern,
    PatternToken,
    TokenKind,
    compile_pattern,
    matches,
)
from json_snapshot.algorithm.policy import Selection, SelectionPolicy
from json_snapshot.algorithm.tree_compare import TreeComparator

__all__ = [
    "PathPattern",
    "PatternToken",
    "Selection",
    "SelectionPolicy",
    "TokenKind",
    "TreeComparator",
    "compile_pattern",
    "hungarian_match",
    "match_compatible",
    "matches",
]
