"""json-snapshot - snapshot testing with structural JSON comparison."""

from __future__ import annotations

from json_snapshot.algorithm.patterns import matches
from json_snapshot.api import compare, find_mismatches, is_equivalent
from json_snapshot.comparator import SnapshotComparator
from json_snapshot.config import CompareMode, ValidationConfig
from json_snapshot.errors import (
    IdentityResolutionError,
    SnapshotError,
    SnapshotIOError,
    SnapshotMismatchError,
    SnapshotNotFoundError,
)
from json_snapshot.identity import (
    StackIdentityProvider,
    StaticIdentityProvider,
    TestIdentity,
)
from json_snapshot.result import ComparisonResult, Mismatch, MismatchKind
from json_snapshot.serializer import JsonSnapshotSerializer
from json_snapshot.snapshotter import Snapshotter, validate_snapshot
from json_snapshot.store import SnapshotStore

__version__: str = "0.1.0"
__all__: list[str] = [
    "CompareMode",
    "ComparisonResult",
    "IdentityResolutionError",
    "JsonSnapshotSerializer",
    "Mismatch",
    "MismatchKind",
    "SnapshotComparator",
    "SnapshotError",
    "SnapshotIOError",
    "SnapshotMismatchError",
    "SnapshotNotFoundError",
    "SnapshotStore",
    "Snapshotter",
    "StackIdentityProvider",
    "StaticIdentityProvider",
    "TestIdentity",
    "ValidationConfig",
    "compare",
    "find_mismatches",
    "is_equivalent",
    "matches",
    "validate_snapshot",
]
