"""Packaging correctness verification for json-snapshot.

These tests inspect the current installation rather than building wheels in
temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import re
from importlib import metadata
from pathlib import Path

import json_snapshot

_REQUIREMENT_DELIMITER = re.compile(r"[\s(<>=!~;\[]")


class TestInstall:
    def test_version_matches_metadata(self) -> None:
        assert metadata.version("json-snapshot") == json_snapshot.__version__

    def test_pytest11_entry_point_registered(self) -> None:
        entry_points = metadata.entry_points(group="pytest11")
        targets = {ep.name: ep.value for ep in entry_points}
        assert targets.get("json_snapshot") == (
            "json_snapshot.integrations._pytest_plugin"
        )

    def test_py_typed_marker_present(self) -> None:
        package_dir = Path(json_snapshot.__file__).parent
        assert (package_dir / "py.typed").is_file()

    def test_runtime_dependencies_declared(self) -> None:
        requires = metadata.requires("json-snapshot") or []
        # poetry-core writes "numpy (>=1.26)", setuptools "numpy>=1.26"
        names = {_REQUIREMENT_DELIMITER.split(r, maxsplit=1)[0] for r in requires}
        assert {"numpy", "scipy", "cachetools"} <= names


class TestPackageMetadata:
    """Verify the documented public API."""

    def test_all_exports(self) -> None:
        expected = {
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
        }
        actual = set(json_snapshot.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )

    def test_exports_resolve(self) -> None:
        for name in json_snapshot.__all__:
            assert hasattr(json_snapshot, name), name
