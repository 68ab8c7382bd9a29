"""Tests for SnapshotStore: file layout and read/write/exists."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from json_snapshot.errors import SnapshotIOError, SnapshotNotFoundError
from json_snapshot.identity import TestIdentity
from json_snapshot.store import SnapshotStore

IDENTITY = TestIdentity("tests.test_module.TestSuite", "test_case")


class TestPathFor:
    def test_layout(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        assert store.path_for(IDENTITY) == (
            tmp_path / "tests.test_module.TestSuite" / "test_case.snap"
        )

    def test_parametrized_ids_are_kept_readable(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        path = store.path_for(TestIdentity("mod", "test_x[a-1]"))
        assert path.name == "test_x[a-1].snap"

    def test_unsafe_characters_are_replaced(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        path = store.path_for(TestIdentity("mod", "test_x[a/b c]"))
        assert path.parent == tmp_path / "mod"
        assert re.fullmatch(r"test_x\[a_b_c\]-[0-9a-f]{8}\.snap", path.name)

    def test_sanitized_names_stay_distinct(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        paths = {
            store.path_for(TestIdentity("mod", name)) for name in ("a b", "a_b", "a/b")
        }
        assert len(paths) == 3
        assert store.path_for(TestIdentity("mod", "a_b")).name == "a_b.snap"

    def test_dot_names_cannot_escape(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        path = store.path_for(TestIdentity("..", "x"))
        assert path.parent.parent == tmp_path
        assert path.parent.name.startswith("__-")

    def test_directory_property(self, tmp_path: Path) -> None:
        assert SnapshotStore(str(tmp_path)).directory == tmp_path


class TestReadWrite:
    def test_missing_snapshot(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        assert not store.exists(IDENTITY)
        with pytest.raises(SnapshotNotFoundError) as exc_info:
            store.read(IDENTITY)
        assert exc_info.value.path == store.path_for(IDENTITY)

    def test_write_creates_directories(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path / "nested" / "snaps")
        path = store.write(IDENTITY, "content\n")
        assert path.is_file()
        assert store.exists(IDENTITY)

    def test_round_trip_is_exact(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        content = '{\n  "k": "Größe"\n}\r\n'
        store.write(IDENTITY, content)
        assert store.read(IDENTITY) == content

    def test_write_overwrites(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        store.write(IDENTITY, "first\n")
        store.write(IDENTITY, "second\n")
        assert store.read(IDENTITY) == "second\n"

    def test_write_twice_is_idempotent_for_directories(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        store.write(IDENTITY, "a\n")
        store.write(TestIdentity(IDENTITY.class_name, "other"), "b\n")
        assert len(list(store.path_for(IDENTITY).parent.iterdir())) == 2

    def test_write_failure_is_wrapped(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = SnapshotStore(blocker)
        with pytest.raises(SnapshotIOError, match="Could not write snapshot"):
            store.write(IDENTITY, "x\n")

    def test_directory_in_place_of_file_is_not_a_snapshot(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path)
        store.path_for(IDENTITY).mkdir(parents=True)
        assert not store.exists(IDENTITY)
        with pytest.raises(SnapshotIOError):
            store.read(IDENTITY)
