"""Error types raised by json-snapshot.

- ``IdentityResolutionError``: the calling test could not be identified.
- ``SnapshotIOError`` / ``SnapshotNotFoundError``: the snapshot file could not
  be read or written.
- ``SnapshotMismatchError``: the user-visible "test failed" outcome.  It is an
  ``AssertionError`` so test runners report it as a failure, not an error.

Malformed snapshot text is not an error: ``try_parse`` returns a
``ParseFailure`` value and the caller falls back to textual comparison.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from json_snapshot.result import Mismatch

__all__ = [
    "IdentityResolutionError",
    "SnapshotError",
    "SnapshotIOError",
    "SnapshotMismatchError",
    "SnapshotNotFoundError",
]


class SnapshotError(Exception):
    """Base class for json-snapshot failures that are not test assertions."""


class IdentityResolutionError(SnapshotError):
    """The identity of the running test could not be determined."""


class SnapshotIOError(SnapshotError):
    """A snapshot file could not be read or written."""

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(f"{message}: {path}")


class SnapshotNotFoundError(SnapshotIOError):
    """The requested snapshot file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__("Snapshot not found", path)


class SnapshotMismatchError(AssertionError):
    """The actual value does not match the recorded baseline.

    Attributes:
        mismatches: Every structural mismatch found.  Empty when the textual
            fallback comparison failed.
        snapshot_path: The baseline file that was compared against.
    """

    def __init__(
        self,
        message: str,
        snapshot_path: Path,
        mismatches: Sequence[Mismatch] = (),
    ) -> None:
        self.snapshot_path = snapshot_path
        self.mismatches = list(mismatches)
        super().__init__(message)
