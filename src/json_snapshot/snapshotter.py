"""Snapshotter: records snapshots on first run and compares them afterwards.

Flow of ``validate_snapshot``:

1. Serialize the value with the configured ``SnapshotSerializer``.
2. Resolve the test identity (plus the optional ``snapshot_name`` override).
3. No baseline on disk, or update mode on -> write the baseline and pass.
4. Otherwise parse both texts.  When the value is not None and both sides
   are tree-shaped JSON, compare them structurally with the configured
   compare mode and ignore/only patterns; else compare the texts exactly.
5. Any mismatch raises ``SnapshotMismatchError`` listing all of them.

Unlike a plain string snapshot, the structural comparison disregards key
order and (by default) array order, and can skip volatile fields such as
ids or timestamps.
"""

from __future__ import annotations

import difflib
import logging
from pathlib import Path
from typing import Any

from json_snapshot.comparator import SnapshotComparator
from json_snapshot.config import (
    DEFAULT_SNAPSHOTS_DIRECTORY,
    UPDATE_ENV_VAR,
    ValidationConfig,
    update_requested,
)
from json_snapshot.errors import SnapshotMismatchError
from json_snapshot.identity import StackIdentityProvider, TestIdentity
from json_snapshot.protocols import IdentityProvider, SnapshotSerializer
from json_snapshot.serializer import JsonSnapshotSerializer
from json_snapshot.store import SnapshotStore
from json_snapshot.tree.parser import ParseFailure, try_parse

__all__ = ["Snapshotter", "validate_snapshot"]

logger = logging.getLogger(__name__)

_UPDATE_HINT = (
    f"Set {UPDATE_ENV_VAR}=1 (or run pytest with --snapshot-update) "
    "to re-record the snapshot."
)


class Snapshotter:
    """Snapshot testing entry point.

    Args:
        snapshots_directory: Where snapshot files live.  Defaults to
            ``"__snapshots__"`` relative to the working directory.
        serializer: Converts values to snapshot text.  Defaults to
            ``JsonSnapshotSerializer()``.
        identity_provider: Names the running test.  Defaults to
            ``StackIdentityProvider()``.
        update: Force re-recording of every snapshot.  When None, the
            ``UPDATE_SNAPSHOTS`` environment variable decides at call time.

    Example::

        snapshotter = Snapshotter("tests/__snapshots__")

        def test_user_payload():
            snapshotter.validate_snapshot(
                build_payload(), ValidationConfig(ignore=["**.id"])
            )
    """

    def __init__(
        self,
        snapshots_directory: str | Path = DEFAULT_SNAPSHOTS_DIRECTORY,
        serializer: SnapshotSerializer | None = None,
        identity_provider: IdentityProvider | None = None,
        update: bool | None = None,
    ) -> None:
        self._store = SnapshotStore(snapshots_directory)
        self._serializer: SnapshotSerializer = (
            serializer if serializer is not None else JsonSnapshotSerializer()
        )
        self._identity_provider: IdentityProvider = (
            identity_provider
            if identity_provider is not None
            else StackIdentityProvider()
        )
        self._update = update

    @property
    def store(self) -> SnapshotStore:
        return self._store

    @property
    def update(self) -> bool:
        """Whether baselines are re-recorded instead of compared."""
        if self._update is not None:
            return self._update
        return update_requested()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def snapshot_path(self, config: ValidationConfig | None = None) -> Path:
        """Return the snapshot file the running test would use."""
        identity = self._resolve_identity(config or ValidationConfig())
        return self._store.path_for(identity)

    def validate_snapshot(
        self, data: Any, config: ValidationConfig | None = None
    ) -> None:
        """Record ``data`` as a snapshot, or validate it against the recorded one.

        Raises:
            SnapshotMismatchError: ``data`` does not match the baseline.
            IdentityResolutionError: The running test cannot be identified.
            SnapshotIOError: The snapshot file cannot be read or written.
        """
        config = config if config is not None else ValidationConfig()
        data_text = self._serializer.serialize(data)
        identity = self._resolve_identity(config)

        if self.update or not self._store.exists(identity):
            path = self._store.write(identity, data_text)
            logger.info(
                "%s snapshot %s",
                "Updated" if self.update else "Recorded",
                path,
            )
            return

        path = self._store.path_for(identity)
        saved_text = self._store.read(identity)
        self._assert_matches(data, data_text, saved_text, config, path)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_identity(self, config: ValidationConfig) -> TestIdentity:
        identity = self._identity_provider.current()
        if config.snapshot_name is not None:
            identity = identity.with_method(config.snapshot_name)
        return identity

    def _assert_matches(
        self,
        data: Any,
        data_text: str,
        saved_text: str,
        config: ValidationConfig,
        path: Path,
    ) -> None:
        if data is not None:
            expected = try_parse(saved_text)
            actual = try_parse(data_text)
            if not isinstance(expected, ParseFailure) and not isinstance(
                actual, ParseFailure
            ):
                result = SnapshotComparator(config).compare(expected, actual)
                if not result.passed:
                    raise SnapshotMismatchError(
                        f"Snapshot {path} does not match:\n"
                        f"{result.report()}\n{_UPDATE_HINT}",
                        snapshot_path=path,
                        mismatches=result.mismatches,
                    )
                return
            failure = expected if isinstance(expected, ParseFailure) else actual
            logger.debug(
                "Falling back to text comparison for %s: %s", path, failure.reason
            )

        if saved_text != data_text:
            diff = "".join(
                difflib.unified_diff(
                    saved_text.splitlines(keepends=True),
                    data_text.splitlines(keepends=True),
                    fromfile="snapshot",
                    tofile="actual",
                )
            )
            raise SnapshotMismatchError(
                f"Snapshot {path} does not match:\n{diff}\n{_UPDATE_HINT}",
                snapshot_path=path,
            )


def validate_snapshot(
    data: Any,
    config: ValidationConfig | None = None,
    *,
    snapshots_directory: str | Path = DEFAULT_SNAPSHOTS_DIRECTORY,
) -> None:
    """Validate ``data`` against the snapshot of the calling test.

    Convenience wrapper around ``Snapshotter(snapshots_directory)``; the test
    is identified from the call stack.
    """
    Snapshotter(snapshots_directory).validate_snapshot(data, config)
