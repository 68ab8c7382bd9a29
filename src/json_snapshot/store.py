"""SnapshotStore: maps test identities to ``.snap`` files on disk.

Layout::

    <directory>/<class_name>/<method_name>.snap

Names containing characters outside ``[A-Za-z0-9._-[]]`` have those characters
replaced by ``_`` and a short digest of the original name appended.

File content is exactly the serializer output; it is read and written as
UTF-8 without newline translation.  There is no locking: a given identity
must have a single writer per process run.
"""

from __future__ import annotations

import hashlib
import logging
import re
from pathlib import Path

from json_snapshot.errors import SnapshotIOError, SnapshotNotFoundError
from json_snapshot.identity import TestIdentity

__all__ = ["SNAPSHOT_SUFFIX", "SnapshotStore"]

logger = logging.getLogger(__name__)

SNAPSHOT_SUFFIX = ".snap"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._\-\[\]]")


def _safe_name(name: str) -> str:
    """Make ``name`` usable as a single path component.

    Replacing characters is lossy, so a changed name gets a short digest of
    the original appended: ``"a b"`` and ``"a_b"`` map to different files.
    """
    safe = _UNSAFE_CHARS.sub("_", name)
    if safe in {".", ".."}:
        safe = safe.replace(".", "_")
    if safe != name:
        digest = hashlib.sha256(name.encode("utf-8")).hexdigest()[:8]
        safe = f"{safe}-{digest}"
    return safe


class SnapshotStore:
    """Reads and writes snapshot files below ``directory``.

    Args:
        directory: Root directory of all snapshots.  Created lazily on the
            first write.
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, identity: TestIdentity) -> Path:
        """Return the snapshot file location for ``identity``."""
        return (
            self._directory
            / _safe_name(identity.class_name)
            / f"{_safe_name(identity.method_name)}{SNAPSHOT_SUFFIX}"
        )

    def exists(self, identity: TestIdentity) -> bool:
        return self.path_for(identity).is_file()

    def read(self, identity: TestIdentity) -> str:
        """Return the stored snapshot text.

        Raises:
            SnapshotNotFoundError: If no snapshot exists for ``identity``.
            SnapshotIOError: If the file cannot be read.
        """
        path = self.path_for(identity)
        try:
            with path.open(encoding="utf-8", newline="") as fh:
                content = fh.read()
        except FileNotFoundError as exc:
            raise SnapshotNotFoundError(path) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise SnapshotIOError("Could not read snapshot", path) from exc
        logger.debug("Read snapshot %s (%d chars)", path, len(content))
        return content

    def write(self, identity: TestIdentity, content: str) -> Path:
        """Write ``content`` as the snapshot for ``identity``.

        Parent directories are created as needed.

        Returns:
            The path that was written.

        Raises:
            SnapshotIOError: If the file cannot be written.
        """
        path = self.path_for(identity)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8", newline="") as fh:
                fh.write(content)
        except OSError as exc:
            raise SnapshotIOError("Could not write snapshot", path) from exc
        return path
