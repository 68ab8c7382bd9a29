"""CompareMode and ValidationConfig for snapshot validation.

Both are frozen (immutable) dataclasses.  ``ValidationConfig`` is the whole
externally tunable surface of a ``validate_snapshot`` call; update mode is
controlled separately through the environment (see ``update_requested``).
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from json_snapshot.algorithm.patterns import compile_pattern

__all__ = [
    "DEFAULT_SNAPSHOTS_DIRECTORY",
    "UPDATE_ENV_VAR",
    "CompareMode",
    "ValidationConfig",
    "update_requested",
]

DEFAULT_SNAPSHOTS_DIRECTORY = "__snapshots__"
UPDATE_ENV_VAR = "UPDATE_SNAPSHOTS"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class CompareMode:
    """How strictly JSON trees are compared.

    Attributes:
        extensible: When True, the actual value may contain object keys that
            are absent from the baseline.  Default False (no extra fields).
        strict_order: When True, arrays are compared positionally.  Default
            False (arrays are compared as multisets).
    """

    extensible: bool = False
    strict_order: bool = False


def _normalize_patterns(name: str, patterns: Iterable[str]) -> tuple[str, ...]:
    if isinstance(patterns, str):
        msg = f"{name} must be a collection of patterns, not a single str"
        raise TypeError(msg)
    normalized = tuple(patterns)
    for pattern in normalized:
        if not isinstance(pattern, str):
            msg = f"{name} patterns must be str, got {type(pattern)!r}"
            raise TypeError(msg)
        # Compile eagerly so malformed patterns fail at construction.
        compile_pattern(pattern)
    return normalized


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Additional configuration for a snapshot validation.

    Attributes:
        snapshot_name: Overrides the snapshot file name.  When None, the test
            method name is used.
        compare_mode: See ``CompareMode``.
        ignore: Path patterns of fields that are never compared, e.g. ids.
        only: Path patterns of the only fields that are compared.  When
            non-empty it takes precedence and ``ignore`` has no effect.

    Pattern syntax::

        "id"      top-level id field
        "foo.id"  nested foo.id field
        "**.id"   every id field, at any nesting level
        "***"     every field
    """

    snapshot_name: str | None = None
    compare_mode: CompareMode = field(default_factory=CompareMode)
    ignore: tuple[str, ...] = ()
    only: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        name = self.snapshot_name
        if name is not None and not isinstance(name, str):
            msg = f"snapshot_name must be a str, got {type(name)!r}"
            raise TypeError(msg)
        if name is not None and not name.strip():
            msg = "snapshot_name must not be blank"
            raise ValueError(msg)
        if not isinstance(self.compare_mode, CompareMode):
            msg = f"compare_mode must be a CompareMode, got {type(self.compare_mode)!r}"
            raise TypeError(msg)
        object.__setattr__(self, "ignore", _normalize_patterns("ignore", self.ignore))
        object.__setattr__(self, "only", _normalize_patterns("only", self.only))


def update_requested(environ: Mapping[str, str] | None = None) -> bool:
    """Return True if the environment asks for every snapshot to be re-recorded."""
    env = os.environ if environ is None else environ
    return env.get(UPDATE_ENV_VAR, "").strip().lower() in _TRUTHY
