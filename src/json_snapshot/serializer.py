"""JsonSnapshotSerializer: the default value-to-snapshot-text serializer.

- ``str`` values pass through raw, with a trailing newline.
- Everything else is pretty-printed JSON (2-space indent, insertion order kept)
  with a trailing newline.

Values that are not JSON-native are converted by ``to_jsonable`` before
encoding: dataclasses, enums, dates and times, decimals, sets, tuples, paths,
UUIDs and plain objects exposing ``__dict__``.
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import json
import uuid
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any

__all__ = ["JsonSnapshotSerializer", "to_jsonable"]


def to_jsonable(value: Any) -> Any:
    """``default`` hook for ``json.dumps``: convert one non-JSON-native value.

    Raises:
        TypeError: If the value has no JSON representation.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        if value.is_finite() and value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, (set, frozenset)):
        # sets have no order; sort by repr so snapshots stay stable
        return sorted(value, key=repr)
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, (PurePath, uuid.UUID)):
        return str(value)
    if hasattr(value, "__dict__"):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JsonSnapshotSerializer:
    """Serializes values to stable, human-diffable snapshot text.

    Satisfies the ``SnapshotSerializer`` Protocol structurally.

    Args:
        indent: Indentation width for pretty-printing.  Defaults to 2.
        sort_keys: Sort object keys.  Defaults to False (keep insertion order);
            comparison is order-insensitive either way.
    """

    def __init__(self, indent: int = 2, sort_keys: bool = False) -> None:
        self._indent = indent
        self._sort_keys = sort_keys

    def serialize(self, data: Any) -> str:
        if isinstance(data, str):
            return data + "\n"
        text = json.dumps(
            data,
            indent=self._indent,
            sort_keys=self._sort_keys,
            ensure_ascii=False,
            default=to_jsonable,
        )
        return text + "\n"
