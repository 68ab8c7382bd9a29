"""NodeType StrEnum and field-path primitives for decoded JSON trees.

Tree values are the plain Python objects produced by ``json.loads``:
``dict`` (insertion-ordered object), ``list`` (array), and the scalars
``str``, ``int``, ``float``, ``bool`` and ``None``.  This module classifies
them and defines the path representation used while walking them.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

# A path segment is an object key (str) or an array index (int).
PathSegment = str | int
FieldPath = tuple[PathSegment, ...]

ROOT_PATH: FieldPath = ()


class NodeType(StrEnum):
    """Enumeration of the six kinds of JSON value.

    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"  : int or float (never bool)
    - STRING  -> "string"
    - OBJECT  -> "object"  : JSON object {}
    - ARRAY   -> "array"   : JSON array []
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    OBJECT = auto()
    ARRAY = auto()

    @property
    def is_scalar(self) -> bool:
        return self not in (NodeType.OBJECT, NodeType.ARRAY)


def node_type_of(value: Any) -> NodeType:
    """Classify a decoded JSON value.

    bool MUST be checked before int because bool is a subclass of int.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    if value is None:
        return NodeType.NULL
    if isinstance(value, bool):
        return NodeType.BOOLEAN
    if isinstance(value, (int, float)):
        return NodeType.NUMBER
    if isinstance(value, str):
        return NodeType.STRING
    if isinstance(value, dict):
        return NodeType.OBJECT
    if isinstance(value, list):
        return NodeType.ARRAY
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def key_segments(path: FieldPath) -> tuple[str, ...]:
    """Project a path onto its object-key segments, dropping array indices."""
    return tuple(segment for segment in path if isinstance(segment, str))


def format_path(path: FieldPath) -> str:
    """Render a path for humans, e.g. ``("foo", 2, "id")`` -> ``"foo[2].id"``.

    The empty root path renders as ``"<root>"``.
    """
    if not path:
        return "<root>"
    parts: list[str] = []
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif parts:
            parts.append(f".{segment}")
        else:
            parts.append(segment)
    return "".join(parts)
