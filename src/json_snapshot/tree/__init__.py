"""Tree subpackage for decoded JSON values.

Re-exports the public API for the tree module:
- NodeType: StrEnum of the six JSON value kinds
- node_type_of: classifies a decoded JSON value
- FieldPath / PathSegment: path representation used during traversal
- format_path: human-readable rendering of a FieldPath
- ParseFailure / try_parse: text-to-tree probe
"""

from json_snapshot.tree.nodes import (
    ROOT_PATH,
    FieldPath,
    NodeType,
    PathSegment,
    format_path,
    key_segments,
    node_type_of,
)
from json_snapshot.tree.parser import ParseFailure, try_parse

__all__ = [
    "ROOT_PATH",
    "FieldPath",
    "NodeType",
    "ParseFailure",
    "PathSegment",
    "format_path",
    "key_segments",
    "node_type_of",
    "try_parse",
]
