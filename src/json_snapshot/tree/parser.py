"""try_parse: probe whether snapshot text is a tree-shaped JSON document.

Returns either the decoded tree or a ``ParseFailure`` value.  Callers branch
on the returned type; no exception escapes for malformed input.

Only objects and arrays count as tree-shaped.  Bare scalar documents such as
``"text"``, ``42`` or ``null`` parse as JSON but are reported as a
``ParseFailure`` so that they are compared textually.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

__all__ = ["ParseFailure", "try_parse"]


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Reason why a text could not be used as a tree value."""

    reason: str


def try_parse(text: str) -> Any | ParseFailure:
    """Decode ``text`` into a dict or list, or return a ``ParseFailure``."""
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        return ParseFailure(reason=f"invalid JSON: {exc}")
    if not isinstance(value, (dict, list)):
        return ParseFailure(
            reason=f"not a tree-shaped document (got {type(value).__name__})"
        )
    return value
