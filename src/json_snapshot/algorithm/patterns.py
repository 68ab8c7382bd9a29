"""Path patterns: a tiny wildcard language for selecting JSON fields.

A pattern is a dot-separated list of segments.  Each segment compiles into a
``PatternToken``:

- ``name``  -> LITERAL   : matches exactly one object key equal to ``name``
- ``**``    -> ANY_ONE   : matches any run of zero or more keys
- ``***``   -> ANY_REST  : matches the whole remaining path (must be last)

Examples::

    "id"       top-level ``id`` only
    "foo.id"   nested ``foo.id``
    "**.id"    every ``id`` field at any depth
    "***"      every field

Array indices are transparent: a path is projected onto its object-key
segments before matching, so ``items.id`` covers ``items[0].id``,
``items[1].id`` and so on.

Matching is a small NFA walk over token positions rather than a regex
translation, which keeps the depth semantics of ``**`` explicit.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum, auto

from cachetools import LRUCache, cached

from json_snapshot.tree.nodes import FieldPath, key_segments

__all__ = [
    "ANY_ONE",
    "ANY_REST",
    "PathPattern",
    "PatternToken",
    "TokenKind",
    "compile_pattern",
    "matches",
]

ANY_ONE = "**"
ANY_REST = "***"


class TokenKind(StrEnum):
    """Kinds of pattern token."""

    LITERAL = auto()
    ANY_ONE = auto()
    ANY_REST = auto()


@dataclass(frozen=True, slots=True)
class PatternToken:
    """One compiled pattern segment.  ``name`` is only set for LITERAL."""

    kind: TokenKind
    name: str = ""

    def accepts(self, segment: str) -> bool:
        if self.kind == TokenKind.LITERAL:
            return self.name == segment
        return True


@dataclass(frozen=True, slots=True)
class PathPattern:
    """A compiled path pattern.

    Attributes:
        source: The pattern text as written by the user.
        tokens: Compiled tokens, one per dot-separated segment.
    """

    source: str
    tokens: tuple[PatternToken, ...]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def matches(self, path: FieldPath) -> bool:
        """Return True if ``path`` is fully matched by this pattern."""
        states = self._walk(key_segments(path))
        return self._accepting(states)

    def could_match_below(self, path: FieldPath) -> bool:
        """Return True if some strict descendant of ``path`` could match.

        Used by ``only`` selection: a node that is not itself selected must
        still be descended into while a deeper path may be.
        """
        states = self._walk(key_segments(path))
        end = len(self.tokens)
        return any(state < end for state in states)

    # ------------------------------------------------------------------
    # NFA helpers
    # ------------------------------------------------------------------

    def _closure(self, states: Iterable[int]) -> set[int]:
        """Add the positions reachable without consuming a segment.

        ANY_ONE and ANY_REST may both match zero segments.
        """
        end = len(self.tokens)
        result: set[int] = set()
        pending = list(states)
        while pending:
            state = pending.pop()
            if state in result:
                continue
            result.add(state)
            if state < end and self.tokens[state].kind != TokenKind.LITERAL:
                pending.append(state + 1)
        return result

    def _walk(self, segments: tuple[str, ...]) -> set[int]:
        states = self._closure([0])
        for segment in segments:
            advanced: set[int] = set()
            for state in states:
                if state >= len(self.tokens):
                    continue
                token = self.tokens[state]
                if not token.accepts(segment):
                    continue
                if token.kind == TokenKind.LITERAL:
                    advanced.add(state + 1)
                else:
                    # wildcards may keep consuming
                    advanced.add(state)
            states = self._closure(advanced)
            if not states:
                break
        return states

    def _accepting(self, states: set[int]) -> bool:
        return len(self.tokens) in states


def _compile_token(
    segment: str, position: int, last: int, source: str
) -> PatternToken:
    if segment == ANY_REST:
        if position != last:
            msg = f"'{ANY_REST}' must be the last segment of a pattern, got {source!r}"
            raise ValueError(msg)
        return PatternToken(kind=TokenKind.ANY_REST)
    if segment == ANY_ONE:
        return PatternToken(kind=TokenKind.ANY_ONE)
    return PatternToken(kind=TokenKind.LITERAL, name=segment)


@cached(cache=LRUCache(maxsize=256))
def compile_pattern(source: str) -> PathPattern:
    """Compile a pattern string into a ``PathPattern``.

    Compiled patterns are immutable and memoized in a bounded LRU cache.

    Raises:
        TypeError: If ``source`` is not a string.
        ValueError: If the pattern is empty, contains an empty segment, or
            uses ``***`` anywhere but the last position.
    """
    if not isinstance(source, str):
        raise TypeError(f"Path pattern must be a str, got {type(source)!r}")
    if not source:
        raise ValueError("Path pattern must not be empty")

    segments = source.split(".")
    if any(not segment for segment in segments):
        raise ValueError(f"Path pattern contains an empty segment: {source!r}")

    last = len(segments) - 1
    tokens = tuple(
        _compile_token(segment, position, last, source)
        for position, segment in enumerate(segments)
    )
    return PathPattern(source=source, tokens=tokens)


def matches(pattern: str, path: FieldPath | str) -> bool:
    """Return True if ``path`` matches ``pattern``.

    ``path`` may be a FieldPath tuple or a dotted string such as ``"foo.id"``
    (the empty string is the root).
    """
    if isinstance(path, str):
        path = tuple(path.split(".")) if path else ()
    return compile_pattern(pattern).matches(path)
