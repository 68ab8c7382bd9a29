"""SelectionPolicy: decides which parts of a tree take part in a comparison.

Built from the ``ignore`` and ``only`` pattern lists of a ValidationConfig.
When ``only`` is non-empty it wins: ``ignore`` is discarded (with a warning)
and every field that is not selected by ``only`` is implicitly ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING

from json_snapshot.algorithm.patterns import PathPattern, compile_pattern

if TYPE_CHECKING:
    from json_snapshot.config import ValidationConfig
    from json_snapshot.tree.nodes import FieldPath

__all__ = ["Selection", "SelectionPolicy"]

logger = logging.getLogger(__name__)


class Selection(StrEnum):
    """What the comparator should do with a node.

    - COMPARE : compare the node and everything below it
    - DESCEND : node not selected itself, but a descendant may be; compare
                structure only to reach it
    - SKIP    : never compare, never report
    """

    COMPARE = auto()
    DESCEND = auto()
    SKIP = auto()


@dataclass(frozen=True, slots=True)
class SelectionPolicy:
    """Compiled ignore/only matchers.

    Attributes:
        ignore: Patterns whose matching subtrees are skipped.
        only: Patterns selecting the only subtrees that are compared.
    """

    ignore: tuple[PathPattern, ...] = ()
    only: tuple[PathPattern, ...] = ()

    @classmethod
    def from_patterns(
        cls, ignore: Iterable[str] = (), only: Iterable[str] = ()
    ) -> SelectionPolicy:
        ignore_patterns = tuple(compile_pattern(p) for p in ignore)
        only_patterns = tuple(compile_pattern(p) for p in only)
        if only_patterns and ignore_patterns:
            logger.warning(
                "Both 'only' and 'ignore' were given; 'only' takes precedence "
                "and ignore patterns %s are not applied",
                [p.source for p in ignore_patterns],
            )
            ignore_patterns = ()
        return cls(ignore=ignore_patterns, only=only_patterns)

    @classmethod
    def from_config(cls, config: ValidationConfig) -> SelectionPolicy:
        return cls.from_patterns(ignore=config.ignore, only=config.only)

    @property
    def only_active(self) -> bool:
        return bool(self.only)

    def select(self, path: FieldPath, parent: Selection | None = None) -> Selection:
        """Decide how to treat the node at ``path``.

        Args:
            path: Path of the node being visited.
            parent: Selection of the parent node, or None at the root.
        """
        if parent is Selection.SKIP:
            return Selection.SKIP

        if parent is Selection.COMPARE and self.only_active:
            return Selection.COMPARE

        if not self.only_active:
            if any(pattern.matches(path) for pattern in self.ignore):
                return Selection.SKIP
            return Selection.COMPARE

        if any(pattern.matches(path) for pattern in self.only):
            return Selection.COMPARE
        if any(pattern.could_match_below(path) for pattern in self.only):
            return Selection.DESCEND
        return Selection.SKIP
