"""Test identity: which test is asking for a snapshot.

The snapshot location is derived from a ``TestIdentity``.  Identity discovery
is environment-specific, so it sits behind the ``IdentityProvider`` Protocol:

- ``StaticIdentityProvider`` returns a fixed identity (unit tests, scripts).
- ``StackIdentityProvider`` walks the call stack for the nearest ``test*``
  function, the way pytest and unittest name their tests.
- The pytest plugin provides one bound to the running test item.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, replace
from types import FrameType

from json_snapshot.errors import IdentityResolutionError

__all__ = ["StackIdentityProvider", "StaticIdentityProvider", "TestIdentity"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TestIdentity:
    """Logical name of a test.

    Attributes:
        class_name: Directory-level name, usually the dotted module path plus
            the test class when there is one.
        method_name: File-level name, usually the test function name.
    """

    # keep pytest from collecting this class
    __test__ = False

    class_name: str
    method_name: str

    def __post_init__(self) -> None:
        if not self.class_name or not self.method_name:
            msg = f"class_name and method_name must be non-empty, got {self!r}"
            raise ValueError(msg)

    def with_method(self, method_name: str) -> TestIdentity:
        """Return a copy whose method name is replaced (snapshot_name override)."""
        return replace(self, method_name=method_name)


class StaticIdentityProvider:
    """Always returns the same identity."""

    def __init__(self, class_name: str, method_name: str) -> None:
        self._identity = TestIdentity(class_name, method_name)

    def current(self) -> TestIdentity:
        return self._identity


class StackIdentityProvider:
    """Finds the running test by walking up the call stack.

    The nearest frame whose function name is ``prefix`` followed by nothing,
    an underscore or an uppercase letter is taken as the test, so helpers
    such as ``tester`` or ``testing_utils`` are passed over.  Its module name
    (plus the class of ``self``/``cls`` for test methods) becomes the class
    name.

    Args:
        prefix: Function-name prefix that marks a test.  Defaults to "test".
    """

    def __init__(self, prefix: str = "test") -> None:
        self._prefix = prefix

    def current(self) -> TestIdentity:
        frame: FrameType | None = inspect.currentframe()
        try:
            while frame is not None:
                if self._is_test_name(frame.f_code.co_name):
                    return self._identity_of(frame)
                frame = frame.f_back
        finally:
            del frame
        raise IdentityResolutionError(
            f"Could not resolve test case name: no '{self._prefix}*' function "
            "found on the call stack"
        )

    def _is_test_name(self, name: str) -> bool:
        """Match ``test``, ``test_x`` and ``testX`` but not ``tester``."""
        if not name.startswith(self._prefix):
            return False
        rest = name[len(self._prefix) :]
        if not rest or self._prefix.endswith("_"):
            return True
        return rest[0] == "_" or rest[0].isupper()

    @staticmethod
    def _identity_of(frame: FrameType) -> TestIdentity:
        module = frame.f_globals.get("__name__", "__main__")
        owner = frame.f_locals.get("self", frame.f_locals.get("cls"))
        class_name = str(module)
        if owner is not None:
            owner_type = owner if isinstance(owner, type) else type(owner)
            class_name = f"{module}.{owner_type.__qualname__}"
        identity = TestIdentity(class_name, frame.f_code.co_name)
        logger.debug("Resolved test identity from call stack: %s", identity)
        return identity
