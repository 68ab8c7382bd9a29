"""Extension-point Protocols for json-snapshot.

Defines the structural interfaces of the two pluggable collaborators:

- ``SnapshotSerializer``: turns the value under test into snapshot text.
- ``IdentityProvider``: names the currently running test.

Users can plug in custom implementations without inheriting from any base
class; any class with a conformant method passes ``isinstance`` checks.

Example::

    import json

    from json_snapshot.protocols import SnapshotSerializer

    class SortedJsonSerializer:
        def serialize(self, data: object) -> str:
            return json.dumps(data, indent=2, sort_keys=True) + "\\n"

    assert isinstance(SortedJsonSerializer(), SnapshotSerializer)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_snapshot.identity import TestIdentity


@runtime_checkable
class SnapshotSerializer(Protocol):
    """Structural protocol for snapshot serializers.

    The ``serialize`` method must return deterministic, human-diffable text.
    Text that decodes to a JSON object or array is compared structurally;
    anything else is compared verbatim.
    """

    def serialize(self, data: Any) -> str: ...


@runtime_checkable
class IdentityProvider(Protocol):
    """Structural protocol for test-identity providers.

    ``current`` must return the identity of the running test or raise
    ``IdentityResolutionError``.
    """

    def current(self) -> TestIdentity: ...
