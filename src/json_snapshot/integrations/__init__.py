"""Integrations subpackage for json-snapshot.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via the pytest11 entry point)
"""

from __future__ import annotations

from json_snapshot.integrations._pytest_plugin import PytestIdentityProvider

__all__: list[str] = ["PytestIdentityProvider"]
