"""pytest plugin for json-snapshot.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Adds:
- ``--snapshot-update`` command-line flag: re-record every snapshot touched.
- ``snapshot_dir`` ini option: snapshot root, relative to the rootdir
  (default ``__snapshots__``).
- ``snapshotter`` fixture: a ``Snapshotter`` bound to the running test.
- ``snapshot`` fixture: shortcut for ``snapshotter.validate_snapshot``.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from json_snapshot.config import DEFAULT_SNAPSHOTS_DIRECTORY, ValidationConfig
from json_snapshot.identity import TestIdentity
from json_snapshot.snapshotter import Snapshotter

_UPDATE_OPTION = "--snapshot-update"
_DIR_INI = "snapshot_dir"


class PytestIdentityProvider:
    """Identity of a pytest test item.

    Class name is the dotted module name, plus the test class when the test
    is a method.  Method name is the item name, so parametrized tests get one
    snapshot per parameter set (``test_x[case-1]``).
    """

    def __init__(self, request: pytest.FixtureRequest) -> None:
        module = request.module.__name__
        if request.cls is not None:
            module = f"{module}.{request.cls.__qualname__}"
        self._identity = TestIdentity(module, request.node.name)

    def current(self) -> TestIdentity:
        return self._identity


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("json-snapshot")
    group.addoption(
        _UPDATE_OPTION,
        action="store_true",
        default=False,
        help="Re-record every snapshot instead of comparing against it.",
    )
    parser.addini(
        _DIR_INI,
        help="Directory of snapshot files, relative to the rootdir.",
        default=DEFAULT_SNAPSHOTS_DIRECTORY,
    )


def pytest_report_header(config: pytest.Config) -> str | None:
    if config.getoption(_UPDATE_OPTION):
        return "json-snapshot: updating snapshots"
    return None


@pytest.fixture
def snapshotter(request: pytest.FixtureRequest) -> Snapshotter:
    """Fixture that returns a Snapshotter bound to the running test.

    Usage in tests::

        def test_payload(snapshotter):
            snapshotter.validate_snapshot({"id": 7, "items": [3, 1, 2]})

    Without ``--snapshot-update`` the ``UPDATE_SNAPSHOTS`` environment
    variable still decides whether snapshots are re-recorded.
    """
    config = request.config
    directory = config.rootpath / str(config.getini(_DIR_INI))
    update: bool | None = True if config.getoption(_UPDATE_OPTION) else None
    return Snapshotter(
        snapshots_directory=directory,
        identity_provider=PytestIdentityProvider(request),
        update=update,
    )


@pytest.fixture
def snapshot(snapshotter: Snapshotter) -> Callable[..., None]:
    """Fixture that returns a callable snapshot asserter.

    Usage in tests::

        def test_payload(snapshot):
            snapshot({"id": 7, "name": "x"}, ValidationConfig(ignore=["id"]))

    Returns:
        A callable ``_assert(data, config=None) -> None`` that raises
        ``SnapshotMismatchError`` (an ``AssertionError``) on mismatch.
    """

    def _assert(data: Any, config: ValidationConfig | None = None) -> None:
        snapshotter.validate_snapshot(data, config)

    return _assert
