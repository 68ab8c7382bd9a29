"""Tests for JsonSnapshotSerializer and the to_jsonable conversion hook."""

from __future__ import annotations

import datetime as dt
import json
import math
import uuid
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import PurePosixPath

import pytest

from json_snapshot.protocols import SnapshotSerializer
from json_snapshot.serializer import JsonSnapshotSerializer, to_jsonable


class Color(Enum):
    RED = "red"


@dataclass
class Point:
    x: int
    y: int


class Plain:
    def __init__(self) -> None:
        self.name = "plain"
        self._secret = "hidden"


# ---------------------------------------------------------------------------
# Serializer
# ---------------------------------------------------------------------------


class TestJsonSnapshotSerializer:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(JsonSnapshotSerializer(), SnapshotSerializer)

    def test_string_passes_through(self) -> None:
        assert JsonSnapshotSerializer().serialize("test data") == "test data\n"

    def test_null(self) -> None:
        assert JsonSnapshotSerializer().serialize(None) == "null\n"

    def test_pretty_printed_object(self) -> None:
        text = JsonSnapshotSerializer().serialize({"foo": "bar", "n": [1, 2]})
        assert text == '{\n  "foo": "bar",\n  "n": [\n    1,\n    2\n  ]\n}\n'

    def test_insertion_order_is_kept(self) -> None:
        text = JsonSnapshotSerializer().serialize({"b": 1, "a": 2})
        assert text.index('"b"') < text.index('"a"')

    def test_sort_keys(self) -> None:
        text = JsonSnapshotSerializer(sort_keys=True).serialize({"b": 1, "a": 2})
        assert text.index('"a"') < text.index('"b"')

    def test_non_ascii_is_kept(self) -> None:
        assert JsonSnapshotSerializer().serialize({"k": "Größe"}) == (
            '{\n  "k": "Größe"\n}\n'
        )

    def test_dataclass_round_trips_as_object(self) -> None:
        text = JsonSnapshotSerializer().serialize([Point(1, 2)])
        assert json.loads(text) == [{"x": 1, "y": 2}]

    def test_unserializable_raises(self) -> None:
        with pytest.raises(TypeError, match="not JSON serializable"):
            JsonSnapshotSerializer().serialize({"f": object()})


# ---------------------------------------------------------------------------
# to_jsonable
# ---------------------------------------------------------------------------


class TestToJsonable:
    def test_enum(self) -> None:
        assert to_jsonable(Color.RED) == "red"

    def test_datetime(self) -> None:
        value = dt.datetime(2024, 1, 2, 3, 4, 5)
        assert to_jsonable(value) == "2024-01-02T03:04:05"

    def test_date(self) -> None:
        assert to_jsonable(dt.date(2024, 1, 2)) == "2024-01-02"

    def test_decimal(self) -> None:
        assert to_jsonable(Decimal("3")) == 3
        assert to_jsonable(Decimal("1.5")) == 1.5

    def test_decimal_non_finite(self) -> None:
        assert to_jsonable(Decimal("Infinity")) == float("inf")
        assert to_jsonable(Decimal("-Infinity")) == float("-inf")
        assert math.isnan(to_jsonable(Decimal("NaN")))

    def test_set_is_sorted(self) -> None:
        assert to_jsonable({3, 1, 2}) == [1, 2, 3]

    def test_path_and_uuid(self) -> None:
        assert to_jsonable(PurePosixPath("a/b")) == "a/b"
        value = uuid.UUID("12345678-1234-5678-1234-567812345678")
        assert to_jsonable(value) == "12345678-1234-5678-1234-567812345678"

    def test_plain_object_public_attributes(self) -> None:
        assert to_jsonable(Plain()) == {"name": "plain"}
