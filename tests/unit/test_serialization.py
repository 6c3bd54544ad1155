"""Unit Tests for row serialization

Covers driver types that orjson cannot encode on its own.
"""

import datetime
import decimal
import json

import pytest

from simple_database.utils import row_to_json, rows_to_json


class TestRowToJson:
    """Test single-row serialization."""

    def test_scalars(self):
        row = {"id": 1, "name": "John Doe", "score": 1.5, "active": True, "note": None}
        assert json.loads(row_to_json(row)) == row

    def test_key_order_preserved(self):
        assert row_to_json({"b": 1, "a": 2}) == '{"b":1,"a":2}'

    def test_datetime(self):
        row = {"created": datetime.datetime(2024, 1, 2, 3, 4, 5)}
        assert json.loads(row_to_json(row)) == {"created": "2024-01-02T03:04:05"}

    def test_decimal(self):
        row = {"whole": decimal.Decimal("10.00"), "price": decimal.Decimal("9.99")}
        assert json.loads(row_to_json(row)) == {"whole": 10, "price": "9.99"}

    def test_timedelta(self):
        row = {"duration": datetime.timedelta(minutes=1, seconds=30)}
        assert json.loads(row_to_json(row)) == {"duration": 90.0}

    def test_bytes(self):
        row = {"text": b"hello", "blob": b"\xff\xfe", "view": memoryview(b"abc")}
        assert json.loads(row_to_json(row)) == {
            "text": "hello",
            "blob": "//4=",
            "view": "abc",
        }

    def test_indent(self):
        assert row_to_json({"a": 1}, indent=True) == '{\n  "a": 1\n}'

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            row_to_json({"value": object()})


class TestRowsToJson:
    """Test multi-row serialization."""

    def test_rows(self):
        rows = [{"id": 1}, {"id": 2}]
        assert json.loads(rows_to_json(rows)) == rows

    def test_empty(self):
        assert rows_to_json([]) == "[]"
