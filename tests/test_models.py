"""Tests for the record model."""

import pytest
from pydantic import ValidationError

from multiformat.models import Record, demo_record


class TestRecord:
    """Test Record model."""

    def test_demo_record(self):
        record = demo_record()
        assert record.name == "Hello"
        assert record.value == "world"

    def test_as_dict_keeps_field_order(self, record):
        assert list(record.as_dict().items()) == [("name", "Hello"), ("value", "world")]

    def test_table_headers(self, record):
        assert record.table_headers() == ["Name", "Value"]

    def test_table_row(self, record):
        assert record.table_row() == ["Hello", "world"]

    def test_repr_lists_fields_in_order(self, record):
        assert repr(record) == "Record(name='Hello', value='world')"

    def test_frozen(self, record):
        with pytest.raises(ValidationError):
            record.name = "Goodbye"

    def test_requires_both_fields(self):
        with pytest.raises(ValidationError):
            Record(name="Hello")
