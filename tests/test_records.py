"""Tests for record contracts and value stringification."""
import numpy as np
import pandas as pd
import pytest

from collection_export.core import MalformedRecordError, Record, RecordCollection
from collection_export.core.records import (
    attributes_of,
    collection_type_name,
    record_type_name,
    stringify,
)


class Car:
    """Record-like object without a declared type name."""

    def __init__(self, make, year):
        self.make = make
        self.year = year

    def get_attributes(self):
        return {"make": self.make, "year": self.year}


def test_attributes_of_supported_shapes():
    assert attributes_of(Record({"a": 1}), 0) == {"a": 1}
    assert attributes_of({"b": 2}, 0) == {"b": 2}
    assert attributes_of(Car("Saab", 1999), 0) == {"make": "Saab", "year": 1999}


@pytest.mark.parametrize("item", [None, 42, "id,name", ["a", "b"]])
def test_attributes_of_rejects_non_records(item):
    with pytest.raises(MalformedRecordError) as exc_info:
        attributes_of(item, 3)

    assert exc_info.value.index == 3


def test_type_names():
    assert record_type_name(Record({}, record_type="Car")) == "Car"
    assert record_type_name(Car("Saab", 1999)) == "Car"
    assert record_type_name({"a": 1}) == "dict"
    assert collection_type_name(RecordCollection(collection_type="Fleet")) == "Fleet"
    assert collection_type_name([]) == "list"


def test_collection_first_and_len():
    collection = RecordCollection.from_dicts([{"a": 1}, {"a": 2}])

    assert len(collection) == 2
    assert collection.first().get_attributes() == {"a": 1}
    assert RecordCollection().first() is None


def test_from_dataframe_keeps_order():
    df = pd.DataFrame({"id": [1, 2], "name": ["A", "B"]})

    collection = RecordCollection.from_dataframe(df, record_type="Person")
    rows = [record.get_attributes() for record in collection]

    assert [list(row) for row in rows] == [["id", "name"], ["id", "name"]]
    assert [stringify(row["id"]) for row in rows] == ["1", "2"]
    assert collection.first().record_type == "Person"


@pytest.mark.parametrize("value,expected", [
    (None, ""),
    (np.nan, ""),
    (pd.NaT, ""),
    (np.int64(7), "7"),
    (np.float64(1.5), "1.5"),
    (12, "12"),
    ("text", "text"),
])
def test_stringify(value, expected):
    assert stringify(value) == expected
