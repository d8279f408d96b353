"""Record and collection contracts consumed by the exporters."""

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Protocol, runtime_checkable

import numpy as np
import pandas as pd

from .errors import MalformedRecordError


@runtime_checkable
class SupportsAttributes(Protocol):
    """Anything exposing its current state as an ordered attribute mapping."""

    def get_attributes(self) -> Mapping[str, Any]:
        ...


class Record:
    """Plain record with a type name usable as an XML tag."""

    def __init__(self, attributes: Mapping[str, Any], record_type: str = "Record"):
        self._attributes = dict(attributes)
        self.record_type = record_type

    def get_attributes(self) -> Dict[str, Any]:
        return self._attributes

    def __repr__(self) -> str:
        return f"{self.record_type}({self._attributes!r})"


class RecordCollection:
    """Ordered, re-iterable collection of records."""

    def __init__(self, items: Iterable[Any] = (), collection_type: str = "Collection"):
        self._items: List[Any] = list(items)
        self.collection_type = collection_type

    @classmethod
    def from_dicts(
            cls,
            rows: Iterable[Mapping[str, Any]],
            record_type: str = "Record",
            collection_type: str = "Collection"
    ) -> "RecordCollection":
        """Wrap mappings as Records of one type."""
        return cls(
            (Record(row, record_type) for row in rows),
            collection_type=collection_type
        )

    @classmethod
    def from_dataframe(
            cls,
            df: pd.DataFrame,
            record_type: str = "Record",
            collection_type: str = "Collection"
    ) -> "RecordCollection":
        """
        Build a collection from DataFrame rows.

        Args:
            df: Source DataFrame, one record per row
            record_type: Type name given to every record
            collection_type: Type name of the collection

        Returns:
            RecordCollection in row order, fields in column order
        """
        columns = [str(col) for col in df.columns]
        rows = (
            dict(zip(columns, values))
            for values in df.itertuples(index=False, name=None)
        )
        return cls.from_dicts(rows, record_type, collection_type)

    def first(self) -> Optional[Any]:
        return self._items[0] if self._items else None

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


def attributes_of(item: Any, index: int) -> Mapping[str, Any]:
    """
    Get the ordered attribute mapping of a record.

    Args:
        item: Collection element
        index: Position of the element, for error reporting

    Returns:
        Ordered field name to value mapping

    Raises:
        MalformedRecordError: If item satisfies no record contract
    """
    if isinstance(item, SupportsAttributes):
        try:
            attributes = item.get_attributes()
        except Exception as e:
            raise MalformedRecordError(index, item) from e
        if isinstance(attributes, Mapping):
            return attributes
    elif isinstance(item, Mapping):
        return item
    raise MalformedRecordError(index, item)


def record_type_name(record: Any) -> str:
    """Type name of a record, its class name unless it declares one."""
    return getattr(record, "record_type", None) or type(record).__name__


def collection_type_name(collection: Any) -> str:
    """Type name of a collection, its class name unless it declares one."""
    return getattr(collection, "collection_type", None) or type(collection).__name__


def stringify(value: Any) -> str:
    """Render a field value as text; missing values become empty strings."""
    if value is None:
        return ""
    if isinstance(value, np.generic):
        value = value.item()
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return ""
    return str(value)
