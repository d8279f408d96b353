"""Delimited text (CSV/TSV/PSV) writer."""

import re
from typing import Any, Iterable, List, Optional

from rich.progress import Progress

from collection_export.core.records import attributes_of, stringify
from .base import BaseWriter

_ESCAPED_CHARS = re.compile(r'(["\\/])')


def escape_value(value: str) -> str:
    """Backslash-prefix every double quote, backslash and slash."""
    return _ESCAPED_CHARS.sub(r"\\\1", value)


def implode(values: Iterable[Any], delimiter: str, enclosure: str) -> str:
    """
    Join values into one delimited line.

    Args:
        values: Field names or values
        delimiter: Separator placed between enclosed values
        enclosure: String wrapped around each escaped value

    Returns:
        Line without record separator
    """
    return delimiter.join(
        f"{enclosure}{escape_value(stringify(value))}{enclosure}"
        for value in values
    )


class DelimitedWriter(BaseWriter):
    """Writes a header line plus one enclosed, delimited line per record."""

    progress_label = "[yellow]Writing delimited rows"

    def __init__(self, delimiter: str, enclosure: str, record_separator: str):
        self.delimiter = delimiter
        self.enclosure = enclosure
        self.record_separator = record_separator

    def implode(self, values: Iterable[Any]) -> str:
        return implode(values, self.delimiter, self.enclosure)

    def write(
        self,
        collection: Any,
        filepath: str,
        progress: Optional[Progress] = None
    ) -> str:
        """
        Write the collection as delimited text.

        Args:
            collection: Iterable of records
            filepath: Full output path
            progress: Optional progress tracker

        Returns:
            filepath

        Raises:
            EmptyCollectionError: If there are no records
            MalformedRecordError: If an element is not a record; the
                partial file is removed first
            UnicodeEncodeError: If a value cannot be written as UTF-8; the
                partial file is removed first
        """
        records = self._materialize(collection)
        handle = open(filepath, "w", encoding="utf-8", newline="")
        task = self._start_task(progress, len(records))

        try:
            with handle:
                headers = list(attributes_of(records[0], 0).keys())
                handle.write(self.implode(headers))
                handle.write(self.record_separator)

                for index, record in enumerate(records):
                    handle.write(self.implode(self._row(record, index, headers)))
                    handle.write(self.record_separator)
                    self._advance(progress, task)
        except Exception as e:
            self._discard(filepath, e)
            raise
        finally:
            self._finish_task(progress, task)

        return filepath

    @staticmethod
    def _row(record: Any, index: int, headers: List[str]) -> List[Any]:
        # Values follow header order; absent fields render empty
        attributes = attributes_of(record, index)
        return [attributes.get(name) for name in headers]
