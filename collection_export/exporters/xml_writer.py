"""XML document writer."""

import html
import os
import xml.etree.ElementTree as ET
from typing import Any, Mapping, Optional

from rich.progress import Progress

from collection_export.core.errors import XMLRoundTripError
from collection_export.core.records import (
    attributes_of,
    collection_type_name,
    record_type_name,
    stringify,
)
from .base import BaseWriter

XML_DECLARATION = '<?xml version="1.0"?>'


def implode_to_xml(attributes: Mapping[str, Any]) -> str:
    """Render each field as <name>escaped value</name>."""
    return "".join(
        f"<{key}>{html.escape(stringify(value))}</{key}>"
        for key, value in attributes.items()
    )


def beautify_xml(filepath: str, indent: str = "  ") -> str:
    """
    Re-parse an XML file and rewrite it indented.

    Args:
        filepath: XML file to format in place
        indent: Indentation string per nesting level

    Returns:
        filepath

    Raises:
        XMLRoundTripError: If the file is missing or not well-formed; the
            file is left untouched
    """
    if not os.path.isfile(filepath):
        raise XMLRoundTripError(filepath, "file not found")

    try:
        tree = ET.parse(filepath)
    except ET.ParseError as e:
        raise XMLRoundTripError(filepath, str(e)) from e

    ET.indent(tree, space=indent)
    tree.write(filepath, encoding="utf-8", xml_declaration=True)
    return filepath


class XMLWriter(BaseWriter):
    """Writes one element per record inside a single root element."""

    progress_label = "[green]Writing XML records"

    def __init__(self, indent: str = "  "):
        self.indent = indent

    def write(
        self,
        collection: Any,
        filepath: str,
        progress: Optional[Progress] = None
    ) -> str:
        """
        Write the collection as an indented XML document.

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
            XMLRoundTripError: If the written file cannot be parsed back;
                the unformatted file stays on disk
        """
        records = self._materialize(collection)
        root_tag = record_type_name(records[0]) + collection_type_name(collection)
        handle = open(filepath, "w", encoding="utf-8")
        task = self._start_task(progress, len(records))

        try:
            with handle:
                handle.write(XML_DECLARATION)
                handle.write(f"<{root_tag}>")

                for index, record in enumerate(records):
                    fields = implode_to_xml(attributes_of(record, index))
                    tag = record_type_name(record)
                    handle.write(f"<{tag}>{fields}</{tag}>")
                    self._advance(progress, task)

                handle.write(f"</{root_tag}>")
        except Exception as e:
            self._discard(filepath, e)
            raise
        finally:
            self._finish_task(progress, task)

        return beautify_xml(filepath, self.indent)
