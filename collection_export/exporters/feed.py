"""Outgoing feed files described by a template."""

from dataclasses import dataclass
from typing import Any, Optional

from collection_export.core.types import Preset
from collection_export.utils import ProgressTracker
from .exporter import Exporter


@dataclass
class FeedTemplate:
    """Describes the file an outgoing data feed is written to."""
    file_name: str
    data_type: str
    delimiter: str = ","
    enclosure: str = '"'
    record_separator: str = "\n"

    @property
    def is_xml(self) -> bool:
        return self.data_type.strip().lower().lstrip(".") == "xml"

    @property
    def file_extension(self) -> str:
        data_type = self.data_type.strip()
        return data_type if data_type.startswith(".") else f".{data_type}"


def generate_feed_data_file(
        template: FeedTemplate,
        collection: Any,
        tracker: Optional[ProgressTracker] = None
) -> str:
    """
    Generate a feed data file from a template and a record collection.

    Args:
        template: Feed file description
        collection: Records to put in the feed
        tracker: Optional tracker showing progress and the outcome

    Returns:
        Full path to the feed file
    """
    if template.is_xml:
        exporter = Exporter.from_preset(Preset.XML, template.file_name)
        exporter.change_format(file_extension=template.file_extension)
    else:
        exporter = Exporter(
            template.file_name,
            delimiter=template.delimiter,
            enclosure=template.enclosure,
            file_extension=template.file_extension,
            record_separator=template.record_separator,
        )
    if tracker is not None:
        return tracker.run_export(exporter, collection)
    return exporter.export(collection)
