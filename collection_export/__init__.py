# __init__.py
"""Collection export - record collections to delimited text or XML files."""

__version__ = "1.0.0"
__description__ = "Export ordered record collections as CSV/TSV/PSV or XML files"

from .core import (
    ConfigConflictError,
    EmptyCollectionError,
    ExportError,
    FormatConfig,
    MalformedRecordError,
    Preset,
    Record,
    RecordCollection,
    UnknownPresetError,
    XMLRoundTripError,
)
from .exporters import Exporter, FeedTemplate, generate_feed_data_file

__all__ = [
    'Exporter',
    'FeedTemplate',
    'generate_feed_data_file',
    'Preset',
    'FormatConfig',
    'Record',
    'RecordCollection',
    'ExportError',
    'ConfigConflictError',
    'UnknownPresetError',
    'MalformedRecordError',
    'EmptyCollectionError',
    'XMLRoundTripError',
]
