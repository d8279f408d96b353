"""Core types, record contracts and errors."""

from .errors import (
    ConfigConflictError,
    EmptyCollectionError,
    ExportError,
    MalformedRecordError,
    UnknownPresetError,
    XMLRoundTripError,
)
from .records import Record, RecordCollection, SupportsAttributes
from .types import PRESETS, FormatConfig, Preset, resolve_preset

__all__ = [
    'ExportError',
    'ConfigConflictError',
    'UnknownPresetError',
    'MalformedRecordError',
    'EmptyCollectionError',
    'XMLRoundTripError',
    'Record',
    'RecordCollection',
    'SupportsAttributes',
    'PRESETS',
    'FormatConfig',
    'Preset',
    'resolve_preset',
]
