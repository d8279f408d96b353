"""Error hierarchy for collection exports."""

from typing import Any, Dict, Optional


class ExportError(Exception):
    """Base exception for all export errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigConflictError(ExportError, ValueError):
    """Delimiter, enclosure and record separator are not pairwise distinct."""

    def __init__(self, delimiter: str, enclosure: str, record_separator: str):
        super().__init__(
            "delimiter, enclosure and record separator must be distinct",
            details={
                "delimiter": delimiter,
                "enclosure": enclosure,
                "record_separator": record_separator,
            },
        )


class UnknownPresetError(ExportError, ValueError):
    """Preset key is not one of TSV, CSV, PSV or XML."""

    def __init__(self, kind: Any):
        super().__init__(f"Unknown export preset: {kind!r}", details={"kind": kind})
        self.kind = kind


class MalformedRecordError(ExportError):
    """An element of the collection does not satisfy the record contract."""

    def __init__(self, index: int, item: Any):
        super().__init__(
            f"Element {index} is not a record ({type(item).__name__})",
            details={"index": index, "type": type(item).__name__},
        )
        self.index = index


class EmptyCollectionError(ExportError):
    """The collection has no record to derive headers from."""

    def __init__(self):
        super().__init__("Cannot export an empty collection")


class XMLRoundTripError(ExportError):
    """The written XML file could not be parsed back for formatting."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Could not re-parse {path}: {reason}",
            details={"path": path, "reason": reason},
        )
        self.path = path
