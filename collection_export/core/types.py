"""Shared type definitions to avoid circular imports."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Union

from .errors import ConfigConflictError, UnknownPresetError


class Preset(Enum):
    """Named export formats."""
    TSV = "TSV"
    CSV = "CSV"
    PSV = "PSV"
    XML = "XML"


@dataclass(frozen=True)
class FormatConfig:
    """Output format settings of an exporter."""
    target_path: str
    delimiter: str = ","
    enclosure: str = '"'
    file_extension: str = ".csv"
    record_separator: str = "\n"

    def __post_init__(self):
        """Reject settings that would make the output ambiguous."""
        if (
                self.record_separator == self.enclosure
                or self.record_separator == self.delimiter
                or self.delimiter == self.enclosure
        ):
            raise ConfigConflictError(
                self.delimiter, self.enclosure, self.record_separator
            )

    @property
    def full_path(self) -> str:
        """Target path with the file extension appended."""
        return f"{self.target_path}{self.file_extension}"

    def patched(self, **changes) -> "FormatConfig":
        """Return a validated copy with the non-None changes applied."""
        return replace(
            self, **{key: value for key, value in changes.items() if value is not None}
        )


@dataclass(frozen=True)
class PresetSettings:
    """Format settings applied by a preset."""
    delimiter: str
    enclosure: str
    file_extension: str
    record_separator: str
    xml: bool = False


# XML never reads delimiter/enclosure; the placeholders only keep them distinct
PRESETS: Dict[Preset, PresetSettings] = {
    Preset.TSV: PresetSettings("\t", '"', ".tsv", "\n"),
    Preset.CSV: PresetSettings(",", '"', ".csv", "\n"),
    Preset.PSV: PresetSettings("|", '"', ".psv", "\n"),
    Preset.XML: PresetSettings("XML", "<>", ".xml", "\r", xml=True),
}


def resolve_preset(kind: Union[Preset, str]) -> Preset:
    """
    Map a preset member or name to a Preset.

    Args:
        kind: Preset member or its name (case-insensitive)

    Returns:
        Matching Preset

    Raises:
        UnknownPresetError: If kind names no preset
    """
    if isinstance(kind, Preset):
        return kind
    if isinstance(kind, str):
        try:
            return Preset[kind.strip().upper()]
        except KeyError:
            pass
    raise UnknownPresetError(kind)
