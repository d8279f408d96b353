"""Collection exporter with preset and ad-hoc formats."""

import os
from typing import Any, List, Mapping, Optional, Union

from rich.progress import Progress

from collection_export.config import Config
from collection_export.core.errors import ExportError
from collection_export.core.records import attributes_of
from collection_export.core.types import PRESETS, FormatConfig, Preset, resolve_preset
from collection_export.logger import Logger
from .base import BaseWriter
from .delimited_writer import DelimitedWriter, implode as implode_line
from .xml_writer import XMLWriter, implode_to_xml


class Exporter:
    """
    Puts a record collection into a delimited text or XML file.

    Usage:
        exporter = Exporter.from_preset(Preset.CSV, "reports/cars")
        exporter.export(collection)            # -> "reports/cars.csv"
        exporter.change_preset(Preset.XML)
        exporter.export(collection)            # -> "reports/cars.xml"
    """

    def __init__(
            self,
            target_path: str,
            delimiter: str = ",",
            enclosure: str = '"',
            file_extension: str = ".csv",
            record_separator: str = "\n",
            xml_indent: str = "  "
    ):
        """
        Initialize a delimited-text exporter.

        Args:
            target_path: Output path without extension
            delimiter: Separator between values
            enclosure: String wrapped around each value
            file_extension: Extension appended to target_path
            record_separator: String written after every line
            xml_indent: Indentation used once switched to XML

        Raises:
            ConfigConflictError: If delimiter, enclosure and
                record_separator are not pairwise distinct
        """
        self._config = FormatConfig(
            target_path=target_path,
            delimiter=delimiter,
            enclosure=enclosure,
            file_extension=file_extension,
            record_separator=record_separator,
        )
        self._xml = False
        self.xml_indent = xml_indent

    @classmethod
    def from_preset(
            cls,
            kind: Union[Preset, str],
            target_path: str,
            xml_indent: str = "  "
    ) -> "Exporter":
        """
        Build an exporter from a named preset.

        Args:
            kind: TSV, CSV, PSV or XML, as Preset or name
            target_path: Output path without extension
            xml_indent: Indentation for XML output

        Raises:
            UnknownPresetError: If kind names no preset
        """
        settings = PRESETS[resolve_preset(kind)]
        exporter = cls(
            target_path,
            delimiter=settings.delimiter,
            enclosure=settings.enclosure,
            file_extension=settings.file_extension,
            record_separator=settings.record_separator,
            xml_indent=xml_indent,
        )
        exporter._xml = settings.xml
        return exporter

    @classmethod
    def from_config(cls, filename: str, config: Optional[Config] = None) -> "Exporter":
        """
        Build an exporter for filename in the configured output directory.

        Also applies the configured log level to the export logger.
        """
        config = config or Config()
        Logger.setup(level=config.log_level)
        os.makedirs(config.output_dir, exist_ok=True)
        return cls.from_preset(
            config.default_preset,
            config.get_target_path(filename),
            xml_indent=config.xml_indent,
        )

    @property
    def config(self) -> FormatConfig:
        return self._config

    @property
    def is_xml(self) -> bool:
        """Whether export uses the XML writer."""
        return self._xml

    @property
    def full_path(self) -> str:
        """Output path: target path plus file extension."""
        return self._config.full_path

    def export(self, collection: Any, progress: Optional[Progress] = None) -> str:
        """
        Write the collection with the current format.

        Args:
            collection: Iterable of records
            progress: Optional progress tracker

        Returns:
            Full path to exported file
        """
        writer = self._writer()
        filepath = self.full_path
        Logger.debug("Exporting with %s to %s", type(writer).__name__, filepath)

        try:
            writer.write(collection, filepath, progress)
        except (ExportError, OSError) as e:
            Logger.error("Export to %s failed: %s", filepath, e)
            raise

        Logger.info("Exported collection to %s", filepath)
        return filepath

    def change_preset(self, kind: Union[Preset, str], target_path: Optional[str] = None) -> bool:
        """
        Switch this exporter to another preset in place.

        Args:
            kind: TSV, CSV, PSV or XML, as Preset or name
            target_path: New output path; the current one is kept if None

        Returns:
            True once applied

        Raises:
            UnknownPresetError: If kind names no preset; nothing changes
        """
        settings = PRESETS[resolve_preset(kind)]
        self._config = self._config.patched(
            target_path=target_path,
            delimiter=settings.delimiter,
            enclosure=settings.enclosure,
            file_extension=settings.file_extension,
            record_separator=settings.record_separator,
        )
        self._xml = settings.xml
        return True

    def change_format(
            self,
            target_path: Optional[str] = None,
            delimiter: Optional[str] = None,
            enclosure: Optional[str] = None,
            file_extension: Optional[str] = None,
            record_separator: Optional[str] = None
    ):
        """
        Overwrite the given format fields, leaving the others as they are.

        Raises:
            ConfigConflictError: If the result is ambiguous; the previous
                format stays in effect
        """
        self._config = self._config.patched(
            target_path=target_path,
            delimiter=delimiter,
            enclosure=enclosure,
            file_extension=file_extension,
            record_separator=record_separator,
        )

    def column_headers(self, record: Any) -> List[str]:
        """Field names of a record, in order."""
        return list(attributes_of(record, 0).keys())

    def column_values(self, record: Any) -> List[Any]:
        """Field values of a record, in order."""
        return list(attributes_of(record, 0).values())

    def implode(self, values: List[Any]) -> str:
        """Join values into one line using the current delimiter and enclosure."""
        return implode_line(values, self._config.delimiter, self._config.enclosure)

    @staticmethod
    def implode_to_xml(attributes: Mapping[str, Any]) -> str:
        return implode_to_xml(attributes)

    def _writer(self) -> BaseWriter:
        if self._xml:
            return XMLWriter(self.xml_indent)
        return DelimitedWriter(
            self._config.delimiter,
            self._config.enclosure,
            self._config.record_separator,
        )

    def __repr__(self) -> str:
        mode = "xml" if self._xml else "delimited"
        return f"Exporter({self.full_path!r}, mode={mode})"
