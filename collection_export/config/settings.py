"""Configuration management for collection exports."""

import os

from dotenv import load_dotenv

from collection_export.core.errors import UnknownPresetError
from collection_export.core.types import Preset, resolve_preset


class Config:
    """Centralized configuration management."""

    def __init__(self, env_file: str = None):
        """
        Initialize configuration by loading environment variables.

        Args:
            env_file: Optional .env path; the nearest .env is used otherwise
        """
        load_dotenv(env_file)
        self._default_preset = self._validate_environment()

    @property
    def output_dir(self) -> str:
        """Directory that relative export names are placed in."""
        return os.getenv("EXPORT_OUTPUT_DIR", "exported_data")

    @property
    def default_preset(self) -> Preset:
        """Preset used when none is requested explicitly, resolved at load time."""
        return self._default_preset

    @property
    def xml_indent(self) -> str:
        """Indentation string for formatted XML output."""
        return os.getenv("EXPORT_XML_INDENT", "  ")

    @property
    def log_level(self) -> str:
        """Logging level name."""
        return os.getenv("EXPORT_LOG_LEVEL", "INFO").upper()

    def get_target_path(self, filename: str) -> str:
        """Target path (without extension) for an export name."""
        return os.path.join(self.output_dir, filename)

    def _validate_environment(self) -> Preset:
        """Validate optional environment variables and resolve the preset."""
        preset = os.getenv("EXPORT_PRESET", "CSV")
        try:
            return resolve_preset(preset)
        except UnknownPresetError as e:
            raise RuntimeError(
                f"Invalid EXPORT_PRESET {preset!r}, expected one of: "
                f"{', '.join(Preset.__members__)}"
            ) from e
