"""Tests for environment-driven configuration."""
import logging
import os

import pytest

from collection_export import Exporter, Preset
from collection_export.config import Config
from collection_export.logger import Logger

ENV_KEYS = ("EXPORT_OUTPUT_DIR", "EXPORT_PRESET", "EXPORT_XML_INDENT", "EXPORT_LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    """Unset export variables; anything a .env file sets is undone afterwards."""
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture
def empty_env_file(temp_output_dir):
    path = temp_output_dir / ".env"
    path.write_text("")
    return str(path)


def test_defaults(clean_env, empty_env_file):
    config = Config(empty_env_file)

    assert config.output_dir == "exported_data"
    assert config.default_preset is Preset.CSV
    assert config.xml_indent == "  "
    assert config.log_level == "INFO"
    assert config.get_target_path("cars") == os.path.join("exported_data", "cars")


def test_values_from_env_file(clean_env, temp_output_dir):
    env_file = temp_output_dir / "export.env"
    env_file.write_text("EXPORT_PRESET=tsv\nEXPORT_LOG_LEVEL=debug\n")

    config = Config(str(env_file))

    assert config.default_preset is Preset.TSV
    assert config.log_level == "DEBUG"


def test_invalid_preset(clean_env, empty_env_file):
    clean_env.setenv("EXPORT_PRESET", "JSON")

    with pytest.raises(RuntimeError):
        Config(empty_env_file)


def test_exporter_from_config(clean_env, empty_env_file, temp_output_dir, people):
    output_dir = temp_output_dir / "exports"
    clean_env.setenv("EXPORT_OUTPUT_DIR", str(output_dir))
    clean_env.setenv("EXPORT_PRESET", "PSV")

    exporter = Exporter.from_config("people", Config(empty_env_file))
    path = exporter.export(people)

    assert output_dir.is_dir()
    assert path == os.path.join(str(output_dir), "people.psv")


def test_logger_setup_accepts_level_names():
    Logger.reset()
    try:
        Logger.setup(level="debug")
        assert Logger.get_logger().level == logging.DEBUG
    finally:
        Logger.reset()


def test_from_config_applies_log_level(clean_env, empty_env_file, temp_output_dir, people):
    clean_env.setenv("EXPORT_OUTPUT_DIR", str(temp_output_dir))
    clean_env.setenv("EXPORT_LOG_LEVEL", "DEBUG")
    Logger.reset()
    try:
        Logger.setup(level=logging.INFO)
        Exporter.from_config("people", Config(empty_env_file)).export(people)
        assert Logger.get_logger().level == logging.DEBUG
    finally:
        Logger.reset()


def test_default_preset_resolved_once(clean_env, empty_env_file):
    clean_env.setenv("EXPORT_PRESET", "xml")
    config = Config(empty_env_file)

    clean_env.setenv("EXPORT_PRESET", "JSON")

    assert config.default_preset is Preset.XML
