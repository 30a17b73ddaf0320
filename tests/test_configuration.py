from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from macnotes import configuration
from macnotes.repository.configuration import ConfigurationRepository


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "config.yaml"
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", path)
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "default-data")
    monkeypatch.setattr(configuration, "DATA_NOTES_DIR", tmp_path / "default-data" / "notes")
    return path


def test_missing_keys_are_back_filled(config_path: Path) -> None:
    config_path.write_text(yaml.safe_dump({"show_header": False}))
    repository = ConfigurationRepository()

    config = repository.get_config()

    assert config["show_header"] is False
    assert config["save_delay_ms"] == configuration.DEFAULT_SAVE_DELAY_MS
    assert config["log_level"] == "WARNING"
    assert repository.is_dirty
    assert repository.flush() is True
    assert yaml.safe_load(config_path.read_text())["save_delay_ms"] == 250


def test_complete_file_is_not_rewritten(config_path: Path) -> None:
    config_path.write_text(yaml.safe_dump(configuration.get_default_configuration()))
    repository = ConfigurationRepository()

    repository.get_config()

    assert repository.flush() is False


def test_update_config_persists_on_flush(config_path: Path) -> None:
    config_path.write_text(yaml.safe_dump(configuration.get_default_configuration()))
    repository = ConfigurationRepository()

    repository.update_config(data_path="~/notes", save_delay_ms=500, log_level="DEBUG")
    repository.flush()

    saved = yaml.safe_load(config_path.read_text())
    assert saved["data_path"] == "~/notes"
    assert saved["save_delay_ms"] == 500
    assert saved["log_level"] == "DEBUG"


def test_remove_data_path(config_path: Path) -> None:
    config_path.write_text(yaml.safe_dump({"data_path": "/somewhere"}))
    repository = ConfigurationRepository()

    repository.update_config(remove_data_path=True)

    assert repository.get_config()["data_path"] is None


def test_get_config_returns_a_copy(config_path: Path) -> None:
    config_path.write_text(yaml.safe_dump(configuration.get_default_configuration()))
    repository = ConfigurationRepository()

    repository.get_config()["log_level"] = "DEBUG"

    assert repository.get_config()["log_level"] == "WARNING"


def test_data_path_setting_moves_notes_directory(
    config_path: Path, tmp_path: Path
) -> None:
    custom = tmp_path / "custom"
    config_path.write_text(yaml.safe_dump({"data_path": str(custom)}))

    configuration.load_data_path_configuration()

    assert configuration.DATA_PATH == custom
    assert configuration.DATA_NOTES_DIR == custom / "notes"


def test_data_path_defaults_without_config_file(
    config_path: Path, tmp_path: Path
) -> None:
    configuration.load_data_path_configuration()

    assert configuration.DATA_NOTES_DIR == tmp_path / "default-data" / "notes"


def test_empty_file_reads_as_defaults(config_path: Path) -> None:
    config_path.write_text("")
    repository = ConfigurationRepository()

    assert repository.get_config() == configuration.get_default_configuration()
    assert repository.flush() is True
