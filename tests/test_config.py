"""Tests for settings loading."""

import pytest
import yaml

from ads_txt_parser.config import ConfigManager, ParserSettings
from ads_txt_parser.exceptions import ConfigError


def test_missing_file_gives_defaults(tmp_path):
    settings = ConfigManager(tmp_path / "nowhere").load()

    assert settings == ParserSettings()
    assert settings.timeout == 10.0
    assert settings.check_content_type is True
    assert settings.default_scheme == "https"


def test_load_values_from_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text(
        yaml.safe_dump({"timeout": 2.5, "default_format": "json", "check_content_type": False})
    )

    settings = ConfigManager(tmp_path).load()

    assert settings.timeout == 2.5
    assert settings.default_format == "json"
    assert settings.check_content_type is False


def test_invalid_values_raise_config_error(tmp_path):
    (tmp_path / "config.yaml").write_text("timeout: -1\n")

    with pytest.raises(ConfigError):
        ConfigManager(tmp_path).load()


def test_non_mapping_yaml_is_ignored(tmp_path):
    (tmp_path / "config.yaml").write_text("- just\n- a list\n")

    assert ConfigManager(tmp_path).load() == ParserSettings()


def test_env_var_overrides_default_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("ADS_TXT_PARSER_CONFIG", str(tmp_path))

    manager = ConfigManager()

    assert manager.config_file == tmp_path.resolve() / "config.yaml"


def test_save_writes_yaml(tmp_path):
    manager = ConfigManager(tmp_path / "cfg")

    manager.save(ParserSettings(default_scheme="http"))

    assert yaml.safe_load(manager.config_file.read_text())["default_scheme"] == "http"
    assert manager.load().default_scheme == "http"
