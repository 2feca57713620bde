# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from dataclasses import dataclass, field

import pytest

from relay_lib.core.config import Config, _dict_to_dataclass


def test_dict_to_dataclass_nested_conversion():
    @dataclass
    class Inner:
        value: int = 0

    @dataclass
    class Outer:
        inner: Inner = field(default_factory=Inner)
        name: str = "default"

    result = _dict_to_dataclass(Outer, {"inner": {"value": 7}, "name": "outer"})

    assert isinstance(result.inner, Inner)
    assert result.inner.value == 7
    assert result.name == "outer"


def test_dict_to_dataclass_partial_data_and_extra_fields():
    @dataclass
    class Settings:
        width: int = 8
        style: str = "bold"

    result = _dict_to_dataclass(Settings, {"width": 2, "unknown": "ignored"})

    assert result.width == 2
    assert result.style == "bold"
    assert not hasattr(result, "unknown")


def test_get_config_path_env_variable_highest_priority(tmp_path, monkeypatch):
    config_file = tmp_path / "custom.toml"
    config_file.write_text("")
    (tmp_path / "relay_config.toml").write_text("")

    monkeypatch.setenv("RELAY_CONFIG", str(config_file))
    monkeypatch.chdir(tmp_path)

    assert Config._get_config_path() == config_file


def test_get_config_path_current_directory_before_xdg(tmp_path, monkeypatch):
    config_file = tmp_path / "relay_config.toml"
    config_file.write_text("")

    xdg_config = tmp_path / "config"
    (xdg_config / "relay").mkdir(parents=True)
    (xdg_config / "relay" / "config.toml").write_text("")

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RELAY_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg_config))

    assert Config._get_config_path() == config_file


def test_get_config_path_xdg_config_home(tmp_path, monkeypatch):
    xdg_config = tmp_path / "config"
    (xdg_config / "relay").mkdir(parents=True)
    config_file = xdg_config / "relay" / "config.toml"
    config_file.write_text("")

    other_dir = tmp_path / "other"
    other_dir.mkdir()

    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg_config))
    monkeypatch.chdir(other_dir)
    monkeypatch.delenv("RELAY_CONFIG", raising=False)

    assert Config._get_config_path() == config_file


def test_get_config_path_none(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RELAY_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "nonexistent"))

    assert Config._get_config_path() is None


def test_load_with_explicit_path(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text("""
binary_name = "relayd"

[gatherer]
max_workers = 2

[exit_codes]
pending_jobs = 50

[profiles]
default_name = "production"
""")

    config = Config.load(config_file)

    assert config.binary_name == "relayd"
    assert config.gatherer.max_workers == 2
    assert config.exit_codes.pending_jobs == 50
    assert config.profiles.default_name == "production"

    # non-overriden values
    assert config.exit_codes.default == 91
    assert config.project_files.profiles == "relay.yaml"


def test_load_returns_defaults_when_file_missing(tmp_path):
    assert Config.load(tmp_path / "missing.toml") == Config()


def test_load_invalid_toml_raises_value_error(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text("this is [ not toml")

    with pytest.raises(ValueError, match="Could not read relay config"):
        Config.load(config_file)
