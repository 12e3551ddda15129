from pathlib import Path

import pytest

from mirrorstamp.config import ConfigManager


def test_defaults_without_file(tmp_path: Path) -> None:
    config = ConfigManager(config_path=tmp_path / "missing.yaml").load()

    assert config.logging.log_level == "WARNING"
    assert config.stamping.utc is False


def test_load_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  log_level: DEBUG\nstamping:\n  utc: true\n", encoding="utf-8")

    config = ConfigManager(config_path=path).load()

    assert config.logging.log_level == "DEBUG"
    assert config.stamping.utc is True


def test_env_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MIRRORSTAMP_LOG_LEVEL", "info")
    monkeypatch.setenv("MIRRORSTAMP_STAMPING_UTC", "yes")

    config = ConfigManager(config_path=tmp_path / "missing.yaml").load()

    assert config.logging.log_level == "INFO"
    assert config.stamping.utc is True


def test_invalid_env_level_is_ignored(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MIRRORSTAMP_LOG_LEVEL", "LOUD")

    config = ConfigManager(config_path=tmp_path / "missing.yaml").load()

    assert config.logging.log_level == "WARNING"


def test_config_path_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "custom.yaml"
    monkeypatch.setenv("MIRRORSTAMP_CONFIG_PATH", str(path))

    manager = ConfigManager()

    assert manager.config_path == path


def test_get_config_is_cached_until_reload(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("stamping:\n  utc: false\n", encoding="utf-8")
    manager = ConfigManager(config_path=path)

    first = manager.get_config()
    path.write_text("stamping:\n  utc: true\n", encoding="utf-8")

    assert manager.get_config() is first
    assert manager.reload().stamping.utc is True
