"""Configuration management for MirrorStamp."""

import os
import sys
from pathlib import Path
from typing import Any

import yaml

from mirrorstamp.models.config import AppConfig


class ConfigManager:
    """Manages application configuration with YAML file and environment variable support."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            config_path: Path to config file. If None, uses MIRRORSTAMP_CONFIG_PATH
                        environment variable or defaults to platform-specific config directory
        """
        if config_path is None:
            env_path = os.getenv("MIRRORSTAMP_CONFIG_PATH")
            if env_path:
                config_path = Path(env_path).expanduser()
            else:
                if sys.platform == "win32":
                    config_dir = Path(os.getenv("APPDATA", str(Path.home()))) / "MirrorStamp"
                elif sys.platform == "darwin":
                    config_dir = Path.home() / "Library" / "Application Support" / "MirrorStamp"
                else:
                    config_dir = Path.home() / ".config" / "mirrorstamp"

                config_path = config_dir / "config.yaml"

        self.config_path = config_path
        self._config: AppConfig | None = None

    def load(self) -> AppConfig:
        """Load configuration from file and apply environment variable overrides.

        Returns:
            Loaded configuration
        """
        config_data: dict[str, Any] = {}

        # 1. Load from YAML file if it exists
        if self.config_path.exists():
            with open(self.config_path, encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}

        # 2. Create config object (applies defaults)
        config = AppConfig(**config_data)

        # 3. Apply environment variable overrides
        return self._apply_env_overrides(config)

    def _apply_env_overrides(self, config: AppConfig) -> AppConfig:
        """Apply environment variable overrides.

        Environment variables use the format: MIRRORSTAMP_<SECTION>_<KEY>
        Examples:
            - MIRRORSTAMP_LOG_LEVEL=DEBUG
            - MIRRORSTAMP_STAMPING_UTC=true

        Args:
            config: Base configuration

        Returns:
            Configuration with environment overrides applied
        """
        if level := os.getenv("MIRRORSTAMP_LOG_LEVEL"):
            level = level.upper()
            if level in ("INFO", "DEBUG", "WARNING", "ERROR"):
                config.logging.log_level = level  # type: ignore

        if utc := os.getenv("MIRRORSTAMP_STAMPING_UTC"):
            config.stamping.utc = utc.lower() in ("true", "1", "yes")

        return config

    def get_config(self) -> AppConfig:
        """Get configuration (singleton pattern)."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def reload(self) -> AppConfig:
        """Reload configuration from file."""
        self._config = self.load()
        return self._config


# Global configuration manager instance
_config_manager = ConfigManager()


def get_config() -> AppConfig:
    """Get global application configuration.

    Returns:
        Application configuration
    """
    return _config_manager.get_config()


def reload_config() -> AppConfig:
    """Reload configuration from file.

    Returns:
        Reloaded configuration
    """
    return _config_manager.reload()
