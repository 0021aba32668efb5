# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Configuration loading and validation for fixture export."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration validation fails critically."""

    pass


class Config:
    """Configuration for fixture export.

    Loads configuration from .fixture_data.yml with validation and defaults.
    """

    DEFAULTS = {
        "output_format": "json",
        "indent": 2,
        "include_passwords": True,
        "password_mask": "********",
        "log_level": "INFO",
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration.

        Args:
            config_path: Path to configuration file. If None, uses default location.
        """
        if config_path is None:
            config_path = Path.cwd() / ".fixture_data.yml"

        self.config_path = config_path
        self._config: Dict[str, Any] = {}
        self._rejected: List[str] = []
        self._load_config()

    def _load_config(self) -> None:
        """Load and validate configuration from file."""
        self._config = self.DEFAULTS.copy()

        if not self.config_path.exists():
            logger.info(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, encoding="utf-8") as f:
                loaded_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning(
                f"Error parsing configuration file {self.config_path}: {e}, using defaults"
            )
            self._rejected.append("<file>")
            return
        except OSError as e:
            logger.warning(
                f"Error reading configuration file {self.config_path}: {e}, using defaults"
            )
            self._rejected.append("<file>")
            return

        if loaded_config is None:
            logger.warning("Configuration file is empty, using defaults")
            return

        if not isinstance(loaded_config, dict):
            logger.warning(
                f"Configuration file must contain a YAML dictionary, "
                f"got {type(loaded_config)}, using defaults"
            )
            self._rejected.append("<file>")
            return

        self._validate_and_merge(loaded_config)

    def _validate_and_merge(self, loaded_config: Dict[str, Any]) -> None:
        """Validate loaded configuration and merge with defaults.

        Invalid parameters are logged as warnings and defaults are used.
        """
        for key, value in loaded_config.items():
            if key not in self.DEFAULTS:
                logger.warning(f"Unknown configuration parameter '{key}', ignoring")
                continue

            if not self._validate_parameter(key, value):
                logger.warning(
                    f"Invalid value for '{key}': {value}, using default {self.DEFAULTS[key]}"
                )
                self._rejected.append(key)
                continue

            self._config[key] = value

    def _validate_parameter(self, key: str, value: Any) -> bool:
        """Validate a configuration parameter.

        Returns:
            True if valid, False if invalid
        """
        expected_type = type(self.DEFAULTS[key])
        # bool is a subclass of int, so "indent: true" must be rejected explicitly
        if expected_type is int and isinstance(value, bool):
            return False
        if not isinstance(value, expected_type):
            return False

        if key == "output_format":
            return value in ("json", "yaml")
        elif key == "indent":
            return bool(0 <= value <= 8)
        elif key == "log_level":
            return value.upper() in LOG_LEVELS
        elif key == "password_mask":
            return bool(value)

        return True

    def require_valid(self) -> None:
        """Fail if any configured value was rejected.

        Raises:
            ConfigurationError: If the file was unreadable or any value was invalid.
        """
        if self._rejected:
            raise ConfigurationError(
                f"Invalid configuration in {self.config_path}: {', '.join(self._rejected)}"
            )

    @property
    def output_format(self) -> str:
        """Export format, "json" or "yaml"."""
        value = self._config["output_format"]
        assert isinstance(value, str)
        return value

    @property
    def indent(self) -> int:
        """Indentation width for exported text."""
        value = self._config["indent"]
        assert isinstance(value, int)
        return value

    @property
    def include_passwords(self) -> bool:
        """Whether exports carry the plain-text passwords."""
        value = self._config["include_passwords"]
        assert isinstance(value, bool)
        return value

    @property
    def password_mask(self) -> str:
        """Replacement text for passwords when include_passwords is False."""
        value = self._config["password_mask"]
        assert isinstance(value, str)
        return value

    @property
    def log_level(self) -> str:
        """Logging level name (upper case)."""
        value = self._config["log_level"]
        assert isinstance(value, str)
        return value.upper()
