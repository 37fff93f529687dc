"""Configuration persistence manager."""

import json
import logging
from dataclasses import asdict
from enum import Enum
from pathlib import Path
from typing import Any

from latin_drill.exceptions import ValidationError

from .config import LatinDrillConfig
from .defaults import create_default_config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Save and load the user's configuration as JSON.

    The file lives in the user's home directory. Path and enum values are
    converted to plain strings on save and restored by LatinDrillConfig on
    load; a missing or invalid file falls back to the default configuration.
    """

    CONFIG_FILE = Path.home() / ".latin_drill" / "config.json"

    @classmethod
    def save_config(cls, config: LatinDrillConfig) -> None:
        """Save configuration to JSON file.

        Args:
            config: Configuration to save

        Raises:
            OSError: If unable to create directory or write file
        """
        cls.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

        config_dict = cls._to_json_values(asdict(config))

        with cls.CONFIG_FILE.open("w", encoding="utf-8") as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)

    @classmethod
    def load_config(cls, **overrides) -> LatinDrillConfig:
        """Load configuration from JSON file.

        Args:
            **overrides: Values that take precedence over the stored ones

        Returns:
            Loaded configuration, or default configuration if file doesn't exist

        Note:
            If the file exists but is invalid, falls back to default configuration
            (still applying overrides) and logs a warning.
        """
        if not cls.CONFIG_FILE.exists():
            return create_default_config(**overrides)

        try:
            with cls.CONFIG_FILE.open("r", encoding="utf-8") as f:
                config_dict = json.load(f)
            if not isinstance(config_dict, dict):
                raise ValueError("top-level JSON value is not an object")
            config_dict.update(overrides)
            return LatinDrillConfig(**config_dict)

        except (json.JSONDecodeError, TypeError, ValueError, ValidationError) as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            return create_default_config(**overrides)

    @classmethod
    def config_exists(cls) -> bool:
        """Check if configuration file exists."""
        return cls.CONFIG_FILE.exists()

    @classmethod
    def delete_config(cls) -> None:
        """Delete the configuration file so defaults apply on next load."""
        if cls.CONFIG_FILE.exists():
            cls.CONFIG_FILE.unlink()

    @staticmethod
    def _to_json_values(data: dict[str, Any]) -> dict[str, Any]:
        """Convert Path, Enum and tuple values into JSON-friendly types.

        Args:
            data: Dictionary produced by dataclasses.asdict

        Returns:
            Dictionary containing only JSON-serializable values
        """

        def convert(value: Any) -> Any:
            if isinstance(value, Path):
                return str(value)
            if isinstance(value, Enum):
                return value.value
            if isinstance(value, (list, tuple)):
                return [convert(item) for item in value]
            if isinstance(value, dict):
                return {key: convert(item) for key, item in value.items()}
            return value

        return {key: convert(value) for key, value in data.items()}
