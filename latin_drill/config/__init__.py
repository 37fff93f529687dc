"""Configuration management for Latin Drill."""

from .config import LatinDrillConfig
from .config_manager import ConfigManager
from .defaults import create_default_config

__all__ = ["LatinDrillConfig", "ConfigManager", "create_default_config"]
