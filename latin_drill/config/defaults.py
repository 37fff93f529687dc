"""Default configuration values for Latin Drill."""

from .config import LatinDrillConfig


def create_default_config(**overrides) -> LatinDrillConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        LatinDrillConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            queue_size=3,
            random_seed=42,
        )
    """
    return LatinDrillConfig(**overrides)
