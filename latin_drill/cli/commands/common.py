"""Setup shared by the CLI commands."""

from latin_drill.config import ConfigManager, LatinDrillConfig
from latin_drill.services import VocabularyService
from latin_drill.utils import configure_logging


def load_config(args, **extra) -> LatinDrillConfig:
    """Load the saved configuration with command-line overrides applied.

    Args:
        args: Parsed command-line arguments
        **extra: Further overrides from the calling command

    Returns:
        Configuration for this run
    """
    overrides = dict(extra)
    if getattr(args, "vocabulary", None):
        overrides["vocabulary_path"] = args.vocabulary
    if getattr(args, "url", None):
        overrides["vocabulary_url"] = args.url
    if getattr(args, "log_file", None):
        overrides["log_file"] = args.log_file

    config = ConfigManager.load_config(**overrides)
    configure_logging(verbose=getattr(args, "verbose", False), log_file=config.log_file)
    return config


def create_vocabulary_service(config: LatinDrillConfig) -> VocabularyService:
    """Create a vocabulary service for the configured source."""
    return VocabularyService(
        vocabulary_path=config.vocabulary_path,
        vocabulary_url=config.vocabulary_url,
        timeout=config.request_timeout,
    )
