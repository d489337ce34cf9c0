"""Configuration management."""

from fuzzy_index.config.loader import get_config, load_config, reload_config, reset_config
from fuzzy_index.config.schema import FuzzyIndexConfig

__all__ = ["FuzzyIndexConfig", "get_config", "load_config", "reload_config", "reset_config"]
