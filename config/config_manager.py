"""
Configuration management for PGN tag normalization.
"""

import logging
import yaml
from typing import Dict, Any

from models.normalization import NormalizationConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading and provides default values."""

    @staticmethod
    def load_config(config_file: str) -> Dict[str, Any]:
        """Load configuration from YAML file, filling in missing keys with defaults."""
        config = ConfigManager.get_default_config()
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f)
        except FileNotFoundError:
            logger.warning(f"Configuration file '{config_file}' not found. Using default configuration.")
            return config
        except yaml.YAMLError as e:
            logger.warning(f"Error parsing configuration file: {e}. Using default configuration.")
            return config

        if not isinstance(loaded, dict):
            logger.warning(f"Configuration file '{config_file}' is not a mapping. Using default configuration.")
            return config

        config.update(loaded)
        return config

    @staticmethod
    def get_default_config() -> Dict[str, Any]:
        """Return default configuration if config file is not available."""
        return {
            'placeholder': '?',
            'min_site_letters': 2,
            'transliteration': {}
        }

    @staticmethod
    def load_normalization_config(config_file: str = "config.yaml") -> NormalizationConfig:
        """Load normalization settings for the game builder."""
        return NormalizationConfig.from_dict(ConfigManager.load_config(config_file))
