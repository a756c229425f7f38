"""
Normalization settings model for PGN tag ingestion.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizationConfig:
    """Settings controlling how raw tag values are cleaned up."""
    placeholder: str = '?'
    min_site_letters: int = 2
    transliteration: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> 'NormalizationConfig':
        """
        Build settings from a loaded configuration mapping.
        Badly typed values are logged and replaced with their defaults.
        """
        defaults = cls()

        placeholder = config.get('placeholder', defaults.placeholder)
        if not isinstance(placeholder, str):
            logger.warning(f"Invalid placeholder {placeholder!r}. Using default '{defaults.placeholder}'.")
            placeholder = defaults.placeholder

        min_site_letters = config.get('min_site_letters', defaults.min_site_letters)
        try:
            min_site_letters = int(min_site_letters)
        except (TypeError, ValueError):
            logger.warning(f"Invalid min_site_letters {min_site_letters!r}. "
                           f"Using default {defaults.min_site_letters}.")
            min_site_letters = defaults.min_site_letters

        transliteration = config.get('transliteration') or {}
        if not isinstance(transliteration, Mapping):
            logger.warning(f"Invalid transliteration {transliteration!r}. Using no extra replacements.")
            transliteration = {}
        transliteration = {str(letter): str(replacement) for letter, replacement in transliteration.items()}

        return cls(
            placeholder=placeholder,
            min_site_letters=min_site_letters,
            transliteration=transliteration
        )
