"""
Models package for PGN game records.

This package contains the game record, its builder and the normalization settings.
"""

from .normalization import NormalizationConfig
from .game import Game, GameBuilder, SERIALIZED_FIELDS

__all__ = ['Game', 'GameBuilder', 'NormalizationConfig', 'SERIALIZED_FIELDS']
