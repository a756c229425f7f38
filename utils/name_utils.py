"""
Name utilities for player name canonicalization.
"""

import re
from typing import Dict, Optional

from .text_utils import TextUtils


_WHITESPACE_RE = re.compile(r'\s+')
_COMMA_RE = re.compile(r'\s*,\s*')


class NameUtils:
    """Utilities for player name processing."""

    @staticmethod
    def normalize_player_name(name: str, extra_map: Optional[Dict[str, str]] = None) -> str:
        """
        Canonicalize a player name as found in a White/Black tag.

        "CARLSEN ,MAGNUS" and "Carlsen,Magnus" both become "Carlsen, Magnus".
        Applying this twice gives the same result as applying it once.
        extra_map holds additional letter replacements, as for event and site values.
        """
        if name is None:
            return ''

        normalized = TextUtils.foreign_letters_to_english(name, extra_map)

        # Collapse runs of whitespace and tidy up "Last,First" separators
        normalized = _WHITESPACE_RE.sub(' ', normalized).strip()
        normalized = _COMMA_RE.sub(', ', normalized).strip(' ,')

        return TextUtils.title_case_if_all_caps(normalized)
