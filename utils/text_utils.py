"""
Text processing utilities for PGN tag values.
"""

import re
import unicodedata
from typing import Dict, Optional


# Letters that do not decompose into an ASCII base letter plus accents.
SPECIAL_LETTER_MAP = {
    'ß': 'ss', 'ẞ': 'SS',
    'æ': 'ae', 'Æ': 'AE',
    'œ': 'oe', 'Œ': 'OE',
    'ø': 'o', 'Ø': 'O',
    'ł': 'l', 'Ł': 'L',
    'đ': 'd', 'Đ': 'D',
    'ð': 'd', 'Ð': 'D',
    'þ': 'th', 'Þ': 'Th',
    'ı': 'i', 'ħ': 'h', 'Ħ': 'H',
}

_NON_ASCII_LETTER_RE = re.compile(r'[^a-zA-Z]')
_WORD_RE = re.compile(r'\S+')


class TextUtils:
    """Utilities for text processing and normalization."""

    @staticmethod
    def foreign_letters_to_english(text: str, extra_map: Optional[Dict[str, str]] = None) -> str:
        """Replace foreign Latin letters with their nearest English letters."""
        letter_map = dict(SPECIAL_LETTER_MAP)
        if extra_map:
            letter_map.update(extra_map)

        for letter, replacement in letter_map.items():
            text = text.replace(letter, replacement)

        result = []
        for char in text:
            if ord(char) < 128:
                result.append(char)
                continue

            # Strip accents: "é" decomposes to "e" + combining acute
            decomposed = unicodedata.normalize('NFKD', char)
            base = ''.join(c for c in decomposed if not unicodedata.combining(c))
            if base and base.isascii() and base.isalpha():
                result.append(base)
            else:
                result.append(char)

        return ''.join(result)

    @staticmethod
    def title_case_if_all_caps(text: str) -> str:
        """Title-case the text if all of its letters are uppercase."""
        letters = [c for c in text if c.isalpha()]
        if not all(c.isupper() for c in letters):
            return text

        return _WORD_RE.sub(lambda match: match.group(0).capitalize(), text)

    @staticmethod
    def count_letters(text: str) -> int:
        """Count the ASCII letters in the text."""
        return len(_NON_ASCII_LETTER_RE.sub('', text))
