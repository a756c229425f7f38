"""
Chess game record model for a single game taken from a PGN database.

Raw tag values go through ``GameBuilder`` which cleans them up on the way in
(placeholder values dropped, foreign letters transliterated, all-caps text
re-cased, player names canonicalized). ``GameBuilder.build()`` returns an
immutable ``Game`` whose display helpers and serialization are pure reads.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from models.normalization import NormalizationConfig
from utils.name_utils import NameUtils
from utils.text_utils import TextUtils

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
)

# Serialized key -> Game attribute, in output order. Provenance is not exported.
SERIALIZED_FIELD_MAP = {
    'rawText': 'raw_text',
    'moveTokens': 'move_tokens',
    'moveCount': 'move_count',
    'site': 'site',
    'event': 'event',
    'date': 'date',
    'round': 'round',
    'white': 'white',
    'black': 'black',
    'result': 'result',
    'whiteElo': 'white_elo',
    'blackElo': 'black_elo',
    'eco': 'eco',
}
SERIALIZED_FIELDS = tuple(SERIALIZED_FIELD_MAP)

# PGN spells an unknown tag value as "?"; empty values are treated the same way.
PGN_PLACEHOLDERS = ('?', '')

_LEADING_INTEGER_RE = re.compile(r'\s*([+-]?\d+)')


def split_moves(moves: str) -> List[str]:
    """Split move text on single spaces. Consecutive spaces give empty tokens."""
    if not moves:
        return []
    return moves.split(' ')


@dataclass(frozen=True)
class Game:
    """A parsed chess game with normalized tag values."""
    provenance: Optional[str] = None
    raw_text: str = ''
    move_tokens: str = ''
    move_count: int = 0
    event: Optional[str] = None
    site: Optional[str] = None
    date: Optional[str] = None
    round: Optional[str] = None
    white: Optional[str] = None
    black: Optional[str] = None
    result: Optional[str] = None
    white_elo: Optional[str] = None
    black_elo: Optional[str] = None
    eco: Optional[str] = None

    def get_moves_array(self) -> List[str]:
        """Get the move tokens in game order."""
        return split_moves(self.move_tokens)

    def get_year(self) -> Optional[int]:
        """
        Get the year from the first four characters of the date.

        Placeholder characters are removed before parsing, so "20??" gives 20.
        """
        if self.date is None or len(self.date) < 4:
            return None

        year = self.date[:4].replace('?', '')
        # "0???" counts as an unknown year
        if not year or year == '0':
            return None

        match = _LEADING_INTEGER_RE.match(year)
        return int(match.group(1)) if match else None

    def get_date_pretty_print(self) -> Optional[str]:
        """Get the date formatted as "<Month>, <Year>", or the bare year."""
        if self.date is None:
            return None

        segments = [segment for segment in self.date.replace('?', '').split('.') if segment]

        if len(segments) in (2, 3):
            month = _month_name(segments[1])
            if month is None:
                logger.debug(f"Could not read month from date '{self.date}'")
                return None
            return f"{month}, {segments[0]}"
        elif len(segments) == 1:
            return segments[0]

        return None

    def get_event_site_pretty_print(self) -> Optional[str]:
        """Get the event and site combined, without repeating a site the event already names."""
        if self.event and self.site:
            if self.site in self.event:
                return self.event
            return f"{self.event}, in {self.site}"

        return self.event or self.site or None

    def get_event_site_date_pretty_print(self) -> Optional[str]:
        event_site = self.get_event_site_pretty_print()
        date = self.get_date_pretty_print()

        if event_site and date:
            return f"{event_site}, {date}"

        return event_site or date or None

    def to_serialized_record(self) -> Dict[str, Any]:
        """Get the exported fields of this game. Absent values are None."""
        return {key: getattr(self, attribute) for key, attribute in SERIALIZED_FIELD_MAP.items()}

    def to_json(self) -> str:
        return json.dumps(self.to_serialized_record())


def _month_name(segment: str) -> Optional[str]:
    try:
        month = int(segment)
    except ValueError:
        return None

    if 1 <= month <= 12:
        return MONTH_NAMES[month - 1]
    return None


class GameBuilder:
    """Collects raw tag values for one game and normalizes them as they are set."""

    # PGN tag name -> setter name
    TAG_SETTERS = {
        'Event': 'set_event',
        'Site': 'set_site',
        'Date': 'set_date',
        'Round': 'set_round',
        'White': 'set_white',
        'Black': 'set_black',
        'Result': 'set_result',
        'WhiteElo': 'set_white_elo',
        'BlackElo': 'set_black_elo',
        'ECO': 'set_eco',
    }

    def __init__(self, config: Optional[NormalizationConfig] = None):
        self.config = config or NormalizationConfig()
        self._values: Dict[str, Any] = {}

    @classmethod
    def from_parsed(cls, tags: Mapping[str, str], moves: str, pgn: Optional[str] = None,
                    provenance: Optional[str] = None,
                    config: Optional[NormalizationConfig] = None) -> Game:
        """Build a game from the tag pairs and move text produced by the PGN tokenizer."""
        builder = cls(config).apply_tags(tags).set_moves(moves)
        if pgn is not None:
            builder.set_pgn(pgn)
        if provenance is not None:
            builder.set_provenance(provenance)
        return builder.build()

    def _normalize(self, value: Optional[str],
                   validator: Optional[Callable[[str], bool]] = None) -> Optional[str]:
        """Return None for placeholder, empty or rejected values, else the value unchanged."""
        if value is None or self._is_placeholder(value):
            return None
        if validator is not None and not validator(value):
            return None
        return value

    def _is_placeholder(self, value: str) -> bool:
        return value in PGN_PLACEHOLDERS or value == self.config.placeholder

    def _set_optional(self, attribute: str, value: Optional[str],
                      validator: Optional[Callable[[str], bool]] = None) -> 'GameBuilder':
        normalized = self._normalize(value, validator)
        if normalized is None and value:
            logger.debug(f"Dropped {attribute} value '{value}'")
        self._values[attribute] = normalized
        return self

    def _clean_text(self, value: str) -> Optional[str]:
        value = TextUtils.foreign_letters_to_english(value, self.config.transliteration)
        value = TextUtils.title_case_if_all_caps(value)
        return None if self._is_placeholder(value) else value

    def _has_enough_letters(self, value: str) -> bool:
        # Some sites are non-letter gibberish such as "-" or "1.2"
        return TextUtils.count_letters(value) >= self.config.min_site_letters

    def set_event(self, event: str) -> 'GameBuilder':
        self._set_optional('event', event)
        if self._values['event'] is not None:
            self._values['event'] = self._clean_text(self._values['event'])
        return self

    def set_site(self, site: str) -> 'GameBuilder':
        self._set_optional('site', site, self._has_enough_letters)
        if self._values['site'] is not None:
            self._values['site'] = self._clean_text(self._values['site'])
        return self

    def set_date(self, date: str) -> 'GameBuilder':
        return self._set_optional('date', date)

    def set_round(self, round_: str) -> 'GameBuilder':
        return self._set_optional('round', round_)

    def set_result(self, result: str) -> 'GameBuilder':
        return self._set_optional('result', result)

    def set_white_elo(self, white_elo: str) -> 'GameBuilder':
        return self._set_optional('white_elo', white_elo)

    def set_black_elo(self, black_elo: str) -> 'GameBuilder':
        return self._set_optional('black_elo', black_elo)

    def set_eco(self, eco: str) -> 'GameBuilder':
        return self._set_optional('eco', eco)

    def set_white(self, white: str) -> 'GameBuilder':
        self._values['white'] = NameUtils.normalize_player_name(white, self.config.transliteration)
        return self

    def set_black(self, black: str) -> 'GameBuilder':
        self._values['black'] = NameUtils.normalize_player_name(black, self.config.transliteration)
        return self

    def set_moves(self, moves: str) -> 'GameBuilder':
        """Set the move text, e.g. "e4 e5 Nf3" (move numbers already removed)."""
        moves = moves.strip()
        self._values['move_tokens'] = moves
        self._values['move_count'] = len(split_moves(moves))
        return self

    def set_pgn(self, pgn: str) -> 'GameBuilder':
        self._values['raw_text'] = pgn.strip()
        return self

    def set_provenance(self, provenance: str) -> 'GameBuilder':
        """Set the file name of the PGN database the game came from."""
        self._values['provenance'] = provenance
        return self

    def apply_tags(self, tags: Mapping[str, str]) -> 'GameBuilder':
        """Apply a dictionary of PGN tag pairs, e.g. {"Event": "...", "WhiteElo": "2700"}."""
        for tag, value in tags.items():
            setter = self.TAG_SETTERS.get(tag)
            if setter is None:
                logger.debug(f"Ignoring unsupported tag '{tag}'")
                continue
            getattr(self, setter)(value)
        return self

    def build(self) -> Game:
        """Create the immutable game from the values set so far."""
        return Game(**self._values)
