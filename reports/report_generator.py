"""
Report generator for batches of PGN game records.
"""

import pandas as pd
import logging
from typing import Any, Dict, Iterable
from models.game import Game, SERIALIZED_FIELDS

logger = logging.getLogger(__name__)

INDEX_COLUMNS = ['White', 'Black', 'Result', 'Year', 'Event', 'ECO', 'Moves']


class ReportGenerator:
    """Generates tabular views of games for display and indexing."""

    def games_to_dataframe(self, games: Iterable[Game]) -> pd.DataFrame:
        """One row per game holding its serialized record."""
        data = [game.to_serialized_record() for game in games]
        df = pd.DataFrame(data, columns=list(SERIALIZED_FIELDS))

        logger.info(f"Built game table with {len(df)} games")
        return df

    def generate_index(self, games: Iterable[Game]) -> pd.DataFrame:
        """
        Generate a display index of games.
        The Event column combines event, site and date as shown to users.
        """
        data = []
        for game in games:
            data.append({
                'White': game.white,
                'Black': game.black,
                'Result': game.result,
                'Year': game.get_year(),
                'Event': game.get_event_site_date_pretty_print(),
                'ECO': game.eco,
                'Moves': game.move_count
            })

        df = pd.DataFrame(data, columns=INDEX_COLUMNS)

        logger.info(f"Generated game index with {len(df)} games")
        return df

    def get_statistics(self, games: Iterable[Game]) -> Dict[str, Any]:
        """Get summary statistics for a batch of games."""
        games = list(games)
        total_moves = sum(game.move_count for game in games)

        games_by_result: Dict[str, int] = {}
        games_by_year: Dict[int, int] = {}
        for game in games:
            if game.result is not None:
                games_by_result[game.result] = games_by_result.get(game.result, 0) + 1
            year = game.get_year()
            if year is not None:
                games_by_year[year] = games_by_year.get(year, 0) + 1

        return {
            'total_games': len(games),
            'total_moves': total_moves,
            'average_moves': total_moves / len(games) if games else 0.0,
            'games_by_result': games_by_result,
            'games_by_year': games_by_year
        }
