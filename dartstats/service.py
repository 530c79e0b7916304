"""
Read/write boundary between callers and a game store.

Saving summarizes a finished game and appends it; loading feeds the ranking
and history computations.
"""
from typing import List, Optional, Sequence
import logging

from dartstats.core import (
    Config,
    GameRecord,
    MonthGroup,
    PlayerHistory,
    PlayerRanking,
    SaveFailed,
    StorageError,
)
from dartstats.stats import (
    MONTH_NAMES,
    GameSummaryBuilder,
    compute_rankings,
    group_by_month,
    resolve_timezone,
)
from dartstats.storage import GameStore

logger = logging.getLogger(__name__)


class StatsService:
    """Saves finished games and derives rankings and month history."""

    def __init__(self, store: GameStore, config: Optional[Config] = None):
        self.store = store
        self.config = config or Config()
        self.builder = GameSummaryBuilder()

    def save_game(
            self,
            user_id: str,
            players: Sequence[PlayerHistory],
            game_mode: str,
            finish_mode: str,
            legs_played: int
    ) -> str:
        """
        Summarize and store a finished game.

        Returns:
            Identifier of the new record

        Raises:
            SaveFailed: If the store rejected the write, whatever the reason
        """
        record = self.builder.build(user_id, players, game_mode, finish_mode, legs_played)

        try:
            record_id = self.store.append(record)
        except StorageError as e:
            logger.error(f"Saving game for {user_id} failed: {e}")
            raise SaveFailed(f"Could not save game: {e}") from e

        logger.info(f"Game {record_id} saved, winner: {record.winner}")
        return record_id

    def load_games(self, user_id: str, limit: Optional[int] = None) -> List[GameRecord]:
        """
        Most recent games of a user.

        Raises:
            AccessDenied: If the store refused the read
            TransportFailure: On any other read failure
        """
        if limit is None:
            limit = int(self.config.get("storage", "fetch_limit", 200))
        return self.store.fetch_user_games(user_id, limit)

    def player_rankings(self, user_id: str, limit: Optional[int] = None) -> List[PlayerRanking]:
        return compute_rankings(self.load_games(user_id, limit))

    def month_groups(self, user_id: str, limit: Optional[int] = None) -> List[MonthGroup]:
        history = self.config.get_section("history")
        language = history.get("language", "en")
        month_names = MONTH_NAMES.get(language)
        if month_names is None:
            logger.warning(f"No month names for language '{language}', using English")
            month_names = MONTH_NAMES["en"]

        tz = resolve_timezone(history.get("timezone", "UTC"))
        return group_by_month(self.load_games(user_id, limit), month_names, tz)
