"""
Summary of a finished game, built from every player's throw history.

The raw histories are dropped here: only average, dart count, busts and a
single checkout percentage per player are kept in the GameRecord.
"""
from typing import Sequence
import logging

from dartstats.core import GameRecord, PlayerGameSummary, PlayerHistory
from .reducer import reduce_legs, starting_score_for

logger = logging.getLogger(__name__)


def summarize_player(player: PlayerHistory, starting_score: int) -> PlayerGameSummary:
    """Reduce one player's history (leg by leg) into the stored summary."""
    stats = reduce_legs(starting_score, player.leg_histories())
    remaining = player.remaining if player.remaining is not None else stats.final_remaining

    return PlayerGameSummary(
        name=player.name,
        legs_won=player.legs_won,
        average=stats.average,
        total_darts=stats.total_darts,
        remaining=remaining,
        busts=stats.busts,
        checkout_pct=stats.checkout_pct,
    )


def select_winner(players: Sequence[PlayerGameSummary]) -> PlayerGameSummary:
    """
    Pick the winner: most legs, then lowest remaining score.
    Full ties go to the earliest player.

    Raises:
        ValueError: If there are no players
    """
    if not players:
        raise ValueError("Cannot select a winner without players")

    best = players[0]
    for player in players[1:]:
        if player.legs_won > best.legs_won:
            best = player
        elif player.legs_won == best.legs_won and player.remaining < best.remaining:
            best = player
    return best


class GameSummaryBuilder:
    """Turns the histories of a finished game into one GameRecord."""

    def build(
            self,
            user_id: str,
            players: Sequence[PlayerHistory],
            game_mode: str,
            finish_mode: str = "double",
            legs_played: int = 1
    ) -> GameRecord:
        """
        Build the record to persist.

        Args:
            user_id: Owner of the record
            players: Histories in play order
            game_mode: Starting score label ("301", "501")
            finish_mode: "double" or "single"
            legs_played: Number of legs in the match

        Returns:
            GameRecord without id and timestamp (both assigned by the store)
        """
        starting_score = starting_score_for(game_mode)
        summaries = tuple(summarize_player(p, starting_score) for p in players)
        winner = select_winner(summaries)

        logger.debug(
            f"Summarized {game_mode} game for {user_id}: "
            f"{len(summaries)} players, winner {winner.name}"
        )

        return GameRecord(
            id=None,
            user_id=user_id,
            timestamp=None,
            game_mode=str(game_mode),
            finish_mode=finish_mode,
            legs_played=legs_played,
            winner=winner.name,
            players=summaries,
        )
