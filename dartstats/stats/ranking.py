"""
Player ranking across saved games.

Saved games only keep per-game summaries, so totals are reconstructed:

- Points per game are recovered as ``average * total_darts / 3``, the inverse
  of how the average was stored. This keeps the precision of the stored
  average and no more.
- Checkout percentage is the plain mean of the per-game percentages; every
  game with a checkout chance counts once, however many attempts it had.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from dartstats.core import GameRecord, PlayerGameSummary, PlayerRanking
from .rounding import round_half_up

PlayerKey = Callable[[PlayerGameSummary], str]


def _by_name(summary: PlayerGameSummary) -> str:
    return summary.name


@dataclass
class _Totals:
    name: str
    games: int = 0
    wins: int = 0
    total_points: float = 0.0
    total_darts: int = 0
    checkout_sum: float = 0.0
    checkout_games: int = 0

    def to_ranking(self) -> PlayerRanking:
        win_pct = round_half_up(self.wins / self.games * 100, 1) if self.games > 0 else 0.0
        avg_per_3 = (
            round_half_up(self.total_points / self.total_darts * 3, 1)
            if self.total_darts > 0 else 0.0
        )
        checkout_pct: Optional[float] = None
        if self.checkout_games > 0:
            checkout_pct = round_half_up(self.checkout_sum / self.checkout_games, 1)

        return PlayerRanking(
            name=self.name,
            games_played=self.games,
            wins=self.wins,
            win_pct=win_pct,
            avg_per_3=avg_per_3,
            checkout_pct=checkout_pct,
        )


class RankingAggregator:
    """
    Accumulates player totals game by game.

    Players are merged by ``key`` (the player name unless a richer identity
    is supplied); the ranking shows the first name seen for each key.
    """

    def __init__(self, key: Optional[PlayerKey] = None):
        self.key = key or _by_name
        self._totals: Dict[str, _Totals] = {}

    def add_game(self, game: GameRecord) -> None:
        """Add one saved game to the totals."""
        for player in game.players:
            player_key = self.key(player)
            totals = self._totals.get(player_key)
            if totals is None:
                totals = self._totals[player_key] = _Totals(name=player.name)

            totals.games += 1
            if player.name == game.winner:
                totals.wins += 1

            totals.total_points += player.average * player.total_darts / 3
            totals.total_darts += player.total_darts

            if player.checkout_pct is not None:
                totals.checkout_sum += player.checkout_pct
                totals.checkout_games += 1

    def add_games(self, games: Iterable[GameRecord]) -> None:
        for game in games:
            self.add_game(game)

    def rankings(self) -> List[PlayerRanking]:
        """Rankings sorted by win percentage, then average (both descending)."""
        rankings = [totals.to_ranking() for totals in self._totals.values()]
        return sorted(rankings, key=lambda r: (-r.win_pct, -r.avg_per_3))


def compute_rankings(
        games: Iterable[GameRecord],
        key: Optional[PlayerKey] = None
) -> List[PlayerRanking]:
    """Rank all players appearing in ``games``."""
    aggregator = RankingAggregator(key=key)
    aggregator.add_games(games)
    return aggregator.rankings()
