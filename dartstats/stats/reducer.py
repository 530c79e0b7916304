"""
Per-game statistics derived from one player's throw history.

Rules:
- Bust turns score 0 points but their darts still count
- A turn is a checkout attempt when the score before it is in [2, 170]
- The attempt succeeds if the turn is not a bust and leaves 0
"""
from dataclasses import dataclass
from typing import Iterable, Optional

from dartstats.core import ThrowEvent
from .rounding import round_half_up

MAX_CHECKOUT = 170  # Highest finishable score (T20, T20, Bull)
MIN_CHECKOUT = 2  # Lowest finishable score under double-out (D1)


@dataclass(frozen=True)
class ThrowStats:
    """Result of reducing one throw history."""
    total_darts: int = 0
    total_points: int = 0
    busts: int = 0
    checkout_attempts: int = 0
    checkout_successes: int = 0
    average: float = 0.0  # Points per 3 darts, 2 decimals
    final_remaining: int = 0

    @property
    def checkout_pct(self) -> Optional[float]:
        """Checkout success rate in percent (1 decimal), None without attempts."""
        if self.checkout_attempts == 0:
            return None
        return round_half_up(self.checkout_successes / self.checkout_attempts * 100, 1)


def is_checkout_window(score: int) -> bool:
    """Whether a leg can be finished from ``score`` in one turn."""
    return MIN_CHECKOUT <= score <= MAX_CHECKOUT


def starting_score_for(game_mode) -> int:
    """Starting score of a game mode label; anything but 301 plays 501."""
    return 301 if str(game_mode) == "301" else 501


def reduce_throw_history(starting_score: int, history: Iterable[ThrowEvent]) -> ThrowStats:
    """
    Walk a throw history in order and collect the game statistics.

    Args:
        starting_score: Score each player starts from (301 or 501)
        history: Turns of one player, in the order they were thrown

    Returns:
        ThrowStats for the player
    """
    total_darts = 0
    total_points = 0
    busts = 0
    attempts = 0
    successes = 0
    running_score = starting_score

    for event in history:
        total_darts += event.darts_thrown or 3

        if event.was_bust:
            busts += 1
        else:
            total_points += event.total

        # Evaluated against the score *before* this turn
        if is_checkout_window(running_score):
            attempts += 1
            if not event.was_bust and event.score_after == 0:
                successes += 1

        running_score = event.score_after

    return ThrowStats(
        total_darts=total_darts,
        total_points=total_points,
        busts=busts,
        checkout_attempts=attempts,
        checkout_successes=successes,
        average=_average_per_3(total_points, total_darts),
        final_remaining=running_score,
    )


def _average_per_3(total_points: int, total_darts: int) -> float:
    return round_half_up(total_points / total_darts * 3, 2) if total_darts > 0 else 0.0


def reduce_legs(starting_score: int, legs: Iterable[Iterable[ThrowEvent]]) -> ThrowStats:
    """
    Reduce a multi-leg history, each leg replayed from ``starting_score``.

    Counts are summed over the legs and the average is taken over all darts,
    so a single leg gives the same result as reduce_throw_history.
    """
    leg_stats = [reduce_throw_history(starting_score, leg) for leg in legs]
    if not leg_stats:
        return reduce_throw_history(starting_score, [])

    total_darts = sum(s.total_darts for s in leg_stats)
    total_points = sum(s.total_points for s in leg_stats)

    return ThrowStats(
        total_darts=total_darts,
        total_points=total_points,
        busts=sum(s.busts for s in leg_stats),
        checkout_attempts=sum(s.checkout_attempts for s in leg_stats),
        checkout_successes=sum(s.checkout_successes for s in leg_stats),
        average=_average_per_3(total_points, total_darts),
        final_remaining=leg_stats[-1].final_remaining,
    )
