"""
X01 rules (301, 501) turning entered turn totals into throw events.
"""
from typing import Optional

from dartstats.core import ThrowEvent
from dartstats.stats import starting_score_for
from .player import Player

MAX_TURN_SCORE = 180


class ModeX01:
    """
    X01 game mode with configurable checkout rule.

    Rules:
    - Start at 301 or 501 points
    - Subtract each turn from score
    - Must finish exactly on 0
    - Double-out: Must finish with a double
    - Bust if: score goes below 0, or to 1 / to 0 without a double under double-out
    - A bust keeps the score from before the turn; its darts still count
    """

    def __init__(self, starting_score: int = 501, double_out: bool = True):
        """
        Args:
            starting_score: Starting score (501, 301)
            double_out: Require double to finish
        """
        self.starting_score = starting_score
        self.double_out = double_out

    @classmethod
    def from_labels(cls, game_mode: str, finish_mode: str = "double") -> "ModeX01":
        """Build from the stored labels ("301"/"501", "double"/"single")."""
        return cls(starting_score=starting_score_for(game_mode), double_out=finish_mode == "double")

    @property
    def game_mode(self) -> str:
        return str(self.starting_score)

    @property
    def finish_mode(self) -> str:
        return "double" if self.double_out else "single"

    def get_name(self) -> str:
        """Get game mode name."""
        suffix = " (Double Out)" if self.double_out else ""
        return f"{self.starting_score}{suffix}"

    def process_turn(
            self,
            player: Player,
            total: int,
            darts: int = 3,
            finished_on_double: bool = True
    ) -> ThrowEvent:
        """
        Score a turn for a player and record it.

        Args:
            player: Player throwing
            total: Points hit in this turn
            darts: Darts thrown (fewer than 3 only when checking out)
            finished_on_double: Whether the last dart was a double

        Returns:
            The recorded ThrowEvent

        Raises:
            ValueError: If total or darts are out of range
        """
        if not 0 <= total <= MAX_TURN_SCORE:
            raise ValueError(f"Turn total must be between 0 and {MAX_TURN_SCORE}, got {total}")
        if not 1 <= darts <= 3:
            raise ValueError(f"Darts per turn must be between 1 and 3, got {darts}")

        new_score = player.current_score - total
        bust_reason = self.bust_reason(new_score, finished_on_double)

        if bust_reason:
            event = ThrowEvent(
                score_after=player.current_score,
                total=total,
                darts_thrown=darts,
                was_bust=True,
            )
        else:
            event = ThrowEvent(score_after=new_score, total=total, darts_thrown=darts)

        player.record(event)
        return event

    def bust_reason(self, new_score: int, finished_on_double: bool = True) -> Optional[str]:
        """Why a turn leaving ``new_score`` is a bust, or None if valid."""
        if new_score < 0:
            return "Score below 0"
        if self.double_out and new_score == 1:
            return "Cannot checkout on 1"
        if self.double_out and new_score == 0 and not finished_on_double:
            return "Must finish on double"
        return None

    def check_winner(self, player: Player) -> bool:
        """Check if player has finished the leg."""
        return player.current_score == 0
