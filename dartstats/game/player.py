"""
Player data structure for live scoring.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from dartstats.core import ThrowEvent, PlayerHistory


@dataclass
class Player:
    """Represents a player in the game."""
    name: str
    starting_score: int = 501

    # Current state
    current_score: int = field(init=False)
    legs_won: int = 0

    # Turn history over all legs, in throw order
    history: List[ThrowEvent] = field(default_factory=list)
    # Index into history where each leg begins
    leg_starts: List[int] = field(default_factory=lambda: [0])

    def __post_init__(self):
        """Initialize current score."""
        self.current_score = self.starting_score

    def record(self, event: ThrowEvent) -> None:
        """Append a processed turn and move the score."""
        self.history.append(event)
        self.current_score = event.score_after

    def undo_last_turn(self) -> Optional[ThrowEvent]:
        """
        Remove the last turn and restore the score before it.

        Returns:
            The removed turn, or None if there is nothing to undo
        """
        if not self.history:
            return None

        event = self.history.pop()
        # Busts leave the score unchanged, so score_after is also the score before
        self.current_score = event.score_after if event.was_bust else event.score_after + event.total
        return event

    def start_leg(self) -> None:
        """Reset the running score for a new leg (history is kept)."""
        self.current_score = self.starting_score
        self.leg_starts.append(len(self.history))

    def reset(self) -> None:
        """Reset player to starting state."""
        self.current_score = self.starting_score
        self.legs_won = 0
        self.history.clear()
        self.leg_starts = [0]

    def to_history(self) -> PlayerHistory:
        """Snapshot for the game summary."""
        return PlayerHistory(
            name=self.name,
            history=list(self.history),
            legs_won=self.legs_won,
            remaining=self.current_score,
            legs=self.legs,
        )

    @property
    def darts_thrown(self) -> int:
        return sum(event.darts_thrown for event in self.history)

    @property
    def points_scored(self) -> int:
        """Points scored, busts excluded."""
        return sum(event.total for event in self.history if not event.was_bust)

    @property
    def average_per_turn(self) -> float:
        """Calculate average score per turn (3 darts)."""
        if self.darts_thrown == 0:
            return 0.0
        return self.points_scored / self.darts_thrown * 3

    @property
    def legs(self) -> List[List[ThrowEvent]]:
        """History split into one event list per leg."""
        bounds = self.leg_starts + [len(self.history)]
        return [self.history[start:end] for start, end in zip(bounds, bounds[1:])]
