"""
Core data types for the dart statistics engine.
Defines the records exchanged between scorer, summary builder and storage.

Persisted records use the camelCase key layout of the existing game store,
so ``to_dict``/``from_dict`` must stay compatible with records already saved.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .errors import MalformedInput

DEFAULT_DARTS_PER_TURN = 3


def _require_int(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    # bool is an int subclass but never a valid score
    if value is None or isinstance(value, bool) or not isinstance(value, int):
        raise MalformedInput(key, f"got {value!r}")
    return value


@dataclass(frozen=True)
class ThrowEvent:
    """
    One turn (up to three darts) of a single player.
    """
    score_after: int  # Remaining score after this turn
    total: int  # Points scored this turn (as entered, even on a bust)
    darts_thrown: int = DEFAULT_DARTS_PER_TURN  # 1-3, fewer on a checkout
    was_bust: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ThrowEvent":
        """
        Build an event from a scorer history entry.

        ``dartsActuallyThrown`` falls back to 3 when absent; ``scoreAfter``
        and ``total`` are never defaulted.

        Raises:
            MalformedInput: If ``scoreAfter`` or ``total`` is missing
        """
        score_after = _require_int(data, "scoreAfter")
        total = _require_int(data, "total")
        darts = data.get("dartsActuallyThrown") or DEFAULT_DARTS_PER_TURN
        return cls(
            score_after=score_after,
            total=total,
            darts_thrown=int(darts),
            was_bust=bool(data.get("wasBust", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scoreAfter": self.score_after,
            "dartsActuallyThrown": self.darts_thrown,
            "total": self.total,
            "wasBust": self.was_bust,
        }


@dataclass
class PlayerHistory:
    """
    Full throw history of one player for one finished game.

    Multi-leg games pass ``legs`` (one event list per leg) so every leg is
    replayed from the starting score; otherwise ``history`` is one leg.
    """
    name: str
    history: List[ThrowEvent] = field(default_factory=list)
    legs_won: int = 0
    remaining: Optional[int] = None  # Live score at game end (None = derive from history)
    legs: List[List[ThrowEvent]] = field(default_factory=list)

    def leg_histories(self) -> List[List[ThrowEvent]]:
        return self.legs if self.legs else [self.history]


@dataclass(frozen=True)
class PlayerGameSummary:
    """
    Per-player summary kept for a finished game.
    The raw history is gone at this point; only these values survive.
    """
    name: str
    legs_won: int
    average: float  # Points per 3 darts, 2 decimals
    total_darts: int
    remaining: int
    busts: int
    checkout_pct: Optional[float] = None  # None if never in checkout range

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "legsWon": self.legs_won,
            "average": self.average,
            "totalDarts": self.total_darts,
            "remaining": self.remaining,
            "busts": self.busts,
            "checkoutPct": self.checkout_pct,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerGameSummary":
        checkout_pct = data.get("checkoutPct")
        return cls(
            name=str(data["name"]),
            legs_won=int(data.get("legsWon", 0)),
            average=float(data.get("average", 0.0)),
            total_darts=int(data.get("totalDarts", 0)),
            remaining=int(data.get("remaining", 0)),
            busts=int(data.get("busts", 0)),
            checkout_pct=float(checkout_pct) if checkout_pct is not None else None,
        )


@dataclass(frozen=True)
class GameRecord:
    """
    A saved game. Created once when the game finishes, never updated.
    """
    id: Optional[str]
    user_id: str
    timestamp: Optional[float]  # Unix timestamp assigned by the store (None = not committed)
    game_mode: str  # Starting score label ("301", "501")
    finish_mode: str  # "double" or "single"
    legs_played: int
    winner: str
    players: Tuple[PlayerGameSummary, ...] = ()

    def __post_init__(self):
        if self.legs_played < 1:
            raise ValueError("legs_played must be at least 1")

    @property
    def sort_timestamp(self) -> float:
        """Timestamp for ordering; undated records count as epoch 0."""
        return self.timestamp if self.timestamp is not None else 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Persisted form (without ``id``, which is the storage key)."""
        return {
            "userId": self.user_id,
            "timestamp": self.timestamp,
            "gameMode": self.game_mode,
            "finishMode": self.finish_mode,
            "legsPlayed": self.legs_played,
            "winner": self.winner,
            "players": [p.to_dict() for p in self.players],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], record_id: Optional[str] = None) -> "GameRecord":
        timestamp = data.get("timestamp")
        return cls(
            id=record_id if record_id is not None else data.get("id"),
            user_id=str(data["userId"]),
            timestamp=float(timestamp) if timestamp is not None else None,
            game_mode=str(data.get("gameMode", "501")),
            finish_mode=str(data.get("finishMode", "double")),
            legs_played=int(data.get("legsPlayed", 1)),
            winner=str(data.get("winner", "")),
            players=tuple(
                PlayerGameSummary.from_dict(p) for p in data.get("players") or []
            ),
        )


@dataclass(frozen=True)
class PlayerRanking:
    """Cross-game totals for one player. Recomputed on every aggregation."""
    name: str
    games_played: int
    wins: int
    win_pct: float
    avg_per_3: float
    checkout_pct: Optional[float] = None


@dataclass
class MonthGroup:
    """Saved games sharing one calendar month."""
    label: str  # e.g. "January 2024"
    sort_key: str  # "YYYY-MM" with zero-based month
    games: List[GameRecord] = field(default_factory=list)
