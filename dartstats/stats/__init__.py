"""
Stats module - per-game reduction, game summaries, rankings and history.
"""
from .rounding import round_half_up
from .reducer import (
    ThrowStats,
    reduce_throw_history,
    reduce_legs,
    starting_score_for,
    is_checkout_window,
    MAX_CHECKOUT,
    MIN_CHECKOUT,
)
from .summary import GameSummaryBuilder, summarize_player, select_winner
from .ranking import RankingAggregator, compute_rankings
from .history import (
    MONTH_NAMES,
    group_by_month,
    most_recent_month_key,
    resolve_timezone,
)

__all__ = [
    "round_half_up",
    # Reducer
    "ThrowStats",
    "reduce_throw_history",
    "reduce_legs",
    "starting_score_for",
    "is_checkout_window",
    "MAX_CHECKOUT",
    "MIN_CHECKOUT",
    # Summary
    "GameSummaryBuilder",
    "summarize_player",
    "select_winner",
    # Ranking
    "RankingAggregator",
    "compute_rankings",
    # History
    "MONTH_NAMES",
    "group_by_month",
    "most_recent_month_key",
    "resolve_timezone",
]
