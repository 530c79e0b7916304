"""
Tests for game summaries and winner selection.
"""
import pytest

from dartstats.core import PlayerGameSummary, PlayerHistory, ThrowEvent
from dartstats.stats import GameSummaryBuilder, select_winner, summarize_player


def _summary(name, legs_won, remaining):
    return PlayerGameSummary(
        name=name, legs_won=legs_won, average=50.0,
        total_darts=30, remaining=remaining, busts=0,
    )


def test_winner_lower_remaining_breaks_tie():
    """Equal legs: the player closer to checkout wins."""
    players = [_summary("Anna", 2, 40), _summary("Ben", 2, 12)]
    assert select_winner(players).name == "Ben"


def test_winner_more_legs_beats_remaining():
    """Legs won decide before remaining score."""
    players = [_summary("Anna", 1, 0), _summary("Ben", 2, 301)]
    assert select_winner(players).name == "Ben"


def test_winner_full_tie_keeps_first():
    """A complete tie goes to the first player in order."""
    players = [_summary("Anna", 1, 32), _summary("Ben", 1, 32), _summary("Cleo", 0, 2)]
    assert select_winner(players).name == "Anna"


def test_winner_requires_players():
    """Selecting a winner of nobody is an error."""
    with pytest.raises(ValueError):
        select_winner([])


def test_summarize_player_uses_history_when_remaining_unknown():
    """Without a live score, the last running score is the remaining score."""
    player = PlayerHistory(
        name="Anna",
        history=[ThrowEvent(score_after=401, total=100)],
    )

    summary = summarize_player(player, 501)

    assert summary.remaining == 401
    assert summary.total_darts == 3
    assert summary.average == 100.0
    assert summary.checkout_pct is None


def test_build_game_record():
    """A finished 301 game becomes one record with a summary per player."""
    anna = PlayerHistory(
        name="Anna",
        legs_won=1,
        remaining=0,
        history=[
            ThrowEvent(score_after=241, total=60),
            ThrowEvent(score_after=181, total=60),
            ThrowEvent(score_after=121, total=60),
            ThrowEvent(score_after=61, total=60),
            ThrowEvent(score_after=0, total=61),
        ],
    )
    ben = PlayerHistory(
        name="Ben",
        legs_won=0,
        remaining=140,
        history=[
            ThrowEvent(score_after=201, total=100),
            ThrowEvent(score_after=181, total=20),
            ThrowEvent(score_after=140, total=41),
        ],
    )

    record = GameSummaryBuilder().build("user-1", [anna, ben], "301", "double", 1)

    assert record.id is None
    assert record.timestamp is None
    assert record.user_id == "user-1"
    assert record.game_mode == "301"
    assert record.winner == "Anna"
    assert [p.name for p in record.players] == ["Anna", "Ben"]

    anna_summary, ben_summary = record.players
    assert anna_summary.total_darts == 15
    assert anna_summary.average == 60.2
    assert anna_summary.checkout_pct == 50.0
    assert anna_summary.remaining == 0

    assert ben_summary.average == 53.67
    assert ben_summary.checkout_pct is None
    assert ben_summary.remaining == 140


def test_build_uses_501_for_unknown_mode():
    """Anything but a 301 game is reduced from 501."""
    player = PlayerHistory(
        name="Anna",
        legs_won=1,
        history=[ThrowEvent(score_after=170, total=131)],
    )

    record = GameSummaryBuilder().build("user-1", [player], "501")

    # 301 would have been in the checkout window before the first throw
    assert record.players[0].checkout_pct is None


def test_summarize_player_per_leg():
    """With legs given, each leg starts again from the starting score."""
    player = PlayerHistory(
        name="Ben",
        legs_won=1,
        legs=[
            [ThrowEvent(score_after=201, total=100), ThrowEvent(score_after=141, total=60)],
            [ThrowEvent(score_after=121, total=180), ThrowEvent(score_after=0, total=121)],
        ],
    )

    summary = summarize_player(player, 301)

    assert summary.total_darts == 12
    assert summary.average == 115.25
    assert summary.checkout_pct == 100.0
    assert summary.remaining == 0
