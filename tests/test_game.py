"""
Tests for live X01 scoring.
"""
import pytest

from dartstats.core import Config
from dartstats.game import GameState, ModeX01, Player
from dartstats.service import StatsService
from dartstats.storage import MemoryGameStore


def _player_at(score, starting_score=301):
    player = Player(name="Anna", starting_score=starting_score)
    player.current_score = score
    return player


def test_valid_turn_reduces_score():
    """A normal turn is recorded and moves the score."""
    player = Player(name="Anna", starting_score=501)

    event = ModeX01().process_turn(player, 100)

    assert event.score_after == 401
    assert not event.was_bust
    assert player.current_score == 401
    assert player.history == [event]


def test_bust_rules_double_out():
    """Overshooting, leaving 1 or finishing without a double is a bust."""
    mode = ModeX01(starting_score=301, double_out=True)

    for total, on_double in ((50, True), (39, True), (40, False)):
        player = _player_at(40)
        event = mode.process_turn(player, total, finished_on_double=on_double)

        assert event.was_bust
        assert event.score_after == 40
        assert player.current_score == 40


def test_single_out_finish():
    """Without double-out any finish on 0 counts, and 1 is a valid score."""
    mode = ModeX01(starting_score=301, double_out=False)

    assert not mode.process_turn(_player_at(40), 40, finished_on_double=False).was_bust
    assert not mode.process_turn(_player_at(40), 39).was_bust


def test_turn_validation():
    """Turn totals and dart counts are range checked."""
    mode = ModeX01()

    with pytest.raises(ValueError):
        mode.process_turn(_player_at(501), 181)
    with pytest.raises(ValueError):
        mode.process_turn(_player_at(501), 60, darts=0)


def test_mode_labels():
    """Stored labels round-trip through the mode."""
    mode = ModeX01.from_labels("301", "single")

    assert mode.starting_score == 301
    assert mode.game_mode == "301"
    assert mode.finish_mode == "single"
    assert ModeX01.from_labels("501").get_name() == "501 (Double Out)"


def _new_game(legs=1):
    game = GameState(game_mode=ModeX01(starting_score=301), legs=legs)
    game.add_player("Anna")
    game.add_player("Ben")
    assert game.start_game()
    return game


def test_single_leg_game_record():
    """A finished game summarizes into a record with the right winner."""
    game = _new_game()

    assert game.record_turn(180) is None  # Anna 121
    assert game.record_turn(100) is None  # Ben 201
    assert game.record_turn(81) is None  # Anna 40
    assert game.record_turn(60) is None  # Ben 141
    assert game.record_turn(40, darts=2) == "WINNER!"

    assert game.game_finished
    assert game.get_current_player() is None

    record = game.to_record("u1")
    anna, ben = record.players

    assert record.winner == "Anna"
    assert record.game_mode == "301"
    assert anna.total_darts == 8
    assert anna.average == 112.88
    assert anna.checkout_pct == 50.0
    assert ben.average == 80.0
    assert ben.checkout_pct is None
    assert ben.remaining == 141


def test_bust_advances_player():
    """A bust ends the turn and keeps the score."""
    game = _new_game()
    game.players[0].current_score = 40

    assert game.record_turn(60) == "BUST!"
    assert game.players[0].current_score == 40
    assert game.current_player_idx == 1


def test_multi_leg_tie_broken_by_remaining():
    """Equal legs after the last leg: the lower remaining score wins."""
    game = _new_game(legs=2)

    game.record_turn(180)  # Anna 121
    game.record_turn(100)  # Ben 201
    game.record_turn(81)  # Anna 40
    game.record_turn(60)  # Ben 141
    assert game.record_turn(40, darts=2) == "LEG!"

    # Second leg: scores reset, Ben starts
    assert [p.current_score for p in game.players] == [301, 301]
    assert game.get_current_player().name == "Ben"

    game.record_turn(180)  # Ben 121
    game.record_turn(180)  # Anna 121
    assert game.record_turn(121) == "WINNER!"  # Ben checks out

    record = game.to_record("u1")

    assert [p.legs_won for p in record.players] == [1, 1]
    assert record.winner == "Ben"
    assert record.legs_played == 2

    # Each leg restarts from 301, so Ben's 141 from leg 1 is no checkout chance
    anna, ben = record.players
    assert ben.checkout_pct == 100.0
    assert anna.checkout_pct == 50.0
    assert [len(leg) for leg in game.players[1].legs] == [2, 2]


def test_undo_last_turn():
    """Undo restores the score and gives the turn back."""
    game = _new_game()

    game.record_turn(60)
    assert game.undo_last_turn()

    assert game.players[0].current_score == 301
    assert game.players[0].history == []
    assert game.current_player_idx == 0
    assert not game.undo_last_turn()


def test_undo_bust():
    """Undoing a bust keeps the score from before the bust."""
    player = _player_at(40)
    ModeX01().process_turn(player, 60)

    player.undo_last_turn()

    assert player.current_score == 40
    assert player.history == []


def test_start_without_players():
    """A game cannot start without players."""
    assert not GameState().start_game()


def test_record_requires_finished_game():
    """Only finished games can be summarized."""
    game = _new_game()

    with pytest.raises(RuntimeError):
        game.to_record("u1")


def test_from_config():
    """Game settings come from the game config section."""
    config = Config()
    config.data["game"].update({"game_mode": "301", "finish_mode": "single", "legs": 3})

    game = GameState.from_config(config)

    assert game.game_mode.starting_score == 301
    assert not game.game_mode.double_out
    assert game.legs == 3


def test_save_finished_game():
    """A finished game is saved through the stats service."""
    service = StatsService(MemoryGameStore(clock=lambda: 1700000000.0))
    game = _new_game()
    for total, darts in ((180, 3), (100, 3), (81, 3), (60, 3), (40, 2)):
        game.record_turn(total, darts=darts)

    record_id = game.save(service, "u1")

    (saved,) = service.load_games("u1")
    assert saved.id == record_id
    assert saved.winner == "Anna"
    assert saved.timestamp == 1700000000.0


def test_player_legs_split_history():
    """Starting a leg marks where its turns begin."""
    player = Player(name="Anna", starting_score=301)
    mode = ModeX01(starting_score=301)
    mode.process_turn(player, 100)
    mode.process_turn(player, 60)
    player.start_leg()
    mode.process_turn(player, 140)

    assert [[e.score_after for e in leg] for leg in player.legs] == [[201, 141], [161]]
    assert player.to_history().legs == player.legs

    player.reset()
    assert player.legs == [[]]


def test_reset_game_allows_rematch():
    """Resetting a finished game clears scores and lets it start again."""
    game = _new_game()
    for total, darts in ((180, 3), (100, 3), (81, 3), (60, 3), (40, 2)):
        game.record_turn(total, darts=darts)
    assert game.game_finished

    game.reset_game()

    assert not game.game_started
    assert not game.game_finished
    assert game.legs_played == 0
    assert [p.current_score for p in game.players] == [301, 301]
    assert [p.legs_won for p in game.players] == [0, 0]
    assert all(p.history == [] for p in game.players)
    assert game.start_game()
    assert game.get_current_player().name == "Anna"
