"""
Game module - live X01 scoring that produces throw histories.
"""
from .player import Player
from .game_modes import ModeX01
from .game_state import GameState

__all__ = [
    "Player",
    "ModeX01",
    "GameState",
]
