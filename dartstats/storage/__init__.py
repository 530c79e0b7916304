"""
Storage module - append-only game stores.
"""
from .base import GameStore
from .memory import MemoryGameStore
from .yaml_store import YamlGameStore

__all__ = [
    "GameStore",
    "MemoryGameStore",
    "YamlGameStore",
]
