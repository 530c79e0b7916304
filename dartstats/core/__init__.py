"""
Core module - shared data types, errors, I/O helpers and configuration.
"""
from .types import (
    ThrowEvent,
    PlayerHistory,
    PlayerGameSummary,
    GameRecord,
    PlayerRanking,
    MonthGroup,
)
from .errors import (
    DartStatsError,
    MalformedInput,
    StorageError,
    AccessDenied,
    TransportFailure,
    SaveFailed,
)
from .io_utils import (
    atomic_write_yaml,
    load_yaml,
)
from .config_loader import Config, DEFAULT_CONFIG_PATH

__all__ = [
    # Types
    "ThrowEvent",
    "PlayerHistory",
    "PlayerGameSummary",
    "GameRecord",
    "PlayerRanking",
    "MonthGroup",
    # Errors
    "DartStatsError",
    "MalformedInput",
    "StorageError",
    "AccessDenied",
    "TransportFailure",
    "SaveFailed",
    # I/O
    "atomic_write_yaml",
    "load_yaml",
    # Config
    "Config",
    "DEFAULT_CONFIG_PATH",
]
