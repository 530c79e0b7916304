"""
Base class for game stores.

A store is append-only: a finished game is written once and never changed.
"""
from abc import ABC, abstractmethod
from typing import Callable, List, Optional
import time
import uuid
import logging

from dartstats.core import GameRecord

logger = logging.getLogger(__name__)


class GameStore(ABC):
    """
    Abstract game store.

    Subclasses implement the raw write and the per-user read; ordering and
    the fetch limit are shared here because the backing storage does not
    guarantee any order.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        """
        Args:
            clock: Source of the commit timestamp (default: time.time)
        """
        self.clock = clock or time.time

    def new_id(self) -> str:
        """Opaque identifier for a new record."""
        return uuid.uuid4().hex

    @abstractmethod
    def append(self, record: GameRecord) -> str:
        """
        Persist a new game and assign its id and timestamp.

        Returns:
            Identifier of the stored record

        Raises:
            AccessDenied: If the store refuses the write
            TransportFailure: On any other write failure
        """
        pass

    @abstractmethod
    def records(self, user_id: str) -> List[GameRecord]:
        """
        All records of a user, in no particular order.

        Raises:
            AccessDenied: If the store refuses the read
            TransportFailure: On any other read failure
        """
        pass

    def fetch_user_games(self, user_id: str, limit: int = 50) -> List[GameRecord]:
        """
        Up to ``limit`` games of a user, most recent first.
        Undated records are kept and sort as if saved at epoch 0.
        """
        games = self.records(user_id)
        games.sort(key=lambda g: g.sort_timestamp, reverse=True)
        logger.debug(f"Fetched {len(games)} games for {user_id} (limit {limit})")
        return games[:limit]
