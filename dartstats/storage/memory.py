"""
In-process game store.
"""
from dataclasses import replace
from typing import Dict, List

from dartstats.core import GameRecord
from .base import GameStore


class MemoryGameStore(GameStore):
    """Keeps committed records in a dict keyed by id."""

    def __init__(self, clock=None):
        super().__init__(clock)
        self._records: Dict[str, GameRecord] = {}

    def append(self, record: GameRecord) -> str:
        record_id = self.new_id()
        self._records[record_id] = replace(record, id=record_id, timestamp=self.clock())
        return record_id

    def add_committed(self, record: GameRecord) -> None:
        """Insert a record as-is (imported or legacy data, possibly undated)."""
        record_id = record.id or self.new_id()
        self._records[record_id] = replace(record, id=record_id)

    def records(self, user_id: str) -> List[GameRecord]:
        return [r for r in self._records.values() if r.user_id == user_id]

    def __len__(self) -> int:
        return len(self._records)
