"""
Game store backed by a directory of YAML files, one file per game.

Files are written with atomic_write_yaml, so a failed save leaves no
partial record behind.
"""
from pathlib import Path
from typing import List
import logging

import yaml

from dartstats.core import (
    GameRecord,
    AccessDenied,
    TransportFailure,
    atomic_write_yaml,
    load_yaml,
)
from .base import GameStore

logger = logging.getLogger(__name__)


class YamlGameStore(GameStore):
    """
    Directory store: ``<games_dir>/<id>.yaml``.
    """

    def __init__(self, games_dir: Path, clock=None):
        """
        Args:
            games_dir: Directory holding the game files (created on first write)
            clock: Source of the commit timestamp (default: time.time)
        """
        super().__init__(clock)
        self.games_dir = Path(games_dir)

    def path_for(self, record_id: str) -> Path:
        return self.games_dir / f"{record_id}.yaml"

    def append(self, record: GameRecord) -> str:
        record_id = self.new_id()
        payload = record.to_dict()
        payload["timestamp"] = self.clock()

        try:
            atomic_write_yaml(self.path_for(record_id), payload)
        except PermissionError as e:
            raise AccessDenied(f"Not allowed to write to {self.games_dir}") from e
        except (OSError, yaml.YAMLError) as e:
            raise TransportFailure(f"Could not write game {record_id}: {e}") from e

        logger.info(f"Saved game {record_id} for {record.user_id}")
        return record_id

    def records(self, user_id: str) -> List[GameRecord]:
        try:
            if not self.games_dir.exists():
                logger.info(f"Game directory {self.games_dir} does not exist yet")
                return []
            paths = sorted(self.games_dir.glob("*.yaml"))
        except PermissionError as e:
            raise AccessDenied(f"Not allowed to read {self.games_dir}") from e
        except OSError as e:
            raise TransportFailure(f"Could not list {self.games_dir}: {e}") from e

        games = []
        for path in paths:
            try:
                data = load_yaml(path)
            except PermissionError as e:
                raise AccessDenied(f"Not allowed to read {path}") from e
            except OSError as e:
                raise TransportFailure(f"Could not read {path}: {e}") from e
            except (yaml.YAMLError, UnicodeDecodeError) as e:
                logger.warning(f"Skipping unreadable game file {path.name}: {e}")
                continue

            if not isinstance(data, dict) or data.get("userId") != user_id:
                continue

            try:
                games.append(GameRecord.from_dict(data, record_id=path.stem))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed game record {path.name}: {e}")

        return games
