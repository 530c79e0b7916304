"""
Game state management for a live X01 match over one or more legs.
"""
from typing import List, Optional
from dataclasses import dataclass, field
import logging

from dartstats.core import Config, GameRecord
from dartstats.stats import GameSummaryBuilder
from .player import Player
from .game_modes import ModeX01

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """Manages overall game state."""
    players: List[Player] = field(default_factory=list)
    game_mode: ModeX01 = field(default_factory=ModeX01)
    legs: int = 1  # Legs to play

    current_player_idx: int = 0
    legs_played: int = 0
    game_started: bool = False
    game_finished: bool = False

    # Player indices of the turns thrown in the current leg (for undo)
    _leg_turns: List[int] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        if self.legs < 1:
            raise ValueError("A game needs at least one leg")

    @classmethod
    def from_config(cls, config: Config) -> "GameState":
        """Create an empty game from the ``game`` config section."""
        game_mode = ModeX01.from_labels(
            config.get("game", "game_mode", "501"),
            config.get("game", "finish_mode", "double"),
        )
        return cls(game_mode=game_mode, legs=int(config.get("game", "legs", 1)))

    def add_player(self, name: str) -> Player:
        """
        Add a player to the game.

        Args:
            name: Player name

        Returns:
            The created player
        """
        if self.game_started:
            raise RuntimeError("Cannot add players to a running game")

        player = Player(name=name, starting_score=self.game_mode.starting_score)
        self.players.append(player)
        logger.info(f"Player added: {name}")
        return player

    def start_game(self) -> bool:
        """
        Start the game.

        Returns:
            True if started successfully, False otherwise
        """
        if len(self.players) == 0:
            logger.error("Cannot start game: No players")
            return False

        for player in self.players:
            player.reset()

        self.game_started = True
        self.game_finished = False
        self.current_player_idx = 0
        self.legs_played = 0
        self._leg_turns.clear()

        logger.info(
            f"Game started: {self.game_mode.get_name()}, {self.legs} leg(s), "
            f"{len(self.players)} players"
        )
        return True

    def get_current_player(self) -> Optional[Player]:
        """Get the current player."""
        if not self.players or not self.game_started or self.game_finished:
            return None
        return self.players[self.current_player_idx]

    def record_turn(
            self,
            total: int,
            darts: int = 3,
            finished_on_double: bool = True
    ) -> Optional[str]:
        """
        Record the current player's turn and advance.

        Returns:
            Optional message ("BUST!", "LEG!" or "WINNER!")
        """
        player = self.get_current_player()
        if not player:
            logger.warning("No active game to record a turn for")
            return None

        event = self.game_mode.process_turn(player, total, darts, finished_on_double)
        self._leg_turns.append(self.current_player_idx)

        if event.was_bust:
            logger.info(f"{player.name} busted with {total}")
            self.next_player()
            return "BUST!"

        if self.game_mode.check_winner(player):
            return self._finish_leg(player)

        self.next_player()
        return None

    def _finish_leg(self, player: Player) -> str:
        player.legs_won += 1
        self.legs_played += 1
        self._leg_turns.clear()
        logger.info(f"{player.name} won leg {self.legs_played}/{self.legs}")

        if self.legs_played >= self.legs:
            # Final scores stay as they are; they break ties on legs won
            self.game_finished = True
            logger.info(f"Game finished after {self.legs_played} leg(s)")
            return "WINNER!"

        for p in self.players:
            p.start_leg()
        # Starting player rotates each leg
        self.current_player_idx = self.legs_played % len(self.players)
        return "LEG!"

    def next_player(self) -> None:
        """Advance to next player."""
        if not self.players:
            return

        self.current_player_idx = (self.current_player_idx + 1) % len(self.players)
        logger.debug(f"Next player: {self.players[self.current_player_idx].name}")

    def undo_last_turn(self) -> bool:
        """
        Undo the last turn of the current leg.

        Returns:
            True if successful, False otherwise
        """
        if not self.game_started or self.game_finished or not self._leg_turns:
            return False

        player_idx = self._leg_turns.pop()
        player = self.players[player_idx]
        event = player.undo_last_turn()
        if event is None:
            return False

        self.current_player_idx = player_idx
        logger.info(f"Undone: {player.name} {event.total} points")
        return True

    def to_record(self, user_id: str) -> GameRecord:
        """
        Summarize the finished game.

        Raises:
            RuntimeError: If the game is not finished yet
        """
        if not self.game_finished:
            raise RuntimeError("Game is not finished")

        return GameSummaryBuilder().build(
            user_id,
            [p.to_history() for p in self.players],
            self.game_mode.game_mode,
            self.game_mode.finish_mode,
            self.legs,
        )

    def save(self, service, user_id: str) -> str:
        """
        Save the finished game through a StatsService.

        Returns:
            Identifier of the stored record
        """
        if not self.game_finished:
            raise RuntimeError("Game is not finished")

        return service.save_game(
            user_id,
            [p.to_history() for p in self.players],
            self.game_mode.game_mode,
            self.game_mode.finish_mode,
            self.legs,
        )

    def reset_game(self) -> None:
        """Reset game to initial state."""
        for player in self.players:
            player.reset()

        self.current_player_idx = 0
        self.legs_played = 0
        self.game_started = False
        self.game_finished = False
        self._leg_turns.clear()

        logger.info("Game reset")
