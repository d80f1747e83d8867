"""
Game state management: players, scores and turn rotation.
"""
from typing import List, Optional
from dataclasses import dataclass, field
import logging

from darts_manager.core import Hit
from darts_manager.board import is_integer
from .player import Player, ScoreEvent

logger = logging.getLogger(__name__)

DEFAULT_STARTING_SCORE = 501


@dataclass
class GameState:
    """
    Owns the players of one match and the active-turn pointer.

    Out-of-range indices, unknown ids and empty histories are absorbed:
    the call leaves state untouched and reports False/None.
    """
    starting_score: int = DEFAULT_STARTING_SCORE
    players: List[Player] = field(default_factory=list)
    active_player_index: int = 0
    running: bool = False  # Presentational only, never gates scoring
    next_id: int = 1
    default_player_name: str = "Player {id}"

    def __post_init__(self):
        if not is_integer(self.starting_score) or self.starting_score <= 0:
            logger.warning(
                f"Invalid starting score {self.starting_score!r}, "
                f"using {DEFAULT_STARTING_SCORE}"
            )
            self.starting_score = DEFAULT_STARTING_SCORE
        self.starting_score = int(self.starting_score)

    def add_player(self, name: str = "") -> Player:
        """
        Add a player to the game.

        Args:
            name: Player name (blank = default name with the player's id)

        Returns:
            The created player
        """
        player_id = self.next_id
        self.next_id += 1

        name = name.strip() if name else ""
        player = Player(
            id=player_id,
            name=name or self.default_player_name.format(id=player_id),
            starting_score=self.starting_score,
        )
        self.players.append(player)
        logger.info(f"Player added: {player.name} (id={player_id})")
        return player

    def remove_player(self, player_id: int) -> bool:
        """
        Remove a player from the game.

        The turn always passes back to the first player.

        Args:
            player_id: Id of the player to remove

        Returns:
            True if removed, False if not found
        """
        for i, player in enumerate(self.players):
            if player.id == player_id:
                del self.players[i]
                self.active_player_index = 0
                logger.info(f"Player removed: {player.name}")
                return True

        logger.debug(f"No player with id {player_id}")
        return False

    def get_player(self, player_index: int) -> Optional[Player]:
        """Get player by position, None if out of range."""
        if 0 <= player_index < len(self.players):
            return self.players[player_index]
        return None

    @property
    def active_player(self) -> Optional[Player]:
        """Get the player whose throws are being recorded."""
        return self.get_player(self.active_player_index)

    def record_hit(self, player_index: int, hit: Hit) -> Optional[ScoreEvent]:
        """
        Record a hit for one player.

        Args:
            player_index: Position of the player in turn order
            hit: Resolved hit

        Returns:
            The recorded event, or None if the index is out of range
        """
        player = self.get_player(player_index)
        if not player:
            logger.debug(f"Hit discarded: no player at index {player_index}")
            return None

        event = player.record_hit(hit)
        logger.debug(f"{player.name} hit: {hit.description} → {player.score}")
        return event

    def undo_last(self, player_index: int) -> bool:
        """
        Undo a player's most recent throw.

        Returns:
            True if successful, False otherwise
        """
        player = self.get_player(player_index)
        if not player:
            return False

        event = player.undo_last()
        if event:
            logger.info(f"Undone for {player.name}: {event.description}")
            return True

        return False

    def next_turn(self) -> None:
        """Advance to next player."""
        if not self.players:
            self.active_player_index = 0
            return

        self.active_player_index = (self.active_player_index + 1) % len(self.players)
        logger.debug(f"Next player: {self.active_player.name}")

    def select_active_player(self, player_index: int) -> bool:
        """
        Hand the turn to a specific player.

        Returns:
            True if selected, False if the index is out of range
        """
        if not self.get_player(player_index):
            return False

        self.active_player_index = player_index
        return True

    def toggle_running(self) -> bool:
        """
        Switch between idle and active.

        Returns:
            The new running flag
        """
        self.running = not self.running
        logger.info("Game started" if self.running else "Game paused")
        return self.running

    def set_starting_score(self, starting_score: int) -> bool:
        """
        Change the score used for new players and resets.

        Existing players keep their current scores.

        Returns:
            True if accepted, False if not a positive integer
        """
        if not is_integer(starting_score) or starting_score <= 0:
            logger.warning(f"Ignoring invalid starting score: {starting_score!r}")
            return False

        self.starting_score = int(starting_score)
        logger.info(f"Starting score set to {starting_score}")
        return True

    def reset_game(self) -> None:
        """Reset every player to the starting score with empty history."""
        for player in self.players:
            player.reset(self.starting_score)

        self.active_player_index = 0
        self.running = False

        logger.info("Game reset")
