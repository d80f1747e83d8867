"""
Match session: the command and query surface used by a board UI.

Combines a DartboardMapper and a GameState so pointer and manual hits
are resolved, recorded against the active player and kept for display.
"""
from typing import List, Optional
import logging

from darts_manager.core import Config, Hit
from darts_manager.board import DartboardMapper
from darts_manager.board.geometry import ManualSector
from .game_state import GameState
from .player import Player

logger = logging.getLogger(__name__)


class GameSession:
    """One match from session start to session end."""

    def __init__(
            self,
            state: Optional[GameState] = None,
            mapper: Optional[DartboardMapper] = None
    ):
        self.state = state or GameState()
        self.mapper = mapper or DartboardMapper()
        self.last_hit: Optional[Hit] = None

    @classmethod
    def from_config(cls, config: Config) -> "GameSession":
        """Create a session with settings from a Config."""
        state = GameState(
            starting_score=config.starting_score,
            default_player_name=config.default_player_name,
        )
        return cls(state=state)

    # Queries

    @property
    def players(self) -> List[Player]:
        return self.state.players

    @property
    def active_player_index(self) -> int:
        return self.state.active_player_index

    @property
    def running(self) -> bool:
        return self.state.running

    # Commands

    def add_player(self, name: str = "") -> Player:
        return self.state.add_player(name)

    def remove_player(self, player_id: int) -> bool:
        return self.state.remove_player(player_id)

    def reset_game(self) -> None:
        self.state.reset_game()
        self.last_hit = None

    def set_starting_score(self, starting_score: int) -> bool:
        return self.state.set_starting_score(starting_score)

    def toggle_running(self) -> bool:
        return self.state.toggle_running()

    def next_turn(self) -> None:
        self.state.next_turn()

    def undo_last(self, player_index: int) -> bool:
        return self.state.undo_last(player_index)

    def select_active_player(self, player_index: int) -> bool:
        return self.state.select_active_player(player_index)

    def resolve_pointer_hit(
            self,
            dx: float,
            dy: float,
            surface_radius: float
    ) -> Optional[Hit]:
        """
        Score a pointer hit for the active player.

        Args:
            dx: Horizontal offset from board center in surface units
            dy: Vertical offset from board center (down positive)
            surface_radius: Radius of the drawn board in surface units

        Returns:
            The recorded hit, or None if there are no players or the
            surface has no positive radius yet
        """
        if not self.state.players:
            return None

        try:
            hit = self.mapper.resolve_pointer(dx, dy, surface_radius)
        except ValueError as e:
            logger.warning(f"Pointer hit discarded: {e}")
            return None

        return self._record(hit)

    def resolve_manual_hit(
            self,
            sector: ManualSector,
            multiplier: int = 1
    ) -> Optional[Hit]:
        """
        Score a manually selected hit for the active player.

        Returns:
            The recorded hit, or None if there are no players or the
            selection is not on the board
        """
        if not self.state.players:
            return None

        try:
            hit = self.mapper.resolve_manual(sector, multiplier)
        except ValueError as e:
            logger.warning(f"Manual hit discarded: {e}")
            return None

        return self._record(hit)

    def _record(self, hit: Hit) -> Hit:
        self.state.record_hit(self.state.active_player_index, hit)
        self.last_hit = hit
        return hit
