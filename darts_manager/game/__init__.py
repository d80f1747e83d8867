"""
Game module - players, turn rotation, and the match session.
"""
from .player import Player, ScoreEvent
from .game_state import GameState
from .session import GameSession

__all__ = [
    "Player",
    "ScoreEvent",
    "GameState",
    "GameSession",
]
