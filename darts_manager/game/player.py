"""
Player data structure and throw history.
"""
from dataclasses import dataclass, field
from typing import List, Optional
from darts_manager.core import Hit


@dataclass(frozen=True)
class ScoreEvent:
    """One recorded throw's effect on a player's score."""
    description: str
    delta: int  # Signed change applied to the score


@dataclass
class Player:
    """Represents a player in the match."""
    id: int
    name: str
    starting_score: int = 501

    # Current state
    score: int = field(init=False)

    # Most recent first
    history: List[ScoreEvent] = field(default_factory=list)

    def __post_init__(self):
        """Initialize current score."""
        self.score = self.starting_score

    def record_hit(self, hit: Hit) -> ScoreEvent:
        """
        Subtract a hit from the score and push it onto the history.

        Args:
            hit: Resolved hit

        Returns:
            The recorded event
        """
        event = ScoreEvent(description=hit.description, delta=-hit.raw_score)
        self.score += event.delta
        self.history.insert(0, event)
        return event

    def undo_last(self) -> Optional[ScoreEvent]:
        """
        Undo the most recent event.

        Returns:
            The removed event, or None if history is empty
        """
        if not self.history:
            return None

        event = self.history.pop(0)
        self.score -= event.delta
        return event

    def reset(self, starting_score: Optional[int] = None) -> None:
        """Reset player to starting state."""
        if starting_score is not None:
            self.starting_score = starting_score
        self.score = self.starting_score
        self.history.clear()

    @property
    def last_event(self) -> Optional[ScoreEvent]:
        return self.history[0] if self.history else None

    @property
    def darts_thrown(self) -> int:
        return len(self.history)

    @property
    def points_scored(self) -> int:
        """Total points subtracted so far."""
        return -sum(event.delta for event in self.history)
