"""
Core data types for the darts manager.
Defines contracts between board geometry and game state modules.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class BoardGeometry:
    """
    Dartboard layout in normalized board space.

    All radii are expressed in a board of radius 50 units; any display
    size maps to this space through a single ratio (display_radius / 50).
    """
    board_radius: float = 50.0  # Normalized board radius

    # Radii (from center)
    outer_rim_radius: float = 48.0  # Edge of the scoring area
    double_outer_radius: float = 44.0
    double_inner_radius: float = 38.0
    triple_outer_radius: float = 28.0
    triple_inner_radius: float = 23.0
    outer_bull_radius: float = 10.0  # Outer bull (25 points)
    inner_bull_radius: float = 5.0  # Inner bull (50 points)

    # Sector configuration (clockwise from top)
    num_sectors: int = 20
    sector_angle: float = 18.0  # Degrees per sector
    sector_sequence: Tuple[int, ...] = (20, 1, 18, 4, 13, 6, 10, 15, 2, 17,
                                        3, 19, 7, 16, 8, 11, 14, 9, 12, 5)

    def scale_from(self, surface_radius: float) -> float:
        """
        Factor converting surface units into normalized board units.

        Args:
            surface_radius: Radius of the consuming surface in its own units

        Returns:
            Multiplier so that normalized = real * factor
        """
        if surface_radius <= 0:
            raise ValueError("surface_radius must be positive")
        return self.board_radius / surface_radius


class BullTarget(Enum):
    """Manual selections that are not numbered sectors."""
    BULL = "BULL"  # Inner bull, 50 points
    OUTER_BULL = "OUTER_BULL"  # Outer bull, 25 points

    @property
    def score(self) -> int:
        return 50 if self is BullTarget.BULL else 25

    @property
    def label(self) -> str:
        if self is BullTarget.BULL:
            return "Bull (50)"
        return "Outer bull (25)"


@dataclass(frozen=True)
class Hit:
    """
    Represents one resolved throw with its scoring and diagnostics.

    Produced either from a pointer coordinate or from a manual selection;
    both feed the same record operation on the game state.
    """
    # Scoring
    sector_number: Optional[int]  # Number hit (1-20), None for bulls
    multiplier: int  # 1=Single, 2=Double, 3=Triple (bulls always 1)
    raw_score: int  # Points subtracted from the player's score
    description: str  # Human-readable label, e.g. "3×20"

    # Diagnostics (normalized board space, display only)
    distance: float = 0.0  # Distance from center
    atan_deg: float = 0.0  # Raw atan2 angle, -180..180
    angle_from_top: float = 0.0  # Degrees from top, clockwise, 0..360
    sector_index: int = 0  # Index into the sector sequence
    board_x: float = 50.0  # Reconstructed x in 0..100 board space
    board_y: float = 50.0  # Reconstructed y in 0..100 board space
    on_board: bool = True  # False when beyond the outer rim

    @property
    def is_bull(self) -> bool:
        return self.sector_number is None
