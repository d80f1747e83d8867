"""
Dartboard geometry calculations and sector mapping.
"""
import numbers
import numpy as np
from typing import List, Optional, Tuple, Union
import logging

from darts_manager.core import BoardGeometry, BullTarget, Hit

logger = logging.getLogger(__name__)

ManualSector = Union[int, str, BullTarget]

# Short manual selection aliases accepted alongside the enum values
_BULL_ALIASES = {
    "BULL": BullTarget.BULL,
    "OUTER_BULL": BullTarget.OUTER_BULL,
    "OB": BullTarget.OUTER_BULL,
}


def is_integer(value) -> bool:
    """True for int and numpy integers, False for bool and floats."""
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def round_half_up(value: float) -> int:
    """Round to nearest integer, exact halves away from zero."""
    if value >= 0:
        return int(np.floor(value + 0.5))
    return -int(np.floor(-value + 0.5))


class DartboardMapper:
    """
    Maps surface coordinates and manual selections to scored hits.

    All boundary comparisons happen in normalized board space (radius 50),
    so a pointer on any display size resolves against the same ring radii.
    """

    def __init__(self, board_geometry: Optional[BoardGeometry] = None):
        """
        Initialize dartboard mapper.

        Args:
            board_geometry: Board layout (default: BoardGeometry())
        """
        self.geometry = board_geometry or BoardGeometry()
        self.sector_sequence = self.geometry.sector_sequence

    def to_polar(self, dx: float, dy: float) -> Tuple[float, float, float]:
        """
        Convert a normalized offset from center to polar coordinates.

        Args:
            dx: Horizontal offset, positive to the right
            dy: Vertical offset, positive downward (screen convention)

        Returns:
            (distance, atan_deg, angle_from_top) where:
                - atan_deg: Raw atan2 angle in degrees, -180 to 180
                - angle_from_top: 0° = top, clockwise, range [0, 360)
        """
        distance = float(np.hypot(dx, dy))

        # Screen y grows downward, so atan2 already increases clockwise;
        # rotating by 90° moves 0° from +x to the top of the board
        atan_deg = float(np.degrees(np.arctan2(dy, dx)))
        angle_from_top = (atan_deg + 90 + 360) % 360

        return distance, atan_deg, angle_from_top

    def angle_to_sector_index(self, angle_from_top: float) -> int:
        """
        Pick the sector whose center is nearest to the angle.

        Sector centers sit at multiples of the sector angle; an angle exactly
        halfway between two centers goes to the clockwise neighbor.
        """
        sector_float = angle_from_top / self.geometry.sector_angle
        return round_half_up(sector_float) % self.geometry.num_sectors

    def angle_to_sector(self, angle_from_top: float) -> int:
        """Convert angle from top to sector number (1-20)."""
        return self.sector_sequence[self.angle_to_sector_index(angle_from_top)]

    def distance_to_multiplier(self, distance: float) -> int:
        """
        Ring multiplier for a normalized distance outside the bulls.

        Ring bounds are inclusive on both ends.
        """
        geometry = self.geometry
        if geometry.triple_inner_radius <= distance <= geometry.triple_outer_radius:
            return 3
        if geometry.double_inner_radius <= distance <= geometry.double_outer_radius:
            return 2
        return 1

    def board_position(
            self,
            distance: float,
            angle_from_top: float
    ) -> Tuple[float, float]:
        """
        Reconstruct a hit position in 0..100 board space for display.

        Args:
            distance: Normalized distance from center
            angle_from_top: Degrees from top, clockwise

        Returns:
            (x, y) with y increasing downward
        """
        theta = np.radians(90 - angle_from_top)
        x = self.geometry.board_radius + distance * np.cos(theta)
        y = self.geometry.board_radius - distance * np.sin(theta)
        return float(x), float(y)

    def resolve_pointer(
            self,
            dx: float,
            dy: float,
            surface_radius: float
    ) -> Hit:
        """
        Resolve a pointer offset from the board center into a hit.

        Coordinates beyond the outer rim are still scored: the sector comes
        from the angle alone and the ring defaults to single.

        Args:
            dx: Horizontal offset from center in surface units
            dy: Vertical offset from center in surface units (down positive)
            surface_radius: Radius of the board on the surface

        Returns:
            Hit with score and diagnostics
        """
        scale = self.geometry.scale_from(surface_radius)
        distance, atan_deg, angle_from_top = self.to_polar(dx * scale, dy * scale)

        if distance <= self.geometry.inner_bull_radius:
            hit = self._bull_hit(BullTarget.BULL, distance, atan_deg, angle_from_top)
        elif distance <= self.geometry.outer_bull_radius:
            hit = self._bull_hit(BullTarget.OUTER_BULL, distance, atan_deg, angle_from_top)
        else:
            sector_index = self.angle_to_sector_index(angle_from_top)
            sector_number = self.sector_sequence[sector_index]
            multiplier = self.distance_to_multiplier(distance)
            board_x, board_y = self.board_position(distance, angle_from_top)

            hit = Hit(
                sector_number=sector_number,
                multiplier=multiplier,
                raw_score=sector_number * multiplier,
                description=f"{multiplier}×{sector_number}",
                distance=distance,
                atan_deg=atan_deg,
                angle_from_top=angle_from_top,
                sector_index=sector_index,
                board_x=board_x,
                board_y=board_y,
                on_board=distance <= self.geometry.outer_rim_radius,
            )

        logger.debug(
            f"Pointer: ({dx:.1f}, {dy:.1f}) → d={distance:.2f}, "
            f"θ={angle_from_top:.2f}° → {hit.description} = {hit.raw_score}"
        )

        if not hit.on_board:
            logger.debug(f"Hit beyond outer rim scored as {hit.description}")

        return hit

    def resolve_manual(self, sector: ManualSector, multiplier: int = 1) -> Hit:
        """
        Build a hit from an explicit sector and multiplier selection.

        Args:
            sector: Sector number (1-20), BullTarget, or "BULL"/"OUTER_BULL"/"OB"
            multiplier: 1, 2 or 3 (ignored for bulls)

        Returns:
            Hit with the same diagnostic fields as a pointer hit

        Raises:
            ValueError: If the sector or multiplier is not on the board
        """
        bull = self._parse_bull(sector)
        if bull is not None:
            distance = (self.geometry.inner_bull_radius if bull is BullTarget.BULL
                        else self.geometry.outer_bull_radius)
            return self._bull_hit(bull, distance, -90.0, 0.0)

        if not is_integer(sector):
            raise ValueError(f"Unknown sector: {sector!r}")
        if sector not in self.sector_sequence:
            raise ValueError(f"Sector must be 1-20, got {sector}")
        if not is_integer(multiplier) or multiplier not in (1, 2, 3):
            raise ValueError(f"Multiplier must be 1, 2 or 3, got {multiplier!r}")

        sector_number = int(sector)
        multiplier = int(multiplier)
        sector_index = self.sector_sequence.index(sector_number)

        # Placeholder position: the sector's center line at the triple ring
        distance = self.geometry.triple_outer_radius
        angle_from_top = sector_index * self.geometry.sector_angle
        atan_deg = (angle_from_top - 90 + 180) % 360 - 180
        board_x, board_y = self.board_position(distance, angle_from_top)

        return Hit(
            sector_number=sector_number,
            multiplier=multiplier,
            raw_score=sector_number * multiplier,
            description=f"{multiplier}×{sector_number}",
            distance=distance,
            atan_deg=atan_deg,
            angle_from_top=angle_from_top,
            sector_index=sector_index,
            board_x=board_x,
            board_y=board_y,
        )

    def is_on_board(self, dx: float, dy: float, surface_radius: float) -> bool:
        """
        Check if a pointer offset lies within the outer rim.

        Args:
            dx: Horizontal offset from center in surface units
            dy: Vertical offset from center in surface units
            surface_radius: Radius of the board on the surface

        Returns:
            True if within the scoring area, False otherwise
        """
        scale = self.geometry.scale_from(surface_radius)
        return float(np.hypot(dx * scale, dy * scale)) <= self.geometry.outer_rim_radius

    def ring_boundaries(self, surface_radius: Optional[float] = None) -> dict:
        """
        Get all ring boundaries, in surface units if a radius is given.

        Returns:
            Dictionary with ring names and radii
        """
        factor = 1.0
        if surface_radius is not None:
            factor = 1.0 / self.geometry.scale_from(surface_radius)

        geometry = self.geometry
        return {
            "inner_bull": geometry.inner_bull_radius * factor,
            "outer_bull": geometry.outer_bull_radius * factor,
            "triple_inner": geometry.triple_inner_radius * factor,
            "triple_outer": geometry.triple_outer_radius * factor,
            "double_inner": geometry.double_inner_radius * factor,
            "double_outer": geometry.double_outer_radius * factor,
            "outer_rim": geometry.outer_rim_radius * factor,
        }

    def sector_boundaries(self) -> List[Tuple[int, float, float]]:
        """
        Get sector boundary angles.

        Returns:
            List of (sector_number, start_angle, end_angle) tuples
        """
        boundaries = []
        half_sector = self.geometry.sector_angle / 2

        for i, sector_num in enumerate(self.sector_sequence):
            center_angle = i * self.geometry.sector_angle
            start_angle = (center_angle - half_sector) % 360
            end_angle = (center_angle + half_sector) % 360
            boundaries.append((sector_num, start_angle, end_angle))

        return boundaries

    def _bull_hit(
            self,
            bull: BullTarget,
            distance: float,
            atan_deg: float,
            angle_from_top: float
    ) -> Hit:
        board_x, board_y = self.board_position(distance, angle_from_top)
        return Hit(
            sector_number=None,
            multiplier=1,
            raw_score=bull.score,
            description=bull.label,
            distance=distance,
            atan_deg=atan_deg,
            angle_from_top=angle_from_top,
            sector_index=self.angle_to_sector_index(angle_from_top),
            board_x=board_x,
            board_y=board_y,
        )

    @staticmethod
    def _parse_bull(sector: ManualSector) -> Optional[BullTarget]:
        if isinstance(sector, BullTarget):
            return sector
        if isinstance(sector, str):
            bull = _BULL_ALIASES.get(sector.strip().upper())
            if bull is None:
                raise ValueError(f"Unknown sector: {sector!r}")
            return bull
        return None
