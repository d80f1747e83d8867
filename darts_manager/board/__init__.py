"""
Board module - dartboard geometry and hit resolution.
"""
from .geometry import DartboardMapper, is_integer, round_half_up

__all__ = [
    "DartboardMapper",
    "is_integer",
    "round_half_up",
]
