"""
Core module - shared data types, utilities, and configuration.
"""
from .types import (
    BoardGeometry,
    BullTarget,
    Hit,
)
from .io_utils import load_yaml
from .config_loader import Config, DEFAULT_CONFIG_PATH

__all__ = [
    # Types
    "BoardGeometry",
    "BullTarget",
    "Hit",
    # I/O
    "load_yaml",
    # Config
    "Config",
    "DEFAULT_CONFIG_PATH",
]
