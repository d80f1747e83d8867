"""
Darts manager - hit resolution and player/turn bookkeeping for a darts match.
"""
__version__ = "0.1.0"
