"""
Grid and tile model: a fixed-size 2-D array of tile states plus the
rectangle type used while carving rooms.
"""
from .grid import Grid
from .rect import Rect
from .tiles import Tile

__all__ = ["Grid", "Rect", "Tile"]
