"""
Dungeon generation: rooms carved into a solid grid, joined by L-shaped
corridors, each populated with monsters and items as it is accepted.
"""
from .generator import GenerationResult, make_map
from .population import place_objects

__all__ = ["GenerationResult", "make_map", "place_objects"]
