"""Named RGB colors used for glyphs and log messages."""
from typing import Tuple

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
ORANGE: Color = (255, 127, 0)
GREEN: Color = (0, 255, 0)
LIGHT_GREEN: Color = (63, 255, 63)
LIGHT_BLUE: Color = (63, 159, 255)
LIGHT_VIOLET: Color = (159, 63, 255)
VIOLET: Color = (127, 0, 255)
LIGHT_YELLOW: Color = (255, 255, 63)
DARK_RED: Color = (191, 0, 0)
DESATURATED_GREEN: Color = (63, 127, 63)
DARKER_GREEN: Color = (0, 127, 0)

# Tile colors for presentation layers
DARK_WALL: Color = (0, 0, 100)
LIGHT_WALL: Color = (130, 110, 50)
DARK_GROUND: Color = (50, 50, 150)
LIGHT_GROUND: Color = (200, 180, 50)
