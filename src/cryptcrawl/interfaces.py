"""
Protocols for the collaborators the core talks to but does not implement:
field-of-view computation, the selection menu and the display window.
"""
from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .map import Grid


class FieldOfView(Protocol):
    """Per-tile "currently visible" predicate computed from the player's position."""

    def compute(self, grid: Grid, x: int, y: int, radius: int, light_walls: bool) -> None:
        """Recompute visibility from (x, y)."""

    def is_in_fov(self, x: int, y: int) -> bool:
        """Whether (x, y) was visible at the last compute()."""


class Menu(Protocol):
    """Selection UI used for inventory browsing."""

    def select(self, header: str, options: Sequence[str]) -> Optional[int]:
        """Return the zero-based index of the chosen option, or None."""


class Display(Protocol):
    """Window-level controls that do not touch simulation state."""

    def toggle_fullscreen(self) -> None:
        ...
