"""
Shared type definitions for the walkgrid system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Side(Enum):
    """Cardinal side of a cell. Also used as a one-sided border tag."""

    TOP = "top"  # Up (decreasing y)
    RIGHT = "right"  # Right (increasing x)
    BOTTOM = "bottom"  # Down (increasing y)
    LEFT = "left"  # Left (decreasing x)

    @property
    def opposite(self) -> Side:
        return _OPPOSITES[self]

    @property
    def offset(self) -> tuple[int, int]:
        """(dx, dy) of the cell across this side."""
        return _OFFSETS[self]


_OPPOSITES = {
    Side.TOP: Side.BOTTOM,
    Side.RIGHT: Side.LEFT,
    Side.BOTTOM: Side.TOP,
    Side.LEFT: Side.RIGHT,
}

_OFFSETS = {
    Side.TOP: (0, -1),
    Side.RIGHT: (1, 0),
    Side.BOTTOM: (0, 1),
    Side.LEFT: (-1, 0),
}


# True = open, False = blocked, Side = open except when entered across that side
Walkable = bool | Side


def coerce_walkable(value: Any) -> Walkable:
    """
    Normalize a raw walkable value.

    Accepts a bool, a Side, or one of the tag strings "top", "right",
    "bottom", "left". Anything else is interpreted by truthiness.

    Raises:
        ValueError: If value is a string that is not a known tag
    """
    if isinstance(value, Side):
        return value
    if isinstance(value, str):
        try:
            return Side(value)
        except ValueError:
            raise ValueError(
                f"Invalid border tag: '{value}'\n"
                f"  Valid tags: {', '.join(s.value for s in Side)}"
            ) from None
    return bool(value)


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True)
class MovementRules:
    """Rules governing neighbor enumeration."""

    allow_diagonal: bool = False
    # Only meaningful with allow_diagonal: both framing moves must succeed
    dont_cross_corners: bool = False


# =============================================================================
# Errors
# =============================================================================


class GridError(Exception):
    """Base class for grid contract violations."""


class ShapeMismatch(GridError, ValueError):
    """Obstacle matrix shape disagrees with the declared grid size."""


class OutOfBounds(GridError, IndexError):
    """Coordinates outside [0, width) x [0, height)."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(
            f"Position ({x}, {y}) is outside the grid\n"
            f"  Valid range: 0 <= x < {width}, 0 <= y < {height}"
        )
        self.x = x
        self.y = y
