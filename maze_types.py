"""
Shared type definitions for the maze system.
"""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """Cardinal direction between adjacent cells."""

    N = "N"  # Up (decreasing row)
    S = "S"  # Down (increasing row)
    E = "E"  # Right (increasing col)
    W = "W"  # Left (decreasing col)

    @property
    def offset(self) -> tuple[int, int]:
        """(row, column) delta to the neighbor in this direction."""
        match self:
            case Direction.N:
                return (-1, 0)
            case Direction.S:
                return (1, 0)
            case Direction.E:
                return (0, 1)
            case Direction.W:
                return (0, -1)

    @property
    def opposite(self) -> Direction:
        """The direction pointing back the other way."""
        match self:
            case Direction.N:
                return Direction.S
            case Direction.S:
                return Direction.N
            case Direction.E:
                return Direction.W
            case Direction.W:
                return Direction.E


# Order in which Cell.neighbors() reports adjacent cells
NEIGHBOR_ORDER: tuple[Direction, ...] = (Direction.N, Direction.S, Direction.E, Direction.W)


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_HORIZONTAL_SIZE = 3  # Glyphs per wall segment
DEFAULT_VERTICAL_SIZE = 1  # Interior lines per cell row

DEFAULT_ROWS = 8
DEFAULT_COLUMNS = 12
