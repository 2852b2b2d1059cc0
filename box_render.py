"""
Box-drawing rendering for maze grids.

Every lattice point between cells gets a corner glyph chosen from the walls
that meet there. Wall segments between corners are drawn as runs of
horizontal glyphs, and cell interiors are blank padding.
"""

from __future__ import annotations

import logging
from typing import Callable

from maze_grid import Grid
from maze_types import DEFAULT_HORIZONTAL_SIZE, DEFAULT_VERTICAL_SIZE

__all__ = [
    "corner_glyph",
    "upper_left_corner_glyph",
    "points_down",
    "points_right",
    "render",
    "render_lines",
]

logger = logging.getLogger(__name__)


# =============================================================================
# Glyphs
# =============================================================================

# Unicode light box drawing characters
HORIZONTAL = "\u2500"  # ─
VERTICAL = "\u2502"  # │
CORNER_DOWN_RIGHT = "\u250c"  # ┌
CORNER_DOWN_LEFT = "\u2510"  # ┐
CORNER_UP_RIGHT = "\u2514"  # └
CORNER_UP_LEFT = "\u2518"  # ┘
VERTICAL_RIGHT = "\u251c"  # ├
VERTICAL_LEFT = "\u2524"  # ┤
HORIZONTAL_DOWN = "\u252c"  # ┬
HORIZONTAL_UP = "\u2534"  # ┴
INTERSECTION = "\u253c"  # ┼

UP = 1
DOWN = 2
LEFT = 4
RIGHT = 8

# Indexed by the OR of the direction bits above
GLYPHS: tuple[str, ...] = (
    " ",  # Nothing
    VERTICAL,  # Up
    VERTICAL,  # Down
    VERTICAL,  # Down | Up
    HORIZONTAL,  # Left
    CORNER_UP_LEFT,  # Left | Up
    CORNER_DOWN_LEFT,  # Left | Down
    VERTICAL_LEFT,  # Left | Down | Up
    HORIZONTAL,  # Right
    CORNER_UP_RIGHT,  # Right | Up
    CORNER_DOWN_RIGHT,  # Right | Down
    VERTICAL_RIGHT,  # Right | Down | Up
    HORIZONTAL,  # Right | Left
    HORIZONTAL_UP,  # Right | Left | Up
    HORIZONTAL_DOWN,  # Right | Left | Down
    INTERSECTION,  # Right | Left | Down | Up
)
_POINTS_DOWN = frozenset(
    {
        VERTICAL,
        CORNER_DOWN_RIGHT,
        CORNER_DOWN_LEFT,
        VERTICAL_RIGHT,
        VERTICAL_LEFT,
        HORIZONTAL_DOWN,
        INTERSECTION,
    }
)
_POINTS_RIGHT = frozenset(
    {
        HORIZONTAL,
        CORNER_DOWN_RIGHT,
        CORNER_UP_RIGHT,
        VERTICAL_RIGHT,
        HORIZONTAL_DOWN,
        HORIZONTAL_UP,
        INTERSECTION,
    }
)


def corner_glyph(up: bool, left: bool, down: bool, right: bool) -> str:
    """Return the glyph for a corner extending in the given directions."""
    idx = 0
    if up:
        idx |= UP
    if down:
        idx |= DOWN
    if left:
        idx |= LEFT
    if right:
        idx |= RIGHT
    return GLYPHS[idx]


def points_down(glyph: str) -> bool:
    """True if the glyph has a stroke leaving its bottom edge."""
    return glyph in _POINTS_DOWN


def points_right(glyph: str) -> bool:
    """True if the glyph has a stroke leaving its right edge."""
    return glyph in _POINTS_RIGHT


def upper_left_corner_glyph(grid: Grid, row: int, column: int) -> str:
    """
    Return the glyph drawn at the upper-left corner of the cell at (row, column).

    The four cells touching that corner are inspected; any of them may lie
    outside the grid. A wall runs between two of them unless both exist and
    are linked. Along the outer edge a wall runs wherever one side has a cell.
    """
    ul = grid.at(row - 1, column - 1)
    ur = grid.at(row - 1, column)
    ll = grid.at(row, column - 1)
    lr = grid.at(row, column)

    if ul is not None:
        up = ur is None or not ul.linked(ur)
        left = ll is None or not ul.linked(ll)
    else:
        up = ur is not None  # Left edge of the grid
        left = ll is not None  # Top edge of the grid

    if lr is not None:
        down = ll is None or not lr.linked(ll)
        right = ur is None or not lr.linked(ur)
    else:
        down = ll is not None
        right = ur is not None

    return corner_glyph(up, left, down, right)


def _describe_links(grid: Grid, row: int, column: int) -> str:
    cell = grid.at(row, column)
    if cell is None:
        return "None"
    return "".join(
        letter
        for letter, other in (("N", cell.north), ("E", cell.east), ("W", cell.west), ("S", cell.south))
        if cell.linked(other)
    )


# =============================================================================
# Rendering
# =============================================================================


def render_lines(
    grid: Grid,
    horizontal_size: int = DEFAULT_HORIZONTAL_SIZE,
    vertical_size: int = DEFAULT_VERTICAL_SIZE,
    color_fn: Callable[[str], str] | None = None,
) -> list[str]:
    """
    Render a maze grid as a list of text lines (without line terminators).

    Args:
        grid: The grid to render
        horizontal_size: Glyphs per horizontal wall segment (default 3)
        vertical_size: Interior lines per cell row (default 1)
        color_fn: Optional colorizer applied to every wall fragment

    Returns:
        Lines of the diagram, top to bottom

    Raises:
        ValueError: If either size is less than 1
    """
    if horizontal_size < 1 or vertical_size < 1:
        raise ValueError(
            f"Invalid render size: [{horizontal_size}, {vertical_size}]\n"
            f"  Horizontal and vertical sizes must be at least 1"
        )

    colorize = color_fn if color_fn is not None else lambda s: s

    horizontal_line = colorize(HORIZONTAL * horizontal_size)
    horizontal_space = " " * horizontal_size
    vertical_wall = colorize(VERTICAL)

    lines: list[str] = []

    # Inclusive of the row and column counts to get the bottom and right edges
    for r in range(grid.rows + 1):
        top_edge: list[str] = []  # The horizontal lines between cells
        area: list[str] = []  # The contents of the cells

        for c in range(grid.columns + 1):
            cell = grid.at(r, c)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("C[%d,%d]: {%s}", r, c, _describe_links(grid, r, c))

            ul = upper_left_corner_glyph(grid, r, c)
            top_edge.append(colorize(ul) if ul != " " else ul)

            # A right-pointing corner only implies a wall if the cell below is
            # not actually open to the north
            if points_right(ul) and (cell is None or not cell.linked(cell.north)):
                top_edge.append(horizontal_line)
            else:
                top_edge.append(horizontal_space)

            if points_down(ul) and (cell is None or not cell.linked(cell.west)):
                area.append(vertical_wall)
            else:
                area.append(" ")
            area.append(horizontal_space)

        lines.append("".join(top_edge))
        if r < grid.rows:
            row_area = "".join(area)
            lines.extend(row_area for _ in range(vertical_size))

    return lines


def render(
    grid: Grid,
    horizontal_size: int = DEFAULT_HORIZONTAL_SIZE,
    vertical_size: int = DEFAULT_VERTICAL_SIZE,
    color_fn: Callable[[str], str] | None = None,
) -> str:
    """
    Render a maze grid to a box-drawing string.

    Every line, including the last, ends with a newline.
    """
    return "".join(line + "\n" for line in render_lines(grid, horizontal_size, vertical_size, color_fn))
