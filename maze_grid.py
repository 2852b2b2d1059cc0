"""
Rectangular maze grid.

The Grid owns every cell in an arena addressed by integer index
(row * columns + column). Adjacency and passage links live in the arena as
index collections; a Cell is only a lightweight handle onto one slot.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterator

from maze_types import DEFAULT_HORIZONTAL_SIZE, DEFAULT_VERTICAL_SIZE, NEIGHBOR_ORDER, Direction

__all__ = ["Cell", "Grid"]

logger = logging.getLogger(__name__)


# =============================================================================
# Cell Handle
# =============================================================================


@dataclass(frozen=True)
class Cell:
    """A handle onto one cell of a Grid.

    Two handles compare equal iff they address the same slot of the same grid.
    """

    grid: Grid = field(repr=False)
    row: int
    column: int

    @property
    def index(self) -> int:
        return self.row * self.grid.columns + self.column

    # --- Adjacency -----------------------------------------------------------

    def neighbor(self, direction: Direction) -> Cell | None:
        """Return the adjacent cell in the given direction, or None at an edge."""
        return self.grid._adjacent(self.index, direction)

    @property
    def north(self) -> Cell | None:
        return self.neighbor(Direction.N)

    @property
    def south(self) -> Cell | None:
        return self.neighbor(Direction.S)

    @property
    def east(self) -> Cell | None:
        return self.neighbor(Direction.E)

    @property
    def west(self) -> Cell | None:
        return self.neighbor(Direction.W)

    def neighbors(self) -> list[Cell]:
        """Adjacent cells that exist, always in N, S, E, W order."""
        result: list[Cell] = []
        for direction in NEIGHBOR_ORDER:
            cell = self.neighbor(direction)
            if cell is not None:
                result.append(cell)
        return result

    # --- Links ---------------------------------------------------------------

    def link_one_way(self, other: Cell | None) -> None:
        """Record a passage from this cell to other only.

        Breaks link symmetry if used on its own; prefer link().
        """
        self.grid._check_member(other)
        self.grid._links[self.index].add(other.index)  # type: ignore[union-attr]

    def unlink_one_way(self, other: Cell | None) -> None:
        """Remove the passage from this cell to other only."""
        self.grid._check_member(other)
        self.grid._links[self.index].discard(other.index)  # type: ignore[union-attr]

    def link(self, other: Cell | None) -> None:
        """Open a passage between this cell and other, in both directions."""
        self.link_one_way(other)
        other.link_one_way(self)  # type: ignore[union-attr]

    def unlink(self, other: Cell | None) -> None:
        """Close the passage between this cell and other, in both directions."""
        self.unlink_one_way(other)
        other.unlink_one_way(self)  # type: ignore[union-attr]

    def linked(self, other: Cell | None) -> bool:
        """Whether a passage leads from this cell to other.

        An absent cell (None) is never linked.
        """
        if other is None or other.grid is not self.grid:
            return False
        return other.index in self.grid._links[self.index]

    def links(self) -> list[Cell]:
        """Cells this cell has passages to, in arena order."""
        return [self.grid._cell_at_index(i) for i in sorted(self.grid._links[self.index])]


# =============================================================================
# Grid
# =============================================================================


class Grid:
    """A rows x columns lattice of cells."""

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 0 or columns < 0:
            raise ValueError(
                f"Grid dimensions invalid: [{rows}, {columns}]\n"
                f"  Row and column counts must be non-negative"
            )
        self._rows = rows
        self._columns = columns

        self._prepare_grid()
        self._configure_cells()
        logger.debug("Grid created: %dx%d (%d cells)", rows, columns, self.size())

    def _prepare_grid(self) -> None:
        """Create the cell handles and empty per-cell state."""
        self._cells: list[Cell] = [
            Cell(self, r, c) for r in range(self._rows) for c in range(self._columns)
        ]
        self._neighbors: list[dict[Direction, int]] = [{} for _ in self._cells]
        self._links: list[set[int]] = [set() for _ in self._cells]

    def _configure_cells(self) -> None:
        """Wire adjacency by asking at() for every neighboring coordinate."""
        for cell in self._cells:
            for direction in NEIGHBOR_ORDER:
                dr, dc = direction.offset
                other = self.at(cell.row + dr, cell.column + dc)
                if other is not None:
                    self._neighbors[cell.index][direction] = other.index

    # --- Arena access used by Cell handles -----------------------------------

    def _cell_at_index(self, index: int) -> Cell:
        return self._cells[index]

    def _adjacent(self, index: int, direction: Direction) -> Cell | None:
        other = self._neighbors[index].get(direction)
        return None if other is None else self._cells[other]

    def _check_member(self, cell: Cell | None) -> None:
        if cell is None:
            raise ValueError("Cannot link to an absent cell")
        if cell.grid is not self:
            raise ValueError(f"Cell ({cell.row}, {cell.column}) belongs to a different grid")

    # --- Public API ----------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def size(self) -> int:
        """Number of cells in the grid."""
        return self._rows * self._columns

    def at(self, row: int, column: int) -> Cell | None:
        """Return the cell at (row, column), or None if outside the grid."""
        if row < 0 or column < 0 or row >= self._rows or column >= self._columns:
            return None
        return self._cells[row * self._columns + column]

    def each_row(self) -> Iterator[list[Cell]]:
        """Yield rows top to bottom, each a list of cells left to right."""
        for r in range(self._rows):
            start = r * self._columns
            yield self._cells[start : start + self._columns]

    def each_cell(self) -> Iterator[Cell]:
        """Yield every cell in row-major order."""
        yield from self._cells

    def __iter__(self) -> Iterator[Cell]:
        return self.each_cell()

    def random_cell(self, rng: random.Random | None = None) -> Cell:
        """Return a uniformly chosen cell, drawing the row then the column."""
        if self.size() == 0:
            raise IndexError("Cannot select random cell from empty grid.")
        source = rng if rng is not None else random
        row = source.randrange(self._rows)
        column = source.randrange(self._columns)
        return self._cells[row * self._columns + column]

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, columns={self._columns})"

    def __str__(self) -> str:
        from box_render import render

        return render(self, DEFAULT_HORIZONTAL_SIZE, DEFAULT_VERTICAL_SIZE)
