"""
Maze generation algorithms.

Each generator takes an already-constructed Grid and opens passages by linking
adjacent cells. No cells or adjacency are added. The random source is supplied
by the caller (any object with a random.Random-style randrange); when omitted
the module-level random functions are used.
"""

from __future__ import annotations

import logging
import random
from typing import Callable

from maze_grid import Cell, Grid

__all__ = ["binary_tree", "sidewinder", "ALGORITHMS", "MazeGenerator", "get_algorithm"]

logger = logging.getLogger(__name__)

MazeGenerator = Callable[[Grid, random.Random | None], None]


def _count_links(grid: Grid) -> int:
    return sum(len(cell.links()) for cell in grid.each_cell()) // 2


def binary_tree(grid: Grid, rng: random.Random | None = None) -> None:
    """
    Carve a maze with the Binary Tree algorithm.

    Every cell links to its North or East neighbor, chosen at random. The
    top-right cell has neither and is left alone, so the top row and the right
    column always come out as unbroken corridors.
    """
    source = rng if rng is not None else random

    for cell in grid.each_cell():
        candidates: list[Cell] = []
        if cell.north is not None:
            candidates.append(cell.north)
        if cell.east is not None:
            candidates.append(cell.east)

        if candidates:
            cell.link(candidates[source.randrange(len(candidates))])

    if logger.isEnabledFor(logging.INFO):
        logger.info(
            "binary_tree: %dx%d grid, %d links",
            grid.rows,
            grid.columns,
            _count_links(grid),
        )


def sidewinder(grid: Grid, rng: random.Random | None = None) -> None:
    """
    Carve a maze with the Sidewinder algorithm.

    Rows are processed west to east while collecting a run of cells. At each
    cell the run either continues east or is closed out, in which case one
    random member of the run is linked north. A run is always closed at the
    eastern boundary. Cells without a North neighbor never close on a coin
    flip, so the whole top row becomes a single run.
    """
    source = rng if rng is not None else random
    run_count = 0

    for row in grid.each_row():
        run: list[Cell] = []

        for cell in row:
            run.append(cell)

            at_eastern_boundary = cell.east is None
            at_northern_boundary = cell.north is None

            should_close_out = at_eastern_boundary or (
                not at_northern_boundary and source.randrange(2) == 0
            )

            if should_close_out:
                member = run[source.randrange(len(run))]
                if member.north is not None:
                    member.link(member.north)
                run_count += 1
                run = []
            else:
                cell.link(cell.east)

    if logger.isEnabledFor(logging.INFO):
        logger.info(
            "sidewinder: %dx%d grid, %d runs, %d links",
            grid.rows,
            grid.columns,
            run_count,
            _count_links(grid),
        )


ALGORITHMS: dict[str, MazeGenerator] = {
    "binary_tree": binary_tree,
    "sidewinder": sidewinder,
}


def get_algorithm(name: str) -> MazeGenerator:
    """Look up a generator by name."""
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown maze algorithm: '{name}'\n"
            f"  Available algorithms: {', '.join(sorted(ALGORITHMS))}"
        ) from None
