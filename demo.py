"""
Demonstration script for maze generation and rendering.

Usage:
    python demo.py [algorithm|all] [rows] [columns] [seed] [-v]
"""

from __future__ import annotations

import logging
import random
import sys
import time

import simple_chalk as chalk  # type: ignore[import-untyped]

from box_render import render
from generators import ALGORITHMS, get_algorithm
from maze_grid import Grid
from maze_types import DEFAULT_COLUMNS, DEFAULT_ROWS


def demo(algorithm: str, rows: int, columns: int, seed: int, color: bool = False) -> None:
    """Generate one maze and print it."""
    generate = get_algorithm(algorithm)
    grid = Grid(rows, columns)
    generate(grid, random.Random(seed))

    print("=" * 40)
    print(f"{algorithm} ({rows}x{columns}, seed {seed}):")
    print("=" * 40)
    print(render(grid, color_fn=chalk.green if color else None))


def small_cases_demo() -> None:
    """Show the degenerate grids whose shape is fixed regardless of the seed."""
    print("=" * 40)
    print("Single cell:")
    print("=" * 40)
    print(render(Grid(1, 1)))

    open_grid = Grid(2, 2)
    for cell in open_grid.each_cell():
        for neighbor in (cell.east, cell.south):
            if neighbor is not None:
                cell.link(neighbor)
    print("=" * 40)
    print("Fully open 2x2:")
    print("=" * 40)
    print(render(open_grid))


def main(argv: list[str]) -> None:
    if "-v" in argv:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
        argv = [a for a in argv if a != "-v"]
    else:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    algorithm = argv[0] if len(argv) > 0 else "all"
    rows = int(argv[1]) if len(argv) > 1 else DEFAULT_ROWS
    columns = int(argv[2]) if len(argv) > 2 else DEFAULT_COLUMNS
    seed = int(argv[3]) if len(argv) > 3 else int(time.time())
    color = sys.stdout.isatty()

    if algorithm == "all":
        small_cases_demo()
        for name in ALGORITHMS:
            demo(name, rows, columns, seed, color)
    else:
        demo(algorithm, rows, columns, seed, color)


if __name__ == "__main__":
    main(sys.argv[1:])
