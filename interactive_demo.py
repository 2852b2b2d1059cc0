"""
Interactive demo for maze generation.
Display a maze and regenerate it with keyboard commands.
"""

from __future__ import annotations

import logging
import random
import sys
import time

import readchar
import simple_chalk as chalk  # type: ignore[import-untyped]
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from box_render import render
from generators import ALGORITHMS
from maze_grid import Grid
from maze_types import DEFAULT_COLUMNS, DEFAULT_ROWS

MIN_SIZE = 1
MAX_SIZE = 40


class InteractiveDemo:
    """Interactive demo for maze generators."""

    def __init__(self, rows: int, columns: int, algorithm: str = "binary_tree") -> None:
        self.rows = rows
        self.columns = columns
        self.algorithm = algorithm
        self.seed = int(time.time())
        self.console = Console()
        self.status_message = "Ready"
        self.grid = self.generate()

    def generate(self) -> Grid:
        """Build a fresh grid and carve it with the current algorithm and seed."""
        grid = Grid(self.rows, self.columns)
        ALGORITHMS[self.algorithm](grid, random.Random(self.seed))
        return grid

    def generate_display(self) -> Panel:
        """Generate the current display with maze and status."""
        maze_text = render(self.grid, color_fn=chalk.green)

        status = Text()
        status.append("Algorithm: ", style="bold")
        status.append(f"{self.algorithm}\n")
        status.append("Size: ", style="bold")
        status.append(f"{self.rows}x{self.columns}\n")
        status.append("Seed: ", style="bold")
        status.append(f"{self.seed}\n\n")

        # Convert ANSI-colored maze text to Rich Text properly
        status.append(Text.from_ansi(maze_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  B - Binary tree\n")
        status.append("  S - Sidewinder\n")
        status.append("  N - New seed\n")
        status.append("  + - Grow maze\n")
        status.append("  - - Shrink maze\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Maze Interactive Demo", border_style="green")

    def select_algorithm(self, algorithm: str) -> None:
        self.algorithm = algorithm
        self.grid = self.generate()
        self.status_message = f"✓ Switched to {algorithm}"

    def reseed(self) -> None:
        self.seed = random.randrange(2**32)
        self.grid = self.generate()
        self.status_message = f"✓ New seed {self.seed}"

    def resize(self, delta: int) -> None:
        rows = min(max(self.rows + delta, MIN_SIZE), MAX_SIZE)
        columns = min(max(self.columns + delta, MIN_SIZE), MAX_SIZE)
        if (rows, columns) == (self.rows, self.columns):
            self.status_message = f"✗ Size limit reached ({MIN_SIZE}..{MAX_SIZE})"
            return
        self.rows, self.columns = rows, columns
        self.grid = self.generate()
        self.status_message = f"✓ Resized to {rows}x{columns}"

    def run(self) -> None:
        """Run the interactive demo."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == "q":
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == "b":
                        self.select_algorithm("binary_tree")
                    elif key.lower() == "s":
                        self.select_algorithm("sidewinder")
                    elif key.lower() == "n":
                        self.reseed()
                    elif key in ("+", "="):
                        self.resize(1)
                    elif key == "-":
                        self.resize(-1)
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    rows = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_ROWS
    columns = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_COLUMNS

    if len(sys.argv) > 3 and sys.argv[3] == "sublime":
        # Running from IDE - just render the initial state
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
        print("Running from IDE - rendering initial state")
        print()
        print(render(InteractiveDemo(rows, columns).grid))
    else:
        InteractiveDemo(rows, columns).run()
