"""
Test suite for the maze generation algorithms.
"""

import logging
import random
from collections import deque

import pytest

import generators
from box_render import render
from generators import ALGORITHMS, binary_tree, get_algorithm, sidewinder
from maze_grid import Cell, Grid

SIZES = [(1, 1), (1, 6), (6, 1), (2, 2), (4, 7), (10, 10)]
SEEDS = [0, 1, 17, 2024]


class AlwaysZero:
    """Random source that always draws the first option."""

    def randrange(self, n: int) -> int:
        return 0


class AlwaysLast:
    """Random source that always draws the last option."""

    def randrange(self, n: int) -> int:
        return n - 1


def link_count(grid: Grid) -> int:
    return sum(len(cell.links()) for cell in grid) // 2


def reachable(grid: Grid) -> set[Cell]:
    start = grid.at(0, 0)
    assert start is not None
    seen = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for other in cell.links():
            if other not in seen:
                seen.add(other)
                queue.append(other)
    return seen


def split_runs(row: list[Cell]) -> list[list[Cell]]:
    """Group a row into maximal east-linked runs."""
    runs: list[list[Cell]] = [[row[0]]]
    for cell in row[1:]:
        if cell.linked(cell.west):
            runs[-1].append(cell)
        else:
            runs.append([cell])
    return runs


# =============================================================================
# Shared Properties
# =============================================================================


@pytest.mark.parametrize("algorithm", sorted(ALGORITHMS))
class TestPerfectMaze:
    """Properties both generators share."""

    @pytest.mark.parametrize("rows,columns", SIZES)
    @pytest.mark.parametrize("seed", SEEDS)
    def test_spanning_tree(self, algorithm: str, rows: int, columns: int, seed: int) -> None:
        """Every cell is reachable and there are no loops."""
        grid = Grid(rows, columns)
        ALGORITHMS[algorithm](grid, random.Random(seed))
        assert link_count(grid) == grid.size() - 1
        assert reachable(grid) == set(grid)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_links_only_adjacent_and_symmetric(self, algorithm: str, seed: int) -> None:
        grid = Grid(6, 6)
        ALGORITHMS[algorithm](grid, random.Random(seed))
        for cell in grid:
            for other in cell.links():
                assert other in cell.neighbors()
                assert other.linked(cell)

    def test_deterministic_for_seed(self, algorithm: str) -> None:
        first = Grid(8, 8)
        second = Grid(8, 8)
        ALGORITHMS[algorithm](first, random.Random(99))
        ALGORITHMS[algorithm](second, random.Random(99))
        assert render(first) == render(second)

    def test_default_random_source(self, algorithm: str) -> None:
        grid = Grid(3, 3)
        ALGORITHMS[algorithm](grid)
        assert link_count(grid) == 8

    def test_empty_grid(self, algorithm: str) -> None:
        grid = Grid(0, 5)
        ALGORITHMS[algorithm](grid, random.Random(1))
        assert grid.size() == 0

    def test_logs_summary(self, algorithm: str, caplog: pytest.LogCaptureFixture) -> None:
        grid = Grid(3, 3)
        with caplog.at_level(logging.INFO, logger="generators"):
            ALGORITHMS[algorithm](grid, random.Random(5))
        assert f"{algorithm}: 3x3 grid" in caplog.text
        assert "8 links" in caplog.text

    def test_no_link_count_when_info_disabled(
        self, algorithm: str, caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The grid is not re-walked for the summary unless INFO is enabled."""

        def fail(grid: Grid) -> int:
            raise AssertionError("links counted with INFO disabled")

        monkeypatch.setattr(generators, "_count_links", fail)
        grid = Grid(3, 3)
        with caplog.at_level(logging.WARNING, logger="generators"):
            ALGORITHMS[algorithm](grid, random.Random(5))
        assert link_count(grid) == 8
        assert caplog.text == ""


# =============================================================================
# Binary Tree
# =============================================================================


class TestBinaryTree:
    """Tests for the Binary Tree algorithm."""

    @pytest.mark.parametrize("rows,columns", [(1, 2), (2, 1), (2, 2), (5, 5), (3, 8)])
    def test_every_cell_linked(self, rows: int, columns: int) -> None:
        grid = Grid(rows, columns)
        binary_tree(grid, random.Random(11))
        for cell in grid:
            assert cell.links()

    def test_single_cell_stays_unlinked(self) -> None:
        """A 1x1 grid has nothing to link to."""
        grid = Grid(1, 1)
        binary_tree(grid, random.Random(0))
        cell = grid.at(0, 0)
        assert cell is not None
        assert cell.links() == []

    @pytest.mark.parametrize("seed", SEEDS)
    def test_top_row_and_right_column_are_corridors(self, seed: int) -> None:
        """The algorithm's bias: the top row and right column are fully open."""
        grid = Grid(5, 6)
        binary_tree(grid, random.Random(seed))
        for c in range(5):
            cell = grid.at(0, c)
            assert cell is not None
            assert cell.linked(cell.east)
        for r in range(1, 5):
            cell = grid.at(r, 5)
            assert cell is not None
            assert cell.linked(cell.north)

    def test_links_point_north_or_east(self) -> None:
        """No cell ever chooses its south or west neighbor."""
        grid = Grid(6, 6)
        binary_tree(grid, random.Random(8))
        for cell in grid:
            outgoing = [o for o in cell.links() if o in (cell.north, cell.east)]
            expected = 0 if cell == grid.at(0, 5) else 1
            assert len(outgoing) == expected

    def test_first_choice_is_north(self) -> None:
        """Candidates are ordered North then East."""
        grid = Grid(3, 3)
        binary_tree(grid, AlwaysZero())
        for cell in grid:
            if cell.north is not None:
                assert cell.linked(cell.north)
                assert not cell.linked(cell.east) or cell.row == 0

    def test_last_choice_is_east(self) -> None:
        grid = Grid(3, 3)
        binary_tree(grid, AlwaysLast())
        for cell in grid:
            if cell.east is not None:
                assert cell.linked(cell.east)

    def test_adjacency_untouched(self) -> None:
        grid = Grid(4, 4)
        before = [cell.neighbors() for cell in grid]
        binary_tree(grid, random.Random(2))
        assert [cell.neighbors() for cell in grid] == before


# =============================================================================
# Sidewinder
# =============================================================================


class TestSidewinder:
    """Tests for the Sidewinder algorithm."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_top_row_is_one_run(self, seed: int) -> None:
        grid = Grid(5, 7)
        sidewinder(grid, random.Random(seed))
        top = next(grid.each_row())
        assert len(split_runs(top)) == 1

    @pytest.mark.parametrize("seed", SEEDS)
    def test_each_run_has_one_north_link(self, seed: int) -> None:
        """Runs partition each row and each contributes exactly one link north."""
        grid = Grid(6, 8)
        sidewinder(grid, random.Random(seed))
        for row in grid.each_row():
            runs = split_runs(row)
            assert sum(len(run) for run in runs) == len(row)
            for run in runs:
                north_links = [cell for cell in run if cell.linked(cell.north)]
                assert len(north_links) == (0 if row[0].row == 0 else 1)

    def test_runs_never_cross_rows(self) -> None:
        """The last cell in a row is never linked east."""
        grid = Grid(5, 5)
        sidewinder(grid, random.Random(3))
        for row in grid.each_row():
            assert row[-1].east is None
            assert len(row[-1].links()) >= 1

    def test_always_close_gives_vertical_corridors(self) -> None:
        """A coin that always closes links every lower cell north."""
        grid = Grid(4, 3)
        sidewinder(grid, AlwaysZero())
        for cell in grid:
            if cell.row == 0:
                assert cell.linked(cell.east) or cell.east is None
            else:
                assert cell.linked(cell.north)
                assert not cell.linked(cell.east)

    def test_never_close_gives_horizontal_corridors(self) -> None:
        """A coin that never closes runs every row to the eastern boundary."""
        grid = Grid(4, 3)
        sidewinder(grid, AlwaysLast())
        for row in grid.each_row():
            assert len(split_runs(row)) == 1
            if row[0].row > 0:
                assert row[-1].linked(row[-1].north)

    def test_single_column(self) -> None:
        grid = Grid(5, 1)
        sidewinder(grid, random.Random(4))
        for cell in grid:
            if cell.north is not None:
                assert cell.linked(cell.north)


class TestAlgorithmLookup:
    """Tests for looking generators up by name."""

    def test_known_algorithms(self) -> None:
        assert get_algorithm("binary_tree") is binary_tree
        assert get_algorithm("sidewinder") is sidewinder

    def test_unknown_algorithm(self) -> None:
        with pytest.raises(ValueError, match="Unknown maze algorithm"):
            get_algorithm("aldous_broder")
