"""
Test the step transition.

Verifies:
- Still lifes survive, isolated cells die, births need exactly 3 neighbors
- Oscillators and spaceships evolve correctly (double buffering)
- Every next state is computed from the pre-tick grid
"""

import sys
from pathlib import Path

import numpy as np

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from torus_life.universe import Universe
from torus_life.data_types import Cell
from torus_life.patterns import place_pattern
from torus_life.rules import next_state


def test_block_still_life():
    u = Universe.empty(6, 6)
    u.set_cells([(2, 2), (2, 3), (3, 2), (3, 3)])
    before = u.copy()

    for _ in range(3):
        u.tick()

    assert u == before
    assert u.alive_count() == 4


def test_isolated_cell_dies():
    u = Universe.empty(5, 5)
    u.set_cell(2, 2)
    assert u.live_neighbor_count(2, 2) == 0

    u.tick()

    assert u.get_cell(2, 2) == Cell.DEAD
    assert u.alive_count() == 0


def test_birth_with_three_neighbors():
    u = Universe.empty(5, 5)
    u.set_cells([(1, 1), (1, 2), (1, 3)])
    assert u.live_neighbor_count(2, 2) == 3

    u.tick()

    assert u.get_cell(2, 2) == Cell.ALIVE


def test_no_birth_with_two_neighbors():
    u = Universe.empty(5, 5)
    u.set_cells([(1, 1), (1, 3)])
    assert u.live_neighbor_count(2, 2) == 2

    u.tick()

    assert u.get_cell(2, 2) == Cell.DEAD


def test_no_birth_with_four_neighbors():
    u = Universe.empty(5, 5)
    u.set_cells([(1, 1), (1, 2), (1, 3), (3, 2)])
    assert u.live_neighbor_count(2, 2) == 4

    u.tick()

    assert u.get_cell(2, 2) == Cell.DEAD


def test_overpopulation_kills():
    # Center of a plus sign has 4 neighbors
    u = Universe.from_rows([
        ".....",
        "..#..",
        ".###.",
        "..#..",
        ".....",
    ])
    assert u.live_neighbor_count(2, 2) == 4

    u.tick()

    assert u.get_cell(2, 2) == Cell.DEAD


def test_blinker_oscillates():
    """Naive in-place mutation would corrupt this pattern on the first tick"""
    horizontal = Universe.from_rows([
        ".....",
        ".....",
        ".###.",
        ".....",
        ".....",
    ])
    vertical = Universe.from_rows([
        ".....",
        "..#..",
        "..#..",
        "..#..",
        ".....",
    ])

    u = horizontal.copy()
    u.tick()
    assert u == vertical

    u.tick()
    assert u == horizontal


def test_glider_translates_diagonally():
    u = place_pattern(Universe.empty(8, 8), 'glider', 0, 0)
    expected = place_pattern(Universe.empty(8, 8), 'glider', 1, 1)

    for _ in range(4):
        u.tick()

    assert u == expected
    assert u.alive_count() == 5


def test_glider_wraps_around_torus():
    start = place_pattern(Universe.empty(8, 8), 'glider', 5, 5)
    u = start.copy()

    # One cell diagonal per 4 ticks, 8 cells to come back around
    for _ in range(32):
        u.tick()
        assert u.alive_count() == 5

    assert u == start


def test_tick_reads_only_pre_tick_state():
    u = Universe(12, 9)
    before = u.copy()

    expected = np.empty(12 * 9, dtype=np.uint8)
    for row in range(9):
        for column in range(12):
            idx = before.index(row, column)
            expected[idx] = next_state(before.get_cell(row, column),
                                       before.live_neighbor_count(row, column))

    u.tick()

    assert np.array_equal(u.cells, expected)


def test_single_cell_universe():
    # Every offset wraps onto the cell itself: 8 live neighbors
    u = Universe(1, 1)
    assert u.get_cell(0, 0) == Cell.ALIVE
    assert u.live_neighbor_count(0, 0) == 8

    u.tick()

    assert u.get_cell(0, 0) == Cell.DEAD

    u.tick()
    assert u.get_cell(0, 0) == Cell.DEAD


def test_tick_is_deterministic():
    a = Universe(20, 15)
    b = Universe(20, 15)
    for _ in range(25):
        a.tick()
        b.tick()
    assert a == b


def test_default_tick_strategy_on_seeded_grid():
    u = Universe(7, 5)
    expected = u.copy()
    expected.tick(vectorized=False)

    u.tick()

    assert u.cells.dtype == np.uint8
    assert u == expected
