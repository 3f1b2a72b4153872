"""
Universe: the toroidal Game of Life grid.

Owns the grid dimensions and a flat, row-major uint8 cell buffer
(index = row * width + column). The grid has no edges: the row above
row 0 is row height-1 and the column left of column 0 is column width-1.

Each tick builds a complete next-generation buffer from the pre-tick
state and then swaps it in, so no cell ever sees a neighbor's new state
during the same tick.
"""

import operator
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from . import constants
from .constants import (
    MAX_DIMENSION,
    MAX_CELLS,
    SEED_MODULI,
    NEIGHBOR_OFFSETS,
    ALIVE_GLYPH,
    DEAD_GLYPH,
    LINE_SEPARATOR,
    ALIVE_CHARS,
    DEAD_CHARS,
)
from .data_types import Cell
from .rules import next_state, next_generation


def _validate_dimensions(width, height) -> Tuple[int, int]:
    """
    Check grid dimensions before allocating.

    Returns:
        (width, height) as plain ints

    Raises:
        TypeError: non-integer dimension
        ValueError: negative dimension
        OverflowError: dimension or cell count beyond the 32-bit index space
    """
    if isinstance(width, bool) or isinstance(height, bool):
        raise TypeError(f"Universe dimensions must be integers, got {width!r} x {height!r}")

    try:
        width = operator.index(width)
        height = operator.index(height)
    except TypeError as e:
        raise TypeError(f"Universe dimensions must be integers, got {width!r} x {height!r}") from e

    if width < 0 or height < 0:
        raise ValueError(f"Universe dimensions must be non-negative, got {width} x {height}")

    if width > MAX_DIMENSION or height > MAX_DIMENSION:
        raise OverflowError(f"Universe dimension exceeds {MAX_DIMENSION}: {width} x {height}")

    if width * height > MAX_CELLS:
        raise OverflowError(
            f"Universe of {width} x {height} has {width * height} cells, limit is {MAX_CELLS}"
        )

    return width, height


def seed_cells(count: int) -> np.ndarray:
    """
    Build the deterministic initial buffer.

    Cell i is alive when i is divisible by any of SEED_MODULI (2 and 7).

    Args:
        count: Number of cells (width * height)

    Returns:
        (count,) uint8 array of Cell values
    """
    idx = np.arange(count, dtype=np.int64)
    alive = np.zeros(count, dtype=bool)
    for modulus in SEED_MODULI:
        alive |= (idx % modulus) == 0
    return alive.astype(np.uint8)


def _parse_cell(value) -> int:
    """Convert one from_rows() entry to 0/1"""
    if isinstance(value, str):
        if value in ALIVE_CHARS:
            return int(Cell.ALIVE)
        if value in DEAD_CHARS:
            return int(Cell.DEAD)
        raise ValueError(f"Unrecognized cell character {value!r}")
    return int(Cell(value))


class Universe:
    """
    Fixed-size toroidal grid of cells.

    Public surface:
        Universe(width, height) / Universe.new(width, height): seeded grid
        tick(): advance one generation in place
        render(): text snapshot, one line per row
    """

    def __init__(self, width: int, height: int):
        """
        Create a universe with the deterministic seed pattern.

        Args:
            width: Number of columns (0 gives an empty grid)
            height: Number of rows (0 gives an empty grid)
        """
        self._width, self._height = _validate_dimensions(width, height)
        self._cells: np.ndarray = seed_cells(self._width * self._height)

    @classmethod
    def new(cls, width: int, height: int) -> 'Universe':
        """Seeded constructor, same as Universe(width, height)"""
        return cls(width, height)

    @classmethod
    def empty(cls, width: int, height: int) -> 'Universe':
        """Create a universe with every cell dead"""
        width, height = _validate_dimensions(width, height)
        return cls._wrap(width, height, np.zeros(width * height, dtype=np.uint8))

    @classmethod
    def from_rows(cls, rows: Sequence) -> 'Universe':
        """
        Build a universe from row strings or sequences.

        Example:
            Universe.from_rows([
                ".#.",
                ".#.",
                ".#.",
            ])

        Raises:
            ValueError: ragged rows or unrecognized cell values
        """
        height = len(rows)
        width = len(rows[0]) if height else 0

        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {width}")

        width, height = _validate_dimensions(width, height)
        cells = np.array([_parse_cell(v) for row in rows for v in row], dtype=np.uint8)
        return cls._wrap(width, height, cells)

    @classmethod
    def from_dict(cls, data: dict) -> 'Universe':
        """
        Deserialize universe from dict produced by to_dict().

        Raises:
            ValueError: cell count mismatch or non-binary cell values
        """
        width, height = _validate_dimensions(data['width'], data['height'])
        # Checked in the incoming dtype so fractional values are not truncated to 0/1
        cells = np.asarray(data['cells']).ravel()

        if cells.size != width * height:
            raise ValueError(
                f"Expected {width * height} cells for {width} x {height}, got {cells.size}"
            )
        if cells.size and (cells.dtype.kind not in "biuf"
                           or np.any((cells != Cell.DEAD) & (cells != Cell.ALIVE))):
            raise ValueError("Cell values must be 0 (dead) or 1 (alive)")

        return cls._wrap(width, height, cells.astype(np.uint8))

    @classmethod
    def _wrap(cls, width: int, height: int, cells: np.ndarray) -> 'Universe':
        """Adopt an already validated buffer without reseeding"""
        universe = cls.__new__(cls)
        universe._width = width
        universe._height = height
        universe._cells = cells
        return universe

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cells(self) -> np.ndarray:
        """Copy of the flat row-major buffer (uint8 Cell values)"""
        return self._cells.copy()

    def alive_count(self) -> int:
        return int(np.count_nonzero(self._cells))

    # ------------------------------------------------------------------
    # Indexing and cell access
    # ------------------------------------------------------------------

    def index(self, row: int, column: int) -> int:
        """
        Map (row, column) to the flat buffer index.

        No bounds checking: callers pass coordinates already in
        [0, height) x [0, width).
        """
        return row * self._width + column

    def _wrap_coords(self, row: int, column: int) -> Tuple[int, int]:
        if self._cells.size == 0:
            raise IndexError(f"Universe {self._width} x {self._height} has no cells")
        return row % self._height, column % self._width

    def get_cell(self, row: int, column: int) -> Cell:
        """Cell state at (row, column), coordinates wrap around"""
        row, column = self._wrap_coords(row, column)
        return Cell(int(self._cells[self.index(row, column)]))

    def set_cell(self, row: int, column: int, state: Cell = Cell.ALIVE):
        """Set cell state at (row, column), coordinates wrap around"""
        row, column = self._wrap_coords(row, column)
        self._cells[self.index(row, column)] = Cell(state)

    def set_cells(self, coords: Iterable[Tuple[int, int]]):
        """Mark every (row, column) in coords alive"""
        for row, column in coords:
            self.set_cell(row, column, Cell.ALIVE)

    def clear(self):
        """Kill every cell"""
        self._cells[:] = Cell.DEAD

    # ------------------------------------------------------------------
    # Neighbor counting
    # ------------------------------------------------------------------

    def live_neighbor_count(self, row: int, column: int) -> int:
        """
        Count alive cells among the 8 surrounding positions.

        Offsets are applied with wraparound: rows modulo height, columns
        modulo width. On a grid 1 cell wide or tall several offsets land
        on the same cell (possibly the cell itself) and each one counts.

        Args:
            row: Row in [0, height)
            column: Column in [0, width)

        Returns:
            Live-neighbor count in [0, 8]
        """
        count = 0
        for di, dj in NEIGHBOR_OFFSETS:
            x = (row + di + self._height) % self._height
            y = (column + dj + self._width) % self._width
            if self._cells[self.index(x, y)] == Cell.ALIVE:
                count += 1
        return count

    def neighbor_counts(self) -> np.ndarray:
        """
        Live-neighbor counts for the whole grid.

        Same wraparound semantics as live_neighbor_count(), computed by
        summing the grid shifted by each of the 8 offsets.

        Returns:
            (height, width) uint8 array
        """
        grid = self._cells.reshape(self._height, self._width)
        counts = np.zeros(grid.shape, dtype=np.uint8)
        if grid.size == 0:
            return counts

        for di, dj in NEIGHBOR_OFFSETS:
            # roll by (-di, -dj) so counts[r, c] reads grid[r + di, c + dj]
            counts += np.roll(grid, (-di, -dj), axis=(0, 1))
        return counts

    # ------------------------------------------------------------------
    # Step transition
    # ------------------------------------------------------------------

    def tick(self, vectorized: Optional[bool] = None):
        """
        Advance the universe by one generation.

        Args:
            vectorized: Use the numpy pass (True) or the per-cell reference
                pass (False). Defaults to constants.USE_VECTORIZED_TICK.
        """
        if self._cells.size == 0:
            return

        if vectorized is None:
            vectorized = constants.USE_VECTORIZED_TICK

        if vectorized:
            cells_next = next_generation(self._cells, self.neighbor_counts().ravel())
        else:
            cells_next = self._next_cells_reference()

        self._cells = cells_next

    def _next_cells_reference(self) -> np.ndarray:
        """Per-cell next generation, read entirely from the current buffer"""
        cells_next = self._cells.copy()

        for row in range(self._height):
            for column in range(self._width):
                idx = self.index(row, column)
                count = self.live_neighbor_count(row, column)
                cells_next[idx] = next_state(int(self._cells[idx]), count)

        return cells_next

    # ------------------------------------------------------------------
    # Rendering and serialization
    # ------------------------------------------------------------------

    def render(self) -> str:
        """
        Text snapshot of the grid.

        One line per row, one glyph per cell, every line terminated by
        a newline. Read-only.
        """
        grid = self._cells.reshape(self._height, self._width)
        lines = []
        for row in grid:
            glyphs = [ALIVE_GLYPH if cell == Cell.ALIVE else DEAD_GLYPH for cell in row]
            lines.append("".join(glyphs) + LINE_SEPARATOR)
        return "".join(lines)

    def to_dict(self) -> dict:
        """
        Serialize universe to JSON-compatible dict.

        Returns:
            Dict with width, height and flat cells list
        """
        return {
            'width': self._width,
            'height': self._height,
            'cells': self._cells.tolist()
        }

    def copy(self) -> 'Universe':
        return self._wrap(self._width, self._height, self._cells.copy())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"Universe(width={self._width}, height={self._height}, "
                f"alive={self.alive_count()})")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Universe):
            return NotImplemented
        return (self._width == other._width
                and self._height == other._height
                and np.array_equal(self._cells, other._cells))

    __hash__ = None
