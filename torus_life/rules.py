"""
Transition rule for the classic B3/S23 automaton.

The scalar and vectorized forms evaluate the same cases in the same
priority order:

1. alive, fewer than 2 neighbors  -> dead (underpopulation)
2. alive, 2 or 3 neighbors        -> alive (survival)
3. alive, more than 3 neighbors   -> dead (overpopulation)
4. dead, exactly 3 neighbors      -> alive (birth)
5. anything else                  -> unchanged
"""

import numpy as np

from .data_types import Cell
from .constants import BIRTH_COUNT, SURVIVAL_MIN, SURVIVAL_MAX


def next_state(state: Cell, count: int) -> Cell:
    """
    Return the next state of one cell.

    Args:
        state: Current cell state
        count: Live-neighbor count (0-8)

    Returns:
        Cell state for the next generation
    """
    state = Cell(state)

    if state == Cell.ALIVE and count < SURVIVAL_MIN:
        return Cell.DEAD
    if state == Cell.ALIVE and SURVIVAL_MIN <= count <= SURVIVAL_MAX:
        return Cell.ALIVE
    if state == Cell.ALIVE and count > SURVIVAL_MAX:
        return Cell.DEAD
    if state == Cell.DEAD and count == BIRTH_COUNT:
        return Cell.ALIVE
    return state


def next_generation(cells: np.ndarray, counts: np.ndarray) -> np.ndarray:
    """
    Apply the rule to a whole buffer at once.

    Args:
        cells: (N,) or (H, W) uint8 array of Cell values
        counts: Live-neighbor counts, same shape as cells

    Returns:
        New uint8 array with next-generation states (inputs untouched)
    """
    alive = cells == Cell.ALIVE
    dead = cells == Cell.DEAD

    # np.select picks the first matching condition, preserving rule priority
    conditions = [
        alive & (counts < SURVIVAL_MIN),
        alive & (counts >= SURVIVAL_MIN) & (counts <= SURVIVAL_MAX),
        alive & (counts > SURVIVAL_MAX),
        dead & (counts == BIRTH_COUNT),
    ]
    # uint8 choices and default keep np.select from promoting to int64
    dead_value, alive_value = np.uint8(Cell.DEAD), np.uint8(Cell.ALIVE)
    choices = [dead_value, alive_value, dead_value, alive_value]

    return np.select(conditions, choices, default=cells.astype(np.uint8)).astype(np.uint8)
