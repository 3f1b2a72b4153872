"""
Catalogue of classic patterns.

Patterns are stored as row strings ('#' alive, '.' dead) and stamped onto
a universe at a top-left (row, column) anchor. Placement wraps around the
grid edges like every other coordinate in the universe.
"""

from typing import Dict, List, Tuple

from .universe import Universe


PATTERNS: Dict[str, List[str]] = {
    # Still lifes
    'block': [
        "##",
        "##",
    ],
    'beehive': [
        ".##.",
        "#..#",
        ".##.",
    ],

    # Oscillators (period 2)
    'blinker': [
        "###",
    ],
    'toad': [
        ".###",
        "###.",
    ],
    'beacon': [
        "##..",
        "##..",
        "..##",
        "..##",
    ],

    # Spaceships: moves one cell down and one right every 4 ticks
    'glider': [
        ".#.",
        "..#",
        "###",
    ],
}


def get_pattern(name: str) -> List[Tuple[int, int]]:
    """
    Return the alive (row, column) offsets of a named pattern.

    Raises:
        KeyError: unknown pattern name
    """
    if name not in PATTERNS:
        known = ", ".join(sorted(PATTERNS))
        raise KeyError(f"Unknown pattern '{name}' (known: {known})")

    return [
        (r, c)
        for r, line in enumerate(PATTERNS[name])
        for c, char in enumerate(line)
        if char == "#"
    ]


def pattern_size(name: str) -> Tuple[int, int]:
    """Bounding box of a pattern as (height, width)"""
    rows = PATTERNS[name]
    return len(rows), max(len(line) for line in rows)


def place_pattern(universe: Universe, name: str, row: int = 0, column: int = 0) -> Universe:
    """
    Mark a pattern alive with its top-left corner at (row, column).

    Only the pattern's alive cells are written; cells already alive
    under its dead positions are left as they are.

    Args:
        universe: Target universe (modified in place)
        name: Key in PATTERNS
        row: Anchor row (wraps)
        column: Anchor column (wraps)

    Returns:
        The same universe, for chaining

    Raises:
        KeyError: unknown pattern name
        ValueError: universe has no cells
    """
    offsets = get_pattern(name)

    if universe.width == 0 or universe.height == 0:
        raise ValueError(f"Cannot place '{name}' on an empty {universe.width} x {universe.height} universe")

    universe.set_cells((row + dr, column + dc) for dr, dc in offsets)
    return universe
