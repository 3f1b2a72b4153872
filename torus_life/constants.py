"""
Central configuration constants for the life simulation.

Defines default values, limits, and configuration parameters
used across multiple modules.
"""

# ============================================================================
# Universe Configuration
# ============================================================================

# Default grid dimensions (columns x rows) when no config is supplied
DEFAULT_WIDTH = 64
DEFAULT_HEIGHT = 64

# Largest dimension and largest cell count accepted at construction.
# Flat indices must fit an unsigned 32-bit integer.
MAX_DIMENSION = 2**32 - 1
MAX_CELLS = 2**32 - 1

# Initial seeding: flat index i starts alive if i % a == 0 or i % b == 0
SEED_MODULI = (2, 7)

# Seed modes accepted by run configs
SEED_DEFAULT = "default"
SEED_EMPTY = "empty"
SEED_MODES = (SEED_DEFAULT, SEED_EMPTY)


# ============================================================================
# Rule Configuration (B3/S23, fixed)
# ============================================================================

BIRTH_COUNT = 3
SURVIVAL_MIN = 2
SURVIVAL_MAX = 3

# Relative positions of the 8 surrounding cells, (row offset, column offset)
NEIGHBOR_OFFSETS = tuple(
    (di, dj)
    for di in (-1, 0, 1)
    for dj in (-1, 0, 1)
    if not (di == 0 and dj == 0)
)

# Vectorized numpy tick (True) or per-cell reference tick (False).
# Both produce identical grids; the reference path exists for A/B checks.
USE_VECTORIZED_TICK = True


# ============================================================================
# Rendering
# ============================================================================

ALIVE_GLYPH = "\u2588\u2588"  # ██  full block, twice for square cells
DEAD_GLYPH = "\u2591\u2591"   # ░░  light shade
LINE_SEPARATOR = "\n"

# Characters accepted as alive/dead by Universe.from_rows()
ALIVE_CHARS = frozenset("#O*1")
DEAD_CHARS = frozenset(".-_ 0")


# ============================================================================
# Performance Configuration
# ============================================================================

# Tick timing window for rolling average
TICK_TIME_WINDOW = 100  # Number of ticks to average

# Default tick summary interval (print every N ticks)
TICK_SUMMARY_INTERVAL = 100

# Default pause between rendered frames in the terminal loop
FRAME_DELAY_SECONDS = 0.05
