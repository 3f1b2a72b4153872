"""
Data types for cells and run configuration.

Cell is the per-cell state stored in the universe buffer. The config
dataclasses are populated by loader.py from YAML files.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

from .constants import (
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    SEED_DEFAULT,
    TICK_SUMMARY_INTERVAL,
    FRAME_DELAY_SECONDS,
)


class Cell(IntEnum):
    """State of a single cell. Values match the uint8 storage buffer."""
    DEAD = 0
    ALIVE = 1


# ============================================================================
# Run Configuration
# ============================================================================

@dataclass
class PatternPlacement:
    """A named pattern stamped onto the universe at (row, column)"""
    name: str
    row: int = 0
    column: int = 0


@dataclass
class UniverseConfig:
    """Grid dimensions and initial contents"""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed: str = SEED_DEFAULT  # default, empty
    patterns: List[PatternPlacement] = field(default_factory=list)


@dataclass
class RunSettings:
    """Driver loop settings"""
    steps: Optional[int] = None  # None = run until interrupted
    summary_interval: int = TICK_SUMMARY_INTERVAL
    frame_delay_seconds: float = FRAME_DELAY_SECONDS
    render: bool = True


@dataclass
class RunConfig:
    """Complete run configuration"""
    universe: UniverseConfig = field(default_factory=UniverseConfig)
    simulation: RunSettings = field(default_factory=RunSettings)
    description: Optional[str] = None
