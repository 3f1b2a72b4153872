"""
Torus Life

A deterministic Game of Life universe on a wrap-around grid.
Cells evolve under the classic B3/S23 rule and render as plain text.

Architecture: Universe is the source of truth. The simulation driver and
terminal scripts are consumers.
"""

__version__ = "0.1.0"
