"""
Terminal demo: animate a universe by printing render() every tick.

Loads a YAML run config (see data/*.yaml) or builds a seeded universe
from --width/--height. Ctrl+C stops the loop.
"""

import argparse
import sys
from pathlib import Path

# Add repository root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from torus_life.simulation import LifeSimulation
from torus_life.data_types import RunConfig, UniverseConfig, RunSettings
from torus_life.loader import DataLoadError
from torus_life.constants import DEFAULT_WIDTH, DEFAULT_HEIGHT, FRAME_DELAY_SECONDS

# Move cursor home and clear screen before each frame
CLEAR_SCREEN = "\033[H\033[2J"


def draw_frame(frame: str, tick: int):
    sys.stdout.write(CLEAR_SCREEN)
    sys.stdout.write(frame)
    sys.stdout.write(f"tick {tick}\n")
    sys.stdout.flush()


def main():
    ap = argparse.ArgumentParser(description="Run a toroidal Game of Life universe in the terminal")
    ap.add_argument("--config", type=Path, default=None, help="YAML run config")
    ap.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    ap.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    ap.add_argument("--steps", type=int, default=None, help="ticks to run (default: until Ctrl+C)")
    ap.add_argument("--delay", type=float, default=None, help="seconds between frames")
    ap.add_argument("--no-render", action="store_true", help="tick without drawing frames")
    args = ap.parse_args()

    try:
        if args.config is not None:
            sim = LifeSimulation.from_config_file(args.config)
        else:
            config = RunConfig(
                universe=UniverseConfig(width=args.width, height=args.height),
                simulation=RunSettings(frame_delay_seconds=FRAME_DELAY_SECONDS)
            )
            sim = LifeSimulation(config=config)
    except (DataLoadError, ValueError, OverflowError) as e:
        print(f"[FAIL] {e}")
        sys.exit(1)

    if args.no_render:
        sim.config.simulation.render = False

    try:
        sim.run(steps=args.steps, on_frame=draw_frame, frame_delay_seconds=args.delay)
    except KeyboardInterrupt:
        print()

    sim.print_tick_summary()


if __name__ == '__main__':
    main()
