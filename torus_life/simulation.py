"""
Life simulation driver.

Owns a Universe, counts ticks, measures tick timing and runs the
render/tick loop that a terminal (or any other host) drives.
"""

import time
from collections import deque
from pathlib import Path
from typing import Callable, Deque, Optional

from .universe import Universe
from .data_types import RunConfig
from .loader import load_run_config, build_universe, SCHEMA_DIR
from .constants import TICK_TIME_WINDOW


# Frame callback: receives the rendered grid and the tick count it shows
FrameCallback = Callable[[str, int], None]


class LifeSimulation:
    """
    Main simulation class.

    Wraps a Universe with tick bookkeeping, timing statistics and the
    host loop (render, hand frame to callback, tick, repeat).
    """

    def __init__(self, universe: Optional[Universe] = None, config: Optional[RunConfig] = None):
        """
        Initialize simulation.

        Args:
            universe: Universe to drive. Built from config when omitted.
            config: Run configuration (defaults: 64x64 seeded universe)
        """
        self.config: RunConfig = config if config is not None else RunConfig()

        if universe is None:
            universe = build_universe(self.config.universe)
        self.universe: Universe = universe

        # Simulation state
        self.tick_count: int = 0

        # Durations (seconds) of the most recent ticks
        self._tick_times: Deque[float] = deque(maxlen=TICK_TIME_WINDOW)

        print(f"[OK] Simulation initialized: {self.universe.width}x{self.universe.height} universe, "
              f"{self.universe.alive_count()} alive cells")

    @classmethod
    def from_config_file(cls, config_path: Path, schema_dir: Optional[Path] = SCHEMA_DIR) -> 'LifeSimulation':
        """Load a YAML run config and build the simulation from it"""
        print(f"Loading run config {config_path}...")
        config = load_run_config(config_path, schema_dir)
        return cls(config=config)

    def tick(self):
        """Advance the universe one generation and record timing"""
        start = time.perf_counter()
        self.universe.tick()
        elapsed = time.perf_counter() - start

        self.tick_count += 1
        self._record_tick_time(elapsed)

    def run(
        self,
        steps: Optional[int] = None,
        on_frame: Optional[FrameCallback] = None,
        frame_delay_seconds: Optional[float] = None
    ) -> int:
        """
        Run the render/tick loop.

        Each step renders the current grid, passes it to on_frame, then
        ticks. Rendering (and the frame delay) is skipped when the run
        config disables it.

        Args:
            steps: Number of ticks. Defaults to config; None in both runs
                until interrupted.
            on_frame: Callback for each rendered frame
            frame_delay_seconds: Pause after each rendered frame (overrides config)

        Returns:
            Number of ticks performed
        """
        settings = self.config.simulation
        if steps is None:
            steps = settings.steps
        if frame_delay_seconds is None:
            frame_delay_seconds = settings.frame_delay_seconds

        performed = 0
        while steps is None or performed < steps:
            if settings.render:
                frame = self.universe.render()
                if on_frame is not None:
                    on_frame(frame, self.tick_count)

            self.tick()
            performed += 1

            interval = settings.summary_interval
            if interval > 0 and self.tick_count % interval == 0:
                self.print_tick_summary()

            if settings.render and frame_delay_seconds > 0:
                time.sleep(frame_delay_seconds)

        return performed

    def get_tick_stats(self) -> dict:
        """
        Timing over the last TICK_TIME_WINDOW ticks.

        Returns:
            Dict with tick_count, avg_tick_time_ms, last_tick_time_ms
            (zeros before the first tick)
        """
        avg_ms = last_ms = 0.0
        if self._tick_times:
            avg_ms = 1000.0 * sum(self._tick_times) / len(self._tick_times)
            last_ms = 1000.0 * self._tick_times[-1]

        return {
            'tick_count': self.tick_count,
            'avg_tick_time_ms': avg_ms,
            'last_tick_time_ms': last_ms
        }

    def _record_tick_time(self, elapsed: float):
        # deque drops the oldest sample once the window is full
        self._tick_times.append(elapsed)

    def get_snapshot(self) -> dict:
        """
        Get complete simulation state snapshot.

        Returns:
            Dict with tick_count, alive_count, universe, timing
        """
        return {
            'tick_count': self.tick_count,
            'alive_count': self.universe.alive_count(),
            'universe': self.universe.to_dict(),
            'timing': self.get_tick_stats()
        }

    def print_tick_summary(self):
        """One status line: generation, timing, population"""
        stats = self.get_tick_stats()
        u = self.universe
        print(f"Gen {stats['tick_count']:6d} | {u.width}x{u.height} | "
              f"alive {u.alive_count():6d} | "
              f"tick {stats['last_tick_time_ms']:.3f} ms "
              f"(avg {stats['avg_tick_time_ms']:.3f} ms)")
