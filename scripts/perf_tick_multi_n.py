"""
Multi-N performance validation for Universe.tick().

Runs both tick strategies (vectorized numpy pass and per-cell reference
pass) at several grid sizes and reports median/p90.
"""

# Pin threading for stable measurement
import os
os.environ.update({
    'OPENBLAS_NUM_THREADS': '1',
    'MKL_NUM_THREADS': '1',
    'NUMEXPR_NUM_THREADS': '1',
    'OMP_NUM_THREADS': '1'
})

import gc
import sys
import time
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from torus_life.universe import Universe


def run_tick_perf_test(size: int, vectorized: bool, runs: int = 7) -> dict:
    """
    Time tick() on a size x size seeded universe.

    Args:
        size: Grid width and height
        vectorized: Tick strategy to measure
        runs: Number of timed ticks (default 7 for stable median)

    Returns:
        Dict with size, p50, p90, min, max, alive count after the runs
    """
    universe = Universe(size, size)

    # Warmup
    universe.tick(vectorized=vectorized)

    # Measure (GC disabled for stable timing)
    gc.collect()
    gc.disable()

    times_ns = []
    try:
        for _ in range(runs):
            start = time.perf_counter_ns()
            universe.tick(vectorized=vectorized)
            times_ns.append(time.perf_counter_ns() - start)
    finally:
        gc.enable()

    times_ms = np.array(times_ns) / 1_000_000

    return {
        'size': size,
        'cells': size * size,
        'p50_ms': np.percentile(times_ms, 50),
        'p90_ms': np.percentile(times_ms, 90),
        'min_ms': np.min(times_ms),
        'max_ms': np.max(times_ms),
        'alive': universe.alive_count()
    }


def main():
    """Run multi-N tick performance validation."""
    print("=" * 80)
    print("Universe.tick() Multi-N Performance")
    print("=" * 80)
    print()

    test_sizes = [16, 64, 128, 256]

    results = []
    for size in test_sizes:
        print(f"[N = {size}x{size}]")
        vec = run_tick_perf_test(size, vectorized=True)
        # Reference pass is pure Python; keep its run count low on big grids
        ref = run_tick_perf_test(size, vectorized=False, runs=7 if size <= 64 else 3)

        check_vec, check_ref = Universe(size, size), Universe(size, size)
        check_vec.tick(vectorized=True)
        check_ref.tick(vectorized=False)
        if check_vec != check_ref:
            print("  [WARN] tick strategies disagree after one generation")

        print(f"  vectorized p50: {vec['p50_ms']:.3f}ms  p90: {vec['p90_ms']:.3f}ms")
        print(f"  reference  p50: {ref['p50_ms']:.3f}ms  p90: {ref['p90_ms']:.3f}ms")
        print(f"  speedup: {ref['p50_ms'] / max(vec['p50_ms'], 1e-9):.1f}x")
        results.append((vec, ref))
        print()

    print("=" * 80)
    print("| Grid     | Cells   | vec p50 (ms) | ref p50 (ms) |")
    print("|----------|---------|--------------|--------------|")
    for vec, ref in results:
        grid = f"{vec['size']}x{vec['size']}"
        print(f"| {grid:8s} | {vec['cells']:7d} | {vec['p50_ms']:12.3f} | {ref['p50_ms']:12.3f} |")
    print("=" * 80)


if __name__ == '__main__':
    main()
