"""Benchmark: Memory held by ``BemBase`` instances."""
from __future__ import annotations

import json
import sys
import tracemalloc
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import bemkit

_ITERATIONS: int = 5_000


def bench_base_memory() -> dict[str, object]:
    """Benchmark memory used by live ``BemBase`` instances.

    Returns
    -------
    dict with keys: operation, iterations, peak_memory_kb, current_memory_kb.
    """
    tracemalloc.start()
    snapshot_before = tracemalloc.take_snapshot()

    bases = [
        bemkit.BemBase(("nav-menu", "item", ("index", str(index))))
        for index in range(_ITERATIONS)
    ]

    snapshot_after = tracemalloc.take_snapshot()
    tracemalloc.stop()

    stats = snapshot_after.compare_to(snapshot_before, "lineno")
    total_bytes = sum(stat.size_diff for stat in stats if stat.size_diff > 0)
    peak_kb = round(total_bytes / 1024, 2)

    result: dict[str, object] = {
        "operation": "bem_base_memory",
        "iterations": len(bases),
        "peak_memory_kb": peak_kb,
        "current_memory_kb": peak_kb,
        "ops_per_second": 0.0,
        "avg_latency_ms": 0.0,
    }
    print(f"[bench_memory] {result['operation']}: peak {peak_kb:.2f} KB over {_ITERATIONS} instances")
    return result


if __name__ == "__main__":
    result = bench_base_memory()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "memory_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
