"""Benchmark: BEM string validation latency (p50/p95/mean).

Measures per-call latency of ``check`` on a valid and an invalid class
name, the latter paying for building the error.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import bemkit

_WARMUP: int = 100
_ITERATIONS: int = 5_000

_VALID = "text-input__field--size_large"
_INVALID = "text-input__field--size_large_xl"


def _measure(operation: str, value: str) -> dict[str, object]:
    for _ in range(_WARMUP):
        bemkit.validate(value)

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        bemkit.validate(value)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": operation,
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


def bench_check_latency() -> dict[str, object]:
    """Benchmark validation latency of a valid BEM string.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    return _measure("bem_check_latency_valid", _VALID)


def bench_check_error_latency() -> dict[str, object]:
    """Benchmark validation latency of an invalid BEM string."""
    return _measure("bem_check_latency_invalid", _INVALID)


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(bench_check_latency(), fh, indent=2)
    print(f"Results saved to {output_path}")
    output_path = results_dir / "latency_error_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(bench_check_error_latency(), fh, indent=2)
    print(f"Results saved to {output_path}")
