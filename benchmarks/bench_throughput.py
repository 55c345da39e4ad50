"""Benchmark: BEM conversion and selector building throughput.

Measures how many string-to-object conversions and fresh selector
derivations can complete per second using the public bemkit APIs.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import bemkit

_ITERATIONS: int = 20_000
_SELECTOR_ITERATIONS: int = 10_000

_SAMPLE_CLASS_NAMES: tuple[str, ...] = (
    "button",
    "button__icon",
    "button--disabled",
    "text-input__field--size_large",
    "nav-menu__item--active_true",
)


def bench_convert_throughput() -> dict[str, object]:
    """Benchmark BEM string to object conversion throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    start = time.perf_counter()
    for index in range(_ITERATIONS):
        bemkit.to_bem_object(_SAMPLE_CLASS_NAMES[index % len(_SAMPLE_CLASS_NAMES)])
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "bem_convert_throughput",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_selector_throughput() -> dict[str, object]:
    """Benchmark fresh modifier selectors derived from a final base.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    base = bemkit.BemBase("text-input", is_final=True)

    start = time.perf_counter()
    for index in range(_SELECTOR_ITERATIONS):
        base.set_mod(("cid", str(index)), fresh=True).to_query_selector()
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "bem_selector_throughput",
        "iterations": _SELECTOR_ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_SELECTOR_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _SELECTOR_ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_convert_throughput, "convert_throughput_baseline.json"),
        (bench_selector_throughput, "selector_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
