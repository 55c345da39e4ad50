"""Render saved bemkit benchmark results as one table."""
from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

RESULT_FILES: tuple[str, ...] = (
    "convert_throughput_baseline.json",
    "selector_throughput_baseline.json",
    "latency_baseline.json",
    "latency_error_baseline.json",
    "memory_baseline.json",
)


def _load(path: Path) -> dict[str, object] | None:
    if not path.exists():
        return None
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)  # type: ignore[return-value]


def _cell(value: float, fmt: str) -> str:
    return fmt.format(value) if value > 0 else "n/a"


def build_table(results_dir: Path) -> Table:
    """Return a table with one row per result file found in ``results_dir``."""
    table = Table(title="bemkit benchmark results")
    table.add_column("Operation", min_width=30)
    table.add_column("Ops/sec", justify="right")
    table.add_column("Avg latency", justify="right")
    table.add_column("Peak memory", justify="right")

    for fname in RESULT_FILES:
        data = _load(results_dir / fname)
        if data is None:
            table.add_row(f"[dim]{fname} (not run)[/dim]", "", "", "")
            continue
        table.add_row(
            str(data.get("operation", fname)),
            _cell(float(data.get("ops_per_second", 0)), "{:,.0f}"),  # type: ignore[arg-type]
            _cell(float(data.get("avg_latency_ms", 0)), "{:.4f}ms"),  # type: ignore[arg-type]
            _cell(float(data.get("peak_memory_kb", 0)), "{:,.0f}KB"),  # type: ignore[arg-type]
        )
    return table


def main() -> None:
    console = Console()
    console.print(build_table(Path(__file__).parent / "results"))
    console.print("Run [bold]python benchmarks/bench_*.py[/bold] to refresh the results.")


if __name__ == "__main__":
    main()
