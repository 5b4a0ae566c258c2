from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from statistics import mean
from time import perf_counter
from typing import Callable, Dict, List, Optional, Sequence


@dataclass
class BenchmarkResult:
    """
    Structured summary for a single benchmark trial.
    """

    benchmark: str
    mode: str
    trial: int
    wall_time_s: float
    operations: int
    final_size: int
    extra_metrics: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return asdict(self)


def run_single_trial(
    benchmark_name: str,
    mode: str,
    trial: int,
    *,
    workload_fn: Callable[[], int],
    operations: int,
    extra_metrics: Optional[Dict[str, float]] = None,
) -> BenchmarkResult:
    """
    Execute a single workload and record its wall time.

    Args:
        benchmark_name: Label for the benchmark family (e.g. "find_or_add").
        mode: Workload variant ("add", "find_or_add", etc.).
        trial: Integer trial index.
        workload_fn: Callable running the workload; returns the final map size.
        operations: Number of container operations the workload performs.
        extra_metrics: Optional dictionary of custom metrics to attach.
    """
    start = perf_counter()
    final_size = workload_fn()
    wall = perf_counter() - start

    return BenchmarkResult(
        benchmark=benchmark_name,
        mode=mode,
        trial=trial,
        wall_time_s=wall,
        operations=operations,
        final_size=int(final_size),
        extra_metrics=extra_metrics or {},
    )


def summarize(results: Sequence[BenchmarkResult]) -> List[dict]:
    """
    Aggregate benchmark results by mode and return summaries suitable for printing.
    """
    summaries: List[dict] = []
    by_mode: dict[str, List[BenchmarkResult]] = {}
    for res in results:
        by_mode.setdefault(res.mode, []).append(res)

    for mode, group in sorted(by_mode.items(), key=lambda kv: kv[0]):
        wall = mean(r.wall_time_s for r in group)
        ops = mean(r.operations for r in group)
        summaries.append(
            {
                "mode": mode,
                "trials": len(group),
                "wall_time_mean_s": wall,
                "ops_per_s": ops / wall if wall > 0 else None,
                "final_size_mean": float(mean(r.final_size for r in group)),
            }
        )
    return summaries


def export_json(results: Sequence[BenchmarkResult], destination: Path) -> None:
    """
    Write raw benchmark results to JSON for later analysis.
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    payload = [res.to_dict() for res in results]
    destination.write_text(json.dumps(payload, indent=2))


SUMMARY_COLUMNS = ("mode", "trials", "wall_time_mean_s", "ops_per_s", "final_size_mean")


def _cell(value: object) -> str:
    if value is None:
        return "N/A"
    if isinstance(value, float):
        return f"{value:.4f}"
    return str(value)


def format_summary_table(summary: Sequence[dict]) -> str:
    """
    Render aggregated summaries as a pipe-separated table.
    """
    if not summary:
        return "No results recorded."

    rows = [[_cell(row[col]) for col in SUMMARY_COLUMNS] for row in summary]
    widths = [max(len(col), *(len(r[i]) for r in rows)) for i, col in enumerate(SUMMARY_COLUMNS)]

    lines = [" | ".join(col.ljust(w) for col, w in zip(SUMMARY_COLUMNS, widths))]
    lines.append("-+-".join("-" * w for w in widths))
    lines.extend(" | ".join(cell.ljust(w) for cell, w in zip(r, widths)) for r in rows)
    return "\n".join(lines)
