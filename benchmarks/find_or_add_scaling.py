"""
Compare automatic append against find-or-add over distinct values.

Both operations scan the whole map on every call (next_free_id for add,
index_of plus next_free_id for find_or_add), so n insertions cost O(n^2).
The gap between the two modes is the cost of the value search.
"""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Callable, Dict, List

from benchmarks.utils import (
    BenchmarkResult,
    export_json,
    format_summary_table,
    run_single_trial,
    summarize,
)
from sparse_ids import SparseIdMap

PROFILES = {
    "small": {"values": 250, "remove_fraction": 0.1},
    "medium": {"values": 1_000, "remove_fraction": 0.1},
    "large": {"values": 4_000, "remove_fraction": 0.1},
}


def _make_values(count: int, seed: int) -> List[str]:
    rng = random.Random(seed)
    values = [f"slot-{i}" for i in range(count)]
    rng.shuffle(values)
    return values


def _add_workload(values: List[str], remove_fraction: float, seed: int) -> Callable[[], int]:
    def run() -> int:
        rng = random.Random(seed)
        id_map: SparseIdMap[str] = SparseIdMap()
        for value in values:
            id_map.add(value)
            if rng.random() < remove_fraction:
                id_map.remove(rng.randrange(id_map.next_free_id()))
        return id_map.size()

    return run


def _find_or_add_workload(
    values: List[str], remove_fraction: float, seed: int
) -> Callable[[], int]:
    def run() -> int:
        rng = random.Random(seed)
        id_map: SparseIdMap[str] = SparseIdMap()
        for value in values:
            id_map.find_or_add(value)
            # second lookup always hits
            id_map.find_or_add(value)
            if rng.random() < remove_fraction:
                id_map.remove(rng.randrange(id_map.next_free_id()))
        return id_map.size()

    return run


WORKLOADS: Dict[str, Callable[[List[str], float, int], Callable[[], int]]] = {
    "add": _add_workload,
    "find_or_add": _find_or_add_workload,
}

OPS_PER_VALUE = {"add": 1, "find_or_add": 2}


def run_benchmark(args: argparse.Namespace) -> list[BenchmarkResult]:
    results: list[BenchmarkResult] = []
    for mode in args.modes:
        factory = WORKLOADS[mode]
        for trial in range(args.trials):
            seed = args.seed + trial
            values = _make_values(args.values, seed)
            result = run_single_trial(
                "find_or_add_scaling",
                mode,
                trial,
                workload_fn=factory(values, args.remove_fraction, seed),
                operations=len(values) * OPS_PER_VALUE[mode],
                extra_metrics={"values": float(len(values))},
            )
            results.append(result)
    return results


def _apply_profile(args: argparse.Namespace) -> argparse.Namespace:
    for key, value in PROFILES[args.profile].items():
        if getattr(args, key) is None:
            setattr(args, key, value)
    return args


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--modes", nargs="+", choices=WORKLOADS.keys(), default=["add", "find_or_add"])
    parser.add_argument("--trials", type=int, default=3)
    parser.add_argument("--seed", type=int, default=2024)
    parser.add_argument("--profile", choices=PROFILES.keys(), default="medium")
    parser.add_argument("--values", type=int, default=None)
    parser.add_argument("--remove-fraction", type=float, default=None)
    parser.add_argument("--export", type=Path, help="Optional JSON output path.")
    args = parser.parse_args(argv)
    return _apply_profile(args)


def main() -> None:
    args = parse_args()
    results = run_benchmark(args)
    summary = summarize(results)
    print(format_summary_table(summary))

    if args.export:
        export_json(results, args.export)
        print(f"\nSaved raw results to {args.export}")


if __name__ == "__main__":
    main()
