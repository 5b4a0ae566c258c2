#!/usr/bin/env python
"""
Verification suite for sparse-ids: lint, pytest, smoke checks and an
optional in-process run of the find_or_add scaling benchmark.
"""

from __future__ import annotations

import argparse
import json
import platform
import shutil
import subprocess
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]

for _path in (REPO_ROOT / "src", REPO_ROOT):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

from sparse_ids import SparseIdMap, summarize_occupancy  # noqa: E402


@dataclass
class StepResult:
    name: str
    success: bool
    details: str


def _subprocess_step(name: str, command: Sequence[str]) -> StepResult:
    print(f"\n[run] {name}: {' '.join(command)}", flush=True)
    completed = subprocess.run(  # noqa: S603
        command, cwd=str(REPO_ROOT), capture_output=True, text=True
    )
    output = (completed.stdout + completed.stderr).strip()
    if output:
        print(output, flush=True)
    return StepResult(name, completed.returncode == 0, f"exit code {completed.returncode}")


def lint_step() -> Optional[StepResult]:
    ruff_exe = shutil.which("ruff")
    if ruff_exe is None:
        print("[warn] 'ruff' not found on PATH; skipping lint step.", flush=True)
        return None
    return _subprocess_step("lint", [ruff_exe, "check", "."])


def pytest_steps(suites: Sequence[str], pytest_args: Sequence[str]) -> List[StepResult]:
    return [
        _subprocess_step(f"pytest-{suite}", [sys.executable, "-m", "pytest", f"tests/{suite}", *pytest_args])
        for suite in suites
    ]


def _smoke_append() -> str:
    id_map: SparseIdMap[str] = SparseIdMap()
    ids = [id_map.add(v) for v in "abc"]
    assert ids == [0, 1, 2], ids
    id_map.remove(1)
    assert id_map.add("d") == 3, "removed id was reused"
    return "add is monotonic and skips holes"


def _smoke_find_or_add() -> str:
    id_map: SparseIdMap[str] = SparseIdMap()
    first = id_map.find_or_add("e")
    assert id_map.find_or_add("e") == first
    return "find_or_add returns the existing id"


def _smoke_negative_id() -> str:
    id_map: SparseIdMap[str] = SparseIdMap()
    id_map.add("keep")
    try:
        id_map.put(-1, "x")
    except ValueError:
        assert id_map.size() == 1
        return "negative id rejected, map unchanged"
    raise AssertionError("negative id accepted")


def _smoke_occupancy() -> str:
    id_map: SparseIdMap[str] = SparseIdMap()
    for v in "abc":
        id_map.add(v)
    id_map.remove(1)
    holes = summarize_occupancy(id_map).holes
    assert holes == [1], holes
    return "hole at id 1 reported"


SMOKE_CHECKS: List[Callable[[], str]] = [
    _smoke_append,
    _smoke_find_or_add,
    _smoke_negative_id,
    _smoke_occupancy,
]


def smoke_steps() -> List[StepResult]:
    results: List[StepResult] = []
    for check in SMOKE_CHECKS:
        name = check.__name__.removeprefix("_smoke_")
        try:
            results.append(StepResult(name, True, check()))
        except AssertionError as exc:
            results.append(StepResult(name, False, str(exc) or "assertion failed"))
    return results


def benchmark_step(profile: str, trials: int) -> StepResult:
    from benchmarks.find_or_add_scaling import parse_args, run_benchmark
    from benchmarks.utils import format_summary_table, summarize

    args = parse_args(["--profile", profile, "--trials", str(trials)])
    summary = summarize(run_benchmark(args))
    print(f"\n{format_summary_table(summary)}", flush=True)
    return StepResult("benchmark", True, f"{len(summary)} modes, profile {profile}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--skip-lint", action="store_true")
    parser.add_argument("--suites", nargs="*", default=["unit", "integration"])
    parser.add_argument("--benchmark-profile", choices=["small", "medium", "large"], default=None)
    parser.add_argument("--trials", type=int, default=1)
    parser.add_argument("--summary", type=Path, help="Optional JSON summary path.")
    parser.add_argument("--pytest-args", nargs=argparse.REMAINDER, default=[])
    args = parser.parse_args()

    print(f"python {platform.python_version()} on {platform.platform()}", flush=True)

    steps: List[StepResult] = []
    if not args.skip_lint:
        lint = lint_step()
        if lint is not None:
            steps.append(lint)
    steps.extend(pytest_steps(args.suites, args.pytest_args))
    steps.extend(smoke_steps())
    if args.benchmark_profile:
        steps.append(benchmark_step(args.benchmark_profile, args.trials))

    print("\nSummary:")
    for step in steps:
        print(f"- {'PASS' if step.success else 'FAIL':<4} {step.name}: {step.details}")

    if args.summary:
        args.summary.parent.mkdir(parents=True, exist_ok=True)
        args.summary.write_text(json.dumps([asdict(s) for s in steps], indent=2))

    if not all(step.success for step in steps):
        sys.exit(1)


if __name__ == "__main__":
    main()
