"""Micro-benchmark comparing the heap and scan solvers.

Run this module as a script to time both solvers across random graphs and
check that they agree.

Example:
```bash
python -m pathgraph.bench --trials 5 --sizes 200,800 500,2000 --out-csv out.csv
```

Use ``--mem`` to record peak memory usage and ``--verify`` to also compare
against NetworkX.
"""

from __future__ import annotations

import argparse
import csv
import statistics
import time
import tracemalloc
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Type

from .convert import reference_distances
from .exceptions import AlgorithmError, ConfigError
from .generate import generate_graph
from .graph import Graph, VertexId
from .heap_solver import HeapDijkstraSolver
from .scan_solver import ScanDijkstraSolver
from .solver import BaseSolver, SolverConfig, SolverMetrics, SSSPResult

SOLVERS: Dict[str, Type[BaseSolver]] = {
    "heap": HeapDijkstraSolver,
    "scan": ScanDijkstraSolver,
}


@dataclass
class BenchResult:
    """Result of a single benchmarking run."""

    metrics: Dict[str, SolverMetrics]
    disagreements: int
    reference_ok: Optional[bool]


def _timed(
    name: str, G: Graph, source: VertexId, track_mem: bool
) -> Tuple[SSSPResult, SolverMetrics]:
    solver = SOLVERS[name](G, source, config=SolverConfig(track_paths=False))
    peak_mib = None
    if track_mem:
        tracemalloc.start()
    try:
        t0 = time.perf_counter()
        res = solver.solve()
        wall_ms = (time.perf_counter() - t0) * 1000.0
        if track_mem:
            peak_mib = tracemalloc.get_traced_memory()[1] / (1024 * 1024)
    finally:
        if track_mem:
            tracemalloc.stop()
    return res, solver.metrics(wall_ms=wall_ms, peak_mib=peak_mib)


def compare_distances(a: Dict[VertexId, int], b: Dict[VertexId, int]) -> int:
    """Count identities whose distance differs or that only one table has."""
    return sum(1 for k in a.keys() | b.keys() if a.get(k) != b.get(k))


def run_once(
    n: int,
    m: int,
    graph_type: str = "erdos_renyi",
    weight_dist: str = "uniform",
    seed: int = 0,
    track_mem: bool = False,
    verify: bool = False,
) -> BenchResult:
    """Run both solvers once on a fresh random graph.

    Args:
        n: Number of vertices.
        m: Number of edges.
        graph_type: Generator family.
        weight_dist: Generator weight distribution.
        seed: Seed for the random graph generator.
        track_mem: Record peak memory with :mod:`tracemalloc`.
        verify: Also compare the heap result with NetworkX.

    Returns:
        Metrics per solver plus agreement information.
    """
    gen = generate_graph(
        n=n, m=m, graph_type=graph_type, weight_dist=weight_dist, seed=seed  # type: ignore[arg-type]
    )
    heap_res, heap_m = _timed("heap", gen.graph, gen.source, track_mem)
    scan_res, scan_m = _timed("scan", gen.graph, gen.source, track_mem)

    reference_ok = None
    if verify:
        ref = reference_distances(gen.graph, gen.source)
        reference_ok = compare_distances(heap_res.distances, ref) == 0
    return BenchResult(
        metrics={"heap": heap_m, "scan": scan_m},
        disagreements=compare_distances(heap_res.distances, scan_res.distances),
        reference_ok=reference_ok,
    )


def _p95(values: List[float]) -> float:
    if len(values) < 2:
        return values[0]
    return statistics.quantiles(values, n=100, method="inclusive")[94]


def main(argv: List[str] | None = None) -> int:
    """Run benchmarking trials and optionally record results.

    Args:
        argv: Optional argument list for testing.

    Returns:
        ``0`` when every run agreed, ``1`` otherwise.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--trials", type=int, default=1, help="Number of trials per configuration")
    parser.add_argument(
        "--sizes",
        nargs="+",
        default=["50,200", "100,400"],
        help="Size pairs as n,m (e.g. 200,800). Defaults to a small demo.",
    )
    parser.add_argument("--seed-base", type=int, default=0, help="Base seed for random graphs")
    parser.add_argument(
        "--graph-type", choices=["erdos_renyi", "dag", "grid"], default="erdos_renyi"
    )
    parser.add_argument(
        "--weight-dist", choices=["uniform", "small_int", "zero_heavy"], default="uniform"
    )
    parser.add_argument("--out-csv", type=Path, help="Optional path to write per-trial CSV data")
    parser.add_argument("--mem", action="store_true", help="Profile peak memory usage (MiB)")
    parser.add_argument("--verify", action="store_true", help="Cross-check against NetworkX")
    args = parser.parse_args(argv)

    if args.trials < 1:
        parser.error("--trials must be >= 1")
    sizes: List[Tuple[int, int]] = []
    for item in args.sizes:
        try:
            n_str, m_str = item.split(",")
            sizes.append((int(n_str), int(m_str)))
        except ValueError:
            parser.error(f"invalid size specification '{item}'")

    rows: List[List[object]] = []
    timings: Dict[Tuple[int, int, str], List[float]] = {}
    failures = 0

    for n, m in sizes:
        for trial in range(args.trials):
            try:
                res = run_once(
                    n=n,
                    m=m,
                    graph_type=args.graph_type,
                    weight_dist=args.weight_dist,
                    seed=args.seed_base + trial,
                    track_mem=args.mem,
                    verify=args.verify,
                )
            except (ConfigError, AlgorithmError) as exc:
                parser.error(str(exc))
            if res.disagreements or res.reference_ok is False:
                failures += 1
            for name, mtx in res.metrics.items():
                timings.setdefault((n, m, name), []).append(mtx.wall_ms)
                rows.append(
                    [
                        mtx.n,
                        mtx.m,
                        name,
                        trial,
                        f"{mtx.wall_ms:.6f}",
                        mtx.counters["edges_relaxed"],
                        res.disagreements,
                        "" if mtx.peak_mib is None else f"{mtx.peak_mib:.6f}",
                    ]
                )

    if args.out_csv:
        with args.out_csv.open("w", newline="") as fh:
            writer = csv.writer(fh)
            writer.writerow(
                ["n", "m", "algorithm", "trial", "wall_ms", "edges_relaxed", "disagreements", "peak_mib"]
            )
            writer.writerows(rows)

    print(f"{'n':>6} {'m':>7} {'algo':>5} {'med_ms':>10} {'p95_ms':>10}")
    for (n, m, name), times in timings.items():
        print(f"{n:6d} {m:7d} {name:>5} {statistics.median(times):10.3f} {_p95(times):10.3f}")
    if failures:
        print(f"{failures} run(s) disagreed")
    return 1 if failures else 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
