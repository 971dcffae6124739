import sys
import os
import time
import csv
import argparse
from typing import Any, Callable, Dict, List, Optional

import numpy as np

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

import mergelab.sorts.merge_sort as merge_mod
from mergelab.sort_metrics import SortMetrics
from mergelab.sorts.bottom_up_merge_sort import bottom_up_merge_sort
from mergelab.sorts.merge_sort import merge_sort
from mergelab.validators import check_sort_result

SHAPES = ("random", "sorted", "reversed", "few_unique")
DEFAULT_SIZES = [1_000, 10_000, 50_000]

ALGORITHMS: Dict[str, Callable[[List[int], SortMetrics], None]] = {
    "recursive": lambda arr, m: merge_sort(arr, metrics=m),
    "scratch": lambda arr, m: merge_sort(arr, reuse_buffer=True, metrics=m),
    "bottom_up": lambda arr, m: bottom_up_merge_sort(arr, metrics=m),
    "builtin": lambda arr, m: arr.sort(),
}
ALGORITHM_LABELS = {
    "recursive": "Recursive",
    "scratch": "Recursive + Scratch",
    "bottom_up": "Bottom-Up",
    "builtin": "list.sort",
}
# list.sort keeps no counters; its comparisons/moves columns stay empty
COUNTED_ALGORITHMS = ("recursive", "scratch", "bottom_up")


def generate_input(shape: str, n: int, rng: np.random.Generator) -> List[int]:
    """Build an integer input of length n with the requested shape."""
    if shape == "random":
        values = rng.integers(0, 1_000_000, size=n)
    elif shape == "sorted":
        values = np.sort(rng.integers(0, 1_000_000, size=n))
    elif shape == "reversed":
        values = np.sort(rng.integers(0, 1_000_000, size=n))[::-1]
    elif shape == "few_unique":
        values = rng.integers(0, 8, size=n)
    else:
        raise ValueError(f"Unknown input shape {shape!r}")
    return values.tolist()


def run_single_case(case_id: int, shape: str, n: int, repeats: int, rng: np.random.Generator) -> Dict[str, Any]:
    """
    Times every algorithm on copies of one generated input.
    Keeps the best of `repeats` runs and the counters of the last run.
    """
    base = generate_input(shape, n, rng)
    result: Dict[str, Any] = {"case_id": case_id, "shape": shape, "n": n}

    for tag, sort_fn in ALGORITHMS.items():
        metrics = SortMetrics()
        best: Optional[float] = None
        arr = list(base)
        for _ in range(repeats):
            arr = list(base)
            metrics.reset()
            start = time.perf_counter()
            sort_fn(arr, metrics)
            elapsed = time.perf_counter() - start
            best = elapsed if best is None else min(best, elapsed)

        ok, reason = check_sort_result(base, arr)
        if not ok:
            print(f"  {tag} produced a bad result for {shape} n={n}: {reason}")

        result[f"{tag}_ok"] = ok
        result[f"{tag}_time"] = best
        if tag in COUNTED_ALGORITHMS:
            result[f"{tag}_comparisons"] = metrics.comparisons
            result[f"{tag}_moves"] = metrics.moves
        else:
            result[f"{tag}_comparisons"] = None
            result[f"{tag}_moves"] = None

    return result


def run_benchmark(sizes: List[int], shapes: List[str], repeats: int = 3, seed: int = 5) -> List[Dict[str, Any]]:
    """Run every (shape, size) case; returns one result row per case."""
    # per-merge trace lines would swamp the timings
    merge_mod.DEBUG_MODE = False

    rng = np.random.default_rng(seed)
    results = []
    total = len(sizes) * len(shapes)
    case_id = 0
    for n in sizes:
        for shape in shapes:
            case_id += 1
            print(f"  [{case_id}/{total}] {shape} n={n} ...", end="\r")
            results.append(run_single_case(case_id, shape, n, repeats, rng))
    print()
    return results


def write_csv(results: List[Dict[str, Any]], path: str) -> None:
    keys = results[0].keys()
    with open(path, "w", newline="") as f:
        dict_writer = csv.DictWriter(f, fieldnames=keys)
        dict_writer.writeheader()
        dict_writer.writerows(results)


def print_summary(results: List[Dict[str, Any]]) -> None:
    print("\nSummary Statistics:")
    print(f"{'Algorithm':<20} | {'Correct':<8} | {'Avg Time (s)':<12} | {'Avg Comparisons':<15}")
    print("-" * 65)

    for tag, label in ALGORITHM_LABELS.items():
        correct = sum(1 for r in results if r[f"{tag}_ok"])
        avg_time = sum(r[f"{tag}_time"] for r in results) / len(results)
        if tag in COUNTED_ALGORITHMS:
            avg_cmp = sum(r[f"{tag}_comparisons"] for r in results) / len(results)
            cmp_text = f"{avg_cmp:>15.1f}"
        else:
            cmp_text = f"{'n/a':>15}"
        print(f"{label:<20} | {correct:>3}/{len(results):<4} | {avg_time:>12.5f} | {cmp_text}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark merge sort variants")
    parser.add_argument("--sizes", type=int, nargs="+", default=DEFAULT_SIZES, help="Input lengths")
    parser.add_argument("--shapes", nargs="+", choices=SHAPES, default=list(SHAPES), help="Input shapes")
    parser.add_argument("--repeats", type=int, default=3, help="Timed runs per case (best is kept)")
    parser.add_argument("--seed", type=int, default=5, help="RNG seed")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV file")

    args = parser.parse_args(argv)

    print(f"Starting Benchmark: sizes={args.sizes}, shapes={args.shapes}, repeats={args.repeats}")
    results = run_benchmark(args.sizes, args.shapes, args.repeats, args.seed)
    print("Benchmark Complete!")

    write_csv(results, args.output)
    print(f"Results saved to {args.output}")

    print_summary(results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
