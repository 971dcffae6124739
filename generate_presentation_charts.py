"""
Presentation Chart Generator
=============================
Generates charts comparing the merge sort variants against list.sort.
Run:  python generate_presentation_charts.py [--quick] [--out DIR]
Output: presentation_charts/ folder with 3 PNG files.
"""

import sys
import os
import argparse
import numpy as np
from typing import Any, Dict, List

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

from benchmark_sorts import ALGORITHM_LABELS, SHAPES, print_summary, run_benchmark

# ------------------------------------------------------------------
# Color Palette & Styling
# ------------------------------------------------------------------
COLORS = {
    "recursive": "#339AF0",   # Sky Blue
    "scratch":   "#51CF66",   # Emerald Green
    "bottom_up": "#FF6B6B",   # Coral Red
    "builtin":   "#E0AF68",   # Gold
}
BG_COLOR = "#1A1B26"
CARD_COLOR = "#24283B"
TEXT_COLOR = "#C0CAF5"
GRID_COLOR = "#414868"


def setup_style():
    """Apply a dark, presentation-friendly matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 13,
        "axes.titlesize": 16,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "legend.fontsize": 11,
        "figure.dpi": 180,
        "savefig.dpi": 180,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


def _finish(ax):
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)


def _rows_for_shape(results: List[Dict[str, Any]], shape: str) -> List[Dict[str, Any]]:
    return sorted((r for r in results if r["shape"] == shape), key=lambda r: r["n"])


# ------------------------------------------------------------------
# Chart Generators
# ------------------------------------------------------------------
def chart_1_time_vs_n(results, out_dir, shape="random"):
    """Log-log line chart: best time vs input length."""
    rows = _rows_for_shape(results, shape)
    fig, ax = plt.subplots(figsize=(10, 6))
    sizes = [r["n"] for r in rows]

    for tag, label in ALGORITHM_LABELS.items():
        times = [r[f"{tag}_time"] for r in rows]
        ax.plot(sizes, times, "o-", label=label, color=COLORS[tag],
                linewidth=2.5, markersize=8, zorder=3)

    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Input Length n")
    ax.set_ylabel("Best Time (seconds)")
    ax.set_title(f"Sort Time vs n ({shape} input)", fontsize=18, pad=15)
    ax.legend(loc="upper left")
    ax.grid(True, zorder=0)
    _finish(ax)

    fig.savefig(os.path.join(out_dir, "1_time_vs_n.png"))
    plt.close(fig)
    print("  Chart 1: Time vs n")


def chart_2_comparisons(results, out_dir, shape="random"):
    """Measured merge comparisons against the n*log2(n) bound."""
    rows = _rows_for_shape(results, shape)
    fig, ax = plt.subplots(figsize=(10, 6))
    sizes = np.array([r["n"] for r in rows], dtype=float)
    bound = sizes * np.log2(np.maximum(sizes, 2))

    ax.plot(sizes, bound, "--", label="n log2 n", color=TEXT_COLOR, linewidth=1.5, zorder=2)
    for tag in ("recursive", "bottom_up"):
        cmps = [r[f"{tag}_comparisons"] for r in rows]
        ax.plot(sizes, cmps, "o-", label=ALGORITHM_LABELS[tag], color=COLORS[tag],
                linewidth=2.5, markersize=8, zorder=3)

    ax.set_xlabel("Input Length n")
    ax.set_ylabel("Comparisons")
    ax.set_title("Comparisons vs n log2 n", fontsize=18, pad=15)
    ax.legend(loc="upper left")
    ax.grid(True, zorder=0)
    _finish(ax)

    fig.savefig(os.path.join(out_dir, "2_comparisons.png"))
    plt.close(fig)
    print("  Chart 2: Comparisons")


def chart_3_shapes(results, out_dir):
    """Grouped bars: time per input shape at the largest n."""
    largest = max(r["n"] for r in results)
    rows = {r["shape"]: r for r in results if r["n"] == largest}
    shapes = [s for s in SHAPES if s in rows]

    fig, ax = plt.subplots(figsize=(10, 6))
    x = np.arange(len(shapes))
    width = 0.2

    for i, (tag, label) in enumerate(ALGORITHM_LABELS.items()):
        times = [rows[s][f"{tag}_time"] for s in shapes]
        ax.bar(x + i * width, times, width, label=label,
               color=COLORS[tag], edgecolor="none", alpha=0.9, zorder=3)

    ax.set_xticks(x + width * 1.5)
    ax.set_xticklabels(shapes, fontsize=11)
    ax.set_ylabel("Best Time (seconds)")
    ax.set_title(f"Time by Input Shape (n={largest})", fontsize=18, pad=15)
    ax.legend(loc="upper left")
    ax.grid(axis="y", zorder=0)
    _finish(ax)

    fig.savefig(os.path.join(out_dir, "3_shapes.png"))
    plt.close(fig)
    print("  Chart 3: Input Shapes")


# ------------------------------------------------------------------
# Main
# ------------------------------------------------------------------
def main():
    parser = argparse.ArgumentParser(description="Generate Presentation Charts")
    parser.add_argument("--quick", action="store_true",
                        help="Quick mode: small sizes, one repeat")
    parser.add_argument("--repeats", type=int, default=3,
                        help="Timed runs per case (default: 3)")
    parser.add_argument("--out", type=str, default=None,
                        help="Output folder (default: ./presentation_charts)")
    args = parser.parse_args()

    out_dir = args.out or os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                       "presentation_charts")
    os.makedirs(out_dir, exist_ok=True)

    setup_style()

    if args.quick:
        sizes = [100, 1_000, 5_000]
        repeats = 1
    else:
        sizes = [100, 1_000, 10_000, 50_000, 100_000]
        repeats = args.repeats

    print("Merge Sort Benchmark - Presentation Edition")
    print(f"  Sizes         : {sizes}")
    print(f"  Repeats       : {repeats}")
    print(f"  Output folder : {out_dir}")
    print()

    print("Phase 1/2: Running Benchmarks...")
    results = run_benchmark(sizes, list(SHAPES), repeats)

    print("\nPhase 2/2: Generating Charts...")
    chart_1_time_vs_n(results, out_dir)
    chart_2_comparisons(results, out_dir)
    chart_3_shapes(results, out_dir)

    print_summary(results)
    print(f"\nAll 3 charts saved to: {out_dir}")


if __name__ == "__main__":
    main()
