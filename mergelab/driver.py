"""
Merge Sort Demo
===============
Prints a sequence, sorts it in place, and prints it again.
Run:  python -m mergelab.driver 12 11 13 5 6 7 [--strategy bottom_up] [--debug]
      python -m mergelab.driver --empty
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

import mergelab.sorts.merge_sort as merge_mod
from mergelab.sort_controller import STRATEGIES, sort_sequence

DEFAULT_VALUES = [12, 11, 13, 5, 6, 7]
RULE = "======================="


def format_sequence(seq: Iterable) -> str:
    """Space-separated values followed by a newline."""
    return " ".join(str(x) for x in seq) + "\n"


def run_demo(values: Iterable[int], *, strategy: Optional[str] = None, out: Optional[TextIO] = None) -> List[int]:
    """Print *values* before and after sorting; return the sorted list."""
    out = out or sys.stdout
    arr = list(values)

    print("Input Vec", file=out)
    out.write(format_sequence(arr))

    # sort_sequence skips the call for an empty list
    sort_sequence(arr, strategy=strategy)

    print(RULE, file=out)
    print("Sorted Vec is", file=out)
    out.write(format_sequence(arr))
    return arr


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Merge sort demo")
    parser.add_argument("values", type=int, nargs="*",
                        help="Integers to sort (default: 12 11 13 5 6 7; use --empty for no values)")
    parser.add_argument("--empty", action="store_true", help="Run the demo on an empty sequence")
    parser.add_argument("--strategy", choices=sorted(STRATEGIES), default=None,
                        help="Sort strategy (default: MERGESORT_STRATEGY or recursive)")
    parser.add_argument("--debug", action="store_true", help="Print a trace line per merge")
    args = parser.parse_args(argv)

    if args.empty and args.values:
        parser.error("--empty cannot be combined with values")
    if args.debug:
        merge_mod.DEBUG_MODE = True

    if args.empty:
        values: List[int] = []
    else:
        values = args.values or DEFAULT_VALUES
    run_demo(values, strategy=args.strategy)
    return 0


if __name__ == "__main__":
    sys.exit(main())
