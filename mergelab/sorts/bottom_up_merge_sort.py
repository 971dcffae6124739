"""
Bottom-Up Merge Sort
====================
Iterative variant of the merge sort: merges adjacent runs of width 1, 2, 4,
... from left to right until one run covers the whole range.

No recursion, so depth does not grow with the input.  Uses the same merge
step as the recursive sort and produces the identical (stable) result.
"""

from __future__ import annotations

from typing import Any, List, MutableSequence, Optional, TypeVar

from mergelab.sort_metrics import SortMetrics
from mergelab.sorts.merge_sort import KeyFunc, _merge
from mergelab.sorts.sort_errors import check_sort_range

T = TypeVar("T")


def bottom_up_merge_sort(
    seq: MutableSequence[T],
    left: int = 0,
    right: Optional[int] = None,
    *,
    key: KeyFunc = None,
    reuse_buffer: bool = False,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """Sort seq[left..right] ascending in place; same contract as merge_sort()."""
    if right is None:
        right = len(seq) - 1
    check_sort_range(len(seq), left, right)
    if left >= right:
        return

    scratch: Optional[List[Any]] = [None] * len(seq) if reuse_buffer else None
    n = right - left + 1
    width = 1
    while width < n:
        # a trailing run with no partner is already sorted
        for lo in range(left, right + 1 - width, 2 * width):
            mid = lo + width - 1
            hi = min(lo + 2 * width - 1, right)
            _merge(seq, lo, mid, hi, key, scratch, metrics)
        width *= 2
