"""
Merge Sort
==========
In-place, top-down merge sort over a mutable random-access sequence.

The sequence is reordered inside the requested bounds only; nothing is added
or removed.  Each merge works from a temporary copy of the subrange (or from
a caller-supplied scratch buffer), so equal elements are always taken from
the left run first and the sort is stable.

The implementation handles any sequence whose elements (or keys) support `<=`.
"""

from __future__ import annotations

from typing import Any, Callable, List, MutableSequence, Optional, TypeVar

from mergelab.sort_metrics import SortMetrics
from mergelab.sorts.sort_errors import (
    check_merge_range,
    check_sort_range,
    resolve_check_runs,
    resolve_debug_mode,
)

T = TypeVar("T")
KeyFunc = Optional[Callable[[Any], Any]]

DEBUG_MODE = resolve_debug_mode()
CHECK_RUNS = resolve_check_runs()


def merge(
    seq: MutableSequence[T],
    left: int,
    mid: int,
    right: int,
    *,
    key: KeyFunc = None,
    scratch: Optional[List[Any]] = None,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """
    Merge the sorted runs seq[left..mid] and seq[mid+1..right] in place.

    Parameters
    ----------
    seq : mutable sequence
        Target sequence (list, numpy array, ...).
    left, mid, right : int
        Inclusive bounds.  ``left == mid == right`` is accepted as a no-op.
    key : callable, optional
        Comparison key, same semantics as ``sorted(..., key=...)``.
    scratch : list, optional
        Reusable buffer of length > ``right``; the subrange is staged at the
        same offsets instead of in a fresh temporary.
    metrics : SortMetrics, optional
        Counters to update.

    Raises
    ------
    InvalidRangeError
        If the bounds do not describe two adjacent runs inside *seq*.
    """
    check_merge_range(len(seq), left, mid, right)
    if left == right:
        return
    if scratch is not None and len(scratch) <= right:
        raise ValueError(f"scratch buffer of length {len(scratch)} cannot hold index {right}")
    _merge(seq, left, mid, right, key, scratch, metrics)


def merge_sort(
    seq: MutableSequence[T],
    left: int = 0,
    right: Optional[int] = None,
    *,
    key: KeyFunc = None,
    reuse_buffer: bool = False,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """
    Sort seq[left..right] (inclusive) ascending, in place.

    ``right`` defaults to ``len(seq) - 1``, so an empty sequence is a no-op.
    With ``reuse_buffer`` one scratch list of ``len(seq)`` is shared by every
    merge of this call instead of allocating a temporary per merge.

    Raises
    ------
    InvalidRangeError
        If ``left < 0``, ``right >= len(seq)`` or ``left > right + 1``.
    """
    if right is None:
        right = len(seq) - 1
    check_sort_range(len(seq), left, right)
    if left >= right:
        return

    scratch: Optional[List[Any]] = [None] * len(seq) if reuse_buffer else None
    _merge_sort(seq, left, right, key, scratch, metrics, 0)


def _merge_sort(
    seq: MutableSequence[T],
    left: int,
    right: int,
    key: KeyFunc,
    scratch: Optional[List[Any]],
    metrics: Optional[SortMetrics],
    depth: int,
) -> None:
    if metrics is not None and depth > metrics.max_depth:
        metrics.max_depth = depth
    if left >= right:
        return

    # left half takes the extra element on odd lengths
    mid = left + (right - left) // 2
    _merge_sort(seq, left, mid, key, scratch, metrics, depth + 1)
    _merge_sort(seq, mid + 1, right, key, scratch, metrics, depth + 1)
    _merge(seq, left, mid, right, key, scratch, metrics)


def _merge(
    seq: MutableSequence[T],
    left: int,
    mid: int,
    right: int,
    key: KeyFunc,
    scratch: Optional[List[Any]],
    metrics: Optional[SortMetrics],
) -> None:
    """Unchecked merge step shared by the recursive and bottom-up sorts."""
    if scratch is None:
        # list() forces a copy; numpy slices are views
        temp = list(seq[left:right + 1])
        base = 0
    else:
        scratch[left:right + 1] = seq[left:right + 1]
        temp = scratch
        base = left

    i, i_end = base, base + (mid - left)
    j, j_end = i_end + 1, base + (right - left)

    if DEBUG_MODE:
        print(f"[MERGE DEBUG] merge [{left}..{mid}] + [{mid + 1}..{right}]")
    if CHECK_RUNS:
        assert _is_run_sorted(temp, i, i_end, key), f"left run [{left}, {mid}] is not sorted"
        assert _is_run_sorted(temp, j, j_end, key), f"right run [{mid + 1}, {right}] is not sorted"

    k = left
    comparisons = 0
    while i <= i_end and j <= j_end:
        a = temp[i]
        b = temp[j]
        comparisons += 1
        if key is None:
            take_left = a <= b
        else:
            take_left = key(a) <= key(b)
        if take_left:         # ties go left: stable
            seq[k] = a
            i += 1
        else:
            seq[k] = b
            j += 1
        k += 1

    while i <= i_end:
        seq[k] = temp[i]
        i += 1
        k += 1
    while j <= j_end:
        seq[k] = temp[j]
        j += 1
        k += 1

    if metrics is not None:
        metrics.comparisons += comparisons
        metrics.moves += right - left + 1
        metrics.merges += 1


def _is_run_sorted(buf: List[Any], start: int, end: int, key: KeyFunc) -> bool:
    for p in range(start, end):
        a, b = buf[p], buf[p + 1]
        if key is not None:
            a, b = key(a), key(b)
        if not a <= b:
            return False
    return True
