"""
Sort range errors and runtime switches.
"""

from __future__ import annotations

import os
from typing import Optional

DEFAULT_STRATEGY = "recursive"
KNOWN_STRATEGIES = ("recursive", "bottom_up")
_TRUTHY = ("1", "true", "yes", "on")


class InvalidRangeError(ValueError):
    """
    Raised when sort or merge bounds fall outside the sequence, or do not
    describe a (possibly empty) contiguous range.
    """

    def __init__(
        self,
        message: str,
        *,
        left: int | None = None,
        right: int | None = None,
        length: int | None = None,
        mid: int | None = None,
    ) -> None:
        super().__init__(message)
        self.left = left
        self.right = right
        self.length = length
        self.mid = mid


def check_sort_range(length: int, left: int, right: int) -> None:
    """
    Validate bounds for sorting seq[left..right] (inclusive).

    ``left == right + 1`` is the empty range and is accepted.
    """
    if left < 0 or right >= length or left > right + 1:
        raise InvalidRangeError(
            f"Invalid sort range [{left}, {right}] for sequence of length {length}",
            left=left,
            right=right,
            length=length,
        )


def check_merge_range(length: int, left: int, mid: int, right: int) -> None:
    """
    Validate bounds for merging runs [left, mid] and [mid+1, right].

    Either left <= mid < right < length, or the single-element case
    left == mid == right.
    """
    single = left == mid == right
    if left < 0 or right >= length or not (left <= mid <= right) or (mid == right and not single):
        raise InvalidRangeError(
            f"Invalid merge bounds left={left} mid={mid} right={right} for sequence of length {length}",
            left=left,
            right=right,
            length=length,
            mid=mid,
        )


def _flag_from_env(name: str) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return False
    return raw.strip().lower() in _TRUTHY


def resolve_debug_mode() -> bool:
    """MERGESORT_DEBUG turns on per-merge trace lines."""
    return _flag_from_env("MERGESORT_DEBUG")


def resolve_check_runs() -> bool:
    """MERGESORT_CHECK_RUNS turns on the sorted-run precondition assertion."""
    return _flag_from_env("MERGESORT_CHECK_RUNS")


def resolve_strategy(explicit: Optional[str] = None) -> str:
    """
    Resolve the sort strategy name.

    Priority:
    1) explicit argument
    2) env MERGESORT_STRATEGY
    3) DEFAULT_STRATEGY
    """
    raw = explicit
    if raw is None:
        raw = os.getenv("MERGESORT_STRATEGY")
    if raw is None:
        return DEFAULT_STRATEGY

    name = raw.strip().lower()
    if name in KNOWN_STRATEGIES:
        return name
    return DEFAULT_STRATEGY
