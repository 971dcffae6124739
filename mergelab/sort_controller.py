"""
Sort Controller
===============
Picks a merge sort strategy (explicit name, MERGESORT_STRATEGY, or the
recursive default) and sorts a whole sequence with it.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, MutableSequence, Optional

from mergelab.sort_metrics import SortMetrics
from mergelab.sorts.bottom_up_merge_sort import bottom_up_merge_sort
from mergelab.sorts.merge_sort import merge_sort
from mergelab.sorts.sort_errors import resolve_strategy

STRATEGIES: Dict[str, Callable[..., None]] = {
    "recursive": merge_sort,
    "bottom_up": bottom_up_merge_sort,
}


def sort_sequence(
    seq: MutableSequence[Any],
    *,
    strategy: Optional[str] = None,
    key: Optional[Callable[[Any], Any]] = None,
    reuse_buffer: bool = False,
    metrics: Optional[SortMetrics] = None,
) -> MutableSequence[Any]:
    """
    Sort all of *seq* in place and return it.

    An explicit *strategy* must name one of STRATEGIES (case and surrounding
    whitespace ignored); otherwise the environment (or the default) decides.
    """
    if strategy is not None:
        name = strategy.strip().lower()
        if name not in STRATEGIES:
            raise ValueError(f"Unknown sort strategy {strategy!r}; expected one of {sorted(STRATEGIES)}")
        strategy = name

    if len(seq) == 0:
        return seq

    sort_fn = STRATEGIES[resolve_strategy(strategy)]
    sort_fn(seq, 0, len(seq) - 1, key=key, reuse_buffer=reuse_buffer, metrics=metrics)
    return seq
