"""
Sort Metrics
============
Operation counters filled in by the merge step when a caller asks for them.
"""

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass
class SortMetrics:
    """Counters accumulated across one or more sort calls."""
    comparisons: int = 0   # key comparisons made by merge
    moves: int = 0         # element writes back into the sequence
    merges: int = 0        # merge calls that did work
    max_depth: int = 0     # deepest recursion level reached (0 = top call)

    def reset(self):
        self.comparisons = 0
        self.moves = 0
        self.merges = 0
        self.max_depth = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)
