"""
Sort Validators
===============
Checks for the properties every sort result must have: ordered, same
elements as the input, and equal keys kept in input order.
"""

from collections import Counter


def _identity(x):
    return x


def is_sorted(seq, key=None):
    """True when every adjacent pair is in non-decreasing key order."""
    k = key or _identity
    return all(k(seq[i]) <= k(seq[i + 1]) for i in range(len(seq) - 1))


def is_permutation(before, after):
    """
    True when *after* holds exactly the elements of *before* (as a multiset).
    Unhashable elements are compared through sorted copies, and elements
    that are neither hashable nor orderable by plain equality matching.
    """
    if len(before) != len(after):
        return False
    try:
        return Counter(before) == Counter(after)
    except TypeError:
        pass
    try:
        return sorted(before) == sorted(after)
    except TypeError:
        pass

    remaining = list(after)
    for x in before:
        try:
            remaining.remove(x)
        except ValueError:
            return False
    return True


def is_stable(before, after, key=None):
    """
    True when *after* is the stable ordering of *before*: elements with equal
    keys appear in the same relative order they had in the input.
    """
    k = key or _identity
    order = sorted(range(len(before)), key=lambda idx: k(before[idx]))
    return [before[idx] for idx in order] == list(after)


def check_sort_result(before, after, key=None):
    """
    Validate a sort result against its input.
    Returns: (bool, reason)
    """
    if len(before) != len(after):
        return False, "Length changed"
    if not is_permutation(before, after):
        return False, "Elements changed"
    if not is_sorted(after, key):
        return False, "Not sorted"
    if not is_stable(before, after, key):
        return False, "Equal keys reordered"
    return True, "OK"
