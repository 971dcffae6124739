import contextlib
import io
import os
import random
import sys
import unittest

import numpy as np

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import mergelab.sorts.merge_sort as merge_mod
from mergelab.sort_metrics import SortMetrics
from mergelab.sorts.merge_sort import merge, merge_sort
from mergelab.sorts.sort_errors import InvalidRangeError


class TestMerge(unittest.TestCase):
    """Tests for the merge step on its own."""

    def test_two_single_runs(self):
        arr = [2, 1]
        merge(arr, 0, 0, 1)
        self.assertEqual(arr, [1, 2])

    def test_only_touches_range(self):
        arr = [9, 3, 5, 1, 4, 0]
        merge(arr, 1, 2, 4)
        self.assertEqual(arr, [9, 1, 3, 4, 5, 0])

    def test_left_run_exhausted_first(self):
        arr = [1, 2, 3, 4, 5, 6]
        merge(arr, 0, 2, 5)
        self.assertEqual(arr, [1, 2, 3, 4, 5, 6])

    def test_single_element_is_noop(self):
        arr = [3, 1, 2]
        merge(arr, 1, 1, 1)
        self.assertEqual(arr, [3, 1, 2])

    def test_ties_taken_from_left_run(self):
        arr = [(1, 'a'), (2, 'b'), (1, 'c'), (2, 'd')]
        merge(arr, 0, 1, 3, key=lambda p: p[0])
        self.assertEqual(arr, [(1, 'a'), (1, 'c'), (2, 'b'), (2, 'd')])

    def test_with_scratch_buffer(self):
        arr = [9, 3, 5, 1, 4, 0]
        scratch = [None] * len(arr)
        merge(arr, 1, 2, 4, scratch=scratch)
        self.assertEqual(arr, [9, 1, 3, 4, 5, 0])

    def test_scratch_too_short(self):
        with self.assertRaises(ValueError):
            merge([2, 1], 0, 0, 1, scratch=[None])

    def test_invalid_bounds(self):
        for bounds in [(0, 2, 2), (2, 1, 3), (0, 1, 3), (-1, 0, 1)]:
            with self.subTest(bounds=bounds):
                with self.assertRaises(InvalidRangeError):
                    merge([1, 2, 3], *bounds)

    def test_numpy_array(self):
        arr = np.array([4, 8, 1, 9])
        merge(arr, 0, 1, 3)
        np.testing.assert_array_equal(arr, [1, 4, 8, 9])

    def test_metrics(self):
        metrics = SortMetrics()
        arr = [11, 12, 13, 5, 6, 7]
        merge(arr, 0, 2, 5, metrics=metrics)
        self.assertEqual(metrics.comparisons, 3)
        self.assertEqual(metrics.moves, 6)
        self.assertEqual(metrics.merges, 1)


class TestMergeSort(unittest.TestCase):
    """Tests for the recursive merge sort."""

    def test_reference_input(self):
        arr = [12, 11, 13, 5, 6, 7]
        merge_sort(arr, 0, 5)
        self.assertEqual(arr, [5, 6, 7, 11, 12, 13])

    def test_single_element(self):
        arr = [5]
        merge_sort(arr, 0, 0)
        self.assertEqual(arr, [5])

    def test_empty_list(self):
        arr = []
        merge_sort(arr)
        self.assertEqual(arr, [])
        merge_sort(arr, 0, -1)
        self.assertEqual(arr, [])

    def test_empty_range_inside_list(self):
        arr = [3, 1]
        merge_sort(arr, 1, 0)
        self.assertEqual(arr, [3, 1])

    def test_default_bounds(self):
        arr = [5, 4, 3, 2, 1]
        merge_sort(arr)
        self.assertEqual(arr, [1, 2, 3, 4, 5])

    def test_partial_range(self):
        arr = [9, 8, 7, 6, 5, 4, 3]
        merge_sort(arr, 2, 5)
        self.assertEqual(arr, [9, 8, 4, 5, 6, 7, 3])

    def test_duplicates(self):
        arr = [3, 1, 4, 1, 5, 9, 2, 6]
        merge_sort(arr)
        self.assertEqual(arr, [1, 1, 2, 3, 4, 5, 6, 9])

    def test_all_equal(self):
        arr = [7] * 9
        merge_sort(arr)
        self.assertEqual(arr, [7] * 9)

    def test_stability(self):
        """Equal keys keep their original order."""
        rng = random.Random(11)
        data = [(rng.randint(0, 4), i) for i in range(200)]
        arr = list(data)
        merge_sort(arr, key=lambda p: p[0])
        self.assertEqual(arr, sorted(data, key=lambda p: p[0]))
        for a, b in zip(arr, arr[1:]):
            if a[0] == b[0]:
                self.assertLess(a[1], b[1])

    def test_matches_builtin_on_random_inputs(self):
        rng = random.Random(123)
        for n in range(0, 80):
            data = [rng.randint(-50, 50) for _ in range(n)]
            arr = list(data)
            merge_sort(arr)
            self.assertEqual(arr, sorted(data))

    def test_idempotent(self):
        arr = [4, 2, 9, 2, 0]
        merge_sort(arr)
        once = list(arr)
        merge_sort(arr)
        self.assertEqual(arr, once)

    def test_reuse_buffer_gives_same_result(self):
        rng = random.Random(7)
        data = [rng.uniform(-100, 100) for _ in range(300)]
        a, b = list(data), list(data)
        merge_sort(a)
        merge_sort(b, reuse_buffer=True)
        self.assertEqual(a, b)

    def test_numpy_array(self):
        arr = np.array([12, 11, 13, 5, 6, 7], dtype=np.int32)
        merge_sort(arr, reuse_buffer=True)
        np.testing.assert_array_equal(arr, [5, 6, 7, 11, 12, 13])

    def test_metrics_reference_input(self):
        metrics = SortMetrics()
        merge_sort([12, 11, 13, 5, 6, 7], metrics=metrics)
        self.assertEqual(metrics.as_dict(), {"comparisons": 9, "moves": 16, "merges": 5, "max_depth": 3})

    def test_depth_is_ceil_log2(self):
        for n in range(1, 70):
            metrics = SortMetrics()
            merge_sort(list(range(n, 0, -1)), metrics=metrics)
            self.assertEqual(metrics.max_depth, (n - 1).bit_length(), f"n={n}")
            self.assertEqual(metrics.merges, n - 1)

    def test_invalid_ranges(self):
        for bounds in [(-1, 2), (0, 3), (3, 1)]:
            with self.subTest(bounds=bounds):
                with self.assertRaises(InvalidRangeError) as ctx:
                    merge_sort([1, 2, 3], *bounds)
                self.assertEqual(ctx.exception.length, 3)

    def test_invalid_range_leaves_sequence_untouched(self):
        arr = [3, 2, 1]
        with self.assertRaises(InvalidRangeError):
            merge_sort(arr, 0, 5)
        self.assertEqual(arr, [3, 2, 1])

    def test_incomparable_elements_propagate(self):
        with self.assertRaises(TypeError):
            merge_sort([1, "a"])


class TestDebugSwitches(unittest.TestCase):
    def setUp(self):
        self._debug = merge_mod.DEBUG_MODE
        self._check = merge_mod.CHECK_RUNS

    def tearDown(self):
        merge_mod.DEBUG_MODE = self._debug
        merge_mod.CHECK_RUNS = self._check

    def test_check_runs_flags_unsorted_run(self):
        merge_mod.CHECK_RUNS = True
        with self.assertRaises(AssertionError):
            merge([3, 1, 2, 0], 0, 1, 3)

    def test_unsorted_run_merges_silently_without_check(self):
        merge_mod.CHECK_RUNS = False
        arr = [3, 1, 2, 0]
        merge(arr, 0, 1, 3)
        self.assertEqual(sorted(arr), [0, 1, 2, 3])

    def test_debug_trace(self):
        merge_mod.DEBUG_MODE = True
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            merge([2, 1], 0, 0, 1)
        self.assertEqual(buf.getvalue(), "[MERGE DEBUG] merge [0..0] + [1..1]\n")


if __name__ == '__main__':
    unittest.main()
