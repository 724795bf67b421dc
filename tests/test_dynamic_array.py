import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from dynamic_array import DynamicArray


class TestDynamicArray(unittest.TestCase):
    def test_default_construction(self):
        arr = DynamicArray()
        self.assertEqual(arr.size(), 0)
        self.assertEqual(arr.capacity(), 0)
        self.assertTrue(arr.empty())

    def test_sized_construction(self):
        arr = DynamicArray(3)
        self.assertEqual(arr.size(), 3)
        self.assertEqual(arr.capacity(), 3)
        for i in range(arr.size()):
            self.assertIsNone(arr[i])

    def test_invalid_size_raises(self):
        with self.assertRaises(ValueError):
            DynamicArray(-1)
        with self.assertRaises(ValueError):
            DynamicArray(2.5)

    def test_from_iterable(self):
        arr = DynamicArray.from_iterable([4, 7, 1])
        self.assertEqual(arr.size(), 3)
        self.assertEqual(list(arr), [4, 7, 1])

    def test_push_back_doubles_capacity(self):
        arr = DynamicArray()
        capacities = []
        for i in range(5):
            arr.push_back(i)
            capacities.append(arr.capacity())
        self.assertEqual(capacities, [1, 2, 4, 4, 8])
        self.assertEqual(arr.size(), 5)

    def test_reserve_grows_but_never_shrinks(self):
        arr = DynamicArray.from_iterable([1, 2])
        arr.reserve(10)
        self.assertEqual(arr.capacity(), 10)
        self.assertEqual(list(arr), [1, 2])
        arr.reserve(3)
        self.assertEqual(arr.capacity(), 10)

    def test_push_back_after_reserve_keeps_capacity(self):
        arr = DynamicArray()
        arr.reserve(6)
        for i in range(6):
            arr.push_back(i)
        self.assertEqual(arr.capacity(), 6)

    def test_pop_back(self):
        arr = DynamicArray.from_iterable([10, 20, 30])
        arr.pop_back()
        self.assertEqual(arr.size(), 2)
        self.assertEqual(arr.back(), 20)

    def test_pop_back_releases_reference(self):
        arr = DynamicArray.from_iterable(["a", "b"])
        arr.pop_back()
        self.assertIsNone(arr._data[1])

    def test_pop_back_on_empty_raises(self):
        with self.assertRaises(IndexError):
            DynamicArray().pop_back()

    def test_front_and_back(self):
        arr = DynamicArray.from_iterable([3, 5, 9])
        self.assertEqual(arr.front(), 3)
        self.assertEqual(arr.back(), 9)

    def test_front_and_back_on_empty_raise(self):
        arr = DynamicArray()
        with self.assertRaises(IndexError):
            arr.front()
        with self.assertRaises(IndexError):
            arr.back()

    def test_indexing_is_bounded_by_size_not_capacity(self):
        arr = DynamicArray()
        arr.reserve(4)
        arr.push_back(1)
        with self.assertRaises(IndexError):
            arr[1]
        with self.assertRaises(IndexError):
            arr[1] = 5
        with self.assertRaises(IndexError):
            arr[-1]

    def test_setitem(self):
        arr = DynamicArray.from_iterable([1, 2, 3])
        arr[1] = 42
        self.assertEqual(list(arr), [1, 42, 3])

    def test_swap(self):
        arr = DynamicArray.from_iterable([1, 2, 3])
        arr.swap(0, 2)
        self.assertEqual(list(arr), [3, 2, 1])
        arr.swap(1, 1)
        self.assertEqual(list(arr), [3, 2, 1])

    def test_swap_out_of_range_raises(self):
        arr = DynamicArray.from_iterable([1, 2])
        with self.assertRaises(IndexError):
            arr.swap(0, 2)

    def test_clear_keeps_capacity_and_drops_references(self):
        arr = DynamicArray.from_iterable([1, 2, 3])
        arr.clear()
        self.assertTrue(arr.empty())
        self.assertEqual(arr.capacity(), 4)
        self.assertEqual(arr._data, [None] * 4)

    def test_copy_is_independent(self):
        arr = DynamicArray.from_iterable([1, 2, 3])
        clone = arr.copy()
        arr[0] = 99
        arr.push_back(4)
        self.assertEqual(list(clone), [1, 2, 3])
        self.assertEqual(clone.capacity(), 4)

    def test_len_and_repr(self):
        arr = DynamicArray.from_iterable([1, 2])
        self.assertEqual(len(arr), 2)
        self.assertEqual(repr(arr), "DynamicArray([1, 2])")


if __name__ == "__main__":
    unittest.main()
