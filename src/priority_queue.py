"""Binary heap priority queue over a pluggable storage container.

The element ranked highest by ``compare`` sits at the top. ``compare(a, b)``
returns True when ``a`` ranks below ``b``, so the default ``operator.lt``
gives a max-heap and ``operator.gt`` gives a min-heap.

Heap positions are 1-based (children of ``i`` are ``2i`` and ``2i + 1``) and
map onto storage index ``i - 1``.
"""

import operator
from collections.abc import Sized
from typing import TypeVar, Generic, Callable, Iterable, Optional, Protocol

from dynamic_array import DynamicArray

T = TypeVar('T')

Compare = Callable[[T, T], bool]


class Storage(Protocol[T]):
    """Zero-based growable sequence the queue keeps its heap in.

    Implementations must be constructible with no arguments; ``take`` uses
    that to hand the source queue a fresh, empty storage.
    """

    def size(self) -> int: ...
    def empty(self) -> bool: ...
    def __getitem__(self, index: int) -> T: ...
    def __setitem__(self, index: int, value: T) -> None: ...
    def push_back(self, value: T) -> None: ...
    def pop_back(self) -> None: ...
    def reserve(self, new_cap: int) -> None: ...
    def clear(self) -> None: ...
    def swap(self, i: int, j: int) -> None: ...
    def copy(self) -> 'Storage[T]': ...


class PriorityQueue(Generic[T]):
    def __init__(self, compare: Compare = operator.lt) -> None:
        self._container: Storage[T] = DynamicArray()
        self._compare = compare

    @classmethod
    def from_iterable(cls, values: Iterable[T], compare: Compare = operator.lt) -> 'PriorityQueue[T]':
        """Build a queue by pushing each value in turn."""
        pq: PriorityQueue[T] = cls(compare)
        if isinstance(values, Sized):
            pq._container.reserve(len(values))
        for value in values:
            pq.push(value)
        return pq

    @classmethod
    def from_container(cls, compare: Compare, container: Storage[T]) -> 'PriorityQueue[T]':
        """Take ownership of an unordered container and heapify it in place.

        The caller must not keep using ``container`` afterwards.
        """
        pq: PriorityQueue[T] = cls(compare)
        pq._container = container
        pq._heapify()
        return pq

    @classmethod
    def from_heap_container(cls, compare: Compare, container: Storage[T]) -> 'PriorityQueue[T]':
        """Wrap a container that already satisfies the heap property under ``compare``.

        Nothing is checked or reordered.
        """
        pq: PriorityQueue[T] = cls(compare)
        pq._container = container
        return pq

    @classmethod
    def take(cls, other: 'PriorityQueue[T]', compare: Optional[Compare] = None) -> 'PriorityQueue[T]':
        """Move the contents of ``other`` into a new queue, leaving ``other`` empty."""
        pq: PriorityQueue[T] = cls(other._compare if compare is None else compare)
        pq._container = other._container
        other._container = type(other._container)()
        return pq

    def copy(self, compare: Optional[Compare] = None) -> 'PriorityQueue[T]':
        clone: PriorityQueue[T] = type(self)(self._compare if compare is None else compare)
        clone._container = self._container.copy()
        return clone

    def top(self) -> T:
        if self._container.empty():
            raise IndexError("top from empty priority queue")
        return self._container[0]

    def push(self, value: T) -> None:
        self._container.push_back(value)
        index = self._container.size() // 2
        while index and self._percolate_down(index):
            index //= 2

    def pop(self) -> None:
        if self._container.empty():
            return
        self._container.swap(0, self._container.size() - 1)
        self._container.pop_back()
        self._percolate_down(1)

    def size(self) -> int:
        return self._container.size()

    def empty(self) -> bool:
        return self._container.empty()

    def clear(self) -> None:
        self._container.clear()

    def _heapify(self) -> None:
        for index_heap in range(self._container.size() // 2, 0, -1):
            self._percolate_down(index_heap)

    def _percolate_down(self, index_heap: int) -> bool:
        """Sink the element at 1-based ``index_heap`` below any stronger child.

        Returns True if a swap happened.
        """
        size = self._container.size()
        index_left = index_heap * 2
        index_right = index_left + 1

        if index_right <= size and self._compare(self._container[index_left - 1],
                                                 self._container[index_right - 1]):
            index_bigger = index_right
        else:
            index_bigger = index_left

        if index_bigger <= size and self._compare(self._container[index_heap - 1],
                                                  self._container[index_bigger - 1]):
            self._container.swap(index_heap - 1, index_bigger - 1)
            self._percolate_down(index_bigger)
            return True
        return False

    def __len__(self) -> int:
        return self._container.size()

    def __bool__(self) -> bool:
        return not self._container.empty()

    def __repr__(self) -> str:
        items = [self._container[i] for i in range(self._container.size())]
        return f"PriorityQueue({items})"

    def __str__(self) -> str:
        return f"PriorityQueue(size={self._container.size()})"


def swap(lhs: PriorityQueue[T], rhs: PriorityQueue[T]) -> None:
    lhs._container, rhs._container = rhs._container, lhs._container
    lhs._compare, rhs._compare = rhs._compare, lhs._compare
