from typing import TypeVar, Generic, Iterable, Iterator, List, Optional

T = TypeVar('T')


class DynamicArray(Generic[T]):
    def __init__(self, size: int = 0) -> None:
        if not isinstance(size, int) or size < 0:
            raise ValueError("size must be a non-negative integer")
        self._size = size
        self._capacity = size
        self._data: List[Optional[T]] = [None] * size

    @staticmethod
    def from_iterable(values: Iterable[T]) -> 'DynamicArray[T]':
        arr: DynamicArray[T] = DynamicArray()
        for value in values:
            arr.push_back(value)
        return arr

    def __getitem__(self, index: int) -> T:
        if index < 0 or index >= self._size:
            raise IndexError("DynamicArray.__getitem__: index out of range")
        return self._data[index]

    def __setitem__(self, index: int, value: T) -> None:
        if index < 0 or index >= self._size:
            raise IndexError("DynamicArray.__setitem__: index out of range")
        self._data[index] = value

    def front(self) -> T:
        if self._size == 0:
            raise IndexError("DynamicArray.front: array is empty")
        return self._data[0]

    def back(self) -> T:
        if self._size == 0:
            raise IndexError("DynamicArray.back: array is empty")
        return self._data[self._size - 1]

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def empty(self) -> bool:
        return self._size == 0

    def reserve(self, new_cap: int) -> None:
        if new_cap <= self._capacity:
            return
        self._data.extend([None] * (new_cap - self._capacity))
        self._capacity = new_cap

    def push_back(self, value: T) -> None:
        if self._size == self._capacity:
            self.reserve(1 if self._capacity == 0 else self._capacity * 2)
        self._data[self._size] = value
        self._size += 1

    def pop_back(self) -> None:
        if self._size == 0:
            raise IndexError("DynamicArray.pop_back: array is empty")
        self._size -= 1
        self._data[self._size] = None

    def swap(self, i: int, j: int) -> None:
        if not (0 <= i < self._size and 0 <= j < self._size):
            raise IndexError("DynamicArray.swap: index out of range")
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def clear(self) -> None:
        for i in range(self._size):
            self._data[i] = None
        self._size = 0

    def copy(self) -> 'DynamicArray[T]':
        clone: DynamicArray[T] = DynamicArray()
        clone._size = self._size
        clone._capacity = self._capacity
        clone._data = self._data.copy()
        return clone

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._data[i]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DynamicArray({list(self)})"
