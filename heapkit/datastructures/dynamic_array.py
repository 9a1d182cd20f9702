from __future__ import annotations
import ctypes
import logging
from typing import Generic, Iterator, List, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DynamicArray(Generic[T]):
    """Dense append-only slot store backing the heap.

    Slots live in a ctypes `py_object` buffer that doubles when full.
    Positions ``0..len(self) - 1`` are readable; anything past that is
    spare capacity and raises IndexError.
    """

    __slots__ = ("_buf", "_size", "_capacity")

    _INITIAL_CAPACITY = 4

    def __init__(self) -> None:
        self._capacity = self._INITIAL_CAPACITY
        self._buf = (self._capacity * ctypes.py_object)()
        self._size = 0

    def _grow(self) -> None:
        capacity = self._capacity * 2
        buf = (capacity * ctypes.py_object)()
        for i in range(self._size):
            buf[i] = self._buf[i]
        logger.debug("grew buffer %d -> %d slots", self._capacity, capacity)
        self._buf = buf
        self._capacity = capacity

    def _check(self, idx: int) -> int:
        if not 0 <= idx < self._size:
            raise IndexError(f"slot {idx} out of range for {self._size} items")
        return idx

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, value: T) -> None:
        """Store `value` in the next free slot (amortized O(1))."""
        if self._size == self._capacity:
            self._grow()
        self._buf[self._size] = value
        self._size += 1

    def swap(self, i: int, j: int) -> None:
        buf = self._buf
        i, j = self._check(i), self._check(j)
        buf[i], buf[j] = buf[j], buf[i]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._buf[i]  # type: ignore[misc]

    def __getitem__(self, idx: int) -> T:
        return self._buf[self._check(idx)]  # type: ignore[return-value]

    def to_py(self) -> List[T]:
        return list(self)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"DynamicArray({self.to_py()!r})"
