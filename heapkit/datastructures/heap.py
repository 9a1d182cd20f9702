"""Binary heap with a pluggable ordering predicate.

The heap stores its elements in a dense `DynamicArray` laid out as an
implicit binary tree: the node at index ``i`` has children at ``2i + 1``
and ``2i + 2``. Which of two elements sits closer to the root is decided
by a ``higher_priority(a, b)`` predicate fixed at construction
(``operator.lt`` for a min-heap, ``operator.gt`` for a max-heap).

Two restoration strategies are available after an insertion:

``"walk"`` (default)
    Starting at the new element's slot, compare each visited slot with its
    preferred child and swap when the child ranks higher, then move to
    ``i // 2``. This reproduces the historical behaviour of the container
    exactly. ``i // 2`` is the parent formula of a 1-indexed heap, so on this
    0-indexed layout the walk skips the true parent of roughly half the
    slots and does NOT guarantee heap order (e.g. a min-heap fed
    10, 20, 30, 40, 50, 60, 5 keeps 5 in the last slot under 30).

``"sift_up"``
    Textbook restoration: swap the new element with its true parent at
    ``(i - 1) // 2`` while it ranks higher, stopping at the root. Heap order
    always holds afterwards.

Iterating a heap walks the backing array in storage order, not priority
order, and consumes the heap's single built-in cursor.
"""

from __future__ import annotations

import copy
import logging
import operator
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

from .dynamic_array import DynamicArray

T = TypeVar("T")

logger = logging.getLogger(__name__)

RESTORE_WALK = "walk"
RESTORE_SIFT_UP = "sift_up"
RESTORE_STRATEGIES = (RESTORE_WALK, RESTORE_SIFT_UP)


# -----------------------------
# Index arithmetic
# -----------------------------
def parent_index(idx: int) -> int:
    """Parent slot as visited by the restoration walk (``idx // 2``)."""
    return idx // 2


def true_parent_index(idx: int) -> int:
    """Parent slot of `idx` in a 0-indexed array layout."""
    return (idx - 1) // 2


def left_child_index(idx: int) -> int:
    return idx * 2 + 1


def right_child_index(idx: int) -> int:
    return left_child_index(idx) + 1


class Heap(Generic[T]):
    """A binary heap ordered by a ``higher_priority(a, b)`` predicate.

    Supports insertion, size queries and a single forward pass over the
    storage array. There is no pop: the heap only grows.
    """

    __slots__ = ("_items", "_higher_priority", "_restore", "_cursor")

    def __init__(self, higher_priority: Callable[[T, T], bool], restore: str = RESTORE_WALK) -> None:
        if not callable(higher_priority):
            raise TypeError("higher_priority must be callable")
        if restore not in RESTORE_STRATEGIES:
            raise ValueError(f"restore must be one of {RESTORE_STRATEGIES}, got {restore!r}")
        self._items: DynamicArray[T] = DynamicArray()
        self._higher_priority = higher_priority
        self._restore = restore
        self._cursor = 0

    @staticmethod
    def new(higher_priority: Callable[[T, T], bool], restore: str = RESTORE_WALK) -> "Heap[T]":
        """Build a plain Heap, also when called through a subclass."""
        return Heap(higher_priority, restore)

    @staticmethod
    def new_min(restore: str = RESTORE_WALK) -> "Heap[Any]":
        """Create a heap that keeps the smallest element at the root."""
        return Heap(operator.lt, restore)

    @staticmethod
    def new_max(restore: str = RESTORE_WALK) -> "Heap[Any]":
        """Create a heap that keeps the largest element at the root."""
        return Heap(operator.gt, restore)

    @property
    def higher_priority(self) -> Callable[[T, T], bool]:
        return self._higher_priority

    @property
    def restore(self) -> str:
        return self._restore

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _swap(self, a: int, b: int) -> None:
        logger.debug("swap slots %d and %d", a, b)
        self._items.swap(a, b)

    def _walk(self, idx: int) -> None:
        items = self._items
        cur = idx
        while True:
            child = self._preferred_child_index(cur)
            if child < len(items) and self._higher_priority(items[child], items[cur]):
                self._swap(child, cur)
            if cur == 0:
                break
            cur = parent_index(cur)

    def _sift_up(self, idx: int) -> None:
        items = self._items
        while idx > 0:
            parent = true_parent_index(idx)
            if not self._higher_priority(items[idx], items[parent]):
                break
            self._swap(idx, parent)
            idx = parent

    def _has_children(self, idx: int) -> bool:
        return left_child_index(idx) < len(self._items)

    def _preferred_child_index(self, idx: int) -> int:
        """Return the child of `idx` the predicate ranks higher.

        Returns ``len(self)`` when `idx` has no children and the only child
        when the right one is missing. On a tie the right child wins.
        """
        count = len(self._items)
        if not self._has_children(idx):
            return count

        left = left_child_index(idx)
        right = right_child_index(idx)
        if right >= count:
            return left
        if self._higher_priority(self._items[left], self._items[right]):
            return left
        return right

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, value: T) -> None:
        """Append `value` and restore ordering with the configured strategy (O(log n))."""
        self._items.append(value)
        idx = len(self._items) - 1
        if self._restore == RESTORE_SIFT_UP:
            self._sift_up(idx)
        else:
            self._walk(idx)

    add = insert

    def length(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return self.length() == 0

    def __bool__(self) -> bool:
        return not self.is_empty()

    def peek(self) -> Optional[T]:
        """Return the root element without consuming it, or None if empty."""
        return self._items[0] if self._items else None

    def is_valid(self) -> bool:
        """Check that no element outranks its parent under the heap's predicate."""
        items = self._items
        for i in range(1, len(items)):
            if self._higher_priority(items[i], items[true_parent_index(i)]):
                return False
        return True

    def to_list(self) -> List[T]:
        return self._items.to_py()

    def __iter__(self) -> Iterator[T]:
        # The cursor lives on the heap, so a heap can only be walked once.
        return self

    def __next__(self) -> T:
        if self._cursor >= len(self._items):
            raise StopIteration
        value = self._items[self._cursor]
        self._cursor += 1
        return copy.deepcopy(value)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{type(self).__name__}({self.to_list()!r}, restore={self._restore!r})"


class MinHeap(Heap[T]):
    """Heap whose root is the smallest element under ``<``."""

    __slots__ = ()

    def __init__(self, restore: str = RESTORE_WALK) -> None:
        super().__init__(operator.lt, restore)


class MaxHeap(Heap[T]):
    """Heap whose root is the largest element under ``>``."""

    __slots__ = ()

    def __init__(self, restore: str = RESTORE_WALK) -> None:
        super().__init__(operator.gt, restore)
