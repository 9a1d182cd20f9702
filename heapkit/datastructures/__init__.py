from .dynamic_array import DynamicArray
from .heap import Heap, MinHeap, MaxHeap, RESTORE_STRATEGIES

__all__ = [
    "DynamicArray",
    "Heap",
    "MinHeap",
    "MaxHeap",
    "RESTORE_STRATEGIES",
]
