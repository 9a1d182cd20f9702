"""Binary heap container with configurable ordering."""

import logging

from .datastructures import DynamicArray, Heap, MinHeap, MaxHeap, RESTORE_STRATEGIES

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DynamicArray",
    "Heap",
    "MinHeap",
    "MaxHeap",
    "RESTORE_STRATEGIES",
]
