"""Time and size Heap insertion/traversal over doubling input sizes.

Run directly: ``python tests/heap_benchmark.py``. Results go to a CSV file.
"""

import os
import sys
import csv
import random
import time
import statistics

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from heapkit.datastructures.heap import Heap

COLUMNS = ["Input Size", "Operation", "Average Time (ms)", "Std Dev Time (ms)", "Average Space (bytes)"]


def build(data, restore):
    heap = Heap.new_min(restore)
    for item in data:
        heap.insert(item)
    return heap


def drain(data):
    heap = build(data, "sift_up")
    for _ in heap:
        pass
    return heap


OPERATIONS = {
    "insert_walk": lambda data: build(data, "walk"),
    "insert_sift_up": lambda data: build(data, "sift_up"),
    "traverse": drain,
}


def sample(operation, size: int, iterations: int = 5):
    """Run `operation` on fresh random input; return (mean ms, stdev ms, mean bytes)."""
    times = []
    sizes = []
    for _ in range(iterations):
        data = [random.randint(0, 1000000) for _ in range(size)]
        start = time.perf_counter()
        heap = operation(data)
        times.append((time.perf_counter() - start) * 1000)

        items = heap._items
        sizes.append(
            sys.getsizeof(heap)
            + sys.getsizeof(items)
            + sys.getsizeof(items._buf)
            + sum(sys.getsizeof(item) for item in items)
        )
    std = statistics.stdev(times) if len(times) > 1 else 0.0
    return statistics.mean(times), std, statistics.mean(sizes)


def run_benchmarks(output_file: str, base_input: int = 100, steps: int = 10):
    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(COLUMNS)
        for name, operation in OPERATIONS.items():
            for size in (base_input * 2 ** i for i in range(steps)):
                avg, std, space = sample(operation, size)
                writer.writerow([size, name, f"{avg:.3f}", f"{std:.3f}", f"{space:.0f}"])
                print(f"{name:<15} | Size: {size:<8} | Avg Time: {avg:.3f} ms | "
                      f"Std: {std:.3f} ms | Avg Space: {space:.0f} bytes")

    print(f"\nBenchmark completed. Results saved to {output_file}")


if __name__ == "__main__":
    run_benchmarks("heap_performance.csv")
