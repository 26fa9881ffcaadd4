"""
Utility functions for path finding operations.
"""

import gc
import logging
import os
import time
from contextlib import contextmanager
from typing import Any, Dict, Generator, Hashable, Iterator, List, Optional, Sequence, Tuple

import psutil  # type: ignore # Missing stubs

from ...exceptions import GraphOperationError
from ..base import GraphPrimitive

# Configure logging
logger = logging.getLogger(__name__)


def calculate_path_weight(graph: GraphPrimitive, vertices: Sequence[Hashable], zero: Any = 0) -> Any:
    """
    Calculate total weight of a path.

    Args:
        graph: Graph providing edge weights
        vertices: Vertices along the path, in order
        zero: Weight of the single-vertex path

    Returns:
        Sum of the weights of consecutive edges, starting from ``zero``
    """
    total = zero
    for from_vertex, to_vertex in zip(vertices, vertices[1:]):
        total = total + graph.get_edge_weight(from_vertex, to_vertex)
    return total


@contextmanager
def timer(label: str = "", level: int = logging.DEBUG) -> Generator[None, None, None]:
    """Context manager for timing operations."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        if label:
            logger.log(level, "%s: %.1fms", label, duration * 1000)


class IndexedPriorityQueue:
    """
    Binary min-heap with a position index for true decrease-key.

    Every item sits at exactly one heap slot and ``_positions`` tracks that
    slot, so changing a priority moves the entry in O(log n) instead of
    leaving a stale copy behind. Equal priorities come out in insertion order.
    """

    def __init__(self):
        self._heap: List[List[Any]] = []  # [priority, sequence, item]
        self._positions: Dict[Hashable, int] = {}
        self._counter = 0  # Unique counter to break ties

    def add_or_update(self, item: Hashable, priority: Any) -> None:
        """Add a new item or move an existing item to a new priority."""
        if item in self._positions:
            index = self._positions[item]
            entry = self._heap[index]
            old_priority = entry[0]
            entry[0] = priority
            if priority < old_priority:
                self._sift_up(index)
            else:
                self._sift_down(index)
            return

        entry = [priority, self._counter, item]
        self._counter += 1
        self._heap.append(entry)
        self._positions[item] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def decrease_key(self, item: Hashable, priority: Any) -> None:
        """
        Lower the priority of a queued item.

        Raises:
            KeyError: If the item is not queued
            ValueError: If ``priority`` is higher than the current one
        """
        index = self._positions[item]
        if self._heap[index][0] < priority:
            raise ValueError(f"New priority {priority} is higher than current priority")
        self._heap[index][0] = priority
        self._sift_up(index)

    def pop(self) -> Optional[Tuple[Any, Hashable]]:
        """Remove and return the ``(priority, item)`` with the lowest priority."""
        if not self._heap:
            return None
        last = self._heap.pop()
        if not self._heap:
            del self._positions[last[2]]
            return last[0], last[2]

        top = self._heap[0]
        self._heap[0] = last
        self._positions[last[2]] = 0
        del self._positions[top[2]]
        self._sift_down(0)
        return top[0], top[2]

    def peek(self) -> Optional[Tuple[Any, Hashable]]:
        """Return the item with lowest priority without removing it."""
        if not self._heap:
            return None
        priority, _, item = self._heap[0]
        return priority, item

    def priority(self, item: Hashable) -> Any:
        """Return the current priority of a queued item."""
        return self._heap[self._positions[item]][0]

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return not self._heap

    def __contains__(self, item: object) -> bool:
        return item in self._positions

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Tuple[Any, Hashable]]:
        """Return iterator over queue items in priority order, leaving the queue intact."""
        ordered = sorted(self._heap, key=lambda entry: (entry[0], entry[1]))
        return iter([(priority, item) for priority, _, item in ordered])

    @staticmethod
    def _less(a: List[Any], b: List[Any]) -> bool:
        if a[0] == b[0]:
            return a[1] < b[1]
        return a[0] < b[0]

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._positions[heap[i][2]] = i
        self._positions[heap[j][2]] = j

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._less(self._heap[index], self._heap[parent]):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and self._less(self._heap[left], self._heap[smallest]):
                smallest = left
            if right < size and self._less(self._heap[right], self._heap[smallest]):
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest


class MemoryManager:
    """Memory guard for graph searches."""

    def __init__(self, max_memory_mb: Optional[float] = None, check_interval: int = 1000):
        """
        Initialize memory manager.

        Args:
            max_memory_mb: Allowed memory growth since the last reset, in MB
            check_interval: Number of ``tick`` calls between actual checks
        """
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.check_interval = check_interval
        self._ticks = 0
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory

    def tick(self) -> None:
        """Count one unit of work, checking memory every ``check_interval`` ticks."""
        self._ticks += 1
        if self._ticks >= self.check_interval:
            self._ticks = 0
            self.check_memory()

    def check_memory(self) -> None:
        """
        Check if memory usage exceeds limit.

        Raises:
            MemoryError: If growth stays above the limit after a collection
        """
        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)
        if not self.max_memory:
            return

        if current - self.start_memory > self.max_memory:
            logger.warning(
                "Search memory %.1fMB over limit, collecting garbage",
                (current - self.start_memory) / 1024 / 1024,
            )
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {(current - self.start_memory) / 1024 / 1024:.1f}MB exceeds "
                    f"limit of {self.max_memory / 1024 / 1024:.1f}MB"
                )

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024

    def reset_peak_memory(self) -> None:
        """Reset peak memory tracking."""
        self._peak_memory = get_memory_usage()
        self.start_memory = self._peak_memory
        self._ticks = 0


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    mem_info = process.memory_info()
    return int(mem_info.rss)


def checked_neighbors(graph: GraphPrimitive, vertex: Hashable, state: Any) -> List[Hashable]:
    """
    Fetch a vertex's neighbors, checking they belong to the search state.

    Raises:
        GraphOperationError: If the storage reports a neighbor it never listed
            as a vertex
    """
    neighbors = list(graph.get_neighbors(vertex))
    for neighbor in neighbors:
        if neighbor not in state:
            raise GraphOperationError(
                f"Neighbor {neighbor!r} of {vertex!r} is not a vertex of the graph"
            )
    return neighbors
