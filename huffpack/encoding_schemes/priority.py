import heapq
from itertools import count
from typing import List, Tuple

from huffpack.errors import EmptyStructure


class PrioritySelector:
    """
    Min-priority queue of tree node indices keyed by frequency.

    Backed by a `heapq` binary heap. Entries with equal frequency come out
    in insertion order, so the same inserts always yield the same extracts.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, int]] = []
        self._sequence = count()

    def insert(self, node_index: int, frequency: int) -> None:
        heapq.heappush(self._heap, (frequency, next(self._sequence), node_index))

    def extract_min(self) -> Tuple[int, int]:
        """Remove and return `(frequency, node_index)` with the lowest frequency."""
        if not self._heap:
            raise EmptyStructure("extract_min called on an empty priority selector")
        frequency, _, node_index = heapq.heappop(self._heap)
        return frequency, node_index

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
