"""
Generic min-priority queue used by the search algorithms.

The queue is a binary min-heap (stdlib ``heapq``) of ``PriorityQueueElement``
objects. Membership and priority lookups are linear scans, which is fine at
the graph sizes this library targets.

Stale entries are never removed: ``insert_if_priority_less`` pushes a second,
cheaper element for a value already in the queue and leaves the old one in
place. Callers (Dijkstra, Prim) discard such duplicates after popping by
checking whether the value was already finalized.
"""

import heapq
import itertools
from typing import Generic, Iterator, List, Tuple, TypeVar

V = TypeVar("V")
P = TypeVar("P")


class PriorityQueueElement(Generic[V, P]):
    """
    A ``(value, priority)`` pair stored in the heap.

    Elements are ordered by priority only. Equal priorities fall back to the
    insertion counter so values never need to be comparable.
    """

    __slots__ = ("value", "priority", "_order")

    def __init__(self, value: V, priority: P, order: int = 0):
        self.value = value
        self.priority = priority
        self._order = order

    def __lt__(self, other: "PriorityQueueElement[V, P]") -> bool:
        if self.priority == other.priority:
            return self._order < other._order
        return self.priority < other.priority

    def __repr__(self) -> str:
        return f"PriorityQueueElement(value={self.value!r}, priority={self.priority!r})"


class PriorityQueue(Generic[V, P]):
    """
    Binary min-heap keyed by an externally supplied priority.

    Complexity:
        - insert: O(log n)
        - insert_if_priority_less: O(n) scan + O(log n) push
        - top / top_priority: O(1)
        - pop: O(log n)
        - contains / change_priority: O(n)

    Example:
        >>> pq = PriorityQueue()
        >>> pq.insert("b", 2.0)
        >>> pq.insert("a", 1.0)
        >>> pq.top(), pq.top_priority()
        ('a', 1.0)
    """

    def __init__(self) -> None:
        self._heap: List[PriorityQueueElement[V, P]] = []
        self._counter = itertools.count()

    def _find(self, value: V):
        for element in self._heap:
            if element.value == value:
                return element
        return None

    def contains(self, value: V) -> bool:
        """Return True if some element in the queue has an equal value."""
        return self._find(value) is not None

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def empty(self) -> bool:
        return not self._heap

    def __iter__(self) -> Iterator[Tuple[V, P]]:
        # Heap order, not sorted order.
        return iter([(element.value, element.priority) for element in self._heap])

    def top(self) -> V:
        """
        Return the value with the lowest priority without removing it.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("top from empty priority queue")
        return self._heap[0].value

    def top_priority(self) -> P:
        """
        Return the lowest priority in the queue.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("top_priority from empty priority queue")
        return self._heap[0].priority

    def pop(self) -> Tuple[V, P]:
        """
        Remove the minimum element and return its ``(value, priority)``.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("pop from empty priority queue")
        element = heapq.heappop(self._heap)
        return element.value, element.priority

    def insert(self, value: V, priority: P) -> None:
        """Insert ``value`` unconditionally."""
        heapq.heappush(self._heap, PriorityQueueElement(value, priority, next(self._counter)))

    def insert_if_priority_less(self, value: V, priority: P) -> None:
        """
        Insert ``value`` unless an equal value is queued with a priority <= ``priority``.

        Only the first matching element is consulted. When the new priority
        is strictly lower, the new element is pushed and the old one stays in
        the heap as a stale duplicate.
        """
        existing = self._find(value)
        if existing is None or priority < existing.priority:
            self.insert(value, priority)

    def change_priority(self, value: V, priority: P) -> bool:
        """
        Overwrite the priority of the first element equal to ``value``.

        The heap is NOT restored afterwards, so ``top``/``pop`` may be wrong
        until the heap is rebuilt by further pushes and pops. The search
        algorithms never call this method.

        Returns:
            True if a matching element was found.
        """
        element = self._find(value)
        if element is None:
            return False
        element.priority = priority
        return True
