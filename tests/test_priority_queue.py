"""Tests for the generic priority queue."""

import pytest

from pathgraph import Edge, Path, PriorityQueue


class TestBasicOperations:
    """Tests for insert, top and pop."""

    def test_empty_queue(self):
        """A new queue is empty."""
        pq = PriorityQueue()
        assert pq.empty()
        assert pq.size() == 0
        assert len(pq) == 0

    def test_pop_in_priority_order(self):
        """Elements come out lowest priority first."""
        pq = PriorityQueue()
        for value, priority in [("c", 3.0), ("a", 1.0), ("d", 4.0), ("b", 2.0)]:
            pq.insert(value, priority)

        order = []
        while not pq.empty():
            order.append(pq.pop()[0])
        assert order == ["a", "b", "c", "d"]

    def test_top_does_not_remove(self):
        """top and top_priority leave the queue unchanged."""
        pq = PriorityQueue()
        pq.insert(7, 0.5)
        pq.insert(3, 2.5)

        assert pq.top() == 7
        assert pq.top_priority() == 0.5
        assert pq.size() == 2

    def test_pop_returns_value_and_priority(self):
        """pop returns the removed pair."""
        pq = PriorityQueue()
        pq.insert("x", 4.0)
        assert pq.pop() == ("x", 4.0)
        assert pq.empty()

    def test_equal_priorities_keep_insertion_order(self):
        """Ties are broken by insertion order."""
        pq = PriorityQueue()
        pq.insert("first", 1.0)
        pq.insert("second", 1.0)
        pq.insert("third", 1.0)
        assert [pq.pop()[0] for _ in range(3)] == ["first", "second", "third"]

    def test_unorderable_values(self):
        """Values never need to be comparable with each other."""
        pq = PriorityQueue()
        pq.insert({"a": 1}, 1.0)
        pq.insert({"b": 2}, 1.0)
        assert pq.pop()[0] == {"a": 1}

    def test_empty_queue_errors(self):
        """top, top_priority and pop raise IndexError on an empty queue."""
        pq = PriorityQueue()
        with pytest.raises(IndexError):
            pq.top()
        with pytest.raises(IndexError):
            pq.top_priority()
        with pytest.raises(IndexError):
            pq.pop()

    def test_contains(self):
        """contains and the in operator find queued values."""
        pq = PriorityQueue()
        pq.insert(1, 1.0)
        assert pq.contains(1)
        assert 1 in pq
        assert 2 not in pq

    def test_iter_yields_pairs(self):
        """Iteration yields every (value, priority) pair."""
        pq = PriorityQueue()
        pq.insert("a", 2.0)
        pq.insert("b", 1.0)
        assert sorted(pq) == [("a", 2.0), ("b", 1.0)]


class TestInsertIfPriorityLess:
    """Tests for conditional insertion."""

    def test_inserts_absent_value(self):
        """A value not yet queued is inserted."""
        pq = PriorityQueue()
        pq.insert_if_priority_less(5, 3.0)
        assert pq.size() == 1
        assert pq.top() == 5

    def test_skips_higher_priority(self):
        """A worse priority for a queued value is ignored."""
        pq = PriorityQueue()
        pq.insert(5, 3.0)
        pq.insert_if_priority_less(5, 4.0)
        assert pq.size() == 1
        assert pq.top_priority() == 3.0

    def test_skips_equal_priority(self):
        """Only a strictly lower priority is inserted."""
        pq = PriorityQueue()
        pq.insert(5, 3.0)
        pq.insert_if_priority_less(5, 3.0)
        assert pq.size() == 1

    def test_lower_priority_leaves_stale_entry(self):
        """A better priority is pushed and the old element stays queued."""
        pq = PriorityQueue()
        pq.insert(5, 3.0)
        pq.insert_if_priority_less(5, 1.0)

        assert pq.size() == 2
        assert pq.pop() == (5, 1.0)
        assert pq.pop() == (5, 3.0)

    def test_path_values_use_path_equality(self):
        """Paths with the same final vertex and length count as the same value."""
        via_one = Path.extended(Path.extended(Path(0), Edge(0, 1, 1.0)), Edge(1, 3, 1.0))
        via_two = Path.extended(Path.extended(Path(0), Edge(0, 2, 2.0)), Edge(2, 3, 2.0))

        pq = PriorityQueue()
        pq.insert(via_one, via_one.weight)
        pq.insert_if_priority_less(via_two, via_two.weight)

        assert pq.size() == 1
        assert pq.top().vertices == (0, 1, 3)


class TestChangePriority:
    """Tests for in-place priority updates."""

    def test_missing_value(self):
        """Changing an absent value reports False."""
        pq = PriorityQueue()
        pq.insert("a", 1.0)
        assert pq.change_priority("b", 0.0) is False

    def test_updates_priority_without_reheap(self):
        """The priority changes but the heap is not reordered."""
        pq = PriorityQueue()
        pq.insert("a", 1.0)
        pq.insert("b", 2.0)

        assert pq.change_priority("b", 0.0) is True
        assert ("b", 0.0) in list(pq)
        assert pq.top() == "a"
