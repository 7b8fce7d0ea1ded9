import random

import pytest

from fitfuel.priority import PriorityQueue


def test_empty_queue():
    queue = PriorityQueue()
    assert len(queue) == 0
    assert not queue
    assert queue.top() is None


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().pop()


def test_pops_in_priority_order():
    queue = PriorityQueue()
    for data, priority in [("a", 3), ("b", 1), ("c", 5), ("d", 4)]:
        queue.push(data, priority)
    assert [queue.pop() for _ in range(4)] == ["c", "d", "a", "b"]
    assert not queue


def test_top_does_not_remove():
    queue = PriorityQueue()
    queue.push("x", 2)
    queue.push("y", 9)
    assert queue.top() == "y"
    assert queue.top() == "y"
    assert len(queue) == 2


@pytest.mark.parametrize("seed", range(5))
def test_random_priorities_come_out_sorted(seed):
    rng = random.Random(seed)
    priorities = [rng.randint(-50, 50) for _ in range(200)]
    queue = PriorityQueue()
    for value in priorities:
        queue.push(value, value)
    assert len(queue) == len(priorities)
    popped = [queue.pop() for _ in range(len(priorities))]
    assert popped == sorted(priorities, reverse=True)


def test_interleaved_push_and_pop():
    queue = PriorityQueue()
    queue.push(1, 1)
    queue.push(7, 7)
    assert queue.pop() == 7
    queue.push(3, 3)
    queue.push(2, 2)
    assert queue.pop() == 3
    assert queue.pop() == 2
    assert queue.pop() == 1
    assert len(queue) == 0