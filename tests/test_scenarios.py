import pytest

from prioq.exceptions import EmptyQueueError, InvalidHandleError
from prioq.priority_queue import PriorityQueue


def _abcd_queue():
    queue = PriorityQueue()
    queue.insert('A', 5)
    queue.insert('B', 3)
    queue.insert('C', 8)
    queue.insert('D', 1)
    return queue

def test_when_peek_returns_lowest_priority():
    entry = _abcd_queue().peek()
    assert entry.value == 'D'
    assert entry.priority == 1

def test_when_extract_all_values_come_out_by_ascending_priority():
    queue = _abcd_queue()
    assert [queue.extract_min().value for _ in range(4)] == ['D', 'B', 'A', 'C']
    assert queue.is_empty()

def test_when_decrease_priority_through_handle():
    queue = PriorityQueue()
    h1 = queue.insert('X', 10)
    queue.insert('Y', 2)
    h1.change_priority(1)
    assert queue.peek().value == 'X'

def test_when_contains_after_extracting_one_of_a_tie():
    queue = PriorityQueue()
    queue.insert('P', 4)
    queue.insert('Q', 4)
    assert queue.contains('P')
    queue.extract_min()
    assert not queue.contains('P')
    assert queue.contains('Q')

def test_when_queue_is_empty():
    queue = PriorityQueue()
    with pytest.raises(EmptyQueueError):
        queue.extract_min()
    assert queue.peek() is None

def test_when_removing_middle_priority_handle():
    queue = PriorityQueue()
    queue.insert('low', 1)
    middle = queue.insert('middle', 2)
    queue.insert('high', 3)
    middle.remove()
    assert queue.size() == 2
    assert [queue.extract_min().value for _ in range(2)] == ['low', 'high']
    with pytest.raises(InvalidHandleError):
        middle.change_priority(0)
    with pytest.raises(InvalidHandleError):
        middle.remove()
    with pytest.raises(InvalidHandleError):
        middle.value()
