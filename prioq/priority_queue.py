"""
Min-heap priority queue whose inserts return handles.

The heap is a list interpreted as a complete binary tree with the root at
index 0. Every stored HeapNode records its own index, so a Handle can find
its node again after the tree has been rearranged and change its priority or
remove it in O(log n).
"""
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar

from prioq.exceptions import EmptyQueueError, InvalidHandleError
from prioq.helpers import get_logger, natural_order

logger = get_logger()

DEFAULT_CAPACITY = 10

E = TypeVar('E')
P = TypeVar('P')

Comparator = Callable[[Any, Any], int]


@dataclass(frozen=True)
class Entry(Generic[E, P]):
  value: E
  priority: P


@dataclass(eq=False)
class HeapNode(Generic[E, P]):
  value: E
  priority: P
  position: int
  valid: bool = True

  def as_entry(self) -> Entry[E, P]:
    return Entry(self.value, self.priority)


class Handle(Generic[E, P]):
  """
  Caller-side reference to one inserted element.

  Holds the node the queue owns, not a copy. Every structural change is
  routed back through the owning queue.
  """

  __slots__ = ('_queue', '_node')

  def __init__(self, queue: 'PriorityQueue[E, P]', node: HeapNode[E, P]):
    self._queue = queue
    self._node = node

  def __repr__(self):
    if not self._node.valid:
      return "<Handle: invalid>"
    return f"<Handle: {self._node.value!r} @ {self._node.priority!r}>"

  def _check_validity(self) -> None:
    if not self._node.valid:
      logger.debug("Operation on invalid handle (last position %d)", self._node.position)
      raise InvalidHandleError()

  def value(self) -> E:
    self._check_validity()
    return self._node.value

  def priority(self) -> P:
    self._check_validity()
    return self._node.priority

  def is_valid(self) -> bool:
    return self._node.valid

  def change_priority(self, new_priority: P) -> None:
    self._check_validity()
    self._queue._change_priority(self._node, new_priority)

  def remove(self) -> None:
    self._check_validity()
    self._queue._remove_node(self._node)


class PriorityQueue(Generic[E, P]):
  def __init__(self, capacity: int = DEFAULT_CAPACITY, comparator: Optional[Comparator] = None):
    if capacity < 0:
      raise ValueError(f"Illegal capacity: {capacity}")
    if comparator is None:
      comparator = natural_order
    elif not callable(comparator):
      raise TypeError(f"Comparator must be callable: {comparator!r}")
    # Python lists grow on demand; the hint is only recorded.
    self.capacity = capacity
    self.comparator = comparator
    self._tree: List[HeapNode[E, P]] = []
    comparator_name = getattr(comparator, '__name__', repr(comparator))
    logger.debug(f"PriorityQueue created (capacity hint: {capacity}, comparator: {comparator_name})")

  def __repr__(self):
    return f"<PriorityQueue: size={len(self._tree)}>"

  def __len__(self) -> int:
    return len(self._tree)

  def __bool__(self) -> bool:
    return len(self._tree) > 0

  def __contains__(self, value: Any) -> bool:
    return self.contains(value)

  def size(self) -> int:
    return len(self._tree)

  def is_empty(self) -> bool:
    return len(self._tree) == 0

  def clear(self) -> None:
    for node in self._tree:
      node.valid = False
    logger.debug(f"PriorityQueue cleared ({len(self._tree)} handles invalidated)")
    self._tree.clear()

  def insert(self, value: E, priority: P) -> Handle[E, P]:
    """Append a new node as the right-most leaf and pull it up into place."""
    node = HeapNode(value, priority, len(self._tree))
    self._tree.append(node)
    self._sift_up(node.position)
    return Handle(self, node)

  def offer(self, value: E, priority: P) -> Handle[E, P]:
    return self.insert(value, priority)

  def contains(self, value: Any) -> bool:
    """Linear scan: True if any valid entry holds a value equal to `value`."""
    for node in self._tree:
      if node.value == value and node.valid:
        return True
    return False

  def peek(self) -> Optional[Entry[E, P]]:
    if len(self._tree) == 0:
      return None
    return self._tree[0].as_entry()

  def extract_min(self) -> Entry[E, P]:
    if len(self._tree) == 0:
      raise EmptyQueueError()
    return self.poll()

  def poll(self) -> Optional[Entry[E, P]]:
    """Remove and return the head entry, or None if the queue is empty."""
    if len(self._tree) == 0:
      return None
    head = self._tree[0]
    if len(self._tree) == 1:
      self._tree.pop()
      head.valid = False
    else:
      self._swap(0, len(self._tree) - 1)
      self._tree.pop()
      head.valid = False
      self._sift_down(0)
    return head.as_entry()

  # Tree arithmetic

  @staticmethod
  def _left_child(i: int) -> int:
    return 2 * i + 1

  @staticmethod
  def _right_child(i: int) -> int:
    return 2 * i + 2

  @staticmethod
  def _parent(i: int) -> int:
    return (i - 1) // 2

  def _compare(self, a: P, b: P) -> int:
    return self.comparator(a, b)

  def _swap(self, index1: int, index2: int) -> None:
    # The only place nodes change slots.
    node1 = self._tree[index1]
    node2 = self._tree[index2]
    node1.position = index2
    node2.position = index1
    self._tree[index1] = node2
    self._tree[index2] = node1

  def _sift_down(self, i: int) -> None:
    tree = self._tree
    while True:
      left = self._left_child(i)
      right = self._right_child(i)
      left_smaller = left < len(tree) and self._compare(tree[left].priority, tree[i].priority) < 0
      right_smaller = right < len(tree) and self._compare(tree[right].priority, tree[i].priority) < 0
      if not (left_smaller or right_smaller):
        break
      # Ties between the children go to the right child.
      if right >= len(tree) or self._compare(tree[left].priority, tree[right].priority) < 0:
        child = left
      else:
        child = right
      self._swap(i, child)
      i = child

  def _sift_up(self, i: int) -> None:
    tree = self._tree
    while i != 0:
      parent = self._parent(i)
      if self._compare(tree[parent].priority, tree[i].priority) <= 0:
        break
      self._swap(i, parent)
      i = parent

  # Handle operations

  def _change_priority(self, node: HeapNode[E, P], new_priority: P) -> None:
    order = self._compare(new_priority, node.priority)
    if order < 0:
      node.priority = new_priority
      self._sift_up(node.position)
    elif order > 0:
      node.priority = new_priority
      self._sift_down(node.position)

  def _remove_node(self, node: HeapNode[E, P]) -> None:
    index = node.position
    last = len(self._tree) - 1
    logger.debug("Removing node at position %d of %d", index, len(self._tree))
    if index == last:
      # Covers the single-entry queue as well.
      self._tree.pop()
      node.valid = False
      return
    self._swap(index, last)
    self._tree.pop()
    node.valid = False
    moved = self._tree[index]
    if index > 0 and self._compare(self._tree[self._parent(index)].priority, moved.priority) > 0:
      self._sift_up(index)
    else:
      self._sift_down(index)
