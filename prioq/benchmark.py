import argparse
import time

import numpy as np

from prioq.helpers import get_logger, human_time
from prioq.priority_queue import PriorityQueue
from prioq.util import OperationTimings

logger = get_logger()

OPERATIONS = ['insert', 'change_priority', 'remove', 'extract_min']


def run_benchmark(size: int, seed: int = 0) -> OperationTimings:
  """
  Insert `size` random priorities, change and remove a random subset of them
  through their handles, then drain the queue. Returns the per-operation
  latency samples.
  """
  rng = np.random.default_rng(seed)
  timings = OperationTimings()
  queue = PriorityQueue(capacity=size)

  handles = []
  for value, priority in enumerate(rng.integers(0, size, size=size).tolist()):
    with timings.measure('insert'):
      handles.append(queue.insert(value, priority))

  changed = rng.choice(size, size=size // 4, replace=False).tolist()
  for index, priority in zip(changed, rng.integers(0, size, size=len(changed)).tolist()):
    with timings.measure('change_priority'):
      handles[index].change_priority(priority)

  removed = rng.choice(size, size=size // 4, replace=False).tolist()
  for index in removed:
    with timings.measure('remove'):
      handles[index].remove()

  previous = None
  while not queue.is_empty():
    with timings.measure('extract_min'):
      entry = queue.extract_min()
    if previous is not None and entry.priority < previous:
      raise AssertionError(f"Out of order extraction: {entry.priority} after {previous}")
    previous = entry.priority

  return timings


def run():
  parser = argparse.ArgumentParser(
    "Time PriorityQueue operations on random workloads", formatter_class=argparse.ArgumentDefaultsHelpFormatter
  )
  parser.add_argument('--size', '-n', type=int, default=100000, help='number of elements to insert')
  parser.add_argument('--seed', type=int, default=0, help='random seed')
  args = parser.parse_args()

  start = time.perf_counter()
  timings = run_benchmark(args.size, args.seed)
  for operation in OPERATIONS:
    logger.info(f"{operation:16s} (us) {timings.report(operation)}")
  logger.info(f"Total: {human_time(time.perf_counter() - start)}")


if __name__ == "__main__":
  run()
