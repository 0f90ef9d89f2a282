import time
from collections import defaultdict
from contextlib import contextmanager
from typing import Dict, List

import numpy as np


class OperationTimings:
  """Latency samples in microseconds, grouped by operation name."""

  def __init__(self):
    self.samples: Dict[str, List[float]] = defaultdict(list)

  @contextmanager
  def measure(self, operation: str):
    start = time.perf_counter_ns()
    try:
      yield
    finally:
      self.samples[operation].append((time.perf_counter_ns() - start) / 1e3)

  def count(self, operation: str) -> int:
    return len(self.samples.get(operation, []))

  def summary(self, operation: str) -> Dict[str, float]:
    v = np.asarray(self.samples.get(operation, []), dtype=float)
    if v.size == 0:
      return {'n': 0}
    return {
      'n': int(v.size),
      'mean': float(v.mean()),
      'std': float(v.std()),
      'p50': float(np.percentile(v, 50)),
      'p99': float(np.percentile(v, 99)),
      'max': float(v.max()),
    }

  def report(self, operation: str) -> str:
    s = self.summary(operation)
    if s['n'] == 0:
      return '-'
    return 'n: {:9d}\tmean: {:.3f}\tstd: {:.3f}\tp50: {:.3f}\tp99: {:.3f}\tmax: {:.3f}'.format(
      s['n'], s['mean'], s['std'], s['p50'], s['p99'], s['max'])
