import numpy as np
import pytest

from prioq.util import OperationTimings


def test_summary_matches_numpy():
  timings = OperationTimings()
  v = [1, 2, 3, 4, 5]
  timings.samples['insert'].extend(v)
  s = timings.summary('insert')
  assert s['n'] == 5
  assert s['mean'] == pytest.approx(np.mean(v))
  assert s['std'] == pytest.approx(np.std(v))
  assert s['p50'] == 3
  assert s['max'] == 5


def test_constant_samples_have_zero_std():
  timings = OperationTimings()
  timings.samples['remove'].extend([0.1] * 10)
  assert timings.summary('remove')['std'] == pytest.approx(0.0, abs=1e-12)


def test_unknown_operation_is_empty():
  timings = OperationTimings()
  assert timings.count('poll') == 0
  assert timings.summary('poll') == {'n': 0}
  assert timings.report('poll') == '-'
  assert 'poll' not in timings.samples


def test_measure_records_one_sample_per_block():
  timings = OperationTimings()
  for _ in range(3):
    with timings.measure('insert'):
      pass
  assert timings.count('insert') == 3
  assert all(sample >= 0 for sample in timings.samples['insert'])
  assert timings.report('insert').startswith('n:         3')


def test_measure_records_when_block_raises():
  timings = OperationTimings()
  with pytest.raises(KeyError):
    with timings.measure('extract_min'):
      raise KeyError('x')
  assert timings.count('extract_min') == 1
