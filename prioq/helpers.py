import logging
import os
from typing import Any


def get_logger(name='prioq'):
  logger = logging.getLogger(name)
  logging.basicConfig(format="[%(asctime)s %(levelname)s]: %(message)s")
  debug = os.environ.get('PRIOQ_DEBUG', False)
  debug = debug == 'true' or debug == '1'
  logger.setLevel(logging.DEBUG if debug else logging.INFO)
  return logger


def natural_order(a: Any, b: Any) -> int:
  """Three-way comparison using the priorities' own ordering."""
  if a < b:
    return -1
  if b < a:
    return 1
  return 0


def human_time(seconds: float) -> str:
  if seconds < 1:
    return f"{seconds * 1e6:.0f} microseconds"
  elif seconds < 60:
    return f"{seconds:.2f} second(s)"
  else:
    seconds = int(seconds)
    return "{:d}:{:02d} minute(s)".format(seconds // 60, seconds % 60)
