from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator


def log_start(logger: logging.Logger, action: str) -> float:
	"""Log that action is starting and return the start time for log_complete."""
	logger.info(f"Starting {action}")
	return time.perf_counter()


def log_complete(logger: logging.Logger, action: str, started: float) -> float:
	elapsed = time.perf_counter() - started
	logger.info(f"Completed {action} in {elapsed:.2f}s")
	return elapsed


@contextmanager
def timed(logger: logging.Logger, action: str) -> Iterator[None]:
	"""Wrap a block with start/complete messages on the given logger.

	If the block raises, a failure message is logged instead of the
	completion message and the exception is re-raised.
	"""
	started = log_start(logger, action)
	try:
		yield
	except BaseException:
		logger.error(f"Failed {action} after {time.perf_counter() - started:.2f}s")
		raise
	log_complete(logger, action, started)
