from __future__ import annotations

from typing import Any, Callable, Optional


def is_valid(value: Any) -> bool:
	"""Default test for first_valid: not None and not a blank string."""
	if value is None:
		return False
	if isinstance(value, str) and not value.strip():
		return False
	return True


def first_valid(*values: Any, predicate: Optional[Callable[[Any], bool]] = None, default: Any = None) -> Any:
	check = predicate or is_valid
	for value in values:
		if check(value):
			return value
	return default
