from __future__ import annotations

from typing import Optional, Union


TRUE_STRINGS = frozenset({"true", "$true", "yes", "y", "on", "1"})
FALSE_STRINGS = frozenset({"false", "$false", "no", "n", "off", "0"})


def parse_bool(value: Union[str, int, bool, None], default: Optional[bool] = None) -> bool:
	"""Interpret a flag-like value as a bool.

	Strings are compared case-insensitively after stripping whitespace.
	None and blank strings fall back to `default`; without a default they are
	rejected like any other unrecognised value.
	"""
	if isinstance(value, bool):
		return value
	if isinstance(value, int):
		if value in (0, 1):
			return bool(value)
		raise ValueError(f"Cannot interpret {value!r} as a boolean")
	text = (value or "").strip().lower()
	if not text:
		if default is None:
			raise ValueError("Cannot interpret an empty value as a boolean")
		return default
	if text in TRUE_STRINGS:
		return True
	if text in FALSE_STRINGS:
		return False
	raise ValueError(f"Cannot interpret {value!r} as a boolean")
