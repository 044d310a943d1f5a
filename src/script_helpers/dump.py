from __future__ import annotations

from enum import Enum
from typing import Any, List

from .mappings import is_record, to_dict


def _scalar(value: Any) -> str:
	if value is None:
		return ""
	if isinstance(value, Enum):
		return str(value.value)
	if is_record(value):
		return "@{" + "; ".join(f"{k}={_scalar(v)}" for k, v in to_dict(value, deep=False).items()) + "}"
	if isinstance(value, (list, tuple, set, frozenset)):
		return "{" + ", ".join(_scalar(v) for v in value) + "}"
	return str(value)


def _format_list(obj: Any) -> str:
	items = to_dict(obj, deep=False)
	if not items:
		return ""
	width = max(len(str(key)) for key in items)
	return "\n".join(f"{str(key).ljust(width)} : {_scalar(value)}" for key, value in items.items())


def dump(obj: Any) -> str:
	"""Render obj as readable text.

	Records become aligned "key : value" lines, sequences of records are
	separated by blank lines, other sequences print one item per line.
	"""
	if isinstance(obj, str):
		return obj
	if is_record(obj) or (hasattr(obj, "__dict__") and not isinstance(obj, (type, Enum))):
		return _format_list(obj)
	if isinstance(obj, (list, tuple, set, frozenset)):
		blocks: List[str] = []
		for item in obj:
			blocks.append(dump(item))
		sep = "\n\n" if any(is_record(item) for item in obj) else "\n"
		return sep.join(blocks)
	return _scalar(obj)
