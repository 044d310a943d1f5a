from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Dict

from pydantic import BaseModel


def _convert(value: Any, deep: bool) -> Any:
	if not deep:
		return value
	if isinstance(value, (str, bytes, int, float, bool, type(None))):
		return value
	if is_record(value):
		return to_dict(value, deep=True)
	if isinstance(value, (list, tuple, set, frozenset)):
		return [_convert(v, deep) for v in value]
	return value


def is_record(obj: Any) -> bool:
	if isinstance(obj, (Mapping, BaseModel)):
		return True
	if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
		return True
	if isinstance(obj, tuple) and hasattr(obj, "_asdict"):
		return True
	return False


def to_dict(obj: Any, deep: bool = True) -> Dict[str, Any]:
	"""Convert a record-like object into a plain dict.

	Handles mappings, pydantic models, dataclass instances, namedtuples and
	plain objects with a __dict__. With deep=True nested records and
	sequences of records are converted too.
	"""
	if isinstance(obj, Mapping):
		items = dict(obj)
	elif isinstance(obj, BaseModel):
		items = {name: getattr(obj, name) for name in type(obj).model_fields}
	elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
		items = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
	elif isinstance(obj, tuple) and hasattr(obj, "_asdict"):
		items = dict(obj._asdict())
	elif hasattr(obj, "__dict__"):
		items = {k: v for k, v in vars(obj).items() if not k.startswith("_")}
	else:
		raise TypeError(f"Cannot convert {type(obj).__name__} to a dict")
	return {key: _convert(value, deep) for key, value in items.items()}


def to_str_dict(mapping: Mapping[Any, Any]) -> Dict[str, str]:
	"""Stringify keys and values, dropping entries whose value is None."""
	return {str(key): str(value) for key, value in mapping.items() if value is not None}
