from __future__ import annotations

import logging
import os
from typing import List, MutableMapping, Optional

logger = logging.getLogger(__name__)


def _environ(environ: Optional[MutableMapping[str, str]]) -> MutableMapping[str, str]:
	return os.environ if environ is None else environ


def _same_entry(a: str, b: str) -> bool:
	return os.path.normcase(os.path.normpath(a)) == os.path.normcase(os.path.normpath(b))


def path_entries(variable: str = "PATH", environ: Optional[MutableMapping[str, str]] = None) -> List[str]:
	"""Split a path-list variable into its non-empty entries."""
	raw = _environ(environ).get(variable, "")
	return [entry for entry in raw.split(os.pathsep) if entry]


def _store(variable: str, entries: List[str], environ: MutableMapping[str, str]) -> List[str]:
	environ[variable] = os.pathsep.join(entries)
	return entries


def add_path_entry(
	entry: str,
	variable: str = "PATH",
	prepend: bool = False,
	environ: Optional[MutableMapping[str, str]] = None,
) -> List[str]:
	"""Add entry to a path-list variable unless it is already present.

	Returns the entries after the change. An entry that is already listed is
	left where it is, even when prepend is requested.
	"""
	env = _environ(environ)
	entries = path_entries(variable, env)
	if any(_same_entry(existing, entry) for existing in entries):
		logger.debug(f"{entry} already in {variable}")
		return entries
	entries = [entry, *entries] if prepend else [*entries, entry]
	logger.debug(f"Added {entry} to {variable}")
	return _store(variable, entries, env)


def remove_path_entry(
	entry: str,
	variable: str = "PATH",
	environ: Optional[MutableMapping[str, str]] = None,
) -> List[str]:
	env = _environ(environ)
	entries = [existing for existing in path_entries(variable, env) if not _same_entry(existing, entry)]
	return _store(variable, entries, env)
