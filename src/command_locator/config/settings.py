from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

from script_helpers.booleans import parse_bool


def _load_env() -> None:
	# Try CWD first
	load_dotenv(dotenv_path=Path.cwd() / ".env")
	# Walk up from this file looking for .env as fallback
	current = Path(__file__).resolve()
	for parent in [current.parent, *current.parents]:
		candidate = parent / ".env"
		if candidate.exists():
			load_dotenv(dotenv_path=candidate, override=False)
			break


_load_env()


def normalize_extensions(raw: str | Iterable[str]) -> List[str]:
	"""Turn "ps1, .PSM1" style input into [".ps1", ".psm1"]."""
	items = raw.split(",") if isinstance(raw, str) else raw
	exts: List[str] = []
	for item in items:
		item = item.strip().lower()
		if not item:
			continue
		if not item.startswith("."):
			item = "." + item
		if item not in exts:
			exts.append(item)
	return exts


@dataclass
class Settings:
	SCRIPT_EXTENSIONS: List[str] = field(
		default_factory=lambda: normalize_extensions(os.getenv("SCRIPT_EXTENSIONS", ".ps1,.psm1"))
	)
	FOLLOW_HIDDEN: bool = parse_bool(os.getenv("FOLLOW_HIDDEN"), default=False)

	LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
	LOG_FORMAT: str = os.getenv("LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s: %(message)s")


settings = Settings()
