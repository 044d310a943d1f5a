from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class TokenType(str, Enum):
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    VARIABLE = "variable"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"
    OPERATOR = "operator"
    GROUP = "group"
    NEWLINE = "newline"
    OTHER = "other"


# Tokens that never carry a declaration name.
TRIVIA_TYPES = frozenset({TokenType.COMMENT, TokenType.NEWLINE})


@dataclass(frozen=True)
class Token:
    type: TokenType
    content: str
    line: int
    column: int

    @property
    def is_trivia(self) -> bool:
        return self.type in TRIVIA_TYPES


class DeclarationKind(str, Enum):
    ROUTINE = "routine"
    ORCHESTRATION = "orchestration"

    @classmethod
    def for_keyword(cls, keyword: str) -> Optional["DeclarationKind"]:
        """Map a declaring keyword to its kind; None for any other keyword."""
        return _KEYWORD_KINDS.get(keyword.lower())


_KEYWORD_KINDS: Dict[str, DeclarationKind] = {
    "function": DeclarationKind.ROUTINE,
    "workflow": DeclarationKind.ORCHESTRATION,
}


class DeclarationRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    kind: DeclarationKind
    source_path: str
    line: int


class CommandMap(Mapping[str, DeclarationRecord]):
    """Declared command name -> the record that defined it.

    Names are unique. Adding a record whose name is already present
    replaces the earlier entry.
    """

    def __init__(self) -> None:
        self._records: Dict[str, DeclarationRecord] = {}

    def add(self, record: DeclarationRecord) -> Optional[DeclarationRecord]:
        """Store record under its name and return the entry it replaced, if any."""
        previous = self._records.get(record.name)
        if previous is not None:
            logger.debug(
                f"Declaration '{record.name}' in {record.source_path} overrides {previous.source_path}"
            )
        self._records[record.name] = record
        return previous

    def of_kind(self, kind: DeclarationKind) -> List[DeclarationRecord]:
        return [r for r in self._records.values() if r.kind is kind]

    def to_dict(self) -> Dict[str, Dict[str, object]]:
        return {name: rec.model_dump(mode="json") for name, rec in self._records.items()}

    def __getitem__(self, name: str) -> DeclarationRecord:
        return self._records[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"CommandMap({sorted(self._records)!r})"
