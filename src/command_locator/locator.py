from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .config.settings import normalize_extensions, settings
from .errors import NoOrchestrationDeclaredError, PathNotFoundError
from .filesystem import discover_script_files
from .models import CommandMap, DeclarationKind, DeclarationRecord, TokenType
from .tokenizer import next_significant, tokenize

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _read_script(path: Path) -> str:
    # utf-8-sig drops the BOM many editors write into .ps1 files.
    # Read and decode errors are left to the caller.
    return path.read_text(encoding="utf-8-sig")


def extract_declarations(text: str, source_path: str) -> List[DeclarationRecord]:
    """Return the function/workflow declarations in text, in source order.

    A declaring keyword with nothing after it is ignored.
    """
    tokens = tokenize(text)
    records: List[DeclarationRecord] = []
    for index, token in enumerate(tokens):
        if token.type is not TokenType.KEYWORD:
            continue
        kind = DeclarationKind.for_keyword(token.content)
        if kind is None:
            continue
        name_token = next_significant(tokens, index)
        if name_token is None:
            logger.debug(f"'{token.content}' at {source_path}:{token.line} has no name; skipped")
            continue
        records.append(DeclarationRecord(
            name=name_token.content,
            kind=kind,
            source_path=source_path,
            line=token.line,
        ))
    return records


def scan_file(path: PathLike) -> List[DeclarationRecord]:
    """Read one script file and return its declarations."""
    file_path = Path(path)
    if not file_path.exists():
        raise PathNotFoundError(file_path)
    resolved = file_path.resolve()
    return extract_declarations(_read_script(resolved), str(resolved))


def locate(
    root_path: PathLike,
    extensions: Optional[Union[str, Iterable[str]]] = None,
    include_hidden: Optional[bool] = None,
) -> CommandMap:
    """Map every command declared in the script files under root_path.

    Files are scanned in sorted path order and later declarations of a name
    replace earlier ones. A failure to read any file aborts the whole scan.
    """
    root = Path(root_path)
    exts = normalize_extensions(extensions) if extensions is not None else settings.SCRIPT_EXTENSIONS
    hidden = settings.FOLLOW_HIDDEN if include_hidden is None else include_hidden

    logger.info(f"Locating commands under {root} (extensions: {', '.join(exts)})")
    commands = CommandMap()
    files_scanned = 0
    for file in discover_script_files(root, exts, include_hidden=hidden):
        files_scanned += 1
        logger.debug(f"Scanning {file}")
        for record in extract_declarations(_read_script(file), str(file)):
            commands.add(record)

    logger.info(f"Scanned {files_scanned} files, found {len(commands)} commands")
    return commands


def find_orchestration(path: PathLike) -> Optional[DeclarationRecord]:
    """Return the first workflow declared in the file at path, or None."""
    for record in scan_file(path):
        if record.kind is DeclarationKind.ORCHESTRATION:
            return record
    return None


def require_orchestration(path: PathLike) -> DeclarationRecord:
    record = find_orchestration(path)
    if record is None:
        raise NoOrchestrationDeclaredError(path)
    return record


def file_has_orchestration(path: PathLike) -> bool:
    return find_orchestration(path) is not None
