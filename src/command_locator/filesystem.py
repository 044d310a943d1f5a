from __future__ import annotations

from pathlib import Path
from typing import Generator, Iterable

from .errors import PathNotFoundError


def is_hidden_path(path: Path, root: Path) -> bool:
    """Return True if any component of path below root starts with a dot.

    The root itself is never considered, so scanning inside a hidden
    directory that was passed in explicitly still works.
    """
    try:
        relative = path.relative_to(root)
    except ValueError:
        return False
    return any(part.startswith(".") and part not in {".", ".."} for part in relative.parts[:-1])


def has_script_extension(path: Path, extensions: Iterable[str]) -> bool:
    return path.suffix.lower() in {ext.lower() for ext in extensions}


def discover_script_files(
    root: Path,
    extensions: Iterable[str],
    include_hidden: bool = False,
) -> Generator[Path, None, None]:
    """Yield script files under root whose suffix is one of extensions.

    Files are yielded in sorted order for determinism. When root is a file
    it is yielded on its own if its suffix matches.
    """
    if not root.exists():
        raise PathNotFoundError(root)
    exts = {ext.lower() for ext in extensions}
    if root.is_file():
        if has_script_extension(root, exts):
            yield root.resolve()
        return
    candidates: Iterable[Path] = sorted(root.rglob("*"))
    for path in candidates:
        if not path.is_file():
            continue
        if not has_script_extension(path, exts):
            continue
        if not include_hidden and is_hidden_path(path, root):
            continue
        yield path.resolve()
