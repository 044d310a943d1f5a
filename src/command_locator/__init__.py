"""Token-based discovery of commands declared in PowerShell script trees.

Exposes a simple API:
    locate(root_path) -> CommandMap
which maps each declared function/workflow name to the record that defined it.
"""

from .errors import CommandLocatorError, NoOrchestrationDeclaredError, PathNotFoundError  # noqa: F401
from .locator import (  # noqa: F401
    file_has_orchestration,
    find_orchestration,
    locate,
    require_orchestration,
    scan_file,
)
from .models import CommandMap, DeclarationKind, DeclarationRecord  # noqa: F401

__all__ = [
    "CommandLocatorError",
    "CommandMap",
    "DeclarationKind",
    "DeclarationRecord",
    "NoOrchestrationDeclaredError",
    "PathNotFoundError",
    "file_has_orchestration",
    "find_orchestration",
    "locate",
    "require_orchestration",
    "scan_file",
]
