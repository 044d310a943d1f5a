from __future__ import annotations

from pathlib import Path
from typing import Union


class CommandLocatorError(Exception):
    """Base class for errors raised by the command locator."""


class PathNotFoundError(CommandLocatorError):
    """The path handed to the locator does not exist or cannot be reached."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)
        super().__init__(f"Path not found: {self.path}")


class NoOrchestrationDeclaredError(CommandLocatorError):
    """A scan finished but found no `workflow` declaration."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)
        super().__init__(f"No workflow declared in {self.path}")
