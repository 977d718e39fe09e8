"""Exceptions raised by rcgen."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error rcgen raises on purpose."""


class MissingNameError(ScaffoldError):
    """Raised when no component name was given."""

    def __init__(self) -> None:
        super().__init__("A component name is required: rcgen create <name>")


class ComponentExistsError(ScaffoldError):
    """Raised when the component directory is already present."""

    def __init__(self, identifier: str, directory: Path) -> None:
        self.identifier = identifier
        self.directory = directory
        super().__init__(
            f"Cannot create component, a directory with name: {identifier} already exists !"
        )


class WorkspaceRootNotFoundError(ScaffoldError):
    """Raised when no project root exists above the starting directory."""

    def __init__(self, start: Path) -> None:
        self.start = start
        super().__init__(f"No package.json could be found upwards from directory {start}")


class UnresolvedConventionError(ScaffoldError):
    """Raised when a request reaches the generator with an undecided flag."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Convention flag {flag!r} must be resolved before generation")
