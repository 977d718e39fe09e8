"""Workspace root discovery.

Walks upward from a starting directory looking first for a JavaScript
monorepo root (yarn/npm/bolt workspaces, pnpm, lerna, rush) and falling back
to the nearest directory that holds a ``package.json``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import yaml

from rcgen.errors import WorkspaceRootNotFoundError


def _read_package_json(directory: Path) -> dict[str, Any] | None:
    path = directory / "package.json"
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    return data if isinstance(data, dict) else None


def _has_workspaces(directory: Path) -> bool:
    """yarn / npm: ``workspaces`` as a list or ``{"packages": [...]}``."""
    pkg = _read_package_json(directory)
    if pkg is None:
        return False
    workspaces = pkg.get("workspaces")
    if isinstance(workspaces, dict):
        workspaces = workspaces.get("packages")
    return isinstance(workspaces, list)


def _has_bolt_workspaces(directory: Path) -> bool:
    pkg = _read_package_json(directory)
    if pkg is None:
        return False
    bolt = pkg.get("bolt")
    return isinstance(bolt, dict) and isinstance(bolt.get("workspaces"), list)


def _has_pnpm_workspace(directory: Path) -> bool:
    path = directory / "pnpm-workspace.yaml"
    if not path.is_file():
        return False
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError):
        return False
    return isinstance(data, dict) and isinstance(data.get("packages"), list)


def _has_lerna(directory: Path) -> bool:
    return (directory / "lerna.json").is_file()


def _has_rush(directory: Path) -> bool:
    return (directory / "rush.json").is_file()


# Checked in order at every ancestor.
MONOREPO_CHECKS: tuple[Callable[[Path], bool], ...] = (
    _has_workspaces,
    _has_bolt_workspaces,
    _has_pnpm_workspace,
    _has_lerna,
    _has_rush,
)


def _ancestors(start: Path) -> list[Path]:
    start = start.resolve()
    return [start, *start.parents]


def find_root(start: str | Path) -> Path:
    """Return the project root for *start*.

    Args:
        start: Directory to begin the upward search from.

    Returns:
        The nearest ancestor that is a monorepo root, or failing that the
        nearest ancestor containing ``package.json``.

    Raises:
        WorkspaceRootNotFoundError: If neither exists.
    """
    candidates = _ancestors(Path(start))

    for directory in candidates:
        if any(check(directory) for check in MONOREPO_CHECKS):
            return directory

    for directory in candidates:
        if (directory / "package.json").is_file():
            return directory

    raise WorkspaceRootNotFoundError(Path(start))
