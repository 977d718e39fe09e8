"""Shared pytest fixtures for the rcgen test suite.

Provides reusable fixtures for:
- Temporary JavaScript workspaces (plain, TypeScript, Sass)
- A target directory for generated components
- A helper that snapshots a directory tree
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest


def _write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Workspaces
# ---------------------------------------------------------------------------


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A plain JavaScript workspace: ``package.json`` and one ``.jsx`` file."""
    root = tmp_path / "workspace"
    _write(root / "package.json", json.dumps({"name": "demo", "version": "1.0.0"}))
    _write(root / "src" / "App.jsx", "export default () => null\n")
    _write(root / "src" / "App.css", "")
    return root


@pytest.fixture
def ts_workspace(workspace: Path) -> Path:
    """The plain workspace plus a TypeScript source file."""
    _write(workspace / "src" / "utils" / "helpers.ts", "export const x = 1\n")
    return workspace


@pytest.fixture
def scss_workspace(workspace: Path) -> Path:
    """The plain workspace plus a Sass stylesheet."""
    _write(workspace / "src" / "styles" / "theme.scss", "$primary: red;\n")
    return workspace


@pytest.fixture
def components_dir(workspace: Path) -> Path:
    """Directory inside the workspace where components are generated."""
    target = workspace / "src" / "components"
    target.mkdir(parents=True)
    return target


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def snapshot_tree(root: Path) -> dict[str, str]:
    """Map every file under *root* (relative posix path) to its content."""
    return {
        p.relative_to(root).as_posix(): p.read_text(encoding="utf-8")
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def snapshot():
    return snapshot_tree


@pytest.fixture
def write_file():
    return _write
