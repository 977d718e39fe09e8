"""Recursive search for files that reveal a project's conventions."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

EXCLUDED_DIRS: frozenset[str] = frozenset({"node_modules", "build", "bin", "lib"})

TYPED_TOKENS: tuple[str, ...] = (".tsx", ".ts")
SASS_TOKENS: tuple[str, ...] = (".scss",)


def is_excluded(name: str) -> bool:
    """Return ``True`` for dot-entries and conventional build/vendor directories."""
    return name.startswith(".") or name in EXCLUDED_DIRS


def contains_match(root: str | Path, tokens: str | Iterable[str]) -> bool:
    """Return ``True`` if any entry under *root* has a path containing a token.

    Directories are descended into unless excluded; every other entry
    (files, symlinks, and the excluded directories themselves) is matched on
    its full path string.  A missing *root* yields ``False``.
    """
    if isinstance(tokens, str):
        tokens = (tokens,)
    else:
        tokens = tuple(tokens)

    root = Path(root)
    if not root.exists():
        return False
    return _scan(root, tokens)


def _scan(directory: Path, tokens: tuple[str, ...]) -> bool:
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False) and not is_excluded(entry.name):
                if _scan(Path(entry.path), tokens):
                    return True
            elif any(token in entry.path for token in tokens):
                return True
    return False


def detect_typescript(root: str | Path) -> bool:
    """Whether the workspace under *root* contains TypeScript sources."""
    return contains_match(root, TYPED_TOKENS)


def detect_sass(root: str | Path) -> bool:
    """Whether the workspace under *root* contains Sass stylesheets."""
    return contains_match(root, SASS_TOKENS)
