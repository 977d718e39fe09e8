"""Shared utility functions for rcgen.

Provides identifier normalisation, file-system helpers and Rich-based
console reporting.  Every user-facing line the tool prints goes through the
module-level ``console`` so tests can capture it from standard output.
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Identifier helpers
# ---------------------------------------------------------------------------

_SPLIT_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_SPLIT_UPPER_UPPER = re.compile(r"([A-Z])([A-Z][a-z])")
_STRIP = re.compile(r"[^A-Za-z0-9]+")


def to_pascal(name: str) -> str:
    """Normalise an arbitrary identifier to PascalCase.

    Word boundaries are case transitions (``fooBar``, ``HTMLParser``) and any
    run of non-alphanumeric characters.  Each word keeps its first character
    upper-cased and the rest lower-cased; a later word starting with a digit
    is joined with ``_`` so it stays distinguishable.

    Examples::

        to_pascal("foo-bar")     -> "FooBar"
        to_pascal("fooBar")      -> "FooBar"
        to_pascal("my_button 2") -> "MyButton_2"
        to_pascal("FooBar")      -> "FooBar"
    """
    spaced = _SPLIT_LOWER_UPPER.sub(r"\1 \2", name)
    spaced = _SPLIT_UPPER_UPPER.sub(r"\1 \2", spaced)
    words = [w for w in _STRIP.sub(" ", spaced).split(" ") if w]

    parts: list[str] = []
    for index, word in enumerate(words):
        first, rest = word[0], word[1:].lower()
        if index > 0 and first.isdigit():
            parts.append(f"_{first}{rest}")
        else:
            parts.append(first.upper() + rest)
    return "".join(parts)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The directory as a ``Path``.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_file(path: Path, content: str) -> Path:
    """Write *content* to *path*, replacing anything already there."""
    path.write_text(content, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
