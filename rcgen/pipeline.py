"""rcgen command pipeline.

Implements ``rcgen create``:

1. Validate the component name.
2. Locate the workspace root and infer ``is_ts`` / ``is_scss`` for any flag
   the caller left out.
3. Generate the component directory.
4. Append the export line to the parent barrel file.

Usage::

    rcgen create foo-bar
    rcgen create foo-bar --path src/components --isTs --isScss
    python -m rcgen create foo-bar -p src/components -ts
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from rcgen.config import Config
from rcgen.detector import detect_sass, detect_typescript, find_root
from rcgen.errors import ComponentExistsError, MissingNameError
from rcgen.scaffolder import (
    ComponentGenerator,
    ComponentRequest,
    GenerationResult,
    append_export,
    barrel_path_for,
)
from rcgen.utils import console, print_error, print_success, print_summary_table, to_pascal


@dataclass
class CreateResult:
    """Outcome of a successful ``create``."""

    request: ComponentRequest
    generation: GenerationResult
    barrel: Path | None = None


# ---------------------------------------------------------------------------
# Pipeline steps
# ---------------------------------------------------------------------------


def resolve_request(
    name: str | None,
    target_path: str | Path | None = None,
    is_ts: bool | None = None,
    is_scss: bool | None = None,
    *,
    cwd: str | Path | None = None,
) -> ComponentRequest:
    """Build a fully resolved ``ComponentRequest``.

    Flags passed explicitly are kept; missing ones are inferred by scanning
    the workspace root found above *cwd*.  The root is only looked up when
    something needs inferring.

    Raises:
        MissingNameError: If *name* is empty or has no alphanumeric content.
        WorkspaceRootNotFoundError: If inference is needed and no root exists.
    """
    if not name or not to_pascal(name):
        raise MissingNameError()

    start = Path(cwd) if cwd is not None else Path.cwd()
    if is_ts is None or is_scss is None:
        root = find_root(start)
        if is_ts is None:
            is_ts = detect_typescript(root)
        if is_scss is None:
            is_scss = detect_sass(root)

    return ComponentRequest(
        name=name,
        target_path=Path(target_path) if target_path else start,
        is_ts=is_ts,
        is_scss=is_scss,
    )


def create_component(request: ComponentRequest, config: Config | None = None) -> CreateResult:
    """Generate the component and update the barrel file.

    Raises:
        ComponentExistsError: If the component directory already exists.
    """
    config = config or Config()
    generation = ComponentGenerator(request, config).generate()

    barrel: Path | None = None
    if config.update_barrel:
        barrel = append_export(
            barrel_path_for(request.target_path, bool(request.is_ts)),
            generation.identifier,
        )
    return CreateResult(request=request, generation=generation, barrel=barrel)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rcgen",
        description="rcgen -- React component scaffolder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  rcgen create foo-bar\n"
            "  rcgen create foo-bar -p src/components --isTs --isScss\n"
        ),
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (default: read RCGEN_* environment variables)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser(
        "create",
        help="Create files for a component with name <name>",
    )
    create_parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Name of the Component to create",
    )
    create_parser.add_argument(
        "--path", "-p",
        default=None,
        help="Path where to create the Component (default: current directory)",
    )
    create_parser.add_argument(
        "--isTs", "-ts",
        dest="is_ts",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Should generate typescript files (inferred from the workspace if omitted)",
    )
    create_parser.add_argument(
        "--isScss", "-scss",
        dest="is_scss",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Should generate Scss style (inferred from the workspace if omitted)",
    )
    return parser


def _load_config(path: str | None) -> Config:
    if path:
        return Config.load(Path(path))
    return Config.from_env()


def _report(result: CreateResult) -> None:
    rows = {path.name: str(path) for path in result.generation.files}
    if result.barrel is not None:
        rows["barrel"] = str(result.barrel)
    print_summary_table(rows, title=f"Component {result.generation.identifier}")
    print_success(f"Component {result.generation.identifier} created")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``rcgen`` and ``python -m rcgen``."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = _load_config(args.config)

    try:
        request = resolve_request(args.name, args.path, args.is_ts, args.is_scss)
    except MissingNameError as exc:
        print_error(str(exc))
        sys.exit(1)

    try:
        result = create_component(request, config)
    except ComponentExistsError as exc:
        console.print(str(exc), markup=False, highlight=False, soft_wrap=True)
        sys.exit(1)

    _report(result)
    sys.exit(0)


if __name__ == "__main__":
    main()
