"""Component directory generation.

Takes a resolved ``ComponentRequest`` and writes the five component files
(source, stylesheet, story, test, local index) into a new directory named
after the PascalCased component name.
"""

from __future__ import annotations

import shutil
import uuid
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field

from rcgen.config import Config
from rcgen.errors import ComponentExistsError, UnresolvedConventionError
from rcgen.utils import ensure_dir, to_pascal, write_file

from .templates import TemplateKind, render, select_variant


# ---------------------------------------------------------------------------
# Request / result models
# ---------------------------------------------------------------------------


class ComponentRequest(BaseModel):
    """Pydantic model describing one ``create`` invocation."""

    name: str = Field(..., min_length=1, description="Component name as typed by the user")
    target_path: Path = Field(
        default_factory=Path.cwd,
        description="Directory the component directory is created in",
    )
    is_ts: bool | None = Field(default=None, description="Generate TypeScript files")
    is_scss: bool | None = Field(default=None, description="Generate a Sass stylesheet")

    @property
    def identifier(self) -> str:
        """The PascalCased component name."""
        return to_pascal(self.name)

    @property
    def resolved(self) -> bool:
        return self.is_ts is not None and self.is_scss is not None


@dataclass
class GeneratedFile:
    """One planned file, relative to the component directory."""

    name: str
    content: str


@dataclass
class GenerationResult:
    """What a successful generation wrote."""

    identifier: str
    directory: Path
    files: list[Path] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ComponentGenerator:
    """Writes a component scaffold for a resolved request.

    With ``config.atomic_writes`` the files are written into a hidden staging
    directory next to the destination and renamed into place once complete,
    so a failed run leaves nothing behind.  Without it, files are written
    straight into the destination in order.
    """

    def __init__(self, request: ComponentRequest, config: Config | None = None) -> None:
        if request.is_ts is None:
            raise UnresolvedConventionError("is_ts")
        if request.is_scss is None:
            raise UnresolvedConventionError("is_scss")
        self.request = request
        self.config = config or Config()

    # -- Derived values ----------------------------------------------------

    @property
    def identifier(self) -> str:
        return self.request.identifier

    @property
    def component_dir(self) -> Path:
        return Path(self.request.target_path) / self.identifier

    @property
    def script_ext(self) -> str:
        return "tsx" if self.request.is_ts else "jsx"

    @property
    def style_ext(self) -> str:
        return "scss" if self.request.is_scss else "css"

    @property
    def index_ext(self) -> str:
        return "ts" if self.request.is_ts else "js"

    # -- Public API --------------------------------------------------------

    def plan(self) -> list[GeneratedFile]:
        """Return the five files to write, in write order, without touching disk."""
        name = self.identifier
        variant = select_variant(bool(self.request.is_ts))
        return [
            GeneratedFile(
                f"{name}.{self.script_ext}",
                render(TemplateKind.COMPONENT, variant, name, self.style_ext),
            ),
            GeneratedFile(f"{name}.{self.style_ext}", ""),
            GeneratedFile(
                f"{name}.stories.{self.script_ext}",
                render(TemplateKind.STORY, variant, name),
            ),
            GeneratedFile(
                f"{name}.test.{self.script_ext}",
                render(TemplateKind.TEST, variant, name),
            ),
            GeneratedFile(
                f"index.{self.index_ext}",
                render(TemplateKind.INDEX, variant, name),
            ),
        ]

    def generate(self) -> GenerationResult:
        """Create the component directory and its files.

        Raises:
            ComponentExistsError: If the component directory already exists.
                Nothing is written in that case.
            OSError: Any file-system failure while writing.
        """
        directory = self.component_dir
        if directory.exists():
            raise ComponentExistsError(self.identifier, directory)

        files = self.plan()
        ensure_dir(self.request.target_path)

        if self.config.atomic_writes:
            self._write_staged(directory, files)
        else:
            directory.mkdir()
            for generated in files:
                write_file(directory / generated.name, generated.content)

        return GenerationResult(
            identifier=self.identifier,
            directory=directory,
            files=[directory / generated.name for generated in files],
        )

    # -- Internal helpers --------------------------------------------------

    def _write_staged(self, directory: Path, files: list[GeneratedFile]) -> None:
        staging = directory.parent / f".{directory.name}.{uuid.uuid4().hex[:8]}.tmp"
        staging.mkdir()
        try:
            for generated in files:
                write_file(staging / generated.name, generated.content)
            staging.rename(directory)
        except BaseException:
            shutil.rmtree(staging, ignore_errors=True)
            raise
