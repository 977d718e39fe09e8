"""rcgen configuration.

Typed settings for the scaffolder.  They are Pydantic v2 models so they can
be validated at construction time and read from environment variables or a
JSON file without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_ENV_PREFIX = "RCGEN_"


class Config(BaseModel):
    """Global rcgen configuration.

    Created once by the CLI entry point and passed to the generator.
    """

    atomic_writes: bool = Field(
        default=True,
        description="Write component files into a temporary directory and rename it into place",
    )
    update_barrel: bool = Field(
        default=True,
        description="Append an export line to the parent index file after generation",
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a configuration from JSON.

        Raises:
            FileNotFoundError: If *path* does not exist.
            pydantic.ValidationError: If the content is not a valid config.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            RCGEN_ATOMIC_WRITES, RCGEN_UPDATE_BARREL.

        Values are parsed by pydantic's boolean coercion, so ``1``/``0``,
        ``true``/``false``, ``yes``/``no`` and ``on``/``off`` are accepted.
        """
        kwargs: dict[str, Any] = {}
        for field_name in cls.model_fields:
            value = os.environ.get(f"{_ENV_PREFIX}{field_name.upper()}")
            if value:
                kwargs[field_name] = value.strip()
        return cls.model_validate(kwargs)
