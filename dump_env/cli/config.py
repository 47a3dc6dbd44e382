from __future__ import annotations

import enum
from pathlib import Path  # noqa: TC003
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class Mode(str, enum.Enum):
    """What to dump."""

    ENVIRONMENT = "environment"
    """Current environment variables only."""

    SOURCE = "source"
    """Template keys only, with values overwritten from the environment."""

    TEMPLATE = "template"
    """Template keys extended with the environment, sorted by key."""


class DumpConfig(BaseModel):
    """Options of the dump command."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: Optional[Path] = None
    template: Optional[Path] = None
    prefixes: list[str] = []

    @field_validator("prefixes", mode="before")
    @classmethod
    def _split_prefixes(cls, value: object) -> object:
        """Allow comma-separated prefixes in each value, e.g. `-p CI_,APP_`.

        Empty entries of a comma-separated value are dropped, but a value that is empty as a
        whole (`-p ""`) is kept; it matches every key and stops the later prefixes.
        """
        if isinstance(value, str):
            value = [value]

        if isinstance(value, (list, tuple)):
            prefixes = []
            for v in map(str, value):
                if "," in v:
                    prefixes.extend(prefix for prefix in v.split(",") if prefix)
                else:
                    prefixes.append(v)

            return prefixes

        return value

    @property
    def mode(self) -> Mode:
        """Selected mode; `source` wins over `template` if both are set."""
        if self.source is not None:
            return Mode.SOURCE

        if self.template is not None:
            return Mode.TEMPLATE

        return Mode.ENVIRONMENT
