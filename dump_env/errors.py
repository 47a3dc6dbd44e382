from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class DumpEnvError(Exception):
    """Base exception for all dump-env errors."""


class TemplateNotFoundError(DumpEnvError):
    """Template file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Template not found: {path}")
        self.path = path
