from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .environ import EnvItem


def render_item(item: EnvItem) -> str:
    """Render an item as `KEY=VALUE` line, without quoting.

    Bytes that are not valid UTF-8 are replaced with U+FFFD.
    """
    return f"{_lossy(item.key)}={_lossy(item.value)}"


def render(items: Iterable[EnvItem]) -> list[str]:
    """Render items as lines, keeping their order."""
    return [render_item(item) for item in items]


def _lossy(s: str) -> str:
    return os.fsencode(s).decode("utf-8", errors="replace")
