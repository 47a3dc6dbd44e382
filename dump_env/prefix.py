from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .environ import EnvItem

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .environ import EnvItems

logger = logging.getLogger(__name__)


def strip_prefixes(prefixes: Sequence[str], items: Iterable[EnvItem]) -> EnvItems:
    """Remove the first matching prefix from each item's key.

    Prefixes are tested in the given order; only the first hit is removed, so
    `test_test2_c` with prefixes `test_` and `test2_` becomes `test2_c`.
    Items without a matching prefix are passed through unchanged.
    """
    result = []
    for item in items:
        for prefix in prefixes:
            if item.key.startswith(prefix):
                logger.debug("Stripped prefix %r from %r", prefix, item.key)
                item = EnvItem(item.key.removeprefix(prefix), item.value)  # noqa: PLW2901
                break

        result.append(item)

    return result
