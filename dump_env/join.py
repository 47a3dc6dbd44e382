from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from .environ import EnvItem

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .environ import EnvItems

logger = logging.getLogger(__name__)


def left_join(left: Sequence[EnvItem], right: Sequence[EnvItem]) -> EnvItems:
    """Keep every item in `left` (template), overwriting values with `right` (environment).

    Keys are matched against the first item in `right` with the same key. Keys only
    present in `right` are not included; the result has the same length and order as `left`.
    """
    result = []
    for item in left:
        match = next((other for other in right if other.key == item.key), None)
        if match is None:
            result.append(item)
        else:
            result.append(EnvItem(item.key, match.value))

    return result


def full_join(left: Sequence[EnvItem], right: Sequence[EnvItem]) -> EnvItems:
    """Same as `left_join`, extended with the items of `right` whose keys are missing in `left`.

    The result is sorted by the raw bytes of the keys (then values) for reproducible output.
    """
    result = left_join(left, right)
    for item in right:
        if not _has_key(item.key, result):
            result.append(item)

    logger.debug(
        "Joined %d template items with %d environment items into %d items",
        len(left),
        len(right),
        len(result),
    )
    return sorted(result, key=_sort_key)


def _has_key(key: str, items: Sequence[EnvItem]) -> bool:
    return any(item.key == key for item in items)


def _sort_key(item: EnvItem) -> tuple[bytes, bytes]:
    # Compare raw bytes; lone surrogates would otherwise sort apart from their byte values
    return os.fsencode(item.key), os.fsencode(item.value)
