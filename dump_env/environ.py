from __future__ import annotations

import os
from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from collections.abc import Mapping


class EnvItem(NamedTuple):
    """Single environment variable.

    Strings read from the process environment may hold lone surrogates standing for
    bytes that are not valid in the filesystem encoding (`surrogateescape`). They are
    compared as-is and only converted lossily when rendered.
    """

    key: str
    value: str


EnvItems = list[EnvItem]


def read_environ(environ: Optional[Mapping[str, str]] = None) -> EnvItems:
    """Snapshot the environment variables, in the mapping's iteration order.

    Args:
        environ: Mapping to read from. Defaults to the current process environment.
    """
    if environ is None:
        environ = os.environ

    return [EnvItem(key, value) for key, value in environ.items()]
