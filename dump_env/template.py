from __future__ import annotations

import logging
from pathlib import Path

from pydantic import validate_call

from .environ import EnvItem, EnvItems
from .errors import TemplateNotFoundError

logger = logging.getLogger(__name__)

_COMMENT = b"#"
_SEPARATOR = "="


@validate_call
def parse_template(path: Path) -> EnvItems:
    """Parse a `.env` template file.

    Lines starting with `#` are comments. Every other line containing `=` is split at
    the first `=` into key and value, both with surrounding whitespace trimmed. Lines
    without `=` and lines that are not valid UTF-8 are skipped.

    Duplicate keys are kept in file order; nothing is deduplicated here.

    Args:
        path: Path to the template file.

    Returns:
        Declared items, in file order.

    Raises:
        TemplateNotFoundError: If the file does not exist.
        OSError: If the file could not be read.
    """
    if not path.exists():
        raise TemplateNotFoundError(path)

    items: EnvItems = []
    seen: set[str] = set()
    with path.open("rb") as f:
        for lineno, raw in enumerate(f, start=1):
            if raw.startswith(_COMMENT):
                continue

            try:
                line = raw.rstrip(b"\n").removesuffix(b"\r").decode("utf-8")
            except UnicodeDecodeError:
                logger.debug("Skipping line %d of %s; not a valid UTF-8 text", lineno, path)
                continue

            key, sep, value = line.partition(_SEPARATOR)
            if not sep:
                continue

            item = EnvItem(key.strip(), value.strip())
            if item.key in seen:
                logger.warning("⚠️ Key %r declared more than once in %s (line %d)", item.key, path, lineno)

            seen.add(item.key)
            items.append(item)

    logger.debug("Parsed %d items from template %s", len(items), path)
    return items
