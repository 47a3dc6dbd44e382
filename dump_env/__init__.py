from .environ import EnvItem, EnvItems, read_environ
from .errors import DumpEnvError, TemplateNotFoundError
from .formatting import render, render_item
from .join import full_join, left_join
from .prefix import strip_prefixes
from .template import parse_template

__all__ = (
    "DumpEnvError",
    "EnvItem",
    "EnvItems",
    "TemplateNotFoundError",
    "full_join",
    "left_join",
    "parse_template",
    "read_environ",
    "render",
    "render_item",
    "strip_prefixes",
)
