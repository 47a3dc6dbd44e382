from __future__ import annotations

from .cli.app import app
from .cli.dump import dump_env

__all__ = ("app", "dump_env", "entrypoint")


def entrypoint() -> None:  # noqa: D103  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    entrypoint()
