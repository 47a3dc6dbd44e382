# flake8: noqa: B008
from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING, Optional

import typer

from dump_env.environ import read_environ
from dump_env.errors import DumpEnvError
from dump_env.formatting import render
from dump_env.join import full_join, left_join
from dump_env.prefix import strip_prefixes
from dump_env.template import parse_template

from .app import app
from .config import DumpConfig, Mode
from .logging_handler import configure_logging

if TYPE_CHECKING:
    from dump_env.environ import EnvItems

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if not value:
        return

    try:
        current = version("dump-env")
    except PackageNotFoundError:
        current = "unknown"

    typer.echo(f"dump-env {current}")
    raise typer.Exit(0)


@app.command()
def dump_env(
    *,
    source: Optional[Path] = typer.Option(
        None,
        "--source",
        "-s",
        metavar="PATH",
        help=(
            "Template file to dump. Only the keys declared in the template are printed,"
            " with values overwritten by the environment variables of the same name."
        ),
        show_default=False,
    ),
    template: Optional[Path] = typer.Option(
        None,
        "--template",
        "-t",
        metavar="PATH",
        help=(
            "Template file to merge with the environment."
            " All keys of the template and the environment are printed, sorted by key."
        ),
        show_default=False,
    ),
    prefixes: list[str] = typer.Option(
        [],
        "--prefixes",
        "-p",
        metavar="PREFIX",
        help=(
            "Prefixes to strip from the environment variable names, tried in order."
            " Can be repeated or given as a comma-separated list; empty entries of a list are ignored."
        ),
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,  # noqa: FBT003
        "--verbose",
        "-v",
        help="Show debug messages on stderr.",
    ),
    _version: bool = typer.Option(
        False,  # noqa: FBT003
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Print environment variables as `KEY=VALUE` lines, optionally merged with a template.

    This is helpful in CI pipelines where the variables are stored as part of the pipeline
    and a proper `.env` file should be generated from them:

    ```shell
    dump-env --template .env.template --prefixes CI_APP_ > .env
    ```
    """
    configure_logging(verbose=verbose)

    config = DumpConfig(source=source, template=template, prefixes=prefixes)
    if source is not None and template is not None:
        logger.warning("⚠️ Both --source and --template given; using --source %s", source)

    try:
        lines = render(_dump(config))
    except (DumpEnvError, OSError) as exc:
        logger.error("❌ %s", exc)  # noqa: TRY400
        raise typer.Exit(1) from None

    # Print only after everything succeeded; no partial output
    for line in lines:
        typer.echo(line)


def _dump(config: DumpConfig) -> EnvItems:
    """Build the items to print for the selected mode."""
    env = strip_prefixes(config.prefixes, read_environ())
    logger.debug("Read %d environment variables (mode: %s)", len(env), config.mode.value)

    if config.mode == Mode.SOURCE:
        return left_join(parse_template(config.source), env)

    if config.mode == Mode.TEMPLATE:
        return full_join(parse_template(config.template), env)

    return env
