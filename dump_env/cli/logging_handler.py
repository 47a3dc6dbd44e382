from __future__ import annotations

import logging
import logging.config
from typing import Any

from rich.console import Console
from typing_extensions import override


class RichLogHandler(logging.Handler):
    """Custom logging handler to use Rich Console."""

    def __init__(self, console: Console, *args: Any, **kwargs: Any) -> None:
        """Initialize the log handler.

        Args:
            console: Rich console instance.
            *args: Additional arguments for the logging handler.
            **kwargs: Additional keyword arguments for the logging handler.
        """
        super().__init__(*args, **kwargs)
        self.console = console

    @override
    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            self.console.print(msg)
        except Exception:  # noqa: BLE001
            self.handleError(record)


def configure_logging(*, verbose: bool, console: Console | None = None) -> None:
    """Route package logs to the console; stdout is left for the dumped variables.

    Args:
        verbose: Whether to show debug messages.
        console: Console to print the logs to. Defaults to a console bound to stderr.
    """
    # Keys and values are printed verbatim; no markup or highlighting
    console = console or Console(stderr=True, markup=False, emoji=False, highlight=False, soft_wrap=True)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": "%(message)s"},
                "verbose": {"format": "%(levelname)-8s %(name)s: %(message)s"},
            },
            "handlers": {
                "console": {
                    "()": RichLogHandler,
                    "console": console,
                    "formatter": "verbose" if verbose else "default",
                },
            },
            "loggers": {
                "dump_env": {
                    "handlers": ["console"],
                    "level": logging.DEBUG if verbose else logging.WARNING,
                },
            },
        },
    )

