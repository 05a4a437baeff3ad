"""
splashy console utilities

This module provides application-wide access to Rich Console objects for handling writing
to stdout and stderr, plus the logging setup used by the command line. Library modules only
ever call logging.getLogger(__name__); attaching a handler is left to the CLI.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

splashy_theme = Theme(
    {"warning": "orange_red1", "fail": "bold red", "confirm": "", "describe": ""}
)

console = Console(theme=splashy_theme)
error_console = Console(theme=splashy_theme, stderr=True)


"""
Formatting helpers
"""


def warn(msg: str):
    """
    Format msg and print to stderr.
    """

    error_console.print(
        f":exclamation_mark-emoji: [bold]warning: [/] {msg}", style="warning"
    )


def describe(msg: str, **kwargs):
    """
    Format descriptive msg and print to stdout.
    """

    console.print(f"{msg}", style="describe", **kwargs)


def fail(msg: str):
    """
    Format failure msg and print to stderr.
    """

    error_console.print(f":x-emoji: failed. {msg}", style="fail")


def configure_logging(level: int = logging.WARNING):
    """
    Route records from the splashy and httpx loggers to stderr through a RichHandler. Calling
    again only changes the level.
    """

    for name in ("splashy", "httpx"):
        logger = logging.getLogger(name)
        logger.setLevel(level)

        if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
            logger.addHandler(
                RichHandler(console=error_console, show_path=False, markup=False)
            )
