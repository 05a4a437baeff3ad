"""
splashy

Browse the latest Unsplash photos or search Unsplash from the command line.

This module defines the entry point to the splashy CLI. It defines a 'cli' command group that
loads the configuration, applies the global output options and hands a SplashyConfig to the
subcommands through the click context. The subcommands themselves live in the subcommands
package and are attached at startup by main().
"""

from io import StringIO
import logging

import click

from splashy.config import load_config
from splashy.cli_utils.console import console
from splashy.cli_utils.console import configure_logging
from splashy.cli_utils.console import warn
from splashy.cli_utils.decorators import catch_errors
from splashy.cli_utils.utils import import_commands
from splashy.cli_utils.utils import attach_commands


@click.group()
@catch_errors
@click.pass_context
@click.option(
    "--verbose",
    "verbosity",
    flag_value="verbose",
    default=True,
    help="Print all output to stdout or the terminal",
)
@click.option(
    "--quiet",
    "verbosity",
    flag_value="quiet",
    help="Silence tables and messages printed to stdout. Errors and --json output are still written.",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Log requests and full response bodies to stderr.",
)
@click.version_option(package_name="splashy")
def cli(ctx: click.Context, verbosity, debug):
    """
    splashy

    Browse and search photos on Unsplash from the command line.


    ====================
    Quickstart
    ====================

    Set your Unsplash access key (or put it in a .env file):

        $ export UNSPLASH_ACCESS_KEY=<your access key>

    Show the ten latest photos:

        $ splashy latest

    Search for cats, second page, five per page, as raw JSON:

        $ splashy search cats --page 2 --per-page 5 --json
    """

    config = load_config()
    configure_logging(logging.DEBUG if debug else config.log_level)

    if not config.UNSPLASH_ACCESS_KEY:
        warn("UNSPLASH_ACCESS_KEY is not set, Unsplash will reject the request.")

    # if verbosity is set to quiet, capture all std_out to a junk stream. None restores sys.stdout.
    console.file = StringIO() if verbosity == "quiet" else None

    ctx.obj = config


def main():

    commands = import_commands()
    attach_commands(cli, commands)
    cli()


if __name__ == "__main__":
    main()
