"""
splashy CLI Utilities

This module contains utilities for working across click subcommands: importing subcommands from
the subcommands package and attaching them to the entry point, and printing the photos that a
subcommand got back from Unsplash.
"""

import json
import pkgutil
import importlib
from collections.abc import Iterable

import click
from rich.table import Table

import splashy.subcommands

from splashy.models import Photo
from splashy.cli_utils.console import console
from splashy.cli_utils.console import describe
from splashy.cli_utils.console import warn


def import_commands(
    package=splashy.subcommands,
) -> list[click.Command]:
    """
    Retrieve a list of click Commands from the modules of package. Default package is the built in
    subcommands package for commands that come pre-installed with splashy.

    A valid splashy command module should define a "cli" function that is wrapped as
    a click Command object. This function will be exposed as a command to the end user.
    Set the 'name' keyword argument in the @click.command decorator to set the
    name of the command intended for the end user.
    """

    commands = []

    for module_info in pkgutil.iter_modules(package.__path__, prefix=f"{package.__name__}."):
        module = importlib.import_module(module_info.name)

        try:
            commands.append(getattr(module, "cli"))

        except AttributeError:
            warn(f"Cannot add command {module_info.name}: no 'cli' function found.")

    return commands


def attach_commands(group: click.Group, commands: Iterable[click.Command]):
    """
    Attach each command in a list of click Command objects to a provided group. Useful when
    retrieving a dynamic list of subcommands with import_commands().
    """

    for command in commands:
        group.add_command(command)


def print_photos(photos: list[Photo], as_json: bool = False, title: str = None):
    """
    Print photos either as a table or, with as_json, as the JSON document Unsplash sent.
    """

    if as_json:
        click.echo(json.dumps(photos, indent=2))
        return

    if not photos:
        describe(":see_no_evil-emoji: no photos found")
        return

    table = Table(title=title)
    table.add_column("id", no_wrap=True)
    table.add_column("by")
    table.add_column("likes", justify="right")
    table.add_column("description")
    table.add_column("url", overflow="fold")

    for photo in photos:
        user = photo.get("user") or {}
        table.add_row(
            photo.get("id", ""),
            f"{user.get('name', '')} (@{user.get('username', '')})",
            str(photo.get("likes", 0)),
            photo.get("description") or photo.get("alt_description") or "",
            (photo.get("urls") or {}).get("regular", ""),
        )

    console.print(table)
