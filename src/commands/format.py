"""Formatting commands for unifmt."""

import json
import os
from typing import Optional

import click

from commands.common import make_session
from utils.errors import ConfigMissingError, UniFmtError
from utils.session import FORMAT_ALL_MESSAGE, FORMAT_FILTERED_MESSAGE


def _fail(error: UniFmtError):
    message = str(error)
    if isinstance(error, ConfigMissingError):
        message += "\nRun 'unifmt setup' to create a default options file."
    raise click.ClickException(message)


def _echo_json(results):
    click.echo(json.dumps([result.to_dict() for result in results], indent=2))


@click.group("format")
def format_group():
    """Format C# files with astyle.

    Requires astyle (http://astyle.sourceforge.net/) and an options file.
    Files are formatted one at a time, in place.
    """
    pass


@format_group.command("all")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@click.pass_context
def format_all(ctx: click.Context, yes: bool, json_output: bool):
    """Format every file in the catalog."""
    session = make_session(ctx, yes=yes, quiet=json_output)
    try:
        session.check_options_file()
        session.refresh_catalog()
        if not session.catalog:
            click.echo("No files found.")
            return
        results = session.format_all(FORMAT_ALL_MESSAGE)
    except UniFmtError as e:
        _fail(e)

    if json_output:
        _echo_json(results)


@format_group.command("filtered")
@click.option("--mask", "-m", default=None, help="Only format files whose directory contains TEXT")
@click.option("--search", "-s", default="", help="Only format files whose name contains TEXT")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@click.pass_context
def format_filtered(
    ctx: click.Context,
    mask: Optional[str],
    search: str,
    yes: bool,
    json_output: bool,
):
    """Format the files matching the mask and search."""
    session = make_session(ctx, yes=yes, quiet=json_output)
    try:
        session.check_options_file()
        session.refresh_catalog()
        session.update_mask(bool(mask), mask)
        session.update_search(search)
        if not session.filtered():
            click.echo("No files match the filter.")
            return
        results = session.format_filtered(FORMAT_FILTERED_MESSAGE)
    except UniFmtError as e:
        _fail(e)

    if json_output:
        _echo_json(results)


@format_group.command("file")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@click.pass_context
def format_file(ctx: click.Context, path: str, json_output: bool):
    """Format a single file."""
    session = make_session(ctx, quiet=json_output)
    try:
        result = session.format_one(os.path.abspath(path))
    except UniFmtError as e:
        _fail(e)

    if json_output:
        _echo_json([result])
