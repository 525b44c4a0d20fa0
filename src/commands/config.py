"""Configuration commands for unifmt."""

import json
import os

import click

from commands.common import make_session


@click.group()
def config():
    """Show and change unifmt settings."""
    pass


@config.command("show")
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@click.pass_context
def show(ctx: click.Context, json_output: bool):
    """Show the current settings."""
    session = make_session(ctx)
    settings = {
        "astyle_path": session.astyle_path,
        "root": os.path.abspath(session.root),
        "options_file": os.path.abspath(session.options_file),
        "options_file_exists": os.path.isfile(session.options_file),
    }

    if json_output:
        click.echo(json.dumps(settings, indent=2))
        return

    click.echo(f"astyle path: {settings['astyle_path']}")
    click.echo(f"Root: {settings['root']}")
    status = "" if settings["options_file_exists"] else " (missing)"
    click.echo(f"Options file: {settings['options_file']}{status}")


@config.command("set-path")
@click.argument("path")
@click.pass_context
def set_path(ctx: click.Context, path: str):
    """Set the path of the astyle executable."""
    session = make_session(ctx)
    if session.update_path(path):
        click.echo(f"astyle path set to {path}")
    else:
        click.echo(f"astyle path is already {path}")
