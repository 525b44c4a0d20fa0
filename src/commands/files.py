"""File list command for unifmt."""

import json
import os
from typing import Optional

import click

from commands.common import make_session
from utils.errors import ConfigMissingError, UniFmtError
from utils.formatting import format_mtime, relative_path


@click.command("list")
@click.option("--mask", "-m", default=None, help="Only show files whose directory contains TEXT")
@click.option("--search", "-s", default="", help="Only show files whose name contains TEXT")
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@click.pass_context
def list_files(ctx: click.Context, mask: Optional[str], search: str, json_output: bool):
    """List formattable files, most recently modified first.

    The directory mask and the search text are case-sensitive substrings.
    """
    session = make_session(ctx)
    try:
        session.refresh_catalog()
    except UniFmtError as e:
        raise click.ClickException(str(e))

    try:
        session.check_options_file()
    except ConfigMissingError as e:
        click.echo(f"{e} Formatting is disabled until it exists.", err=True)

    session.update_mask(bool(mask), mask)
    session.update_search(search)
    entries = session.filtered()

    if json_output:
        click.echo(
            json.dumps(
                [
                    {
                        "path": entry.path,
                        "filename": entry.filename,
                        "modified": format_mtime(entry.mtime),
                    }
                    for entry in entries
                ],
                indent=2,
            )
        )
        return

    if not entries:
        click.echo("No files found.")
        return

    root = os.path.abspath(session.root)
    for entry in entries:
        click.echo(
            f"{format_mtime(entry.mtime)}  {entry.filename:<40} "
            f"{relative_path(entry.directory, root)}"
        )
    click.echo(f"\n{len(entries)} of {len(session.catalog)} file(s)")
