"""Helpers shared by the unifmt command groups."""

from typing import List

import click

from utils.runner import CommandResult
from utils.session import FormatSession


def report_batch(results: List[CommandResult]) -> None:
    """Print a one-line summary once a batch has finished."""
    failed = [result for result in results if not result.launched]
    with_errors = [result for result in results if result.output_error is not None]
    click.echo(f"Formatted {len(results) - len(failed)} of {len(results)} file(s)")
    if failed:
        click.echo(f"{len(failed)} file(s) could not be formatted", err=True)
    if with_errors:
        click.echo(f"{len(with_errors)} file(s) reported errors", err=True)


def make_session(ctx: click.Context, yes: bool = False, quiet: bool = False) -> FormatSession:
    """Build a FormatSession from the options given to the top-level group.

    Args:
        ctx: Current click context; ``ctx.obj`` holds the group options.
        yes: If True, batches run without a confirmation prompt.
        quiet: If True, no summary is printed after a batch.
    """
    obj = ctx.obj

    def confirm(message: str) -> bool:
        return yes or click.confirm(message)

    return FormatSession(
        root=obj["root"],
        options_file=obj["options_file"],
        settings=obj["settings"],
        executor=obj.get("executor"),
        confirm=confirm,
        refresh=None if quiet else report_batch,
    )
