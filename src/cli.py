"""
Command line interface for unifmt.

This module provides the main CLI entry point for all unifmt commands.
"""

import click

from commands.config import config
from commands.files import list_files
from commands.format import format_group
from commands.setup import setup
from utils.logger_setup import configure_logger
from utils.settings import JsonSettingsStore

__version__ = "0.1.0"


@click.group()
@click.version_option(version=__version__, prog_name="unifmt")
@click.option(
    "--root",
    "-r",
    envvar="UNIFMT_ROOT",
    default="Assets",
    show_default=True,
    type=click.Path(file_okay=False),
    help="Directory searched for C# files",
)
@click.option(
    "--options-file",
    envvar="UNIFMT_OPTIONS_FILE",
    default=None,
    type=click.Path(dir_okay=False),
    help="astyle options file [default: ROOT/UniFmt/Editor/csfmt.txt]",
)
@click.option(
    "--settings-file",
    envvar="UNIFMT_SETTINGS_FILE",
    default=None,
    type=click.Path(dir_okay=False),
    help="Where the astyle path setting is stored",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, root, options_file, settings_file, verbose):
    """Batch-format Unity C# sources with astyle.

    Lists, filters and formats the C# files below a project directory by
    running astyle on each file in turn.
    """
    configure_logger(verbose)
    ctx.ensure_object(dict)
    ctx.obj["root"] = root
    ctx.obj["options_file"] = options_file
    ctx.obj.setdefault("settings", JsonSettingsStore(settings_file))


# Register all commands with the main CLI
cli.add_command(list_files)
cli.add_command(format_group)
cli.add_command(config)
cli.add_command(setup)
