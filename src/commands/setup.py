"""Provisioning command for unifmt."""

import click

from commands.common import make_session
from utils.errors import ProvisionError
from utils.formatting import format_size
from utils.provision import default_tools_dir, provision, write_default_options


@click.command("setup")
@click.option("--url", default=None, help="Download astyle from URL instead of the default release")
@click.option(
    "--tools-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory to download and extract astyle into [default: Tools/astyle next to ROOT]",
)
@click.option("--skip-download", is_flag=True, help="Only write the default options file")
@click.pass_context
def setup(ctx: click.Context, url, tools_dir, skip_download):
    """Download astyle and write a default options file.

    Existing downloads and an existing options file are left untouched.
    The astyle path setting is updated when a binary is found.
    """
    session = make_session(ctx)
    tools_dir = tools_dir or default_tools_dir(session.root)

    if skip_download:
        written = write_default_options(session.options_file)
        _report_options(session.options_file, written)
        return

    try:
        result = provision(tools_dir, session.options_file, url=url)
    except ProvisionError as e:
        raise click.ClickException(str(e))

    if result.archive is not None and result.archive.exists():
        click.echo(f"Archive: {result.archive} ({format_size(result.archive.stat().st_size)})")

    if result.executable is not None:
        session.update_path(str(result.executable))
        click.echo(f"astyle path set to {result.executable}")
    else:
        click.echo(
            "No astyle binary was found in the archive. Build it from the "
            f"sources in {tools_dir} and run 'unifmt config set-path'.",
            err=True,
        )

    _report_options(session.options_file, result.options_written)


def _report_options(path, written):
    if written:
        click.echo(f"Wrote default options to {path}")
    else:
        click.echo(f"Options file already exists: {path}")
