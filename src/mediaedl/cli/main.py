"""Root CLI group for mediaedl."""

from __future__ import annotations

import click

from mediaedl import __version__
from mediaedl.utils.progress import set_verbose


@click.group()
@click.version_option(version=__version__, prog_name="mediaedl")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
def cli(verbose: bool) -> None:
    """mediaedl — Kodi EDL files from detected media segments."""
    set_verbose(verbose)


# Import and register subcommands
from mediaedl.cli.config_cmd import config_cmd  # noqa: E402
from mediaedl.cli.generate_cmd import generate_cmd  # noqa: E402
from mediaedl.cli.show_cmd import show_cmd  # noqa: E402

cli.add_command(show_cmd, "show")
cli.add_command(generate_cmd, "generate")
cli.add_command(config_cmd, "config")
