"""mediaedl config — scaffold and inspect EDL settings."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from mediaedl.errors import MediaEdlError
from mediaedl.models.config import ACTION_FIELDS, DEFAULT_CONFIG_PATH, EdlConfig, load_config, save_config
from mediaedl.utils.progress import log_error, log_success

console = Console()


@click.group()
def config_cmd() -> None:
    """Manage EDL generation settings."""


@config_cmd.command("init")
@click.option(
    "--output", "-o",
    default=DEFAULT_CONFIG_PATH,
    type=click.Path(dir_okay=False),
    help="Where to write the settings file",
)
@click.option("--force", is_flag=True, help="Replace an existing settings file")
def init(output: str, force: bool) -> None:
    """Write a settings file with default values."""
    path = Path(output).resolve()
    if path.exists() and not force:
        log_error(f"Settings file already exists: {path} (use --force to replace)")
        raise SystemExit(1)

    save_config(path, EdlConfig())
    log_success(f"Settings written: {path}")


@config_cmd.command("show")
@click.option(
    "--config", "-c",
    default=DEFAULT_CONFIG_PATH,
    type=click.Path(dir_okay=False),
    help="Path to mediaedl.yaml",
)
def show(config: str) -> None:
    """Show the effective settings."""
    try:
        settings = load_config(config)
    except MediaEdlError as e:
        log_error(str(e))
        raise SystemExit(1)

    table = Table(title="EDL Settings", show_header=False)
    table.add_column(style="bold")
    table.add_column()

    for field in ACTION_FIELDS:
        action = getattr(settings, field)
        table.add_row(field, f"{action.name.lower()} ({int(action)})")
    table.add_row("overwrite_edl_files", str(settings.overwrite_edl_files))
    table.add_row("max_parallelism", str(settings.max_parallelism))

    console.print(table)
