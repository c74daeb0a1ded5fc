"""Options and loaders shared by the subcommands."""

from __future__ import annotations

from pathlib import Path

import click

from mediaedl.catalog import MediaCatalog
from mediaedl.models.config import DEFAULT_CONFIG_PATH, load_config
from mediaedl.service import EdlService

catalog_option = click.option(
    "--catalog", "-l",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to the media catalog (YAML or JSON)",
)

config_option = click.option(
    "--config", "-c",
    default=DEFAULT_CONFIG_PATH,
    type=click.Path(dir_okay=False),
    help="Path to mediaedl.yaml",
)


def load_service(catalog: str, config: str) -> EdlService:
    """Build the service from a catalog file and a settings file."""
    media = MediaCatalog.load(Path(catalog))
    settings = load_config(Path(config))
    return EdlService(settings, media, media)
