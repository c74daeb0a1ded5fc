"""mediaedl show — print the EDL for one item without writing it."""

from __future__ import annotations

import json

import click

from mediaedl.cli.options import catalog_option, config_option, load_service
from mediaedl.errors import MediaEdlError
from mediaedl.utils.progress import log_error


@click.command()
@click.argument("item_id")
@catalog_option
@config_option
@click.option("--json", "as_json", is_flag=True, help="Print {itemId, edl} as JSON")
def show_cmd(item_id: str, catalog: str, config: str, as_json: bool) -> None:
    """Print the EDL content for ITEM_ID."""
    try:
        service = load_service(catalog, config)
    except MediaEdlError as e:
        log_error(str(e))
        raise SystemExit(1)

    edl = service.build_edl_text(item_id)
    if as_json:
        click.echo(json.dumps({"itemId": item_id, "edl": edl}))
    else:
        click.echo(edl)
