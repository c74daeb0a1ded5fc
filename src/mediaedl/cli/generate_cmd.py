"""mediaedl generate — write EDL files next to the media files."""

from __future__ import annotations

import click

from mediaedl.cli.options import catalog_option, config_option, load_service
from mediaedl.errors import EdlCancelledError, MediaEdlError
from mediaedl.utils.progress import log_error, log_success, log_warning, progress_bar


@click.command()
@catalog_option
@config_option
@click.option(
    "--item", "-i", "item_ids",
    multiple=True,
    help="Item id to regenerate (repeatable). Default: every item with segments",
)
@click.option(
    "--force/--no-force",
    default=None,
    help="Overwrite existing EDL files. Defaults to on with --item, off otherwise",
)
def generate_cmd(catalog: str, config: str, item_ids: tuple[str, ...], force: bool | None) -> None:
    """Create .edl files from media segments."""
    try:
        service = load_service(catalog, config)
    except MediaEdlError as e:
        log_error(str(e))
        raise SystemExit(1)

    try:
        with progress_bar("Writing EDL files") as report:
            if item_ids:
                service.generate_files(
                    item_ids,
                    force_overwrite=True if force is None else force,
                    progress=report,
                )
            elif force:
                service.generate_files(
                    service.source.item_ids(),
                    force_overwrite=True,
                    progress=report,
                )
            else:
                service.generate_all_missing(progress=report)
    except (KeyboardInterrupt, EdlCancelledError):
        log_warning("EDL generation was cancelled")
        raise SystemExit(130)
    except MediaEdlError as e:
        log_error(f"EDL generation failed: {e}")
        raise SystemExit(1)

    log_success("EDL files are up to date")
