"""Per-item EDL file updates."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from rich.markup import escape

from mediaedl.catalog import ItemPathResolver
from mediaedl.edl.encoder import edl_path_for, to_edl
from mediaedl.errors import EdlWriteError
from mediaedl.models.config import EdlConfig
from mediaedl.models.segment import Segment
from mediaedl.utils.io import write_atomic
from mediaedl.utils.progress import log_debug, log_error, log_warning


class EdlOutcome(str, Enum):
    """What happened to one item."""

    WRITTEN = "written"
    SKIPPED_NOT_FOUND = "skipped_not_found"
    SKIPPED_EXISTS = "skipped_exists"
    SKIPPED_EMPTY = "skipped_empty"


class EdlManager:
    """Writes the EDL file for one item at a time.

    Args:
        config: Settings snapshot used for every item.
        resolver: Maps an item id to its media file path.
    """

    def __init__(self, config: EdlConfig, resolver: ItemPathResolver) -> None:
        self.config = config
        self.resolver = resolver

    def log_configuration(self) -> None:
        """Log the settings that will be used during EDL file creation."""
        config = self.config
        log_debug(f"Overwrite EDL files: {config.overwrite_edl_files}")
        log_debug(f"Intro EdlAction: {config.intro_edl_action.name}")
        log_debug(f"Outro EdlAction: {config.outro_edl_action.name}")
        log_debug(f"Preview EdlAction: {config.preview_edl_action.name}")
        log_debug(f"Recap EdlAction: {config.recap_edl_action.name}")
        log_debug(f"Unknown EdlAction: {config.unknown_edl_action.name}")
        log_debug(f"Commercial EdlAction: {config.commercial_edl_action.name}")
        log_debug(f"Max parallelism: {config.max_parallelism}")

    def update_edl_file(
        self,
        item_id: str,
        segments: Sequence[Segment],
        *,
        force_overwrite: bool = False,
    ) -> EdlOutcome:
        """Create or replace the EDL file for one item.

        Segments must already be sorted by start time. Missing media, an
        existing file without overwrite, and empty content are skipped;
        a failed write raises EdlWriteError.
        """
        overwrite = self.config.overwrite_edl_files or force_overwrite
        log_debug(f"Update EDL file for item {item_id} with {len(segments)} segments")

        media_path = self.resolver.resolve(item_id)
        if media_path is None or not media_path.is_file():
            log_warning(f"Skip item {item_id}: unable to get item path or file not found")
            return EdlOutcome.SKIPPED_NOT_FOUND

        edl_path = edl_path_for(media_path)
        if edl_path.exists() and not overwrite:
            log_debug(f"EDL file exists, but overwrite is disabled: '{escape(str(edl_path))}'")
            return EdlOutcome.SKIPPED_EXISTS

        content = to_edl(segments, self.config)
        if not content:
            log_debug(f"Skip item {item_id}: no EDL data generated")
            return EdlOutcome.SKIPPED_EMPTY

        log_debug(f"Writing EDL to {escape(str(edl_path))}")
        try:
            write_atomic(edl_path, content)
        except OSError as e:
            log_error(f"Failed to create EDL file for item {item_id}: {escape(str(e))}")
            raise EdlWriteError(item_id, edl_path, str(e)) from e

        log_debug(f"Created EDL file for {item_id} at {escape(str(edl_path))}")
        return EdlOutcome.WRITTEN
