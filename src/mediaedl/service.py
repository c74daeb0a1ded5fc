"""Entry points used by the CLI: preview EDL text and generate files."""

from __future__ import annotations

from collections.abc import Iterable

from mediaedl.catalog import ItemPathResolver, SegmentSource
from mediaedl.edl.batch import ProgressSink, write_all
from mediaedl.edl.cancellation import CancellationToken
from mediaedl.edl.encoder import to_edl
from mediaedl.edl.manager import EdlManager
from mediaedl.models.config import EdlConfig
from mediaedl.models.segment import Segment
from mediaedl.utils.progress import log_step


class EdlService:
    """Wires settings, path resolution and the segment source together."""

    def __init__(
        self,
        config: EdlConfig,
        resolver: ItemPathResolver,
        source: SegmentSource,
    ) -> None:
        self.config = config
        self.source = source
        self.manager = EdlManager(config, resolver)

    def build_edl_text(self, item_id: str) -> str:
        """EDL content for one item, without writing anything."""
        segments = sorted(self.source.get_segments(item_id), key=lambda s: s.start_ticks)
        return to_edl(segments, self.config)

    def generate_files(
        self,
        item_ids: Iterable[str],
        *,
        force_overwrite: bool = True,
        progress: ProgressSink | None = None,
        cancel: CancellationToken | None = None,
    ) -> None:
        """Write EDL files for an explicit set of items."""
        queue = self._collect(dict.fromkeys(item_ids))
        log_step("EDL", f"Generating EDL files for {len(queue)} item(s)")
        write_all(
            queue,
            self.manager,
            force_overwrite=force_overwrite,
            progress=progress,
            cancel=cancel,
        )

    def generate_all_missing(
        self,
        *,
        progress: ProgressSink | None = None,
        cancel: CancellationToken | None = None,
    ) -> None:
        """Write EDL files for every item with segments, never forcing overwrites."""
        queue = self._collect(self.source.item_ids())
        log_step("EDL", f"Creating EDL files for {len(queue)} item(s) with segments")
        write_all(
            queue,
            self.manager,
            force_overwrite=False,
            progress=progress,
            cancel=cancel,
        )

    def _collect(self, item_ids: Iterable[str]) -> dict[str, list[Segment]]:
        return {item_id: self.source.get_segments(item_id) for item_id in item_ids}
