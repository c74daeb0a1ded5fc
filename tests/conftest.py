from __future__ import annotations

from pathlib import Path

import pytest

from mediaedl.catalog import CatalogItem, CatalogSegment, MediaCatalog
from mediaedl.models.config import EdlConfig
from mediaedl.models.segment import EdlAction, MediaSegmentType, Segment

SECOND = 10_000_000


def seg(item_id: str, type_: str, start: float, end: float) -> Segment:
    return Segment(
        item_id=item_id,
        type=MediaSegmentType(type_),
        start_ticks=int(start * SECOND),
        end_ticks=int(end * SECOND),
    )


@pytest.fixture
def config() -> EdlConfig:
    return EdlConfig(
        intro_edl_action=EdlAction.CUT,
        outro_edl_action=EdlAction.COMMERCIAL_BREAK,
        max_parallelism=2,
    )


@pytest.fixture
def make_catalog(tmp_path: Path):
    """Build a catalog whose media files exist under tmp_path."""

    def _make(items: dict[str, list[tuple[str, float, float]]], *, missing: tuple[str, ...] = ()) -> MediaCatalog:
        catalog_items = []
        for item_id, segments in items.items():
            media = tmp_path / f"{item_id}.mkv"
            if item_id not in missing:
                media.write_bytes(b"")
            catalog_items.append(CatalogItem(
                id=item_id,
                path=str(media),
                segments=[
                    CatalogSegment(
                        type=MediaSegmentType(t),
                        start_ticks=int(s * SECOND),
                        end_ticks=int(e * SECOND),
                    )
                    for t, s, e in segments
                ],
            ))
        return MediaCatalog(catalog_items, root=tmp_path)

    return _make
