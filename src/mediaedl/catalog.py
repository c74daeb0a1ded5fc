"""Media catalog — item paths and detected segments from a YAML/JSON file.

Document shape::

    items:
      - id: episode-1
        path: shows/episode-1.mkv
        segments:
          - type: Intro
            start_ticks: 0
            end_ticks: 900000000

Relative media paths resolve against the catalog file's directory.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, Field, ValidationError
from ruamel.yaml.error import YAMLError

from mediaedl.errors import CatalogError
from mediaedl.models.segment import MediaSegmentType, Segment
from mediaedl.utils.io import read_json, read_yaml


class ItemPathResolver(Protocol):
    """Maps an item id to the path of its media file."""

    def resolve(self, item_id: str) -> Path | None: ...


class SegmentSource(Protocol):
    """Provides detected segments per item."""

    def get_segments(self, item_id: str) -> list[Segment]: ...
    def item_ids(self) -> list[str]: ...


class CatalogSegment(BaseModel):
    type: MediaSegmentType = MediaSegmentType.UNKNOWN
    start_ticks: int = Field(ge=0)
    end_ticks: int = Field(ge=0)


class CatalogItem(BaseModel):
    id: str
    path: str | None = None
    segments: list[CatalogSegment] = Field(default_factory=list)


class CatalogDocument(BaseModel):
    items: list[CatalogItem] = Field(default_factory=list)


class MediaCatalog:
    """In-memory catalog implementing both ItemPathResolver and SegmentSource."""

    def __init__(self, items: list[CatalogItem], *, root: Path | None = None) -> None:
        self.root = root
        self._items: dict[str, CatalogItem] = {}
        self._segments: dict[str, list[Segment]] = {}
        for item in items:
            if item.id in self._items:
                raise CatalogError(f"Duplicate item id in catalog: {item.id}")
            self._items[item.id] = item
            try:
                self._segments[item.id] = [
                    Segment(item_id=item.id, **seg.model_dump()) for seg in item.segments
                ]
            except ValidationError as e:
                raise CatalogError(f"Invalid segment for item {item.id}: {e}") from e

    @classmethod
    def load(cls, path: Path | str) -> MediaCatalog:
        """Read a catalog from a .yaml/.yml or .json file."""
        path = Path(path)
        try:
            if path.suffix.lower() == ".json":
                data = read_json(path)
            else:
                data = read_yaml(path)
        except (OSError, YAMLError, json.JSONDecodeError) as e:
            raise CatalogError(f"Cannot read catalog {path}: {e}") from e

        try:
            document = CatalogDocument(**data)
        except (TypeError, ValidationError) as e:
            raise CatalogError(f"Invalid catalog {path}: {e}") from e

        return cls(document.items, root=path.resolve().parent)

    def resolve(self, item_id: str) -> Path | None:
        item = self._items.get(item_id)
        if item is None or not item.path:
            return None
        media_path = Path(item.path).expanduser()
        if not media_path.is_absolute() and self.root is not None:
            media_path = self.root / media_path
        return media_path

    def get_segments(self, item_id: str) -> list[Segment]:
        """Segments in catalog order; empty for unknown items."""
        return list(self._segments.get(item_id, []))

    def item_ids(self) -> list[str]:
        """Ids of items that have at least one segment."""
        return [item_id for item_id, segments in self._segments.items() if segments]

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)
