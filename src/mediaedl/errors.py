"""Exceptions raised by mediaedl."""

from __future__ import annotations

from pathlib import Path


class MediaEdlError(Exception):
    """Base class for all mediaedl errors."""


class ConfigError(MediaEdlError):
    """The configuration file could not be read or is invalid."""


class CatalogError(MediaEdlError):
    """The media catalog could not be read or is invalid."""


class EdlCancelledError(MediaEdlError):
    """A batch was cancelled before all items were processed."""


class EdlWriteError(MediaEdlError):
    """Writing an EDL file failed."""

    def __init__(self, item_id: str, path: Path, message: str) -> None:
        super().__init__(f"Failed to write EDL for item {item_id} at {path}: {message}")
        self.item_id = item_id
        self.path = path
