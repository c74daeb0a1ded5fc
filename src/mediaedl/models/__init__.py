"""Pydantic data models for mediaedl."""

from mediaedl.models.config import EdlConfig
from mediaedl.models.segment import EdlAction, MediaSegmentType, Segment

__all__ = [
    "EdlAction",
    "EdlConfig",
    "MediaSegmentType",
    "Segment",
]
