"""Media segment model and the EDL action codes."""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

TICKS_PER_SECOND = 10_000_000


class MediaSegmentType(str, Enum):
    """Semantic type of a detected segment."""

    UNKNOWN = "Unknown"
    INTRO = "Intro"
    OUTRO = "Outro"
    RECAP = "Recap"
    PREVIEW = "Preview"
    COMMERCIAL = "Commercial"

    @classmethod
    def _missing_(cls, value: object) -> MediaSegmentType | None:
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None


class EdlAction(IntEnum):
    """Kodi EDL action codes. NONE suppresses the line entirely."""

    NONE = -1
    CUT = 0
    MUTE = 1
    SCENE_MARKER = 2
    COMMERCIAL_BREAK = 3

    @classmethod
    def parse(cls, value: object) -> EdlAction:
        """Accept an action code or a member name like ``commercial-break``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                return cls(int(text))
            key = text.upper().replace("-", "_").replace(" ", "_")
            try:
                return cls[key]
            except KeyError:
                raise ValueError(f"Unknown EDL action: {value!r}") from None
        if isinstance(value, bool):
            raise ValueError(f"Unknown EDL action: {value!r}")
        if isinstance(value, int):
            return cls(value)
        raise ValueError(f"Unknown EDL action: {value!r}")


class Segment(BaseModel):
    """A detected time range within a media item."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    type: MediaSegmentType = MediaSegmentType.UNKNOWN
    start_ticks: int = Field(ge=0)
    end_ticks: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_range(self) -> Segment:
        if self.end_ticks < self.start_ticks:
            raise ValueError(
                f"Segment ends before it starts: {self.start_ticks} > {self.end_ticks}"
            )
        return self

