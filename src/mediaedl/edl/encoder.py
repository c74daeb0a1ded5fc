"""Kodi EDL text encoding.

Each kept segment becomes one line ``"<start> <end> <action> "`` with times
in seconds. Lines are newline separated and the text has no final newline.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from mediaedl.models.config import EdlConfig
from mediaedl.models.segment import TICKS_PER_SECOND, EdlAction, MediaSegmentType, Segment

_ACTION_FIELDS = {
    MediaSegmentType.UNKNOWN: "unknown_edl_action",
    MediaSegmentType.INTRO: "intro_edl_action",
    MediaSegmentType.OUTRO: "outro_edl_action",
    MediaSegmentType.RECAP: "recap_edl_action",
    MediaSegmentType.PREVIEW: "preview_edl_action",
    MediaSegmentType.COMMERCIAL: "commercial_edl_action",
}


def action_for(segment_type: object, config: EdlConfig) -> EdlAction:
    """Return the configured action for a segment type, NONE if unmapped."""
    if not isinstance(segment_type, MediaSegmentType):
        return EdlAction.NONE
    field = _ACTION_FIELDS.get(segment_type)
    if field is None:
        return EdlAction.NONE
    return getattr(config, field)


def to_edl_string(start: int, end: int, action: EdlAction) -> str:
    """Render one EDL line, including its trailing newline."""
    rstart = _round_millis(start / TICKS_PER_SECOND)
    rend = _round_millis(end / TICKS_PER_SECOND)
    return f"{_format_seconds(rstart)} {_format_seconds(rend)} {int(action)} \n"


def to_edl(segments: Iterable[Segment], config: EdlConfig) -> str:
    """Convert one item's segments to Kodi EDL text.

    Segments are emitted in the order given; callers sort by start time.
    """
    lines = []
    for segment in segments:
        action = action_for(segment.type, config)
        # Skip None actions
        if action != EdlAction.NONE:
            lines.append(to_edl_string(segment.start_ticks, segment.end_ticks, action))

    content = "".join(lines)
    return content[:-1] if content.endswith("\n") else content


def edl_path_for(media_path: Path | str) -> Path:
    """Given the path to a media file, return the path to its EDL file.

    Everything from the last dot of the file name is replaced, so a
    dot-file like ``.mkv`` maps to ``.edl``.
    """
    path = Path(media_path)
    stem, dot, _ = path.name.rpartition(".")
    return path.with_name(f"{stem if dot else path.name}.edl")


def _round_millis(value: float) -> float:
    """Scale to milliseconds, round half to even, scale back."""
    return round(value * 1000.0) / 1000.0


def _format_seconds(value: float) -> str:
    """Shortest round-trip form, '.' decimal point, no '.0' on whole numbers."""
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        text = "0"
    return text
