"""Kodi EDL encoding and batch file generation."""

from mediaedl.edl.batch import group_segments, write_all
from mediaedl.edl.cancellation import CancellationToken
from mediaedl.edl.encoder import action_for, edl_path_for, to_edl, to_edl_string
from mediaedl.edl.manager import EdlManager, EdlOutcome

__all__ = [
    "CancellationToken",
    "EdlManager",
    "EdlOutcome",
    "action_for",
    "edl_path_for",
    "group_segments",
    "to_edl",
    "to_edl_string",
    "write_all",
]
