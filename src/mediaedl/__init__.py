"""mediaedl — Kodi EDL sidecar files from detected media segments."""

__version__ = "0.1.0"
