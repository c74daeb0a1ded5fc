"""Cooperative cancellation for batch runs."""

from __future__ import annotations

import threading

from mediaedl.errors import EdlCancelledError


class CancellationToken:
    """Thread-safe flag checked by workers before each unit of work."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise EdlCancelledError("EDL generation was cancelled")
