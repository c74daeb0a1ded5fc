"""Batch EDL generation over a bounded thread pool."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Mapping
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait

from mediaedl.edl.cancellation import CancellationToken
from mediaedl.edl.manager import EdlManager
from mediaedl.models.segment import Segment

ProgressSink = Callable[[int], None]


def group_segments(segments: Iterable[Segment]) -> dict[str, list[Segment]]:
    """Group a flat segment queue by item id, each group sorted by start."""
    grouped: dict[str, list[Segment]] = {}
    for segment in segments:
        grouped.setdefault(segment.item_id, []).append(segment)
    return {item_id: _sorted(group) for item_id, group in grouped.items()}


def write_all(
    item_segments: Mapping[str, Iterable[Segment]],
    manager: EdlManager,
    *,
    force_overwrite: bool = False,
    progress: ProgressSink | None = None,
    cancel: CancellationToken | None = None,
) -> None:
    """Create EDL files for every item in ``item_segments``.

    Items run on up to ``manager.config.max_parallelism`` threads. After
    each finished item (written or skipped) ``progress`` receives the
    integer percentage done. The first write failure or cancellation
    stops new items from starting; running items are awaited and the
    failure is then raised.
    """
    queue = {item_id: _sorted(group) for item_id, group in item_segments.items()}
    total = len(queue)
    if total == 0:
        return

    manager.log_configuration()

    processed = 0
    lock = threading.Lock()
    stop = threading.Event()

    def process(item_id: str, segments: list[Segment]) -> None:
        nonlocal processed
        if stop.is_set():
            return
        if cancel is not None:
            cancel.raise_if_cancelled()

        manager.update_edl_file(item_id, segments, force_overwrite=force_overwrite)

        with lock:
            processed += 1
            if progress is not None:
                progress(processed * 100 // total)

    with ThreadPoolExecutor(
        max_workers=manager.config.max_parallelism,
        thread_name_prefix="edl",
    ) as executor:
        futures: list[Future[None]] = [
            executor.submit(process, item_id, segments) for item_id, segments in queue.items()
        ]
        try:
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)
        except BaseException:
            stop.set()
            for future in futures:
                future.cancel()
            raise
        error = next((f.exception() for f in futures if f in done and f.exception() is not None), None)
        if error is not None:
            stop.set()
            for future in pending:
                future.cancel()
        # leaving the executor block waits for items still in flight

    if error is not None:
        raise error


def _sorted(segments: Iterable[Segment]) -> list[Segment]:
    return sorted(segments, key=lambda s: s.start_ticks)
