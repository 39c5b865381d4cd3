"""Concurrent validation of a single folder root.

The calling thread walks the tree and feeds a bounded work queue. A fixed
pool of worker threads filters and verifies each path, and pushes outcomes
onto a second queue drained by one aggregator thread, which is the only
writer of the Report.
"""

from __future__ import annotations

import logging
import os
import queue
import threading
from collections.abc import Iterator, Sequence
from concurrent.futures import Future, ThreadPoolExecutor

from refcheck.errors import ConfigurationError, FileIOError, RootWalkError
from refcheck.exclusion import ExclusionFilter
from refcheck.validator.digest import verify_file
from refcheck.validator.models import FileOutcome, Report, ReportBuilder

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 4

# Paths buffered per worker before the walker blocks
_QUEUE_DEPTH_PER_WORKER = 8
_PUT_POLL_SECONDS = 0.1

# Shutdown marker: one per worker on the work queue, one on the outcome queue
_DONE = object()


def iter_files(root: str) -> Iterator[str]:
    """Yield every regular file below *root*, depth first, in name order.

    Directories are descended into but never yielded; symlinked directories
    are not followed. Sockets, FIFOs, devices and dangling links are skipped.
    Errors listing any directory propagate as OSError.
    """
    stack = [root]
    while stack:
        current = stack.pop()
        with os.scandir(current) as it:
            entries = sorted(it, key=lambda e: e.name)
        subdirs: list[str] = []
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                subdirs.append(entry.path)
            elif entry.is_file():
                yield entry.path
            else:
                logger.debug("Skipping non-regular entry %s", entry.path)
        stack.extend(reversed(subdirs))


def check_workers(workers: int) -> None:
    if workers < 1:
        raise ConfigurationError(f"workers must be at least 1, got {workers}")


def _worker(
    work: queue.Queue,
    outcomes: queue.Queue,
    exclusion: ExclusionFilter,
) -> int:
    """Consume paths until the shutdown marker; return how many were processed."""
    processed = 0
    while True:
        path = work.get()
        if path is _DONE:
            return processed
        if exclusion.matches(path):
            logger.debug("Excluded %s", path)
            continue
        try:
            outcome = verify_file(path)
        except FileIOError as e:
            logger.warning("Skipping unreadable file %s: %s", path, e.__cause__)
            outcome = FileOutcome.errored(path, str(e.__cause__))
        outcomes.put(outcome)
        processed += 1


def _aggregate(outcomes: queue.Queue, builder: ReportBuilder) -> None:
    while True:
        outcome = outcomes.get()
        if outcome is _DONE:
            return
        builder.add(outcome)


def _enqueue(work: queue.Queue, item: object, futures: Sequence[Future]) -> bool:
    """Block until *item* is queued; False if no worker is left to take it."""
    while True:
        try:
            work.put(item, timeout=_PUT_POLL_SECONDS)
            return True
        except queue.Full:
            if all(f.done() for f in futures):
                return False


def process_folder(
    folder_path: str | os.PathLike[str],
    exclusion: ExclusionFilter | None = None,
    workers: int = DEFAULT_WORKERS,
) -> Report:
    """Walk *folder_path* and verify every non-excluded file with *workers* threads.

    Raises RootWalkError if any part of the tree cannot be listed; whatever was
    aggregated up to that point is discarded.
    """
    check_workers(workers)
    root = os.fspath(folder_path)
    if exclusion is None:
        exclusion = ExclusionFilter()

    logger.info("Validating %s with %d worker(s)", root, workers)

    work: queue.Queue = queue.Queue(maxsize=workers * _QUEUE_DEPTH_PER_WORKER)
    outcomes: queue.Queue = queue.Queue()
    builder = ReportBuilder(root)
    aggregator = threading.Thread(
        target=_aggregate, args=(outcomes, builder), name="refcheck-aggregator"
    )
    aggregator.start()

    walk_error: OSError | None = None
    discovered = 0
    try:
        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="refcheck-worker"
        ) as pool:
            futures = [
                pool.submit(_worker, work, outcomes, exclusion) for _ in range(workers)
            ]
            try:
                for path in iter_files(root):
                    if not _enqueue(work, path, futures):
                        break
                    discovered += 1
            except OSError as e:
                walk_error = e
            finally:
                for _ in range(workers):
                    if not _enqueue(work, _DONE, futures):
                        break
    finally:
        outcomes.put(_DONE)
        aggregator.join()

    processed = sum(f.result() for f in futures)

    if walk_error is not None:
        logger.debug("Walk of %s failed after %d file(s): %s", root, discovered, walk_error)
        raise RootWalkError(root, walk_error) from walk_error

    report = builder.build()
    logger.info(
        "Validated %s: %d file(s) discovered, %d processed, "
        "%d intact, %d corrupted, %d invalid, %d errored",
        root, discovered, processed,
        report.intact_files, report.corrupted_files,
        report.invalid_files, report.errored_files,
    )
    return report
