"""Fan flow log lines out to a thread pool and merge their classifications."""

from __future__ import annotations

import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from pathlib import Path
from typing import List, Optional

from ..classify import classify_line
from ..core.config import settings
from ..core.decorators import log_performance
from ..core.models import CountSnapshot
from ..core.types import LookupTable, ProtocolMap
from ..exceptions import AggregationError, DispatchTimeoutError
from ..logging import get_logger
from ..metrics import FlowCounter
from .ingestor import iter_flow_lines

logger = get_logger(__name__)


def default_worker_count() -> int:
    """Return the configured worker count or the number of logical CPUs."""
    return settings.max_workers or os.cpu_count() or 1


def _process_line(
    line: str,
    lookup_table: LookupTable,
    protocol_map: ProtocolMap,
    counter: FlowCounter,
    stop: threading.Event,
) -> None:
    if stop.is_set():
        return
    counter.add(classify_line(line, lookup_table, protocol_map))


def _abandon(executor: ThreadPoolExecutor, stop: threading.Event) -> None:
    stop.set()
    executor.shutdown(wait=False, cancel_futures=True)


@log_performance
def dispatch_flow_log(
    path: str | Path,
    lookup_table: LookupTable,
    protocol_map: ProtocolMap,
    counter: Optional[FlowCounter] = None,
    *,
    max_workers: Optional[int] = None,
    timeout: Optional[float] = None,
) -> CountSnapshot:
    """Classify every line of ``path`` on a worker pool and return the counts.

    Parameters
    ----------
    path:
        Flow log file, read sequentially by the calling thread.
    lookup_table, protocol_map:
        Read-only tables shared by all workers.
    counter:
        Aggregator receiving the results. A fresh :class:`FlowCounter` is
        used when omitted; pass one in to inspect partial counts after a
        timeout.
    max_workers:
        Pool size, at least 1. Defaults to :func:`default_worker_count`.
    timeout:
        Seconds to wait for outstanding work once every line has been
        submitted. Defaults to ``settings.dispatch_timeout``.

    Raises
    ------
    DispatchTimeoutError
        Work was still pending when the timeout expired. Queued lines are
        cancelled and running workers are told to stop; counts already merged
        are kept in ``counter``.
    AggregationError
        A worker raised while classifying a line.
    FlowLogReadError
        The flow log could not be read.
    """
    counter = counter if counter is not None else FlowCounter()
    workers = default_worker_count() if max_workers is None else max_workers
    wait_timeout = settings.dispatch_timeout if timeout is None else timeout
    stop = threading.Event()

    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="flowtag-worker")
    futures: List[Future] = []
    try:
        for line in iter_flow_lines(path):
            futures.append(
                executor.submit(_process_line, line, lookup_table, protocol_map, counter, stop)
            )
    except BaseException:
        _abandon(executor, stop)
        raise
    finally:
        counter.mark_read(len(futures))

    logger.debug("Submitted %d lines to %d workers", len(futures), workers)
    done, not_done = wait(futures, timeout=wait_timeout)
    if not_done:
        _abandon(executor, stop)
        logger.error(
            "Timed out after %.1f seconds with %d of %d lines outstanding",
            wait_timeout,
            len(not_done),
            len(futures),
        )
        raise DispatchTimeoutError(
            f"{len(not_done)} of {len(futures)} lines were not processed within {wait_timeout} seconds",
            context=str(path),
            suggestion="Increase the timeout or FLOWTAG_DISPATCH_TIMEOUT.",
        )
    executor.shutdown(wait=True)

    for future in done:
        exc = future.exception()
        if exc is not None:
            raise AggregationError(str(exc), context=str(path)) from exc

    snapshot = counter.snapshot()
    logger.info(
        "Processed %d lines: %d classified, %d discarded",
        snapshot.lines_read,
        snapshot.classified,
        snapshot.discarded,
    )
    return snapshot
