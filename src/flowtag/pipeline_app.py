"""End-to-end flow log tagging run."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .core.decorators import log_performance
from .core.models import CountSnapshot
from .logging import get_logger
from .orchestrator import dispatch_flow_log
from .reporting import export_summary_csv, write_report
from .tables import load_lookup_table, resolve_protocol_map

logger = get_logger(__name__)


@log_performance
def run_flow_tagging(
    flow_log: str | Path,
    lookup_table: str | Path,
    output: str | Path,
    protocol_map: Optional[str | Path] = None,
    *,
    max_workers: Optional[int] = None,
    timeout: Optional[float] = None,
    csv_dir: Optional[str | Path] = None,
) -> CountSnapshot:
    """Load the tables, count ``flow_log`` and write the report to ``output``.

    Any :class:`~flowtag.exceptions.FlowTagError` raised along the way is
    fatal for the run and propagates to the caller.
    """
    table = load_lookup_table(lookup_table)
    protocols = resolve_protocol_map(protocol_map)
    logger.info(
        "Using %d lookup entries and %d protocol names (%s)",
        len(table),
        len(protocols),
        protocol_map or "built-in",
    )

    snapshot = dispatch_flow_log(
        flow_log,
        table,
        protocols,
        max_workers=max_workers,
        timeout=timeout,
    )
    write_report(output, snapshot)
    if csv_dir is not None:
        export_summary_csv(snapshot, csv_dir)
    return snapshot
