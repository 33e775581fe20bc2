"""DataFrame views of run counts and their CSV export."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

import pandas as pd

from ..core.decorators import handle_io_errors
from ..core.models import CountSnapshot
from ..exceptions import ReportGenerationError
from ..logging import get_logger
from ..utils import export_to_csv
from .text_report import port_protocol_rows, tag_rows

logger = get_logger(__name__)

TAG_COLUMNS = ["tag", "count"]
PORT_PROTOCOL_COLUMNS = ["port", "protocol", "count"]

TAG_CSV_NAME = "tag_counts.csv"
PORT_PROTOCOL_CSV_NAME = "port_protocol_counts.csv"


def counts_to_frames(snapshot: CountSnapshot) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Return ``(tag_df, port_protocol_df)`` ordered like the text report.

    Both frames keep their columns when empty so downstream code can rely on
    the schema.
    """
    tag_df = pd.DataFrame(tag_rows(snapshot), columns=TAG_COLUMNS)
    port_df = pd.DataFrame(port_protocol_rows(snapshot), columns=PORT_PROTOCOL_COLUMNS)
    tag_df["count"] = tag_df["count"].astype("int64")
    port_df["count"] = port_df["count"].astype("int64")
    return tag_df, port_df


@handle_io_errors(ReportGenerationError)
def export_summary_csv(snapshot: CountSnapshot, directory: str | Path) -> Tuple[Path, Path]:
    """Write both count tables as CSV files into ``directory``.

    The directory is created if needed. Returns the two written paths.
    """
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    tag_df, port_df = counts_to_frames(snapshot)

    tag_path = out_dir / TAG_CSV_NAME
    port_path = out_dir / PORT_PROTOCOL_CSV_NAME
    export_to_csv(tag_df, tag_path)
    export_to_csv(port_df, port_path)
    logger.info("Exported %d tag rows and %d port/protocol rows to %s", len(tag_df), len(port_df), out_dir)
    return tag_path, port_path
