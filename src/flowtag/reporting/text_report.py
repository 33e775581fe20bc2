"""Plain text report of tag and port/protocol counts."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Mapping, Tuple

from ..core.constants import (
    PORT_SECTION_HEADER,
    PORT_SECTION_TITLE,
    TAG_SECTION_HEADER,
    TAG_SECTION_TITLE,
)
from ..core.decorators import handle_io_errors, log_performance
from ..core.models import CountSnapshot, split_port_protocol_key
from ..core.types import PortProtocolRow, TagRow
from ..exceptions import ReportGenerationError


def _ordered(counts: Mapping[str, int]) -> List[Tuple[str, int]]:
    # Highest count first, ties broken by key.
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def tag_rows(snapshot: CountSnapshot) -> List[TagRow]:
    return [TagRow(tag=tag, count=count) for tag, count in _ordered(snapshot.tag_counts)]


def port_protocol_rows(snapshot: CountSnapshot) -> List[PortProtocolRow]:
    rows: List[PortProtocolRow] = []
    for key, count in _ordered(snapshot.port_protocol_counts):
        port, protocol = split_port_protocol_key(key)
        rows.append(PortProtocolRow(port=port, protocol=protocol, count=count))
    return rows


def iter_report_lines(snapshot: CountSnapshot) -> Iterable[str]:
    """Yield the report line by line, without line terminators."""
    yield TAG_SECTION_TITLE
    yield TAG_SECTION_HEADER
    for row in tag_rows(snapshot):
        yield f"{row['tag']},{row['count']}"

    yield ""
    yield PORT_SECTION_TITLE
    yield PORT_SECTION_HEADER
    for row in port_protocol_rows(snapshot):
        yield f"{row['port']},{row['protocol']},{row['count']}"


def render_report(snapshot: CountSnapshot) -> str:
    """Return the full report text for ``snapshot``."""
    return "".join(f"{line}\n" for line in iter_report_lines(snapshot))


@handle_io_errors(ReportGenerationError)
@log_performance
def write_report(path: str | Path, snapshot: CountSnapshot) -> Path:
    """Write the report for ``snapshot`` to ``path`` and return the path."""
    out_path = Path(path)
    with out_path.open("w", encoding="utf-8", newline="\n") as fh:
        for line in iter_report_lines(snapshot):
            fh.write(f"{line}\n")
    return out_path
