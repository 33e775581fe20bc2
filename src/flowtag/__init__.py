from .tables import load_lookup_table, load_protocol_map, resolve_protocol_map
from .classify import classify_line
from .metrics import FlowCounter
from .orchestrator import dispatch_flow_log, iter_flow_lines
from .reporting import render_report, write_report, counts_to_frames, export_summary_csv
from .pipeline_app import run_flow_tagging
from .core.models import Classification, CountSnapshot
from .core.constants import DEFAULT_PROTOCOL_MAP, UNTAGGED, UNKNOWN_PROTOCOL


__all__ = [
    "load_lookup_table",
    "load_protocol_map",
    "resolve_protocol_map",
    "classify_line",
    "FlowCounter",
    "dispatch_flow_log",
    "iter_flow_lines",
    "render_report",
    "write_report",
    "counts_to_frames",
    "export_summary_csv",
    "run_flow_tagging",
    "Classification",
    "CountSnapshot",
    "DEFAULT_PROTOCOL_MAP",
    "UNTAGGED",
    "UNKNOWN_PROTOCOL",
]
