from .text_report import render_report, write_report
from .summary import counts_to_frames, export_summary_csv

__all__ = ["render_report", "write_report", "counts_to_frames", "export_summary_csv"]
