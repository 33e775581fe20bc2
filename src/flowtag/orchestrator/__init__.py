"""Reading flow logs and distributing their lines to workers."""

from .dispatcher import default_worker_count, dispatch_flow_log
from .ingestor import iter_flow_lines

__all__ = ["default_worker_count", "dispatch_flow_log", "iter_flow_lines"]
