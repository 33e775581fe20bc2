from __future__ import annotations

from pathlib import Path
from typing import Iterator

from ..core.decorators import handle_io_errors
from ..exceptions import FlowLogReadError
from ..utils import strip_line_ending


@handle_io_errors(FlowLogReadError)
def iter_flow_lines(path: str | Path) -> Iterator[str]:
    """
    Lazily iterates through a flow log file and yields each line without its terminator.

    The file is read sequentially by the calling thread, so memory usage stays
    flat regardless of file size. Undecodable bytes are replaced so a bad
    line is judged by the classifier. Open and read failures surface as
    :class:`~flowtag.exceptions.FlowLogReadError`.

    Args:
        path: The file path to the flow log.

    Yields:
        str: One raw flow log line.
    """
    with Path(path).open("r", encoding="utf-8", errors="replace") as fh:
        for line in fh:
            yield strip_line_ending(line)
