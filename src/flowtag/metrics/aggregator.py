"""Thread-safe frequency tables fed by concurrent classifiers."""

from __future__ import annotations

import threading
from collections import Counter
from typing import Optional

from ..core.models import Classification, CountSnapshot


class FlowCounter:
    """Accumulate tag and port/protocol counts from many worker threads.

    Each :meth:`record` call updates both tables while holding one lock, so
    concurrent calls behave like some serial ordering of the same calls.
    Reading the tables is only meaningful once every worker has finished.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tag_counts: Counter[str] = Counter()
        self._port_protocol_counts: Counter[str] = Counter()
        self._lines_read = 0
        self._discarded = 0

    def record(self, classification: Classification) -> None:
        """Count one classified line under its tag and port/protocol key."""
        key = classification.key
        with self._lock:
            self._tag_counts[classification.tag] += 1
            self._port_protocol_counts[key] += 1

    def record_discard(self) -> None:
        """Count one line that could not be classified."""
        with self._lock:
            self._discarded += 1

    def add(self, classification: Optional[Classification]) -> None:
        """Record ``classification`` or a discard when it is ``None``."""
        if classification is None:
            self.record_discard()
        else:
            self.record(classification)

    def mark_read(self, lines: int = 1) -> None:
        """Count lines handed to workers by the producer."""
        with self._lock:
            self._lines_read += lines

    def snapshot(self) -> CountSnapshot:
        """Return a copy of the collected counts."""
        with self._lock:
            return CountSnapshot(
                tag_counts=dict(self._tag_counts),
                port_protocol_counts=dict(self._port_protocol_counts),
                lines_read=self._lines_read,
                discarded=self._discarded,
            )
