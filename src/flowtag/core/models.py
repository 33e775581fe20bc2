"""Core data structures for classified flow records and run results."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import TABLE_FIELD_SEPARATOR
from .types import CountTable, LookupKey


def make_port_protocol_key(port: str, protocol: str) -> str:
    """Return the composite ``"port,protocol"`` count key."""
    return f"{port}{TABLE_FIELD_SEPARATOR}{protocol}"


def split_port_protocol_key(key: str) -> tuple[str, str]:
    """Split a composite count key back into ``(port, protocol)``.

    Protocol names never contain a comma, so the split happens on the last
    one; a port token carrying commas is kept whole.
    """
    port, _, protocol = key.rpartition(TABLE_FIELD_SEPARATOR)
    return port, protocol


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one flow log line."""

    tag: str
    port: str
    protocol: str

    @property
    def lookup_key(self) -> LookupKey:
        return (self.port, self.protocol)

    @property
    def key(self) -> str:
        """Composite ``"port,protocol"`` key used by the port/protocol table."""
        return make_port_protocol_key(self.port, self.protocol)


@dataclass(frozen=True)
class CountSnapshot:
    """Frequency tables and line counters collected by a run."""

    tag_counts: CountTable = field(default_factory=dict)
    port_protocol_counts: CountTable = field(default_factory=dict)
    lines_read: int = 0
    discarded: int = 0

    @property
    def classified(self) -> int:
        """Number of lines that contributed to the count tables."""
        return sum(self.tag_counts.values())

    @property
    def is_consistent(self) -> bool:
        """``True`` if both tables account for every classified line exactly once."""
        classified = self.classified
        return (
            sum(self.port_protocol_counts.values()) == classified
            and classified + self.discarded == self.lines_read
        )

    def is_empty(self) -> bool:
        return not self.tag_counts and not self.port_protocol_counts
