"""Loader for the ``dstport,protocol,tag`` lookup table."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

from ..core.constants import LOOKUP_TABLE_FIELDS, TABLE_FIELD_SEPARATOR
from ..core.decorators import handle_io_errors, log_performance
from ..core.types import LookupKey, LookupTable
from ..exceptions import LookupTableError
from ..logging import get_logger
from ..utils import split_fields, strip_line_ending

logger = get_logger(__name__)


def make_lookup_key(port: str, protocol: str) -> LookupKey:
    """Return the case-folded key used to index the lookup table."""
    return (port.strip().lower(), protocol.strip().lower())


@handle_io_errors(LookupTableError)
@log_performance
def load_lookup_table(path: str | Path) -> LookupTable:
    """Read ``path`` and return a read-only ``(port, protocol) -> tag`` mapping.

    The first line is always treated as a header. Rows that do not split into
    exactly three fields are skipped. Port and protocol are trimmed and
    lowercased; the tag keeps its casing. When a key repeats, the last row
    wins.
    """
    table: dict[LookupKey, str] = {}
    skipped = 0
    with Path(path).open("r", encoding="utf-8") as fh:
        next(fh, None)
        for raw in fh:
            values = split_fields(strip_line_ending(raw), TABLE_FIELD_SEPARATOR)
            if len(values) != LOOKUP_TABLE_FIELDS:
                skipped += 1
                continue
            port, protocol, tag = values
            table[make_lookup_key(port, protocol)] = tag.strip()

    logger.debug("Loaded %d lookup entries from %s (%d rows skipped)", len(table), path, skipped)
    return MappingProxyType(table)
