"""Protocol number to protocol name resolution."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Optional

from ..core.constants import DEFAULT_PROTOCOL_MAP, PROTOCOL_MAP_FIELDS, TABLE_FIELD_SEPARATOR
from ..core.decorators import handle_io_errors, log_performance
from ..core.types import ProtocolMap
from ..exceptions import ProtocolMapError
from ..logging import get_logger
from ..utils import parse_int_token, split_fields, strip_line_ending

logger = get_logger(__name__)


@handle_io_errors(ProtocolMapError)
@log_performance
def load_protocol_map(path: str | Path) -> ProtocolMap:
    """Read a headerless ``number,name`` file into a read-only mapping.

    Rows without exactly two fields, or whose number is not an integer, are
    skipped. Names are trimmed and lowercased.
    """
    protocols: dict[int, str] = {}
    skipped = 0
    with Path(path).open("r", encoding="utf-8") as fh:
        for raw in fh:
            values = split_fields(strip_line_ending(raw), TABLE_FIELD_SEPARATOR)
            if len(values) != PROTOCOL_MAP_FIELDS:
                skipped += 1
                continue
            number = parse_int_token(values[0].strip())
            if number is None:
                skipped += 1
                continue
            protocols[number] = values[1].strip().lower()

    logger.debug("Loaded %d protocol names from %s (%d rows skipped)", len(protocols), path, skipped)
    return MappingProxyType(protocols)


def resolve_protocol_map(path: Optional[str | Path] = None) -> ProtocolMap:
    """Return the protocol map loaded from ``path`` or the built-in table."""
    if path is None:
        return DEFAULT_PROTOCOL_MAP
    return load_protocol_map(path)
