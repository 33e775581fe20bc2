"""Classification of single flow log lines."""

from __future__ import annotations

from typing import Optional

from ..core.constants import (
    DST_PORT_FIELD,
    FLOW_FIELD_SEPARATOR,
    MIN_FLOW_FIELDS,
    PROTOCOL_FIELD,
    UNKNOWN_PROTOCOL,
    UNTAGGED,
)
from ..core.models import Classification
from ..core.types import LookupTable, ProtocolMap
from ..utils import parse_int_token, split_fields, strip_line_ending


def resolve_protocol(number: int, protocol_map: ProtocolMap) -> str:
    """Return the lowercase protocol name for ``number`` or ``"unknown"``."""
    return protocol_map.get(number, UNKNOWN_PROTOCOL).lower()


def classify_line(
    line: str,
    lookup_table: LookupTable,
    protocol_map: ProtocolMap,
) -> Optional[Classification]:
    """Classify one flow log ``line``.

    Returns ``None`` when the line has fewer than eight space separated
    fields or when its protocol field is not an integer. A well formed but
    unmapped protocol number (negative ones included) is classified under
    ``"unknown"`` rather than discarded.
    """
    fields = split_fields(strip_line_ending(line), FLOW_FIELD_SEPARATOR)
    if len(fields) < MIN_FLOW_FIELDS:
        return None

    protocol_number = parse_int_token(fields[PROTOCOL_FIELD])
    if protocol_number is None:
        return None

    port = fields[DST_PORT_FIELD].lower()
    protocol = resolve_protocol(protocol_number, protocol_map)
    tag = lookup_table.get((port, protocol), UNTAGGED)
    return Classification(tag=tag, port=port, protocol=protocol)
