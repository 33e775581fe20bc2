"""Centralized constant definitions for flowtag."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# ---------------------------------------------------------------------------
# Built-in IANA protocol numbers used when no protocol map file is supplied
# ---------------------------------------------------------------------------
DEFAULT_PROTOCOL_MAP: Mapping[int, str] = MappingProxyType(
    {
        1: "icmp",
        6: "tcp",
        17: "udp",
        47: "gre",
        50: "esp",
        51: "ah",
        89: "ospf",
        132: "sctp",
    }
)

# ---------------------------------------------------------------------------
# Reserved labels
# ---------------------------------------------------------------------------
UNTAGGED: str = "Untagged"  # port/protocol pair absent from the lookup table
UNKNOWN_PROTOCOL: str = "unknown"  # protocol number absent from the protocol map

# ---------------------------------------------------------------------------
# Flow log layout (space delimited, 0-based indices)
# ---------------------------------------------------------------------------
FLOW_FIELD_SEPARATOR: str = " "
MIN_FLOW_FIELDS: int = 8
DST_PORT_FIELD: int = 6
PROTOCOL_FIELD: int = 7

# ---------------------------------------------------------------------------
# Reference table layout
# ---------------------------------------------------------------------------
TABLE_FIELD_SEPARATOR: str = ","
LOOKUP_TABLE_FIELDS: int = 3
PROTOCOL_MAP_FIELDS: int = 2

# ---------------------------------------------------------------------------
# Report layout
# ---------------------------------------------------------------------------
TAG_SECTION_TITLE: str = "Tag Counts:"
TAG_SECTION_HEADER: str = "Tag,Count"
PORT_SECTION_TITLE: str = "Port/Protocol Combination Counts:"
PORT_SECTION_HEADER: str = "Port,Protocol,Count"

__all__ = [
    "DEFAULT_PROTOCOL_MAP",
    "UNTAGGED",
    "UNKNOWN_PROTOCOL",
    "FLOW_FIELD_SEPARATOR",
    "MIN_FLOW_FIELDS",
    "DST_PORT_FIELD",
    "PROTOCOL_FIELD",
    "TABLE_FIELD_SEPARATOR",
    "LOOKUP_TABLE_FIELDS",
    "PROTOCOL_MAP_FIELDS",
    "TAG_SECTION_TITLE",
    "TAG_SECTION_HEADER",
    "PORT_SECTION_TITLE",
    "PORT_SECTION_HEADER",
]
