from __future__ import annotations

from typing import Dict, Mapping, Tuple, TypedDict


class TagRow(TypedDict):
    """One row of the tag section of a report."""

    tag: str
    count: int


class PortProtocolRow(TypedDict):
    """One row of the port/protocol section of a report."""

    port: str
    protocol: str
    count: int


# (destination port, protocol name), both lowercase
LookupKey = Tuple[str, str]
LookupTable = Mapping[LookupKey, str]
ProtocolMap = Mapping[int, str]
CountTable = Dict[str, int]
