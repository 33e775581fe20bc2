"""Reference tables consulted while classifying flow log lines."""

from .lookup_table import load_lookup_table, make_lookup_key
from .protocol_map import load_protocol_map, resolve_protocol_map

__all__ = [
    "load_lookup_table",
    "make_lookup_key",
    "load_protocol_map",
    "resolve_protocol_map",
]
