from .config import settings, get_settings, Settings
from .constants import *  # noqa: F401,F403
from .models import Classification, CountSnapshot, make_port_protocol_key, split_port_protocol_key
from .types import LookupKey, LookupTable, ProtocolMap, CountTable, TagRow, PortProtocolRow
from ..exceptions import (
    FlowTagError,
    TableLoadError,
    LookupTableError,
    ProtocolMapError,
    FlowLogReadError,
    DispatchTimeoutError,
    AggregationError,
    ReportGenerationError,
)

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "Classification",
    "CountSnapshot",
    "make_port_protocol_key",
    "split_port_protocol_key",
    "LookupKey",
    "LookupTable",
    "ProtocolMap",
    "CountTable",
    "TagRow",
    "PortProtocolRow",
    "FlowTagError",
    "TableLoadError",
    "LookupTableError",
    "ProtocolMapError",
    "FlowLogReadError",
    "DispatchTimeoutError",
    "AggregationError",
    "ReportGenerationError",
] + [name for name in globals().keys() if name.isupper()]
