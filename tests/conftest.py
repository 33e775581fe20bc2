import sys
from pathlib import Path

# Ensure the src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
for _path in (SRC_PATH, PROJECT_ROOT):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))


import pytest

from tests.fixtures.flow_factory import FlowLogFactory


LOOKUP_ROWS = [
    ("25", "tcp", "sv_P1"),
    ("68", "udp", "sv_P2"),
    ("23", "tcp", "sv_P1"),
    ("31", "udp", "sv_P3"),
    ("443", "tcp", "sv_P2"),
    ("22", "tcp", "sv_P4"),
    ("3389", "tcp", "sv_P5"),
    ("0", "icmp", "sv_P5"),
    ("110", "tcp", "email"),
    ("993", "tcp", "email"),
    ("143", "tcp", "email"),
]

SAMPLE_FLOWS = [
    ("25", 6),
    ("68", 17),
    ("23", 6),
    ("31", 17),
    ("443", 6),
    ("22", 6),
    ("3389", 6),
    ("0", 1),
    ("110", 6),
    ("993", 6),
    ("143", 6),
    ("223", 6),
]


@pytest.fixture
def lookup_table_file(tmp_path: Path) -> Path:
    """Lookup table CSV with eleven tagged port/protocol pairs."""
    return FlowLogFactory.write_lookup_table(tmp_path / "lookup_table.csv", LOOKUP_ROWS)


@pytest.fixture
def protocol_map_file(tmp_path: Path) -> Path:
    """Protocol map covering tcp, udp and icmp."""
    return FlowLogFactory.write_protocol_map(
        tmp_path / "protocol_map.csv", [(6, "tcp"), (17, "udp"), (1, "icmp")]
    )


@pytest.fixture
def flow_log_file(tmp_path: Path) -> Path:
    """Flow log with one line per sample flow; the last one is untagged."""
    lines = [
        FlowLogFactory.flow_line(port, proto, index=i + 1)
        for i, (port, proto) in enumerate(SAMPLE_FLOWS)
    ]
    return FlowLogFactory.write_lines(tmp_path / "flow_log.log", lines)
