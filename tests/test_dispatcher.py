import threading
from pathlib import Path

import pytest

from flowtag.core.models import Classification
from flowtag.exceptions import AggregationError, DispatchTimeoutError, FlowLogReadError
from flowtag.metrics import FlowCounter
from flowtag.orchestrator import default_worker_count, dispatch_flow_log
from flowtag.tables import load_lookup_table, load_protocol_map
from tests.fixtures.flow_factory import FlowLogFactory


@pytest.fixture
def tables(lookup_table_file: Path, protocol_map_file: Path):
    return load_lookup_table(lookup_table_file), load_protocol_map(protocol_map_file)


def test_dispatch_sample_log(flow_log_file: Path, tables):
    snap = dispatch_flow_log(flow_log_file, *tables)

    assert snap.tag_counts == {
        "sv_P1": 2,
        "sv_P2": 2,
        "sv_P3": 1,
        "sv_P4": 1,
        "sv_P5": 2,
        "email": 3,
        "Untagged": 1,
    }
    assert len(snap.port_protocol_counts) == 12
    assert snap.port_protocol_counts["25,tcp"] == 1
    assert snap.port_protocol_counts["68,udp"] == 1
    assert snap.port_protocol_counts["31,udp"] == 1
    assert snap.port_protocol_counts["3389,tcp"] == 1
    assert snap.port_protocol_counts["0,icmp"] == 1
    assert snap.lines_read == 12
    assert snap.is_consistent


def test_two_line_scenario(tmp_path: Path, tables):
    log = FlowLogFactory.write_lines(
        tmp_path / "flow.log",
        [FlowLogFactory.flow_line(25, 6), FlowLogFactory.flow_line(68, 17, index=2)],
    )
    snap = dispatch_flow_log(log, *tables)
    assert snap.tag_counts == {"sv_P1": 1, "sv_P2": 1}
    assert snap.port_protocol_counts == {"25,tcp": 1, "68,udp": 1}


def test_duplicate_lines_are_each_counted(tmp_path: Path, tables):
    line = FlowLogFactory.flow_line(25, 6)
    log = FlowLogFactory.write_lines(
        tmp_path / "flow.log",
        [line, line, FlowLogFactory.flow_line(68, 17, index=2)],
        trailing_newline=False,
    )
    snap = dispatch_flow_log(log, *tables)
    assert snap.tag_counts["sv_P1"] == 2
    assert snap.tag_counts["sv_P2"] == 1
    assert snap.port_protocol_counts["25,tcp"] == 2
    assert snap.port_protocol_counts["68,udp"] == 1


def test_malformed_lines_do_not_abort(tmp_path: Path, tables):
    log = FlowLogFactory.write_lines(
        tmp_path / "flow.log",
        [
            FlowLogFactory.flow_line(25, 6),
            "incomplete line",
            FlowLogFactory.flow_line("notAPort", 17, index=2),
            FlowLogFactory.flow_line(68, "notAProtocol", index=3),
            FlowLogFactory.flow_line(68, 17, index=4),
            FlowLogFactory.flow_line("notAPort", -17, index=2),
        ],
    )
    snap = dispatch_flow_log(log, *tables)

    assert snap.tag_counts == {"Untagged": 2, "sv_P1": 1, "sv_P2": 1}
    assert snap.port_protocol_counts["notaport,unknown"] == 1
    assert snap.port_protocol_counts["notaport,udp"] == 1
    assert snap.discarded == 2
    assert snap.is_consistent


def test_empty_log_yields_empty_tables(tmp_path: Path, tables):
    log = FlowLogFactory.write_lines(tmp_path / "flow.log", [])
    snap = dispatch_flow_log(log, *tables)
    assert snap.tag_counts == {}
    assert snap.port_protocol_counts == {}
    assert snap.lines_read == 0


def test_concurrent_access_thousand_lines(tmp_path: Path, tables):
    log = FlowLogFactory.write_lines(
        tmp_path / "flow.log", [FlowLogFactory.flow_line(25, 6)] * 1000
    )
    snap = dispatch_flow_log(log, *tables, max_workers=8)
    assert snap.tag_counts == {"sv_P1": 1000}
    assert snap.port_protocol_counts == {"25,tcp": 1000}


def test_large_file_matches_serial_expectation(tmp_path: Path, protocol_map_file: Path):
    rows = []
    for i in range(1, 2001):
        rows.append((str(i), "tcp", f"service_{i}"))
        if i % 2 == 0:
            rows.append((str(i), "udp", f"service_{i}_udp"))
    lookup = load_lookup_table(
        FlowLogFactory.write_lookup_table(tmp_path / "lt.csv", rows)
    )
    protocols = load_protocol_map(protocol_map_file)

    lines = []
    expected_tags: dict[str, int] = {}
    expected_keys: dict[str, int] = {}
    for i in range(20_000):
        port = i % 2000 + 1
        proto_name, proto_num = ("tcp", 6) if i % 2 == 0 else ("udp", 17)
        lines.append(FlowLogFactory.flow_line(port, proto_num, index=i))
        key = f"{port},{proto_name}"
        tag = lookup.get((str(port), proto_name), "Untagged")
        expected_keys[key] = expected_keys.get(key, 0) + 1
        expected_tags[tag] = expected_tags.get(tag, 0) + 1
    log = FlowLogFactory.write_lines(tmp_path / "flow.log", lines)

    snap = dispatch_flow_log(log, lookup, protocols)
    assert snap.tag_counts == expected_tags
    assert snap.port_protocol_counts == expected_keys


def test_rerun_is_reproducible(flow_log_file: Path, tables):
    first = dispatch_flow_log(flow_log_file, *tables)
    second = dispatch_flow_log(flow_log_file, *tables)
    assert first == second


def test_missing_flow_log_is_fatal(tmp_path: Path, tables):
    with pytest.raises(FlowLogReadError):
        dispatch_flow_log(tmp_path / "missing.log", *tables)


class _BlockingCounter(FlowCounter):
    """Counter whose merges block until released."""

    def __init__(self) -> None:
        super().__init__()
        self.release = threading.Event()

    def record(self, classification: Classification) -> None:
        self.release.wait(5)
        super().record(classification)


def test_timeout_abandons_outstanding_work(tmp_path: Path, tables):
    log = FlowLogFactory.write_lines(
        tmp_path / "flow.log", [FlowLogFactory.flow_line(25, 6)] * 50
    )
    counter = _BlockingCounter()
    with pytest.raises(DispatchTimeoutError) as excinfo:
        dispatch_flow_log(log, *tables, counter=counter, max_workers=1, timeout=0.05)
    assert "50 lines" in str(excinfo.value)

    counter.release.set()
    # Only the line already running when the timeout hit may still be merged.
    snap = counter.snapshot()
    assert snap.lines_read == 50
    assert snap.classified <= 1


class _FailingCounter(FlowCounter):
    def record(self, classification: Classification) -> None:
        raise RuntimeError("boom")


def test_worker_failure_is_reported(flow_log_file: Path, tables):
    with pytest.raises(AggregationError, match="boom"):
        dispatch_flow_log(flow_log_file, *tables, counter=_FailingCounter())


def test_default_worker_count_is_positive():
    assert default_worker_count() >= 1


def test_undecodable_line_does_not_abort(tmp_path: Path, tables):
    log = tmp_path / "flow.log"
    log.write_bytes(
        FlowLogFactory.flow_line(25, 6).encode() + b"\n"
        + b"junk \xff\xfe line\n"
        + b"src2 dst2 1000 srcport2 dstport2 192.168.1.2 \xff 17\n"
        + FlowLogFactory.flow_line(68, 17, index=3).encode() + b"\n"
    )

    snap = dispatch_flow_log(log, *tables)

    assert snap.lines_read == 4
    assert snap.discarded == 1
    assert snap.tag_counts == {"sv_P1": 1, "sv_P2": 1, "Untagged": 1}
    assert snap.port_protocol_counts["\ufffd,udp"] == 1
    assert snap.is_consistent


def test_lines_read_is_recorded_once_per_dispatch(flow_log_file: Path, tables):
    class _ReadTrackingCounter(FlowCounter):
        def __init__(self) -> None:
            super().__init__()
            self.mark_read_calls = []

        def mark_read(self, lines: int = 1) -> None:
            self.mark_read_calls.append(lines)
            super().mark_read(lines)

    counter = _ReadTrackingCounter()
    dispatch_flow_log(flow_log_file, *tables, counter=counter)
    assert counter.mark_read_calls == [12]


@pytest.mark.parametrize("workers", [0, -1])
def test_invalid_worker_count_is_rejected(flow_log_file: Path, tables, workers):
    with pytest.raises(ValueError):
        dispatch_flow_log(flow_log_file, *tables, max_workers=workers)
