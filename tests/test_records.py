"""Tests for ReadRecord, ReadLog, and log line parsing."""

import pytest

from read_logger import ReadLog, ReadRecord, parse_read_line
from read_logger.records import FIELDS, format_header, format_read_line


def make_record(**overrides):
    values = dict(
        tag="READ",
        begin=0,
        end=9,
        length=10,
        request_length=16,
        count=1,
        bytes_total=10,
    )
    values.update(overrides)
    return ReadRecord(**values)


# --- Formatting and parsing ---


def test_format_read_line():
    line = format_read_line(make_record())
    assert line == (
        "Read 0-9 (10 bytes). Total requests: 1 (10 bytes),READ,0,9,10,16,1,10"
    )


def test_header_declares_fields():
    header = format_header("READ")
    assert header.startswith("Initialize Read logger 'READ',")
    assert header.split(",")[1:] == list(FIELDS)


def test_parse_read_line():
    record = make_record(tag="BUFFER", begin=4, end=7, length=4, count=2)
    assert parse_read_line(format_read_line(record)) == record


def test_parse_ignores_formatter_prefix():
    line = (
        "2023-09-01 16:20:01,123 DEBUG read_logger.stats "
        "Read 0-3 (4 bytes). Total requests: 1 (4 bytes),READ,0,3,4,4,1,4\n"
    )
    record = parse_read_line(line)
    assert record == make_record(end=3, length=4, request_length=4, bytes_total=4)


def test_parse_eof_line():
    record = parse_read_line(
        "Read 10-9 (0 bytes). Total requests: 2 (10 bytes),READ,10,9,0,16,2,10"
    )
    assert record.length == 0
    assert record.end == record.begin - 1


def test_parse_tag_with_commas():
    record = make_record(tag="a,b,c")
    assert parse_read_line(format_read_line(record)).tag == "a,b,c"


@pytest.mark.parametrize(
    "line",
    [
        format_header("READ"),
        "",
        "unrelated log output",
        "Read 0-3 (4 bytes). Total requests: 1 (4 bytes),READ,0,3,4,x,1,4",
        "Read something,1,2",
    ],
)
def test_parse_returns_none(line):
    assert parse_read_line(line) is None


def test_record_as_dict():
    assert list(make_record().as_dict()) == list(FIELDS)


# --- ReadLog ---


def test_log_from_lines():
    lines = [
        format_header("READ"),
        format_read_line(make_record()),
        "something else",
        format_read_line(make_record(tag="OTHER", length=0, end=-1, bytes_total=0)),
    ]
    log = ReadLog.from_lines(lines)

    assert log.total_reads == 2
    assert log.total_bytes == 10
    assert log.tags == ["READ", "OTHER"]


def test_log_clear():
    log = ReadLog()
    log.add(make_record())
    log.clear()
    assert log.total_reads == 0


def test_log_summary_empty():
    summary = ReadLog().summary()

    assert summary == {"total_reads": 0, "total_bytes": 0, "unique_tags": 0}


def test_log_summary():
    log = ReadLog()
    log.add(make_record(length=10, request_length=16))
    log.add(make_record(length=16, request_length=16))
    log.add(make_record(length=0, request_length=16))
    log.add(make_record(tag="OTHER", length=4, request_length=4))

    summary = log.summary()

    assert summary["total_reads"] == 4
    assert summary["total_bytes"] == 30
    assert summary["unique_tags"] == 2
    assert summary["eof_reads"] == 1
    assert summary["short_reads"] == 1
    assert summary["min_read_size"] == 0
    assert summary["max_read_size"] == 16
    assert summary["mean_read_size"] == 30 / 4


def test_log_to_dataframe_empty():
    pytest.importorskip("pandas")
    df = ReadLog().to_dataframe()

    assert list(df.columns) == list(FIELDS)
    assert len(df) == 0


def test_log_to_dataframe():
    pytest.importorskip("pandas")
    log = ReadLog()
    log.add(make_record())
    log.add(make_record(begin=10, end=13, length=4, count=2, bytes_total=14))

    df = log.to_dataframe()

    assert list(df.columns) == list(FIELDS)
    assert len(df) == 2
    assert df.iloc[1]["begin"] == 10
    assert df.iloc[1]["end"] == 13
    assert df["length"].sum() == 14
