from __future__ import annotations

from src.aub_converter.aub_converter.formatting.formatter import AubFormatter, format_records
from src.aub_converter.aub_converter.formatting.strategies.log_type_strategy import LogTypeColumnStrategy
from src.aub_converter.aub_converter.records.model import Record
from src.aub_converter.aub_converter.records.parser import parse


def test_morning_eight_column_line_is_in():
    records = parse("72\t2025-11-03 08:52:08\t104\t15\tJohn Doe\tI\t0\t1")

    assert format_records(records) == "72\t2025-11-03 08:52:08\t1\t0\t1\t0"


def test_evening_eight_column_line_is_out():
    records = parse("72\t2025-11-03 18:18:47\t104\t15\tJohn Doe\tI\t0\t1")

    assert format_records(records) == "72\t2025-11-03 18:18:47\t1\t1\t1\t0"


def test_two_column_line_uses_hour():
    records = parse("72\t2025-11-03 08:52:08")

    assert format_records(records) == "72\t2025-11-03 08:52:08\t1\t0\t1\t0"


def test_lines_joined_in_order_without_trailing_newline():
    records = [
        Record(employee_id="2", timestamp="2025-11-03 19:00:00"),
        Record(employee_id="1", timestamp="2025-11-03 07:00:00"),
    ]

    out = format_records(records)

    assert out == "2\t2025-11-03 19:00:00\t1\t1\t1\t0\n1\t2025-11-03 07:00:00\t1\t0\t1\t0"
    assert not out.endswith("\n")


def test_no_records_gives_empty_text():
    assert format_records([]) == ""


def test_every_output_line_has_six_columns():
    records = parse("1\t2025-11-03 08:00:00\ta\tb\tc\td\te\tf\tg\n2\t2025-11-03 13:00:00")

    for line in format_records(records).split("\n"):
        assert len(line.split("\t")) == 6


def test_formatter_uses_injected_strategy():
    records = parse("72\t2025-11-03 08:52:08\t104\t15\tJohn Doe\tO\t0\t1")

    assert AubFormatter(LogTypeColumnStrategy()).format(records) == "72\t2025-11-03 08:52:08\t1\t1\t1\t0"
