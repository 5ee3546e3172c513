"""Tests for the dual-column text report and unit helpers."""

import pytest

from puzzlebench.benchmark.metrics import StatisticsSummary, summarize, summarize_benchmark
from puzzlebench.benchmark.reporter import ReportFormatter, format_report
from puzzlebench.benchmark.utils import (
    format_fixed,
    format_hms,
    format_ms,
    format_seconds,
    format_us,
)

ROW_LABELS = ["Runs", "Mean", "Min", "Q1", "Median", "Q3", "Max", "Stddev", "Σ(time)"]


def _summary(value: int, count: int) -> StatisticsSummary:
    """Summary where every duration statistic equals value."""
    return StatisticsSummary(
        count=count, mean=value, min=value, max=value, q1=value,
        median=value, q3=value, stddev=0, sum=value * count,
    )


# ---------------------------------------------------------------------------
# Unit helpers
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("ns, expected", [
    (0, "0.000"),
    (1_234_567, "1.235"),
    (1_234_499, "1.234"),
    (1_234_500, "1.235"),
    (999_999_999, "1000.000"),
])
def test_format_ms(ns, expected):
    assert format_ms(ns) == expected


@pytest.mark.parametrize("ns, expected", [
    (0, "0.0"),
    (1_234_567, "1234.6"),
    (49, "0.0"),
    (50, "0.1"),
])
def test_format_us(ns, expected):
    assert format_us(ns) == expected


def test_format_seconds():
    assert format_seconds(1_500_000_000) == "1.500"
    assert format_seconds(10 ** 21) == "1000000000000.000"


def test_format_fixed_negative_and_whole():
    assert format_fixed(-1_500_000, 1_000_000, 1) == "-1.5"
    assert format_fixed(7_000, 1_000, 0) == "7"


@pytest.mark.parametrize("ns, expected", [
    (0, "0:00:00.000"),
    (999_999, "0:00:00.000"),
    (61_001_000_000, "0:01:01.001"),
    (3_723_004_000_000, "1:02:03.004"),
    (360_000_000_000_000, "100:00:00.000"),
])
def test_format_hms(ns, expected):
    assert format_hms(ns) == expected


# ---------------------------------------------------------------------------
# ReportFormatter
# ---------------------------------------------------------------------------


def test_report_rows_in_order():
    report = summarize_benchmark([1_000_000, 2_000_000, 3_000_000, 4_000_000, 5_000_000])
    lines = format_report(report.full, report.trimmed).splitlines()

    assert len(lines) == 2 + len(ROW_LABELS)
    assert lines[0].startswith("Statistic")
    assert "All runs" in lines[0] and "Last 80% (warm)" in lines[0]
    assert set(lines[1]) <= {"-", "+"}
    assert [line.split(" | ")[0].strip() for line in lines[2:]] == ROW_LABELS


def test_report_cells():
    full = summarize([1_000_000, 2_000_000, 3_000_000])
    trimmed = summarize([2_000_000, 3_000_000, 4_000_000])
    lines = format_report(full, trimmed).splitlines()

    mean_row = lines[3]
    assert "2.000 ms (2000.0 µs)" in mean_row
    assert "3.000 ms (3000.0 µs)" in mean_row

    sum_row = lines[-1]
    assert "0.006 s (0:00:00.006)" in sum_row
    assert "0.009 s (0:00:00.009)" in sum_row


def test_report_lines_have_equal_width():
    text = format_report(_summary(12_345_678_901, 7), _summary(3, 2_000_000_000))
    widths = {len(line) for line in text.splitlines()}

    assert len(widths) == 1


def test_report_units_line_up_vertically():
    full = summarize([5, 1_000, 999_999_999, 123_456_789])
    trimmed = summarize([1_000, 999_999_999, 123_456_789])
    duration_rows = format_report(full, trimmed).splitlines()[3:10]

    ms_positions = {row.index(" ms (") for row in duration_rows}
    us_positions = {row.rindex(" µs)") for row in duration_rows}

    assert len(ms_positions) == 1
    assert len(us_positions) == 1


def test_report_same_layout_for_small_and_huge_counts():
    small = format_report(_summary(1_000, 3), _summary(1_000, 3)).splitlines()
    huge = format_report(_summary(1_000, 9_000_000_000), _summary(1_000, 7_200_000_000)).splitlines()

    assert len(small) == len(huge)
    for lines in (small, huge):
        assert len({len(line) for line in lines}) == 1


def test_report_large_sum_breakdown():
    summary = _summary(10 ** 9, 10 ** 7)
    text = format_report(summary, summary)

    # 10^16 ns = 10^7 s = 2777 h 46 min 40 s
    assert "10000000.000 s (2777:46:40.000)" in text


def test_custom_column_titles():
    summary = _summary(1, 1)
    text = ReportFormatter(full_title="cold", trimmed_title="warm").format(summary, summary)

    header = text.splitlines()[0]
    assert header.rstrip().endswith("warm")
    assert "cold" in header


@pytest.mark.parametrize("separator", [" | ", "  ||  ", "|", "   "])
def test_rule_line_follows_separator(separator):
    report = summarize_benchmark([1_000_000, 2_000_000, 3_000_000])
    lines = ReportFormatter(separator=separator).format_report(report).splitlines()

    assert len({len(line) for line in lines}) == 1
    assert set(lines[1]) <= {"-", "+"}
