"""Tests for the statistics engine.

Covers quartile positions, warm-up trimming, exact sums and the population
standard deviation with known inputs.
"""

import math
from fractions import Fraction

import pytest

from puzzlebench.benchmark.metrics import (
    BenchmarkReport,
    quantile,
    summarize,
    summarize_benchmark,
    trim_warmup,
    warm_count,
)
from puzzlebench.errors import EmptySample


# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------


def test_summarize_quartiles_of_five_samples():
    """q1 interpolates, median is exact, q3 interpolates."""
    summary = summarize([64, 1, 32, 4, 16])

    assert summary.count == 5
    assert summary.min == 1
    assert summary.max == 64
    assert summary.q1 == 2   # (1 + 4) / 2 truncated
    assert summary.median == 16
    assert summary.q3 == 48  # (32 + 64) / 2
    assert summary.sum == 117
    assert summary.mean == 23  # 117 / 5 truncated


def test_summarize_does_not_reorder_input():
    sample = [50, 10, 40, 20, 30]
    summarize(sample)
    assert sample == [50, 10, 40, 20, 30]


def test_summarize_population_stddev():
    summary = summarize([10, 20, 30, 40, 50])

    # sqrt(1000 / 5) = 14.14...
    assert summary.stddev == 14
    assert summary.sum_of_squared_deviations == Fraction(1000)


def test_summarize_stddev_zero_when_all_equal():
    summary = summarize([7_000, 7_000, 7_000, 7_000])

    assert summary.stddev == 0
    assert summary.sum_of_squared_deviations == 0


def test_summarize_stddev_positive_when_values_differ():
    assert summarize([1_000, 1_000, 5_000]).stddev > 0


def test_summarize_sub_nanosecond_spread_truncates_stddev():
    summary = summarize([0, 1])

    assert summary.stddev == 0
    assert summary.sum_of_squared_deviations == Fraction(1, 2)


def test_summarize_mean_truncates():
    assert summarize([1, 2]).mean == 1
    assert summarize([2, 2, 3]).mean == 2


def test_summarize_single_sample():
    summary = summarize([42])

    assert summary.count == 1
    assert summary.min == summary.q1 == summary.median == summary.q3 == summary.max == 42
    assert summary.stddev == 0


def test_summarize_two_samples_clamps_quartile_positions():
    summary = summarize([20, 10])

    assert summary.q1 == 10
    assert summary.median == 15
    assert summary.q3 == 20


def test_summarize_empty_sample_fails():
    with pytest.raises(EmptySample):
        summarize([])


def test_summarize_sum_beyond_64_bits_is_exact():
    big = 2 ** 62
    summary = summarize([big, big, big, big + 1])

    assert summary.sum == 4 * big + 1
    assert summary.sum > 2 ** 63
    assert summary.mean == big


def test_summarize_many_second_long_runs():
    count = 100_000
    summary = summarize([10 ** 9] * count)

    assert summary.sum == 10 ** 14
    assert summary.mean == 10 ** 9
    assert summary.stddev == 0


@pytest.mark.parametrize("sample", [
    [5],
    [3, 1],
    [9, 1, 5],
    [1, 4, 16, 32, 64],
    [100, 3, 57, 57, 2, 8000, 41],
    list(range(1000, 0, -7)),
])
def test_summarize_order_of_statistics(sample):
    summary = summarize(sample)

    assert summary.min <= summary.q1 <= summary.median <= summary.q3 <= summary.max
    assert summary.stddev >= 0


def test_summary_to_dict():
    data = summarize([10, 20, 30]).to_dict()

    assert data["count"] == 3
    assert data["mean_ns"] == 20
    assert data["sum_ns"] == 60


# ---------------------------------------------------------------------------
# quantile
# ---------------------------------------------------------------------------


def test_quantile_snaps_positions_near_an_integer():
    """Positions within 0.1 of an integer use that element, not an average."""
    ordered = [i * 10 for i in range(19)]

    # (19 + 1) * 0.4975 - 1 = 8.95 -> index 9
    assert quantile(ordered, 0.4975) == 90
    # (19 + 1) * 0.4525 - 1 = 8.05 -> index 8
    assert quantile(ordered, 0.4525) == 80


def test_quantile_interpolates_other_positions():
    ordered = [i * 10 for i in range(19)]

    # (19 + 1) * 0.4875 - 1 = 8.75 -> average of indices 8 and 9
    assert quantile(ordered, 0.4875) == 85


def test_quantile_of_empty_sample_fails():
    with pytest.raises(EmptySample):
        quantile([], 0.5)


# ---------------------------------------------------------------------------
# warm-up trimming
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("n", range(1, 41))
def test_trim_warmup_keeps_ceil_of_80_percent(n):
    sample = list(range(n))
    trimmed = trim_warmup(sample)

    assert len(trimmed) == math.ceil(Fraction(4 * n, 5))
    assert trimmed == sample[n - len(trimmed):]


def test_trim_warmup_single_sample_unchanged():
    assert trim_warmup([123]) == [123]


def test_trim_warmup_keeps_invocation_order():
    assert trim_warmup([50, 10, 40, 20, 30]) == [10, 40, 20, 30]


def test_warm_count_small_values():
    assert [warm_count(n) for n in range(0, 6)] == [0, 1, 2, 3, 4, 4]


def test_summarize_benchmark_full_and_trimmed():
    report = summarize_benchmark([10, 20, 30, 40, 50])

    assert isinstance(report, BenchmarkReport)
    assert report.full.mean == 30
    assert report.full.min == 10
    assert report.full.max == 50
    assert report.trimmed.count == 4
    assert report.trimmed.mean == 35
    assert report.trimmed.min == 20
