"""
Statistics over nanosecond timing samples.

All arithmetic is done on Python ints (and one Fraction), so sums of many
large durations are exact and never overflow.
"""

import math
import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Dict, List, Optional, Sequence

from ..config import WARM_FRACTION
from ..errors import EmptySample

logger = logging.getLogger(__name__)

QUARTILES = (0.25, 0.5, 0.75)

# Quantile positions closer than this to an integer use that element directly
NEAR_INTEGER_TOLERANCE = 0.1


@dataclass(frozen=True)
class StatisticsSummary:
    """
    Summary statistics of one timing sample.

    All duration fields are integer nanoseconds. ``mean`` and ``stddev`` are
    truncated; ``sum`` is exact.

    Because ``stddev`` is truncated, it is 0 both for samples whose values are
    all equal and for samples that spread by less than one nanosecond around
    the mean, e.g. ``[0, 1]``. ``sum_of_squared_deviations`` is exact and is
    0 only when every value is equal.
    """
    count: int
    mean: int
    min: int
    max: int
    q1: int
    median: int
    q3: int
    stddev: int
    sum: int
    sum_of_squared_deviations: Optional[Fraction] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "count": self.count,
            "mean_ns": self.mean,
            "min_ns": self.min,
            "max_ns": self.max,
            "q1_ns": self.q1,
            "median_ns": self.median,
            "q3_ns": self.q3,
            "stddev_ns": self.stddev,
            "sum_ns": self.sum,
        }


@dataclass(frozen=True)
class BenchmarkReport:
    """Full-sample and warm-up-trimmed summaries of one benchmark."""
    full: StatisticsSummary
    trimmed: StatisticsSummary

    def to_dict(self) -> Dict[str, Any]:
        return {
            "full": self.full.to_dict(),
            "trimmed": self.trimmed.to_dict(),
        }


def warm_count(n: int) -> int:
    """Number of samples kept by warm-up trimming: ceil(4n / 5)."""
    numerator, denominator = WARM_FRACTION
    return -(-n * numerator // denominator)


def trim_warmup(sample: Sequence[int]) -> List[int]:
    """
    Drop the earliest iterations, keeping the last ceil(0.8 * n) in order.

    Samples of one element (or none) are returned unchanged.
    """
    keep = warm_count(len(sample))
    return list(sample[len(sample) - keep:])


def quantile(sorted_sample: Sequence[int], fraction: float) -> int:
    """
    Quantile of an ascending sample using the (n + 1) * x - 1 position rule.

    A position within NEAR_INTEGER_TOLERANCE of an integer takes that element;
    otherwise the elements around the position are averaged (truncated).
    Indices are clamped into the sample for very small n.

    Raises:
        EmptySample: If the sample is empty
    """
    n = len(sorted_sample)
    if n == 0:
        raise EmptySample("Cannot compute a quantile of an empty sample")

    position = (n + 1) * fraction - 1
    last = n - 1

    nearest = round(position)
    if abs(position - nearest) < NEAR_INTEGER_TOLERANCE:
        return sorted_sample[min(max(nearest, 0), last)]

    lower = math.floor(position)
    low = sorted_sample[min(max(lower, 0), last)]
    high = sorted_sample[min(max(lower + 1, 0), last)]
    return (low + high) // 2


def summarize(sample: Sequence[int]) -> StatisticsSummary:
    """
    Compute summary statistics of a timing sample.

    Args:
        sample: Durations in nanoseconds, in invocation order (not modified)

    Returns:
        StatisticsSummary

    Raises:
        EmptySample: If the sample is empty
    """
    if not sample:
        raise EmptySample("Cannot summarize an empty timing sample")

    ordered = sorted(sample)
    n = len(ordered)

    total = sum(ordered)
    total_squares = sum(x * x for x in ordered)

    # n * sum((x - mean)^2) == n * sum(x^2) - sum(x)^2, exactly
    scaled_deviations = n * total_squares - total * total
    variance_floor = scaled_deviations // (n * n)

    q1, median, q3 = (quantile(ordered, x) for x in QUARTILES)

    return StatisticsSummary(
        count=n,
        mean=total // n,
        min=ordered[0],
        max=ordered[-1],
        q1=q1,
        median=median,
        q3=q3,
        stddev=math.isqrt(variance_floor),
        sum=total,
        sum_of_squared_deviations=Fraction(scaled_deviations, n),
    )


def summarize_benchmark(sample: Sequence[int]) -> BenchmarkReport:
    """
    Summarize a benchmark twice: over every run and over the warm runs.

    Raises:
        EmptySample: If the sample is empty
    """
    trimmed = trim_warmup(sample)
    logger.debug(f"Summarizing {len(sample)} runs ({len(trimmed)} after warm-up trim)")
    return BenchmarkReport(full=summarize(sample), trimmed=summarize(trimmed))
