"""
Benchmark execution, statistics and reporting package.
"""

from .runner import TimingHarness, BenchmarkSession, BenchmarkOutcome
from .metrics import (
    StatisticsSummary,
    BenchmarkReport,
    summarize,
    summarize_benchmark,
    trim_warmup,
    quantile,
)
from .reporter import ReportFormatter, format_report
from .persistence import ResultStore, load_from_csv

__all__ = [
    "TimingHarness",
    "BenchmarkSession",
    "BenchmarkOutcome",
    "StatisticsSummary",
    "BenchmarkReport",
    "summarize",
    "summarize_benchmark",
    "trim_warmup",
    "quantile",
    "ReportFormatter",
    "format_report",
    "ResultStore",
    "load_from_csv",
]
