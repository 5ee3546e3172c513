"""
Text report generation for benchmark results.

Renders the full-sample and warm-up-trimmed summaries side by side as a
fixed-width table. Formatting is pure; callers print or store the text.
"""

from typing import List, Tuple

from .metrics import BenchmarkReport, StatisticsSummary
from .utils import format_hms, format_ms, format_seconds, format_us

# (label, summary attribute) for rows shown in ms and µs
DURATION_ROWS = [
    ("Mean", "mean"),
    ("Min", "min"),
    ("Q1", "q1"),
    ("Median", "median"),
    ("Q3", "q3"),
    ("Max", "max"),
    ("Stddev", "stddev"),
]

RUNS_LABEL = "Runs"
SUM_LABEL = "Σ(time)"
HEADER_LABEL = "Statistic"


class ReportFormatter:
    """
    Format two StatisticsSummary objects as an aligned two-column table.

    Rows: Runs, Mean, Min, Q1, Median, Q3, Max, Stddev, Σ(time). Duration rows
    show milliseconds (3 decimals) and microseconds (1 decimal); Σ(time)
    shows seconds (3 decimals) and an H:MM:SS.mmm breakdown.

    Example:
        formatter = ReportFormatter()
        print(formatter.format(report.full, report.trimmed))
    """

    def __init__(
        self,
        full_title: str = "All runs",
        trimmed_title: str = "Last 80% (warm)",
        separator: str = " | ",
    ):
        self.full_title = full_title
        self.trimmed_title = trimmed_title
        self.separator = separator

    def format(self, full: StatisticsSummary, trimmed: StatisticsSummary) -> str:
        """
        Render the table.

        Args:
            full: Summary over every run
            trimmed: Summary over the warm runs

        Returns:
            Multi-line text block without a trailing newline
        """
        summaries = (full, trimmed)

        ms_width = max(
            len(format_ms(getattr(s, attr))) for s in summaries for _, attr in DURATION_ROWS
        )
        us_width = max(
            len(format_us(getattr(s, attr))) for s in summaries for _, attr in DURATION_ROWS
        )
        s_width = max(len(format_seconds(s.sum)) for s in summaries)

        rows: List[Tuple[str, str, str]] = []
        rows.append((RUNS_LABEL, str(full.count), str(trimmed.count)))

        for label, attr in DURATION_ROWS:
            rows.append((
                label,
                self._duration_cell(getattr(full, attr), ms_width, us_width),
                self._duration_cell(getattr(trimmed, attr), ms_width, us_width),
            ))

        rows.append((
            SUM_LABEL,
            self._sum_cell(full.sum, s_width),
            self._sum_cell(trimmed.sum, s_width),
        ))

        header = (HEADER_LABEL, self.full_title, self.trimmed_title)
        widths = [
            max(len(row[i]) for row in rows + [header])
            for i in range(3)
        ]

        lines = []
        lines.append(self._join(header, widths))
        lines.append(self._rule_joint().join("-" * w for w in widths))
        for row in rows:
            lines.append(self._join(row, widths))

        return "\n".join(lines)

    def format_report(self, report: BenchmarkReport) -> str:
        """Render a BenchmarkReport."""
        return self.format(report.full, report.trimmed)

    def _rule_joint(self) -> str:
        # Separator with its blanks drawn as dashes
        return "".join("-" if c == " " else "+" for c in self.separator)

    def _join(self, row: Tuple[str, str, str], widths: List[int]) -> str:
        label, left, right = row
        return self.separator.join([
            f"{label:<{widths[0]}}",
            f"{left:>{widths[1]}}",
            f"{right:>{widths[2]}}",
        ])

    @staticmethod
    def _duration_cell(ns: int, ms_width: int, us_width: int) -> str:
        return f"{format_ms(ns):>{ms_width}} ms ({format_us(ns):>{us_width}} µs)"

    @staticmethod
    def _sum_cell(ns: int, s_width: int) -> str:
        return f"{format_seconds(ns):>{s_width}} s ({format_hms(ns)})"


def format_report(full: StatisticsSummary, trimmed: StatisticsSummary) -> str:
    """Render the default two-column report."""
    return ReportFormatter().format(full, trimmed)
