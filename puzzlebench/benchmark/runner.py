"""
Benchmark runner for timing puzzle solutions.
"""

import time
import logging
from pathlib import Path
from datetime import datetime
from typing import List, Dict, Any, Optional, Callable, Sequence
from dataclasses import dataclass

from ..platforms import EntryPointResolver, Invocable, SolutionSpecifier
from ..data.loader import InputLoader
from ..config import MIN_BENCHMARK_ITERATIONS
from ..errors import InvalidIterationCount, InvocationFailure, PersistenceError
from .metrics import BenchmarkReport, summarize_benchmark
from .persistence import ResultStore

logger = logging.getLogger(__name__)

# on_sample(iteration, total, duration_ns), iteration counted from 1
SampleCallback = Callable[[int, int, int], None]


class TimingHarness:
    """
    Times an Invocable with a monotonic nanosecond clock.

    Invocations are strictly sequential. Only the call itself is bracketed by
    the clock reads; callbacks and bookkeeping happen outside.

    Example:
        harness = TimingHarness()
        elapsed = harness.run_once(invocable, lines)
        sample = harness.run_many(invocable, lines, iterations=50)
    """

    def __init__(
        self,
        clock: Callable[[], int] = time.perf_counter_ns,
        min_iterations: int = MIN_BENCHMARK_ITERATIONS,
    ):
        """
        Initialize timing harness.

        Args:
            clock: Monotonic clock returning integer nanoseconds
            min_iterations: Smallest iteration count run_many accepts (at least 1)
        """
        self._clock = clock
        self.min_iterations = max(1, min_iterations)

    def check_iterations(self, iterations: int) -> None:
        """
        Reject iteration counts below the minimum.

        Raises:
            InvalidIterationCount: If iterations < min_iterations
        """
        if iterations < self.min_iterations:
            raise InvalidIterationCount(
                f"A benchmark needs at least {self.min_iterations} iterations, got {iterations}"
            )

    def _invoke(self, invocable: Invocable, input: Sequence[str], verbose: bool, iteration: int) -> int:
        try:
            start = self._clock()
            invocable.run(input, verbose)
            end = self._clock()
        except Exception as e:
            raise InvocationFailure(
                f"Solution failed on iteration {iteration}: {e.__class__.__name__}: {e}",
                iteration=iteration,
            ) from e
        return end - start

    def run_once(self, invocable: Invocable, input: Sequence[str]) -> int:
        """
        Run a solution once with its output enabled.

        Returns:
            Elapsed nanoseconds

        Raises:
            InvocationFailure: If the solution raises
        """
        elapsed = self._invoke(invocable, input, verbose=True, iteration=1)
        logger.info(f"Single run took {elapsed} ns")
        return elapsed

    def run_many(
        self,
        invocable: Invocable,
        input: Sequence[str],
        iterations: int,
        on_sample: Optional[SampleCallback] = None,
    ) -> List[int]:
        """
        Run a solution repeatedly with its output suppressed.

        Args:
            invocable: Solution to time
            input: Input lines, passed unchanged to every run
            iterations: Number of runs
            on_sample: Called with (iteration, total, duration_ns) after each run

        Returns:
            Durations in nanoseconds, in invocation order

        Raises:
            InvalidIterationCount: Before any run, if iterations is too small
            InvocationFailure: If any run raises; remaining runs are skipped
        """
        self.check_iterations(iterations)

        sample: List[int] = []
        for i in range(1, iterations + 1):
            duration = self._invoke(invocable, input, verbose=False, iteration=i)
            sample.append(duration)

            if on_sample:
                on_sample(i, iterations, duration)

            if i % 100 == 0 or i == iterations:
                logger.info(f"Progress: {i}/{iterations}")

        return sample


@dataclass
class BenchmarkOutcome:
    """Result of a complete benchmark run."""
    specifier: SolutionSpecifier
    sample: List[int]
    report: BenchmarkReport
    timestamp: int
    csv_path: Optional[Path] = None
    persistence_error: Optional[PersistenceError] = None

    @property
    def started_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "specifier": str(self.specifier),
            "timestamp": self.timestamp,
            "started_at": self.started_at.isoformat(),
            "report": self.report.to_dict(),
            "csv_path": str(self.csv_path) if self.csv_path else None,
            "persistence_error": str(self.persistence_error) if self.persistence_error else None,
        }


class BenchmarkSession:
    """
    Resolves, loads, times, summarizes and optionally persists a solution.

    Features:
        - Single verbose runs and N-iteration benchmarks
        - Progress callbacks
        - Full and warm-up-trimmed statistics
        - CSV export that never fails the benchmark

    Example:
        session = BenchmarkSession()
        outcome = session.benchmark(specifier, iterations=100, persist=True)
        print(format_report(outcome.report.full, outcome.report.trimmed))
    """

    def __init__(
        self,
        resolver: Optional[EntryPointResolver] = None,
        loader: Optional[InputLoader] = None,
        harness: Optional[TimingHarness] = None,
        store: Optional[ResultStore] = None,
        now: Callable[[], float] = time.time,
    ):
        """
        Initialize benchmark session.

        Args:
            resolver: Entry point resolver
            loader: Input loader
            harness: Timing harness
            store: CSV result store
            now: Wall clock used for the capture timestamp
        """
        self.resolver = resolver or EntryPointResolver()
        self.loader = loader or InputLoader()
        self.harness = harness or TimingHarness()
        self.store = store or ResultStore()
        self._now = now

        # Callbacks
        self._on_sample: Optional[SampleCallback] = None

    def on_sample(self, callback: SampleCallback) -> "BenchmarkSession":
        """
        Set progress callback.

        Args:
            callback: Function(iteration, total, duration_ns) called after each run
        """
        self._on_sample = callback
        return self

    def prepare(self, specifier: SolutionSpecifier) -> tuple:
        """
        Resolve the solution and load its input.

        Returns:
            Tuple of (Invocable, input lines)
        """
        invocable = self.resolver.resolve(specifier)
        handler = self.resolver.handler_for(specifier)
        lines = self.loader.load(specifier, handler)
        return invocable, lines

    def run_once(self, specifier: SolutionSpecifier) -> int:
        """Run a solution once with output and return the elapsed nanoseconds."""
        invocable, lines = self.prepare(specifier)
        logger.info(f"Running {specifier}")
        return self.harness.run_once(invocable, lines)

    def benchmark(
        self,
        specifier: SolutionSpecifier,
        iterations: int,
        persist: bool = False,
    ) -> BenchmarkOutcome:
        """
        Benchmark a solution.

        Args:
            specifier: Solution and test index
            iterations: Number of timed runs (at least the harness minimum)
            persist: Write the raw sample to CSV

        Returns:
            BenchmarkOutcome; a CSV write failure is recorded on it, not raised
        """
        self.harness.check_iterations(iterations)

        invocable, lines = self.prepare(specifier)
        timestamp = int(self._now())

        logger.info(f"Starting benchmark of {specifier}: {iterations} iterations")
        sample = self.harness.run_many(invocable, lines, iterations, on_sample=self._on_sample)
        report = summarize_benchmark(sample)
        logger.info(
            f"Benchmark complete: mean {report.full.mean} ns, warm mean {report.trimmed.mean} ns"
        )

        outcome = BenchmarkOutcome(
            specifier=specifier,
            sample=sample,
            report=report,
            timestamp=timestamp,
        )

        if persist:
            try:
                outcome.csv_path = self.store.save_to_csv(sample, timestamp)
            except PersistenceError as e:
                logger.error(f"Could not save runtimes: {e}")
                outcome.persistence_error = e

        return outcome
