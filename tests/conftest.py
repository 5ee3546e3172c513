"""Pytest configuration for puzzlebench tests."""

import pytest


class FakeClock:
    """Clock returning preset nanosecond readings in order."""

    def __init__(self, readings):
        self._readings = iter(readings)
        self.calls = 0

    def __call__(self) -> int:
        self.calls += 1
        return next(self._readings)


def clock_for_durations(durations):
    """Readings that make consecutive start/stop pairs produce the given durations."""
    readings = []
    for i, duration in enumerate(durations):
        start = i * 1_000
        readings.extend([start, start + duration])
    return FakeClock(readings)


@pytest.fixture
def input_dir(tmp_path):
    """Input tree with the 2015 day 1 example inputs."""
    day_dir = tmp_path / "inputs" / "AdventOfCode" / "y2015d01"
    day_dir.mkdir(parents=True)
    (day_dir / "test1.txt").write_text("(()(()(\n", encoding="utf-8")
    (day_dir / "test3.txt").write_text("()())\n", encoding="utf-8")
    return tmp_path / "inputs"
