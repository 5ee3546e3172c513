"""
puzzlebench - run and benchmark puzzle solutions.

Resolves a solution by platform and name, times it with a nanosecond clock
and reports full-sample and warm-up-trimmed statistics.
"""

__version__ = "1.0.0"
