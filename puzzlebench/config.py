"""
Configuration management for puzzlebench.
Loads settings from environment variables and .env file.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
PROJECT_ROOT = Path(__file__).parent.parent
load_dotenv(PROJECT_ROOT / ".env")


class Config:
    """Central configuration management."""

    # ==========================================================================
    # Directories
    # ==========================================================================
    INPUT_DIR: Path = PROJECT_ROOT / os.getenv("PUZZLEBENCH_INPUT_DIR", "inputs")
    RESULTS_DIR: Path = PROJECT_ROOT / os.getenv("PUZZLEBENCH_RESULTS_DIR", "results")

    # ==========================================================================
    # Benchmark Settings
    # ==========================================================================
    DEFAULT_ITERATIONS: int = int(os.getenv("PUZZLEBENCH_DEFAULT_ITERATIONS", "10"))


# Fewer runs than this make the warm-up trimmed view meaningless
MIN_BENCHMARK_ITERATIONS = 3

# Share of the sample (numerator, denominator) kept by warm-up trimming
WARM_FRACTION = (4, 5)

# Test index 0 is the real puzzle input, 1..MAX_TEST_INDEX are examples
MAX_TEST_INDEX = 9
