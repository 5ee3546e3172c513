"""
Advent of Code platform handler.

Solutions are named yYYYYdDDpP, e.g. "y2015d01p1" for 2015 day 1 part 1.
Both parts of a day share one input directory.
"""

import re
import logging
from pathlib import Path

from .base import Platform, PlatformHandler, SolutionSpecifier
from ..errors import InvalidSpecifier

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"^y(?P<year>\d{4})d(?P<day>\d{2})p(?P<part>\d)$")

FIRST_YEAR = 2015
LAST_YEAR = 2025
# From 2025 on, events have 12 puzzles instead of 25
SHORT_EVENT_YEAR = 2025


class AdventOfCodeHandler(PlatformHandler):
    """
    Handler for Advent of Code puzzles.

    Validity rules:
        - years 2015 through 2025
        - days 1-25 before 2025, 1-12 from 2025 on
        - parts 1 and 2
    """

    platform = Platform.ADVENT_OF_CODE
    display_name = "Advent of Code"

    def parse_name(self, name: str) -> tuple:
        """
        Split an identifier into (year, day, part).

        Raises:
            InvalidSpecifier: If the identifier is malformed or out of range
        """
        match = NAME_PATTERN.match(name)
        if not match:
            raise InvalidSpecifier(
                f"Invalid Advent of Code solution name: {name!r} (expected yYYYYdDDpP)"
            )

        year = int(match.group("year"))
        day = int(match.group("day"))
        part = int(match.group("part"))

        if year < FIRST_YEAR or year > LAST_YEAR:
            raise InvalidSpecifier(f"{name}: year {year} outside {FIRST_YEAR}-{LAST_YEAR}")

        last_day = 12 if year >= SHORT_EVENT_YEAR else 25
        if day < 1 or day > last_day:
            raise InvalidSpecifier(f"{name}: day {day} outside 1-{last_day} for {year}")

        if part not in (1, 2):
            raise InvalidSpecifier(f"{name}: part must be 1 or 2, got {part}")

        return year, day, part

    def validate_name(self, name: str) -> None:
        self.parse_name(name)

    def input_path(self, specifier: SolutionSpecifier, input_dir: Path) -> Path:
        year, day, _ = self.parse_name(specifier.name)
        day_dir = Path(input_dir) / self.platform.directory / f"y{year}d{day:02d}"

        if specifier.is_real_input:
            path = day_dir / "input.txt"
        else:
            path = day_dir / f"test{specifier.test_index}.txt"

        logger.debug(f"Input for {specifier}: {path}")
        return path
