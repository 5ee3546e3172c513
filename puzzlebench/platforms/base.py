"""
Base platform interface for puzzle platforms.
Each platform implements the PlatformHandler interface.
"""

import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Sequence

from ..config import MAX_TEST_INDEX
from ..errors import EntryPointSignatureMismatch, InvalidSpecifier


class Platform(Enum):
    """Puzzle platforms the harness can run solutions for."""
    ADVENT_OF_CODE = "aoc"

    @property
    def directory(self) -> str:
        """Directory name used for this platform's inputs."""
        return _PLATFORM_DIRECTORIES[self]

    @classmethod
    def from_tag(cls, tag: str) -> "Platform":
        """
        Look up a platform by its short tag or directory name.

        Raises:
            InvalidSpecifier: If no platform matches
        """
        wanted = tag.strip().lower()
        for platform in cls:
            if wanted in (platform.value, platform.directory.lower()):
                return platform
        available = ", ".join(p.value for p in cls)
        raise InvalidSpecifier(f"Unsupported platform: {tag}. Available: {available}")


_PLATFORM_DIRECTORIES = {
    Platform.ADVENT_OF_CODE: "AdventOfCode",
}


@dataclass(frozen=True)
class SolutionSpecifier:
    """
    Identity of one runnable solution and its input.

    Attributes:
        platform: Platform the solution belongs to
        name: Solution identifier (e.g. "y2015d01p1")
        test_index: 0 for the real input, 1-9 for a numbered example
    """
    platform: Platform
    name: str
    test_index: int = 0

    def __post_init__(self):
        if not isinstance(self.test_index, int) or isinstance(self.test_index, bool):
            raise InvalidSpecifier(f"Test index must be an integer, got {self.test_index!r}")
        if not 0 <= self.test_index <= MAX_TEST_INDEX:
            raise InvalidSpecifier(
                f"Test index {self.test_index} is outside [0, {MAX_TEST_INDEX}]"
            )
        if not self.name:
            raise InvalidSpecifier("Solution name must not be empty")

    @property
    def is_real_input(self) -> bool:
        return self.test_index == 0

    def __str__(self) -> str:
        suffix = "real" if self.is_real_input else f"test{self.test_index}"
        return f"{self.platform.value}:{self.name}[{suffix}]"


class Invocable(ABC):
    """A unit of work the harness can time."""

    @abstractmethod
    def run(self, input: Sequence[str], verbose: bool) -> None:
        """
        Execute the solution once.

        Args:
            input: Input lines
            verbose: Print the solution's own output when True
        """
        pass


class FunctionInvocable(Invocable):
    """
    Adapts a plain ``func(input, verbose)`` solution to Invocable.

    Raises:
        EntryPointSignatureMismatch: If the function cannot take (input, verbose)
    """

    def __init__(self, func: Callable[..., Any], name: str = ""):
        self.name = name or getattr(func, "__name__", repr(func))
        if not callable(func):
            raise EntryPointSignatureMismatch(f"{self.name} is not callable")
        try:
            inspect.signature(func).bind([], False)
        except (TypeError, ValueError) as e:
            raise EntryPointSignatureMismatch(
                f"{self.name} does not accept (input, verbose): {e}"
            ) from e
        self._func = func

    def run(self, input: Sequence[str], verbose: bool) -> None:
        self._func(input, verbose)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name={self.name})>"


class PlatformHandler(ABC):
    """
    Abstract base class for puzzle platforms.

    A handler knows how a platform names its solutions and where their inputs
    live. Adding a platform means adding a subclass, not touching the harness.

    Example:
        class MyPlatformHandler(PlatformHandler):
            platform = Platform.MY_PLATFORM

            def validate_name(self, name):
                ...

            def input_path(self, specifier, input_dir):
                ...
    """

    platform: Platform
    display_name: str = "Base Platform"

    @abstractmethod
    def validate_name(self, name: str) -> None:
        """
        Check that a solution identifier can exist on this platform.

        Raises:
            InvalidSpecifier: If the identifier is malformed or out of range
        """
        pass

    @abstractmethod
    def input_path(self, specifier: SolutionSpecifier, input_dir: Path) -> Path:
        """
        Locate the input file for a specifier.

        Args:
            specifier: Solution and test index
            input_dir: Root input directory

        Returns:
            Path of the input file (it may not exist)
        """
        pass

    def validate(self, specifier: SolutionSpecifier) -> None:
        """Validate a full specifier against this platform."""
        if specifier.platform is not self.platform:
            raise InvalidSpecifier(
                f"{self.display_name} cannot handle {specifier.platform.value} solutions"
            )
        self.validate_name(specifier.name)

    def wrap(self, target: Any, name: str) -> Invocable:
        """
        Turn a registered target into an Invocable.

        Raises:
            EntryPointSignatureMismatch: If the target does not fit the contract
        """
        if isinstance(target, Invocable):
            return target
        if isinstance(target, type) and issubclass(target, Invocable):
            try:
                return target()
            except TypeError as e:
                raise EntryPointSignatureMismatch(
                    f"{name} cannot be instantiated without arguments: {e}"
                ) from e
        return FunctionInvocable(target, name=name)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(platform={self.platform.value})>"
