"""
Puzzle platforms package.
Each platform implements the PlatformHandler interface.
"""

from .base import (
    Platform,
    PlatformHandler,
    SolutionSpecifier,
    Invocable,
    FunctionInvocable,
)
from .advent_of_code import AdventOfCodeHandler
from ..errors import InvalidSpecifier

# Registry of available platform handlers
PLATFORM_HANDLERS = {
    Platform.ADVENT_OF_CODE: AdventOfCodeHandler,
}


def get_platform_handler(platform: Platform) -> PlatformHandler:
    """
    Get a handler instance for a platform.

    Args:
        platform: Platform member

    Returns:
        PlatformHandler instance

    Raises:
        InvalidSpecifier: If no handler supports the platform
    """
    handler_class = PLATFORM_HANDLERS.get(platform)
    if not handler_class:
        available = ", ".join(p.value for p in PLATFORM_HANDLERS)
        raise InvalidSpecifier(f"Unsupported platform: {platform}. Available: {available}")

    return handler_class()


def list_platforms() -> list:
    """List all supported platform tags."""
    return [p.value for p in PLATFORM_HANDLERS]


from .registry import (  # noqa: E402
    SOLUTIONS,
    SolutionRegistry,
    EntryPointResolver,
    register_solution,
)

__all__ = [
    "Platform",
    "PlatformHandler",
    "SolutionSpecifier",
    "Invocable",
    "FunctionInvocable",
    "AdventOfCodeHandler",
    "PLATFORM_HANDLERS",
    "get_platform_handler",
    "list_platforms",
    "SOLUTIONS",
    "SolutionRegistry",
    "EntryPointResolver",
    "register_solution",
]
