"""
Solution registry and entry point resolution.

Solution modules register themselves when imported:

    @register_solution(Platform.ADVENT_OF_CODE, "y2015d01p1")
    def solve(input, verbose):
        ...

The resolver turns a SolutionSpecifier into an Invocable without knowing
how any platform structures its solutions.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from .base import Invocable, Platform, PlatformHandler, SolutionSpecifier
from ..errors import DuplicateSolution, EntryPointNotFound

logger = logging.getLogger(__name__)

SolutionKey = Tuple[Platform, str]


class SolutionRegistry:
    """Mapping from (platform, name) to a solution target."""

    def __init__(self):
        self._solutions: Dict[SolutionKey, Any] = {}

    def register(self, platform: Platform, name: str, target: Any) -> None:
        """
        Register a solution target.

        Raises:
            DuplicateSolution: If the key is already taken by another target
        """
        key = (platform, name)
        existing = self._solutions.get(key)
        if existing is not None and existing is not target:
            raise DuplicateSolution(f"{platform.value}:{name} is already registered")
        self._solutions[key] = target
        logger.debug(f"Registered solution {platform.value}:{name}")

    def get(self, platform: Platform, name: str) -> Optional[Any]:
        return self._solutions.get((platform, name))

    def names(self, platform: Optional[Platform] = None) -> List[SolutionKey]:
        """Registered keys, sorted, optionally for one platform."""
        keys = [k for k in self._solutions if platform is None or k[0] is platform]
        return sorted(keys, key=lambda k: (k[0].value, k[1]))

    def __contains__(self, key: SolutionKey) -> bool:
        return key in self._solutions

    def __len__(self) -> int:
        return len(self._solutions)


# Process-wide registry filled by solution modules at import time
SOLUTIONS = SolutionRegistry()


def register_solution(platform: Platform, name: str, registry: Optional[SolutionRegistry] = None):
    """Decorator registering a solution function or Invocable class."""
    def decorator(target):
        (registry if registry is not None else SOLUTIONS).register(platform, name, target)
        return target
    return decorator


def _load_bundled_solutions() -> None:
    from ..solutions import load_solutions
    load_solutions()


class EntryPointResolver:
    """
    Resolves specifiers to invocable solutions.

    Example:
        resolver = EntryPointResolver()
        invocable = resolver.resolve(
            SolutionSpecifier(Platform.ADVENT_OF_CODE, "y2015d01p1", 1)
        )
        invocable.run(lines, verbose=True)
    """

    def __init__(
        self,
        registry: Optional[SolutionRegistry] = None,
        handlers: Optional[Dict[Platform, PlatformHandler]] = None,
        loader: Optional[Callable[[], None]] = _load_bundled_solutions,
    ):
        """
        Initialize resolver.

        Args:
            registry: Registry to look solutions up in (default: SOLUTIONS)
            handlers: Platform handlers (default: one per registered platform)
            loader: Called once before the first lookup to import solution modules
        """
        from . import get_platform_handler, PLATFORM_HANDLERS

        self.registry = registry if registry is not None else SOLUTIONS
        if handlers is None:
            handlers = {p: get_platform_handler(p) for p in PLATFORM_HANDLERS}
        self.handlers = handlers
        self._loader = loader
        self._loaded = loader is None

    def handler_for(self, specifier: SolutionSpecifier) -> PlatformHandler:
        """
        Return the validated platform handler for a specifier.

        Raises:
            InvalidSpecifier: If the platform is unsupported or the name is invalid
        """
        from . import get_platform_handler

        handler = self.handlers.get(specifier.platform) or get_platform_handler(specifier.platform)
        handler.validate(specifier)
        return handler

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self._loader()
            self._loaded = True
            logger.info(f"Loaded {len(self.registry)} solutions")

    def resolve(self, specifier: SolutionSpecifier) -> Invocable:
        """
        Resolve a specifier to an Invocable.

        Raises:
            InvalidSpecifier: If the specifier cannot exist
            EntryPointNotFound: If nothing is registered under the name
            EntryPointSignatureMismatch: If the registered target cannot be run
        """
        handler = self.handler_for(specifier)
        self._ensure_loaded()

        target = self.registry.get(specifier.platform, specifier.name)
        if target is None:
            raise EntryPointNotFound(
                f"No {handler.display_name} solution named {specifier.name!r}"
            )

        invocable = handler.wrap(target, specifier.name)
        logger.debug(f"Resolved {specifier} -> {invocable!r}")
        return invocable

    def list_solutions(self, platform: Optional[Platform] = None) -> List[SolutionKey]:
        """List registered solutions, importing bundled ones first."""
        self._ensure_loaded()
        return self.registry.names(platform)
