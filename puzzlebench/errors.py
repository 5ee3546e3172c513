"""
Exception hierarchy for the solution harness.

Every failure the harness reports derives from HarnessError so the CLI can
print one readable message. Wrapping errors keep the original exception as
``__cause__``.
"""


class HarnessError(Exception):
    """Base exception for harness errors."""
    pass


class InvalidSpecifier(HarnessError):
    """Raised when a platform/name/test combination cannot exist."""
    pass


class InputNotFound(HarnessError):
    """Raised when the input for a specifier cannot be read."""
    pass


class EntryPointNotFound(HarnessError):
    """Raised when no solution is registered for a platform and name."""
    pass


class EntryPointSignatureMismatch(HarnessError):
    """Raised when a registered solution cannot be called as run(input, verbose)."""
    pass


class DuplicateSolution(HarnessError):
    """Raised when two solutions register under the same platform and name."""
    pass


class InvocationFailure(HarnessError):
    """Raised when the solution itself fails while being timed."""

    def __init__(self, message: str, iteration: int = 0):
        super().__init__(message)
        self.iteration = iteration


class InvalidIterationCount(HarnessError, ValueError):
    """Raised when a benchmark asks for too few iterations."""
    pass


class EmptySample(HarnessError, ValueError):
    """Raised when statistics are requested over zero measurements."""
    pass


class PersistenceError(HarnessError):
    """Raised when benchmark results cannot be written."""
    pass
