"""Exceptions raised while minimizing a Boolean function."""

from typing import Optional


class MinimizationError(RuntimeError):
    """Base class for every failure of a minimization call."""


class MalformedInputError(MinimizationError):
    """Assignments or position subsets violate the input contract."""


class EmptyCoverError(MinimizationError):
    """No cover can be built for the one-assignments."""

    def __init__(self, message: str, assignment: Optional[str] = None):
        super().__init__(message)
        self.assignment = assignment


class SourceUnavailableError(MinimizationError):
    """An index file could not be read."""
