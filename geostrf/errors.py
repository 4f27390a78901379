"""Exceptions raised by geostrf"""


class DimensionMismatchError(ValueError):
    """The shapes of `SA`, `CT` and `p` cannot be reconciled."""


class InsufficientLevelsError(ValueError):
    """A profile has fewer than two pressure levels."""


class DegenerateBracketError(AssertionError):
    """Interpolation was requested outside the pair of bracketing bottles.

    This is raised from inside the compiled interpolation kernels and signals
    a broken internal invariant rather than bad user input.
    """


__all__ = [
    "DimensionMismatchError",
    "InsufficientLevelsError",
    "DegenerateBracketError",
]
