"""Exception hierarchy for coreset construction."""

from __future__ import annotations


class CoresetError(Exception):
    """Base class for every error raised by :mod:`graphcoreset`."""


class InvalidInputError(CoresetError, ValueError):
    """The input graph violates a precondition (empty or disconnected)."""


class InvalidArgumentError(CoresetError, ValueError):
    """A parameter is out of range for the requested operation."""


class AssignmentError(CoresetError, RuntimeError):
    """A vertex could not be resolved to the sample member serving it."""


class NumericInvariantError(CoresetError, ArithmeticError):
    """A distance or cost is negative or non-finite."""


class RefinementNotImplementedError(CoresetError, NotImplementedError):
    """The 1-median refinement path has no implementation."""
