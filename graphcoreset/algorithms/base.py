"""Abstract base class for benchmarked coreset algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod

from graphcoreset.config import CoresetResult
from graphcoreset.graph import WeightedGraph


class CoresetAlgorithm(ABC):
    """
    Base class that every algorithm run by the experiment runner implements.

    Subclass this, set ``name``, and implement :meth:`solve`.

    Example
    -------
    >>> class EveryVertex(CoresetAlgorithm):
    ...     name = "every_vertex"
    ...     def solve(self, graph, seed=0):
    ...         return assign(graph, list(graph.vertices()))
    """

    name: str = "unnamed"

    @abstractmethod
    def solve(self, graph: WeightedGraph, seed: int = 0) -> CoresetResult:
        """
        Build a coreset of *graph*.

        Parameters
        ----------
        graph : WeightedGraph
            A connected weighted graph.  It must be left unchanged on return.
        seed : int
            Seed for the run's random stream.

        Returns
        -------
        CoresetResult
            The sample with its per-vertex costs and assignments.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
