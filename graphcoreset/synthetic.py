"""Temporary synthetic vertex used to turn multi-source queries into single-source ones."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from graphcoreset.exceptions import InvalidInputError
from graphcoreset.graph import Vertex, WeightedGraph

logger = logging.getLogger(__name__)


class SyntheticVertexScope:
    """
    Context manager that owns one temporary vertex of *graph*.

    On entry a fresh vertex is added; on exit, normal or exceptional, its
    edges are cleared and the vertex is removed, leaving the graph with the
    vertex and edge counts it had before entry.

    Usage
    -----
    >>> with SyntheticVertexScope(graph) as scope:
    ...     scope.connect(sources)
    ...     distances, parents = scope.shortest_paths()
    """

    def __init__(self, graph: WeightedGraph) -> None:
        self.graph = graph
        self._vertex: Optional[Vertex] = None

    def __enter__(self) -> "SyntheticVertexScope":
        if self._vertex is not None:
            raise RuntimeError("SyntheticVertexScope is not re-entrant")
        self._vertex = self.graph.add_vertex()
        logger.debug("Added synthetic vertex %r", self._vertex)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        vertex, self._vertex = self._vertex, None
        try:
            self.graph.clear_edges(vertex)
        finally:
            self.graph.remove_vertex(vertex)
        logger.debug("Removed synthetic vertex %r", vertex)

    @property
    def vertex(self) -> Vertex:
        if self._vertex is None:
            raise RuntimeError("SyntheticVertexScope is not active")
        return self._vertex

    def connect(self, vertices: Iterable[Vertex]) -> None:
        """Add a zero-weight edge from the synthetic vertex to each of *vertices*."""
        root = self.vertex
        for v in vertices:
            self.graph.add_edge(root, v, 0.0)

    def clear(self) -> None:
        """Drop the synthetic vertex's edges but keep the vertex."""
        self.graph.clear_edges(self.vertex)

    def shortest_paths(self) -> tuple[dict[Vertex, float], dict[Vertex, Vertex]]:
        """
        Shortest paths from the synthetic vertex to every real vertex.

        The returned vectors never contain the synthetic vertex as a key;
        a predecessor equal to :attr:`vertex` marks a source.
        """
        root = self.vertex
        distances, parents = self.graph.single_source_shortest_paths(root)
        distances.pop(root, None)
        parents.pop(root, None)
        expected = self.graph.vertex_count() - 1
        if len(distances) != expected:
            raise InvalidInputError(
                f"{expected - len(distances)} vertices are unreachable from the "
                "sample set; the graph must be connected"
            )
        return distances, parents
