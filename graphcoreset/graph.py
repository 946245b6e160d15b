"""
Weighted-graph capability consumed by the coreset samplers.

The samplers only need a handful of mutation primitives plus a
single-source shortest-path routine.  :class:`GraphCapability` names that
surface; :class:`WeightedGraph` implements it on top of ``networkx``.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterator
from typing import Any, Optional, Protocol

import networkx as nx

from graphcoreset.exceptions import InvalidArgumentError, InvalidInputError

Vertex = Hashable


class GraphCapability(Protocol):
    """The operations every sampler relies on."""

    def add_vertex(self) -> Vertex: ...

    def remove_vertex(self, vertex: Vertex) -> None: ...

    def clear_edges(self, vertex: Vertex) -> None: ...

    def add_edge(self, u: Vertex, v: Vertex, weight: float) -> None: ...

    def vertex_count(self) -> int: ...

    def edge_count(self) -> int: ...

    def vertices(self) -> Iterator[Vertex]: ...

    def single_source_shortest_paths(
        self, source: Vertex,
    ) -> tuple[dict[Vertex, float], dict[Vertex, Optional[Vertex]]]: ...


class WeightedGraph:
    """
    Mutable edge-weighted graph backed by ``networkx``.

    Parameters
    ----------
    graph : networkx.Graph | networkx.DiGraph | None
        Graph to wrap.  It is used in place, not copied.  An empty
        undirected graph is created when omitted.
    weight : str, default "weight"
        Edge attribute holding the (non-negative) edge length.
    """

    def __init__(self, graph: nx.Graph | None = None, weight: str = "weight") -> None:
        self.nx = graph if graph is not None else nx.Graph()
        self.weight = weight
        self._next_handle = self.nx.number_of_nodes()

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_networkx(cls, graph: nx.Graph, weight: str = "weight") -> "WeightedGraph":
        """Wrap *graph*, filling in a unit weight on edges that lack one."""
        for _, _, data in graph.edges(data=True):
            data.setdefault(weight, 1.0)
        return cls(graph, weight=weight)

    @classmethod
    def from_instance(cls, instance: dict[str, Any]) -> "WeightedGraph":
        """
        Build a graph from a plain instance dict::

            {
                "nodes": [0, 1, 2],
                "edges": [{"source": 0, "target": 1, "weight": 2.5}, ...],
                "directed": false,
                "metadata": {...}
            }

        ``weight`` defaults to 1.0 and ``directed`` to False.
        """
        G = nx.DiGraph() if instance.get("directed", False) else nx.Graph()
        G.graph.update(instance.get("metadata", {}))
        G.add_nodes_from(instance["nodes"])
        graph = cls(G)
        for edge in instance["edges"]:
            graph.add_edge(edge["source"], edge["target"], edge.get("weight", 1.0))
        return graph

    def to_instance(self) -> dict[str, Any]:
        """Inverse of :meth:`from_instance`."""
        return {
            "nodes": list(self.nx.nodes()),
            "edges": [
                {"source": u, "target": v, "weight": data[self.weight]}
                for u, v, data in self.nx.edges(data=True)
            ],
            "directed": self.directed,
            "metadata": dict(self.nx.graph),
        }

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def directed(self) -> bool:
        return self.nx.is_directed()

    @property
    def metadata(self) -> dict[str, Any]:
        """Graph-level attributes (generator name, size, params, ...)."""
        return self.nx.graph

    # ------------------------------------------------------------------
    # GraphCapability
    # ------------------------------------------------------------------

    def add_vertex(self) -> int:
        """Add an isolated vertex under a fresh integer handle and return it."""
        while self._next_handle in self.nx:
            self._next_handle += 1
        handle = self._next_handle
        self.nx.add_node(handle)
        self._next_handle += 1
        return handle

    def remove_vertex(self, vertex: Vertex) -> None:
        self.nx.remove_node(vertex)

    def clear_edges(self, vertex: Vertex) -> None:
        """Remove every edge incident to *vertex*, keeping the vertex."""
        if self.directed:
            incident = list(self.nx.in_edges(vertex)) + list(self.nx.out_edges(vertex))
        else:
            incident = list(self.nx.edges(vertex))
        self.nx.remove_edges_from(incident)

    def add_edge(self, u: Vertex, v: Vertex, weight: float) -> None:
        weight = float(weight)
        if not math.isfinite(weight) or weight < 0:
            raise InvalidArgumentError(
                f"Edge ({u!r}, {v!r}) has weight {weight}; weights must be finite and >= 0"
            )
        self.nx.add_edge(u, v, **{self.weight: weight})

    def vertex_count(self) -> int:
        return self.nx.number_of_nodes()

    def edge_count(self) -> int:
        return self.nx.number_of_edges()

    def vertices(self) -> Iterator[Vertex]:
        return iter(self.nx.nodes())

    def single_source_shortest_paths(
        self, source: Vertex,
    ) -> tuple[dict[Vertex, float], dict[Vertex, Optional[Vertex]]]:
        """
        Dijkstra from *source*.

        Returns
        -------
        (distances, predecessors)
            ``distances`` maps every reachable vertex to its distance.
            ``predecessors`` maps every reachable vertex to its parent in
            the shortest-path tree (``None`` for *source*).
        """
        pred, dist = nx.dijkstra_predecessor_and_distance(
            self.nx, source, weight=self.weight,
        )
        # networkx keeps every tied predecessor; the first one recorded
        # was settled before the vertex itself, so it is a valid tree parent.
        parents = {v: (p[0] if p else None) for v, p in pred.items()}
        return dict(dist), parents

    def __len__(self) -> int:
        return self.vertex_count()

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.nx

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return (
            f"<{self.__class__.__name__} {kind} "
            f"vertices={self.vertex_count()} edges={self.edge_count()}>"
        )


def require_connected(graph: WeightedGraph) -> None:
    """
    Raise :class:`InvalidInputError` unless *graph* is non-empty and connected.

    Directed graphs must be strongly connected so that every vertex is
    reachable from any source set.
    """
    if graph.vertex_count() == 0:
        raise InvalidInputError("Graph has no vertices")
    if graph.directed:
        connected = nx.is_strongly_connected(graph.nx)
    else:
        connected = nx.is_connected(graph.nx)
    if not connected:
        raise InvalidInputError(
            "Graph must be connected; sample on each connected component separately"
        )
