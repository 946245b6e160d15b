"""Abstract base class for all instance generators."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any

import networkx as nx

from graphcoreset.graph import WeightedGraph


class BaseGenerator(ABC):
    """
    Base class for connected weighted graph generators.

    Every generator returns a :class:`WeightedGraph` whose ``metadata``
    carries::

        {
            "generator": "grid_2d",
            "size": 100,
            "params": {"weighted": True},
        }
    """

    name: str = "base"

    @abstractmethod
    def generate(self, size: int, **params: Any) -> WeightedGraph:
        """
        Generate a connected graph instance.

        Parameters
        ----------
        size : int
            Number of vertices in the generated graph.
        **params
            Generator-specific parameters.
        """

    # ------------------------------------------------------------------
    # Helpers shared by all generators
    # ------------------------------------------------------------------

    @staticmethod
    def _random_weights(G: nx.Graph, seed: Any) -> None:
        """Assign uniform-random weights in (0, 1] to every edge."""
        rng = random.Random(seed)
        for u, v in G.edges():
            G[u][v]["weight"] = round(1.0 - rng.random(), 4)

    @staticmethod
    def _connect_components(G: nx.Graph, seed: Any) -> None:
        """Chain the connected components together with unit-weight edges."""
        components = [sorted(c) for c in nx.connected_components(G)]
        if len(components) < 2:
            return
        rng = random.Random(seed)
        for left, right in zip(components, components[1:]):
            G.add_edge(rng.choice(left), rng.choice(right), weight=1.0)

    def _wrap(self, G: nx.Graph, size: int, params: dict[str, Any]) -> WeightedGraph:
        """Wrap *G*, recording the generator metadata on the graph."""
        G.graph.update({
            "generator": self.name,
            "size": size,
            "params": params,
        })
        return WeightedGraph.from_networkx(G)
