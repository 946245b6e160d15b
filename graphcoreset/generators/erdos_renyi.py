"""Erdős-Rényi G(n, p) random graph generator, made connected."""

from __future__ import annotations

from typing import Any

import networkx as nx

from graphcoreset.generators.base import BaseGenerator
from graphcoreset.graph import WeightedGraph


class ErdosRenyiGenerator(BaseGenerator):
    """
    Generates random graphs using the Erdős-Rényi G(n, p) model.

    Each pair of vertices is connected independently with probability *p*;
    the resulting components are then chained together so the graph is
    always connected.

    Parameters
    ----------
    p : float, default 0.1
        Edge probability.
    weighted : bool, default True
        If True, assign uniform-random weights in (0, 1] to edges.
    seed : int | None
        Random seed for reproducibility.
    """

    name = "erdos_renyi"

    def generate(self, size: int, **params: Any) -> WeightedGraph:
        p = params.get("p", 0.1)
        weighted = params.get("weighted", True)
        seed = params.get("seed", None)

        G = nx.erdos_renyi_graph(size, p, seed=seed)
        if weighted:
            self._random_weights(G, seed)
        self._connect_components(G, seed)

        return self._wrap(G, size, {"p": p, "weighted": weighted})
