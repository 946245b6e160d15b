"""Random planar road-network-like graph generator."""

from __future__ import annotations

from typing import Any

import networkx as nx
import numpy as np
from scipy.spatial import Delaunay

from graphcoreset.generators.base import BaseGenerator
from graphcoreset.graph import WeightedGraph


class PlanarRandomGenerator(BaseGenerator):
    """
    Generates random planar graphs via Delaunay triangulation of
    random 2-D points, weighted by Euclidean distance.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    """

    name = "planar_random"

    def generate(self, size: int, **params: Any) -> WeightedGraph:
        seed = params.get("seed", None)

        rng = np.random.default_rng(seed)
        points = rng.random((size, 2))

        G = nx.Graph()
        G.add_nodes_from(range(size))
        if size >= 3:
            tri = Delaunay(points)
            for simplex in tri.simplices:
                for i in range(3):
                    for j in range(i + 1, 3):
                        u, v = int(simplex[i]), int(simplex[j])
                        if not G.has_edge(u, v):
                            dist = float(np.linalg.norm(points[u] - points[v]))
                            G.add_edge(u, v, weight=round(dist, 4))
        elif size == 2:
            G.add_edge(0, 1, weight=round(float(np.linalg.norm(points[0] - points[1])), 4))

        # qhull may leave degenerate points out of the triangulation
        self._connect_components(G, seed)

        return self._wrap(G, size, {"seed": seed})
