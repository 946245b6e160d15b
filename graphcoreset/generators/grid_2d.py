"""2-D grid / lattice graph generator."""

from __future__ import annotations

import math
from typing import Any

import networkx as nx

from graphcoreset.generators.base import BaseGenerator
from graphcoreset.graph import WeightedGraph


class Grid2DGenerator(BaseGenerator):
    """
    Generates 2-D grid (lattice) graphs.

    A stand-in for regular street grids.  The ``size`` parameter is the
    *total* number of vertices; the grid is ``rows x cols`` with
    ``rows * cols == size``, as close to square as possible.

    Parameters
    ----------
    weighted : bool, default True
        If True, edge weights are uniform-random in (0, 1]; otherwise 1.
    seed : int | None
        Random seed for reproducibility (only affects weights).
    """

    name = "grid_2d"

    def generate(self, size: int, **params: Any) -> WeightedGraph:
        weighted = params.get("weighted", True)
        seed = params.get("seed", None)

        rows = int(math.isqrt(size))
        while rows > 0 and size % rows != 0:
            rows -= 1
        if rows == 0:
            rows = 1
        cols = size // rows

        G = nx.grid_2d_graph(rows, cols)
        G = nx.convert_node_labels_to_integers(G, ordering="sorted")

        if weighted:
            self._random_weights(G, seed)

        return self._wrap(G, size, {"rows": rows, "cols": cols, "weighted": weighted})
