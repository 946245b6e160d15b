"""
Iteratively-decreasing-noncentrality refinement (Todo, Nakamura and Kudo).

The 1-median step this loop depends on has no implementation, so both
entry points validate their arguments and then raise
:class:`RefinementNotImplementedError` without touching the graph.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from graphcoreset.exceptions import InvalidArgumentError, RefinementNotImplementedError
from graphcoreset.graph import Vertex, WeightedGraph
from graphcoreset.sampling import SeedLike, ensure_rng, random_sample

logger = logging.getLogger(__name__)


def parallel_one_median(
    graph: WeightedGraph,
    parents: dict[Vertex, Vertex],
    centers: Sequence[Vertex],
) -> list[Vertex]:
    """Best 1-median of each center's shortest-path subtree (not implemented)."""
    raise RefinementNotImplementedError(
        "Per-subtree 1-median refinement is not implemented"
    )


def iteratively_decreasing_noncentrality(
    graph: WeightedGraph, k: int, seed: SeedLike = 0,
) -> list[Vertex]:
    """
    Local-search k-median by repeated 1-median refinement (not implemented).

    The initial centers are drawn, so a *k* that is not a strict subset
    size is reported before the refinement step is reached.
    """
    if k < 1:
        raise InvalidArgumentError(f"k must be >= 1, got {k}")
    centers = random_sample(list(graph.vertices()), k, ensure_rng(seed))
    logger.debug("Initial centers: %s", centers)
    raise RefinementNotImplementedError(
        "Iteratively decreasing noncentrality depends on the unimplemented "
        "1-median refinement"
    )
