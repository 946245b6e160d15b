"""
Coarse-grained hierarchical sampling (Thorup, Algorithm E building block).

Unlike :func:`~graphcoreset.algorithms.round_sampler.round_sample`, sampled
vertices leave the pool (no replacement) and the synthetic root's edges
are never reset, so every round extends one shortest-path forest and the
final cost can be read straight from the last distance vector.
"""

from __future__ import annotations

import logging

from graphcoreset.exceptions import InvalidArgumentError
from graphcoreset.graph import Vertex, WeightedGraph, require_connected
from graphcoreset.sampling import (
    SeedLike,
    choose_pivot,
    ensure_rng,
    pop_without_replacement,
    prune_pool,
    sum_costs,
)
from graphcoreset.synthetic import SyntheticVertexScope

logger = logging.getLogger(__name__)


def hierarchical_sample(
    graph: WeightedGraph,
    per_round: int,
    max_rounds: int,
    seed: SeedLike = None,
) -> tuple[list[Vertex], float]:
    """
    Sample a coreset and report its assignment cost.

    Parameters
    ----------
    graph : WeightedGraph
        Connected graph; mutated during the call and restored afterwards.
    per_round : int
        Distinct vertices moved from the pool into the sample each round.
        When the pool holds no more than this, all of it is taken and
        sampling stops.
    max_rounds : int
        Upper bound on the number of rounds.
    seed : int | random.Random | None
        Seed, or an existing stream to advance.

    Returns
    -------
    (sample, cost)
        ``sample`` holds distinct vertices in the order they were drawn;
        ``cost`` is the sum over all vertices of the distance to the
        nearest sample member.
    """
    if per_round < 1:
        raise InvalidArgumentError(f"per_round must be >= 1, got {per_round}")
    if max_rounds < 1:
        raise InvalidArgumentError(f"max_rounds must be >= 1, got {max_rounds}")
    require_connected(graph)
    rng = ensure_rng(seed)

    pool = list(graph.vertices())
    sample: list[Vertex] = []
    distances: dict[Vertex, float] = {}

    with SyntheticVertexScope(graph) as scope:
        for round_idx in range(max_rounds):
            if len(pool) > per_round:
                batch = pop_without_replacement(pool, per_round, rng)
            else:
                batch, pool = pool, []
            sample.extend(batch)
            scope.connect(batch)
            distances, _ = scope.shortest_paths()
            if not pool:
                break

            radius = distances[choose_pivot(pool, rng)]
            before = len(pool)
            pool = prune_pool(pool, distances, radius)
            logger.debug(
                "Round %d: radius %g, pool %d -> %d, sample size %d",
                round_idx, radius, before, len(pool), len(sample),
            )
            if not pool:
                break

    cost = sum_costs(distances)
    logger.info("Sampled set of size %d has cost %f", len(sample), cost)
    return sample, cost
