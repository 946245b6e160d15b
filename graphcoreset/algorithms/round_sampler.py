"""
Fine-grained round sampling (Thorup, Algorithm D) and its repeated driver.

Each round draws a batch *with replacement* from the candidate pool, wires
the whole sample set to a synthetic root, and prunes every candidate that
is at most as far from the sample as a randomly chosen pivot.
"""

from __future__ import annotations

import logging
from typing import Optional

from graphcoreset.exceptions import InvalidArgumentError
from graphcoreset.graph import Vertex, WeightedGraph, require_connected
from graphcoreset.sampling import (
    SeedLike,
    choose_pivot,
    draw_with_replacement,
    ensure_rng,
    prune_pool,
    thorup_parameters,
)
from graphcoreset.synthetic import SyntheticVertexScope

logger = logging.getLogger(__name__)


def round_sample(
    graph: WeightedGraph,
    samples_per_round: int,
    max_rounds: int,
    seed: SeedLike = None,
) -> list[Vertex]:
    """
    Run Algorithm D on *graph*.

    Parameters
    ----------
    graph : WeightedGraph
        Connected graph.  It is mutated while the call runs and restored
        before it returns.
    samples_per_round : int
        Draws per round (fewer once the pool is smaller than this).
    max_rounds : int
        Upper bound on the number of rounds.
    seed : int | random.Random | None
        Seed, or an existing stream to advance.

    Returns
    -------
    list
        The sample set, of size at most ``samples_per_round * max_rounds``.
        A vertex may appear more than once.
    """
    if samples_per_round < 1:
        raise InvalidArgumentError(f"samples_per_round must be >= 1, got {samples_per_round}")
    if max_rounds < 1:
        raise InvalidArgumentError(f"max_rounds must be >= 1, got {max_rounds}")
    require_connected(graph)
    rng = ensure_rng(seed)

    pool = list(graph.vertices())
    sample: list[Vertex] = []

    with SyntheticVertexScope(graph) as scope:
        for round_idx in range(max_rounds):
            if not pool:
                break
            sample.extend(draw_with_replacement(pool, samples_per_round, rng))
            scope.connect(sample)
            distances, _ = scope.shortest_paths()
            scope.clear()

            radius = distances[choose_pivot(pool, rng)]
            before = len(pool)
            pool = prune_pool(pool, distances, radius)
            logger.debug(
                "Round %d: radius %g, pool %d -> %d, sample size %d",
                round_idx, radius, before, len(pool), len(sample),
            )

    logger.info("Round sampling produced %d samples", len(sample))
    return sample


def thorup_sample(
    graph: WeightedGraph,
    k: int,
    seed: SeedLike = None,
    max_sampled: Optional[int] = None,
) -> list[Vertex]:
    """
    Union of repeated :func:`round_sample` runs, sized for *k* facilities.

    Runs ``ceil(log2(n) ** 1.5)`` rounds of Algorithm D, each seeded from
    one parent stream, and collects the distinct vertices in first-seen
    order.  Stops early once ``max_sampled`` vertices (default: all of
    them) have been collected; the result is truncated to that size.
    """
    n = graph.vertex_count()
    if max_sampled is None or max_sampled == 0:
        max_sampled = n
    if max_sampled < 0:
        raise InvalidArgumentError(f"max_sampled must be >= 0, got {max_sampled}")
    params = thorup_parameters(n, k)
    rng = ensure_rng(seed)
    logger.info(
        "Thorup sampling: max sampled %d, samples per round %d, rounds %d",
        max_sampled, params.samples_per_round, params.rounds,
    )

    collected: dict[Vertex, None] = {}
    for i in range(params.outer_iterations):
        batch = round_sample(
            graph, params.samples_per_round, params.rounds, rng.getrandbits(64),
        )
        collected.update(dict.fromkeys(batch))
        if len(collected) >= max_sampled:
            break
        logger.debug(
            "Samples size after iteration %d/%d: %d",
            i, params.outer_iterations, len(collected),
        )
    return list(collected)[:max_sampled]
