"""Best-of-N hierarchical sampling."""

from __future__ import annotations

import logging
from typing import Optional

from graphcoreset.algorithms.assignment import assign
from graphcoreset.algorithms.hierarchical import hierarchical_sample
from graphcoreset.config import BestOfTrialsConfig, CoresetResult
from graphcoreset.exceptions import InvalidArgumentError
from graphcoreset.graph import WeightedGraph, require_connected
from graphcoreset.sampling import SeedLike, ensure_rng, thorup_parameters

logger = logging.getLogger(__name__)


def sample_best_coreset(
    graph: WeightedGraph,
    k: int,
    seed: SeedLike = None,
    num_trials: int = 1,
    *,
    eps: float = 0.5,
    samples_per_round: Optional[int] = None,
    max_rounds: Optional[int] = None,
) -> CoresetResult:
    """
    Run :func:`hierarchical_sample` *num_trials* times and keep the cheapest.

    All trials draw from one random stream that is never reseeded, so the
    draws of trial ``i`` do not depend on which trial ends up winning.
    The winning sample is then passed once through :func:`assign`.

    Per-round and round counts default to ``ceil(21 k log2(n) / eps)`` and
    ``int(3 log2(n))``.

    Returns
    -------
    CoresetResult
        The winning sample with its costs and assignments;
        ``trial_costs`` lists the cost of every trial in run order.
    """
    if num_trials < 1:
        raise InvalidArgumentError(f"num_trials must be >= 1, got {num_trials}")
    require_connected(graph)
    params = thorup_parameters(graph.vertex_count(), k, eps)
    per_round = params.samples_per_round if samples_per_round is None else samples_per_round
    rounds = max(int(3 * params.logn), 1) if max_rounds is None else max_rounds
    rng = ensure_rng(seed)

    best_sample, best_cost = hierarchical_sample(graph, per_round, rounds, rng)
    trial_costs = [best_cost]
    for _ in range(1, num_trials):
        sample, cost = hierarchical_sample(graph, per_round, rounds, rng)
        trial_costs.append(cost)
        if cost < best_cost:
            logger.info("Replacing old cost of %g with %g", best_cost, cost)
            best_sample, best_cost = sample, cost

    result = assign(graph, best_sample)
    result.trial_costs = trial_costs
    return result


def sample_best_coreset_from_config(
    graph: WeightedGraph, config: BestOfTrialsConfig,
) -> CoresetResult:
    return sample_best_coreset(
        graph,
        config.k,
        config.seed,
        config.num_trials,
        eps=config.eps,
        samples_per_round=config.samples_per_round,
        max_rounds=config.max_rounds,
    )
