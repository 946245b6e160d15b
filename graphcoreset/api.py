"""Entry points for callers of the core."""

from __future__ import annotations

from graphcoreset.algorithms.assignment import assign
from graphcoreset.algorithms.best_of import sample_best_coreset
from graphcoreset.algorithms.hierarchical import hierarchical_sample
from graphcoreset.algorithms.round_sampler import round_sample
from graphcoreset.config import SamplerConfig, SamplerVariant
from graphcoreset.graph import Vertex, WeightedGraph
from graphcoreset.sampling import SeedLike


def sample_coreset(
    graph: WeightedGraph,
    round_cap: int,
    max_rounds: int,
    seed: SeedLike = None,
    variant: SamplerVariant | str = SamplerVariant.HIERARCHICAL,
) -> list[Vertex]:
    """
    Sample a coreset with a single sampler run.

    ``variant="hierarchical"`` draws without replacement and grows one
    shortest-path forest; ``variant="round"`` draws with replacement and
    rewires the synthetic root every round, so its sample may repeat
    vertices.
    """
    variant = SamplerVariant(variant)
    if variant is SamplerVariant.ROUND:
        return round_sample(graph, round_cap, max_rounds, seed)
    sample, _ = hierarchical_sample(graph, round_cap, max_rounds, seed)
    return sample


def sample_coreset_from_config(graph: WeightedGraph, config: SamplerConfig) -> list[Vertex]:
    return sample_coreset(
        graph, config.round_cap, config.max_rounds, config.seed, config.variant,
    )


__all__ = [
    "assign",
    "sample_best_coreset",
    "sample_coreset",
    "sample_coreset_from_config",
]
