"""Ready-made :class:`CoresetAlgorithm` implementations."""

from __future__ import annotations

from typing import Optional

from graphcoreset.algorithms.assignment import assign
from graphcoreset.algorithms.base import CoresetAlgorithm
from graphcoreset.algorithms.best_of import sample_best_coreset
from graphcoreset.algorithms.round_sampler import thorup_sample
from graphcoreset.config import CoresetResult
from graphcoreset.graph import WeightedGraph


class BestOfTrialsAlgorithm(CoresetAlgorithm):
    """Cheapest of ``num_trials`` hierarchical samples."""

    name = "best_of_trials"

    def __init__(
        self,
        k: int,
        num_trials: int = 5,
        samples_per_round: Optional[int] = None,
        max_rounds: Optional[int] = None,
    ) -> None:
        self.k = k
        self.num_trials = num_trials
        self.samples_per_round = samples_per_round
        self.max_rounds = max_rounds

    def solve(self, graph: WeightedGraph, seed: int = 0) -> CoresetResult:
        return sample_best_coreset(
            graph,
            self.k,
            seed,
            self.num_trials,
            samples_per_round=self.samples_per_round,
            max_rounds=self.max_rounds,
        )


class ThorupSampleAlgorithm(CoresetAlgorithm):
    """Union of repeated round samples, capped at ``max_sampled`` vertices."""

    name = "thorup_sample"

    def __init__(self, k: int, max_sampled: Optional[int] = None) -> None:
        self.k = k
        self.max_sampled = max_sampled

    def solve(self, graph: WeightedGraph, seed: int = 0) -> CoresetResult:
        sample = thorup_sample(graph, self.k, seed, self.max_sampled)
        return assign(graph, sample)
