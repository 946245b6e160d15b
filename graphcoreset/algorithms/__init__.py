"""Coreset sampling algorithms."""

from graphcoreset.algorithms.assignment import assign
from graphcoreset.algorithms.base import CoresetAlgorithm
from graphcoreset.algorithms.best_of import (
    sample_best_coreset,
    sample_best_coreset_from_config,
)
from graphcoreset.algorithms.hierarchical import hierarchical_sample
from graphcoreset.algorithms.refinement import (
    iteratively_decreasing_noncentrality,
    parallel_one_median,
)
from graphcoreset.algorithms.round_sampler import round_sample, thorup_sample
from graphcoreset.algorithms.wrappers import BestOfTrialsAlgorithm, ThorupSampleAlgorithm

__all__ = [
    "CoresetAlgorithm",
    "BestOfTrialsAlgorithm",
    "ThorupSampleAlgorithm",
    "assign",
    "hierarchical_sample",
    "iteratively_decreasing_noncentrality",
    "parallel_one_median",
    "round_sample",
    "sample_best_coreset",
    "sample_best_coreset_from_config",
    "thorup_sample",
]
