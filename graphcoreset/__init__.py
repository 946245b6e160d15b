"""Thorup-style coreset sampling for k-median on large weighted graphs."""

from graphcoreset.api import (
    assign,
    sample_best_coreset,
    sample_coreset,
    sample_coreset_from_config,
)
from graphcoreset.config import CoresetResult, SamplerVariant
from graphcoreset.graph import WeightedGraph, require_connected
from graphcoreset.synthetic import SyntheticVertexScope

__version__ = "0.1.0"

__all__ = [
    "CoresetResult",
    "SamplerVariant",
    "SyntheticVertexScope",
    "WeightedGraph",
    "assign",
    "require_connected",
    "sample_best_coreset",
    "sample_coreset",
    "sample_coreset_from_config",
]
