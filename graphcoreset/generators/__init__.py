"""Connected weighted graph generators for experiments and tests."""

from graphcoreset.generators.base import BaseGenerator
from graphcoreset.generators.erdos_renyi import ErdosRenyiGenerator
from graphcoreset.generators.grid_2d import Grid2DGenerator
from graphcoreset.generators.planar_random import PlanarRandomGenerator

# Registry: name → class
GENERATOR_REGISTRY: dict[str, type[BaseGenerator]] = {
    "erdos_renyi": ErdosRenyiGenerator,
    "grid_2d": Grid2DGenerator,
    "planar_random": PlanarRandomGenerator,
}


def get_generator(name: str) -> type[BaseGenerator]:
    """Look up a generator class by name."""
    if name not in GENERATOR_REGISTRY:
        available = ", ".join(sorted(GENERATOR_REGISTRY))
        raise ValueError(f"Unknown generator '{name}'. Available: {available}")
    return GENERATOR_REGISTRY[name]


def list_generators() -> list[str]:
    """Return the names of all available generators."""
    return sorted(GENERATOR_REGISTRY.keys())


__all__ = [
    "BaseGenerator",
    "GENERATOR_REGISTRY",
    "get_generator",
    "list_generators",
    "ErdosRenyiGenerator",
    "Grid2DGenerator",
    "PlanarRandomGenerator",
]
