"""Pydantic models defining parameters and results for graphcoreset."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class SamplerVariant(str, Enum):
    HIERARCHICAL = "hierarchical"
    ROUND = "round"


class RunStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


# ---------------------------------------------------------------------------
# Sampler parameters
# ---------------------------------------------------------------------------

class SamplerConfig(BaseModel):
    """Parameters for a single direct sampler invocation."""
    variant: SamplerVariant = SamplerVariant.HIERARCHICAL
    round_cap: int = Field(..., ge=1, description="Vertices sampled per round")
    max_rounds: int = Field(..., ge=1, description="Upper bound on sampling rounds")
    seed: Optional[int] = None


class BestOfTrialsConfig(BaseModel):
    """Parameters for the best-of-N hierarchical sampler."""
    k: int = Field(..., ge=1, description="Number of facilities the coreset targets")
    num_trials: int = Field(default=1, ge=1)
    seed: Optional[int] = None
    eps: float = Field(default=0.5, gt=0)
    samples_per_round: Optional[int] = Field(
        default=None, ge=1,
        description="Override for ceil(21 k log2(n) / eps)",
    )
    max_rounds: Optional[int] = Field(
        default=None, ge=1,
        description="Override for int(3 log2(n))",
    )


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class CoresetResult(BaseModel):
    """A sample set together with the per-vertex cost and serving facility."""
    sample: list[Any]
    costs: dict[Any, float] = Field(
        default_factory=dict,
        description="Distance from each vertex to its nearest sample member",
    )
    assignments: dict[Any, int] = Field(
        default_factory=dict,
        description="Index into ``sample`` of the member serving each vertex",
    )
    total_cost: float = 0.0
    trial_costs: list[float] = Field(
        default_factory=list,
        description="Cost of every trial run, in order (best-of-trials only)",
    )

    def facility(self, vertex: Any) -> Any:
        """Return the sample member serving *vertex*."""
        return self.sample[self.assignments[vertex]]


# ---------------------------------------------------------------------------
# Experiments
# ---------------------------------------------------------------------------

class GeneratorConfig(BaseModel):
    """Configuration for a single instance generator."""
    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(..., description="Generator type, e.g. 'grid_2d'")
    params: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra generator params (e.g. {'p': 0.1})",
        validation_alias=AliasChoices("params", "parameters"),
    )
    sizes: list[int] = Field(..., description="Graph sizes to generate")
    count_per_size: int = Field(default=1, ge=1, description="Instances per size")


class ExperimentConfig(BaseModel):
    """Instances to generate and how often to run each algorithm on them."""
    generators: list[GeneratorConfig]
    runs_per_config: int = Field(default=3, ge=1)
    base_seed: int = 0


class ExperimentRecord(BaseModel):
    """One measurement: one algorithm x one instance x one run."""
    algorithm_name: str
    instance_name: str
    instance_generator: str
    problem_size: int
    run_index: int = 0
    seed: int = 0
    sample_size: int = 0
    total_cost: Optional[float] = None
    wall_time_seconds: float = 0.0
    peak_memory_mb: float = 0.0
    status: RunStatus = RunStatus.SUCCESS
    error_message: str = ""
