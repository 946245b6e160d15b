"""
Experiment execution engine.

Generates instances, runs coreset algorithms on them, collects cost and
resource metrics, and produces a pandas DataFrame of results.
"""

from __future__ import annotations

import logging
import time
import tracemalloc
from typing import Any

import pandas as pd
from tqdm import tqdm

from graphcoreset.algorithms.base import CoresetAlgorithm
from graphcoreset.config import ExperimentConfig, ExperimentRecord, RunStatus
from graphcoreset.generators import get_generator
from graphcoreset.graph import WeightedGraph

logger = logging.getLogger(__name__)


def _run_one(algorithm: CoresetAlgorithm, graph: WeightedGraph, seed: int) -> dict[str, Any]:
    """Run a single (algorithm x instance) and return raw measurements."""
    vertices, edges = graph.vertex_count(), graph.edge_count()
    started = not tracemalloc.is_tracing()
    if started:
        tracemalloc.start()
    else:
        tracemalloc.reset_peak()
    t0 = time.perf_counter()
    try:
        result = algorithm.solve(graph, seed=seed)
        status, error = RunStatus.SUCCESS, ""
    except Exception as exc:  # noqa: BLE001
        logger.warning("%s failed: %s", algorithm.name, exc)
        result, status, error = None, RunStatus.ERROR, f"{type(exc).__name__}: {exc}"
    wall_time = time.perf_counter() - t0
    _, peak_mem = tracemalloc.get_traced_memory()
    # leave tracing on when someone else turned it on
    if started:
        tracemalloc.stop()

    if (graph.vertex_count(), graph.edge_count()) != (vertices, edges):
        raise RuntimeError(
            f"{algorithm.name} left the graph modified: "
            f"{vertices}/{edges} -> {graph.vertex_count()}/{graph.edge_count()} vertices/edges"
        )

    return {
        "result": result,
        "wall_time": wall_time,
        "peak_memory_mb": peak_mem / (1024 * 1024),
        "status": status,
        "error": error,
    }


class ExperimentRunner:
    """
    Runs every registered algorithm on every generated instance.

    Usage
    -----
    >>> runner = ExperimentRunner(config)
    >>> runner.register_algorithm(BestOfTrialsAlgorithm(k=5))
    >>> df = runner.run()
    """

    def __init__(self, config: ExperimentConfig) -> None:
        self.config = config
        self.algorithms: list[CoresetAlgorithm] = []
        self._instances: list[WeightedGraph] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def register_algorithm(self, algorithm: CoresetAlgorithm) -> None:
        """Add a :class:`CoresetAlgorithm` instance to the experiment."""
        self.algorithms.append(algorithm)

    def add_instance(self, graph: WeightedGraph, name: str) -> None:
        """Add a pre-built graph (e.g. loaded from disk) under *name*."""
        graph.metadata.setdefault("generator", "custom")
        graph.metadata.setdefault("size", graph.vertex_count())
        graph.metadata["instance_name"] = name
        self._instances.append(graph)

    def generate_instances(self) -> list[WeightedGraph]:
        """
        Build all graph instances according to the config.

        Each graph's ``metadata["instance_name"]`` identifies it in the
        results.
        """
        instances: list[WeightedGraph] = []

        for gen_cfg in self.config.generators:
            gen = get_generator(gen_cfg.type)()
            for size in gen_cfg.sizes:
                for i in range(gen_cfg.count_per_size):
                    params = dict(gen_cfg.params)
                    params.setdefault("seed", self.config.base_seed + i)
                    graph = gen.generate(size, **params)
                    graph.metadata["instance_name"] = f"{gen_cfg.type}_n{size}_{i}"
                    instances.append(graph)

        self._instances.extend(instances)
        logger.info("Generated %d instances", len(instances))
        return instances

    def run(self, progress: bool = True) -> pd.DataFrame:
        """Execute the full experiment and return a results DataFrame."""
        if not self.algorithms:
            raise RuntimeError("No algorithms registered. Call register_algorithm() first.")

        if not self._instances:
            self.generate_instances()

        runs = self.config.runs_per_config
        records: list[ExperimentRecord] = []
        total = len(self.algorithms) * len(self._instances) * runs

        with tqdm(total=total, desc="Sampling coresets", unit="run", disable=not progress) as pbar:
            for algo in self.algorithms:
                for graph in self._instances:
                    meta = graph.metadata
                    for run_idx in range(runs):
                        seed = self.config.base_seed + run_idx
                        raw = _run_one(algo, graph, seed)
                        result = raw["result"]
                        records.append(ExperimentRecord(
                            algorithm_name=algo.name,
                            instance_name=meta.get("instance_name", "unknown"),
                            instance_generator=meta.get("generator", "custom"),
                            problem_size=graph.vertex_count(),
                            run_index=run_idx,
                            seed=seed,
                            sample_size=len(set(result.sample)) if result is not None else 0,
                            total_cost=result.total_cost if result is not None else None,
                            wall_time_seconds=round(raw["wall_time"], 6),
                            peak_memory_mb=round(raw["peak_memory_mb"], 3),
                            status=raw["status"],
                            error_message=raw["error"],
                        ))
                        pbar.update(1)

        df = pd.DataFrame([r.model_dump(mode="json") for r in records])
        logger.info("Experiment complete: %d results collected", len(df))
        return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean cost, sample size and wall time per algorithm and instance."""
    ok = df[df["status"] == RunStatus.SUCCESS.value]
    return (
        ok.groupby(["algorithm_name", "instance_name"], as_index=False)
        .agg(
            problem_size=("problem_size", "first"),
            sample_size=("sample_size", "mean"),
            total_cost=("total_cost", "mean"),
            best_cost=("total_cost", "min"),
            wall_time_seconds=("wall_time_seconds", "mean"),
        )
    )
