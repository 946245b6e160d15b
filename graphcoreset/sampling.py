"""
Random-stream and candidate-pool helpers shared by the samplers.

Every function that draws randomness takes an explicit ``random.Random``
so that a single stream can be threaded through nested calls.
"""

from __future__ import annotations

import math
import random
from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple, Optional, Union

import numpy as np

from graphcoreset.exceptions import InvalidArgumentError, NumericInvariantError
from graphcoreset.graph import Vertex

SeedLike = Union[int, random.Random, None]


def ensure_rng(seed: SeedLike) -> random.Random:
    """
    Return a random stream for *seed*.

    An existing ``random.Random`` is returned unchanged so that callers
    share (and advance) the same stream.  An int or ``None`` seeds a new one.
    """
    if isinstance(seed, random.Random):
        return seed
    return random.Random(seed)


def draw_with_replacement(pool: Sequence[Vertex], count: int, rng: random.Random) -> list[Vertex]:
    """Draw ``min(count, len(pool))`` uniform picks from *pool*; repeats allowed."""
    return [pool[rng.randrange(len(pool))] for _ in range(min(count, len(pool)))]


def pop_without_replacement(pool: list[Vertex], count: int, rng: random.Random) -> list[Vertex]:
    """
    Remove *count* distinct uniform picks from *pool* and return them.

    Each pick is swapped with the last element and popped, so *pool* is
    reordered in place.
    """
    if count > len(pool):
        raise InvalidArgumentError(
            f"Cannot draw {count} distinct vertices from a pool of {len(pool)}"
        )
    picked = []
    for _ in range(count):
        i = rng.randrange(len(pool))
        pool[i], pool[-1] = pool[-1], pool[i]
        picked.append(pool.pop())
    return picked


def choose_pivot(pool: Sequence[Vertex], rng: random.Random) -> Vertex:
    return pool[rng.randrange(len(pool))]


def prune_pool(
    pool: Sequence[Vertex], distances: Mapping[Vertex, float], radius: float,
) -> list[Vertex]:
    """Keep the vertices of *pool* farther than *radius*, preserving order."""
    return [v for v in pool if distances[v] > radius]


def random_sample(values: Sequence[Any], n: int, rng: random.Random) -> list[Any]:
    """
    Draw *n* distinct elements of *values* by rejection.

    Only strict subsets are allowed: ``n >= len(values)`` raises
    :class:`InvalidArgumentError`.
    """
    if n >= len(values):
        raise InvalidArgumentError(
            f"Requested sample of {n} from {len(values)} values; need a strict subset"
        )
    picked: list[Any] = []
    while len(picked) < n:
        item = values[rng.randrange(len(values))]
        if item not in picked:
            picked.append(item)
    return picked


# ---------------------------------------------------------------------------
# Cost accounting
# ---------------------------------------------------------------------------

def check_distances(distances: Mapping[Vertex, float]) -> np.ndarray:
    """Return *distances* as an array, rejecting negative or non-finite entries."""
    values = np.fromiter(distances.values(), dtype=np.float64, count=len(distances))
    bad = ~np.isfinite(values) | (values < 0)
    if bad.any():
        offenders = [v for v, b in zip(distances, bad) if b][:5]
        raise NumericInvariantError(
            f"{int(bad.sum())} invalid distance(s), e.g. at vertices {offenders}"
        )
    return values


def sum_costs(distances: Mapping[Vertex, float]) -> float:
    """Reduce a distance vector to its total cost."""
    total = float(check_distances(distances).sum())
    if not math.isfinite(total):
        raise NumericInvariantError(f"Total cost overflowed to {total}")
    return total


# ---------------------------------------------------------------------------
# Sizing
# ---------------------------------------------------------------------------

class ThorupParameters(NamedTuple):
    logn: float
    eps: float
    samples_per_round: int
    rounds: int
    outer_iterations: int


def thorup_parameters(n: int, k: int, eps: Optional[float] = None) -> ThorupParameters:
    """
    Sampling sizes for a graph of *n* vertices and *k* facilities.

    ``eps`` defaults to ``1/sqrt(log2 n)``.  ``log2 n`` is clamped to 1 so
    that graphs of one or two vertices still get positive sizes.
    """
    if n < 1:
        raise InvalidArgumentError("Graph has no vertices")
    if k < 1:
        raise InvalidArgumentError(f"k must be >= 1, got {k}")
    logn = max(math.log2(n), 1.0)
    if eps is None:
        eps = 1.0 / math.sqrt(logn)
    if eps <= 0:
        raise InvalidArgumentError(f"eps must be > 0, got {eps}")
    return ThorupParameters(
        logn=logn,
        eps=eps,
        samples_per_round=math.ceil(21.0 * k * logn / eps),
        rounds=math.ceil(3 * logn),
        outer_iterations=math.ceil(logn ** 1.5),
    )
