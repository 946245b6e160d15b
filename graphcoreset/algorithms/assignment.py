"""Resolve every vertex to the sample member that serves it."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from graphcoreset.config import CoresetResult
from graphcoreset.exceptions import AssignmentError, InvalidArgumentError
from graphcoreset.graph import Vertex, WeightedGraph, require_connected
from graphcoreset.sampling import check_distances, sum_costs
from graphcoreset.synthetic import SyntheticVertexScope

logger = logging.getLogger(__name__)


def assign(graph: WeightedGraph, sample: Sequence[Vertex]) -> CoresetResult:
    """
    Compute per-vertex costs and facility assignments for a fixed sample.

    One multi-source Dijkstra from a synthetic root wired to every sample
    member gives each vertex its distance to the sample.  Walking a
    vertex's predecessor chain up to the last vertex before the root
    yields the member that serves it.

    Parameters
    ----------
    graph : WeightedGraph
        Connected graph; mutated during the call and restored afterwards.
    sample : sequence
        The facility set.  Duplicates are allowed; a duplicated member is
        reported under the index of its first occurrence.

    Returns
    -------
    CoresetResult
        ``costs[v]`` is the distance from ``v`` to ``sample[assignments[v]]``.

    Raises
    ------
    AssignmentError
        If a predecessor chain does not end at a sample member.
    """
    if not sample:
        raise InvalidArgumentError("Cannot assign vertices to an empty sample")
    require_connected(graph)

    index: dict[Vertex, int] = {}
    for i, v in enumerate(sample):
        if v not in graph:
            raise InvalidArgumentError(f"Sample member {v!r} is not a vertex of the graph")
        index.setdefault(v, i)

    with SyntheticVertexScope(graph) as scope:
        scope.connect(index)
        distances, parents = scope.shortest_paths()
        root = scope.vertex

    check_distances(distances)

    assignments: dict[Vertex, int] = {}
    for v in distances:
        assignments[v] = _resolve(v, parents, root, index, assignments)

    total = sum_costs(distances)
    logger.info("Total cost of solution: %g", total)
    return CoresetResult(
        sample=list(sample),
        costs=distances,
        assignments=assignments,
        total_cost=total,
    )


def _resolve(
    vertex: Vertex,
    parents: dict[Vertex, Vertex],
    root: Vertex,
    index: dict[Vertex, int],
    resolved: dict[Vertex, int],
) -> int:
    """Walk up from *vertex* to the last non-root ancestor and return its index."""
    path = []
    current = vertex
    for _ in range(len(parents) + 1):
        if current in resolved:
            found = resolved[current]
            break
        parent = parents.get(current)
        if parent == root:
            if current not in index:
                raise AssignmentError(
                    f"Vertex {vertex!r} traces back to {current!r}, which is not a sample member"
                )
            found = index[current]
            break
        if parent is None:
            raise AssignmentError(
                f"Predecessor chain of {vertex!r} ends at {current!r} without reaching the sample"
            )
        path.append(current)
        current = parent
    else:
        raise AssignmentError(f"Predecessor chain of {vertex!r} contains a cycle")

    # every vertex on the walked path is served by the same member
    for v in path:
        resolved[v] = found
    return found
