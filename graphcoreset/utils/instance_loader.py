"""
Load graph instances from JSON or DIMACS shortest-path files.

JSON files hold either a single instance or a list of instances, each with
at least ``nodes`` and ``edges`` keys.  DIMACS files follow the 9th DIMACS
Implementation Challenge shortest-path format (``p sp``/``a`` lines), as
produced by OSM road-network converters.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, TextIO

import networkx as nx

from graphcoreset.exceptions import InvalidInputError
from graphcoreset.graph import WeightedGraph

logger = logging.getLogger(__name__)

DIMACS_EXTENSIONS = (".gr", ".dimacs", ".sp")


def load_instances(path: str) -> list[WeightedGraph]:
    """
    Load graph instances from a JSON file.

    The file may contain either:
    - A single instance dict (with ``nodes`` and ``edges``)
    - A list of instance dicts

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist.
    InvalidInputError
        If the JSON structure is invalid.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Instance file not found: {path}")

    with open(path) as f:
        data = json.load(f)

    if isinstance(data, dict):
        instances = [data]
    elif isinstance(data, list):
        instances = data
    else:
        raise InvalidInputError(
            f"Expected a JSON object or array, got {type(data).__name__}"
        )

    graphs = []
    for i, inst in enumerate(instances):
        if not isinstance(inst, dict):
            raise InvalidInputError(f"Instance {i} is not a dict: {type(inst).__name__}")
        for key in ("nodes", "edges"):
            if key not in inst:
                raise InvalidInputError(
                    f"Instance {i} missing required '{key}' key. "
                    f"Expected format: {{\"nodes\": [...], \"edges\": [...]}}"
                )

        inst.setdefault("metadata", {
            "generator": "custom",
            "size": len(inst["nodes"]),
            "params": {},
        })
        inst["metadata"].setdefault("instance_name", inst.get("instance_name", f"custom_{i}"))
        graphs.append(WeightedGraph.from_instance(inst))

    return graphs


def parse_dimacs_sp(text: str, directed: bool = False, one_indexed: bool = True) -> WeightedGraph:
    """
    Parse the DIMACS shortest-path format.

    Format::

        c comment line
        p sp <n_nodes> <n_arcs>
        a <u> <v> <weight>

    Vertices become ``0..n-1``.  Road networks list both directions of a
    street as separate arcs, so arcs are merged into undirected edges
    unless *directed* is set.
    """
    G: nx.Graph = nx.DiGraph() if directed else nx.Graph()
    n_nodes = None
    offset = 1 if one_indexed else 0
    graph = WeightedGraph(G)

    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line or line.startswith("c"):
            continue
        parts = line.split()

        if parts[0] == "p":
            if len(parts) < 4 or parts[1] != "sp":
                raise InvalidInputError(f"Line {lineno}: expected 'p sp <n> <m>', got {line!r}")
            n_nodes = int(parts[2])
            G.add_nodes_from(range(n_nodes))
            continue

        if parts[0] == "a":
            if n_nodes is None:
                raise InvalidInputError(f"Line {lineno}: arc before problem line")
            try:
                u = int(parts[1]) - offset
                v = int(parts[2]) - offset
                weight = float(parts[3])
            except (IndexError, ValueError) as exc:
                raise InvalidInputError(f"Line {lineno}: malformed arc {line!r}") from exc
            if not (0 <= u < n_nodes and 0 <= v < n_nodes):
                raise InvalidInputError(f"Line {lineno}: arc ({u}, {v}) outside 0..{n_nodes - 1}")
            graph.add_edge(u, v, weight)

    if n_nodes is None:
        raise InvalidInputError("Missing 'p sp' problem line")

    G.graph.update({
        "generator": "dimacs",
        "size": n_nodes,
        "params": {"format": "dimacs_sp", "directed": directed},
    })
    return graph


def write_dimacs_sp(graph: WeightedGraph, fh: TextIO, comment: str = "") -> None:
    """
    Write *graph* in DIMACS shortest-path format with 1-indexed vertices.

    Vertices are renumbered in iteration order; the mapping is written
    as comment lines.  Undirected edges are written as a single arc.
    """
    ids = {v: i for i, v in enumerate(graph.vertices(), 1)}
    if comment:
        for line in comment.splitlines():
            fh.write(f"c {line}\n")
    fh.write(f"p sp {len(ids)} {graph.edge_count()}\n")
    for v, i in ids.items():
        fh.write(f"c {v}->{i}\n")
    for u, v, data in graph.nx.edges(data=True):
        fh.write(f"a {ids[u]} {ids[v]} {float(data[graph.weight])!r}\n")


def load_graph(path: str, directed: bool = False) -> WeightedGraph:
    """Load one graph, picking the parser from the file extension."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Graph file not found: {path}")
    if path.endswith(DIMACS_EXTENSIONS):
        with open(path) as f:
            graph = parse_dimacs_sp(f.read(), directed=directed)
        logger.info("Loaded DIMACS graph %s: %r", path, graph)
        return graph

    graphs = load_instances(path)
    if len(graphs) != 1:
        raise InvalidInputError(f"{path} holds {len(graphs)} instances; expected exactly one")
    logger.info("Loaded JSON graph %s: %r", path, graphs[0])
    return graphs[0]


def graph_summary(graph: WeightedGraph) -> dict[str, Any]:
    return {
        "vertices": graph.vertex_count(),
        "edges": graph.edge_count(),
        "directed": graph.directed,
        "total_length": graph.nx.size(weight=graph.weight),
    }
