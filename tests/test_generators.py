"""Tests for instance generators."""

import networkx as nx
import pytest

from graphcoreset.generators import (
    GENERATOR_REGISTRY,
    ErdosRenyiGenerator,
    Grid2DGenerator,
    PlanarRandomGenerator,
    get_generator,
    list_generators,
)
from graphcoreset.graph import WeightedGraph


# ── Helpers ──────────────────────────────────────────────────────────

def _assert_valid_graph(graph: WeightedGraph, expected_size: int):
    """Verify a generated graph is connected, weighted and loop-free."""
    assert graph.vertex_count() == expected_size
    assert nx.is_connected(graph.nx)
    for u, v, data in graph.nx.edges(data=True):
        assert u != v
        assert data["weight"] > 0


# ── Registry ─────────────────────────────────────────────────────────

def test_registry_lists_all():
    assert list_generators() == ["erdos_renyi", "grid_2d", "planar_random"]
    assert len(GENERATOR_REGISTRY) == 3


def test_get_generator_unknown():
    with pytest.raises(ValueError, match="Unknown generator"):
        get_generator("nope")


# ── Grid 2D ──────────────────────────────────────────────────────────

class TestGrid2D:
    def test_perfect_square(self):
        g = Grid2DGenerator().generate(25, seed=42)
        _assert_valid_graph(g, 25)
        assert g.metadata["params"]["rows"] == 5
        assert g.metadata["params"]["cols"] == 5

    def test_non_square(self):
        g = Grid2DGenerator().generate(36, seed=42)
        _assert_valid_graph(g, 36)
        params = g.metadata["params"]
        assert params["rows"] * params["cols"] == 36

    def test_unweighted(self):
        g = Grid2DGenerator().generate(9, weighted=False)
        assert all(d["weight"] == 1.0 for _, _, d in g.nx.edges(data=True))


# ── Planar Random ────────────────────────────────────────────────────

class TestPlanarRandom:
    def test_basic(self):
        g = PlanarRandomGenerator().generate(50, seed=42)
        _assert_valid_graph(g, 50)
        assert g.metadata["generator"] == "planar_random"

    def test_deterministic(self):
        g1 = PlanarRandomGenerator().generate(30, seed=7)
        g2 = PlanarRandomGenerator().generate(30, seed=7)
        assert g1.to_instance()["edges"] == g2.to_instance()["edges"]

    def test_two_vertices(self):
        _assert_valid_graph(PlanarRandomGenerator().generate(2, seed=1), 2)


# ── Erdős-Rényi ──────────────────────────────────────────────────────

class TestErdosRenyi:
    def test_sparse_graph_is_connected(self):
        g = ErdosRenyiGenerator().generate(60, p=0.01, seed=42)
        _assert_valid_graph(g, 60)
        assert g.metadata["generator"] == "erdos_renyi"

    def test_weights_in_range(self):
        g = ErdosRenyiGenerator().generate(30, p=0.3, seed=42)
        for _, _, data in g.nx.edges(data=True):
            assert 0.0 < data["weight"] <= 1.0

    def test_deterministic(self):
        g1 = ErdosRenyiGenerator().generate(40, p=0.1, seed=123)
        g2 = ErdosRenyiGenerator().generate(40, p=0.1, seed=123)
        assert g1.to_instance()["edges"] == g2.to_instance()["edges"]
