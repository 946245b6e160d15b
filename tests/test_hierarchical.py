"""Tests for coarse-grained hierarchical sampling."""

import logging
import random

import pytest

from graphcoreset.algorithms.assignment import assign
from graphcoreset.algorithms.hierarchical import hierarchical_sample
from graphcoreset.exceptions import InvalidArgumentError, InvalidInputError

from helpers import ScriptedRandom, path_graph, snapshot, weighted_grid


class TestHierarchicalSample:
    @pytest.fixture()
    def grid(self):
        return weighted_grid(7, 7, seed=5)

    def test_path_scenario(self):
        graph = path_graph(5)
        # pick vertex 2 first, then any pivot
        sample, cost = hierarchical_sample(graph, 1, 1, ScriptedRandom([2, 0]))
        assert sample == [2]
        assert cost == 6.0

    def test_small_pool_taken_whole(self):
        graph = path_graph(4)
        sample, cost = hierarchical_sample(graph, 10, 3, seed=0)
        assert sample == [0, 1, 2, 3]
        assert cost == 0.0

    def test_no_replacement(self, grid):
        sample, _ = hierarchical_sample(grid, 4, 6, seed=1)
        assert len(sample) == len(set(sample))
        assert set(sample) <= set(grid.vertices())
        assert len(sample) <= 4 * 6

    def test_cost_matches_assignment(self, grid):
        sample, cost = hierarchical_sample(grid, 3, 5, seed=2)
        assert assign(grid, sample).total_cost == pytest.approx(cost, rel=1e-9)

    def test_more_rounds_never_cost_more(self, grid):
        costs = [hierarchical_sample(grid, 2, r, seed=8)[1] for r in range(1, 7)]
        for fewer, more in zip(costs, costs[1:]):
            assert more <= fewer + 1e-9

    def test_graph_restored(self, grid):
        before = snapshot(grid)
        hierarchical_sample(grid, 3, 4, seed=0)
        assert snapshot(grid) == before

    def test_deterministic(self, grid):
        first = hierarchical_sample(grid, 3, 4, seed=21)
        second = hierarchical_sample(grid, 3, 4, seed=21)
        assert first == second

    def test_shared_stream_advances(self, grid):
        rng = random.Random(4)
        first, _ = hierarchical_sample(grid, 3, 4, rng)
        replay = random.Random(4)
        hierarchical_sample(grid, 3, 4, replay)
        assert rng.getstate() == replay.getstate()
        assert first == hierarchical_sample(grid, 3, 4, random.Random(4))[0]

    def test_invalid_parameters(self, grid):
        with pytest.raises(InvalidArgumentError, match="per_round"):
            hierarchical_sample(grid, 0, 3)
        with pytest.raises(InvalidArgumentError, match="max_rounds"):
            hierarchical_sample(grid, 3, 0)

    def test_disconnected(self):
        graph = path_graph(3)
        graph.add_vertex()
        before = snapshot(graph)
        with pytest.raises(InvalidInputError):
            hierarchical_sample(graph, 1, 2, seed=0)
        assert snapshot(graph) == before


def _pool_sizes(caplog, module):
    """(radius, pool before, pool after) for each logged pruning round."""
    return [
        (r.args[1], r.args[2], r.args[3])
        for r in caplog.records
        if r.name == module and r.msg.startswith("Round ")
    ]


class TestCandidatePool:
    MODULE = "graphcoreset.algorithms.hierarchical"

    def test_scripted_pool_sizes(self, caplog):
        caplog.set_level(logging.DEBUG, logger=self.MODULE)
        # pop 0, pivot 1, pop 6, pivot 4, then the last candidate is taken whole
        rng = ScriptedRandom([0, 1, 0, 3])
        sample, cost = hierarchical_sample(path_graph(7), 1, 3, rng)
        assert sample == [0, 6, 3]
        assert cost == 4.0
        assert rng.draws == []
        assert _pool_sizes(caplog, self.MODULE) == [(1.0, 6, 5), (2.0, 4, 1)]

    def test_pool_never_grows(self, caplog):
        caplog.set_level(logging.DEBUG, logger=self.MODULE)
        hierarchical_sample(weighted_grid(9, 9, seed=2), 2, 10, seed=6)
        sizes = _pool_sizes(caplog, self.MODULE)
        assert sizes
        for radius, before, after in sizes:
            assert after <= before
            if radius > 0:
                assert after < before
        for (_, _, after), (_, before, _) in zip(sizes, sizes[1:]):
            assert before <= after
