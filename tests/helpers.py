"""Shared graph builders and a scripted random stream for the tests."""

import random

import networkx as nx

from graphcoreset.graph import WeightedGraph


class ScriptedRandom(random.Random):
    """A ``random.Random`` whose ``randrange`` returns pre-set values in order."""

    def __init__(self, draws):
        super().__init__(0)
        self.draws = list(draws)

    def randrange(self, start, stop=None, step=1):
        n = start if stop is None else stop - start
        value = self.draws.pop(0)
        assert 0 <= value < n, f"scripted draw {value} out of range({n})"
        return value


def path_graph(n, weight=1.0):
    G = nx.path_graph(n)
    nx.set_edge_attributes(G, weight, "weight")
    return WeightedGraph(G)


def star_graph(leaves, weight=1.0):
    G = nx.star_graph(leaves)  # center is vertex 0
    nx.set_edge_attributes(G, weight, "weight")
    return WeightedGraph(G)


def weighted_grid(rows, cols, seed=0):
    G = nx.convert_node_labels_to_integers(nx.grid_2d_graph(rows, cols), ordering="sorted")
    rng = random.Random(seed)
    for u, v in G.edges():
        G[u][v]["weight"] = round(0.1 + rng.random(), 4)
    return WeightedGraph(G)


def snapshot(graph):
    return graph.vertex_count(), graph.edge_count()
