"""Tests for JSON and DIMACS graph loading."""

import io
import json

import pytest

from graphcoreset.exceptions import InvalidInputError
from graphcoreset.utils.instance_loader import (
    graph_summary,
    load_graph,
    load_instances,
    parse_dimacs_sp,
    write_dimacs_sp,
)

from helpers import path_graph

DIMACS = """\
c tiny road network
p sp 3 4
a 1 2 2.5
a 2 1 2.5
a 2 3 1
a 3 2 1
"""


@pytest.fixture
def single_instance(tmp_path):
    data = {
        "nodes": [0, 1, 2],
        "edges": [
            {"source": 0, "target": 1, "weight": 1.0},
            {"source": 1, "target": 2, "weight": 2.0},
        ],
    }
    path = tmp_path / "single.json"
    path.write_text(json.dumps(data))
    return str(path)


@pytest.fixture
def batch_instances(tmp_path):
    data = [
        {"nodes": [0, 1, 2], "edges": [{"source": 0, "target": 1}]},
        {"nodes": [0, 1, 2, 3], "edges": [{"source": 0, "target": 1}, {"source": 2, "target": 3}]},
    ]
    path = tmp_path / "batch.json"
    path.write_text(json.dumps(data))
    return str(path)


class TestJsonLoader:
    def test_load_single(self, single_instance):
        graphs = load_instances(single_instance)
        assert len(graphs) == 1
        assert list(graphs[0].vertices()) == [0, 1, 2]
        assert graphs[0].edge_count() == 2
        assert graphs[0].metadata["instance_name"] == "custom_0"
        assert graphs[0].metadata["generator"] == "custom"

    def test_load_batch(self, batch_instances):
        graphs = load_instances(batch_instances)
        assert [g.vertex_count() for g in graphs] == [3, 4]

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            load_instances("/nonexistent/file.json")

    def test_missing_nodes(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"edges": []}))
        with pytest.raises(InvalidInputError, match="missing required 'nodes'"):
            load_instances(str(path))

    def test_missing_edges(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"nodes": [0, 1]}))
        with pytest.raises(InvalidInputError, match="missing required 'edges'"):
            load_instances(str(path))

    def test_invalid_type(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('"just a string"')
        with pytest.raises(InvalidInputError, match="Expected a JSON object or array"):
            load_instances(str(path))

    def test_load_graph_rejects_batch(self, batch_instances):
        with pytest.raises(InvalidInputError, match="expected exactly one"):
            load_graph(batch_instances)


class TestDimacs:
    def test_parse_undirected(self):
        graph = parse_dimacs_sp(DIMACS)
        assert graph.vertex_count() == 3
        assert graph.edge_count() == 2
        assert graph.nx[0][1]["weight"] == 2.5
        assert graph.metadata["generator"] == "dimacs"

    def test_parse_directed(self):
        graph = parse_dimacs_sp(DIMACS, directed=True)
        assert graph.directed
        assert graph.edge_count() == 4

    def test_missing_problem_line(self):
        with pytest.raises(InvalidInputError, match="problem line"):
            parse_dimacs_sp("a 1 2 3\n")

    def test_arc_out_of_range(self):
        with pytest.raises(InvalidInputError, match="outside"):
            parse_dimacs_sp("p sp 2 1\na 1 3 1.0\n")

    def test_malformed_arc(self):
        with pytest.raises(InvalidInputError, match="malformed"):
            parse_dimacs_sp("p sp 2 1\na 1 x 1.0\n")

    def test_write_then_read(self):
        buf = io.StringIO()
        write_dimacs_sp(path_graph(4, weight=1.5), buf, comment="path")
        text = buf.getvalue()
        assert text.startswith("c path\np sp 4 3\n")
        graph = parse_dimacs_sp(text)
        assert graph_summary(graph) == {
            "vertices": 4, "edges": 3, "directed": False, "total_length": 4.5,
        }

    @pytest.mark.parametrize("weight", [1234567.891, 123.4567, 0.1 + 0.2])
    def test_write_keeps_full_precision(self, weight):
        original = path_graph(3, weight=weight)
        buf = io.StringIO()
        write_dimacs_sp(original, buf)
        graph = parse_dimacs_sp(buf.getvalue())
        assert sorted(w for _, _, w in graph.nx.edges(data="weight")) == [weight, weight]

    def test_load_graph_by_extension(self, tmp_path):
        path = tmp_path / "roads.gr"
        path.write_text(DIMACS)
        assert load_graph(str(path)).edge_count() == 2
