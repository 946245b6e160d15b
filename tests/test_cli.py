"""Tests for the command-line interface."""

import json

from graphcoreset.cli import main
from graphcoreset.utils.instance_loader import write_dimacs_sp

from helpers import weighted_grid


def _write_grid(tmp_path):
    path = tmp_path / "grid.gr"
    with open(path, "w") as f:
        write_dimacs_sp(weighted_grid(4, 4, seed=1), f)
    return str(path)


class TestCli:
    def test_sample_best(self, tmp_path):
        out = tmp_path / "coreset.json"
        code = main(["sample", _write_grid(tmp_path), "--k", "1", "--trials", "2",
                     "--round-cap", "2", "--max-rounds", "2", "-o", str(out)])
        assert code == 0
        result = json.loads(out.read_text())
        assert len(result["trial_costs"]) == 2
        assert len(result["assignments"]) == 16

    def test_sample_round_variant(self, tmp_path, capsys):
        code = main(["sample", _write_grid(tmp_path), "--variant", "round",
                     "--round-cap", "3", "--max-rounds", "2"])
        assert code == 0
        result = json.loads(capsys.readouterr().out)
        assert 1 <= len(result["sample"]) <= 6

    def test_missing_file(self, tmp_path, capsys):
        code = main(["sample", str(tmp_path / "missing.gr")])
        assert code == 1
        assert "not found" in capsys.readouterr().err

    def test_zero_round_cap_rejected(self, tmp_path, capsys):
        code = main(["sample", _write_grid(tmp_path), "--k", "1", "--round-cap", "0"])
        assert code == 1
        assert "per_round" in capsys.readouterr().err

    def test_bench(self, tmp_path, capsys):
        csv = tmp_path / "results.csv"
        code = main(["bench", "--sizes", "9", "--k", "1", "--trials", "2",
                     "--runs", "1", "--csv", str(csv)])
        assert code == 0
        assert csv.exists()
        assert "best_of_trials" in capsys.readouterr().out
