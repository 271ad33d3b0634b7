"""
Tests for the command line entry point and result rendering.
"""
import json

import pytest
from rich.console import Console

from group_solver.__main__ import main
from group_solver.report import print_solutions, solution_table, solutions_to_json
from group_solver.solver import GroupSolver


SMALL = """
names = ["A", "B", "C", "D", "E", "F", "G", "H"]

[props]
G1 = ["A", "B", "C", "D"]
G2 = ["E", "F", "G", "H"]

[params]
total = 8
"""


@pytest.fixture
def small_config(tmp_path):
    path = tmp_path / "small.toml"
    path.write_text(SMALL, encoding="utf-8")
    return str(path)


class TestMain:
    def test_json_output(self, small_config, capsys):
        assert main([small_config, "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [
            [
                {"group": "G1", "items": ["A", "B", "C", "D"]},
                {"group": "G2", "items": ["E", "F", "G", "H"]},
            ]
        ]

    def test_table_output(self, small_config, capsys):
        assert main([small_config]) == 0
        out = capsys.readouterr().out
        assert "Solution 1" in out
        assert "1 solution(s) found" in out

    def test_total_override_without_solutions(self, small_config, capsys):
        assert main([small_config, "--total", "7"]) == 0
        assert "No selection satisfies all constraints" in capsys.readouterr().out

    def test_check(self, small_config, capsys):
        assert main([small_config, "--check"]) == 0
        assert capsys.readouterr().out.startswith("sat")

    def test_pysat_backend(self, small_config, capsys):
        pytest.importorskip("pysat")
        assert main([small_config, "--pysat", "--json"]) == 0
        assert len(json.loads(capsys.readouterr().out)) == 1

    def test_conflicting_backends(self, small_config):
        assert main([small_config, "--z3", "--pysat"]) == 1

    def test_missing_config(self, tmp_path):
        assert main([str(tmp_path / "nope.toml")]) == 1

    def test_unknown_name(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text(SMALL.replace('"H"]\n\n[params]', '"Q"]\n\n[params]'), encoding="utf-8")
        assert main([str(path)]) == 1

    def test_limit(self, biomes_path, capsys):
        assert main([biomes_path, "--limit", "2", "--json"]) == 0
        assert len(json.loads(capsys.readouterr().out)) == 2

    def test_solver_closed_after_run(self, small_config, monkeypatch):
        closed = []
        monkeypatch.setattr(GroupSolver, "close", lambda self: closed.append(self))
        assert main([small_config, "--json"]) == 0
        assert main([small_config, "--check"]) == 0
        assert len(closed) == 2


class TestReport:
    def test_solution_table(self):
        table = solution_table(3, [("G1", ["A", "B"])])
        assert table.title == "Solution 3"
        assert table.row_count == 1

    def test_print_solutions_counts(self):
        console = Console(record=True, width=80)
        count = print_solutions(iter([[("G1", ["A"])], [("G2", ["B"])]]), console=console)
        assert count == 2
        assert "2 solution(s) found" in console.export_text()

    def test_json_empty(self):
        assert json.loads(solutions_to_json(iter([]))) == []
