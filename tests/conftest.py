"""
Pytest configuration and shared fixtures.
"""
import pytest
import os
import sys

# Ensure the src directory is in the path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from group_solver.config import SelectionParams
from group_solver.core.model import build_model
from group_solver.solver import GroupSolver, create_oracle

EXAMPLES_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "examples"))

EIGHT = ["A", "B", "C", "D", "E", "F", "G", "H"]
TWO_GROUPS = {"G1": ["A", "B", "C", "D"], "G2": ["E", "F", "G", "H"]}


@pytest.fixture(params=["z3", "pysat"])
def backend(request):
    """Name of each available oracle backend."""
    if request.param == "pysat":
        pytest.importorskip("pysat")
    else:
        pytest.importorskip("z3")
    return request.param


@pytest.fixture
def oracle(backend):
    """A fresh oracle for each backend."""
    return create_oracle(backend)


@pytest.fixture
def make_solver(backend):
    """Factory building a GroupSolver from raw tables on the current backend."""

    def factory(names, groups, avoid=None, ignore=None, total=8, group_size=4, max_solutions=50):
        model = build_model(names, groups, avoid_grouping=avoid, ignore_groups=ignore)
        params = SelectionParams(group_size=group_size, total=total, max_solutions=max_solutions)
        return GroupSolver(model, params=params, oracle=create_oracle(backend))

    return factory


@pytest.fixture
def biomes_path():
    return os.path.join(EXAMPLES_DIR, "biomes.toml")
