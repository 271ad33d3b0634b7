"""
Group Solver - enumerate distinct selections of items into active groups.
"""

# Define the version
__version__ = "0.1.0"

# Import core components
from .core.model import GroupModel, build_model
from .core.sorted_sets import intersection
from .core.cardinality import exactly
from .core.encoder import encode, EncodingStats
from .core.enumerator import Solution, enumerate_solutions
from .core.projector import project

# Import configuration and pipeline
from .config import GroupConfig, SelectionParams, load_config, loads_config
from .errors import ConfigError, GroupSolverError, NameNotFoundError, OracleError
from .solver import GroupSolver, create_oracle

__all__ = [
    "GroupModel",
    "build_model",
    "intersection",
    "exactly",
    "encode",
    "EncodingStats",
    "Solution",
    "enumerate_solutions",
    "project",
    "GroupConfig",
    "SelectionParams",
    "load_config",
    "loads_config",
    "ConfigError",
    "GroupSolverError",
    "NameNotFoundError",
    "OracleError",
    "GroupSolver",
    "create_oracle",
    "__version__",
]
