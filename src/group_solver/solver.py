import logging
import time
from typing import Iterator, List, Optional, Tuple

from .config import GroupConfig, SelectionParams
from .constants import BACKEND_PYSAT, BACKEND_Z3, BACKENDS, DEFAULT_BACKEND
from .core.base_oracle import CheckResult, Oracle
from .core.encoder import EncodingStats, encode
from .core.enumerator import Solution, enumerate_solutions
from .core.model import GroupModel, model_summary
from .core.projector import project
from .errors import ConfigError

logger = logging.getLogger(__name__)

ProjectedSolution = List[Tuple[str, List[str]]]


def create_oracle(backend: str = DEFAULT_BACKEND, timeout_ms: Optional[int] = None) -> Oracle:
    """
    Instantiate the oracle for ``backend``.

    Backends are imported lazily so only the selected library needs to be installed.
    """
    if backend == BACKEND_Z3:
        from .z3.oracle import Z3Oracle

        return Z3Oracle(timeout_ms=timeout_ms)
    if backend == BACKEND_PYSAT:
        from .pysat.oracle import PySATOracle

        if timeout_ms is not None:
            logger.warning("The PySAT backend ignores the timeout setting")
        return PySATOracle()
    raise ConfigError(f"Unknown backend {backend!r}; expected one of {', '.join(BACKENDS)}")


class GroupSolver:
    """
    Runs one group-selection problem: encodes it once, then enumerates and
    projects solutions on demand.
    """

    def __init__(
        self,
        model: GroupModel,
        params: Optional[SelectionParams] = None,
        oracle: Optional[Oracle] = None,
    ):
        self.model = model
        self.params = params or SelectionParams()
        self.oracle = oracle or create_oracle()
        self.item_vars = [self.oracle.new_bool(name) for name in model.names]
        self.group_vars = [self.oracle.new_bool(name) for name in model.group_names]
        self.last_solve_time: Optional[float] = None

        logger.info(f"Encoding model {model_summary(model)} with {self.params}")
        self.stats: EncodingStats = encode(
            model, self.oracle, self.item_vars, self.group_vars, self.params
        )

    @classmethod
    def from_config(
        cls,
        config: GroupConfig,
        params: Optional[SelectionParams] = None,
        backend: str = DEFAULT_BACKEND,
        timeout_ms: Optional[int] = None,
    ) -> "GroupSolver":
        return cls(
            config.to_model(),
            params=params or config.params,
            oracle=create_oracle(backend, timeout_ms=timeout_ms),
        )

    def check(self) -> CheckResult:
        """Check whether any valid selection exists."""
        start = time.time()
        result = self.oracle.check()
        self.last_solve_time = time.time() - start
        return result

    def solutions(self, limit: Optional[int] = None) -> Iterator[Solution]:
        """
        Lazily enumerate raw solutions.

        Args:
            limit: Maximum number of solutions; defaults to ``params.max_solutions``
        """
        if limit is None:
            limit = self.params.max_solutions
        return enumerate_solutions(self.oracle, self.item_vars, self.group_vars, limit)

    def selections(self, limit: Optional[int] = None) -> Iterator[ProjectedSolution]:
        """
        Lazily enumerate solutions projected onto group and item names.

        Args:
            limit: Maximum number of solutions; defaults to ``params.max_solutions``

        Yields:
            ``(group_name, item_names)`` lists, one per solution
        """
        for solution in self.solutions(limit):
            yield project(self.model, solution)

    def close(self) -> None:
        """Release the oracle's solver resources."""
        self.oracle.close()

    def __enter__(self) -> "GroupSolver":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
