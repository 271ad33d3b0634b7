"""
PySAT oracle implementation.

This module provides the PySATOracle class, which implements the Oracle
interface on top of an incremental PySAT solver. Every formula is a literal:
connectives get Tseitin definitions, and cardinality formulas are reified by
guarding a CardEnc encoding with the defining literal.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from pysat.card import CardEnc, EncType
from pysat.formula import IDPool
from pysat.solvers import Solver

from ..constants import DEFAULT_PYSAT_SOLVER
from ..core.base_oracle import CheckResult, Oracle
from ..errors import oracle_error_handler


class PySATOracle(Oracle):
    """
    PySAT oracle.

    Clauses are collected until the first check, then streamed into the
    solver incrementally.
    """

    name = "pysat"

    def __init__(
        self,
        solver_name: str = DEFAULT_PYSAT_SOLVER,
        encoding: int = EncType.seqcounter,
    ):
        """
        Initialize a new PySAT oracle.

        Args:
            solver_name: PySAT solver identifier (e.g. "g3", "cd19", "m22")
            encoding: CardEnc encoding used for cardinality formulas
        """
        self.solver_name = solver_name
        self.encoding = encoding
        self.pool = IDPool()
        self.clauses: List[List[int]] = []
        self._solver: Optional[Solver] = None
        self._fresh = 0
        self.logger = logging.getLogger(__name__)

        self._true = self._new_lit("__true")
        self._emit([self._true])
        self.logger.info(f"PySAT oracle initialized with solver {solver_name}")

    def _new_lit(self, label: str) -> int:
        self._fresh += 1
        return self.pool.id((label, self._fresh))

    def _emit(self, clause: List[int]) -> None:
        self.clauses.append(clause)
        if self._solver is not None:
            self._solver.add_clause(clause)

    def _get_solver(self) -> Solver:
        if self._solver is None:
            self._solver = Solver(name=self.solver_name, bootstrap_with=self.clauses)
        return self._solver

    def new_bool(self, name: str) -> int:
        return self._new_lit(name)

    @oracle_error_handler
    def add(self, formula: int) -> None:
        if isinstance(formula, bool) or not isinstance(formula, int) or formula == 0:
            raise ValueError(f"literal should be a non-zero integer, got {formula!r}")
        self._emit([formula])

    def and_(self, *formulas: int) -> int:
        if not formulas:
            return self._true
        if len(formulas) == 1:
            return formulas[0]
        t = self._new_lit("__and")
        for lit in formulas:
            self._emit([-t, lit])
        self._emit([t] + [-lit for lit in formulas])
        return t

    def or_(self, *formulas: int) -> int:
        if not formulas:
            return -self._true
        if len(formulas) == 1:
            return formulas[0]
        t = self._new_lit("__or")
        self._emit([-t] + list(formulas))
        for lit in formulas:
            self._emit([t, -lit])
        return t

    def not_(self, formula: int) -> int:
        return -formula

    def at_least(self, variables: Sequence[int], k: int) -> int:
        lits = list(variables)
        if k <= 0:
            return self._true
        if k > len(lits):
            return -self._true
        if k == 1:
            return self.or_(*lits)
        if k == len(lits):
            return self.and_(*lits)

        # t => sum >= k  and  -t => sum <= k - 1
        t = self._new_lit("__atleast")
        lower = CardEnc.atleast(lits=lits, bound=k, vpool=self.pool, encoding=self.encoding)
        for clause in lower.clauses:
            self._emit([-t] + clause)
        upper = CardEnc.atmost(lits=lits, bound=k - 1, vpool=self.pool, encoding=self.encoding)
        for clause in upper.clauses:
            self._emit([t] + clause)
        return t

    def at_most(self, variables: Sequence[int], k: int) -> int:
        return -self.at_least(variables, k + 1)

    @oracle_error_handler
    def check(self) -> CheckResult:
        result = CheckResult.SAT if self._get_solver().solve() else CheckResult.UNSAT
        self.logger.info(f"Check result: {result.value}")
        return result

    @oracle_error_handler
    def _solve_under(self, assumptions: List[int]) -> Optional[List[int]]:
        solver = self._get_solver()
        if not solver.solve(assumptions=assumptions):
            return None
        return solver.get_model()

    def solutions(
        self,
        item_vars: Sequence[int],
        group_vars: Sequence[int],
        limit: Optional[int] = None,
    ) -> Iterator[Tuple[Tuple[bool, ...], Tuple[bool, ...]]]:
        projected = list(item_vars) + list(group_vars)
        split = len(item_vars)
        found = 0

        # Blocking clauses are conditioned on an activation literal retired afterwards
        active = self._new_lit("__block")
        try:
            while limit is None or found < limit:
                model = self._solve_under([active])
                if model is None:
                    break

                true_vars = set(lit for lit in model if lit > 0)
                values = tuple(
                    (lit in true_vars) if lit > 0 else (-lit not in true_vars)
                    for lit in projected
                )
                found += 1
                yield values[:split], values[split:]

                if not projected:
                    break
                self._emit(
                    [-active] + [-lit if value else lit for lit, value in zip(projected, values)]
                )
        finally:
            self._emit([-active])

    def describe(self) -> Dict[str, Any]:
        return {
            "backend": self.name,
            "solver": self.solver_name,
            "variables": self.pool.top,
            "clauses": len(self.clauses),
        }

    def close(self) -> None:
        """Release the underlying solver; a later check rebuilds it from the clauses."""
        if self._solver is not None:
            self._solver.delete()
            self._solver = None
