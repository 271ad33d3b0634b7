"""
Z3 oracle implementation.

This module provides the Z3Oracle class, which implements the Oracle
interface on top of the Z3 SMT solver.
"""

import logging
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple

import z3

from ..core.base_oracle import CheckResult, Oracle
from ..errors import OracleError, oracle_error_handler


class Z3Oracle(Oracle):
    """
    Z3 oracle.

    Formulas are z3 ``BoolRef`` expressions; cardinality uses pseudo-boolean
    constraints with unit coefficients.
    """

    name = "z3"

    def __init__(self, timeout_ms: Optional[int] = None):
        """
        Initialize a new Z3 oracle.

        Args:
            timeout_ms: Optional per-check timeout in milliseconds
        """
        self.solver = z3.Solver()
        self.timeout_ms = timeout_ms
        if timeout_ms is not None:
            self.solver.set("timeout", int(timeout_ms))
        self.num_vars = 0
        self.logger = logging.getLogger(__name__)
        self.logger.info("Z3 oracle initialized")

    def new_bool(self, name: str) -> z3.BoolRef:
        self.num_vars += 1
        return z3.FreshBool(prefix=name)

    @oracle_error_handler
    def add(self, formula: z3.BoolRef) -> None:
        self.solver.add(formula)

    def and_(self, *formulas: z3.BoolRef) -> z3.BoolRef:
        if not formulas:
            return z3.BoolVal(True)
        if len(formulas) == 1:
            return formulas[0]
        return z3.And(*formulas)

    def or_(self, *formulas: z3.BoolRef) -> z3.BoolRef:
        if not formulas:
            return z3.BoolVal(False)
        if len(formulas) == 1:
            return formulas[0]
        return z3.Or(*formulas)

    def not_(self, formula: z3.BoolRef) -> z3.BoolRef:
        return z3.Not(formula)

    def implies(self, antecedent: z3.BoolRef, consequent: z3.BoolRef) -> z3.BoolRef:
        return z3.Implies(antecedent, consequent)

    def at_least(self, variables: Sequence[z3.BoolRef], k: int) -> z3.BoolRef:
        if not variables:
            return z3.BoolVal(k <= 0)
        return z3.PbGe([(v, 1) for v in variables], k)

    def at_most(self, variables: Sequence[z3.BoolRef], k: int) -> z3.BoolRef:
        if not variables:
            return z3.BoolVal(k >= 0)
        return z3.PbLe([(v, 1) for v in variables], k)

    @oracle_error_handler
    def check(self) -> CheckResult:
        status = self.solver.check()
        if status == z3.sat:
            result = CheckResult.SAT
        elif status == z3.unsat:
            result = CheckResult.UNSAT
        else:
            result = CheckResult.UNKNOWN
        self.logger.info(f"Check result: {result.value}")
        return result

    def solutions(
        self,
        item_vars: Sequence[z3.BoolRef],
        group_vars: Sequence[z3.BoolRef],
        limit: Optional[int] = None,
    ) -> Iterator[Tuple[Tuple[bool, ...], Tuple[bool, ...]]]:
        projected = list(item_vars) + list(group_vars)
        split = len(item_vars)
        found = 0

        # Blocking clauses live in their own scope
        self.solver.push()
        try:
            while limit is None or found < limit:
                result = self.check()
                if result == CheckResult.UNSAT:
                    break
                if result == CheckResult.UNKNOWN:
                    raise OracleError(
                        f"z3 could not decide satisfiability: {self.solver.reason_unknown()}",
                        context=self.describe(),
                    )

                model = self.solver.model()
                values = tuple(
                    z3.is_true(model.eval(v, model_completion=True)) for v in projected
                )
                found += 1
                yield values[:split], values[split:]

                if not projected:
                    break
                self.solver.add(
                    self.or_(*[v != z3.BoolVal(value) for v, value in zip(projected, values)])
                )
        finally:
            self.solver.pop()

    def describe(self) -> Dict[str, Any]:
        return {
            "backend": self.name,
            "variables": self.num_vars,
            "assertions": len(self.solver.assertions()),
            "timeout_ms": self.timeout_ms,
        }
