from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple


class CheckResult(str, Enum):
    SAT = "sat"
    UNSAT = "unsat"
    UNKNOWN = "unknown"


class Oracle(ABC):
    """
    Abstract base class for satisfiability oracles.

    This class defines the interface every backend must follow. Formulas are
    opaque backend objects; the core only passes them back into the oracle
    that created them.
    """

    name = "oracle"

    @abstractmethod
    def new_bool(self, name: str) -> Any:
        """
        Create a fresh boolean variable.

        Args:
            name: Human-readable prefix for the variable

        Returns:
            The backend's variable object
        """
        pass

    @abstractmethod
    def add(self, formula: Any) -> None:
        """
        Assert a formula.

        Args:
            formula: A formula built by this oracle
        """
        pass

    @abstractmethod
    def and_(self, *formulas: Any) -> Any:
        """Conjunction of ``formulas``; true when empty."""
        pass

    @abstractmethod
    def or_(self, *formulas: Any) -> Any:
        """Disjunction of ``formulas``; false when empty."""
        pass

    @abstractmethod
    def not_(self, formula: Any) -> Any:
        """Negation of ``formula``."""
        pass

    def implies(self, antecedent: Any, consequent: Any) -> Any:
        """Implication ``antecedent => consequent``."""
        return self.or_(self.not_(antecedent), consequent)

    @abstractmethod
    def at_least(self, variables: Sequence[Any], k: int) -> Any:
        """
        Formula true iff at least ``k`` of ``variables`` are true.

        Args:
            variables: Boolean variables or formulas
            k: Lower bound

        Returns:
            The cardinality formula
        """
        pass

    @abstractmethod
    def at_most(self, variables: Sequence[Any], k: int) -> Any:
        """
        Formula true iff at most ``k`` of ``variables`` are true.

        Args:
            variables: Boolean variables or formulas
            k: Upper bound

        Returns:
            The cardinality formula
        """
        pass

    @abstractmethod
    def check(self) -> CheckResult:
        """
        Check satisfiability of the asserted formulas.

        Returns:
            SAT, UNSAT or UNKNOWN
        """
        pass

    @abstractmethod
    def solutions(
        self,
        item_vars: Sequence[Any],
        group_vars: Sequence[Any],
        limit: Optional[int] = None,
    ) -> Iterator[Tuple[Tuple[bool, ...], Tuple[bool, ...]]]:
        """
        Lazily enumerate pairwise-distinct satisfying assignments.

        After each assignment a blocking clause restricted to ``item_vars``
        and ``group_vars`` is added, so assignments differing only in other
        variables are never yielded twice. Blocking clauses are retracted
        once the generator finishes or is closed.

        Args:
            item_vars: First projected variable sequence
            group_vars: Second projected variable sequence
            limit: Maximum number of assignments, or None for all

        Yields:
            ``(item_values, group_values)`` aligned with the given sequences

        Raises:
            OracleError: If the backend cannot decide satisfiability
        """
        pass

    def describe(self) -> Dict[str, Any]:
        """Context reported alongside oracle errors."""
        return {"backend": self.name}

    def close(self) -> None:
        """Release native solver resources. The default holds none."""
        pass
