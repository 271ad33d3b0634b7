"""
Main entry point for running the group solver.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from .config import load_config, override_params
from .constants import BACKEND_PYSAT, BACKEND_Z3, LOG_FORMAT
from .core.base_oracle import CheckResult
from .errors import GroupSolverError
from .report import print_solutions, solutions_to_json
from .solver import GroupSolver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="group-solver",
        description="Enumerate distinct selections of items into active groups",
    )
    parser.add_argument("config", help="TOML file with names, props and limits")
    parser.add_argument("--z3", action="store_true", help="Use the Z3 oracle (default)")
    parser.add_argument("--pysat", action="store_true", help="Use the PySAT oracle")
    parser.add_argument("--limit", type=int, help="Maximum number of solutions")
    parser.add_argument("--total", type=int, help="Items selected overall")
    parser.add_argument("--group-size", type=int, help="Items selected per active group")
    parser.add_argument("--timeout", type=int, help="Z3 timeout per check in milliseconds")
    parser.add_argument(
        "--check", action="store_true", help="Only report whether a selection exists"
    )
    parser.add_argument("--json", action="store_true", help="Print solutions as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Setup logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logger = logging.getLogger(__name__)

    # Check for incompatible flags
    if args.z3 and args.pysat:
        print("Error: Cannot use both --z3 and --pysat flags at the same time")
        return 1
    backend = BACKEND_PYSAT if args.pysat else BACKEND_Z3

    console = Console()
    solver = None
    try:
        config = load_config(args.config)
        params = override_params(
            config.params,
            total=args.total,
            group_size=args.group_size,
            max_solutions=args.limit,
        )
        solver = GroupSolver.from_config(
            config, params=params, backend=backend, timeout_ms=args.timeout
        )
        logger.info(f"Running with {backend} oracle")

        if args.check:
            result = solver.check()
            console.print(f"{result.value} ({solver.last_solve_time:.3f}s)")
            return 0 if result != CheckResult.UNKNOWN else 1

        if args.json:
            print(solutions_to_json(solver.selections()))
        else:
            print_solutions(solver.selections(), console=console)
    except GroupSolverError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    finally:
        if solver is not None:
            solver.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
