"""
Result rendering.

Prints projected solutions either as rich tables or as JSON.
"""

import json
from typing import Iterable, List, Optional, Tuple

from rich.console import Console
from rich.table import Table

ProjectedSolution = List[Tuple[str, List[str]]]


def solution_table(index: int, solution: ProjectedSolution) -> Table:
    """Build the table for one solution."""
    table = Table(title=f"Solution {index}")
    table.add_column("Group", style="cyan")
    table.add_column("Items", style="green")
    for group_name, items in solution:
        table.add_row(group_name, ", ".join(items))
    return table


def print_solutions(
    solutions: Iterable[ProjectedSolution], console: Optional[Console] = None
) -> int:
    """
    Print each solution as it is produced.

    Returns:
        The number of solutions printed
    """
    console = console or Console()
    count = 0
    for count, solution in enumerate(solutions, start=1):
        console.print(solution_table(count, solution))

    if count == 0:
        console.print("[yellow]No selection satisfies all constraints.[/yellow]")
    else:
        console.print(f"[bold]{count} solution(s) found[/bold]")
    return count


def solutions_to_json(solutions: Iterable[ProjectedSolution]) -> str:
    """Serialize solutions as a JSON list of ``{group: [items]}`` lists."""
    data = [
        [{"group": group_name, "items": items} for group_name, items in solution]
        for solution in solutions
    ]
    return json.dumps(data, indent=2)
