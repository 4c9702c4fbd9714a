"""
Remove all transactions, budgets and goals.
"""

from __future__ import annotations

from pocketbook.workspace import Workspace

from .util import console, open_service


def run(*, workspace: Workspace, write: bool = False) -> int:
    """Empty every collection in the record store.

    Dry-run by default; this cannot be undone, so export a backup first.

    Returns:
        Exit code (0 = success, 1 = store could not be read)
    """
    try:
        service, _ = open_service(workspace)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    counts = (
        f"{len(service.get_all_transactions())} transactions, "
        f"{len(service.get_budgets())} budgets, {len(service.get_goals())} goals"
    )

    if not write:
        console.print(f"[yellow]Dry-run:[/] would delete {counts}. Use --write to clear all data.")
        return 0

    service.clear_all()
    console.print(f"[green]Cleared[/] {counts}")
    return 0
