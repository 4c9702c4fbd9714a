"""
Delete a transaction.
"""

from __future__ import annotations

from pocketbook.workspace import Workspace

from .util import console, open_service, resolve_record, short_id


def run(*, txid: str, workspace: Workspace) -> int:
    """Delete a transaction by id (or unique id prefix).

    Returns:
        Exit code (0 = deleted, 1 = not found)
    """
    try:
        service, settings = open_service(workspace)
        target = resolve_record(txid, service.get_all_transactions(), "transaction")
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    if target is None or not service.delete_transaction(target.id):
        console.print(f"[red]Error:[/] Transaction not found: {txid}")
        return 1

    console.print(
        f"[green]Deleted[/] {short_id(target.id)}: {target.description or '(no description)'} "
        f"{settings.money(target.amount)}"
    )
    return 0
