"""
Edit fields of an existing transaction.
"""

from __future__ import annotations

from typing import Optional

from pocketbook.model import TransactionUpdate
from pocketbook.workspace import Workspace

from .util import (
    console,
    open_service,
    parse_amount,
    parse_category,
    parse_date,
    parse_type,
    resolve_record,
    short_id,
)


def run(
    *,
    txid: str,
    type: Optional[str] = None,
    amount: Optional[str] = None,
    category: Optional[str] = None,
    description: Optional[str] = None,
    on: Optional[str] = None,
    workspace: Workspace,
) -> int:
    """Apply a partial update to one transaction.

    Only the options given are changed. Budget spend is refreshed afterwards.

    Returns:
        Exit code (0 = updated, 1 = not found or invalid input)
    """
    try:
        changes = {}
        if type is not None:
            changes["type"] = parse_type(type)
        if amount is not None:
            changes["amount"] = parse_amount(amount)
        if category is not None:
            changes["category"] = parse_category(category)
        if description is not None:
            changes["description"] = description
        if on is not None:
            changes["date"] = parse_date(on, "--date")
        updates = TransactionUpdate(**changes)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    if updates.is_empty:
        console.print("[yellow]Nothing to change.[/] Pass at least one of --type, --amount, --category, --description, --date")
        return 1

    try:
        service, settings = open_service(workspace)
        target = resolve_record(txid, service.get_all_transactions(), "transaction")
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    updated = service.update_transaction(target.id, updates) if target else None
    if updated is None:
        console.print(f"[red]Error:[/] Transaction not found: {txid}")
        return 1

    console.print(
        f"[green]Updated[/] {short_id(updated.id)}: {updated.type} "
        f"{settings.money(updated.amount)} ({updated.category.label}) on {updated.date.isoformat()}"
    )
    return 0
