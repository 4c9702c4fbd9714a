"""
Add a transaction.
"""

from __future__ import annotations

from typing import Optional

from pocketbook.workspace import Workspace

from .util import (
    OptionError,
    console,
    open_service,
    parse_amount,
    parse_category,
    parse_date,
    parse_type,
    short_id,
)


def run(
    *,
    type: str,
    amount: str,
    category: str,
    description: str = "",
    on: Optional[str] = None,
    workspace: Workspace,
) -> int:
    """Record a new income or expense transaction.

    Args:
        type: 'income' or 'expense'
        amount: Non-negative amount
        category: Category name (e.g., food, salary)
        description: Free-text description
        on: Transaction date (YYYY-MM-DD, default: today)
        workspace: Workspace providing the record store

    Returns:
        Exit code (0 = success, 1 = invalid input)
    """
    try:
        tx_type = parse_type(type)
        tx_amount = parse_amount(amount)
        tx_category = parse_category(category)
        if tx_amount < 0:
            raise OptionError("--amount must not be negative; use --type expense instead")
        service, settings = open_service(workspace)
        tx_date = parse_date(on, "--date") if on else service.today()
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    transaction = service.add_transaction(
        amount=tx_amount,
        description=description,
        type=tx_type,
        category=tx_category,
        date=tx_date,
    )

    console.print(
        f"[green]Added {transaction.type}[/] {settings.money(transaction.amount)} "
        f"({transaction.category.label}) on {transaction.date.isoformat()} "
        f"[dim]id {short_id(transaction.id)}[/dim]"
    )
    return 0
