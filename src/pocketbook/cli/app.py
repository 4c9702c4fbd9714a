"""
pocketbook CLI Wrapper (Typer + Rich)

Local-only personal finance tracker: transactions, budgets, goals,
summaries and JSON backups.

All paths are resolved from a single workspace root:
  --data-dir / POCKETBOOK_DATA env var / current working directory
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from pocketbook.workspace import ENV_VAR, Workspace

HELP_WRITE = "Persist changes (default: dry-run)"

APP_HELP = "pocketbook personal finance tracker (local-only)"
HELP_TXID = "Transaction ID or unique prefix (see 'pocketbook transactions')"
HELP_CATEGORY = "Category: food, transport, housing, entertainment, health, education, salary, investment, other"

app = typer.Typer(no_args_is_help=True, add_completion=False, help=APP_HELP)


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        envvar=ENV_VAR,
        help="Workspace root directory (default: current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """pocketbook CLI: all paths resolved from a single workspace root."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["workspace"] = Workspace.resolve(data_dir)


def _ws(ctx: typer.Context) -> Workspace:
    return ctx.obj["workspace"]


@app.command()
def init(ctx: typer.Context):
    """Initialize a new workspace with directories, starter settings and an empty store.

    Safe to run on an existing workspace; skips anything that already exists.

    Examples:
      pocketbook --data-dir ~/finances init
      pocketbook init
    """
    from pocketbook.cli.command import init as cmd_init

    code = cmd_init.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def add(
    ctx: typer.Context,
    type: str = typer.Option(..., "--type", "-t", help="income or expense"),
    amount: str = typer.Option(..., "--amount", "-m", help="Amount (non-negative)"),
    category: str = typer.Option(..., "--category", "-c", help=HELP_CATEGORY),
    description: str = typer.Option("", "--description", "-d", help="Free-text description"),
    on: Optional[str] = typer.Option(None, "--date", help="Transaction date YYYY-MM-DD (default: today)"),
):
    """Add an income or expense transaction.

    Examples:
      pocketbook add --type income --amount 3200 --category salary --description "October pay"
      pocketbook add -t expense -m 54.20 -c food -d "Groceries" --date 2024-10-03
    """
    from pocketbook.cli.command import add as cmd_add

    code = cmd_add.run(
        type=type,
        amount=amount,
        category=category,
        description=description,
        on=on,
        workspace=_ws(ctx),
    )
    raise typer.Exit(code=code)


@app.command()
def edit(
    ctx: typer.Context,
    txid: str = typer.Option(..., "--id", help=HELP_TXID),
    type: Optional[str] = typer.Option(None, "--type", "-t", help="New type: income or expense"),
    amount: Optional[str] = typer.Option(None, "--amount", "-m", help="New amount"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="New category"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="New description"),
    on: Optional[str] = typer.Option(None, "--date", help="New date YYYY-MM-DD"),
):
    """Change fields of an existing transaction.

    Examples:
      pocketbook edit --id 1a2b3c4d --amount 60
      pocketbook edit --id 1a2b3c4d --category transport --date 2024-10-04
    """
    from pocketbook.cli.command import edit as cmd_edit

    code = cmd_edit.run(
        txid=txid,
        type=type,
        amount=amount,
        category=category,
        description=description,
        on=on,
        workspace=_ws(ctx),
    )
    raise typer.Exit(code=code)


@app.command()
def delete(
    ctx: typer.Context,
    txid: str = typer.Option(..., "--id", help=HELP_TXID),
):
    """Delete a transaction.

    Examples:
      pocketbook delete --id 1a2b3c4d
    """
    from pocketbook.cli.command import delete as cmd_delete

    code = cmd_delete.run(txid=txid, workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def transactions(
    ctx: typer.Context,
    start: Optional[str] = typer.Option(None, "--start", help="Earliest date YYYY-MM-DD (inclusive)"),
    end: Optional[str] = typer.Option(None, "--end", help="Latest date YYYY-MM-DD (inclusive)"),
    category: Optional[List[str]] = typer.Option(None, "--category", "-c", help="Category to include (repeatable)"),
    type: Optional[str] = typer.Option(None, "--type", "-t", help="income or expense"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Max number of rows to show"),
):
    """List transactions, most recent first.

    Examples:
      pocketbook transactions
      pocketbook transactions --start 2024-01-01 --end 2024-03-31 -c food -c transport
      pocketbook transactions --type income --limit 5
    """
    from pocketbook.cli.command import transactions as cmd_transactions

    code = cmd_transactions.run(
        start=start,
        end=end,
        categories=category,
        type=type,
        limit=limit,
        workspace=_ws(ctx),
    )
    raise typer.Exit(code=code)


@app.command()
def summary(
    ctx: typer.Context,
    month: Optional[str] = typer.Option(None, "--month", help="Month YYYY-MM (default: current month)"),
):
    """Show income, expenses, balance, category breakdown and monthly trend.

    Examples:
      pocketbook summary
      pocketbook summary --month 2024-01
    """
    from pocketbook.cli.command import summary as cmd_summary

    code = cmd_summary.run(month=month, workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def budget(
    ctx: typer.Context,
    add: Optional[str] = typer.Option(None, "--add", help="Create a budget for this category"),
    limit: Optional[str] = typer.Option(None, "--limit", help="Spending limit for --add"),
    period: str = typer.Option("monthly", "--period", help="Budget period (monthly or weekly)"),
    start: Optional[str] = typer.Option(None, "--start", help="Window start YYYY-MM-DD"),
    end: Optional[str] = typer.Option(None, "--end", help="Window end YYYY-MM-DD"),
    remove: Optional[str] = typer.Option(None, "--remove", help="Budget ID (or prefix) to remove"),
    refresh: bool = typer.Option(False, "--refresh", help="Recompute spend from transactions"),
):
    """List budgets with usage, or create/remove a budget.

    Examples:
      pocketbook budget
      pocketbook budget --add food --limit 500
      pocketbook budget --add transport --limit 60 --period weekly --start 2024-10-07
      pocketbook budget --remove 9f8e7d6c
    """
    from pocketbook.cli.command import budget as cmd_budget

    code = cmd_budget.run(
        add=add,
        limit=limit,
        period=period,
        start=start,
        end=end,
        remove=remove,
        refresh=refresh,
        workspace=_ws(ctx),
    )
    raise typer.Exit(code=code)


@app.command()
def goal(
    ctx: typer.Context,
    add: Optional[str] = typer.Option(None, "--add", help="Create a goal with this title"),
    target: Optional[str] = typer.Option(None, "--target", help="Target amount for --add"),
    deadline: Optional[str] = typer.Option(None, "--deadline", help="Deadline YYYY-MM-DD for --add"),
    category: str = typer.Option("other", "--category", "-c", help=HELP_CATEGORY),
    contribute: Optional[str] = typer.Option(None, "--contribute", help="Goal ID (or prefix) to contribute to"),
    amount: Optional[str] = typer.Option(None, "--amount", "-m", help="Contribution amount (negative withdraws)"),
    remove: Optional[str] = typer.Option(None, "--remove", help="Goal ID (or prefix) to remove"),
):
    """List goals with progress, or create/contribute/remove a goal.

    Examples:
      pocketbook goal
      pocketbook goal --add "Emergency fund" --target 5000 --deadline 2025-06-30
      pocketbook goal --contribute 4c3b2a1d --amount 250
    """
    from pocketbook.cli.command import goal as cmd_goal

    code = cmd_goal.run(
        add=add,
        target=target,
        deadline=deadline,
        category=category,
        contribute=contribute,
        amount=amount,
        remove=remove,
        workspace=_ws(ctx),
    )
    raise typer.Exit(code=code)


@app.command()
def report(
    ctx: typer.Context,
    start: Optional[str] = typer.Option(None, "--start", help="Period start YYYY-MM-DD (default: first of month)"),
    end: Optional[str] = typer.Option(None, "--end", help="Period end YYYY-MM-DD (default: today)"),
):
    """Financial report for a period: totals and every transaction.

    Examples:
      pocketbook report
      pocketbook report --start 2024-01-01 --end 2024-06-30
    """
    from pocketbook.cli.command import report as cmd_report

    code = cmd_report.run(start=start, end=end, workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def export(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Destination file (default: reports/backup-<date>.json)"),
):
    """Export all transactions, budgets and goals to a JSON backup.

    Examples:
      pocketbook export
      pocketbook export --output ~/backups/finances.json
    """
    from pocketbook.cli.command import export as cmd_export

    code = cmd_export.run(output=output, workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command(name="import")
def import_(
    ctx: typer.Context,
    input_path: Path = typer.Option(..., "--input", "-i", help="Backup JSON file to import"),
    write: bool = typer.Option(False, "--write", help=HELP_WRITE),
):
    """Import a JSON backup, replacing the collections it contains.

    Examples:
      pocketbook import --input reports/backup-2024-10-19.json
      pocketbook import -i backup.json --write

    Safety: dry-run by default. Use --write to persist changes.
    """
    from pocketbook.cli.command import import_data as cmd_import

    code = cmd_import.run(input_path=input_path, workspace=_ws(ctx), write=write)
    raise typer.Exit(code=code)


@app.command()
def clear(
    ctx: typer.Context,
    write: bool = typer.Option(False, "--write", help="Actually delete all records (default: dry-run)"),
):
    """Delete all transactions, budgets and goals.

    Safety: dry-run by default. Export a backup before using --write.
    """
    from pocketbook.cli.command import clear as cmd_clear

    code = cmd_clear.run(workspace=_ws(ctx), write=write)
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()  # pragma: no cover
