"""
Savings goals: list progress, create, contribute and remove.
"""

from __future__ import annotations

from typing import Optional

from rich.table import Table

from pocketbook.config import Settings
from pocketbook.services.progress import GoalProgress, goal_progress
from pocketbook.workspace import Workspace

from .util import (
    AMOUNT_WIDTH,
    OptionError,
    console,
    open_service,
    parse_amount,
    parse_category,
    parse_date,
    resolve_record,
    short_id,
)

BAR_WIDTH = 10


def run(
    *,
    add: Optional[str] = None,
    target: Optional[str] = None,
    deadline: Optional[str] = None,
    category: str = "other",
    contribute: Optional[str] = None,
    amount: Optional[str] = None,
    remove: Optional[str] = None,
    workspace: Workspace,
) -> int:
    """Manage goals. With no action options, list goals with progress.

    Args:
        add: Title of a new goal
        target: Target amount for the new goal
        deadline: Deadline for the new goal (YYYY-MM-DD)
        category: Category for the new goal
        contribute: Goal id (or unique prefix) to contribute to
        amount: Contribution amount (negative withdraws)
        remove: Goal id (or unique prefix) to delete
        workspace: Workspace providing the record store

    Returns:
        Exit code (0 = success, 1 = error or goal not found)
    """
    actions = [a for a in (add, contribute, remove) if a]
    if len(actions) > 1:
        console.print("[red]Error:[/] Use only one of --add, --contribute or --remove")
        return 1

    try:
        service, settings = open_service(workspace)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    today = service.today()

    if add:
        try:
            if target is None or deadline is None:
                raise OptionError("--target and --deadline are required with --add")
            target_amount = parse_amount(target, "--target")
            if target_amount <= 0:
                raise OptionError("--target must be greater than zero")
            goal = service.create_goal(
                title=add,
                target_amount=target_amount,
                deadline=parse_date(deadline, "--deadline"),
                category=parse_category(category),
            )
        except ValueError as e:
            console.print(f"[red]Error:[/] {e}")
            return 1
        console.print(
            f"[green]Created goal[/] {short_id(goal.id)} '{goal.title}': "
            f"{settings.money(goal.target_amount)} by {goal.deadline.isoformat()}"
        )
        return 0

    if contribute:
        try:
            if amount is None:
                raise OptionError("--amount is required with --contribute")
            contribution = parse_amount(amount)
            found = resolve_record(contribute, service.get_goals(), "goal")
        except ValueError as e:
            console.print(f"[red]Error:[/] {e}")
            return 1
        if found is None or not service.contribute_to_goal(found.id, contribution):
            console.print(f"[red]Error:[/] Goal not found: {contribute}")
            return 1
        updated = service.find_goal(found.id)
        progress = goal_progress(updated, today)
        console.print(
            f"[green]Contributed[/] {settings.money(contribution)} to '{updated.title}': "
            f"{settings.money(updated.current_amount)} of {settings.money(updated.target_amount)} "
            f"({progress.percent:.1f}%)"
        )
        if updated.completed:
            console.print("[bold green]Goal completed![/]")
        return 0

    if remove:
        try:
            found = resolve_record(remove, service.get_goals(), "goal")
        except OptionError as e:
            console.print(f"[red]Error:[/] {e}")
            return 1
        if found is None or not service.delete_goal(found.id):
            console.print(f"[red]Error:[/] Goal not found: {remove}")
            return 1
        console.print(f"[green]Removed goal[/] {short_id(found.id)} '{found.title}'")
        return 0

    _display_goals([goal_progress(g, today) for g in service.get_goals()], settings)
    return 0


def _bar(percent) -> str:
    filled = int(percent / 100 * BAR_WIDTH)
    return "█" * filled + "░" * (BAR_WIDTH - filled)


def _display_goals(progress: list[GoalProgress], settings: Settings) -> None:
    if not progress:
        console.print("[yellow]No goals defined.[/] Use --add TITLE --target AMOUNT --deadline DATE to create one.")
        return

    table = Table(title="Financial Goals", show_lines=True)
    table.add_column("Goal", style="cyan", overflow="fold")
    table.add_column("Progress", no_wrap=True, min_width=BAR_WIDTH)
    table.add_column("Saved", style="yellow", justify="right", no_wrap=True, min_width=AMOUNT_WIDTH)
    table.add_column("Target", style="green", justify="right", no_wrap=True, min_width=AMOUNT_WIDTH)
    table.add_column("Deadline", justify="right", overflow="fold")
    table.add_column("Status", overflow="fold")

    for p in progress:
        g = p.goal
        if p.expired:
            deadline_str = f"[red]{g.deadline.isoformat()}\nexpired[/]"
        else:
            deadline_str = f"{g.deadline.isoformat()}\n{p.days_left} days left"
        status = "[green]Completed[/]" if p.completed else "[dim]In progress[/dim]"
        table.add_row(
            f"{g.title}\n[dim]{short_id(g.id)}[/dim]",
            f"[green]{_bar(p.bar_percent)}[/]\n{p.percent:.1f}%",
            settings.money(g.current_amount),
            settings.money(g.target_amount),
            deadline_str,
            status,
        )

    console.print(table)
