"""
Export all records to a backup JSON file.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

from pocketbook.services.backup_service import backup_filename, build_export, dump_backup
from pocketbook.workspace import Workspace

from .util import console, open_service


def run(*, output: Optional[Path] = None, workspace: Workspace) -> int:
    """Write transactions, budgets and goals to a backup file.

    Args:
        output: Destination file (default: reports/backup-YYYY-MM-DD.json)
        workspace: Workspace providing the record store

    Returns:
        Exit code (0 = success, 1 = error)
    """
    try:
        service, _ = open_service(workspace)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    document = build_export(
        service.get_transactions(),
        service.get_budgets(),
        service.get_goals(),
        exported_at=datetime.now(),
    )
    path = output or workspace.reports_dir / backup_filename(service.today())

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dump_backup(document), encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Error:[/] Failed to write backup: {e}")
        return 1

    console.print(
        f"[green]Exported[/] {len(document.transactions)} transactions, "
        f"{len(document.budgets)} budgets, {len(document.goals)} goals to {path}"
    )
    return 0
