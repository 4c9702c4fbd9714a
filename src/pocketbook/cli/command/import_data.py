"""
Import records from a backup JSON file.
"""

from __future__ import annotations

from pathlib import Path

from pocketbook.services.backup_service import BackupError, apply_backup, load_backup
from pocketbook.storage.record_store import RecordStore
from pocketbook.workspace import Workspace

from .util import console, open_service


def run(*, input_path: Path, workspace: Workspace, write: bool = False) -> int:
    """Replace stored collections with those present in a backup file.

    Collections missing from the file are left untouched. Budget spend is
    recomputed after import so it matches the imported transactions.

    Args:
        input_path: Backup file to read
        workspace: Workspace providing the record store
        write: Persist changes (default: dry-run)

    Returns:
        Exit code (0 = success, 1 = unreadable or invalid backup)
    """
    if not input_path.exists():
        console.print(f"[red]Error:[/] Backup file not found: {input_path}")
        return 1

    try:
        document = load_backup(input_path.read_text(encoding="utf-8"))
    except BackupError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    planned = [
        (name, len(records))
        for name, records in (
            ("transactions", document.transactions),
            ("budgets", document.budgets),
            ("goals", document.goals),
        )
        if records is not None
    ]
    if not planned:
        console.print("[yellow]Backup contains no collections; nothing to import.[/]")
        return 0

    summary = ", ".join(f"{count} {name}" for name, count in planned)
    if document.export_date:
        console.print(f"[dim]Backup exported {document.export_date.isoformat()}[/dim]")

    if not write:
        console.print(f"[yellow]Dry-run:[/] would replace {summary}. Use --write to import.")
        return 0

    try:
        result = apply_backup(RecordStore(workspace.store_path), document)
        service, _ = open_service(workspace)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1
    service.refresh_budget_spend()

    written = ", ".join(f"{getattr(result, name)} {name}" for name in result.collections_written)
    console.print(f"[green]Imported[/] {written}")
    return 0
